"""Shared fixtures for the DNA Spectrum Engine tests."""

import uuid
from datetime import datetime, timezone

import pytest

from dna_spectrum_engine.app import create_app
from dna_spectrum_engine.core.config_loader import (
    ReportConfig,
    Settings,
    StorageConfig,
)
from dna_spectrum_engine.core.models import (
    ArchetypeKey,
    ArchetypeScores,
    AssessmentResponse,
    AssessmentResult,
)
from dna_spectrum_engine.core.orchestrator import Orchestrator, compute_assessment
from dna_spectrum_engine.modules.catalog import questions_for

# Per-archetype answers, in catalog id order.
REFERENCE_ANSWERS = {
    ArchetypeKey.COMPETITIVE_DRIVERS: [5, 5, 4, 4, 4],
    ArchetypeKey.ADAPTIVE_MOVERS: [4, 5, 4, 4, 4],
    ArchetypeKey.DISRUPTIVE_INNOVATORS: [4, 4, 4, 4, 4],
    ArchetypeKey.RELATIONAL_HARMONIZERS: [4, 4, 4, 4, 4],
    ArchetypeKey.GROUNDED_PROTECTORS: [3, 4, 4, 4, 4],
    ArchetypeKey.STRUCTURED_STRATEGISTS: [3, 3, 3, 3, 4],
}


def build_responses(answers: dict[ArchetypeKey, list[int]]) -> list[AssessmentResponse]:
    responses = []
    for key, scores in answers.items():
        for question, score in zip(questions_for(key), scores):
            responses.append(AssessmentResponse(question_id=question.id, score=score))
    return sorted(responses, key=lambda r: r.question_id)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment variables out of configuration tests."""
    for var in ("DNA_SPECTRUM_CONFIG", "DNA_SPECTRUM_STORAGE_DIR", "DNA_SPECTRUM_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def reference_responses() -> list[AssessmentResponse]:
    return build_responses(REFERENCE_ANSWERS)


@pytest.fixture
def uniform_responses():
    """Factory: 30 responses all carrying the same score."""
    def _make(score: int = 3) -> list[AssessmentResponse]:
        return [AssessmentResponse(question_id=qid, score=score) for qid in range(1, 31)]
    return _make


@pytest.fixture
def make_scores():
    """Factory: ArchetypeScores defaulting every archetype to 3.0."""
    def _make(**overrides: float) -> ArchetypeScores:
        values = {key.field_name: 3.0 for key in ArchetypeKey}
        values.update(overrides)
        return ArchetypeScores(**values)
    return _make


@pytest.fixture
def make_result(reference_responses):
    """Factory: a completed AssessmentResult without touching any store."""
    def _make(
        client_name: str | None = "Jane Doe",
        completed_at: datetime | None = None,
        responses: list[AssessmentResponse] | None = None,
    ) -> AssessmentResult:
        responses = responses or reference_responses
        outcome = compute_assessment(responses)
        return AssessmentResult(
            id=str(uuid.uuid4()),
            client_name=client_name,
            client_email="jane@example.com" if client_name else None,
            responses=responses,
            scores=outcome.scores,
            profile=outcome.profile,
            interpretation=outcome.interpretation,
            completed_at=completed_at or datetime.now(timezone.utc),
        )
    return _make


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        storage=StorageConfig(directory=tmp_path / "assessments"),
        report=ReportConfig(directory=tmp_path / "reports", plotly_js="cdn"),
    )


@pytest.fixture
def orchestrator(settings) -> Orchestrator:
    return Orchestrator(settings)


@pytest.fixture
def app(orchestrator):
    flask_app = create_app(orchestrator=orchestrator)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def wire_responses(reference_responses) -> list[dict]:
    return [r.to_wire() for r in reference_responses]


@pytest.fixture
def answers_to_responses():
    """Factory: responses from per-archetype answer lists."""
    return build_responses
