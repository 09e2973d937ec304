"""
Orchestrator for the DNA Spectrum Engine.

The Orchestrator is the service layer around the scoring pipeline:
1. Validates submitted responses at the boundary
2. Runs the pure pipeline (scorer -> classifier -> interpretation)
3. Stamps an id and completion time on the outcome
4. Caches the result and persists it, degrading gracefully on storage failure
"""

import logging
import uuid
from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from dna_spectrum_engine.core.config_loader import Settings
from dna_spectrum_engine.core.data_manager import DataManager
from dna_spectrum_engine.core.exceptions import (
    AssessmentNotFoundError,
    AssessmentValidationError,
    InvalidQuestionSetError,
    InvalidResponseCountError,
    InvalidScoreRangeError,
    PersistenceError,
)
from dna_spectrum_engine.core.interfaces import ResultStoreInterface
from dna_spectrum_engine.core.models import (
    AssessmentOutcome,
    AssessmentResponse,
    AssessmentResult,
    AssessmentStats,
)
from dna_spectrum_engine.core.result_cache import ResultCache
from dna_spectrum_engine.modules.catalog import MAX_SCORE, MIN_SCORE, question_ids
from dna_spectrum_engine.modules.dual_state import DualStateClassifier
from dna_spectrum_engine.modules.interpretation import InterpretationSelector
from dna_spectrum_engine.modules.scoring import ArchetypeScorer

logger = logging.getLogger(__name__)

RESPONSE_COUNT = 30

# Stateless pipeline stages, shared by every caller.
_scorer = ArchetypeScorer()
_classifier = DualStateClassifier()


def parse_responses(payload: Any) -> list[AssessmentResponse]:
    """Coerce raw JSON into responses.

    Accepts a list of ``{"questionId": .., "score": ..}`` objects or a
    ``{question_id: score}`` mapping.

    Raises:
        AssessmentValidationError: If the payload has neither shape.
    """
    if isinstance(payload, Mapping):
        payload = [
            {"question_id": question_id, "score": score}
            for question_id, score in payload.items()
        ]

    if not isinstance(payload, list):
        raise AssessmentValidationError(
            f"Invalid responses. Expected {RESPONSE_COUNT} answers.",
            details={"type": type(payload).__name__},
        )

    try:
        return [AssessmentResponse.model_validate(item) for item in payload]
    except ValidationError as e:
        raise AssessmentValidationError(
            "Invalid responses. Each answer needs an integer questionId and score.",
            details={"error": str(e)},
        ) from e


def validate_responses(responses: Sequence[AssessmentResponse]) -> None:
    """Reject input the scoring core must never see.

    Checks run in order: count, score range, question coverage.

    Raises:
        InvalidResponseCountError: Not exactly 30 responses.
        InvalidScoreRangeError: Any score outside 1..5.
        InvalidQuestionSetError: Ids do not cover the catalog exactly once.
    """
    if len(responses) != RESPONSE_COUNT:
        raise InvalidResponseCountError(expected=RESPONSE_COUNT, received=len(responses))

    out_of_range = [
        r.question_id for r in responses
        if not MIN_SCORE <= r.score <= MAX_SCORE
    ]
    if out_of_range:
        raise InvalidScoreRangeError(out_of_range, MIN_SCORE, MAX_SCORE)

    counts = Counter(r.question_id for r in responses)
    expected = set(question_ids())
    missing = sorted(expected - counts.keys())
    duplicates = sorted(qid for qid, n in counts.items() if n > 1)
    unknown = sorted(counts.keys() - expected)
    if missing or duplicates or unknown:
        raise InvalidQuestionSetError(missing, duplicates, unknown)


def compute_assessment(responses: Sequence[AssessmentResponse]) -> AssessmentOutcome:
    """Run the scoring pipeline.

    Pure and deterministic: identical input yields identical output. The
    caller is responsible for validation.

    Args:
        responses: Validated assessment responses.

    Returns:
        AssessmentOutcome with scores, profile and interpretation.
    """
    scores = _scorer.score(responses)
    profile = _classifier.classify(scores)
    interpretation = InterpretationSelector().interpret(profile.profile_type, scores)
    return AssessmentOutcome(scores=scores, profile=profile, interpretation=interpretation)


@dataclass
class Submission:
    """Outcome of a submission.

    Attributes:
        result: The completed assessment.
        persisted: False if the store was disabled or failed.
    """

    result: AssessmentResult
    persisted: bool


class Orchestrator:
    """Service layer for assessments.

    Storage failures on submit are logged and reported through
    ``Submission.persisted``; the computed result always reaches the
    caller.

    Attributes:
        settings: The application settings.
        store: Durable result store, or None when storage is disabled.
        cache: In-memory fallback store.
    """

    def __init__(
        self,
        settings: Settings,
        store: ResultStoreInterface | None = None,
        cache: ResultCache | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            settings: The application settings.
            store: Optional custom store. Defaults to a DataManager when
                storage is enabled.
            cache: Optional custom cache. Defaults to a ResultCache sized
                by ``cache.max_entries``.
        """
        self.settings = settings
        self.store = store if store is not None else self._default_store(settings)
        self.cache = cache if cache is not None else ResultCache(settings.cache.max_entries)

    @staticmethod
    def _default_store(settings: Settings) -> ResultStoreInterface | None:
        if not settings.storage.enabled:
            logger.info("Result storage disabled; using in-memory cache only")
            return None
        try:
            return DataManager(settings)
        except PersistenceError as e:
            logger.error("Result storage unavailable, continuing without it: %s", e)
            return None

    @property
    def _primary(self) -> ResultStoreInterface:
        return self.store if self.store is not None else self.cache

    def compute(self, responses: Sequence[AssessmentResponse]) -> AssessmentOutcome:
        """Run the pipeline without validation or side effects."""
        return compute_assessment(responses)

    def submit(
        self,
        responses: Sequence[AssessmentResponse],
        client_name: str | None = None,
        client_email: str | None = None,
    ) -> Submission:
        """Validate, compute, cache and persist an assessment.

        Args:
            responses: Responses as submitted.
            client_name: Optional respondent name.
            client_email: Optional respondent email.

        Returns:
            Submission with the result and whether it was persisted.

        Raises:
            AssessmentValidationError: If the responses are rejected.
        """
        try:
            validate_responses(responses)
        except AssessmentValidationError as e:
            logger.warning("Rejected submission: %s", e)
            raise

        outcome = compute_assessment(responses)
        result = AssessmentResult(
            id=str(uuid.uuid4()),
            client_name=client_name or None,
            client_email=client_email or None,
            responses=list(responses),
            scores=outcome.scores,
            profile=outcome.profile,
            interpretation=outcome.interpretation,
            completed_at=datetime.now(timezone.utc),
        )
        logger.info(
            "Assessment %s completed: %s (dominance=%d, adaptiveness=%d)",
            result.id,
            result.profile.profile_name,
            result.profile.dominance_score,
            result.profile.adaptiveness_score,
        )

        self.cache.save_result(result)

        persisted = False
        if self.store is not None:
            try:
                self.store.save_result(result)
                persisted = True
            except PersistenceError as e:
                logger.error("Failed to persist assessment %s: %s", result.id, e)

        return Submission(result=result, persisted=persisted)

    def retrieve(self, assessment_id: str) -> AssessmentResult:
        """Return a stored result verbatim; never recomputes.

        The store is consulted first, then the in-memory cache.

        Raises:
            AssessmentNotFoundError: If neither holds the id.
            PersistenceError: If the stored record is unreadable and the
                cache has no copy.
        """
        store_error: PersistenceError | None = None
        if self.store is not None:
            try:
                result = self.store.get_result(assessment_id)
                if result is not None:
                    return result
            except PersistenceError as e:
                logger.error("Failed to read assessment %s: %s", assessment_id, e)
                store_error = e

        cached = self.cache.get_result(assessment_id)
        if cached is not None:
            logger.debug("Serving assessment %s from cache", assessment_id)
            return cached

        if store_error is not None:
            raise store_error
        raise AssessmentNotFoundError(assessment_id)

    def list_results(self, limit: int = 50, offset: int = 0) -> list[AssessmentResult]:
        """List results newest first from the durable store (or the cache)."""
        return self._primary.list_results(limit=limit, offset=offset)

    def delete(self, assessment_id: str) -> bool:
        """Delete a result from the store and the cache.

        Returns:
            True if any copy was removed.
        """
        removed = self.cache.delete_result(assessment_id)
        if self.store is not None:
            removed = self.store.delete_result(assessment_id) or removed
        if removed:
            logger.info("Deleted assessment %s", assessment_id)
        return removed

    def stats(self) -> AssessmentStats:
        """Counts of completed assessments."""
        return self._primary.get_stats()
