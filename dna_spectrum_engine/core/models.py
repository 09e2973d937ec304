"""
Shared data contracts for the DNA Spectrum Engine.

These Pydantic models and enumerations are passed between the catalog,
the scoring modules, the Orchestrator and the HTTP/report collaborators.
Python attributes are snake_case; the wire format (``to_wire``) is
camelCase, matching the JSON the web client sends and receives.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ArchetypeKey(str, Enum):
    """The six behavioral archetypes.

    Definition order is the documented tie-break order used by the
    archetype ranker, and the column order of every report.
    """

    COMPETITIVE_DRIVERS = "competitive-drivers"
    ADAPTIVE_MOVERS = "adaptive-movers"
    DISRUPTIVE_INNOVATORS = "disruptive-innovators"
    RELATIONAL_HARMONIZERS = "relational-harmonizers"
    GROUNDED_PROTECTORS = "grounded-protectors"
    STRUCTURED_STRATEGISTS = "structured-strategists"

    @property
    def field_name(self) -> str:
        """Attribute name of this archetype on ArchetypeScores."""
        return self.value.replace("-", "_")

    @property
    def label(self) -> str:
        return ARCHETYPE_LABELS[self]

    @property
    def animals(self) -> tuple[str, ...]:
        return ARCHETYPE_ANIMALS[self]

    @property
    def animal_label(self) -> str:
        """Animals joined for display, e.g. "Ram / Eagle"."""
        return " / ".join(ARCHETYPE_ANIMALS[self])


ARCHETYPE_LABELS: dict[ArchetypeKey, str] = {
    ArchetypeKey.COMPETITIVE_DRIVERS: "Competitive Drivers",
    ArchetypeKey.ADAPTIVE_MOVERS: "Adaptive Movers",
    ArchetypeKey.DISRUPTIVE_INNOVATORS: "Disruptive Innovators",
    ArchetypeKey.RELATIONAL_HARMONIZERS: "Relational Harmonizers",
    ArchetypeKey.GROUNDED_PROTECTORS: "Grounded Protectors",
    ArchetypeKey.STRUCTURED_STRATEGISTS: "Structured Strategists",
}

ARCHETYPE_ANIMALS: dict[ArchetypeKey, tuple[str, ...]] = {
    ArchetypeKey.COMPETITIVE_DRIVERS: ("Ram", "Eagle"),
    ArchetypeKey.ADAPTIVE_MOVERS: ("Antelope",),
    ArchetypeKey.DISRUPTIVE_INNOVATORS: ("Coyote",),
    ArchetypeKey.RELATIONAL_HARMONIZERS: ("Deer",),
    ArchetypeKey.GROUNDED_PROTECTORS: ("Buffalo", "Bear"),
    ArchetypeKey.STRUCTURED_STRATEGISTS: ("Owl", "Fox"),
}


class QuestionCategory(str, Enum):
    """Display grouping of the questions."""

    INSTINCT = "instinct"
    PRESSURE = "pressure"
    CONNECTION = "connection"
    FOCUS = "focus"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS: dict[QuestionCategory, str] = {
    QuestionCategory.INSTINCT: "Instinct & Regulation",
    QuestionCategory.PRESSURE: "Pressure & Control",
    QuestionCategory.CONNECTION: "Connection & Safety",
    QuestionCategory.FOCUS: "Focus & Adaptation",
}


class ProfileType(str, Enum):
    """Closed set of classification outcomes."""

    ADAPTIVE_DRIVER = "adaptive-driver"
    PURE_DRIVER = "pure-driver"
    PURE_ADAPTER = "pure-adapter"
    GROUNDED_PROTECTOR = "grounded-protector"
    STRATEGIC_INNOVATOR = "strategic-innovator"
    BALANCED_OBSERVER = "balanced-observer"

    @property
    def display_name(self) -> str:
        return PROFILE_NAMES[self]


PROFILE_NAMES: dict[ProfileType, str] = {
    ProfileType.ADAPTIVE_DRIVER: "Adaptive Driver",
    ProfileType.PURE_DRIVER: "Competitive Driver",
    ProfileType.PURE_ADAPTER: "Adaptive Harmonizer",
    ProfileType.GROUNDED_PROTECTOR: "Grounded Protector",
    ProfileType.STRATEGIC_INNOVATOR: "Strategic Innovator",
    ProfileType.BALANCED_OBSERVER: "Balanced Observer",
}


class WireModel(BaseModel):
    """Base model serializing to camelCase and accepting either casing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """Return the JSON-compatible camelCase representation."""
        return self.model_dump(mode="json", by_alias=True)


class Question(WireModel):
    """A single catalog question.

    Attributes:
        id: Question number, 1..30.
        text: Statement shown to the respondent.
        category: Display grouping.
        archetype: The archetype this question scores.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    category: QuestionCategory
    archetype: ArchetypeKey


class AssessmentResponse(WireModel):
    """One answer as supplied by the caller.

    Values are not range-checked here; the boundary validates before
    anything reaches the scoring core.
    """

    question_id: int
    score: int


class ArchetypeScores(WireModel):
    """Mean response score per archetype, rounded to 2 decimals."""

    competitive_drivers: float
    adaptive_movers: float
    disruptive_innovators: float
    relational_harmonizers: float
    grounded_protectors: float
    structured_strategists: float

    @classmethod
    def from_mapping(cls, values: dict[ArchetypeKey, float]) -> "ArchetypeScores":
        """Build scores from an archetype-keyed mapping.

        Raises:
            KeyError: If any archetype is missing.
        """
        return cls(**{key.field_name: float(values[key]) for key in ArchetypeKey})

    def get(self, key: ArchetypeKey) -> float:
        """Return the score of a single archetype."""
        return getattr(self, key.field_name)

    def items(self) -> list[tuple[ArchetypeKey, float]]:
        """Return (archetype, score) pairs in ArchetypeKey order."""
        return [(key, self.get(key)) for key in ArchetypeKey]


class DualStateProfile(WireModel):
    """Two-axis profile derived entirely from ArchetypeScores.

    Attributes:
        profile_name: Display name of the profile type.
        profile_type: The resolved classification outcome.
        dominance_score: Dominance on the 0..10 display scale.
        adaptiveness_score: Adaptiveness on the 0..10 display scale.
        primary_archetypes: Animal names of the primary band.
        secondary_archetypes: Animal names of the secondary band.
        is_dual_state: Both axes high and within the balance gap.
    """

    profile_name: str
    profile_type: ProfileType
    dominance_score: int
    adaptiveness_score: int
    primary_archetypes: list[str] = Field(default_factory=list)
    secondary_archetypes: list[str] = Field(default_factory=list)
    is_dual_state: bool


class Interpretation(WireModel):
    """Canned narrative attached to a profile type."""

    model_config = ConfigDict(frozen=True)

    core_instinct: str
    behavioral_signature: list[str]
    strengths: list[str]
    watch_outs: list[str]
    dual_state_cue: str | None = None
    to_lead_yourself: list[str]
    to_partner_with_others: list[str]


class AssessmentOutcome(WireModel):
    """The triple produced by the scoring pipeline."""

    scores: ArchetypeScores
    profile: DualStateProfile
    interpretation: Interpretation


class AssessmentResult(WireModel):
    """A completed assessment as stored and served by the collaborators.

    Attributes:
        id: UUID4 string.
        client_name: Optional respondent name.
        client_email: Optional respondent email.
        responses: Responses exactly as submitted.
        scores: Archetype scores.
        profile: Dual State profile.
        interpretation: Selected interpretation.
        completed_at: UTC completion timestamp.
    """

    id: str
    client_name: str | None = None
    client_email: str | None = None
    responses: list[AssessmentResponse]
    scores: ArchetypeScores
    profile: DualStateProfile
    interpretation: Interpretation
    completed_at: datetime


class AssessmentStats(WireModel):
    """Counts of completed assessments."""

    total: int = 0
    this_week: int = 0
    this_month: int = 0
