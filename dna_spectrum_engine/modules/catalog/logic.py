"""
Question Catalog lookups.

Read-only views over the static question table. Lookup maps are built
once at import time and never mutated.
"""

from types import MappingProxyType

from dna_spectrum_engine.core.models import ArchetypeKey, Question, QuestionCategory
from dna_spectrum_engine.modules.catalog.questions import QUESTIONS

MIN_SCORE = 1
MAX_SCORE = 5

_BY_ID = MappingProxyType({question.id: question for question in QUESTIONS})
_ARCHETYPE_BY_ID = MappingProxyType(
    {question.id: question.archetype for question in QUESTIONS}
)


def all_questions() -> tuple[Question, ...]:
    """Return every question in id order."""
    return QUESTIONS


def question_ids() -> frozenset[int]:
    """Return the set of valid question ids."""
    return frozenset(_BY_ID)


def get_question(question_id: int) -> Question | None:
    """Return a question by id, or None if the id is not in the catalog."""
    return _BY_ID.get(question_id)


def archetype_of(question_id: int) -> ArchetypeKey | None:
    """Resolve the archetype a question scores.

    Args:
        question_id: Catalog question id.

    Returns:
        The bound archetype, or None for ids outside the catalog.
    """
    return _ARCHETYPE_BY_ID.get(question_id)


def by_category(category: QuestionCategory | str) -> list[Question]:
    """Return the questions of one display category in id order.

    Raises:
        ValueError: If ``category`` is not a known category value.
    """
    category = QuestionCategory(category)
    return [question for question in QUESTIONS if question.category == category]


def questions_for(archetype: ArchetypeKey | str) -> list[Question]:
    """Return the questions scoring one archetype in id order.

    Raises:
        ValueError: If ``archetype`` is not a known archetype value.
    """
    archetype = ArchetypeKey(archetype)
    return [question for question in QUESTIONS if question.archetype == archetype]
