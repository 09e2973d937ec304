"""
Question Catalog module for the DNA Spectrum Engine.

Fixed 30-question table binding each question to one archetype and one
display category.
"""

from dna_spectrum_engine.modules.catalog.logic import (
    MAX_SCORE,
    MIN_SCORE,
    all_questions,
    archetype_of,
    by_category,
    get_question,
    question_ids,
    questions_for,
)

__all__ = [
    "MAX_SCORE",
    "MIN_SCORE",
    "all_questions",
    "archetype_of",
    "by_category",
    "get_question",
    "question_ids",
    "questions_for",
]
