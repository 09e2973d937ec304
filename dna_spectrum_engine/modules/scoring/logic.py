"""
Archetype Scorer for the DNA Spectrum Engine.

Groups responses by archetype through the question catalog and averages
each group on the 1-5 Likert scale.
"""

import logging
import math
from collections.abc import Callable, Iterable

import numpy as np

from dna_spectrum_engine.core.models import (
    ArchetypeKey,
    ArchetypeScores,
    AssessmentResponse,
)
from dna_spectrum_engine.modules.catalog import archetype_of

logger = logging.getLogger(__name__)

SCORE_DECIMALS = 2


def round_half_away_from_zero(value: float, decimals: int = 0) -> float:
    """Round to ``decimals`` places with ties going away from zero.

    Python's built-in ``round`` uses banker's rounding; scores must
    round 7.5 to 8 and 2.125 to 2.13.

    Args:
        value: Number to round.
        decimals: Decimal places to keep.

    Returns:
        The rounded value as a float.
    """
    factor = 10 ** decimals
    rounded = math.floor(abs(value) * factor + 0.5)
    return math.copysign(rounded, value) / factor


class ArchetypeScorer:
    """Computes per-archetype mean scores.

    Responses whose question id is unknown to the catalog are ignored, and
    an archetype without responses scores 0. Neither case is an error:
    response count and range are validated before scoring.
    """

    def __init__(
        self,
        resolver: Callable[[int], ArchetypeKey | None] = archetype_of,
    ) -> None:
        """Initialize the scorer.

        Args:
            resolver: Maps a question id to its archetype. Defaults to the
                static catalog.
        """
        self._resolve = resolver

    def score(self, responses: Iterable[AssessmentResponse]) -> ArchetypeScores:
        """Average the responses of each archetype.

        Args:
            responses: Assessment responses, one per question.

        Returns:
            ArchetypeScores with each mean rounded to 2 decimals.
        """
        buckets: dict[ArchetypeKey, list[int]] = {key: [] for key in ArchetypeKey}

        for response in responses:
            archetype = self._resolve(response.question_id)
            if archetype is None:
                logger.debug("Ignoring response to unknown question %s", response.question_id)
                continue
            buckets[archetype].append(response.score)

        means = {
            key: round_half_away_from_zero(
                float(np.mean(values)) if values else 0.0,
                SCORE_DECIMALS,
            )
            for key, values in buckets.items()
        }
        return ArchetypeScores.from_mapping(means)
