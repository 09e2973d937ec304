"""
Archetype Ranker for the DNA Spectrum Engine.

Sorts the six archetype scores and partitions them into a primary and a
secondary display band.
"""

from dna_spectrum_engine.core.models import ArchetypeKey, ArchetypeScores
from dna_spectrum_engine.modules.ranking.models import RankedArchetypes

PRIMARY_THRESHOLD = 3.5
SECONDARY_THRESHOLD = 3.0
BAND_SIZE = 2


def expand_animals(keys: list[ArchetypeKey]) -> list[str]:
    """Flatten archetypes into their animal names, preserving order."""
    return [animal for key in keys for animal in key.animals]


class ArchetypeRanker:
    """Partitions archetypes into primary and secondary bands.

    Ties are broken by ArchetypeKey definition order: ``sorted`` is stable
    and the input is always enumerated in that order.
    """

    def order(self, scores: ArchetypeScores) -> list[tuple[ArchetypeKey, float]]:
        """Return (archetype, score) pairs sorted by score, descending."""
        return sorted(scores.items(), key=lambda item: item[1], reverse=True)

    def rank(self, scores: ArchetypeScores) -> RankedArchetypes:
        """Select the primary and secondary bands.

        Args:
            scores: Archetype scores to rank.

        Returns:
            RankedArchetypes with animal names and the archetypes behind them.
        """
        ordered = self.order(scores)

        primary_keys = [
            key for key, value in ordered if value >= PRIMARY_THRESHOLD
        ][:BAND_SIZE]
        secondary_keys = [
            key for key, value in ordered
            if SECONDARY_THRESHOLD <= value < PRIMARY_THRESHOLD
        ][:BAND_SIZE]

        return RankedArchetypes(
            primary=expand_animals(primary_keys),
            secondary=expand_animals(secondary_keys),
            primary_keys=primary_keys,
            secondary_keys=secondary_keys,
        )
