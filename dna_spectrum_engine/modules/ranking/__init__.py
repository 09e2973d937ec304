"""
Archetype Ranker module for the DNA Spectrum Engine.

Maps the strongest archetypes to their display animal names.
"""

from dna_spectrum_engine.modules.ranking.logic import (
    BAND_SIZE,
    PRIMARY_THRESHOLD,
    SECONDARY_THRESHOLD,
    ArchetypeRanker,
    expand_animals,
)
from dna_spectrum_engine.modules.ranking.models import RankedArchetypes

__all__ = [
    "BAND_SIZE",
    "PRIMARY_THRESHOLD",
    "SECONDARY_THRESHOLD",
    "ArchetypeRanker",
    "RankedArchetypes",
    "expand_animals",
]
