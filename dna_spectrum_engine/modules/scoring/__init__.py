"""
Scoring module for the DNA Spectrum Engine.

Turns raw responses into per-archetype mean scores.
"""

from dna_spectrum_engine.modules.scoring.logic import (
    ArchetypeScorer,
    round_half_away_from_zero,
)

__all__ = ["ArchetypeScorer", "round_half_away_from_zero"]
