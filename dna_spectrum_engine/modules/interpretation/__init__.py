"""
Interpretation module for the DNA Spectrum Engine.

Canned narrative content per profile type.
"""

from dna_spectrum_engine.modules.interpretation.logic import (
    INTERPRETATIONS_PATH,
    InterpretationSelector,
    load_interpretations,
)

__all__ = [
    "INTERPRETATIONS_PATH",
    "InterpretationSelector",
    "load_interpretations",
]
