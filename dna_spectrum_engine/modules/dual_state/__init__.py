"""
Dual-State Classifier module for the DNA Spectrum Engine.

Positions a respondent on the dominance and adaptiveness axes and
resolves one of six profile types.
"""

from dna_spectrum_engine.modules.dual_state.logic import (
    PROFILE_RULES,
    DualStateClassifier,
    adaptiveness_band,
    composite_axes,
    dominance_band,
    to_display_scale,
)
from dna_spectrum_engine.modules.dual_state.models import CompositeAxes, ProfileRule

__all__ = [
    "PROFILE_RULES",
    "CompositeAxes",
    "DualStateClassifier",
    "ProfileRule",
    "adaptiveness_band",
    "composite_axes",
    "dominance_band",
    "to_display_scale",
]
