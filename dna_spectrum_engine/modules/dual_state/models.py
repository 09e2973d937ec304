"""
Data contracts for the Dual-State Classifier module.
"""

from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from dna_spectrum_engine.core.models import ArchetypeScores, ProfileType


class CompositeAxes(BaseModel):
    """Dominance and adaptiveness on the 1-5 scale, unrounded.

    Attributes:
        dominance: Mean of Competitive Drivers and Disruptive Innovators.
        adaptiveness: Mean of Adaptive Movers and Relational Harmonizers.
        is_dual_state: Both axes high and within the balance gap.
    """

    model_config = ConfigDict(frozen=True)

    dominance: float
    adaptiveness: float
    is_dual_state: bool

    @property
    def gap(self) -> float:
        """Absolute distance between the two axes."""
        return abs(self.dominance - self.adaptiveness)


@dataclass(frozen=True)
class ProfileRule:
    """One entry of the profile-type decision list.

    Attributes:
        name: Identifier used in debug logging.
        profile_type: Outcome when the predicate holds.
        predicate: Test over the composite axes and raw archetype scores.
    """

    name: str
    profile_type: ProfileType
    predicate: Callable[[CompositeAxes, ArchetypeScores], bool]

    def matches(self, axes: CompositeAxes, scores: ArchetypeScores) -> bool:
        return self.predicate(axes, scores)
