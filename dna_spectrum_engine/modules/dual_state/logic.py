"""
Dual-State Classifier for the DNA Spectrum Engine.

Derives the dominance and adaptiveness axes from archetype scores,
rescales them for display and resolves the profile type through an
ordered, first-match-wins decision list.
"""

import logging
import math

from dna_spectrum_engine.core.models import (
    ArchetypeScores,
    DualStateProfile,
    ProfileType,
)
from dna_spectrum_engine.modules.dual_state.models import CompositeAxes, ProfileRule
from dna_spectrum_engine.modules.ranking import ArchetypeRanker

logger = logging.getLogger(__name__)

DUAL_STATE_THRESHOLD = 3.5
DUAL_STATE_MAX_GAP = 0.5
HIGH_AXIS_THRESHOLD = 4.0
HIGH_ARCHETYPE_THRESHOLD = 4.0
DISPLAY_SCALE_FACTOR = 2.5

# Order is load-bearing: categories overlap and the first match wins.
PROFILE_RULES: tuple[ProfileRule, ...] = (
    ProfileRule(
        name="dual_state",
        profile_type=ProfileType.ADAPTIVE_DRIVER,
        predicate=lambda axes, scores: axes.is_dual_state,
    ),
    ProfileRule(
        name="dominance_led",
        profile_type=ProfileType.PURE_DRIVER,
        predicate=lambda axes, scores: (
            axes.dominance >= HIGH_AXIS_THRESHOLD
            and axes.adaptiveness < DUAL_STATE_THRESHOLD
        ),
    ),
    ProfileRule(
        name="adaptiveness_led",
        profile_type=ProfileType.PURE_ADAPTER,
        predicate=lambda axes, scores: (
            axes.adaptiveness >= HIGH_AXIS_THRESHOLD
            and axes.dominance < DUAL_STATE_THRESHOLD
        ),
    ),
    ProfileRule(
        name="high_protection",
        profile_type=ProfileType.GROUNDED_PROTECTOR,
        predicate=lambda axes, scores: (
            scores.grounded_protectors >= HIGH_ARCHETYPE_THRESHOLD
        ),
    ),
    ProfileRule(
        name="innovation_and_strategy",
        profile_type=ProfileType.STRATEGIC_INNOVATOR,
        predicate=lambda axes, scores: (
            scores.disruptive_innovators >= HIGH_ARCHETYPE_THRESHOLD
            and scores.structured_strategists >= HIGH_ARCHETYPE_THRESHOLD
        ),
    ),
    ProfileRule(
        name="fallback",
        profile_type=ProfileType.BALANCED_OBSERVER,
        predicate=lambda axes, scores: True,
    ),
)


def to_display_scale(axis_value: float) -> int:
    """Map a 1-5 axis value onto the 0-10 display scale (1 -> 0, 3 -> 5, 5 -> 10).

    Halves round toward positive infinity, so -2.5 becomes -2.
    """
    return math.floor((axis_value - 1) * DISPLAY_SCALE_FACTOR + 0.5)


def composite_axes(scores: ArchetypeScores) -> CompositeAxes:
    """Compute the dominance/adaptiveness axes and the dual-state gate.

    Args:
        scores: Archetype scores on the 1-5 scale.

    Returns:
        CompositeAxes with unrounded axis values.
    """
    dominance = (scores.competitive_drivers + scores.disruptive_innovators) / 2
    adaptiveness = (scores.adaptive_movers + scores.relational_harmonizers) / 2

    is_dual_state = (
        dominance >= DUAL_STATE_THRESHOLD
        and adaptiveness >= DUAL_STATE_THRESHOLD
        and abs(dominance - adaptiveness) <= DUAL_STATE_MAX_GAP
    )

    return CompositeAxes(
        dominance=dominance,
        adaptiveness=adaptiveness,
        is_dual_state=is_dual_state,
    )


def dominance_band(dominance_score: int) -> str:
    """Caption for a 0-10 dominance score."""
    if dominance_score >= 7:
        return "Active Dominance"
    if dominance_score >= 4:
        return "Moderate Dominance"
    return "Lower Dominance"


def adaptiveness_band(adaptiveness_score: int) -> str:
    """Caption for a 0-10 adaptiveness score."""
    if adaptiveness_score >= 7:
        return "Responsive Sensitivity"
    if adaptiveness_score >= 4:
        return "Moderate Adaptiveness"
    return "Lower Adaptiveness"


class DualStateClassifier:
    """Classifies archetype scores into a Dual State profile.

    The classifier is stateless; one instance can serve any number of
    concurrent callers.

    Attributes:
        rules: The ordered decision list. Its last rule must always match.
        ranker: Supplies the primary and secondary archetype bands.
    """

    def __init__(
        self,
        rules: tuple[ProfileRule, ...] = PROFILE_RULES,
        ranker: ArchetypeRanker | None = None,
    ) -> None:
        self.rules = rules
        self.ranker = ranker or ArchetypeRanker()

    def select_profile_type(
        self,
        axes: CompositeAxes,
        scores: ArchetypeScores,
    ) -> ProfileType:
        """Return the outcome of the first matching rule.

        Falls back to Balanced Observer if a custom rule list has no
        catch-all.
        """
        for rule in self.rules:
            if rule.matches(axes, scores):
                logger.debug("Profile rule matched: %s -> %s", rule.name, rule.profile_type.value)
                return rule.profile_type
        return ProfileType.BALANCED_OBSERVER

    def classify(self, scores: ArchetypeScores) -> DualStateProfile:
        """Build the Dual State profile.

        Total over any ArchetypeScores; never raises.

        Args:
            scores: Archetype scores on the 1-5 scale.

        Returns:
            DualStateProfile with display scores, profile type and bands.
        """
        axes = composite_axes(scores)
        profile_type = self.select_profile_type(axes, scores)
        ranked = self.ranker.rank(scores)

        return DualStateProfile(
            profile_name=profile_type.display_name,
            profile_type=profile_type,
            dominance_score=to_display_scale(axes.dominance),
            adaptiveness_score=to_display_scale(axes.adaptiveness),
            primary_archetypes=ranked.primary,
            secondary_archetypes=ranked.secondary,
            is_dual_state=axes.is_dual_state,
        )
