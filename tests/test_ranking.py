"""Tests for the archetype ranker."""

import pytest

from dna_spectrum_engine.core.models import ArchetypeKey
from dna_spectrum_engine.modules.ranking import ArchetypeRanker, expand_animals


@pytest.fixture
def ranker():
    return ArchetypeRanker()


def test_reference_scores(ranker, make_scores):
    scores = make_scores(
        competitive_drivers=4.25,
        adaptive_movers=4.2,
        disruptive_innovators=4.0,
        relational_harmonizers=4.0,
        grounded_protectors=3.8,
        structured_strategists=3.25,
    )
    ranked = ranker.rank(scores)

    assert ranked.primary == ["Ram", "Eagle", "Antelope"]
    assert ranked.secondary == ["Owl", "Fox"]
    assert ranked.primary_keys == [
        ArchetypeKey.COMPETITIVE_DRIVERS,
        ArchetypeKey.ADAPTIVE_MOVERS,
    ]
    assert ranked.secondary_keys == [ArchetypeKey.STRUCTURED_STRATEGISTS]


def test_band_thresholds_are_inclusive_at_lower_bound(ranker, make_scores):
    scores = make_scores(
        competitive_drivers=3.5,
        adaptive_movers=3.49,
        disruptive_innovators=3.0,
        relational_harmonizers=2.99,
        grounded_protectors=1.0,
        structured_strategists=1.0,
    )
    ranked = ranker.rank(scores)

    assert ranked.primary_keys == [ArchetypeKey.COMPETITIVE_DRIVERS]
    assert ranked.secondary_keys == [
        ArchetypeKey.ADAPTIVE_MOVERS,
        ArchetypeKey.DISRUPTIVE_INNOVATORS,
    ]


def test_only_top_two_per_band(ranker, make_scores):
    scores = make_scores(
        competitive_drivers=5.0,
        adaptive_movers=4.8,
        disruptive_innovators=4.6,
        relational_harmonizers=3.4,
        grounded_protectors=3.3,
        structured_strategists=3.2,
    )
    ranked = ranker.rank(scores)

    assert ranked.primary == ["Ram", "Eagle", "Antelope"]
    # Coyote is above the secondary band, so it is dropped rather than demoted.
    assert ranked.secondary == ["Deer", "Buffalo", "Bear"]


def test_ties_follow_archetype_definition_order(ranker, make_scores):
    ranked = ranker.rank(make_scores())

    assert ranked.primary == []
    assert ranked.secondary_keys == [
        ArchetypeKey.COMPETITIVE_DRIVERS,
        ArchetypeKey.ADAPTIVE_MOVERS,
    ]
    assert ranked.secondary == ["Ram", "Eagle", "Antelope"]


def test_tie_break_regardless_of_position(ranker, make_scores):
    scores = make_scores(grounded_protectors=4.0, structured_strategists=4.0, adaptive_movers=4.0)
    ranked = ranker.rank(scores)
    assert ranked.primary_keys == [
        ArchetypeKey.ADAPTIVE_MOVERS,
        ArchetypeKey.GROUNDED_PROTECTORS,
    ]


def test_low_scores_produce_empty_bands(ranker, make_scores):
    scores = make_scores(**{key.field_name: 2.0 for key in ArchetypeKey})
    ranked = ranker.rank(scores)
    assert ranked.primary == []
    assert ranked.secondary == []


def test_bands_are_disjoint(ranker, make_scores):
    scores = make_scores(competitive_drivers=3.6, adaptive_movers=3.4)
    ranked = ranker.rank(scores)
    assert not set(ranked.primary_keys) & set(ranked.secondary_keys)


def test_order_is_descending(ranker, make_scores):
    ordered = ranker.order(make_scores(structured_strategists=4.5, adaptive_movers=1.0))
    values = [value for _, value in ordered]
    assert values == sorted(values, reverse=True)
    assert ordered[0][0] is ArchetypeKey.STRUCTURED_STRATEGISTS


def test_expand_animals():
    assert expand_animals([ArchetypeKey.GROUNDED_PROTECTORS, ArchetypeKey.DISRUPTIVE_INNOVATORS]) == [
        "Buffalo",
        "Bear",
        "Coyote",
    ]
