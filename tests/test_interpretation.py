"""Tests for the interpretation selector."""

import pytest
import yaml

from dna_spectrum_engine.core.exceptions import ConfigurationError
from dna_spectrum_engine.core.models import ProfileType
from dna_spectrum_engine.modules.interpretation import (
    INTERPRETATIONS_PATH,
    InterpretationSelector,
    load_interpretations,
)


@pytest.fixture
def selector():
    return InterpretationSelector()


@pytest.mark.parametrize("profile_type", list(ProfileType))
def test_every_profile_type_has_content(selector, profile_type):
    interpretation = selector.interpret(profile_type)

    assert interpretation.core_instinct
    assert len(interpretation.behavioral_signature) == 4
    assert len(interpretation.strengths) == 4
    assert len(interpretation.watch_outs) == 4
    assert len(interpretation.to_lead_yourself) == 3
    assert len(interpretation.to_partner_with_others) == 3


@pytest.mark.parametrize("profile_type", list(ProfileType))
def test_only_adaptive_driver_has_dual_state_cue(selector, profile_type):
    cue = selector.interpret(profile_type).dual_state_cue
    if profile_type is ProfileType.ADAPTIVE_DRIVER:
        assert cue.startswith("Slow your breath before you speed your plan.")
    else:
        assert cue is None


def test_content_is_verbatim(selector):
    driver = selector.interpret(ProfileType.ADAPTIVE_DRIVER)
    assert driver.core_instinct == (
        "Moves first, but not blindly. Reads people and environments in real time, "
        "then channels courage and empathy into decisive movement. Thrives in change, "
        "tension, and growth cycles."
    )
    assert driver.to_lead_yourself[0] == (
        "Choose rhythm over reaction — your nervous system prefers cadence"
    )

    adapter = selector.interpret(ProfileType.PURE_ADAPTER)
    assert adapter.to_lead_yourself[1] == 'Practice saying "no" without guilt'
    assert adapter.watch_outs[1] == "Can absorb others' emotions and become overwhelmed"


def test_accepts_profile_type_values(selector):
    assert selector.interpret("grounded-protector") == selector.interpret(
        ProfileType.GROUNDED_PROTECTOR
    )


def test_scores_do_not_affect_selection(selector, make_scores):
    low = selector.interpret(ProfileType.PURE_DRIVER, make_scores(competitive_drivers=1.0))
    high = selector.interpret(ProfileType.PURE_DRIVER, make_scores(competitive_drivers=5.0))
    assert low == high


def test_returns_independent_copies(selector):
    first = selector.interpret(ProfileType.BALANCED_OBSERVER)
    first.strengths.append("Mutated by caller")

    second = selector.interpret(ProfileType.BALANCED_OBSERVER)
    assert "Mutated by caller" not in second.strengths


def test_interpretation_is_frozen(selector):
    interpretation = selector.interpret(ProfileType.PURE_DRIVER)
    with pytest.raises(Exception):
        interpretation.core_instinct = "changed"


def test_missing_profile_type_is_configuration_error(tmp_path):
    with INTERPRETATIONS_PATH.open(encoding="utf-8") as f:
        content = yaml.safe_load(f)
    del content["balanced-observer"]

    path = tmp_path / "interpretations.yaml"
    path.write_text(yaml.safe_dump(content), encoding="utf-8")

    with pytest.raises(ConfigurationError) as exc_info:
        load_interpretations(path)
    assert exc_info.value.details["missing"] == ["balanced-observer"]


def test_invalid_entry_is_configuration_error(tmp_path):
    with INTERPRETATIONS_PATH.open(encoding="utf-8") as f:
        content = yaml.safe_load(f)
    content["pure-driver"] = {"core_instinct": "Only this"}

    path = tmp_path / "interpretations.yaml"
    path.write_text(yaml.safe_dump(content), encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_interpretations(path)


def test_unreadable_file_is_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError):
        load_interpretations(tmp_path / "missing.yaml")


def test_custom_table(selector):
    table = {t: selector.interpret(ProfileType.PURE_DRIVER) for t in ProfileType}
    custom = InterpretationSelector(table=table)
    assert custom.interpret(ProfileType.PURE_ADAPTER).core_instinct.startswith("Takes charge")
