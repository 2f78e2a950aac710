"""
Unit tests for the Strategy Selector.
"""

import pytest

from outreach_agent.agents.strategy_selector import select_strategy, tone_variant
from outreach_agent.models import Confidence, CtaLevel, StrategyKind


@pytest.mark.parametrize("confidence, kind, cta", [
    (Confidence.HIGH, StrategyKind.DIRECT_VALUE_ALIGNMENT, CtaLevel.DIRECT),
    (Confidence.MEDIUM, StrategyKind.INSIGHT_LED_OBSERVATION, CtaLevel.SOFT),
    (Confidence.LOW, StrategyKind.SOFT_CURIOSITY, CtaLevel.NONE),
])
def test_confidence_maps_to_strategy(confidence, kind, cta):
    strategy = select_strategy(confidence)
    assert strategy.kind == kind
    assert strategy.cta_level == cta
    assert strategy.variant == "standard"
    assert len(strategy.tone_rules) == 4


def test_accepts_string_levels():
    assert select_strategy("Low").kind == StrategyKind.SOFT_CURIOSITY


def test_unknown_level_raises():
    with pytest.raises(ValueError):
        select_strategy("Certain")


def test_tone_variant_extends_rules_without_mutating():
    base = select_strategy(Confidence.MEDIUM)
    variant = tone_variant(base, "analytical")
    assert variant.variant == "analytical"
    assert len(variant.tone_rules) == len(base.tone_rules) + 2
    assert variant.kind == base.kind and variant.cta_level == base.cta_level
    assert base.variant == "standard"
