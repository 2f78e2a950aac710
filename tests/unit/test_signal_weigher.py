"""
Unit tests for the Signal Weigher - freshness decay, penalties, and weight bounds.
"""

from datetime import timedelta

import pytest

from outreach_agent.agents.signal_weigher import (
    compute_freshness, conservative_penalty, normalize_relevance, weigh_signal, weigh_signals,
)
from outreach_agent.models import RawSignal, SignalKind


class TestFreshness:

    @pytest.mark.parametrize("days, expected", [
        (0, 1.0), (15, 0.65), (30, 0.3), (60, 0.2), (90, 0.1), (200, 0.1),
    ])
    def test_decay_curve(self, now, days, expected):
        assert compute_freshness(now - timedelta(days=days), now) == pytest.approx(expected, abs=1e-6)

    def test_future_timestamp_is_fully_fresh(self, now):
        assert compute_freshness(now + timedelta(days=2), now) == 1.0

    def test_missing_or_garbage_timestamp(self, now):
        assert compute_freshness(None, now) == 0.01
        assert compute_freshness("not a date", now) == 0.01

    def test_iso_string_and_naive_datetime(self, now):
        iso = (now - timedelta(days=15)).isoformat()
        assert compute_freshness(iso, now) == pytest.approx(0.65, abs=1e-6)
        naive = (now - timedelta(days=15)).replace(tzinfo=None)
        assert compute_freshness(naive, now) == pytest.approx(0.65, abs=1e-6)


class TestRelevanceAndPenalty:

    @pytest.mark.parametrize("value", [float("nan"), -0.1, 1.5, None, "0.5", True])
    def test_invalid_relevance(self, value):
        assert normalize_relevance(value) == 0.01

    def test_valid_relevance_passes_through(self):
        assert normalize_relevance(0.42) == 0.42
        assert normalize_relevance(1) == 1.0

    @pytest.mark.parametrize("relevance, freshness, expected", [
        (0.5, 0.5, 0.8),
        (0.35, 0.5, 0.8),
        (0.2, 0.5, 0.7),
        (0.5, 0.2, 0.7),
        (0.2, 0.2, 0.6),
        (0.9, 0.9, 1.0),
        (0.9, 0.2, 1.0),
    ])
    def test_penalty_table(self, relevance, freshness, expected):
        assert conservative_penalty(relevance, freshness) == expected


class TestWeight:

    def test_strong_fresh_signal(self, signal_factory, now):
        ws = weigh_signal(signal_factory(relevance=0.95, days_ago=3), now)
        assert ws.freshness == pytest.approx(0.93, abs=1e-3)
        assert ws.weight == pytest.approx(0.8835, abs=1e-3)

    def test_weak_stale_signal_is_penalized(self, signal_factory, now):
        ws = weigh_signal(signal_factory(relevance=0.3, days_ago=75), now)
        # freshness 0.15, penalty 0.7
        assert ws.weight == pytest.approx(0.3 * 0.15 * 0.7, abs=1e-3)

    def test_invalid_inputs_floor_at_minimum(self, now):
        bad = RawSignal(kind=SignalKind.GROWTH, description="Expansion into Europe",
                        observed_at=None, relevance=float("nan"), source="news")
        assert weigh_signal(bad, now).weight == 0.01

    def test_weight_always_in_bounds(self, signal_factory, now):
        for relevance in (0.0, 0.1, 0.3, 0.5, 0.7, 1.0):
            for days in (-5, 0, 10, 45, 120):
                w = weigh_signal(signal_factory(relevance=relevance, days_ago=days), now).weight
                assert 0.01 <= w <= 1.0, f"weight {w} out of bounds for {relevance}/{days}"

    def test_signals_weighed_independently(self, strong_signals, weak_signals, now):
        alone = weigh_signals(strong_signals[:1], now)[0]
        together = weigh_signals(strong_signals + weak_signals, now)[0]
        assert alone == together

    def test_weighing_preserves_signal_fields(self, strong_signals, now):
        ws = weigh_signals(strong_signals, now)
        assert [w.description for w in ws] == [s.description for s in strong_signals]
        assert ws[0].kind == SignalKind.FUNDING_EVENT
