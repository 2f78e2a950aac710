"""
Unit tests for the Input Validator.
"""

from dataclasses import replace
from datetime import timedelta

from outreach_agent.agents.input_validator import validate_input
from outreach_agent.models import RawSignal


def _codes(result):
    return {e.code for e in result.errors}


def test_valid_request(prospect, strong_signals, now):
    result = validate_input(prospect, strong_signals, now=now)
    assert result.is_valid
    assert result.errors == ()


def test_missing_prospect(strong_signals, now):
    assert "MISSING_PROSPECT_DATA" in _codes(validate_input(None, strong_signals, now=now))


def test_missing_and_malformed_fields(prospect, strong_signals, now):
    broken = replace(prospect, role="", industry="  ", company_size=None, email="not-an-email")
    codes = _codes(validate_input(broken, strong_signals, now=now))
    assert {"MISSING_ROLE", "MISSING_COMPANY_INDUSTRY", "MISSING_COMPANY_SIZE",
            "INVALID_EMAIL_FORMAT"} <= codes


def test_signal_count_and_type(prospect, strong_signals, now):
    assert "INSUFFICIENT_INTENT_SIGNALS" in _codes(validate_input(prospect, strong_signals[:1], now=now))
    assert "INVALID_INTENT_SIGNALS_TYPE" in _codes(validate_input(prospect, "signals", now=now))
    assert validate_input(prospect, [], now=now, min_signals=0).is_valid


def test_signal_field_errors(prospect, signal_factory, now):
    bad = [
        RawSignal(kind="rumor", description="", observed_at=None, relevance=1.5, source=""),
        replace(signal_factory(), observed_at=now + timedelta(days=3)),
        replace(signal_factory(), observed_at="yesterday"),
    ]
    codes = _codes(validate_input(prospect, bad, now=now))
    assert {"INVALID_SIGNAL_TYPE", "MISSING_SIGNAL_DESCRIPTION", "MISSING_SIGNAL_SOURCE",
            "INVALID_RELEVANCE_SCORE", "MISSING_TIMESTAMP", "FUTURE_TIMESTAMP",
            "INVALID_TIMESTAMP_FORMAT"} <= codes


def test_weak_and_old_signals_warn(prospect, signal_factory, now):
    signals = [signal_factory(relevance=0.1), signal_factory(days_ago=400)]
    result = validate_input(prospect, signals, now=now)
    assert result.is_valid
    impacts = [w.impact for w in result.warnings]
    assert impacts == ["medium", "low", "medium"]
    assert "2 weak or old signals" in result.warnings[-1].message
