"""
Shared pytest fixtures for the outreach agent test suite.
"""

import threading
from datetime import datetime, timezone

import pytest

from outreach_agent.models import SignalKind, WeightedSignal, make_prospect, make_signal

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed reference time so freshness is reproducible."""
    return NOW


@pytest.fixture
def prospect():
    return make_prospect(
        role="VP of Engineering", company_name="PayFlow", industry="FinTech",
        contact_name="Sarah Chen", email="sarah.chen@payflow.com", company_size="medium",
    )


@pytest.fixture
def signal_factory(now):
    def _make(kind="funding_event", description="PayFlow raised a $45M Series B funding round",
              relevance=0.9, days_ago=1, source="news"):
        return make_signal(kind, description, relevance, source, days_ago=days_ago, now=now)
    return _make


@pytest.fixture
def strong_signals(signal_factory):
    """Fresh, highly relevant funding and role-change evidence."""
    return [
        signal_factory("funding_event", "PayFlow raised a $45M Series B funding round led by Accel",
                       0.95, days_ago=3),
        signal_factory("role_change", "Sarah Chen was appointed VP of Engineering",
                       0.9, days_ago=1),
    ]


@pytest.fixture
def weak_signals(signal_factory):
    """Low relevance, two-plus months old."""
    return [
        signal_factory("industry_trend", "Logistics sector may be seeing some regulation changes",
                       0.3, days_ago=75),
        signal_factory("growth", "Possibly expanding, maybe hiring", 0.25, days_ago=80),
    ]


@pytest.fixture
def weighted():
    """Build a WeightedSignal directly, bypassing the weigher."""
    def _make(kind=SignalKind.FUNDING_EVENT, description="PayFlow raised a new funding round",
              relevance=0.9, freshness=0.9, weight=0.8):
        return WeightedSignal(kind=kind, description=description, observed_at=NOW,
                              relevance=relevance, source="news",
                              freshness=freshness, weight=weight)
    return _make


@pytest.fixture
def stalled_draft():
    """Draft function that blocks until teardown, then lets the worker thread finish."""
    release = threading.Event()

    def _draft(strategy, hypothesis, prospect, seed="", max_words=None):
        release.wait(5)
        return "Hi Sarah,\n\nSlow draft.\n\nBest regards"

    yield _draft
    release.set()
    for thread in threading.enumerate():
        if thread.name.startswith("outreach"):
            thread.join(5)
