"""
Intent Outreach Agent - Signal Weigher
Turns raw intent signals into weighted signals.

weight = clamp(relevance x freshness x conservative_penalty, 0.01, 1.0)

Freshness decays with age: linear from 1.0 to 0.3 over the first 30 days,
then from 0.3 to 0.1 by day 90, then a flat 0.1 floor. Middling evidence
(relevance or freshness in the uncertain band) is penalized so that borderline
signals never look stronger than they are.

Each signal is weighed independently; adding or removing one signal never
changes another signal's weight.
"""

import math
from datetime import datetime, timezone

from outreach_agent.models import RawSignal, WeightedSignal

MIN_WEIGHT = 0.01
MAX_WEIGHT = 1.0
INVALID_SCORE = 0.01

FRESH_WINDOW_DAYS = 30
STALE_WINDOW_DAYS = 90
FRESHNESS_FLOOR = 0.1

UNCERTAIN_BAND = (0.3, 0.7)


def _to_utc(ts) -> datetime:
    """Coerce a datetime or ISO string to an aware UTC datetime, or None."""
    if isinstance(ts, str):
        try:
            ts = datetime.fromisoformat(ts.replace("Z", "+00:00"))
        except ValueError:
            return None
    if not isinstance(ts, datetime):
        return None
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def compute_freshness(observed_at, now: datetime = None) -> float:
    """Freshness score in [0.01, 1.0] from the age of a signal.

    Args:
        observed_at: When the signal was observed (datetime or ISO string).
        now: Reference time (default: current UTC time).

    Returns:
        1.0 for future timestamps, 0.01 for missing or unparseable ones.
    """
    observed = _to_utc(observed_at)
    if observed is None:
        return INVALID_SCORE

    reference = _to_utc(now) if now is not None else datetime.now(timezone.utc)
    age_days = (reference - observed).total_seconds() / 86400

    if age_days < 0:
        return 1.0
    if age_days > STALE_WINDOW_DAYS:
        return FRESHNESS_FLOOR
    if age_days <= FRESH_WINDOW_DAYS:
        return max(FRESHNESS_FLOOR, 1.0 - (age_days / FRESH_WINDOW_DAYS) * 0.7)
    span = STALE_WINDOW_DAYS - FRESH_WINDOW_DAYS
    return max(FRESHNESS_FLOOR, 0.3 - ((age_days - FRESH_WINDOW_DAYS) / span) * 0.2)


def normalize_relevance(relevance) -> float:
    """Return relevance unchanged if it is a number in [0, 1], else 0.01."""
    if isinstance(relevance, bool) or not isinstance(relevance, (int, float)):
        return INVALID_SCORE
    if math.isnan(relevance) or relevance < 0 or relevance > 1:
        return INVALID_SCORE
    return float(relevance)


def _in_band(value: float) -> bool:
    low, high = UNCERTAIN_BAND
    return low <= value <= high


def conservative_penalty(relevance: float, freshness: float) -> float:
    """Multiplier that discounts middling or weak evidence.

    0.8 when both scores sit in the uncertain band, 0.7 when one is below 0.4
    while the other is in the band, 0.6 when both are below 0.3, else 1.0.
    """
    if _in_band(relevance) and _in_band(freshness):
        return 0.8
    if (relevance < 0.4 and _in_band(freshness)) or (freshness < 0.4 and _in_band(relevance)):
        return 0.7
    if relevance < 0.3 and freshness < 0.3:
        return 0.6
    return 1.0


def weigh_signal(signal: RawSignal, now: datetime = None) -> WeightedSignal:
    """Weigh a single signal. Never raises on bad relevance or timestamps.

    The returned signal carries the normalized relevance (0.01 when invalid).
    """
    relevance = normalize_relevance(signal.relevance)
    freshness = compute_freshness(signal.observed_at, now)
    raw = relevance * freshness * conservative_penalty(relevance, freshness)
    weight = max(MIN_WEIGHT, min(MAX_WEIGHT, raw))
    return WeightedSignal(
        kind=signal.kind,
        description=signal.description,
        observed_at=signal.observed_at,
        relevance=relevance,
        source=signal.source,
        freshness=round(freshness, 4),
        weight=round(weight, 4),
    )


def weigh_signals(signals, now: datetime = None) -> list:
    """Weigh every signal against the same reference time, preserving order."""
    reference = now or datetime.now(timezone.utc)
    return [weigh_signal(s, reference) for s in signals]
