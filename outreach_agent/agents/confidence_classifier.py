"""
Intent Outreach Agent - Confidence Classifier
Maps a hypothesis and its weighted signals to High / Medium / Low.

Rules run in order and the first match wins:
1. No signals, no usable weights, or no hypothesis -> Low
2. Conservative hypothesis (fallback phrasing in reason or caveats) -> Low
3. Safety: pressure language in the reasoning, mostly-weak evidence, or
   many scattered signal kinds with a low average weight -> Low
4. High: two or more signals, all strong, high averages; without a direct
   kind (role change or funding) the averages must be higher still
5. Medium: some strong evidence and a reasonable average
6. Everything else -> Low
"""

import math
import re

from outreach_agent.models import Confidence, SignalKind

STRONG_SIGNAL_THRESHOLD = 0.3

HIGH_MIN_AVG_WEIGHT = 0.7
HIGH_MIN_AVG_FRESHNESS = 0.6
HIGH_MIN_AVG_RELEVANCE = 0.7
HIGH_MIN_SIGNALS = 2
INDIRECT_MIN_AVG_WEIGHT = 0.8
INDIRECT_MIN_AVG_FRESHNESS = 0.7

MEDIUM_MIN_AVG_WEIGHT = 0.3
MEDIUM_GOOD_AVG_WEIGHT = 0.35
MEDIUM_MIN_FRESHNESS = 0.1
MEDIUM_WEAK_RATIO = 0.7

SAFETY_WEAK_RATIO = 0.8
SAFETY_MAX_KINDS = 3
SAFETY_MIN_AVG_WEIGHT = 0.5

DIRECT_KINDS = {SignalKind.ROLE_CHANGE, SignalKind.FUNDING_EVENT}

CONSERVATIVE_REASON_MARKERS = [
    "may be appropriate", "general business discussion", "timing may be",
    "potential relevance", "assumes business relevance",
]

CRITICAL_CAVEAT_MARKERS = [
    "no specific intent can be confidently determined", "insufficient valid signals",
    "weak signal strength", "no supporting evidence available",
]

RISKY_LANGUAGE = [
    "urgent", "immediate", "critical", "must act", "limited time",
    "exclusive", "special offer", "guaranteed", "proven results",
]


def _weight(signal) -> float:
    """Usable weight; missing or NaN counts as zero."""
    w = getattr(signal, "weight", None)
    if isinstance(w, bool) or not isinstance(w, (int, float)) or math.isnan(w):
        return 0.0
    return float(w)


def compute_signal_metrics(weighted_signals) -> dict:
    """Aggregate statistics used by the classification rules."""
    signals = list(weighted_signals or [])
    n = len(signals)
    if n == 0:
        return {"count": 0, "avg_weight": 0.0, "avg_freshness": 0.0,
                "avg_relevance": 0.0, "strong_count": 0, "weak_count": 0,
                "weak_ratio": 1.0, "max_weight": 0.0, "max_freshness": 0.0,
                "distinct_kinds": 0, "has_direct_kind": False}

    weights = [_weight(s) for s in signals]
    strong = [w for w in weights if w >= STRONG_SIGNAL_THRESHOLD]
    return {
        "count": n,
        "avg_weight": sum(weights) / n,
        "avg_freshness": sum(s.freshness for s in signals) / n,
        "avg_relevance": sum(s.relevance for s in signals) / n,
        "strong_count": len(strong),
        "weak_count": n - len(strong),
        "weak_ratio": (n - len(strong)) / n,
        "max_weight": max(weights),
        "max_freshness": max(s.freshness for s in signals),
        "distinct_kinds": len({s.kind for s in signals}),
        "has_direct_kind": any(s.kind in DIRECT_KINDS for s in signals),
    }


def is_conservative(hypothesis) -> bool:
    reason = hypothesis.primary_reason.lower()
    if any(m in reason for m in CONSERVATIVE_REASON_MARKERS):
        return True
    caveats = " ".join(hypothesis.caveats).lower()
    return any(m in caveats for m in CRITICAL_CAVEAT_MARKERS)


def has_risky_language(hypothesis) -> bool:
    text = " ".join([hypothesis.primary_reason, *hypothesis.supporting_evidence]).lower()
    return any(re.search(r"\b" + re.escape(p) + r"\b", text) for p in RISKY_LANGUAGE)


def fails_safety_checks(hypothesis, metrics: dict) -> bool:
    if has_risky_language(hypothesis):
        return True
    if metrics["weak_ratio"] > SAFETY_WEAK_RATIO:
        return True
    if (metrics["distinct_kinds"] > SAFETY_MAX_KINDS
            and metrics["avg_weight"] < SAFETY_MIN_AVG_WEIGHT):
        return True
    return False


def meets_high_criteria(metrics: dict) -> bool:
    if not (metrics["count"] >= HIGH_MIN_SIGNALS
            and metrics["weak_count"] == 0
            and metrics["avg_weight"] >= HIGH_MIN_AVG_WEIGHT
            and metrics["avg_freshness"] >= HIGH_MIN_AVG_FRESHNESS
            and metrics["avg_relevance"] >= HIGH_MIN_AVG_RELEVANCE):
        return False
    if metrics["has_direct_kind"]:
        return True
    return (metrics["avg_weight"] >= INDIRECT_MIN_AVG_WEIGHT
            and metrics["avg_freshness"] >= INDIRECT_MIN_AVG_FRESHNESS)


def meets_medium_criteria(metrics: dict) -> bool:
    if metrics["count"] < 1 or metrics["strong_count"] < 1:
        return False
    if metrics["avg_weight"] < MEDIUM_MIN_AVG_WEIGHT:
        return False
    return (metrics["avg_weight"] >= MEDIUM_GOOD_AVG_WEIGHT
            or metrics["max_freshness"] >= MEDIUM_MIN_FRESHNESS
            or (metrics["weak_ratio"] > MEDIUM_WEAK_RATIO
                and metrics["max_weight"] >= STRONG_SIGNAL_THRESHOLD))


def classify_confidence(hypothesis, weighted_signals) -> Confidence:
    """Classify how much the evidence supports the hypothesis. Deterministic."""
    signals = list(weighted_signals or [])
    if hypothesis is None or not signals:
        return Confidence.LOW
    if not any(_weight(s) > 0 for s in signals):
        return Confidence.LOW
    if is_conservative(hypothesis):
        return Confidence.LOW

    metrics = compute_signal_metrics(signals)
    if fails_safety_checks(hypothesis, metrics):
        return Confidence.LOW
    if meets_high_criteria(metrics):
        return Confidence.HIGH
    if meets_medium_criteria(metrics):
        return Confidence.MEDIUM
    return Confidence.LOW
