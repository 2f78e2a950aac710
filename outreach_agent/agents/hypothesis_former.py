"""
Intent Outreach Agent - Hypothesis Former
Forms one explainable hypothesis about why a prospect may care right now.

Only strong signals (weight >= 0.3) can support a hypothesis, and together they
must carry at least 0.5 of weight. The strongest signal becomes the primary
reason, but only if its description is substantive and actually talks about the
kind of event it claims to be. Anything less falls back to a conservative
hypothesis that assumes nothing beyond general business relevance.
"""

import re

from outreach_agent.models import Hypothesis, SignalKind

STRONG_SIGNAL_THRESHOLD = 0.3
MIN_TOTAL_STRONG_WEIGHT = 0.5
MIN_VALID_WEIGHT = 0.01
MIN_DESCRIPTION_LENGTH = 10
MAX_HEDGE_WORDS = 2
HEDGE_OVERRIDE_RELEVANCE = 0.7
RECENT_FRESHNESS = 0.8

CONSERVATIVE_REASON = "Timing may be appropriate for general business discussion"
GENERAL_CAVEAT = "Relevance to the prospect is assumed, not guaranteed"

HEDGE_WORDS = [
    "might", "could", "possibly", "perhaps", "maybe", "likely", "seems",
    "appears", "suggests", "indicates", "implies", "assumed", "estimated",
    "projected", "expected",
]

TOPIC_KEYWORDS = {
    SignalKind.ROLE_CHANGE: ["hired", "promoted", "appointed", "joined", "role", "position"],
    SignalKind.FUNDING_EVENT: ["funding", "investment", "raised", "capital", "round", "investor"],
    SignalKind.TECH_ADOPTION: ["technology", "tech", "system", "platform", "software", "tool"],
    SignalKind.GROWTH: ["growth", "expansion", "scaling", "hiring", "revenue", "market"],
    SignalKind.INDUSTRY_TREND: ["industry", "market", "trend", "sector", "regulation", "compliance"],
}

KIND_REASONS = {
    SignalKind.ROLE_CHANGE: "A recent role change may bring new priorities and decision-making authority",
    SignalKind.FUNDING_EVENT: "Recent funding may enable new initiatives and investments",
    SignalKind.TECH_ADOPTION: "Technology changes may point to evolving business needs",
    SignalKind.GROWTH: "Company growth may bring new operational challenges",
    SignalKind.INDUSTRY_TREND: "Industry developments may shape planning and priorities",
}

KIND_LABELS = {
    SignalKind.ROLE_CHANGE: "Role transition",
    SignalKind.FUNDING_EVENT: "Funding activity",
    SignalKind.TECH_ADOPTION: "Technology change",
    SignalKind.GROWTH: "Growth indicator",
    SignalKind.INDUSTRY_TREND: "Industry trend",
}

# Kinds that speak to the company itself rather than its surroundings
DIRECT_KINDS = {SignalKind.ROLE_CHANGE, SignalKind.FUNDING_EVENT}


def _contains_word(text: str, word: str) -> bool:
    return re.search(r"\b" + re.escape(word) + r"\b", text) is not None


def count_hedges(text: str) -> int:
    """Number of distinct hedge words present in text."""
    lower = (text or "").lower()
    return sum(1 for w in HEDGE_WORDS if _contains_word(lower, w))


def has_valid_evidence(signal) -> bool:
    """True if the description is substantive and not dominated by hedging."""
    description = (signal.description or "").strip()
    if len(description) < MIN_DESCRIPTION_LENGTH:
        return False
    if count_hedges(description) > MAX_HEDGE_WORDS:
        return signal.relevance >= HEDGE_OVERRIDE_RELEVANCE
    return True


def is_topically_grounded(signal) -> bool:
    """True if the description mentions a keyword for the signal's own kind."""
    lower = (signal.description or "").lower()
    keywords = TOPIC_KEYWORDS.get(signal.kind, [])
    return any(_contains_word(lower, k) for k in keywords)


def conservative_hypothesis(reason: str) -> Hypothesis:
    """Fallback used whenever the evidence cannot carry a specific hypothesis."""
    return Hypothesis(
        primary_reason=CONSERVATIVE_REASON,
        supporting_evidence=(),
        confidence_factors=("Conservative approach due to limited evidence",),
        caveats=(
            reason,
            "No specific intent can be confidently determined",
            "General business relevance assumed only",
        ),
    )


def _primary_reason(signal) -> str:
    reason = KIND_REASONS.get(signal.kind, CONSERVATIVE_REASON)
    if signal.freshness > RECENT_FRESHNESS:
        reason += " (recent development)"
    return reason


def _confidence_factors(strong: list) -> tuple:
    factors = []
    if len(strong) > 1:
        factors.append(f"Multiple supporting signals ({len(strong)})")
    recent = [s for s in strong if s.freshness > 0.7]
    if recent:
        factors.append(f"Recent developments ({len(recent)} signals)")
    high_relevance = [s for s in strong if s.relevance > 0.8]
    if high_relevance:
        factors.append(f"High relevance indicators ({len(high_relevance)} signals)")
    direct = [s for s in strong if s.kind in DIRECT_KINDS]
    if direct:
        factors.append(f"Direct business signals ({len(direct)})")
    if not factors:
        factors.append("Single supporting signal available")
    return tuple(factors)


def _caveats(strong: list, weak_count: int) -> tuple:
    caveats = []
    if weak_count:
        noun = "signal" if weak_count == 1 else "signals"
        caveats.append(f"{weak_count} weak {noun} not considered in primary hypothesis")
    dated = [s for s in strong if s.freshness < 0.5]
    if dated:
        caveats.append(f"Some signals may be dated ({len(dated)})")
    if not any(s.kind in DIRECT_KINDS for s in strong):
        caveats.append("Hypothesis based on indirect signals only")
    caveats.append(GENERAL_CAVEAT)
    return tuple(caveats)


def form_hypothesis(weighted_signals) -> Hypothesis:
    """Form the single best-supported hypothesis from weighted signals.

    Returns:
        A Hypothesis; the conservative fallback when signals are missing,
        weak, or the strongest one does not hold up.
    """
    signals = list(weighted_signals or [])
    if not signals:
        return conservative_hypothesis("No intent signals provided")

    valid = [s for s in signals if s.has_valid_weight and s.weight > MIN_VALID_WEIGHT]
    if not valid:
        return conservative_hypothesis("Insufficient valid signals")

    strong = [s for s in valid if s.weight >= STRONG_SIGNAL_THRESHOLD]
    if not strong:
        return conservative_hypothesis("Weak signal strength")
    if sum(s.weight for s in strong) < MIN_TOTAL_STRONG_WEIGHT:
        return conservative_hypothesis("Weak signal strength")

    # sorted() is stable, so equal weights keep input order
    ranked = sorted(strong, key=lambda s: s.weight, reverse=True)
    primary = ranked[0]
    if not has_valid_evidence(primary):
        return conservative_hypothesis("Primary signal lacks sufficient evidence")
    if not is_topically_grounded(primary):
        return conservative_hypothesis("Primary signal is not topically supported")

    evidence = tuple(f"{KIND_LABELS[s.kind]}: {s.description.strip()}"
                     for s in ranked if has_valid_evidence(s))
    weak_count = len(signals) - len(strong)
    return Hypothesis(
        primary_reason=_primary_reason(primary),
        supporting_evidence=evidence,
        confidence_factors=_confidence_factors(ranked),
        caveats=_caveats(ranked, weak_count),
    )
