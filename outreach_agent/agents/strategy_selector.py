"""
Intent Outreach Agent - Strategy Selector
Fixed mapping from confidence level to messaging strategy.

High   -> direct value alignment, direct CTA
Medium -> insight-led observation, soft CTA
Low    -> soft curiosity, no CTA
"""

from outreach_agent.models import Confidence, CtaLevel, Strategy, StrategyKind

TONE_RULES = {
    Confidence.HIGH: (
        "Confident and direct tone",
        "Reference specific evidence clearly",
        "Connect the offer to demonstrated needs",
        "Professional but assertive approach",
    ),
    Confidence.MEDIUM: (
        "Thoughtful and observational tone",
        "Share relevant insights or observations",
        "Build credibility through industry knowledge",
        "Respectful and consultative approach",
    ),
    Confidence.LOW: (
        "Gentle and curious tone",
        "Express genuine interest in their situation",
        "Acknowledge uncertainty openly",
        "Non-pushy and respectful approach",
    ),
}

CONTENT_FOCUS = {
    Confidence.HIGH: "Direct connection between prospect signals and the offer",
    Confidence.MEDIUM: "Industry observations that relate to the prospect's context",
    Confidence.LOW: "Genuine curiosity about the prospect's situation and challenges",
}

STRATEGY_MAP = {
    Confidence.HIGH: (StrategyKind.DIRECT_VALUE_ALIGNMENT, CtaLevel.DIRECT),
    Confidence.MEDIUM: (StrategyKind.INSIGHT_LED_OBSERVATION, CtaLevel.SOFT),
    Confidence.LOW: (StrategyKind.SOFT_CURIOSITY, CtaLevel.NONE),
}

# Extra guidance layered on for the two alternative drafts
TONE_VARIANTS = {
    "conversational": {
        "rules": ("More conversational and personal", "Focus on shared industry challenges"),
        "focus": "personal, peer-to-peer framing",
    },
    "analytical": {
        "rules": ("More data-minded and analytical", "Emphasize concrete business outcomes"),
        "focus": "market and outcome framing",
    },
}


def select_strategy(confidence: Confidence) -> Strategy:
    """Return the strategy for a confidence level. Unknown levels raise ValueError."""
    confidence = Confidence(confidence)
    kind, cta_level = STRATEGY_MAP[confidence]
    return Strategy(
        kind=kind,
        tone_rules=TONE_RULES[confidence],
        content_focus=CONTENT_FOCUS[confidence],
        cta_level=cta_level,
    )


def tone_variant(strategy: Strategy, variant: str) -> Strategy:
    """Derive a named tone variant of a strategy for alternative drafts."""
    spec = TONE_VARIANTS[variant]
    return strategy.with_tone_variant(variant, extra_rules=spec["rules"],
                                      extra_focus=spec["focus"])
