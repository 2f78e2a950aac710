"""
CTA Engine - Builds closing elements for outreach messages.

The call to action follows the strategy's CTA level: "direct" asks for a
short call, "soft" offers to share more with an easy out, "none" only leaves
the door open. Greetings and sign-offs live here too.

Usage:
    from outreach_agent.agents.cta_engine import build_cta, build_greeting, build_signoff

    cta = build_cta(CtaLevel.SOFT, "Acme Corp")
"""

from outreach_agent.agents.variation import select_variant
from outreach_agent.models import CtaLevel

CTA_POOLS = {
    CtaLevel.DIRECT: [
        "Would you be open to a short call next week to see whether this applies to {company}?",
        "Open to a short conversation next week to compare notes on {company}?",
    ],
    CtaLevel.SOFT: [
        "If this resonates, I'd be glad to share a few observations, with no pressure if the timing is off.",
        "Happy to share more if useful, and no worries if the timing isn't right.",
    ],
    CtaLevel.NONE: [
        "No need to reply; I mainly wanted to share the thought.",
        "If it is ever worth a conversation, the door is open.",
    ],
}

GREETINGS = ["Hi {first},", "Hello {first},"]

SIGNOFFS = ["Best regards", "All the best", "Thanks"]


def build_cta(cta_level, company: str, seed: str = "") -> str:
    """Closing ask matched to the CTA level."""
    pool = CTA_POOLS[CtaLevel(cta_level)]
    return select_variant(pool, seed, slot="cta").format(company=company)


def build_greeting(first_name: str, seed: str = "") -> str:
    return select_variant(GREETINGS, seed, slot="greeting").format(first=first_name)


def build_signoff(seed: str = "") -> str:
    return select_variant(SIGNOFFS, seed, slot="signoff")
