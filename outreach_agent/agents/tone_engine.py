"""
Tone Engine - Renders hypothesis and strategy into message prose.

Produces the two body slots of a draft: the relevance statement (why we are
writing now) and the value statement (what we might offer). Phrasing adapts
to the strategy kind and tone variant; within each pool the pick is made by
select_variant so revisions can move to a different phrasing.

Usage:
    from outreach_agent.agents.tone_engine import render_relevance, render_value

    relevance = render_relevance(hypothesis, prospect, seed="")
    value = render_value(strategy, prospect, seed="")
"""

from outreach_agent.agents.variation import select_variant
from outreach_agent.models import StrategyKind


def detect_topic(primary_reason: str) -> str:
    """Map a hypothesis reason onto the topic the opener should reference."""
    reason = (primary_reason or "").lower()
    if "funding" in reason or "growth" in reason:
        return "momentum"
    if "technology" in reason or "adoption" in reason:
        return "technology"
    if "role" in reason or "job" in reason:
        return "role"
    return "general"


RELEVANCE_POOLS = {
    "momentum": [
        "Congrats on the recent momentum at {company}.",
        "The recent growth news from {company} stood out.",
        "Sounds like a busy stretch at {company} lately.",
    ],
    "technology": [
        "It looks like {company} is making some changes on the technology side.",
        "The recent technology work at {company} stood out.",
        "Sounds like {company} is rethinking parts of its stack.",
    ],
    "role": [
        "Congrats on the new role at {company}.",
        "Settling into a new position at {company} usually means a fresh look at priorities.",
        "A new role at {company} is a good moment to revisit what matters most.",
    ],
    "general": [
        "Your work as {role} at {company} got me thinking.",
        "I have been following {company} and your work as {role}.",
        "Teams like yours at {company} have been on my mind lately.",
    ],
}

VALUE_POOLS = {
    StrategyKind.DIRECT_VALUE_ALIGNMENT: {
        "standard": [
            "Teams in {industry} at a similar stage often revisit how they plan the next phase, and that is where we tend to help.",
            "We work with {industry} teams going through this kind of change, and there may be a clear fit for {company}.",
        ],
        "conversational": [
            "A few {industry} leaders I talk with went through something similar, and comparing notes helped them plan the next phase.",
        ],
        "analytical": [
            "In {industry}, this kind of change often shifts where time and budget go over the next few quarters, which is where we tend to help.",
        ],
    },
    StrategyKind.INSIGHT_LED_OBSERVATION: {
        "standard": [
            "Across {industry}, companies in a similar spot often find that planning ahead pays off more than reacting later.",
            "One pattern I keep seeing in {industry} is that teams who plan for this early tend to have an easier year.",
        ],
        "conversational": [
            "I have been talking with a few {industry} teams about this lately, and their stories had a lot in common.",
        ],
        "analytical": [
            "Looking across {industry}, teams in a similar position tend to rebalance priorities within a couple of quarters.",
        ],
    },
    StrategyKind.SOFT_CURIOSITY: {
        "standard": [
            "I am curious how {company} is thinking about this area, though every situation is different.",
            "I could be off base, but I am curious how {company} is approaching the year ahead.",
        ],
        "conversational": [
            "I could be off base here, so I would like to hear how things look from your side at {company}.",
        ],
        "analytical": [
            "I may be reading too much into it, but I am curious how {company} weighs this against other priorities.",
        ],
    },
}


def render_relevance(hypothesis, prospect, seed: str = "") -> str:
    """Opening line tying the hypothesis to the prospect's company."""
    pool = RELEVANCE_POOLS[detect_topic(hypothesis.primary_reason)]
    template = select_variant(pool, seed, slot="relevance")
    return template.format(company=prospect.company_name, role=prospect.role)


def render_value(strategy, prospect, seed: str = "") -> str:
    """Value statement for the strategy kind and its tone variant."""
    pools = VALUE_POOLS[strategy.kind]
    pool = pools.get(strategy.variant, pools["standard"])
    template = select_variant(pool, seed, slot="value")
    return template.format(company=prospect.company_name,
                           industry=prospect.industry or "your industry")
