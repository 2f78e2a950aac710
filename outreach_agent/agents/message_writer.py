"""
Intent Outreach Agent - Message Writer
Drafts one outreach message from a strategy, hypothesis, and prospect.

Slots, in order, separated by blank lines:
    greeting -> relevance statement -> value statement -> CTA -> sign-off

Every draft is then held to the word limit and scrubbed of buzzwords and
stock outreach clichés. Drafting is pure: the same inputs and seed always
produce the same text.
"""

import re

from outreach_agent import config
from outreach_agent.agents.cta_engine import build_cta, build_greeting, build_signoff
from outreach_agent.agents.phrase_bank import (
    BUZZWORD_REPLACEMENTS, CLICHE_REPLACEMENTS, BANNED_PHRASES,
)
from outreach_agent.agents.tone_engine import render_relevance, render_value

TRUNCATION_BOUNDARY_RATIO = 0.8


def count_words(text: str) -> int:
    return len((text or "").split())


def enforce_word_limit(text: str, limit: int = None) -> str:
    """Trim text to at most `limit` words.

    Cuts after the limit-th word, then backs up to the last sentence boundary
    when one exists past 80% of the kept text. Paragraph breaks are preserved.
    """
    limit = limit or config.MAX_MESSAGE_WORDS
    words = list(re.finditer(r"\S+", text or ""))
    if len(words) <= limit:
        return text

    truncated = text[:words[limit - 1].end()]
    boundary = max(truncated.rfind(p) for p in ".!?")
    if boundary > len(truncated) * TRUNCATION_BOUNDARY_RATIO:
        truncated = truncated[:boundary + 1]
    return truncated.rstrip()


def _phrase_pattern(phrase: str) -> str:
    return r"\b" + re.escape(phrase) + r"\b"


def _match_case(replacement: str, original: str) -> str:
    if replacement and original[:1].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def scrub_banned_phrases(text: str) -> str:
    """Replace buzzwords with plain words and drop or reword clichés."""
    # Longest first so multi-word phrases win over their parts
    for phrase in sorted(BUZZWORD_REPLACEMENTS, key=len, reverse=True):
        replacement = BUZZWORD_REPLACEMENTS[phrase]
        text = re.sub(_phrase_pattern(phrase),
                      lambda m, r=replacement: _match_case(r, m.group(0)),
                      text, flags=re.IGNORECASE)

    for phrase, replacement in CLICHE_REPLACEMENTS.items():
        if replacement:
            text = re.sub(_phrase_pattern(phrase),
                          lambda m, r=replacement: _match_case(r, m.group(0)),
                          text, flags=re.IGNORECASE)
        else:
            text = re.sub(_phrase_pattern(phrase) + r"[,.!?]?[ \t]*", "",
                          text, flags=re.IGNORECASE)

    text = re.sub(r"[ \t]{2,}", " ", text)
    return "\n".join(line.strip() for line in text.split("\n"))


def find_banned_phrases(text: str) -> list:
    """Banned buzzwords or clichés present in text (case-insensitive)."""
    return [p for p in BANNED_PHRASES
            if re.search(_phrase_pattern(p), text or "", flags=re.IGNORECASE)]


def draft_message(strategy, hypothesis, prospect, seed: str = "",
                  max_words: int = None) -> str:
    """Draft one message.

    Args:
        strategy: Strategy selected for the confidence level.
        hypothesis: Hypothesis the message leans on.
        prospect: ProspectProfile being written to.
        seed: Empty for a first draft; the previous draft's text on revisions.
        max_words: Word limit override (default: MAX_MESSAGE_WORDS).

    Returns:
        Message text within the word limit and free of banned phrases.
    """
    max_words = max_words or config.MAX_MESSAGE_WORDS
    slots = [
        build_greeting(prospect.first_name, seed),
        render_relevance(hypothesis, prospect, seed),
        render_value(strategy, prospect, seed),
        build_cta(strategy.cta_level, prospect.company_name, seed),
        build_signoff(seed),
    ]
    message = "\n\n".join(slots)
    message = enforce_word_limit(message, max_words)
    message = scrub_banned_phrases(message)
    # Cliché rewrites can add words, so hold the limit once more
    return enforce_word_limit(message, max_words)
