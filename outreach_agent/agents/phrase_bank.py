"""
Intent Outreach Agent - Phrase Bank
Read-only phrase lists shared by the drafter and the authenticity reviewer.

- BUZZWORD_REPLACEMENTS: corporate jargon and its plain-language substitute
- CLICHE_REPLACEMENTS: stock outreach lines; empty string means drop it
- MESSAGE_HEDGES: uncertainty phrases used in low-confidence drafts
- UNCERTAINTY_QUALIFIERS: clauses appended to low-confidence reasoning
- FALLBACK_SUMMARIES: neutral reasoning used when the real one is unusable
"""

BUZZWORD_REPLACEMENTS = {
    "synergy": "collaboration",
    "synergies": "collaboration",
    "leverage": "use",
    "paradigm": "approach",
    "disruptive": "impactful",
    "innovative": "new",
    "cutting-edge": "advanced",
    "revolutionary": "significant",
    "game-changer": "improvement",
    "best-in-class": "high-quality",
    "world-class": "excellent",
    "industry-leading": "established",
    "next-generation": "modern",
    "state-of-the-art": "current",
    "turnkey": "complete",
    "seamless": "smooth",
    "robust": "reliable",
    "scalable": "flexible",
    "enterprise-grade": "professional",
    "mission-critical": "important",
    "value-add": "benefit",
    "low-hanging fruit": "easy wins",
    "circle back": "follow up",
    "touch base": "connect",
    "move the needle": "make progress",
    "boil the ocean": "tackle everything",
    "think outside the box": "be creative",
    "optimize": "improve",
    "maximize": "increase",
    "streamline": "simplify",
    "quick win": "early result",
    "no-brainer": "clear choice",
    "win-win": "mutual benefit",
}

CLICHE_REPLACEMENTS = {
    "i hope this email finds you well": "",
    "i wanted to reach out": "",
    "i hope you don't mind me reaching out": "",
    "i came across your profile": "",
    "i thought you might be interested": "",
    "quick question for you": "",
    "i'd love to pick your brain": "I'd appreciate your perspective",
    "do you have 15 minutes": "would you have time for a brief conversation",
    "are you the right person to speak with": "",
    "i don't want to take up too much of your time": "",
}

BANNED_PHRASES = list(BUZZWORD_REPLACEMENTS) + list(CLICHE_REPLACEMENTS)

MESSAGE_HEDGES = [
    "every situation is different",
    "i could be off base",
    "i may be reading too much into it",
]

UNCERTAINTY_QUALIFIERS = [
    "though certainty levels may vary",
    "while acknowledging potential uncertainties",
    "though outcomes cannot be guaranteed",
    "while recognizing limitations in available information",
    "though complete certainty is not possible",
]

FALLBACK_SUMMARIES = [
    "Based on available signals, this approach was selected as most appropriate, "
    "though certainty levels may vary.",
    "The timing and relevance factors suggest this messaging approach, "
    "while acknowledging potential uncertainties.",
    "Current indicators point to engagement potential, "
    "though outcomes cannot be guaranteed.",
    "Current signals support this outreach approach, "
    "while recognizing limitations in available information.",
    "Available information points to this communication approach, "
    "though complete certainty is not possible.",
]

DISTINGUISHING_SENTENCES = {
    "conversational": "I thought this might resonate with your current priorities.",
    "analytical": "The timing seems relevant given where the market is heading.",
}
