"""
Intent Outreach Agent - Quality Gate
Reviews every draft for authenticity before it can be accepted.

Checks:
1. Template residue (placeholders, bracketed tokens, repeated sentences) - high
2. Artificial language (stock formal phrases, stuttered words, connector overuse) - medium;
   over-long sentences - low
3. Sales pressure (high-pressure phrases always high; hard-sell asks high unless
   confidence is High; soft sales phrasing medium when confidence is Low;
   more than two promotional superlatives medium)
4. Leftover buzzwords or clichés - medium

Score starts at 100 and loses 25 / 15 / 5 per high / medium / low issue.
"""

import re

from outreach_agent.agents.message_writer import find_banned_phrases
from outreach_agent.models import (
    AuthenticityIssue, AuthenticityVerdict, Confidence, IssueCategory, Severity,
)

SEVERITY_PENALTIES = {Severity.HIGH: 25, Severity.MEDIUM: 15, Severity.LOW: 5}

MUST_REVISE_BELOW = 75
ACCEPTABLE_FROM = 70
MAX_MEDIUM_ISSUES = 1
MAX_TOTAL_ISSUES = 3
MAX_SENTENCE_WORDS = 30
MAX_FORMAL_CONNECTORS = 2
MAX_PROMOTIONAL_WORDS = 2
MIN_REPEATED_SENTENCE_CHARS = 10

TEMPLATE_PATTERNS = [
    r"\[.*?\]", r"\{\{.*?\}\}", r"\$\{.*?\}", r"<.*?>",
    r"TEMPLATE", r"PLACEHOLDER", r"INSERT.*?HERE", r"FILL.*?IN",
]

STOCK_FORMAL_PHRASES = [
    "i am writing to inform you", "please be advised that", "kindly be informed",
    "this is to notify you", "we would like to bring to your attention",
    "for your information", "please find attached", "as per our discussion",
    "in accordance with", "pursuant to",
]

FORMAL_CONNECTORS = [
    "furthermore", "moreover", "additionally", "consequently", "therefore",
    "thus", "hence", "nevertheless", "nonetheless",
]

HIGH_PRESSURE_PHRASES = [
    "limited time offer", "act now", "don't miss out", "once in a lifetime",
    "exclusive deal", "special promotion", "today only", "urgent",
    "immediate action required",
]

DIRECT_SALES_PHRASES = [
    "buy now", "purchase today", "sign up now", "get started immediately",
    "book a demo now", "schedule a call today", "let's close this deal",
    "ready to move forward",
]

MODERATE_SALES_PHRASES = [
    "would you be interested in", "let's explore this opportunity",
    "i'd like to show you", "this could benefit your",
    "would you like to learn more", "let's discuss how",
]

PROMOTIONAL_WORDS = [
    "amazing", "incredible", "unbelievable", "fantastic", "outstanding",
    "exceptional", "extraordinary", "phenomenal", "spectacular", "magnificent",
    "guaranteed", "proven", "certified", "award-winning", "industry-leading",
    "market-leading", "best-in-class", "world-class", "premium", "exclusive",
    "revolutionary", "groundbreaking", "cutting-edge", "state-of-the-art",
    "game-changing", "life-changing", "transformative", "disruptive",
]

SUGGESTIONS = {
    IssueCategory.TEMPLATE: "Replace template residue with specific, personal wording",
    IssueCategory.ARTIFICIAL_LANGUAGE: "Use shorter, conversational sentences",
    IssueCategory.OVERLY_SALESY: "Soften the ask and drop pressure or superlatives",
    IssueCategory.BUZZWORDS: "Swap jargon for plain language",
}


def _issue(category, severity, note):
    return AuthenticityIssue(category=category, severity=severity, note=note,
                             suggestion=SUGGESTIONS[category])


def _has_phrase(text_lower: str, phrase: str) -> bool:
    return re.search(r"\b" + re.escape(phrase) + r"\b", text_lower) is not None


def _sentences(message: str) -> list:
    return [s.strip() for s in re.split(r"[.!?]+", message) if s.strip()]


def check_template_residue(message: str) -> list:
    """Check 1: placeholders and repeated sentences."""
    issues = []
    for pattern in TEMPLATE_PATTERNS:
        match = re.search(pattern, message)
        if match:
            issues.append(_issue(IssueCategory.TEMPLATE, Severity.HIGH,
                                 f"Template residue: '{match.group(0)}'"))

    seen = set()
    for sentence in _sentences(message):
        key = sentence.lower()
        if len(key) <= MIN_REPEATED_SENTENCE_CHARS:
            continue
        if key in seen:
            issues.append(_issue(IssueCategory.TEMPLATE, Severity.HIGH,
                                 f"Repeated sentence: '{sentence[:40]}'"))
        seen.add(key)
    return issues


def check_artificial_language(message: str) -> list:
    """Check 2: stiff phrasing, stutters, connector overuse, long sentences."""
    issues = []
    lower = message.lower()

    for phrase in STOCK_FORMAL_PHRASES:
        if _has_phrase(lower, phrase):
            issues.append(_issue(IssueCategory.ARTIFICIAL_LANGUAGE, Severity.MEDIUM,
                                 f"Stock formal phrase: '{phrase}'"))

    stutter = re.search(r"\b(\w+)(\s+\1\b){2,}", lower)
    if stutter:
        issues.append(_issue(IssueCategory.ARTIFICIAL_LANGUAGE, Severity.MEDIUM,
                             f"Word repeated in a row: '{stutter.group(1)}'"))

    connectors = sum(len(re.findall(r"\b" + c + r"\b", lower)) for c in FORMAL_CONNECTORS)
    if connectors > MAX_FORMAL_CONNECTORS:
        issues.append(_issue(IssueCategory.ARTIFICIAL_LANGUAGE, Severity.MEDIUM,
                             f"Too many formal connectors ({connectors})"))

    for sentence in _sentences(message):
        n = len(sentence.split())
        if n > MAX_SENTENCE_WORDS:
            issues.append(_issue(IssueCategory.ARTIFICIAL_LANGUAGE, Severity.LOW,
                                 f"Long sentence ({n} words)"))
    return issues


def check_sales_pressure(message: str, confidence: Confidence) -> list:
    """Check 3: pressure, hard-sell asks, and superlatives relative to confidence."""
    issues = []
    lower = message.lower()

    for phrase in HIGH_PRESSURE_PHRASES:
        if _has_phrase(lower, phrase):
            issues.append(_issue(IssueCategory.OVERLY_SALESY, Severity.HIGH,
                                 f"High-pressure phrase: '{phrase}'"))

    if confidence != Confidence.HIGH:
        for phrase in DIRECT_SALES_PHRASES:
            if _has_phrase(lower, phrase):
                issues.append(_issue(IssueCategory.OVERLY_SALESY, Severity.HIGH,
                                     f"Hard-sell phrase: '{phrase}'"))

    if confidence == Confidence.LOW:
        for phrase in MODERATE_SALES_PHRASES:
            if _has_phrase(lower, phrase):
                issues.append(_issue(IssueCategory.OVERLY_SALESY, Severity.MEDIUM,
                                     f"Sales phrasing too strong for low confidence: '{phrase}'"))

    promotional = [w for w in PROMOTIONAL_WORDS if _has_phrase(lower, w)]
    if len(promotional) > MAX_PROMOTIONAL_WORDS:
        issues.append(_issue(IssueCategory.OVERLY_SALESY, Severity.MEDIUM,
                             f"Promotional language: {', '.join(promotional[:4])}"))
    return issues


def check_buzzwords(message: str) -> list:
    """Check 4: jargon or clichés that survived drafting."""
    found = find_banned_phrases(message)
    if not found:
        return []
    return [_issue(IssueCategory.BUZZWORDS, Severity.MEDIUM,
                   f"Buzzwords or clichés present: {', '.join(found[:4])}")]


def score_issues(issues) -> int:
    penalty = sum(SEVERITY_PENALTIES[i.severity] for i in issues)
    return max(0, 100 - penalty)


def evaluate_authenticity(message: str, confidence: Confidence) -> AuthenticityVerdict:
    """Run all checks on a draft and decide whether it must be revised.

    Args:
        message: Draft text.
        confidence: Confidence level the draft was written for.

    Returns:
        AuthenticityVerdict with score 0-100, acceptable, must_revise, and issues.
    """
    message = message or ""
    issues = (check_template_residue(message)
              + check_artificial_language(message)
              + check_sales_pressure(message, confidence)
              + check_buzzwords(message))

    score = score_issues(issues)
    high = sum(1 for i in issues if i.severity == Severity.HIGH)
    medium = sum(1 for i in issues if i.severity == Severity.MEDIUM)
    must_revise = (score < MUST_REVISE_BELOW or high > 0
                   or medium > MAX_MEDIUM_ISSUES or len(issues) > MAX_TOTAL_ISSUES)
    acceptable = score >= ACCEPTABLE_FROM and not must_revise

    return AuthenticityVerdict(score=score, acceptable=acceptable,
                               must_revise=must_revise, issues=tuple(issues))


def get_revision_suggestions(verdict: AuthenticityVerdict) -> list:
    """Unique suggestions from a verdict's issues, in first-seen order."""
    seen = []
    for issue in verdict.issues:
        if issue.suggestion and issue.suggestion not in seen:
            seen.append(issue.suggestion)
    return seen
