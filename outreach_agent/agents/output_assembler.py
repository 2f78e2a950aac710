"""
Intent Outreach Agent - Output Assembler
Packages the accepted draft into the caller-facing result.

- Conceals internal reasoning vocabulary and step markers from the summary
- Keeps the summary to two sentences; low confidence always carries an
  uncertainty qualifier
- Drafts two tone-variant alternatives and guarantees they are distinct
- Maps confidence to a follow-up window
- Reduces metadata to human step labels and a detail-free audit log
"""

import re

from outreach_agent import config
from outreach_agent.agents.message_writer import count_words, draft_message, enforce_word_limit
from outreach_agent.agents.phrase_bank import (
    DISTINGUISHING_SENTENCES, FALLBACK_SUMMARIES, UNCERTAINTY_QUALIFIERS,
)
from outreach_agent.agents.strategy_selector import tone_variant
from outreach_agent.agents.variation import select_variant
from outreach_agent.models import AuditEntry, AuditStatus, Confidence, FinalOutput, FollowUpTiming

ALTERNATIVE_VARIANTS = ("conversational", "analytical")
MIN_REASONING_CHARS = 10
MAX_REASONING_SENTENCES = 2

FOLLOW_UP_BY_CONFIDENCE = {
    Confidence.HIGH: FollowUpTiming.ONE_WEEK,
    Confidence.MEDIUM: FollowUpTiming.TWO_WEEKS,
    Confidence.LOW: FollowUpTiming.ONE_MONTH,
}

FOLLOW_UP_DESCRIPTIONS = {
    FollowUpTiming.IMMEDIATE: "Follow up within 1-2 days",
    FollowUpTiming.ONE_WEEK: "Follow up in about one week",
    FollowUpTiming.TWO_WEEKS: "Follow up in 2-3 weeks",
    FollowUpTiming.ONE_MONTH: "Follow up in about one month",
}

STEP_LABELS = {
    "input_validation": "Input Processing",
    "signal_weighing": "Signal Analysis",
    "hypothesis_formation": "Intent Analysis",
    "confidence_classification": "Confidence Assessment",
    "strategy_selection": "Approach Selection",
    "message_drafting": "Message Creation",
    "authenticity_review": "Quality Review",
    "authenticity_best_effort": "Quality Review",
    "alternative_drafting": "Alternative Creation",
    "output_assembly": "Output Preparation",
}

INTERNAL_TERMS = [
    "signal weighing", "signal weigher", "hypothesis formation", "hypothesis former",
    "confidence classification", "confidence classifier", "strategy selection",
    "strategy selector", "message drafting", "message drafter", "message writer",
    "authenticity review", "authenticity evaluator", "quality gate", "revision loop",
    "output assembly", "output assembler", "orchestrator", "workflow step",
    "weighted signal", "processing pipeline", "pipeline", "algorithm",
    "audit log", "audit trail", "audit", "metadata", "validation result",
]

STEP_MARKERS = [
    r"\bstep\s*\d+\s*:", r"\binternal note\s*:", r"\bprocessing\s*:",
    r"\bdebug\s*:", r"\bchain-of-thought\s*:", r"\breasoning chain\s*:",
]


# ─── FOLLOW-UP ──────────────────────────────────────────────────

def suggest_follow_up(confidence: Confidence) -> FollowUpTiming:
    return FOLLOW_UP_BY_CONFIDENCE[Confidence(confidence)]


def follow_up_description(timing) -> str:
    return FOLLOW_UP_DESCRIPTIONS.get(FollowUpTiming(timing), "Follow up when appropriate")


# ─── REASONING ──────────────────────────────────────────────────

def has_uncertainty_qualifier(text: str) -> bool:
    lower = (text or "").lower()
    return any(q in lower for q in UNCERTAINTY_QUALIFIERS)


def strip_internal_vocabulary(text: str) -> str:
    """Remove step markers and internal component vocabulary."""
    for marker in STEP_MARKERS:
        text = re.sub(marker, "", text, flags=re.IGNORECASE)
    for term in sorted(INTERNAL_TERMS, key=len, reverse=True):
        text = re.sub(r"\b" + re.escape(term) + r"\b", "", text, flags=re.IGNORECASE)
    text = re.sub(r"\s+", " ", text)
    text = re.sub(r"\s+([,.!?])", r"\1", text)
    text = re.sub(r"([,.!?])(?:\s*[,.!?])+", r"\1", text)
    return text.strip(" ,;:")


def clamp_sentences(text: str, max_sentences: int = MAX_REASONING_SENTENCES) -> str:
    sentences = [s.strip() for s in re.split(r"(?<=[.!?])\s+", text) if s.strip()]
    text = " ".join(sentences[:max_sentences])
    if text and text[-1] not in ".!?":
        text += "."
    return text


def conceal_reasoning(raw_reasoning: str, confidence: Confidence) -> str:
    """Caller-safe reasoning summary of at most two sentences."""
    raw_reasoning = raw_reasoning or ""
    text = strip_internal_vocabulary(raw_reasoning)
    if len(text) < MIN_REASONING_CHARS:
        text = select_variant(FALLBACK_SUMMARIES, raw_reasoning or "empty", slot="fallback")
    text = clamp_sentences(text)

    if Confidence(confidence) == Confidence.LOW and not has_uncertainty_qualifier(text):
        qualifier = select_variant(UNCERTAINTY_QUALIFIERS, text, slot="qualifier")
        text = f"{text.rstrip('.!?')}, {qualifier}."
    return text


# ─── ALTERNATIVES ───────────────────────────────────────────────

def generate_alternatives(strategy, hypothesis, prospect, draft_fn=None,
                          max_words: int = None) -> tuple:
    """Draft one message per tone variant of the selected strategy."""
    draft_fn = draft_fn or draft_message
    max_words = max_words or config.MAX_MESSAGE_WORDS
    return tuple(
        draft_fn(tone_variant(strategy, variant), hypothesis, prospect, max_words=max_words)
        for variant in ALTERNATIVE_VARIANTS
    )


def add_distinguishing_sentence(message: str, variant: str, max_words: int = None) -> str:
    """Insert the variant's distinguishing sentence ahead of the sign-off.

    Room for the sentence is reserved first so the result stays in the word limit.
    """
    max_words = max_words or config.MAX_MESSAGE_WORDS
    sentence = DISTINGUISHING_SENTENCES[variant]
    body = enforce_word_limit(message, max_words - count_words(sentence))
    if "\n\n" in body:
        head, tail = body.rsplit("\n\n", 1)
        if count_words(tail) <= 3:
            return f"{head}\n\n{sentence}\n\n{tail}"
    return f"{body}\n\n{sentence}"


def ensure_distinct_alternatives(primary: str, alternatives, max_words: int = None) -> tuple:
    """Exactly two alternatives, different from each other and from the primary."""
    alternatives = list(alternatives)
    if len(alternatives) != 2:
        raise ValueError(f"Expected 2 alternatives, got {len(alternatives)}")

    result = []
    for variant, alt in zip(ALTERNATIVE_VARIANTS, alternatives):
        if alt == primary or alt in result:
            alt = add_distinguishing_sentence(alt, variant, max_words)
        result.append(alt)

    if len({primary, *result}) != 3:
        raise ValueError("Could not produce distinct alternatives")
    return tuple(result)


# ─── METADATA ───────────────────────────────────────────────────

def step_label(step: str) -> str:
    if step.startswith("authenticity_revision_"):
        return f"Quality Review (revision {step.rsplit('_', 1)[-1]})"
    return STEP_LABELS.get(step, step.replace("_", " ").title())


def sanitize_metadata(metadata: dict) -> dict:
    """Human step labels plus an audit log without internal details."""
    entries = [e for e in metadata.get("audit_entries", ()) if isinstance(e, AuditEntry)]
    steps = []
    for entry in entries:
        if entry.status == AuditStatus.COMPLETED:
            label = step_label(entry.step)
            if label not in steps:
                steps.append(label)

    audit_log = []
    for entry in entries:
        item = entry.to_dict()
        item["step"] = step_label(entry.step)
        audit_log.append(item)

    return {
        "request_id": metadata.get("request_id", ""),
        "version": metadata.get("version", config.SYSTEM_VERSION),
        "execution_time_ms": metadata.get("execution_time_ms", 0),
        "workflow_steps": steps,
        "audit_log": audit_log,
    }


# ─── ASSEMBLY ───────────────────────────────────────────────────

def assemble_output(message: str, confidence: Confidence, raw_reasoning: str,
                    alternatives, metadata: dict = None, max_words: int = None) -> FinalOutput:
    """Build the FinalOutput returned to the caller.

    Args:
        message: Accepted (or best-effort) draft.
        confidence: Classified confidence level.
        raw_reasoning: Unfiltered reasoning text.
        alternatives: Two alternative drafts.
        metadata: request_id, version, execution_time_ms, audit_entries.
        max_words: Word limit for any alternative adjustment.
    """
    confidence = Confidence(confidence)
    return FinalOutput(
        confidence=confidence,
        reasoning_summary=conceal_reasoning(raw_reasoning, confidence),
        message=message,
        alternatives=ensure_distinct_alternatives(message, alternatives, max_words),
        follow_up_timing=suggest_follow_up(confidence),
        metadata=sanitize_metadata(metadata or {}),
    )
