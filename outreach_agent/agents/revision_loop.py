"""
Intent Outreach Agent - Revision Loop
Redrafts a message until it passes the quality gate or attempts run out.

The first draft counts as attempt 1. Each redraft is seeded with the previous
draft's text so phrasing moves deterministically. When attempts are exhausted
the last draft is kept and flagged as best-effort in the audit entries; it is
never reported to the caller as a failure.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from outreach_agent import config
from outreach_agent.agents.message_writer import draft_message
from outreach_agent.agents.quality_gate import evaluate_authenticity, get_revision_suggestions
from outreach_agent.logging_config import get_agent_logger
from outreach_agent.models import AuditEntry, AuditStatus, AuthenticityVerdict

logger = get_agent_logger("revision_loop")


@dataclass(frozen=True)
class RevisionOutcome:
    message: str
    attempts: int
    verdict: AuthenticityVerdict
    best_effort: bool
    audit_entries: tuple = ()


def _entry(step: str, status: AuditStatus, details: dict = None) -> AuditEntry:
    return AuditEntry(step=step, timestamp=datetime.now(timezone.utc),
                      status=status, details=details)


def run_revision_loop(message: str, strategy, hypothesis, prospect, confidence,
                      max_attempts: int = None,
                      draft_fn: Optional[Callable] = None,
                      evaluate_fn: Optional[Callable] = None,
                      request_id: str = "") -> RevisionOutcome:
    """Review `message` and redraft while the quality gate rejects it.

    Args:
        message: The first draft (already attempt 1).
        strategy, hypothesis, prospect: Inputs passed back to the drafter.
        confidence: Confidence level used by the quality gate.
        max_attempts: Total draft attempts allowed, including the first.
        draft_fn: Drafter override, signature like draft_message.
        evaluate_fn: Quality gate override, signature like evaluate_authenticity.

    Returns:
        RevisionOutcome with the accepted (or best-effort) message.
    """
    max_attempts = max(1, max_attempts or config.MAX_REVISION_ATTEMPTS)
    draft_fn = draft_fn or draft_message
    evaluate_fn = evaluate_fn or evaluate_authenticity

    attempts = 1
    entries = []
    verdict = evaluate_fn(message, confidence)

    while not verdict.acceptable and attempts < max_attempts:
        step = f"authenticity_revision_{attempts}"
        suggestions = get_revision_suggestions(verdict)
        entries.append(_entry(step, AuditStatus.STARTED,
                              {"score": verdict.score, "suggestions": suggestions}))
        message = draft_fn(strategy, hypothesis, prospect, seed=message)
        attempts += 1
        verdict = evaluate_fn(message, confidence)
        entries.append(_entry(step, AuditStatus.COMPLETED,
                              {"score": verdict.score, "acceptable": verdict.acceptable}))
        logger.debug("Revision %d scored %d", attempts - 1, verdict.score,
                     extra={"request_id": request_id, "attempt": attempts})

    best_effort = not verdict.acceptable
    if best_effort:
        entries.append(_entry("authenticity_best_effort", AuditStatus.COMPLETED,
                              {"score": verdict.score, "attempts": attempts,
                               "best_effort": True}))
        logger.warning("Accepting best-effort draft after %d attempts (score %d)",
                       attempts, verdict.score,
                       extra={"request_id": request_id, "attempt": attempts})

    return RevisionOutcome(message=message, attempts=attempts, verdict=verdict,
                           best_effort=best_effort, audit_entries=tuple(entries))
