"""
Intent Outreach Agent - Reasoning Pipeline
Runs the reasoning steps in a fixed order for one request.

Steps:
1. signal_weighing          -> weighted signals
2. hypothesis_formation     -> hypothesis
3. confidence_classification -> High / Medium / Low
4. strategy_selection       -> strategy
5. message_drafting         -> first draft
6. authenticity_review      -> accepted (or best-effort) draft
7. alternative_drafting     -> two tone-variant drafts
8. output_assembly          -> FinalOutput

Each step records started/completed (or failed) in an AuditTrail value that
is threaded through the run, so concurrent requests never share state. The
first failing step halts the run. The whole run is raced against a timeout.
"""

import time
import uuid
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeout
from datetime import datetime, timezone
from functools import partial
from typing import Callable, Optional

from outreach_agent import config
from outreach_agent.agents.confidence_classifier import classify_confidence
from outreach_agent.agents.error_handler import (
    PROCESSING_ERROR, PROCESSING_TIMEOUT, StepFailure, build_failure, log_pipeline_error,
)
from outreach_agent.agents.hypothesis_former import form_hypothesis
from outreach_agent.agents.message_writer import draft_message
from outreach_agent.agents.output_assembler import (
    assemble_output, generate_alternatives, sanitize_metadata,
)
from outreach_agent.agents.quality_gate import evaluate_authenticity
from outreach_agent.agents.revision_loop import run_revision_loop
from outreach_agent.agents.signal_weigher import weigh_signals
from outreach_agent.agents.strategy_selector import select_strategy
from outreach_agent.logging_config import get_agent_logger
from outreach_agent.models import AuditStatus, AuditTrail, FinalOutput, ProcessingFailure

logger = get_agent_logger("reasoning_pipeline")

DEFAULT_CONFIG = {
    "max_revision_attempts": config.MAX_REVISION_ATTEMPTS,
    "processing_timeout_seconds": config.PROCESSING_TIMEOUT_SECONDS,
    "max_words": config.MAX_MESSAGE_WORDS,
}


def build_raw_reasoning(confidence, hypothesis) -> str:
    return (f"{confidence.value} confidence assessment based on available signals. "
            f"{hypothesis.primary_reason}")


class OutreachPipeline:
    """Stateless orchestrator; one instance can serve many requests at once.

    Drafting and review can be swapped out (draft_fn / evaluate_fn) for testing.
    """

    def __init__(self, config: dict = None, draft_fn: Optional[Callable] = None,
                 evaluate_fn: Optional[Callable] = None):
        self.config = {**DEFAULT_CONFIG, **(config or {})}
        self.draft_fn = draft_fn or draft_message
        self.evaluate_fn = evaluate_fn or evaluate_authenticity

    def process(self, prospect, signals, now: datetime = None, request_id: str = None):
        """Run one request under the configured timeout.

        Returns:
            FinalOutput on success, ProcessingFailure otherwise. Never raises.
        """
        request_id = request_id or uuid.uuid4().hex[:12]
        timeout = self.config["processing_timeout_seconds"]

        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="outreach")
        try:
            future = executor.submit(self.run, prospect, signals, now, request_id)
            return future.result(timeout=timeout)
        except FuturesTimeout:
            log_pipeline_error(phase="timeout", error_message=f"Processing exceeded {timeout}s",
                               request_id=request_id, code=PROCESSING_TIMEOUT)
            return build_failure(PROCESSING_TIMEOUT,
                                 f"Processing exceeded {timeout} seconds",
                                 "timeout", {"request_id": request_id, "timeout_seconds": timeout})
        finally:
            # Abandon the worker on timeout instead of blocking on it
            executor.shutdown(wait=False, cancel_futures=True)

    def run(self, prospect, signals, now: datetime = None, request_id: str = ""):
        """Run every step synchronously without a timeout. Never raises."""
        started = time.monotonic()
        now = now or datetime.now(timezone.utc)
        try:
            return self._run_steps(prospect, list(signals or []), now, request_id, started)
        except StepFailure as e:
            log_pipeline_error(phase=e.step, error=e.cause, request_id=request_id, code=e.code)
            trail = e.audit_trail or AuditTrail()
            context = {
                "request_id": request_id,
                "error_type": type(e.cause).__name__,
                "audit_log": sanitize_metadata({"audit_entries": trail.entries})["audit_log"],
            }
            return build_failure(e.code, str(e.cause) or type(e.cause).__name__,
                                 e.step, context)
        except Exception as e:
            log_pipeline_error(phase="pipeline", error=e, request_id=request_id,
                               code=PROCESSING_ERROR, severity="critical")
            return build_failure(PROCESSING_ERROR, str(e), "unknown",
                                 {"request_id": request_id})

    def _execute_step(self, step: str, fn: Callable, trail: AuditTrail, request_id: str):
        """Run one step, returning (value, trail) with started/completed entries."""
        trail = trail.record(step, AuditStatus.STARTED)
        logger.debug("Step %s started", step, extra={"request_id": request_id, "step": step})
        try:
            value = fn()
        except Exception as e:
            trail = trail.record(step, AuditStatus.FAILED,
                                 {"error": str(e), "error_type": type(e).__name__})
            raise StepFailure(step, e, trail) from e
        trail = trail.record(step, AuditStatus.COMPLETED)
        logger.debug("Step %s completed", step, extra={"request_id": request_id, "step": step})
        return value, trail

    def _run_steps(self, prospect, signals, now, request_id, started) -> FinalOutput:
        max_words = self.config["max_words"]
        draft_fn = partial(self.draft_fn, max_words=max_words)
        trail = AuditTrail()
        step = partial(self._execute_step, request_id=request_id)

        weighted, trail = step("signal_weighing", lambda: weigh_signals(signals, now), trail)
        hypothesis, trail = step("hypothesis_formation", lambda: form_hypothesis(weighted), trail)
        confidence, trail = step("confidence_classification",
                                 lambda: classify_confidence(hypothesis, weighted), trail)
        strategy, trail = step("strategy_selection", lambda: select_strategy(confidence), trail)
        draft, trail = step("message_drafting",
                            lambda: draft_fn(strategy, hypothesis, prospect), trail)

        outcome, trail = step(
            "authenticity_review",
            lambda: run_revision_loop(
                draft, strategy, hypothesis, prospect, confidence,
                max_attempts=self.config["max_revision_attempts"],
                draft_fn=draft_fn, evaluate_fn=self.evaluate_fn, request_id=request_id,
            ),
            trail,
        )
        trail = trail.extend(outcome.audit_entries)

        alternatives, trail = step(
            "alternative_drafting",
            lambda: generate_alternatives(strategy, hypothesis, prospect,
                                          draft_fn=self.draft_fn, max_words=max_words),
            trail,
        )

        # Audit entries are final once output_assembly starts; the metadata
        # snapshot includes its own started entry.
        trail = trail.record("output_assembly", AuditStatus.STARTED)
        try:
            metadata = {
                "request_id": request_id,
                "version": config.SYSTEM_VERSION,
                "execution_time_ms": int((time.monotonic() - started) * 1000),
                "audit_entries": trail.record("output_assembly", AuditStatus.COMPLETED).entries,
            }
            output = assemble_output(outcome.message, confidence,
                                     build_raw_reasoning(confidence, hypothesis),
                                     alternatives, metadata, max_words=max_words)
        except Exception as e:
            trail = trail.record("output_assembly", AuditStatus.FAILED,
                                 {"error": str(e), "error_type": type(e).__name__})
            raise StepFailure("output_assembly", e, trail) from e

        logger.info("Outreach ready: confidence=%s attempts=%d%s",
                    confidence.value, outcome.attempts,
                    " (best effort)" if outcome.best_effort else "",
                    extra={"request_id": request_id, "confidence": confidence.value,
                           "duration_ms": metadata["execution_time_ms"]})
        return output
