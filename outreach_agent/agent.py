"""
Intent Outreach Agent - Facade
Single entry point used by the API and scripts.

    validate input -> run the reasoning pipeline under a timeout -> log summary

Usage:
    from outreach_agent.agent import create_agent

    agent = create_agent({"max_revision_attempts": 2})
    result = agent.process(prospect, signals)
"""

import uuid
from datetime import datetime, timezone

from outreach_agent import config
from outreach_agent.agents.error_handler import VALIDATION_FAILED, build_failure
from outreach_agent.agents.input_validator import validate_input
from outreach_agent.agents.reasoning_pipeline import OutreachPipeline
from outreach_agent.logging_config import get_agent_logger
from outreach_agent.models import FinalOutput

logger = get_agent_logger("agent")

DEFAULT_CONFIG = {
    "max_revision_attempts": config.MAX_REVISION_ATTEMPTS,
    "processing_timeout_seconds": config.PROCESSING_TIMEOUT_SECONDS,
    "max_words": config.MAX_MESSAGE_WORDS,
    "min_signals": config.MIN_INTENT_SIGNALS,
    "verbose_logging": config.ENABLE_VERBOSE_LOGGING,
}

_POSITIVE_KEYS = ("max_revision_attempts", "processing_timeout_seconds", "max_words")


def _check_config(cfg: dict):
    for key in _POSITIVE_KEYS:
        if cfg[key] <= 0:
            raise ValueError(f"{key} must be positive, got {cfg[key]}")
    if cfg["min_signals"] < 0:
        raise ValueError(f"min_signals cannot be negative, got {cfg['min_signals']}")


class OutreachAgent:
    """Validates requests and runs them through the reasoning pipeline."""

    def __init__(self, config: dict = None, draft_fn=None, evaluate_fn=None):
        self.config = {**DEFAULT_CONFIG, **(config or {})}
        _check_config(self.config)
        self._draft_fn = draft_fn
        self._evaluate_fn = evaluate_fn

    def _pipeline(self) -> OutreachPipeline:
        return OutreachPipeline(config=self.config, draft_fn=self._draft_fn,
                                evaluate_fn=self._evaluate_fn)

    def validate_inputs(self, prospect, signals, now: datetime = None):
        return validate_input(prospect, signals, now=now,
                              min_signals=self.config["min_signals"])

    def process(self, prospect, signals, now: datetime = None):
        """Process one outreach request.

        Returns:
            FinalOutput, or ProcessingFailure (validation, timeout, or step error).
        """
        request_id = uuid.uuid4().hex[:12]
        validation = self.validate_inputs(prospect, signals, now)
        if not validation.is_valid:
            logger.info("Validation failed with %d errors", len(validation.errors),
                        extra={"request_id": request_id, "failure_code": VALIDATION_FAILED})
            return build_failure(
                VALIDATION_FAILED,
                f"Input validation failed: {len(validation.errors)} error(s)",
                "input_validation",
                {"request_id": request_id, **validation.to_dict()},
            )

        result = self._pipeline().process(prospect, signals, now=now, request_id=request_id)

        if self.config["verbose_logging"]:
            if isinstance(result, FinalOutput):
                logger.info("Request %s: confidence=%s follow_up=%s steps=%s",
                            request_id, result.confidence.value,
                            result.follow_up_timing.value,
                            ", ".join(result.metadata.get("workflow_steps", [])),
                            extra={"request_id": request_id})
            else:
                logger.info("Request %s failed: %s at %s", request_id,
                            result.code, result.failed_step,
                            extra={"request_id": request_id, "failure_code": result.code})
        return result

    def is_deterministic(self, prospect, signals, now: datetime = None) -> bool:
        """Run the request twice against the same reference time and compare outputs."""
        now = now or datetime.now(timezone.utc)
        first = self.process(prospect, signals, now=now)
        second = self.process(prospect, signals, now=now)
        if not isinstance(first, FinalOutput) or not isinstance(second, FinalOutput):
            return False
        return (first.confidence == second.confidence
                and first.reasoning_summary == second.reasoning_summary
                and first.message == second.message
                and first.alternatives == second.alternatives
                and first.follow_up_timing == second.follow_up_timing)

    def get_config(self) -> dict:
        return dict(self.config)

    def update_config(self, **changes):
        updated = {**self.config, **changes}
        _check_config(updated)
        self.config = updated

    def get_health_status(self) -> dict:
        return {
            "status": "healthy",
            "version": config.SYSTEM_VERSION,
            "config": self.get_config(),
        }


def create_agent(config: dict = None) -> OutreachAgent:
    return OutreachAgent(config)
