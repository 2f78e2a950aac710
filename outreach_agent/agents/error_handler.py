"""
Agent Error Handler - Turns step failures into structured results.

Engines raise ordinary exceptions. The pipeline wraps each step, converts a
raised exception into a StepFailure naming the step, and finally into a
ProcessingFailure carrying a code and a remediation hint. Failures are logged
through log_pipeline_error() at the matching severity.

Usage:
    from outreach_agent.agents.error_handler import build_failure, log_pipeline_error

    try:
        result = run_step()
    except Exception as e:
        log_pipeline_error(phase="message_drafting", error=e, request_id=rid)
        return build_failure("MESSAGE_DRAFTING_ERROR", str(e), "message_drafting")
"""

import logging

from outreach_agent.models import ProcessingFailure

logger = logging.getLogger("outreach.error_handler")

VALIDATION_FAILED = "VALIDATION_FAILED"
PROCESSING_TIMEOUT = "PROCESSING_TIMEOUT"
PROCESSING_ERROR = "PROCESSING_ERROR"

STEP_ERROR_CODES = {
    "signal_weighing": "SIGNAL_WEIGHING_ERROR",
    "hypothesis_formation": "HYPOTHESIS_FORMATION_ERROR",
    "confidence_classification": "CONFIDENCE_CLASSIFICATION_ERROR",
    "strategy_selection": "STRATEGY_SELECTION_ERROR",
    "message_drafting": "MESSAGE_DRAFTING_ERROR",
    "authenticity_review": "AUTHENTICITY_REVIEW_ERROR",
    "alternative_drafting": "ALTERNATIVE_DRAFTING_ERROR",
    "output_assembly": "OUTPUT_ASSEMBLY_ERROR",
}

REMEDIATIONS = {
    VALIDATION_FAILED: "Check required prospect fields and provide at least two well-formed intent signals.",
    PROCESSING_TIMEOUT: "Retry the request; reduce the number of signals if the timeout persists.",
    PROCESSING_ERROR: "Retry the request; if it fails again, report it with the request id.",
    "SIGNAL_WEIGHING_ERROR": "Verify signal relevance values are numbers between 0 and 1 and timestamps are valid.",
    "HYPOTHESIS_FORMATION_ERROR": "Provide signals with clear, specific descriptions.",
    "CONFIDENCE_CLASSIFICATION_ERROR": "Review signal quality and hypothesis inputs.",
    "STRATEGY_SELECTION_ERROR": "Confidence level could not be mapped to a strategy; retry the request.",
    "MESSAGE_DRAFTING_ERROR": "Check prospect name, company, and industry values.",
    "AUTHENTICITY_REVIEW_ERROR": "Retry the request; the draft could not be reviewed.",
    "ALTERNATIVE_DRAFTING_ERROR": "Retry the request; alternative drafts could not be produced.",
    "OUTPUT_ASSEMBLY_ERROR": "Retry the request; the final result could not be assembled.",
}

GENERIC_REMEDIATION = "Retry the request or contact support with the request id."


class StepFailure(Exception):
    """A pipeline step raised. Carries the step, its code, and the audit trail so far."""

    def __init__(self, step: str, cause: Exception, audit_trail=None):
        super().__init__(f"{step} failed: {cause}")
        self.step = step
        self.code = STEP_ERROR_CODES.get(step, PROCESSING_ERROR)
        self.cause = cause
        self.audit_trail = audit_trail


def remediation_for(code: str) -> str:
    return REMEDIATIONS.get(code, GENERIC_REMEDIATION)


def build_failure(code: str, message: str, failed_step: str,
                  context: dict = None) -> ProcessingFailure:
    return ProcessingFailure(code=code, message=message, failed_step=failed_step,
                             remediation=remediation_for(code), context=context or {})


def log_pipeline_error(
    phase: str,
    error: Exception = None,
    error_message: str = None,
    request_id: str = None,
    code: str = None,
    context: dict = None,
    severity: str = "error",
):
    """Log a pipeline failure.

    Args:
        phase: Step where the failure occurred.
        error: The exception object (optional if error_message provided).
        error_message: Human-readable description.
        request_id: Request the failure belongs to.
        code: Failure code reported to the caller.
        context: Additional context for the log line.
        severity: "warning", "error", or "critical".
    """
    msg = error_message or (str(error) if error else "Unknown error")
    error_type = type(error).__name__ if error else "UnknownError"
    log_extra = {
        "step": phase,
        "request_id": request_id or "",
        "failure_code": code or "",
    }
    if context:
        msg = f"{msg} (context keys: {', '.join(sorted(context))})"

    if severity == "critical":
        logger.critical("Pipeline error in %s [%s]: %s", phase, error_type, msg, extra=log_extra)
    elif severity == "warning":
        logger.warning("Pipeline error in %s [%s]: %s", phase, error_type, msg, extra=log_extra)
    else:
        logger.error("Pipeline error in %s [%s]: %s", phase, error_type, msg, extra=log_extra)
