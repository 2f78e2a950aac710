"""
Intent Outreach Agent - Input Validator
Structural checks on a request before any reasoning runs.

Errors block processing; warnings only note that confidence will likely be
reduced (weak or old signals).
"""

import math
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from outreach_agent import config
from outreach_agent.models import SignalKind, is_valid_signal_kind

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
WEAK_RELEVANCE = 0.3
OLD_SIGNAL_DAYS = 365


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    message: str
    code: str

    def to_dict(self):
        return {"field": self.field, "message": self.message, "code": self.code}


@dataclass(frozen=True)
class ValidationWarning:
    field: str
    message: str
    impact: str  # low | medium | high

    def to_dict(self):
        return {"field": self.field, "message": self.message, "impact": self.impact}


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: tuple = field(default_factory=tuple)
    warnings: tuple = field(default_factory=tuple)

    def to_dict(self):
        return {"is_valid": self.is_valid,
                "errors": [e.to_dict() for e in self.errors],
                "warnings": [w.to_dict() for w in self.warnings]}


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _validate_prospect(prospect, errors: list):
    if prospect is None:
        errors.append(ValidationIssue("prospect", "Prospect data is required",
                                      "MISSING_PROSPECT_DATA"))
        return

    required = [
        ("role", "MISSING_ROLE", "Prospect role is required"),
        ("company_name", "MISSING_COMPANY_NAME", "Company name is required"),
        ("industry", "MISSING_COMPANY_INDUSTRY", "Company industry is required"),
        ("company_size", "MISSING_COMPANY_SIZE", "Company size is required"),
        ("contact_name", "MISSING_CONTACT_NAME", "Contact name is required"),
        ("email", "MISSING_CONTACT_EMAIL", "Contact email is required"),
    ]
    for attr, code, message in required:
        if _blank(getattr(prospect, attr, None)):
            errors.append(ValidationIssue(f"prospect.{attr}", message, code))

    email = getattr(prospect, "email", None)
    if not _blank(email) and not EMAIL_PATTERN.match(email.strip()):
        errors.append(ValidationIssue("prospect.email", "Invalid email format",
                                      "INVALID_EMAIL_FORMAT"))


def _to_utc(ts):
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def _validate_signal(index: int, signal, now: datetime, errors: list, warnings: list):
    prefix = f"signals[{index}]"

    kind = getattr(signal, "kind", None)
    if _blank(kind):
        errors.append(ValidationIssue(f"{prefix}.kind", "Signal kind is required",
                                      "MISSING_SIGNAL_TYPE"))
    elif not isinstance(kind, SignalKind) and not is_valid_signal_kind(kind):
        errors.append(ValidationIssue(f"{prefix}.kind", f"Unknown signal kind '{kind}'",
                                      "INVALID_SIGNAL_TYPE"))

    if _blank(getattr(signal, "description", None)):
        errors.append(ValidationIssue(f"{prefix}.description", "Signal description is required",
                                      "MISSING_SIGNAL_DESCRIPTION"))
    if _blank(getattr(signal, "source", None)):
        errors.append(ValidationIssue(f"{prefix}.source", "Signal source is required",
                                      "MISSING_SIGNAL_SOURCE"))

    relevance = getattr(signal, "relevance", None)
    if (isinstance(relevance, bool) or not isinstance(relevance, (int, float))
            or math.isnan(relevance) or not 0 <= relevance <= 1):
        errors.append(ValidationIssue(f"{prefix}.relevance",
                                      "Relevance must be a number between 0 and 1",
                                      "INVALID_RELEVANCE_SCORE"))
    elif relevance < WEAK_RELEVANCE:
        warnings.append(ValidationWarning(f"{prefix}.relevance",
                                          "Low relevance signal may reduce confidence",
                                          "medium"))

    observed = getattr(signal, "observed_at", None)
    if observed is None:
        errors.append(ValidationIssue(f"{prefix}.observed_at", "Signal timestamp is required",
                                      "MISSING_TIMESTAMP"))
    elif not isinstance(observed, datetime):
        errors.append(ValidationIssue(f"{prefix}.observed_at", "Invalid timestamp format",
                                      "INVALID_TIMESTAMP_FORMAT"))
    else:
        observed = _to_utc(observed)
        if observed > now:
            errors.append(ValidationIssue(f"{prefix}.observed_at",
                                          "Signal timestamp cannot be in the future",
                                          "FUTURE_TIMESTAMP"))
        elif (now - observed).days > OLD_SIGNAL_DAYS:
            warnings.append(ValidationWarning(f"{prefix}.observed_at",
                                              "Signal is more than a year old",
                                              "low"))


def validate_input(prospect, signals, now: datetime = None,
                   min_signals: int = None) -> ValidationResult:
    """Validate a prospect and its intent signals.

    Args:
        prospect: ProspectProfile (or None).
        signals: Sequence of RawSignal.
        now: Reference time for timestamp checks (default: current UTC time).
        min_signals: Minimum number of signals (default: MIN_INTENT_SIGNALS).

    Returns:
        ValidationResult; is_valid is False when any error was found.
    """
    now = _to_utc(now) if now else datetime.now(timezone.utc)
    min_signals = config.MIN_INTENT_SIGNALS if min_signals is None else min_signals
    errors, warnings = [], []

    _validate_prospect(prospect, errors)

    if not isinstance(signals, (list, tuple)):
        errors.append(ValidationIssue("signals", "Intent signals must be a list",
                                      "INVALID_INTENT_SIGNALS_TYPE"))
    else:
        if len(signals) < min_signals:
            errors.append(ValidationIssue(
                "signals", f"At least {min_signals} intent signals are required",
                "INSUFFICIENT_INTENT_SIGNALS"))
        for i, signal in enumerate(signals):
            _validate_signal(i, signal, now, errors, warnings)

        weak_or_old = len(warnings)
        if weak_or_old:
            warnings.append(ValidationWarning(
                "signals",
                f"{weak_or_old} weak or old signals detected - confidence will be reduced",
                "medium"))

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))
