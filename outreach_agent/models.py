"""
Intent Outreach Agent - Data Model
Value types passed between the engines. Every instance is immutable once built;
engines return new values instead of mutating their inputs.

Types:
- ProspectProfile: who we are writing to
- RawSignal / WeightedSignal: observed intent evidence, before and after weighing
- Hypothesis: why the prospect might care now
- Strategy: how the message should sound
- AuthenticityIssue / AuthenticityVerdict: draft review result
- AuditEntry: one step transition in a request's trail
- FinalOutput / ProcessingFailure: the two request outcomes
"""

import math
from dataclasses import dataclass, field, asdict, replace
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional


# ─── ENUMERATIONS ───────────────────────────────────────────────

class SignalKind(str, Enum):
    ROLE_CHANGE = "role_change"
    FUNDING_EVENT = "funding_event"
    TECH_ADOPTION = "tech_adoption"
    GROWTH = "growth"
    INDUSTRY_TREND = "industry_trend"


class CompanySize(str, Enum):
    STARTUP = "startup"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    ENTERPRISE = "enterprise"


class Confidence(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class StrategyKind(str, Enum):
    DIRECT_VALUE_ALIGNMENT = "direct_value_alignment"
    INSIGHT_LED_OBSERVATION = "insight_led_observation"
    SOFT_CURIOSITY = "soft_curiosity"


class CtaLevel(str, Enum):
    NONE = "none"
    SOFT = "soft"
    DIRECT = "direct"


class FollowUpTiming(str, Enum):
    IMMEDIATE = "immediate"
    ONE_WEEK = "one_week"
    TWO_WEEKS = "two_weeks"
    ONE_MONTH = "one_month"


class IssueCategory(str, Enum):
    TEMPLATE = "template"
    ARTIFICIAL_LANGUAGE = "artificial_language"
    OVERLY_SALESY = "overly_salesy"
    BUZZWORDS = "buzzwords"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AuditStatus(str, Enum):
    STARTED = "started"
    COMPLETED = "completed"
    FAILED = "failed"


# ─── PROSPECT ───────────────────────────────────────────────────

@dataclass(frozen=True)
class ProspectProfile:
    """Prospect and company context for one outreach request."""
    role: str
    company_name: str
    industry: str
    company_size: Optional[CompanySize]
    contact_name: str
    email: str
    linkedin_url: str = ""
    phone_number: str = ""
    recent_events: tuple = ()

    @property
    def first_name(self) -> str:
        parts = (self.contact_name or "").split()
        return parts[0] if parts else "there"

    def to_dict(self):
        data = asdict(self)
        data["company_size"] = self.company_size.value if self.company_size else None
        data["recent_events"] = list(self.recent_events)
        return data


# ─── SIGNALS ────────────────────────────────────────────────────

@dataclass(frozen=True)
class RawSignal:
    """One piece of observed intent evidence."""
    kind: SignalKind
    description: str
    observed_at: Optional[datetime]
    relevance: float  # 0.0 - 1.0
    source: str


@dataclass(frozen=True)
class WeightedSignal(RawSignal):
    """A RawSignal plus its derived freshness and weight, both in [0.01, 1]."""
    freshness: float = 0.01
    weight: float = 0.01

    @property
    def has_valid_weight(self) -> bool:
        w = self.weight
        return isinstance(w, (int, float)) and not math.isnan(w) and w > 0


# ─── REASONING ──────────────────────────────────────────────────

@dataclass(frozen=True)
class Hypothesis:
    """Best guess at why the prospect may care now, with its support and limits."""
    primary_reason: str
    supporting_evidence: tuple = ()
    confidence_factors: tuple = ()
    caveats: tuple = ()

    def to_dict(self):
        return {k: list(v) if isinstance(v, tuple) else v for k, v in asdict(self).items()}


@dataclass(frozen=True)
class Strategy:
    kind: StrategyKind
    tone_rules: tuple
    content_focus: str
    cta_level: CtaLevel
    variant: str = "standard"

    def with_tone_variant(self, variant: str, extra_rules: tuple = (),
                          extra_focus: str = "") -> "Strategy":
        """Return a copy of this strategy adjusted toward a named tone variant."""
        focus = f"{self.content_focus}; {extra_focus}" if extra_focus else self.content_focus
        return replace(self, variant=variant,
                       tone_rules=tuple(self.tone_rules) + tuple(extra_rules),
                       content_focus=focus)


# ─── AUTHENTICITY ───────────────────────────────────────────────

@dataclass(frozen=True)
class AuthenticityIssue:
    category: IssueCategory
    severity: Severity
    note: str
    suggestion: str = ""

    def to_dict(self):
        return {"category": self.category.value, "severity": self.severity.value,
                "note": self.note, "suggestion": self.suggestion}


@dataclass(frozen=True)
class AuthenticityVerdict:
    """Result of reviewing one draft. score is 0-100."""
    score: int
    acceptable: bool
    must_revise: bool
    issues: tuple = ()

    def to_dict(self):
        return {"score": self.score, "acceptable": self.acceptable,
                "must_revise": self.must_revise,
                "issues": [i.to_dict() for i in self.issues]}


# ─── AUDIT + OUTCOMES ───────────────────────────────────────────

@dataclass(frozen=True)
class AuditEntry:
    step: str
    timestamp: datetime
    status: AuditStatus
    details: Optional[dict] = None

    def to_dict(self, include_details: bool = False):
        data = {"step": self.step, "timestamp": self.timestamp.isoformat(),
                "status": self.status.value}
        if include_details and self.details is not None:
            data["details"] = self.details
        return data


@dataclass(frozen=True)
class AuditTrail:
    """Append-only audit log threaded through a single request.

    record() returns a new trail; nothing is shared between requests.
    """
    entries: tuple = ()

    def record(self, step: str, status: AuditStatus, details: dict = None) -> "AuditTrail":
        entry = AuditEntry(step=step, timestamp=datetime.now(timezone.utc),
                           status=status, details=details)
        return AuditTrail(self.entries + (entry,))

    def extend(self, entries) -> "AuditTrail":
        return AuditTrail(self.entries + tuple(entries))

    def completed_steps(self) -> list:
        return [e.step for e in self.entries if e.status == AuditStatus.COMPLETED]

    def __len__(self):
        return len(self.entries)


@dataclass(frozen=True)
class FinalOutput:
    confidence: Confidence
    reasoning_summary: str
    message: str
    alternatives: tuple
    follow_up_timing: FollowUpTiming
    metadata: dict = field(default_factory=dict)

    def to_dict(self):
        return {
            "confidence": self.confidence.value,
            "reasoning_summary": self.reasoning_summary,
            "message": self.message,
            "alternatives": list(self.alternatives),
            "follow_up_timing": self.follow_up_timing.value,
            "metadata": self.metadata,
        }


@dataclass(frozen=True)
class ProcessingFailure:
    code: str
    message: str
    failed_step: str
    remediation: str = ""
    context: dict = field(default_factory=dict)

    def to_dict(self):
        return asdict(self)


# ─── FACTORIES ──────────────────────────────────────────────────

def make_signal(kind, description: str, relevance: float, source: str,
                days_ago: float = 0, now: datetime = None) -> RawSignal:
    """Build a RawSignal observed `days_ago` days before `now`.

    Relevance is clamped into [0, 1] and string kinds are coerced to SignalKind.
    """
    now = now or datetime.now(timezone.utc)
    return RawSignal(
        kind=SignalKind(kind),
        description=description,
        observed_at=now - timedelta(days=days_ago),
        relevance=max(0.0, min(1.0, relevance)),
        source=source,
    )


def make_prospect(role: str, company_name: str, industry: str, contact_name: str,
                  email: str, company_size="medium", **extra) -> ProspectProfile:
    return ProspectProfile(
        role=role,
        company_name=company_name,
        industry=industry,
        company_size=CompanySize(company_size) if company_size else None,
        contact_name=contact_name,
        email=email,
        linkedin_url=extra.get("linkedin_url", ""),
        phone_number=extra.get("phone_number", ""),
        recent_events=tuple(extra.get("recent_events", ())),
    )


def is_valid_confidence_level(value) -> bool:
    return value in {c.value for c in Confidence}


def is_valid_signal_kind(value) -> bool:
    return value in {k.value for k in SignalKind}
