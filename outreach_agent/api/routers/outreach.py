"""Outreach generation routes."""

import time
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from outreach_agent.agent import OutreachAgent, create_agent
from outreach_agent.agents.error_handler import PROCESSING_ERROR, PROCESSING_TIMEOUT, VALIDATION_FAILED
from outreach_agent.models import CompanySize, FinalOutput, ProspectProfile, RawSignal, SignalKind

router = APIRouter(prefix="/agent", tags=["outreach"])

_agent = create_agent()


def get_agent() -> OutreachAgent:
    return _agent


class ProspectIn(BaseModel):
    role: str = ""
    company_name: str = ""
    industry: str = ""
    company_size: Optional[CompanySize] = None
    contact_name: str = ""
    email: str = ""
    linkedin_url: Optional[str] = ""
    phone_number: Optional[str] = ""
    recent_events: List[str] = []

    def to_profile(self) -> ProspectProfile:
        return ProspectProfile(
            role=self.role,
            company_name=self.company_name,
            industry=self.industry,
            company_size=self.company_size,
            contact_name=self.contact_name,
            email=self.email,
            linkedin_url=self.linkedin_url or "",
            phone_number=self.phone_number or "",
            recent_events=tuple(self.recent_events),
        )


class SignalIn(BaseModel):
    kind: SignalKind
    description: str = ""
    observed_at: Optional[datetime] = None
    relevance: float
    source: str = ""

    def to_signal(self) -> RawSignal:
        return RawSignal(kind=self.kind, description=self.description,
                         observed_at=self.observed_at, relevance=self.relevance,
                         source=self.source)


class OutreachRequest(BaseModel):
    prospect: ProspectIn
    signals: List[SignalIn] = []


def status_for(code: str) -> int:
    if code == VALIDATION_FAILED:
        return 400
    if code == PROCESSING_TIMEOUT:
        return 408
    if code.endswith("_ERROR") and code != PROCESSING_ERROR:
        return 422
    return 500


@router.post("/outreach")
def generate_outreach(req: OutreachRequest, agent: OutreachAgent = Depends(get_agent)):
    started = time.monotonic()
    result = agent.process(req.prospect.to_profile(), [s.to_signal() for s in req.signals])
    envelope = {
        "processing_time_ms": int((time.monotonic() - started) * 1000),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    if isinstance(result, FinalOutput):
        return {"success": True, "data": result.to_dict(), **envelope}
    return JSONResponse(status_code=status_for(result.code),
                        content={"success": False, "error": result.to_dict(), **envelope})
