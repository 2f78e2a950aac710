"""
Intent Outreach Agent - FastAPI Backend
Health check and the outreach endpoint.

Run: uvicorn outreach_agent.api.app:app --reload --port 8000
"""

from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from outreach_agent import config
from outreach_agent.api.routers import outreach
from outreach_agent.logging_config import setup_logging

setup_logging()

app = FastAPI(
    title="Intent Outreach Agent",
    description="Turns prospect intent signals into one calibrated outreach message.",
    version=config.SYSTEM_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ─── ROUTERS ─────────────────────────────────────────────────
app.include_router(outreach.router)


@app.get("/health")
def health():
    return {
        "status": "ok",
        "service": config.SERVICE_NAME,
        "version": config.SYSTEM_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "health": outreach.get_agent().get_health_status(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
