# HTTP surface. Run: uvicorn outreach_agent.api.app:app --port 8000
