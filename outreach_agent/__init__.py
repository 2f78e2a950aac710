# Intent Outreach Agent - turns prospect intent signals into one calibrated outreach message.
#
# Key modules:
#   agent.py          - OutreachAgent facade (validation, timeout, config, health)
#   models.py         - Immutable value types shared by every engine
#   config.py         - Environment-driven settings
#   logging_config.py - Text/JSON logging setup
#   agents/           - Reasoning engines and the pipeline that runs them
#   api/              - FastAPI surface (/health, /agent/outreach)
