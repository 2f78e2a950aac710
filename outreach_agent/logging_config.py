"""
Structured Logging Configuration - Single setup for all modules.

Call setup_logging() once at application startup. Engine modules then use:
    from outreach_agent.logging_config import get_agent_logger
    logger = get_agent_logger("signal_weigher")

Supports two formats:
- "text": Human-readable with timestamps and module names
- "json": Machine-parseable JSON lines for aggregation

Usage:
    from outreach_agent.logging_config import setup_logging
    setup_logging()  # Call once at startup
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone

# Structured fields lifted from `extra=` into JSON output
EXTRA_FIELDS = ("request_id", "step", "confidence", "attempt",
                "failure_code", "duration_ms")


class JSONFormatter(logging.Formatter):
    """Structured JSON log formatter for production use."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
            }

        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        return json.dumps(log_entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable log formatter for development."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


_initialized = False


def setup_logging(level: str = None, fmt: str = None, log_file: str = None):
    """Configure logging for the entire application.

    Safe to call multiple times (idempotent).

    Args:
        level: Log level override (default: LOG_LEVEL from config)
        fmt: Format override ("text" or "json", default: LOG_FORMAT from config)
        log_file: Log file path override (default: LOG_FILE from config)
    """
    global _initialized
    if _initialized:
        return
    _initialized = True

    from outreach_agent import config

    level = level or config.LOG_LEVEL
    fmt = fmt or config.LOG_FORMAT
    log_file = log_file or config.LOG_FILE

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Prevents duplicate output when a host already configured handlers
    root_logger.handlers.clear()

    formatter = JSONFormatter() if fmt == "json" else TextFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logger = logging.getLogger("outreach")
    logger.info("Logging configured: level=%s, format=%s%s",
                level, fmt, f", file={log_file}" if log_file else "")


def get_agent_logger(agent_name: str) -> logging.Logger:
    """Get a named logger for an engine module.

    Usage:
        logger = get_agent_logger("revision_loop")
        logger.info("Draft accepted", extra={"request_id": rid, "attempt": 2})
    """
    return logging.getLogger(f"outreach.agents.{agent_name}")
