"""
Centralized Configuration - Single source of truth for all settings.

All environment variables are read here, validated, and exposed as module-level
constants. Other modules import from here instead of reading os.environ directly.

Usage:
    from outreach_agent.config import PROCESSING_TIMEOUT_SECONDS, LOG_LEVEL
"""

import os
import sys

# ─── VERSION ─────────────────────────────────────────────────

SYSTEM_VERSION = "1.0.0"
SERVICE_NAME = "intent-outreach-agent"

# ─── PROCESSING ──────────────────────────────────────────────

PROCESSING_TIMEOUT_SECONDS = float(os.environ.get("OUTREACH_PROCESSING_TIMEOUT", "30"))
MAX_REVISION_ATTEMPTS = int(os.environ.get("OUTREACH_MAX_REVISIONS", "3"))
MAX_MESSAGE_WORDS = int(os.environ.get("OUTREACH_MAX_WORDS", "120"))
MIN_INTENT_SIGNALS = int(os.environ.get("OUTREACH_MIN_SIGNALS", "2"))

# ─── API ─────────────────────────────────────────────────────

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
ALLOWED_ORIGINS = [
    o.strip() for o in os.environ.get(
        "OUTREACH_CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    ).split(",") if o.strip()
]

# ─── LOGGING ─────────────────────────────────────────────────

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.environ.get("LOG_FORMAT", "text")  # "text" or "json"
LOG_FILE = os.environ.get("LOG_FILE", "")  # empty = stdout only

# ─── FEATURE FLAGS ───────────────────────────────────────────

ENABLE_VERBOSE_LOGGING = os.environ.get("OUTREACH_VERBOSE_LOGGING", "false").lower() == "true"

# ─── VALIDATION ──────────────────────────────────────────────

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_VALID_LOG_FORMATS = {"text", "json"}

_errors = []

if LOG_LEVEL not in _VALID_LOG_LEVELS:
    _errors.append(f"LOG_LEVEL must be one of {_VALID_LOG_LEVELS}, got '{LOG_LEVEL}'")

if LOG_FORMAT not in _VALID_LOG_FORMATS:
    _errors.append(f"LOG_FORMAT must be one of {_VALID_LOG_FORMATS}, got '{LOG_FORMAT}'")

if PROCESSING_TIMEOUT_SECONDS <= 0:
    _errors.append(f"OUTREACH_PROCESSING_TIMEOUT must be positive, got {PROCESSING_TIMEOUT_SECONDS}")

if MAX_REVISION_ATTEMPTS < 1:
    _errors.append(f"OUTREACH_MAX_REVISIONS must be at least 1, got {MAX_REVISION_ATTEMPTS}")

if MAX_MESSAGE_WORDS < 20:
    _errors.append(f"OUTREACH_MAX_WORDS must be at least 20, got {MAX_MESSAGE_WORDS}")

if MIN_INTENT_SIGNALS < 0:
    _errors.append(f"OUTREACH_MIN_SIGNALS cannot be negative, got {MIN_INTENT_SIGNALS}")

if _errors:
    for e in _errors:
        print(f"[config] ERROR: {e}", file=sys.stderr)


def validate(strict: bool = False) -> list:
    """Return the list of configuration errors.

    Args:
        strict: Raise ValueError instead of returning when errors exist.
    """
    if strict and _errors:
        raise ValueError("Invalid configuration: " + "; ".join(_errors))
    return list(_errors)


def print_config():
    """Print current configuration (safe to call, no secrets shown)."""
    print(f"  Service:          {SERVICE_NAME} v{SYSTEM_VERSION}")
    print(f"  Timeout:          {PROCESSING_TIMEOUT_SECONDS}s")
    print(f"  Max revisions:    {MAX_REVISION_ATTEMPTS}")
    print(f"  Max words:        {MAX_MESSAGE_WORDS}")
    print(f"  Min signals:      {MIN_INTENT_SIGNALS}")
    print(f"  API:              {API_HOST}:{API_PORT}")
    print(f"  Log level:        {LOG_LEVEL}")
    print(f"  Log format:       {LOG_FORMAT}")
    print(f"  Log file:         {LOG_FILE or '(stdout)'}")
    print(f"  Verbose logging:  {ENABLE_VERBOSE_LOGGING}")
