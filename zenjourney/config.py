"""
Centralized configuration for ZenJourney.

All values that vary by deployment belong here.
Override via environment variables where marked.
"""

import os

# ============================================================
# Workday defaults
# ============================================================

DEFAULT_WORKDAY_START: str = os.environ.get("ZEN_WORKDAY_START", "09:00")
"""Start of the schedulable day (HH:MM, 24h) when no workday file exists."""

DEFAULT_WORKDAY_END: str = os.environ.get("ZEN_WORKDAY_END", "17:00")
"""End of the schedulable day (HH:MM, 24h) when no workday file exists."""

DEFAULT_BREAK_MINUTES: int = int(os.environ.get("ZEN_BREAK_MINUTES", "15"))
"""Gap inserted between consecutive scheduled tasks."""

DEFAULT_TIMEZONE: str | None = os.environ.get("ZEN_TIMEZONE") or None
"""IANA zone the day window is resolved in. Unset = reference date's tzinfo."""

# ============================================================
# Scoring
# ============================================================

SCORING_FORMULA: str = os.environ.get("ZEN_SCORING_FORMULA", "efficiency")
"""Priority score formula: 'efficiency' (default) or 'additive'."""

# ============================================================
# Logging
# ============================================================

LOG_LEVEL: str = os.environ.get("ZEN_LOG_LEVEL", "INFO")
"""Root log level."""

_log_json_env = os.environ.get("ZEN_LOG_JSON", "").strip().lower()
LOG_JSON: bool | None = None if not _log_json_env else _log_json_env in ("1", "true", "yes")
"""Force JSON (true) or human (false) log lines. Unset = auto-detect from TTY."""

# ============================================================
# API
# ============================================================

CORS_ORIGINS: list[str] = [
    o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()
]
"""Allowed CORS origins for the HTTP API. '*' allows all."""

API_PORT: int = int(os.environ.get("ZEN_API_PORT", "8420"))
"""Port used when the API server is started directly."""
