"""
Log formatting for ZenJourney processes.

Both formatters stamp lines with the current request_id and run_id (see
observability.context). JSON output also carries every `extra=` field,
e.g. the planner's scheduled/unscheduled/skipped counts.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from .context import get_request_id, get_run_id

# Attributes every LogRecord has; anything else came in through `extra=`
_STANDARD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message"}


def _correlation_ids() -> dict[str, str]:
    ids = {"request_id": get_request_id(), "run_id": get_run_id()}
    return {k: v for k, v in ids.items() if v}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line:

        {"timestamp": "2026-03-02T08:00:00.000Z", "level": "INFO",
         "logger": "zenjourney.planning.planner", "message": "Planned 2026-03-02: ...",
         "run_id": "plan-1f2e3d4c5b6a", "formula": "efficiency", "scheduled": 4}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_correlation_ids(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        entry.update({k: v for k, v in record.__dict__.items() if k not in _STANDARD_ATTRS})
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """Terminal-friendly lines; IDs are shown in brackets before the message."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        ids = "".join(f"[{i[:17]}] " for i in _correlation_ids().values())
        line = f"{timestamp} [{record.levelname}] {record.name}: {ids}{record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(
    level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """
    Install a single stderr handler on the root logger.

    Args:
        level: Root level name. Defaults to ZEN_LOG_LEVEL.
        json_format: JSON (True) or human (False) lines. Defaults to
            ZEN_LOG_JSON; when that is unset, JSON unless stderr is a TTY.
    """
    from zenjourney import config

    level = level or config.LOG_LEVEL
    if json_format is None:
        json_format = config.LOG_JSON
    if json_format is None:
        json_format = not sys.stderr.isatty()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if json_format else HumanFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
