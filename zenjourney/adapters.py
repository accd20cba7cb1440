"""
Boundary adapters - backend records <-> canonical planning types.

The same task shape arrives from several backends:
- relational rows: snake_case keys, score as a decimal string ("12.50")
- document-store dicts: camelCase keys, timestamps as epoch ms or ISO strings
- on-device JSON: camelCase keys, ISO strings with a trailing 'Z'

Everything is coerced here so the scheduler only ever sees Task and
WorkdayConfig. Values that can't be coerced are passed through unchanged
and left for validation to report; an unreadable timestamp becomes None.
"""

from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from zenjourney.planning.errors import InvalidTaskField
from zenjourney.planning.models import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_END_TIME,
    DEFAULT_START_TIME,
    ScheduleResult,
    Task,
    WorkdayConfig,
)

# canonical field -> accepted record keys, first match wins
_TASK_KEYS = {
    "id": ("id", "task_id", "taskId"),
    "name": ("name", "title"),
    "priority": ("priority",),
    "effort": ("effort", "effort_hours", "effortHours"),
    "completed": ("completed", "done"),
    "priority_score": ("priority_score", "priorityScore"),
    "created_at": ("created_at", "createdAt"),
    "scheduled_start": ("scheduled_start", "scheduledStart"),
    "scheduled_end": ("scheduled_end", "scheduledEnd"),
}

_CONFIG_KEYS = {
    "start_time": ("start_time", "startTime", "start"),
    "end_time": ("end_time", "endTime", "end"),
    "break_duration": ("break_duration", "breakDuration", "break_minutes", "break"),
    "timezone": ("timezone", "tz"),
}


def _pick(record: dict, keys: tuple[str, ...], default: Any = None) -> Any:
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return default


def coerce_number(value: Any) -> Any:
    """'3' -> 3, '2.5' -> 2.5, Decimal('12.50') -> 12.5. Anything else unchanged."""
    if isinstance(value, bool):
        return value
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            number = Decimal(text)
        except InvalidOperation:
            return value
        if not number.is_finite():
            return value
        return int(number) if number == number.to_integral_value() and "." not in text else float(number)
    return value


def coerce_timestamp(value: Any) -> datetime | None:
    """
    Parse a timestamp from datetime, epoch milliseconds, or ISO-8601.

    Epoch values and 'Z'-suffixed strings come back UTC-aware.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "t")
    return bool(value)


def task_from_record(record: dict) -> Task:
    """
    Build a Task from any backend's task record.

    Raises:
        InvalidTaskField: If the record has no id
    """
    task_id = _pick(record, _TASK_KEYS["id"])
    if task_id is None or task_id == "":
        raise InvalidTaskField("Task record has no id", field="id")

    score = coerce_number(_pick(record, _TASK_KEYS["priority_score"]))
    return Task(
        id=task_id,
        name=str(_pick(record, _TASK_KEYS["name"], "")),
        priority=coerce_number(_pick(record, _TASK_KEYS["priority"])),
        effort=coerce_number(_pick(record, _TASK_KEYS["effort"])),
        completed=coerce_bool(_pick(record, _TASK_KEYS["completed"], False)),
        priority_score=score if isinstance(score, (int, float)) and not isinstance(score, bool) else None,
        created_at=coerce_timestamp(_pick(record, _TASK_KEYS["created_at"])),
        scheduled_start=coerce_timestamp(_pick(record, _TASK_KEYS["scheduled_start"])),
        scheduled_end=coerce_timestamp(_pick(record, _TASK_KEYS["scheduled_end"])),
    )


def tasks_from_records(records: list[dict]) -> list[Task]:
    return [task_from_record(r) for r in records]


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def task_to_record(task: Task) -> dict:
    """camelCase record with ISO timestamps, as the web clients store it."""
    return {
        "id": task.id,
        "name": task.name,
        "priority": task.priority,
        "effort": task.effort,
        "completed": task.completed,
        "priorityScore": task.priority_score,
        "createdAt": _iso(task.created_at),
        "scheduledStart": _iso(task.scheduled_start),
        "scheduledEnd": _iso(task.scheduled_end),
    }


def workday_config_from_record(record: dict | None) -> WorkdayConfig:
    """Build a WorkdayConfig, filling missing fields with the stock defaults."""
    record = record or {}
    brk = coerce_number(_pick(record, _CONFIG_KEYS["break_duration"], DEFAULT_BREAK_MINUTES))
    if isinstance(brk, float) and brk.is_integer():
        brk = int(brk)
    return WorkdayConfig(
        start_time=str(_pick(record, _CONFIG_KEYS["start_time"], DEFAULT_START_TIME)),
        end_time=str(_pick(record, _CONFIG_KEYS["end_time"], DEFAULT_END_TIME)),
        break_duration=brk,
        timezone=_pick(record, _CONFIG_KEYS["timezone"]),
    )


def schedule_to_records(result: ScheduleResult) -> list[dict]:
    """Write-back payload: one {id, scheduledStart, scheduledEnd} per placed task."""
    return [
        {
            "id": s.task.id,
            "scheduledStart": s.start.isoformat(),
            "scheduledEnd": s.end.isoformat(),
        }
        for s in result.scheduled
    ]
