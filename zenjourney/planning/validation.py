"""
Task and workday-config validation.

Task problems are per-record (the scheduler skips the task and reports
it); config problems are fatal to the scheduling call.
"""

import math
import numbers

from .errors import InvalidTaskField, InvalidWorkdayConfig
from .models import Task, WorkdayConfig
from .timeparse import parse_time_of_day, resolve_timezone

MIN_PRIORITY = 1
MAX_PRIORITY = 5
MAX_EFFORT_HOURS = 8.0


def is_real_number(value) -> bool:
    """True for finite ints/floats/decimals. bool is not a number here."""
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError, OverflowError):
        return False


def validate_priority(priority) -> int:
    if not is_real_number(priority) or float(priority) != int(priority):
        raise InvalidTaskField(
            f"priority must be an integer between {MIN_PRIORITY} and {MAX_PRIORITY}, got {priority!r}",
            field="priority",
        )
    if not MIN_PRIORITY <= int(priority) <= MAX_PRIORITY:
        raise InvalidTaskField(
            f"priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}, got {priority!r}",
            field="priority",
        )
    return int(priority)


def validate_effort(effort) -> float:
    if not is_real_number(effort) or not 0 < float(effort) <= MAX_EFFORT_HOURS:
        raise InvalidTaskField(
            f"effort must be a number of hours in (0, {MAX_EFFORT_HOURS:g}], got {effort!r}",
            field="effort",
        )
    return float(effort)


def validate_task(task: Task) -> None:
    """
    Check the fields scheduling depends on.

    Raises:
        InvalidTaskField: If priority or effort is out of contract
    """
    validate_priority(task.priority)
    validate_effort(task.effort)


def validate_workday_config(config: WorkdayConfig) -> None:
    """
    Check a workday config without resolving it against a date.

    Raises:
        InvalidWorkdayConfig: On malformed times, start >= end, a bad break,
            or an unknown timezone
    """
    start = parse_time_of_day(config.start_time, "start_time")
    end = parse_time_of_day(config.end_time, "end_time")
    if start >= end:
        raise InvalidWorkdayConfig(
            f"Workday start {config.start_time} must be before end {config.end_time}",
            field="end_time",
        )

    brk = config.break_duration
    if isinstance(brk, bool) or not isinstance(brk, int) or brk < 0:
        raise InvalidWorkdayConfig(
            f"break_duration must be a non-negative integer of minutes, got {brk!r}",
            field="break_duration",
        )

    resolve_timezone(config.timezone)
