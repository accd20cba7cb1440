"""
Time-of-day parsing and day-window resolution.
"""

import re
from datetime import date, datetime, time, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import InvalidWorkdayConfig
from .models import WorkdayConfig

TIME_OF_DAY_RE = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")


def parse_time_of_day(value: str, field: str = "time") -> time:
    """Parse a 24h HH:MM string ('9:30' and '09:30' are both accepted)."""
    if not isinstance(value, str) or not TIME_OF_DAY_RE.fullmatch(value):
        raise InvalidWorkdayConfig(
            f"{field} must be a 24-hour HH:MM time, got {value!r}", field=field
        )
    hours, minutes = value.split(":")
    return time(int(hours), int(minutes))


def resolve_timezone(name: str | None) -> tzinfo | None:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidWorkdayConfig(f"Unknown timezone {name!r}", field="timezone") from e


def resolve_day_window(config: WorkdayConfig, reference_date: date) -> tuple[datetime, datetime]:
    """
    Combine the configured start/end times with a reference date.

    A bare date gives naive datetimes. A datetime lends its date and its
    tzinfo. A configured timezone wins over both: the reference is first
    converted into that zone to pick the calendar day.

    Raises:
        InvalidWorkdayConfig: If a time is malformed or start is not before end
    """
    start_t = parse_time_of_day(config.start_time, "start_time")
    end_t = parse_time_of_day(config.end_time, "end_time")
    tz = resolve_timezone(config.timezone)

    if isinstance(reference_date, datetime):
        if tz is not None:
            if reference_date.tzinfo is not None:
                reference_date = reference_date.astimezone(tz)
        else:
            tz = reference_date.tzinfo
        day = reference_date.date()
    elif isinstance(reference_date, date):
        day = reference_date
    else:
        raise TypeError(f"reference_date must be a date or datetime, got {type(reference_date).__name__}")

    day_start = datetime.combine(day, start_t, tzinfo=tz)
    day_end = datetime.combine(day, end_t, tzinfo=tz)

    if day_start >= day_end:
        raise InvalidWorkdayConfig(
            f"Workday start {config.start_time} must be before end {config.end_time} "
            "(windows crossing midnight are not supported)",
            field="end_time",
        )
    return day_start, day_end


def align_datetimes(first, second):
    """
    Make two timestamps subtractable.

    When exactly one of them is naive it is read as local wall-clock time
    and made aware; the aware one is left untouched. Anything that isn't a
    datetime passes through.
    """
    if not isinstance(first, datetime) or not isinstance(second, datetime):
        return first, second
    if (first.tzinfo is None) == (second.tzinfo is None):
        return first, second
    if first.tzinfo is None:
        return first.astimezone(), second
    return first, second.astimezone()
