# ZenJourney - Day Planning Core
"""
Exports for the API, the CLI and other consumers.
"""

from .planning import (
    DayPlanner,
    InvalidTaskField,
    InvalidWorkdayConfig,
    ScheduleResult,
    ScheduledTask,
    SchedulingError,
    Task,
    WorkdayConfig,
    compute_priority_score,
    schedule_day,
    summarize_schedule,
)

__version__ = "1.0.0"

__all__ = [
    "compute_priority_score",
    "schedule_day",
    "summarize_schedule",
    "DayPlanner",
    "Task",
    "WorkdayConfig",
    "ScheduledTask",
    "ScheduleResult",
    "SchedulingError",
    "InvalidTaskField",
    "InvalidWorkdayConfig",
]
