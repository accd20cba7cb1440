"""
Planning - priority scoring and greedy day scheduling.

Objects:
- Task, WorkdayConfig (inputs)
- ScheduleResult, ScheduledTask, SkippedTask (output)

Invariants:
- scheduled + unscheduled partition the pending, valid tasks
- Scheduled blocks lie inside the workday window and never overlap
- Scheduled order follows score (ties keep input order)
- Same inputs, same plan
"""

from .errors import InvalidTaskField, InvalidWorkdayConfig, SchedulingError
from .models import ScheduledTask, ScheduleResult, SkippedTask, Task, WorkdayConfig
from .planner import DayPlanner, PlanOutcome
from .priority import (
    ScoringFormula,
    compute_additive_priority_score,
    compute_priority_score,
    priority_label,
    rescore,
    score_task,
)
from .scheduler import schedule_day
from .summary import ScheduleSummary, summarize_schedule
from .timeparse import parse_time_of_day, resolve_day_window
from .validation import validate_task, validate_workday_config

__all__ = [
    "Task",
    "WorkdayConfig",
    "ScheduledTask",
    "ScheduleResult",
    "SkippedTask",
    "SchedulingError",
    "InvalidTaskField",
    "InvalidWorkdayConfig",
    "ScoringFormula",
    "compute_priority_score",
    "compute_additive_priority_score",
    "score_task",
    "rescore",
    "priority_label",
    "schedule_day",
    "ScheduleSummary",
    "summarize_schedule",
    "parse_time_of_day",
    "resolve_day_window",
    "validate_task",
    "validate_workday_config",
    "DayPlanner",
    "PlanOutcome",
]
