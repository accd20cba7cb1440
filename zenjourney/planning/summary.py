"""
Schedule summary - the numbers shown next to a day plan.

Utilization, break totals, a productivity score, and what to do about
tasks that didn't fit.
"""

import math
from dataclasses import asdict, dataclass, field

from .models import ScheduleResult
from .validation import is_real_number


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass
class ScheduleSummary:
    scheduled_count: int
    unscheduled_count: int
    skipped_count: int
    total_workday_minutes: float
    total_scheduled_minutes: float
    total_break_minutes: float
    total_used_minutes: float
    utilization_pct: float
    productivity_score: int
    overflow_hours: int
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def summarize_schedule(result: ScheduleResult) -> ScheduleSummary:
    workday_minutes = (result.day_end - result.day_start).total_seconds() / 60
    scheduled_minutes = sum(float(s.task.effort) * 60 for s in result.scheduled)
    break_minutes = max(0, (len(result.scheduled) - 1) * result.break_duration)
    utilization = (scheduled_minutes / workday_minutes) * 100 if workday_minutes > 0 else 0.0

    scores = [
        float(s.task.priority_score) if is_real_number(s.task.priority_score) else 0.0
        for s in result.scheduled
    ]
    mean_score = sum(scores) / max(1, len(scores))
    # whole-percent utilization, half-up, as the day view shows it
    productivity = _round_half_up(mean_score * _round_half_up(utilization) / 100) if scores else 0

    overflow = math.ceil(sum(float(t.effort) for t in result.unscheduled))

    suggestions: list[str] = []
    if result.unscheduled:
        suggestions.append(f"Extend your workday by {overflow} hours")
        suggestions.append("Break large tasks into smaller, manageable chunks")
        suggestions.append("Consider moving lower-priority tasks to tomorrow")
        if result.break_duration > 0:
            suggestions.append("Reduce break duration to fit more tasks")

    return ScheduleSummary(
        scheduled_count=len(result.scheduled),
        unscheduled_count=len(result.unscheduled),
        skipped_count=len(result.skipped),
        total_workday_minutes=workday_minutes,
        total_scheduled_minutes=scheduled_minutes,
        total_break_minutes=break_minutes,
        total_used_minutes=scheduled_minutes + break_minutes,
        utilization_pct=utilization,
        productivity_score=productivity,
        overflow_hours=overflow,
        suggestions=suggestions,
    )
