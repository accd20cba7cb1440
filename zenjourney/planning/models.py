"""
Canonical value types for day planning.

Every persistence adapter produces and consumes exactly these types; the
scheduler never sees backend records.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

DEFAULT_START_TIME = "09:00"
DEFAULT_END_TIME = "17:00"
DEFAULT_BREAK_MINUTES = 15


@dataclass(frozen=True)
class Task:
    id: str | int
    priority: Any
    effort: Any
    created_at: datetime | None = None
    completed: bool = False
    priority_score: float | None = None
    scheduled_start: datetime | None = None
    scheduled_end: datetime | None = None
    name: str = ""

    def with_score(self, score: float) -> "Task":
        return replace(self, priority_score=score)


@dataclass(frozen=True)
class WorkdayConfig:
    """Daily window and break policy. Times are HH:MM, 24h."""

    start_time: str = DEFAULT_START_TIME
    end_time: str = DEFAULT_END_TIME
    break_duration: int = DEFAULT_BREAK_MINUTES
    timezone: str | None = None

    def to_dict(self) -> dict:
        return {
            "start_time": self.start_time,
            "end_time": self.end_time,
            "break_duration": self.break_duration,
            "timezone": self.timezone,
        }


@dataclass(frozen=True)
class ScheduledTask:
    """A task placed on the day's timeline."""

    task: Task
    start: datetime
    end: datetime

    @property
    def duration_minutes(self) -> float:
        return (self.end - self.start).total_seconds() / 60

    def as_task(self) -> Task:
        """The task with scheduled_start/scheduled_end filled in."""
        return replace(self.task, scheduled_start=self.start, scheduled_end=self.end)


@dataclass(frozen=True)
class SkippedTask:
    """A task excluded from planning by validation, with the reason."""

    task: Task
    field: str | None
    reason: str


@dataclass(frozen=True)
class ScheduleResult:
    day_start: datetime
    day_end: datetime
    break_duration: int
    scheduled: list[ScheduledTask] = field(default_factory=list)
    unscheduled: list[Task] = field(default_factory=list)
    skipped: list[SkippedTask] = field(default_factory=list)

    @property
    def scheduled_ids(self) -> list:
        return [s.task.id for s in self.scheduled]

    @property
    def unscheduled_ids(self) -> list:
        return [t.id for t in self.unscheduled]
