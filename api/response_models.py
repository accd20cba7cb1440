"""
Pydantic request/response models for the planning API.

Wire format is camelCase (what the web clients send and store); populate
by either name. These models only carry data across the boundary: range
checks on priority/effort and the workday window are left to the planning
core so that one bad task is skipped instead of failing the whole request.

Usage:
    from api.response_models import ScheduleRequest, ScheduleResponse

    @router.post("/schedule", response_model=ScheduleResponse)
    def schedule(request: ScheduleRequest): ...
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from zenjourney.planning.models import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_END_TIME,
    DEFAULT_START_TIME,
    ScheduledTask,
    SkippedTask,
    Task,
    WorkdayConfig,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ==== Inputs ====


class TaskIn(CamelModel):
    """A task as supplied by a client."""

    id: str | int
    name: str = ""
    priority: int | float | None = None
    effort: float | None = None
    completed: bool = False
    priority_score: float | None = Field(default=None, alias="priorityScore")
    created_at: datetime | None = Field(default=None, alias="createdAt")

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            name=self.name,
            priority=self.priority,
            effort=self.effort,
            completed=self.completed,
            priority_score=self.priority_score,
            created_at=self.created_at,
        )


class WorkdayConfigIn(CamelModel):
    """Workday settings as supplied by a client."""

    start_time: str = Field(default=DEFAULT_START_TIME, alias="startTime")
    end_time: str = Field(default=DEFAULT_END_TIME, alias="endTime")
    break_duration: int = Field(default=DEFAULT_BREAK_MINUTES, alias="breakDuration")
    timezone: str | None = None

    def to_config(self) -> WorkdayConfig:
        return WorkdayConfig(
            start_time=self.start_time,
            end_time=self.end_time,
            break_duration=self.break_duration,
            timezone=self.timezone,
        )

    @classmethod
    def from_config(cls, config: WorkdayConfig) -> "WorkdayConfigIn":
        return cls(
            start_time=config.start_time,
            end_time=config.end_time,
            break_duration=config.break_duration,
            timezone=config.timezone,
        )


class ScoreRequest(CamelModel):
    priority: int | float | None = None
    effort: float | None = None
    created_at: datetime | None = Field(default=None, alias="createdAt")
    now: datetime | None = None
    formula: str | None = None


class ScheduleRequest(CamelModel):
    tasks: list[TaskIn] = Field(default_factory=list)
    config: WorkdayConfigIn | None = None
    reference_date: date | None = Field(default=None, alias="referenceDate")
    now: datetime | None = None


# ==== Outputs ====


class ScoreResponse(CamelModel):
    score: float
    label: str
    formula: str


class TaskOut(CamelModel):
    id: str | int
    name: str = ""
    priority: int | float | None = None
    effort: float | None = None
    priority_score: float | None = Field(default=None, alias="priorityScore")

    @classmethod
    def from_task(cls, task: Task) -> "TaskOut":
        return cls(
            id=task.id,
            name=task.name,
            priority=task.priority,
            effort=task.effort,
            priority_score=task.priority_score,
        )


class ScheduledTaskOut(TaskOut):
    scheduled_start: datetime = Field(alias="scheduledStart")
    scheduled_end: datetime = Field(alias="scheduledEnd")

    @classmethod
    def from_scheduled(cls, scheduled: ScheduledTask) -> "ScheduledTaskOut":
        task = scheduled.task
        return cls(
            id=task.id,
            name=task.name,
            priority=task.priority,
            effort=task.effort,
            priority_score=task.priority_score,
            scheduled_start=scheduled.start,
            scheduled_end=scheduled.end,
        )


class SkippedTaskOut(CamelModel):
    id: str | int
    field: str | None = None
    reason: str

    @classmethod
    def from_skipped(cls, skipped: SkippedTask) -> "SkippedTaskOut":
        return cls(id=skipped.task.id, field=skipped.field, reason=skipped.reason)


class SummaryOut(CamelModel):
    scheduled_count: int = Field(alias="scheduledCount")
    unscheduled_count: int = Field(alias="unscheduledCount")
    skipped_count: int = Field(alias="skippedCount")
    total_workday_minutes: float = Field(alias="totalWorkdayMinutes")
    total_scheduled_minutes: float = Field(alias="totalScheduledMinutes")
    total_break_minutes: float = Field(alias="totalBreakMinutes")
    total_used_minutes: float = Field(alias="totalUsedMinutes")
    utilization_pct: float = Field(alias="utilizationPct")
    productivity_score: int = Field(alias="productivityScore")
    overflow_hours: int = Field(alias="overflowHours")
    suggestions: list[str] = Field(default_factory=list)


class ScheduleResponse(CamelModel):
    day_start: datetime = Field(alias="dayStart")
    day_end: datetime = Field(alias="dayEnd")
    scheduled: list[ScheduledTaskOut]
    unscheduled: list[TaskOut]
    skipped: list[SkippedTaskOut]
    summary: SummaryOut
    run_id: str = Field(alias="runId")


# ==== Envelopes ====


class ErrorResponse(BaseModel):
    """Error envelope for rejected requests."""

    error: str = Field(description="Error message")
    error_code: str = Field(description="Stable error code, e.g. ERR_INVALID_WORKDAY_CONFIG")
    field: str | None = Field(default=None, description="Offending field, if known")


class HealthResponse(BaseModel):
    """Health check result."""

    status: str = Field(description="healthy or error")
    version: str = Field(description="Package version")
    timestamp: str = Field(description="ISO timestamp")
