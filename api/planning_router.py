"""
Planning API Router - stateless scoring and day scheduling.

Endpoints:
- GET  /api/settings/defaults - workday settings the server plans with
- POST /api/priority-score - score a single task
- POST /api/schedule - plan a day from a list of tasks

Nothing here is persisted: clients supply tasks and settings and store
whatever they want to keep (e.g. scheduledStart/scheduledEnd).
"""

import logging
from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.response_models import (
    ErrorResponse,
    ScheduledTaskOut,
    ScheduleRequest,
    ScheduleResponse,
    ScoreRequest,
    ScoreResponse,
    SkippedTaskOut,
    SummaryOut,
    TaskOut,
    WorkdayConfigIn,
)
from zenjourney.config_store import load_workday_config
from zenjourney.planning import (
    DayPlanner,
    InvalidWorkdayConfig,
    priority_label,
    score_task,
)
from zenjourney.planning.models import Task
from zenjourney.planning.priority import resolve_formula

logger = logging.getLogger(__name__)

router = APIRouter(tags=["planning"])


def _error(status_code: int, error_code: str, message: str, field: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=message, error_code=error_code, field=field)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.get("/settings/defaults", response_model=WorkdayConfigIn)
def get_default_settings():
    """Workday settings used when a schedule request carries none."""
    return WorkdayConfigIn.from_config(load_workday_config())


@router.post(
    "/priority-score",
    response_model=ScoreResponse,
    responses={422: {"model": ErrorResponse}},
)
def post_priority_score(request: ScoreRequest):
    """Score one task. Degenerate inputs score 0 rather than failing."""
    try:
        formula = resolve_formula(request.formula)
    except ValueError as e:
        return _error(422, "ERR_INVALID_FORMULA", str(e), field="formula")

    now = request.now or datetime.now(request.created_at.tzinfo if request.created_at else None)
    task = Task(
        id="score",
        priority=request.priority,
        effort=request.effort,
        created_at=request.created_at,
    )
    return ScoreResponse(
        score=score_task(task, now, formula),
        label=priority_label(request.priority),
        formula=formula.value,
    )


@router.post(
    "/schedule",
    response_model=ScheduleResponse,
    responses={422: {"model": ErrorResponse}},
)
def post_schedule(request: ScheduleRequest):
    """
    Plan a day.

    Invalid tasks are reported in `skipped`; an invalid workday config
    rejects the whole request with ERR_INVALID_WORKDAY_CONFIG.
    """
    config = request.config.to_config() if request.config else load_workday_config()
    tasks = [t.to_task() for t in request.tasks]

    try:
        planner = DayPlanner(config=config)
    except ValueError as e:
        # unknown ZEN_SCORING_FORMULA
        logger.error(f"Cannot plan day: {e}")
        return _error(422, "ERR_INVALID_FORMULA", str(e), field="formula")

    try:
        outcome = planner.plan(tasks, reference_date=request.reference_date, now=request.now)
    except InvalidWorkdayConfig as e:
        return _error(422, e.error_code, e.message, field=e.field)

    result, summary = outcome.result, outcome.summary
    return ScheduleResponse(
        day_start=result.day_start,
        day_end=result.day_end,
        scheduled=[ScheduledTaskOut.from_scheduled(s) for s in result.scheduled],
        unscheduled=[TaskOut.from_task(t) for t in result.unscheduled],
        skipped=[SkippedTaskOut.from_skipped(s) for s in result.skipped],
        summary=SummaryOut(**summary.to_dict()),
        run_id=outcome.run_id,
    )
