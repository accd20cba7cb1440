"""
DayPlanner - collaborator-facing planning service.

Wraps the pure scorer and scheduler for the API, the CLI and persistence
glue:
1. Refresh every pending task's priority_score at `now`
2. Schedule the day
3. Summarize, and log what happened

The core modules never log; this is where a run's outcome is recorded.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime

from zenjourney.observability.context import PlanContext

from .errors import InvalidWorkdayConfig
from .models import ScheduleResult, Task, WorkdayConfig
from .priority import ScoringFormula, resolve_formula, score_task
from .scheduler import schedule_day
from .summary import ScheduleSummary, summarize_schedule
from .timeparse import resolve_timezone

logger = logging.getLogger(__name__)


@dataclass
class PlanOutcome:
    result: ScheduleResult
    summary: ScheduleSummary
    run_id: str


class DayPlanner:
    """
    Plans one day for one user.

    Args:
        config: Workday settings. Defaults to the persisted/env workday config.
        formula: Scoring formula. Defaults to ZEN_SCORING_FORMULA.
    """

    def __init__(
        self,
        config: WorkdayConfig | None = None,
        formula: ScoringFormula | str | None = None,
    ):
        if config is None:
            from zenjourney.config_store import load_workday_config

            config = load_workday_config()
        if formula is None:
            from zenjourney import config as settings

            formula = settings.SCORING_FORMULA
        self.config = config
        self.formula = resolve_formula(formula)

    def _now(self, now: datetime | None) -> datetime:
        if now is not None:
            return now
        tz = resolve_timezone(self.config.timezone)
        return datetime.now(tz) if tz is not None else datetime.now()

    def rescore(self, tasks: list[Task], now: datetime | None = None) -> list[Task]:
        """Refresh priority_score on pending tasks. Completed tasks pass through."""
        now = self._now(now)
        return [
            t if t.completed else t.with_score(score_task(t, now, self.formula))
            for t in tasks
        ]

    def plan(
        self,
        tasks: list[Task],
        reference_date: date | None = None,
        now: datetime | None = None,
    ) -> PlanOutcome:
        """
        Rescore, schedule and summarize.

        Raises:
            InvalidWorkdayConfig: If the workday config is unusable
        """
        now = self._now(now)
        if reference_date is None:
            reference_date = now

        with PlanContext() as ctx:
            scored = self.rescore(tasks, now)
            try:
                result = schedule_day(scored, self.config, reference_date, now=now)
            except InvalidWorkdayConfig as e:
                logger.error(
                    f"Cannot plan day: {e.message}",
                    extra={"error_code": e.error_code, "field": e.field},
                )
                raise

            for skipped in result.skipped:
                logger.warning(
                    f"Skipping task {skipped.task.id}: {skipped.reason}",
                    extra={"task_id": str(skipped.task.id), "field": skipped.field},
                )

            summary = summarize_schedule(result)
            logger.info(
                f"Planned {result.day_start.date().isoformat()}: "
                f"{summary.scheduled_count} scheduled, {summary.unscheduled_count} unscheduled, "
                f"{summary.skipped_count} skipped ({summary.utilization_pct:.0f}% utilized)",
                extra={
                    "formula": self.formula.value,
                    "scheduled": summary.scheduled_count,
                    "unscheduled": summary.unscheduled_count,
                    "skipped": summary.skipped_count,
                },
            )
            return PlanOutcome(result=result, summary=summary, run_id=ctx.run_id)

    def write_back(self, result: ScheduleResult) -> list[dict]:
        """Records for persisting scheduledStart/scheduledEnd on each placed task."""
        from zenjourney.adapters import schedule_to_records

        return schedule_to_records(result)
