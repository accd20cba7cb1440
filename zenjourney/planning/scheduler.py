"""
Day Scheduler - greedy time-blocking of pending tasks into one workday.

Packs a single timeline (the user's day) first-fit by priority:
- Highest score goes first; equal scores keep input order
- A task that doesn't fit is set aside, and the cursor stays put so a
  smaller, lower-priority task can still use the remaining time
- The configured break separates consecutive tasks (none before the first,
  none after the last)

Greedy instead of optimal packing: the plan has to answer "what is the most
important thing to do next", not "how full can the day get".

Pure: no I/O, no logging, nothing mutated. Same inputs, same plan.
"""

from datetime import UTC, date, datetime, timedelta

from .errors import InvalidTaskField
from .models import ScheduledTask, ScheduleResult, SkippedTask, Task, WorkdayConfig
from .priority import score_task
from .timeparse import resolve_day_window
from .validation import is_real_number, validate_task, validate_workday_config


def _sort_key(task: Task) -> float:
    score = task.priority_score
    return float(score) if is_real_number(score) else 0.0


def schedule_day(
    tasks: list[Task],
    config: WorkdayConfig,
    reference_date: date,
    now: datetime | None = None,
) -> ScheduleResult:
    """
    Build the day's schedule.

    Args:
        tasks: Candidate tasks. Completed ones are dropped here.
        config: Workday window and break policy
        reference_date: Day to plan (date, or datetime lending its tzinfo)
        now: Clock for tasks that arrive without a priority_score.
            Defaults to the start of the day window.

    Returns:
        ScheduleResult; scheduled + unscheduled partition the pending, valid
        tasks, and invalid tasks are listed in skipped with a reason.

    Raises:
        InvalidWorkdayConfig: If the window or break is unusable
    """
    validate_workday_config(config)
    day_start, day_end = resolve_day_window(config, reference_date)
    if now is None:
        now = day_start

    candidates: list[Task] = []
    skipped: list[SkippedTask] = []
    for task in tasks:
        if task.completed:
            continue
        try:
            validate_task(task)
        except InvalidTaskField as e:
            skipped.append(SkippedTask(task=task, field=e.field, reason=e.message))
            continue
        if not is_real_number(task.priority_score):
            task = task.with_score(score_task(task, now))
        candidates.append(task)

    # sorted() is stable, reverse=True included
    ordered = sorted(candidates, key=_sort_key, reverse=True)

    # Pack on absolute time; aware windows are walked in UTC
    tz = day_start.tzinfo
    if tz is not None:
        cursor, end = day_start.astimezone(UTC), day_end.astimezone(UTC)
    else:
        cursor, end = day_start, day_end
    gap = timedelta(minutes=config.break_duration)

    scheduled: list[ScheduledTask] = []
    unscheduled: list[Task] = []
    for task in ordered:
        candidate_end = cursor + timedelta(hours=float(task.effort))
        if candidate_end <= end:
            start, finish = cursor, candidate_end
            if tz is not None:
                start, finish = start.astimezone(tz), finish.astimezone(tz)
            scheduled.append(ScheduledTask(task=task, start=start, end=finish))
            cursor = candidate_end + gap
        else:
            unscheduled.append(task)

    return ScheduleResult(
        day_start=day_start,
        day_end=day_end,
        break_duration=config.break_duration,
        scheduled=scheduled,
        unscheduled=unscheduled,
        skipped=skipped,
    )
