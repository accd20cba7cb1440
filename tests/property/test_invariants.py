"""
Property-based tests for scoring and scheduling invariants using Hypothesis.

These tests stress the planner with random task lists and workdays.
"""

from datetime import date, datetime, timedelta

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from zenjourney.planning.models import Task, WorkdayConfig
from zenjourney.planning.priority import compute_additive_priority_score, compute_priority_score
from zenjourney.planning.scheduler import schedule_day

DAY = date(2026, 3, 2)
NOW = datetime(2026, 3, 2, 8, 0)

# Pure functions only; the autouse home fixture is irrelevant here
property_settings = settings(
    max_examples=150,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

anything = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-100, max_value=100),
    st.floats(allow_nan=True, allow_infinity=True),
    st.text(max_size=4),
)
priorities = st.integers(min_value=1, max_value=5)
efforts = st.one_of(
    st.sampled_from([0.25, 0.5, 1.0, 1.5, 2.0, 3.0, 4.0, 8.0]),
    st.floats(min_value=0.05, max_value=8.0),
)
ages = st.floats(min_value=0, max_value=365)


@st.composite
def task_lists(draw):
    n = draw(st.integers(min_value=0, max_value=15))
    tasks = []
    for i in range(n):
        tasks.append(
            Task(
                id=f"t{i}",
                priority=draw(st.one_of(priorities, st.sampled_from([0, 6, None]))),
                effort=draw(st.one_of(efforts, st.sampled_from([0, -1, 9]))),
                completed=draw(st.booleans()) if draw(st.integers(0, 4)) == 0 else False,
                priority_score=draw(st.one_of(st.none(), st.floats(min_value=0, max_value=50))),
                created_at=NOW - timedelta(days=draw(ages)),
            )
        )
    return tasks


workdays = st.builds(
    lambda start, end, brk: WorkdayConfig(start_time=f"{start:02d}:00", end_time=f"{end:02d}:00", break_duration=brk),
    st.integers(min_value=5, max_value=11),
    st.integers(min_value=12, max_value=22),
    st.integers(min_value=0, max_value=45),
)


# ============================================================================
# Scoring
# ============================================================================


@property_settings
@given(anything, anything, st.one_of(st.none(), st.just(NOW - timedelta(days=3)), st.text(max_size=3)))
def test_score_never_negative_never_raises(priority, effort, created_at):
    assert compute_priority_score(priority, effort, created_at, NOW) >= 0
    assert compute_additive_priority_score(priority, effort, created_at, NOW) >= 0


@property_settings
@given(priorities, priorities, efforts, ages)
def test_score_monotone_in_priority(p1, p2, effort, age):
    created = NOW - timedelta(days=age)
    low, high = sorted((p1, p2))
    assert compute_priority_score(low, effort, created, NOW) <= compute_priority_score(high, effort, created, NOW)


@property_settings
@given(priorities, efforts, ages, ages)
def test_score_grows_with_age(priority, effort, age1, age2):
    younger, older = sorted((age1, age2))
    assert compute_priority_score(priority, effort, NOW - timedelta(days=younger), NOW) <= compute_priority_score(
        priority, effort, NOW - timedelta(days=older), NOW
    )


@property_settings
@given(priorities, efforts, efforts, ages)
def test_score_shrinks_with_effort(priority, e1, e2, age):
    created = NOW - timedelta(days=age)
    small, large = sorted((e1, e2))
    assert compute_priority_score(priority, large, created, NOW) <= compute_priority_score(priority, small, created, NOW)


# ============================================================================
# Scheduling
# ============================================================================


@property_settings
@given(task_lists(), workdays)
def test_partition(tasks, workday):
    result = schedule_day(tasks, workday, DAY)

    placed = result.scheduled_ids + result.unscheduled_ids
    skipped = [s.task.id for s in result.skipped]
    pending = [t.id for t in tasks if not t.completed]

    assert len(placed) == len(set(placed))
    assert not set(placed) & set(skipped)
    assert sorted(placed + skipped) == sorted(pending)


@property_settings
@given(task_lists(), workdays)
def test_blocks_inside_window_and_apart(tasks, workday):
    result = schedule_day(tasks, workday, DAY)
    gap = timedelta(minutes=workday.break_duration)

    for block in result.scheduled:
        assert result.day_start <= block.start < block.end <= result.day_end
    for prev, nxt in zip(result.scheduled, result.scheduled[1:]):
        assert nxt.start >= prev.end + gap


@property_settings
@given(task_lists(), workdays)
def test_scheduled_in_score_order(tasks, workday):
    result = schedule_day(tasks, workday, DAY)
    scores = [s.task.priority_score for s in result.scheduled]
    assert scores == sorted(scores, reverse=True)


@property_settings
@given(task_lists(), workdays)
def test_deterministic(tasks, workday):
    assert schedule_day(tasks, workday, DAY) == schedule_day(list(tasks), workday, DAY)


@property_settings
@given(task_lists(), workdays)
def test_unscheduled_never_fit_later(tasks, workday):
    """Anything left out is longer than the time remaining after the last block."""
    result = schedule_day(tasks, workday, DAY)
    if not result.scheduled:
        remaining = result.day_end - result.day_start
    else:
        remaining = result.day_end - (result.scheduled[-1].end + timedelta(minutes=workday.break_duration))
    for task in result.unscheduled:
        assert timedelta(hours=task.effort) > remaining
