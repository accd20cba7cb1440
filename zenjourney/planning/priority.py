"""
Priority scoring for tasks.

Explicit, deterministic scoring. Higher = work on it sooner.

Canonical formula (efficiency x urgency):
- efficiency: priority per hour of effort (cheap-and-important first)
- urgency: +10% per day since the task was created (old tasks don't starve)

Scores are a pure function of `now`. They go stale as time passes, so
callers recompute rather than trusting a stored value forever.
"""

from datetime import datetime
from enum import Enum

from .models import Task
from .timeparse import align_datetimes
from .validation import is_real_number

SECONDS_PER_DAY = 86400
URGENCY_PER_DAY = 0.1
MIN_EFFORT_DIVISOR = 0.1


class ScoringFormula(str, Enum):
    EFFICIENCY = "efficiency"
    ADDITIVE = "additive"


def days_since(created_at, now) -> float | None:
    """Whole-and-fractional days from created_at to now, floored at 0. None if unusable."""
    if not isinstance(created_at, datetime) or not isinstance(now, datetime):
        return None
    try:
        delta = now - created_at
    except TypeError:
        # naive vs aware
        return None
    return max(0.0, delta.total_seconds() / SECONDS_PER_DAY)


def compute_priority_score(priority, effort, created_at, now) -> float:
    """
    Calculate the canonical priority score (>= 0).

    Returns 0 for missing or non-numeric priority/effort or an unusable
    created_at. Never raises.
    """
    if not is_real_number(priority) or not is_real_number(effort):
        return 0.0
    days = days_since(created_at, now)
    if days is None:
        return 0.0

    urgency_multiplier = 1 + days * URGENCY_PER_DAY
    efficiency_score = float(priority) / max(float(effort), MIN_EFFORT_DIVISOR)
    return max(0.0, efficiency_score * urgency_multiplier)


def compute_additive_priority_score(priority, effort, created_at, now) -> float:
    """
    Additive formula used by the offline/local-storage clients.

    priority*20 + days*2 - (effort-1)*5, floored at 0. Not interchangeable
    with compute_priority_score: rankings differ.
    """
    if not is_real_number(priority) or not is_real_number(effort):
        return 0.0
    days = days_since(created_at, now)
    if days is None:
        return 0.0

    urgency_score = float(priority) * 20
    effort_penalty = max(0.0, (float(effort) - 1) * 5)
    return max(0.0, urgency_score + days * 2 - effort_penalty)


_FORMULAS = {
    ScoringFormula.EFFICIENCY: compute_priority_score,
    ScoringFormula.ADDITIVE: compute_additive_priority_score,
}


def resolve_formula(formula: "ScoringFormula | str | None") -> ScoringFormula:
    if formula is None:
        return ScoringFormula.EFFICIENCY
    try:
        return ScoringFormula(formula)
    except ValueError as e:
        allowed = ", ".join(f.value for f in ScoringFormula)
        raise ValueError(f"Unknown scoring formula {formula!r} (expected one of: {allowed})") from e


def score_task(task: Task, now: datetime, formula: ScoringFormula | str | None = None) -> float:
    """
    Score a task with the selected formula.

    A naive timestamp paired with an aware one is read as local time, so
    UTC-stamped records still age correctly against a local clock.
    """
    fn = _FORMULAS[resolve_formula(formula)]
    created_at, now = align_datetimes(task.created_at, now)
    return fn(task.priority, task.effort, created_at, now)


def rescore(tasks: list[Task], now: datetime, formula: ScoringFormula | str | None = None) -> list[Task]:
    """New task list with priority_score refreshed. Inputs are not mutated."""
    return [t.with_score(score_task(t, now, formula)) for t in tasks]


def priority_label(priority) -> str:
    """Human-readable priority tier."""
    if not is_real_number(priority):
        return "low"
    if priority >= 5:
        return "critical"
    if priority >= 4:
        return "high"
    if priority >= 3:
        return "medium"
    return "low"
