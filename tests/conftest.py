"""
Test configuration - ensures repo root is in sys.path + isolation guards.

Tests import the top-level packages (zenjourney, api, cli) straight from the
checkout. Every test gets its own ZENJOURNEY_HOME so nothing reads or writes
the real ~/.zenjourney.
"""

import sys
from datetime import date, datetime
from pathlib import Path

import pytest

# Add repo root to sys.path so tests can import zenjourney.*, api.*, cli.*
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from zenjourney.planning.models import Task, WorkdayConfig  # noqa: E402

PLAN_DATE = date(2026, 3, 2)
PLAN_NOW = datetime(2026, 3, 2, 8, 0)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point ZENJOURNEY_HOME at a temp dir for every test."""
    home = tmp_path / "zenjourney_home"
    monkeypatch.setenv("ZENJOURNEY_HOME", str(home))
    return home


@pytest.fixture
def plan_date() -> date:
    return PLAN_DATE


@pytest.fixture
def plan_now() -> datetime:
    return PLAN_NOW


@pytest.fixture
def workday() -> WorkdayConfig:
    """Stock 09:00-17:00 day with a 15 minute break."""
    return WorkdayConfig(start_time="09:00", end_time="17:00", break_duration=15)


@pytest.fixture
def make_task():
    """Factory for tasks with sensible defaults."""

    def _make(task_id, priority=3, effort=1.0, score=None, completed=False, created_at=PLAN_NOW, name=""):
        return Task(
            id=task_id,
            name=name or f"task {task_id}",
            priority=priority,
            effort=effort,
            completed=completed,
            priority_score=score,
            created_at=created_at,
        )

    return _make
