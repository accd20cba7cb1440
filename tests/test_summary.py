"""
Tests for the schedule summary.
"""

import pytest

from zenjourney.planning.models import WorkdayConfig
from zenjourney.planning.scheduler import schedule_day
from zenjourney.planning.summary import summarize_schedule


class TestScheduleSummary:
    def test_full_morning(self, make_task, plan_date):
        config = WorkdayConfig(start_time="09:00", end_time="12:00", break_duration=0)
        tasks = [
            make_task("A", effort=2, score=5.0),
            make_task("B", effort=2, score=4.0),
            make_task("C", effort=1, score=1.0),
        ]

        summary = summarize_schedule(schedule_day(tasks, config, plan_date))

        assert summary.scheduled_count == 2
        assert summary.unscheduled_count == 1
        assert summary.total_workday_minutes == 180
        assert summary.total_scheduled_minutes == 180
        assert summary.total_break_minutes == 0
        assert summary.utilization_pct == pytest.approx(100.0)
        assert summary.productivity_score == 3
        assert summary.overflow_hours == 2
        assert "Extend your workday by 2 hours" in summary.suggestions
        # no break to trim
        assert "Reduce break duration to fit more tasks" not in summary.suggestions

    def test_breaks_counted_between_tasks_only(self, make_task, workday, plan_date):
        tasks = [make_task("X", effort=1, score=8.0), make_task("Y", effort=1, score=8.0)]

        summary = summarize_schedule(schedule_day(tasks, workday, plan_date))

        assert summary.total_scheduled_minutes == 120
        assert summary.total_break_minutes == 15
        assert summary.total_used_minutes == 135
        assert summary.utilization_pct == pytest.approx(25.0)
        assert summary.productivity_score == 2
        assert summary.suggestions == []

    def test_overflow_rounds_up(self, make_task, plan_date):
        config = WorkdayConfig(start_time="09:00", end_time="10:00", break_duration=10)
        tasks = [
            make_task("a", effort=1, score=3.0),
            make_task("b", effort=2.25, score=2.0),
            make_task("c", effort=0.5, score=1.0),
        ]

        summary = summarize_schedule(schedule_day(tasks, config, plan_date))

        assert summary.unscheduled_count == 2
        assert summary.overflow_hours == 3
        assert summary.suggestions[0] == "Extend your workday by 3 hours"
        assert "Reduce break duration to fit more tasks" in summary.suggestions

    def test_empty_day(self, workday, plan_date):
        summary = summarize_schedule(schedule_day([], workday, plan_date))

        assert summary.scheduled_count == 0
        assert summary.total_break_minutes == 0
        assert summary.utilization_pct == 0
        assert summary.productivity_score == 0
        assert summary.overflow_hours == 0

    def test_skipped_counted(self, make_task, workday, plan_date):
        tasks = [make_task("bad", priority=9), make_task("ok")]
        summary = summarize_schedule(schedule_day(tasks, workday, plan_date))
        assert summary.skipped_count == 1
        assert summary.to_dict()["skipped_count"] == 1

    def test_productivity_uses_whole_percent_utilization(self, make_task, workday, plan_date):
        """12.5% shows as 13%, and productivity is computed from the shown value."""
        summary = summarize_schedule(schedule_day([make_task("a", effort=1, score=3.9)], workday, plan_date))

        assert summary.utilization_pct == pytest.approx(12.5)
        assert summary.productivity_score == 1
