"""
Tests for backend record adapters.

The same task arrives as a relational row, a document-store dict and an
on-device JSON record; all three must come out as the same Task.
"""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from zenjourney.adapters import (
    coerce_number,
    coerce_timestamp,
    schedule_to_records,
    task_from_record,
    task_to_record,
    workday_config_from_record,
)
from zenjourney.planning.errors import InvalidTaskField
from zenjourney.planning.models import WorkdayConfig
from zenjourney.planning.scheduler import schedule_day

CREATED = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


class TestCoercion:
    def test_numbers(self):
        assert coerce_number("3") == 3
        assert isinstance(coerce_number("3"), int)
        assert coerce_number("2.5") == 2.5
        assert coerce_number("12.50") == 12.5
        assert coerce_number(Decimal("12.50")) == 12.5

    def test_non_numbers_pass_through(self):
        assert coerce_number("high") == "high"
        assert coerce_number("NaN") == "NaN"
        assert coerce_number(True) is True
        assert coerce_number(None) is None

    def test_timestamps(self):
        assert coerce_timestamp("2026-03-01T12:00:00Z") == CREATED
        assert coerce_timestamp("2026-03-01T12:00:00+00:00") == CREATED
        assert coerce_timestamp(int(CREATED.timestamp() * 1000)) == CREATED
        assert coerce_timestamp(CREATED) is CREATED

    def test_unreadable_timestamp_is_none(self):
        assert coerce_timestamp("yesterday") is None
        assert coerce_timestamp(True) is None
        assert coerce_timestamp(None) is None


class TestTaskFromRecord:
    def test_three_backends_agree(self):
        row = {
            "id": 7,
            "name": "Write report",
            "priority": 4,
            "effort": "1.5",
            "completed": 0,
            "priority_score": "12.50",
            "created_at": CREATED,
        }
        doc = {
            "id": 7,
            "name": "Write report",
            "priority": 4,
            "effort": 1.5,
            "completed": False,
            "priorityScore": 12.5,
            "createdAt": int(CREATED.timestamp() * 1000),
        }
        local = {
            "id": 7,
            "name": "Write report",
            "priority": 4,
            "effort": 1.5,
            "completed": False,
            "priorityScore": 12.5,
            "createdAt": "2026-03-01T12:00:00Z",
        }

        tasks = [task_from_record(r) for r in (row, doc, local)]

        assert tasks[0] == tasks[1] == tasks[2]
        assert tasks[0].effort == 1.5
        assert tasks[0].priority_score == 12.5
        assert tasks[0].created_at == CREATED

    def test_missing_id_raises(self):
        with pytest.raises(InvalidTaskField, match="no id") as exc:
            task_from_record({"priority": 3, "effort": 1})
        assert exc.value.field == "id"

    def test_uncoercible_values_left_for_validation(self):
        task = task_from_record({"id": "t", "priority": "urgent", "effort": None, "priorityScore": "n/a"})
        assert task.priority == "urgent"
        assert task.effort is None
        assert task.priority_score is None

    def test_completed_string_flag(self):
        assert task_from_record({"id": 1, "priority": 1, "effort": 1, "completed": "true"}).completed
        assert not task_from_record({"id": 1, "priority": 1, "effort": 1, "completed": "false"}).completed

    def test_to_record_is_camel_case(self):
        task = task_from_record({"id": "a", "priority": 2, "effort": 1, "createdAt": "2026-03-01T12:00:00Z"})
        record = task_to_record(task)
        assert record["createdAt"] == "2026-03-01T12:00:00+00:00"
        assert record["priorityScore"] is None
        assert "created_at" not in record


class TestWorkdayConfigFromRecord:
    def test_defaults(self):
        assert workday_config_from_record(None) == WorkdayConfig()

    def test_camel_case_and_float_break(self):
        config = workday_config_from_record({"startTime": "08:30", "endTime": "16:00", "breakDuration": 10.0})
        assert config == WorkdayConfig(start_time="08:30", end_time="16:00", break_duration=10)
        assert isinstance(config.break_duration, int)

    def test_fractional_break_left_for_validation(self):
        assert workday_config_from_record({"break_duration": 7.5}).break_duration == 7.5


class TestScheduleToRecords:
    def test_write_back_payload(self, make_task, workday, plan_date):
        result = schedule_day([make_task("A", score=2.0), make_task("B", score=1.0)], workday, plan_date)

        records = schedule_to_records(result)

        assert records == [
            {"id": "A", "scheduledStart": "2026-03-02T09:00:00", "scheduledEnd": "2026-03-02T10:00:00"},
            {"id": "B", "scheduledStart": "2026-03-02T10:15:00", "scheduledEnd": "2026-03-02T11:15:00"},
        ]
