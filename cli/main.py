#!/usr/bin/env python3
"""
ZenJourney CLI

Plan a day from a task file, score a task, manage workday settings.

Usage:
    zenjourney plan tasks.json [--config workday.yaml] [--date 2026-10-16] [--json]
    zenjourney score --priority 3 --effort 2 --created 2026-10-01T09:00
    zenjourney config show
    zenjourney config set --start 08:30 --end 16:30 --break 10

Task files hold a JSON list of task records (or {"tasks": [...]}), in any
of the shapes the web clients store.
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path

from zenjourney.adapters import tasks_from_records
from zenjourney.config_store import load_workday_config, update_workday_config
from zenjourney.observability import configure_logging
from zenjourney.planning import (
    DayPlanner,
    SchedulingError,
    Task,
    priority_label,
    score_task,
)
from zenjourney.planning.priority import ScoringFormula

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 2


def print_header(text: str):
    """Print a section header."""
    print(f"\n{'═' * 50}")
    print(f"  {text}")
    print(f"{'═' * 50}")


def print_table(headers: list, rows: list, widths: list = None):
    """Print a simple table."""
    if not widths:
        widths = [
            max(len(str(row[i])) for row in [headers] + rows)
            for i in range(len(headers))
        ]

    header_str = " │ ".join(str(h).ljust(w) for h, w in zip(headers, widths))
    print(header_str)
    print("─" * len(header_str))

    for row in rows:
        print(" │ ".join(str(c)[:w].ljust(w) for c, w in zip(row, widths)))


def _parse_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an ISO timestamp: {value!r}") from e


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value!r}") from e


def load_task_file(path: Path) -> list[Task]:
    """
    Read tasks from a JSON file.

    Raises:
        OSError, json.JSONDecodeError, SchedulingError, ValueError
    """
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("tasks", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of tasks")
    return tasks_from_records(data)


def _fmt_time(value: datetime) -> str:
    return value.strftime("%H:%M")


def cmd_plan(args) -> int:
    """Plan a day and print the schedule."""
    try:
        tasks = load_task_file(args.tasks)
    except (OSError, json.JSONDecodeError, ValueError) as e:
        logger.error(f"Could not read tasks from {args.tasks}: {e}")
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_INVALID

    workday = load_workday_config(args.config)
    try:
        planner = DayPlanner(config=workday, formula=args.formula)
    except ValueError as e:
        # unknown ZEN_SCORING_FORMULA
        logger.error(f"Cannot plan day: {e}")
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_INVALID

    try:
        outcome = planner.plan(tasks, reference_date=args.date, now=args.now)
    except SchedulingError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return EXIT_INVALID

    result, summary = outcome.result, outcome.summary

    if args.json:
        payload = {
            "runId": outcome.run_id,
            "dayStart": result.day_start.isoformat(),
            "dayEnd": result.day_end.isoformat(),
            "scheduled": planner.write_back(result),
            "unscheduled": [t.id for t in result.unscheduled],
            "skipped": [{"id": s.task.id, "field": s.field, "reason": s.reason} for s in result.skipped],
            "summary": summary.to_dict(),
        }
        print(json.dumps(payload, indent=2, default=str))
        return EXIT_OK

    print_header(
        f"Plan for {result.day_start.date().isoformat()} "
        f"({_fmt_time(result.day_start)}-{_fmt_time(result.day_end)})"
    )
    if result.scheduled:
        rows = [
            [
                f"{_fmt_time(s.start)}-{_fmt_time(s.end)}",
                s.task.name or s.task.id,
                s.task.effort,
                priority_label(s.task.priority),
                f"{s.task.priority_score:.2f}",
            ]
            for s in result.scheduled
        ]
        print_table(["Time", "Task", "Hours", "Priority", "Score"], rows)
    else:
        print("Nothing scheduled.")

    if result.unscheduled:
        print_header(f"Unscheduled ({len(result.unscheduled)})")
        for t in result.unscheduled:
            print(f"  • {t.name or t.id} ({t.effort}h, score {t.priority_score:.2f})")
        print("\n💡 Suggestions:")
        for s in summary.suggestions:
            print(f"  • {s}")

    if result.skipped:
        print_header(f"Skipped ({len(result.skipped)})")
        for s in result.skipped:
            print(f"  ⚠ {s.task.name or s.task.id}: {s.reason}")

    print(
        f"\nUtilization {summary.utilization_pct:.0f}% • "
        f"{summary.total_scheduled_minutes:.0f} min work • "
        f"{summary.total_break_minutes:.0f} min breaks • "
        f"productivity {summary.productivity_score}"
    )
    return EXIT_OK


def cmd_score(args) -> int:
    """Score one task."""
    now = args.now or datetime.now(args.created.tzinfo)
    task = Task(id="cli", priority=args.priority, effort=args.effort, created_at=args.created)
    score = score_task(task, now, args.formula)
    print(f"{score:.4f} ({priority_label(args.priority)})")
    return EXIT_OK


def cmd_config_show(args) -> int:
    """Show workday settings."""
    workday = load_workday_config(args.config)
    for key, value in workday.to_dict().items():
        print(f"{key}: {value if value is not None else '-'}")
    return EXIT_OK


def cmd_config_set(args) -> int:
    """Update workday settings."""
    try:
        workday = update_workday_config(
            args.config,
            start_time=args.start,
            end_time=args.end,
            break_duration=args.break_minutes,
            timezone=args.timezone,
        )
    except SchedulingError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return EXIT_INVALID
    print(f"✓ Workday {workday.start_time}-{workday.end_time}, break {workday.break_duration}m")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zenjourney", description="ZenJourney day planner")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    subparsers = parser.add_subparsers(dest="command", required=True)
    formulas = [f.value for f in ScoringFormula]

    # plan
    p = subparsers.add_parser("plan", help="Plan a day from a task file")
    p.add_argument("tasks", type=Path, help="JSON task file")
    p.add_argument("--config", type=Path, default=None, help="Workday YAML file")
    p.add_argument("--date", type=_parse_date, default=None, help="Day to plan (YYYY-MM-DD)")
    p.add_argument("--now", type=_parse_datetime, default=None, help="Clock for scoring (ISO)")
    p.add_argument("--formula", choices=formulas, default=None, help="Scoring formula")
    p.add_argument("--json", action="store_true", help="Machine-readable output")
    p.set_defaults(func=cmd_plan)

    # score
    p = subparsers.add_parser("score", help="Score a single task")
    p.add_argument("--priority", type=int, required=True, help="1-5")
    p.add_argument("--effort", type=float, required=True, help="Hours")
    p.add_argument("--created", type=_parse_datetime, required=True, help="Creation time (ISO)")
    p.add_argument("--now", type=_parse_datetime, default=None, help="Clock (ISO)")
    p.add_argument("--formula", choices=formulas, default=None, help="Scoring formula")
    p.set_defaults(func=cmd_score)

    # config
    p = subparsers.add_parser("config", help="Workday settings")
    config_sub = p.add_subparsers(dest="config_command", required=True)

    c = config_sub.add_parser("show", help="Show workday settings")
    c.add_argument("--config", type=Path, default=None, help="Workday YAML file")
    c.set_defaults(func=cmd_config_show)

    c = config_sub.add_parser("set", help="Update workday settings")
    c.add_argument("--config", type=Path, default=None, help="Workday YAML file")
    c.add_argument("--start", default=None, help="Start time HH:MM")
    c.add_argument("--end", default=None, help="End time HH:MM")
    c.add_argument("--break", dest="break_minutes", type=int, default=None, help="Break minutes")
    c.add_argument("--timezone", default=None, help="IANA timezone")
    c.set_defaults(func=cmd_config_set)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, json_format=False)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
