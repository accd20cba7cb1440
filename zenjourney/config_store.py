"""
ZenJourney - Workday Configuration Store

Workday settings persisted as YAML (config_dir()/workday.yaml):

    start_time: "09:00"
    end_time: "17:00"
    break_duration: 15
    timezone: Europe/Berlin   # optional

Missing keys (or a missing file) fall back to the environment defaults in
zenjourney.config. Saving validates first; an invalid config never lands
on disk.
"""

import logging
from pathlib import Path

import yaml

from zenjourney import config, paths
from zenjourney.adapters import workday_config_from_record
from zenjourney.planning.models import WorkdayConfig
from zenjourney.planning.validation import validate_workday_config

logger = logging.getLogger(__name__)


def default_workday_config() -> WorkdayConfig:
    """Workday config from environment defaults only."""
    return WorkdayConfig(
        start_time=config.DEFAULT_WORKDAY_START,
        end_time=config.DEFAULT_WORKDAY_END,
        break_duration=config.DEFAULT_BREAK_MINUTES,
        timezone=config.DEFAULT_TIMEZONE,
    )


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning(f"Could not load workday config {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring workday config {path}: expected a mapping, got {type(data).__name__}")
        return {}
    for key in ("start_time", "end_time"):
        # YAML 1.1 reads an unquoted 17:00 as the base-60 integer 1020
        value = data.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            data[key] = f"{value // 60:02d}:{value % 60:02d}"
    return data


def load_workday_config(path: Path | None = None) -> WorkdayConfig:
    """
    Load workday settings, layering the YAML file over the env defaults.

    Not validated here: the scheduler rejects an unusable config itself,
    so a bad file surfaces as InvalidWorkdayConfig at planning time.
    """
    path = path or paths.workday_config_path()
    merged = default_workday_config().to_dict()
    merged.update({k: v for k, v in _read_yaml(path).items() if v is not None})
    return workday_config_from_record(merged)


def save_workday_config(workday: WorkdayConfig, path: Path | None = None) -> Path:
    """
    Validate and persist workday settings.

    Raises:
        InvalidWorkdayConfig: If the config is unusable (nothing is written)
    """
    validate_workday_config(workday)
    path = path or paths.workday_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {k: v for k, v in workday.to_dict().items() if v is not None}
    with open(path, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info(
        f"Saved workday config: {workday.start_time}-{workday.end_time}, "
        f"break {workday.break_duration}m"
    )
    return path


def update_workday_config(path: Path | None = None, **changes) -> WorkdayConfig:
    """Load, apply field changes (None = keep), validate and save."""
    current = load_workday_config(path).to_dict()
    current.update({k: v for k, v in changes.items() if v is not None})
    updated = workday_config_from_record(current)
    save_workday_config(updated, path)
    return updated
