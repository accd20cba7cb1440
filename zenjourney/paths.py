from __future__ import annotations

import os
from pathlib import Path

APP_ENV_HOME = "ZENJOURNEY_HOME"
WORKDAY_FILE_NAME = "workday.yaml"


def project_root() -> Path:
    """
    Repository/project root directory.
    Contains zenjourney/, api/, cli/, tests/.
    """
    return Path(__file__).parent.parent.resolve()


def app_home() -> Path:
    """
    User-writable home for ZenJourney.
    Override with ZENJOURNEY_HOME.
    """
    if os.environ.get(APP_ENV_HOME):
        return Path(os.environ[APP_ENV_HOME]).expanduser().resolve()
    return (Path.home() / ".zenjourney").resolve()


def config_dir() -> Path:
    d = app_home() / "config"
    d.mkdir(parents=True, exist_ok=True)
    return d


def workday_config_path() -> Path:
    """Location of the persisted workday settings file."""
    return config_dir() / WORKDAY_FILE_NAME
