"""Settings loaded from environment variables.

One frozen Settings object per run; nothing is read at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "TASKLIST"

DEFAULT_TASKS_FILE = Path("tasks.txt")
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True)
class Settings:
    tasks_file: Path
    log_level: str

    @staticmethod
    def from_env(tasks_file: Optional[Path] = None) -> "Settings":
        """Build settings; an explicit `tasks_file` wins over TASKLIST_FILE."""
        return Settings(
            tasks_file=tasks_file if tasks_file is not None else _env_path(_k("FILE"), DEFAULT_TASKS_FILE),
            log_level=_env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).upper(),
        )
