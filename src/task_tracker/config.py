# src/task_tracker/config.py

"""Settings loaded from environment variables (+ optional .env in the working directory).

With nothing configured the tool keeps its data in ./tasks.json and only logs
warnings to stderr.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_TRACKER"

DEFAULT_TASKS_FILE = Path("tasks.json")
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_log_level(name: str, default: str) -> str:
    raw = _env(name, default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        return default
    return raw


@dataclass(frozen=True, slots=True)
class Settings:
    tasks_file: Path
    log_level: str
    log_file: Path | None

    @property
    def console_log_level(self) -> int:
        return logging.getLevelName(self.log_level)

    @staticmethod
    def from_env() -> "Settings":
        tasks_file = _env_path(_k("FILE"), DEFAULT_TASKS_FILE) or DEFAULT_TASKS_FILE
        log_level = _env_log_level(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL)
        log_file = _env_path(_k("LOG_FILE"), None)

        return Settings(
            tasks_file=tasks_file,
            log_level=log_level,
            log_file=log_file,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Only ./.env is read, never one from a parent directory; real env vars win.
    load_dotenv(Path.cwd() / ".env", override=False)
    return Settings.from_env()
