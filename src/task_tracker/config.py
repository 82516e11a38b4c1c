# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Settings are injectable: tests build Settings(...) directly.
- Nothing here touches the filesystem except reading .env.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

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


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    tasks_file: Path = DEFAULT_TASKS_FILE

    # ---- Logging ----
    log_level: str = DEFAULT_LOG_LEVEL
    log_dir: Path | None = None

    @property
    def console_log_level(self) -> int:
        level = logging.getLevelName(self.log_level.strip().upper())
        return level if isinstance(level, int) else logging.WARNING

    @staticmethod
    def from_env(*, dotenv: bool = True) -> Settings:
        if dotenv:
            # .env is looked up from the working directory, like the task file.
            load_dotenv(find_dotenv(usecwd=True), override=False)

        tasks_file = _env_path(_k("TASKS_FILE"), DEFAULT_TASKS_FILE)
        log_level = _env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).strip() or DEFAULT_LOG_LEVEL
        log_dir = _env_path(_k("LOG_DIR"), None)

        return Settings(tasks_file=tasks_file, log_level=log_level, log_dir=log_dir)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
