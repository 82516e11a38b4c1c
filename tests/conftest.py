# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings
from task_tracker.tasks.task_manager import TaskManager
from task_tracker.tasks.task_store import JsonTaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at a per-test task file.

    Built directly rather than via Settings.from_env() so the developer's
    environment and .env never leak into tests.
    """
    return Settings(tasks_file=tmp_path / "tasks.json", log_level="DEBUG", log_dir=None)


@pytest.fixture()
def store(settings: Settings) -> JsonTaskStore:
    return JsonTaskStore(settings.tasks_file)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def manager(store: JsonTaskStore, clock: FakeClock) -> TaskManager:
    """
    TaskManager over a real JSON store in tmp_path.

    The store is real on purpose: its read/write behavior is part of what we test.
    """
    return TaskManager(store, clock=clock)
