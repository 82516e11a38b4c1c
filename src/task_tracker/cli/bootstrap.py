# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the JSON task store into a TaskManager.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..tasks.task_manager import TaskManager
from ..tasks.task_store import JsonTaskStore

logger = logging.getLogger(__name__)


def create_manager(*, settings: Settings | None = None) -> TaskManager:
    """
    Create a TaskManager backed by the configured task file.

    Keeping settings injectable makes the CLI easy to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = JsonTaskStore(settings.tasks_file)
    logger.debug("Using task file %s", store.path)
    return TaskManager(store)
