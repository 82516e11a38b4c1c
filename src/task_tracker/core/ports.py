# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task core.

TaskManager depends on this Protocol instead of the JSON store, so tests can
swap in an in-memory repo.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-collection task storage: load everything, save everything."""

    @property
    def path(self) -> Path: ...

    def load(self) -> list[Task]: ...

    def save(self, tasks: Sequence[Task]) -> bool: ...

    def next_id(self, tasks: Sequence[Task] | None = None) -> int: ...
