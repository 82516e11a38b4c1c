# src/task_tracker/tasks/task_manager.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.ports import TaskRepo
from .results import NotFoundError, Result, StorageError, ValidationError
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskManager:
    """
    Validation and read-modify-write orchestration over a TaskRepo.

    Every operation loads the full collection once; every mutating operation
    saves it once at the end. Validation and not-found failures return before
    save(), so they never touch durable state.
    """

    def __init__(self, store: TaskRepo, *, clock: Callable[[], datetime] = datetime.now) -> None:
        self._store = store
        self._clock = clock

    @property
    def store(self) -> TaskRepo:
        return self._store

    # ---- mutations ----

    def add(self, description: str) -> Result[Task]:
        text = _clean_description(description)
        if text is None:
            return Result.failure(ValidationError())

        tasks = self._store.load()
        now = self._clock()
        task = Task(
            id=self._store.next_id(tasks),
            description=text,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        tasks.append(task)

        if not self._store.save(tasks):
            return Result.failure(StorageError(self._store.path))
        logger.info("Task added id=%s", task.id)
        return Result.success(task)

    def update(self, task_id: int, description: str) -> Result[Task]:
        text = _clean_description(description)
        if text is None:
            return Result.failure(ValidationError())

        tasks = self._store.load()
        task = _find(tasks, task_id)
        if task is None:
            return Result.failure(NotFoundError(task_id))

        task.description = text
        task.touch(self._clock())

        if not self._store.save(tasks):
            return Result.failure(StorageError(self._store.path))
        logger.info("Task updated id=%s", task_id)
        return Result.success(task)

    def delete(self, task_id: int) -> Result[Task]:
        tasks = self._store.load()
        task = _find(tasks, task_id)
        if task is None:
            return Result.failure(NotFoundError(task_id))

        tasks.remove(task)

        if not self._store.save(tasks):
            return Result.failure(StorageError(self._store.path))
        logger.info("Task deleted id=%s", task_id)
        return Result.success(task)

    def mark_todo(self, task_id: int) -> Result[Task]:
        return self.set_status(task_id, TaskStatus.TODO)

    def mark_in_progress(self, task_id: int) -> Result[Task]:
        return self.set_status(task_id, TaskStatus.IN_PROGRESS)

    def mark_done(self, task_id: int) -> Result[Task]:
        return self.set_status(task_id, TaskStatus.DONE)

    def set_status(self, task_id: int, status: TaskStatus) -> Result[Task]:
        """Move a task to any status; every transition is allowed."""
        tasks = self._store.load()
        task = _find(tasks, task_id)
        if task is None:
            return Result.failure(NotFoundError(task_id))

        previous = task.status
        task.status = status
        task.touch(self._clock())

        if not self._store.save(tasks):
            return Result.failure(StorageError(self._store.path))
        logger.info("Task status changed id=%s %s -> %s", task_id, previous.value, status.value)
        return Result.success(task)

    # ---- queries ----

    def list_all(self) -> Result[list[Task]]:
        return Result.success(self._store.load())

    def list_by_status(self, status: str) -> Result[list[Task]]:
        """Case-insensitive status filter; an unknown status just matches nothing."""
        wanted = str(status).lower()
        return Result.success([t for t in self._store.load() if t.status.value.lower() == wanted])


def _clean_description(description: str | None) -> str | None:
    if description is None:
        return None
    text = description.strip()
    return text or None


def _find(tasks: list[Task], task_id: int) -> Task | None:
    for t in tasks:
        if t.id == task_id:
            return t
    return None
