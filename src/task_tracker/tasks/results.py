# src/task_tracker/tasks/results.py

"""
Error kinds and the Result value returned by TaskManager.

Failure paths are ordinary return values; callers that prefer exceptions
(the CLI) call `Result.unwrap()`, which raises the carried error.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

T = TypeVar("T")


class TaskError(Exception):
    """Base class for every error kind surfaced by the task core."""


class ValidationError(TaskError):
    def __init__(self, message: str = "Task description cannot be empty") -> None:
        super().__init__(message)


class NotFoundError(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} does not exist")
        self.task_id = task_id


class StorageError(TaskError):
    """The mutation was computed but could not be written to disk."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Failed to save tasks to {path}")
        self.path = Path(path)


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    value: T | None = None
    error: TaskError | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: TaskError) -> Result[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
