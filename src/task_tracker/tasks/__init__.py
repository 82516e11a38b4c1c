# src/task_tracker/tasks/__init__.py

from .results import NotFoundError, Result, StorageError, TaskError, ValidationError
from .task_manager import TaskManager
from .task_models import Task, TaskStatus
from .task_store import JsonTaskStore

__all__ = [
    "JsonTaskStore",
    "NotFoundError",
    "Result",
    "StorageError",
    "Task",
    "TaskError",
    "TaskManager",
    "TaskStatus",
    "ValidationError",
]
