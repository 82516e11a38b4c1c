# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Any status may follow any other one; there is no terminal state.
    """

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str) -> TaskStatus:
        """Strict parse used when reading the store; raises ValueError on unknown values."""
        return cls(str(raw).strip().lower())


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def touch(self, now: datetime) -> None:
        # updated_at never goes backwards, even if the wall clock does.
        self.updated_at = max(now, self.updated_at, self.created_at)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(timespec="microseconds"),
            "updatedAt": self.updated_at.isoformat(timespec="microseconds"),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        """
        Build a Task from one stored record.

        Raises KeyError/ValueError/TypeError on malformed input; the store
        treats any of those as an unreadable file.
        """
        task_id = raw["id"]
        if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 1:
            raise ValueError(f"invalid task id: {task_id!r}")

        description = raw["description"]
        if not isinstance(description, str) or not description.strip():
            raise ValueError(f"invalid description for task {task_id}")

        created_at = _parse_ts(raw["createdAt"])
        updated_at = _parse_ts(raw["updatedAt"])

        return cls(
            id=task_id,
            description=description,
            status=TaskStatus.parse(raw["status"]),
            created_at=created_at,
            updated_at=max(updated_at, created_at),
        )


def _parse_ts(raw: str) -> datetime:
    dt = datetime.fromisoformat(raw)
    if dt.tzinfo is not None:
        # Stored timestamps are local wall-clock time; fold offsets into it.
        dt = dt.astimezone().replace(tzinfo=None)
    return dt
