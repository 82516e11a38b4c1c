# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)


class JsonTaskStore:
    """
    Flat-file task store: one pretty-printed JSON array holding every task.

    The whole collection is read on every load and rewritten on every save;
    nothing is cached between calls.

    Failure policy:
    - missing file -> empty collection (first run)
    - unreadable / malformed file -> WARNING log, empty collection
    - failed write -> logged with traceback, save() returns False

    No method raises for I/O problems.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- public API ----

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.debug("Task file %s does not exist yet; starting empty.", self._path)
            return []

        try:
            raw = self._path.read_bytes()
        except OSError as e:
            logger.warning("Error reading tasks from %s: %s", self._path, e)
            return []

        try:
            tasks = self._decode(raw.decode("utf-8"))
        except (ValueError, KeyError, TypeError, RecursionError) as e:
            # UnicodeDecodeError is a ValueError; RecursionError comes from deeply nested JSON.
            logger.warning("Task file %s is malformed, treating as empty: %s", self._path, e)
            return []

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> bool:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", encoding="utf-8")
            os.replace(tmp, self._path)
        except (OSError, TypeError, ValueError):
            logger.exception("Error writing tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            return False

        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
        return True

    def next_id(self, tasks: Sequence[Task] | None = None) -> int:
        """
        Return 1 + the highest id in the snapshot (or a fresh load), 1 when empty.

        Ids of deleted tasks can come back if the deleted task held the max id.
        """
        if tasks is None:
            tasks = self.load()
        return max((t.id for t in tasks), default=0) + 1

    # ---- low-level helpers ----

    @staticmethod
    def _decode(raw: str) -> list[Task]:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")

        tasks: list[Task] = []
        seen: set[int] = set()
        for item in data:
            if not isinstance(item, dict):
                raise ValueError(f"expected a JSON object per task, got {type(item).__name__}")
            task = Task.from_dict(item)
            if task.id in seen:
                raise ValueError(f"duplicate task id {task.id}")
            seen.add(task.id)
            tasks.append(task)
        return tasks
