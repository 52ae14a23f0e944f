# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import FormatError, NotFoundError
from .task_codec import decode, encode
from .task_models import Task, TaskStatus, new_task, with_description, with_status

logger = logging.getLogger(__name__)


class TaskStore:
    """
    File-backed task store.

    The tasks file is the only source of truth:
    - every public method loads the full set, mutates it, and rewrites the full set
    - nothing is cached between calls
    - a missing file is treated as an empty list

    No locking: concurrent writers race and the last one wins.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def load(self) -> list[Task]:
        try:
            text = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.debug("Tasks file %s does not exist yet; starting empty.", self._path)
            return []
        except UnicodeDecodeError as exc:
            raise FormatError(f"Tasks file is not valid UTF-8: {exc}") from exc
        return decode(text)

    def save(self, tasks: list[Task]) -> None:
        """Rewrite the whole file; readers see either the old or the new content."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(encode(tasks), "utf-8")
            os.replace(tmp, self._path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise
        logger.debug("Saved %d task(s) to %s", len(tasks), self._path)

    @staticmethod
    def _index_of(tasks: list[Task], task_id: int) -> int:
        for i, task in enumerate(tasks):
            if task.id == task_id:
                return i
        raise NotFoundError(task_id)

    @staticmethod
    def _next_id(tasks: list[Task]) -> int:
        return max((t.id for t in tasks), default=0) + 1

    # ---- public API ----

    def add_task(self, description: str) -> Task:
        tasks = self.load()
        task = new_task(self._next_id(tasks), description)
        tasks.append(task)
        self.save(tasks)
        logger.debug("Task added id=%s", task.id)
        return task

    def update_task(self, task_id: int, description: str) -> Task:
        tasks = self.load()
        i = self._index_of(tasks, task_id)
        tasks[i] = with_description(tasks[i], description)
        self.save(tasks)
        logger.debug("Task updated id=%s", task_id)
        return tasks[i]

    def delete_task(self, task_id: int) -> None:
        tasks = self.load()
        i = self._index_of(tasks, task_id)
        del tasks[i]
        self.save(tasks)
        logger.debug("Task deleted id=%s remaining=%d", task_id, len(tasks))

    def set_status(self, task_id: int, status: TaskStatus) -> Task:
        tasks = self.load()
        i = self._index_of(tasks, task_id)
        tasks[i] = with_status(tasks[i], status)
        self.save(tasks)
        logger.debug("Task status id=%s status=%s", task_id, status.value)
        return tasks[i]

    def list_tasks(self, status: TaskStatus | None = None) -> list[Task]:
        tasks = self.load()
        if status is None:
            return tasks
        return [t for t in tasks if t.status == status]
