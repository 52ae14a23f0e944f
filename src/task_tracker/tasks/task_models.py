# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - values are the enum names, which is what the tasks file stores
    - the CLI spells them as labels: "todo", "in-progress", "done"
    """

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    @property
    def label(self) -> str:
        return self.value.lower().replace("_", "-")

    @classmethod
    def from_label(cls, raw: str) -> TaskStatus:
        key = raw.strip().upper().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown task status: {raw!r}") from None


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime


def now_local() -> datetime:
    """Current local time truncated to whole seconds (the stored precision)."""
    return datetime.now().replace(microsecond=0)


def new_task(task_id: int, description: str, *, now: datetime | None = None) -> Task:
    ts = now_local() if now is None else now.replace(microsecond=0)
    return Task(
        id=task_id,
        description=description,
        status=TaskStatus.TODO,
        created_at=ts,
        updated_at=ts,
    )


def _touched_at(task: Task, now: datetime | None) -> datetime:
    ts = now_local() if now is None else now.replace(microsecond=0)
    # Clock may step backwards between invocations.
    return max(ts, task.created_at)


def with_description(task: Task, description: str, *, now: datetime | None = None) -> Task:
    """Return a copy of `task` with a new description and a refreshed updated_at."""
    return replace(task, description=description, updated_at=_touched_at(task, now))


def with_status(task: Task, status: TaskStatus, *, now: datetime | None = None) -> Task:
    """Return a copy of `task` with a new status and a refreshed updated_at."""
    return replace(task, status=status, updated_at=_touched_at(task, now))
