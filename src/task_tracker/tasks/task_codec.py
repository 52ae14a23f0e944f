# src/task_tracker/tasks/task_codec.py

"""Text codec for the tasks file.

The file is a JSON-compatible list with one flat object per line:

    [
      {"id": 1, "description": "Buy milk", "status": "TODO", "createdAt": "2024-01-01T12:00:00", "updatedAt": "2024-01-01T12:00:00"}
    ]

encode() writes the five fields in a fixed order; decode() reads them by name,
so field order and layout inside the file do not matter.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from ..errors import FormatError
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"
_TIMESTAMP_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}")

FIELDS = ("id", "description", "status", "createdAt", "updatedAt")


def format_timestamp(ts: datetime) -> str:
    return ts.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(raw: Any, field: str = "timestamp") -> datetime:
    if not isinstance(raw, str) or not _TIMESTAMP_RE.fullmatch(raw):
        raise FormatError(f"Invalid {field}: {raw!r} (expected YYYY-MM-DDTHH:MM:SS)")
    try:
        return datetime.strptime(raw, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise FormatError(f"Invalid {field}: {raw!r} ({exc})") from exc


def _task_to_entry(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "description": task.description,
        "status": task.status.value,
        "createdAt": format_timestamp(task.created_at),
        "updatedAt": format_timestamp(task.updated_at),
    }


def encode(tasks: Iterable[Task]) -> str:
    """Serialize tasks to the file format. No tasks -> "[]"."""
    lines = [json.dumps(_task_to_entry(t), ensure_ascii=False) for t in tasks]
    if not lines:
        return "[]"
    return "[\n" + ",\n".join(f"  {line}" for line in lines) + "\n]"


def _entry_to_task(entry: Any, index: int) -> Task:
    if not isinstance(entry, dict):
        raise FormatError(f"Entry #{index} is not an object")

    missing = [name for name in FIELDS if name not in entry]
    if missing:
        raise FormatError(f"Entry #{index} is missing field(s): {', '.join(missing)}")

    task_id = entry["id"]
    # bool is an int subclass; reject it explicitly.
    if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id < 1:
        raise FormatError(f"Entry #{index} has invalid id: {task_id!r}")

    description = entry["description"]
    if not isinstance(description, str):
        raise FormatError(f"Entry #{index} has non-string description")

    raw_status = entry["status"]
    try:
        status = TaskStatus(raw_status)
    except ValueError as exc:
        raise FormatError(f"Entry #{index} has unknown status: {raw_status!r}") from exc

    return Task(
        id=task_id,
        description=description,
        status=status,
        created_at=parse_timestamp(entry["createdAt"], "createdAt"),
        updated_at=parse_timestamp(entry["updatedAt"], "updatedAt"),
    )


def decode(text: str) -> list[Task]:
    """
    Parse the file format back into tasks, in file order.

    Empty or whitespace-only text decodes to an empty list.
    Raises FormatError on anything that is not a list of valid task entries.
    """
    if not text or not text.strip():
        return []

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FormatError(f"Malformed tasks text: {exc}") from exc

    if not isinstance(data, list):
        raise FormatError("Tasks text must be a list of entries")

    tasks = [_entry_to_task(entry, i) for i, entry in enumerate(data, start=1)]
    logger.debug("Decoded %d task(s)", len(tasks))
    return tasks
