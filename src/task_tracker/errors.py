# src/task_tracker/errors.py

"""Errors surfaced by the task tracker core.

I/O failures are not wrapped: OSError propagates from the store unchanged.
"""

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for task tracker errors."""


class NotFoundError(TaskTrackerError, LookupError):
    """No task with the requested id exists in the store."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task not found with ID: {task_id}")
        self.task_id = task_id


class FormatError(TaskTrackerError, ValueError):
    """The persisted tasks text could not be decoded."""
