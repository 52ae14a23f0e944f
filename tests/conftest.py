# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from task_tracker.config import Settings
from task_tracker.tasks.task_models import Task, TaskStatus
from task_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    """Isolated tasks file per test (not created until the first save)."""
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    return TaskStore(tasks_path)


@pytest.fixture()
def settings(tasks_path: Path) -> Settings:
    return Settings(tasks_file=tasks_path, log_level="WARNING", log_file=None)


@pytest.fixture()
def sample_tasks() -> list[Task]:
    """
    Three tasks with fixed timestamps, one per status.

    Descriptions include the characters the codec has to escape.
    """
    return [
        Task(
            id=1,
            description="Buy milk",
            status=TaskStatus.TODO,
            created_at=datetime(2024, 1, 1, 12, 0, 0),
            updated_at=datetime(2024, 1, 1, 12, 0, 0),
        ),
        Task(
            id=2,
            description='Write "quarterly" report\n\tsection 1\r\nC:\\temp\\notes',
            status=TaskStatus.IN_PROGRESS,
            created_at=datetime(2024, 1, 2, 9, 30, 15),
            updated_at=datetime(2024, 1, 3, 18, 45, 0),
        ),
        Task(
            id=5,
            description="Café {braces}, [brackets]",
            status=TaskStatus.DONE,
            created_at=datetime(2024, 2, 29, 23, 59, 59),
            updated_at=datetime(2024, 3, 1, 0, 0, 0),
        ),
    ]
