# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it turns Settings into a concrete TaskStore.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_task_store(*, settings: Settings | None = None) -> TaskStore:
    """
    Create the TaskStore for the configured tasks file.

    Keeping settings injectable makes the CLI easy to test against a temporary file.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_file)
    logger.debug("TaskStore ready path=%s", store.path)
    return store
