# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole process.
- Nothing is read at import time; get_settings() builds it on first use.
- The tasks file path is a plain value handed to TaskStore, never a hidden global.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASK_TRACKER"

DEFAULT_TASKS_FILE = Path("tasks.json")
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _env_path(name: str, default: Path) -> Path:
    path = _env_optional_path(name)
    return default if path is None else path


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    tasks_file: Path = DEFAULT_TASKS_FILE

    # ---- Logging ----
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None

    @staticmethod
    def from_env(*, dotenv: bool = True) -> Settings:
        if dotenv:
            # Existing environment variables win over .env entries.
            load_dotenv(find_dotenv(usecwd=True), override=False)

        return Settings(
            tasks_file=_env_path(_k("FILE"), DEFAULT_TASKS_FILE),
            log_level=_env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
            log_file=_env_optional_path(_k("LOG_FILE")),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
