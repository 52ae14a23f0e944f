# src/task_tracker/cli/main.py

"""
CLI entrypoint (`task-cli`).

Initializes logging, builds the TaskStore, runs one command and prints its result.
Every failure becomes a single "Error: ..." line and exit status 1.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_task_store
from ..cli.commands import CommandError, registry
from ..config import Settings, get_settings
from ..errors import FormatError, NotFoundError
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def run_command(store: TaskStore, argv: list[str]) -> int:
    try:
        print(registry.handle(store, argv))
        return 0
    except CommandError as e:
        print(f"Error: {e}")
        if e.show_usage:
            print(registry.build_help())
    except NotFoundError as e:
        print(f"Error: {e}")
    except FormatError as e:
        logger.debug("Failed to decode %s", store.path, exc_info=True)
        print(f"Error: Tasks file is corrupted - {e}")
    except OSError as e:
        logger.debug("I/O failure on %s", store.path, exc_info=True)
        print(f"Error: Failed to access tasks file - {e}")
    return 1


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    if settings is None:
        settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(console_level=console_level, log_file=settings.log_file)

    store = create_task_store(settings=settings)
    args = sys.argv[1:] if argv is None else list(argv)
    return run_command(store, args)


if __name__ == "__main__":
    sys.exit(main())
