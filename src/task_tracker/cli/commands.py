# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_models import Task, TaskStatus
from ..tasks.task_store import TaskStore

CommandHandler = Callable[[TaskStore, list[str]], str]

logger = logging.getLogger(__name__)

PROG = "task-cli"
RULE = "-" * 40


class CommandError(Exception):
    """Bad command-line usage. The message is shown to the user after 'Error: '."""

    def __init__(self, message: str, *, show_usage: bool = False) -> None:
        super().__init__(message)
        self.show_usage = show_usage


@dataclass(slots=True)
class _Command:
    handler: CommandHandler
    usage: list[str]


class CommandRegistry:
    """Maps command names (add, list, ...) to handlers over a TaskStore."""

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        usage: str | list[str],
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        usage_lines = [usage] if isinstance(usage, str) else list(usage)
        command = _Command(handler=handler, usage=usage_lines)
        self._commands[name.lower()] = command
        for alias in aliases:
            # Aliases dispatch but stay out of the usage text.
            self._commands[alias.lower()] = _Command(handler=handler, usage=[])

    def handle(self, store: TaskStore, argv: list[str]) -> str:
        """
        Run one command line (without the program name) and return its output.

        Raises CommandError for usage problems; store errors propagate.
        """
        if not argv:
            return self.build_help()

        name = argv[0].lower()
        command = self._commands.get(name)
        if command is None:
            raise CommandError(f"Unknown command '{name}'", show_usage=True)

        logger.debug("Dispatching command=%s args=%d", name, len(argv) - 1)
        return command.handler(store, argv[1:])

    def build_help(self) -> str:
        lines = ["Usage:"]
        for command in self._commands.values():
            lines.extend(f"  {PROG} {u}" for u in command.usage)
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise CommandError("Invalid task ID format") from None


def _expect_args(args: list[str], count: int, message: str) -> None:
    if len(args) != count:
        raise CommandError(message)


def _parse_description(raw: str) -> str:
    # Undecodable argv bytes arrive as lone surrogates; the tasks file is UTF-8.
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        raise CommandError("Description is not valid UTF-8 text") from None
    return raw


def format_task(task: Task) -> str:
    return "\n".join(
        [
            f"ID: {task.id}",
            f"Description: {task.description}",
            f"Status: {task.status.label}",
            f"Created: {task.created_at:%Y-%m-%d %H:%M:%S}",
            f"Updated: {task.updated_at:%Y-%m-%d %H:%M:%S}",
        ]
    )


def cmd_help(store: TaskStore, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(store: TaskStore, args: list[str]) -> str:
    _expect_args(args, 1, "'add' command requires a description")
    task = store.add_task(_parse_description(args[0]))
    return f"Task added successfully (ID: {task.id})"


def cmd_update(store: TaskStore, args: list[str]) -> str:
    _expect_args(args, 2, "'update' command requires an ID and description")
    task_id = _parse_id(args[0])
    store.update_task(task_id, _parse_description(args[1]))
    return f"Task {task_id} updated successfully"


def cmd_delete(store: TaskStore, args: list[str]) -> str:
    _expect_args(args, 1, "'delete' command requires an ID")
    task_id = _parse_id(args[0])
    store.delete_task(task_id)
    return f"Task {task_id} deleted successfully"


def _mark(name: str, status: TaskStatus) -> CommandHandler:
    def handler(store: TaskStore, args: list[str]) -> str:
        _expect_args(args, 1, f"'{name}' command requires an ID")
        task_id = _parse_id(args[0])
        store.set_status(task_id, status)
        return f"Task {task_id} marked as {status.label}"

    return handler


def cmd_list(store: TaskStore, args: list[str]) -> str:
    """
    list                -> all tasks
    list <status>       -> only todo / in-progress / done
    """
    if len(args) > 1:
        raise CommandError("'list' command takes at most one argument")

    status: TaskStatus | None = None
    if args:
        try:
            status = TaskStatus.from_label(args[0])
        except ValueError:
            raise CommandError(
                "Invalid status filter. Use 'todo', 'in-progress', or 'done'"
            ) from None

    tasks = store.list_tasks(status)
    if not tasks:
        return "No tasks found"

    header = "Tasks:" if status is None else f"Tasks ({status.label}):"
    lines = [header, RULE]
    for task in tasks:
        lines.append(format_task(task))
        lines.append(RULE)
    return "\n".join(lines)


registry.register("add", cmd_add, usage='add "<description>"')
registry.register("update", cmd_update, usage='update <id> "<description>"')
registry.register("delete", cmd_delete, usage="delete <id>")
registry.register(
    "mark-in-progress", _mark("mark-in-progress", TaskStatus.IN_PROGRESS), usage="mark-in-progress <id>"
)
registry.register("mark-done", _mark("mark-done", TaskStatus.DONE), usage="mark-done <id>")
registry.register("mark-todo", _mark("mark-todo", TaskStatus.TODO), usage="mark-todo <id>")
registry.register(
    "list",
    cmd_list,
    usage=["list", "list todo", "list in-progress", "list done"],
)
registry.register("help", cmd_help, usage="help", aliases=["-h", "--help"])
