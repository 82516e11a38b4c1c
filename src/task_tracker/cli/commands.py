# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..tasks.results import Result
from ..tasks.task_manager import TaskManager
from ..tasks.task_models import Task

CommandHandler = Callable[[TaskManager, list[str]], str]

TS_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Bad command line (unknown command, missing argument, malformed id)."""


class CommandRegistry:
    """Command registry used by the CLI entrypoint (add, list, mark-done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        usage: str,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (usage, help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, manager: TaskManager, argv: Sequence[str]) -> str:
        """
        Run the command named by argv[0] and return the text to print.

        Raises UsageError for command-line mistakes. Core failures surface as
        TaskError via Result.unwrap().
        """
        if not argv:
            return self.build_help()

        name = argv[0].lower()
        args = list(argv[1:])

        handler = self._handlers.get(name)
        if not handler:
            raise UsageError(f"Unknown command: {name}\n\n{self.build_help()}")

        logger.debug("Dispatching command %s args=%s", name, args)
        return handler(manager, args)

    def build_help(self) -> str:
        width = max((len(usage) for usage, _ in self._help.values()), default=0)
        lines = ["Task Tracker CLI - Available Commands:", ""]
        for usage, help_text in self._help.values():
            lines.append(f"  {usage.ljust(width)}  - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise UsageError("Invalid task ID. Please provide a valid number.") from None


def format_task(task: Task) -> str:
    return (
        f"[{task.id}] {task.description}"
        f" | Status: {task.status.value.upper()}"
        f" | Created: {task.created_at.strftime(TS_FORMAT)}"
        f" | Updated: {task.updated_at.strftime(TS_FORMAT)}"
    )


def cmd_help(manager: TaskManager, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(manager: TaskManager, args: list[str]) -> str:
    if not args:
        raise UsageError('Usage: add "task description"')
    task = manager.add(" ".join(args)).unwrap()
    return f"Task added successfully (ID: {task.id})"


def cmd_update(manager: TaskManager, args: list[str]) -> str:
    if len(args) < 2:
        raise UsageError('Usage: update <id> "new description"')
    task_id = _parse_id(args[0])
    manager.update(task_id, " ".join(args[1:])).unwrap()
    return f"Task {task_id} updated successfully"


def cmd_delete(manager: TaskManager, args: list[str]) -> str:
    if not args:
        raise UsageError("Usage: delete <id>")
    task_id = _parse_id(args[0])
    manager.delete(task_id).unwrap()
    return f"Task {task_id} deleted successfully"


def _status_command(
    name: str, mark: Callable[[TaskManager, int], Result[Task]], label: str
) -> CommandHandler:
    def handler(manager: TaskManager, args: list[str]) -> str:
        if not args:
            raise UsageError(f"Usage: {name} <id>")
        task_id = _parse_id(args[0])
        mark(manager, task_id).unwrap()
        return f"Task {task_id} marked as {label}"

    return handler


def cmd_list(manager: TaskManager, args: list[str]) -> str:
    """
    list          -> every task
    list <status> -> tasks with that status (todo / in-progress / done)
    """
    if args:
        tasks = manager.list_by_status(args[0]).unwrap()
    else:
        tasks = manager.list_all().unwrap()

    if not tasks:
        return "No tasks found."
    return "\n".join(["=== Tasks ===", *(format_task(t) for t in tasks)])


registry.register("add", cmd_add, 'add "description"', "Add a new task")
registry.register("update", cmd_update, 'update <id> "description"', "Update a task's description")
registry.register("delete", cmd_delete, "delete <id>", "Delete a task", aliases=["rm"])
registry.register(
    "mark-in-progress",
    _status_command("mark-in-progress", TaskManager.mark_in_progress, "in-progress"),
    "mark-in-progress <id>",
    "Mark a task as in progress",
)
registry.register(
    "mark-done",
    _status_command("mark-done", TaskManager.mark_done, "done"),
    "mark-done <id>",
    "Mark a task as done",
)
registry.register(
    "mark-todo",
    _status_command("mark-todo", TaskManager.mark_todo, "todo"),
    "mark-todo <id>",
    "Move a task back to todo",
)
registry.register("list", cmd_list, "list [todo|in-progress|done]", "List tasks, optionally by status")
registry.register("help", cmd_help, "help", "Show available commands", aliases=["-h", "--help"])
