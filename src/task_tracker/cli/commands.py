# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import UsageError, ValidationError
from ..tasks.task_models import Task, TaskStatus, now_timestamp
from ..tasks.task_store import TaskStore
from ..tasks.task_view import render_tasks

CommandHandler = Callable[[TaskStore, list[str]], str]

logger = logging.getLogger(__name__)

PROGRAM_NAME = "task"


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler | None
    usage: str
    help_text: str

    def usage_error(self) -> UsageError:
        return UsageError(f"Usage: {PROGRAM_NAME} {self.usage}")


class CommandRegistry:
    """Command table shared by the dispatcher and the help screen."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler | None,
        usage: str,
        help_text: str,
    ) -> None:
        self._commands[name] = Command(name, handler, usage, help_text)

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    def usage_error(self, name: str) -> UsageError:
        return self._commands[name].usage_error()

    def build_help(self) -> str:
        lines = [
            "Task Tracker CLI",
            f"Usage: {PROGRAM_NAME} <command> [arguments]",
            "",
            "Commands:",
        ]
        for cmd in self._commands.values():
            lines.append(f"  {cmd.usage} - {cmd.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _require_args(name: str, args: list[str], count: int) -> None:
    if len(args) < count:
        raise registry.usage_error(name)


def _require_title(title: str) -> str:
    if not title:
        raise ValidationError("Task title must not be empty.")
    return title


def cmd_add(store: TaskStore, args: list[str]) -> str:
    """add "<title>" ["<description>"]"""
    _require_args("add", args, 1)
    title = _require_title(args[0])
    description = args[1] if len(args) > 1 else ""

    tasks = store.load()
    task_id = store.new_task_id(tasks)
    tasks[task_id] = Task(
        id=task_id,
        title=title,
        description=description,
        status=TaskStatus.TODO,
        created_at=now_timestamp(),
    )
    store.save(tasks)
    logger.debug("Task added id=%s", task_id)
    return f"Task added with ID: {task_id}"


def cmd_update(store: TaskStore, args: list[str]) -> str:
    """
    update <id> "<new title>" ["<new description>"]

    The description is only replaced when given; status and created_at never change.
    """
    _require_args("update", args, 2)
    task_id = args[0]
    title = _require_title(args[1])

    tasks = store.load()
    task = store.get(tasks, task_id)
    task.title = title
    if len(args) > 2:
        task.description = args[2]

    store.save(tasks)
    logger.debug("Task updated id=%s", task_id)
    return "Task updated successfully."


def cmd_delete(store: TaskStore, args: list[str]) -> str:
    _require_args("delete", args, 1)
    task_id = args[0]

    tasks = store.load()
    store.get(tasks, task_id)
    del tasks[task_id]

    store.save(tasks)
    logger.debug("Task deleted id=%s", task_id)
    return "Task deleted successfully."


def _mark(name: str, status: TaskStatus) -> CommandHandler:
    def handler(store: TaskStore, args: list[str]) -> str:
        _require_args(name, args, 1)
        task_id = args[0]

        tasks = store.load()
        store.get(tasks, task_id).status = status

        store.save(tasks)
        logger.debug("Task id=%s status=%s", task_id, status)
        return f"Task marked as {status}."

    handler.__name__ = f"cmd_{name}"
    return handler


cmd_progress = _mark("progress", TaskStatus.IN_PROGRESS)
cmd_done = _mark("done", TaskStatus.DONE)


LIST_FILTERS: dict[str, tuple[TaskStatus | None, str]] = {
    "all": (None, "All Tasks"),
    "done": (TaskStatus.DONE, "Completed Tasks"),
    "todo": (TaskStatus.TODO, "Tasks To Do"),
    "inprogress": (TaskStatus.IN_PROGRESS, "Tasks In Progress"),
}


def cmd_list(store: TaskStore, args: list[str]) -> str:
    """
    list [all|done|todo|inprogress]

    Unknown stored statuses never match a status filter; they only show up under "all".
    """
    name = args[0] if args else "all"
    if name not in LIST_FILTERS:
        raise ValidationError("Invalid filter. Use: all, done, todo, or inprogress")
    status, title = LIST_FILTERS[name]

    tasks = store.load()
    if status is not None:
        tasks = {tid: t for tid, t in tasks.items() if t.status == status}
    return render_tasks(tasks, title)


registry.register("add", cmd_add, 'add "<title>" ["<description>"]', "Add a new task")
registry.register(
    "update",
    cmd_update,
    'update <id> "<new title>" ["<new description>"]',
    "Update a task",
)
registry.register("delete", cmd_delete, "delete <id>", "Delete a task")
registry.register("progress", cmd_progress, "progress <id>", "Mark task as in progress")
registry.register("done", cmd_done, "done <id>", "Mark task as done")
registry.register(
    "list", cmd_list, "list [all|done|todo|inprogress]", "List tasks (default: all)"
)
# help is answered by the dispatcher itself; registered for the help screen only.
registry.register("help", None, "help", "Show this help message")
