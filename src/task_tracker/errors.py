# src/task_tracker/errors.py

"""User-facing errors raised by command handlers.

The dispatcher is the only place that catches these; it prints
``Error: <message>`` and keeps the process alive.
"""

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for recoverable, user-facing failures."""


class UsageError(TaskTrackerError):
    """Wrong number of arguments; the message is the command's usage line."""


class NotFoundError(TaskTrackerError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task with ID {task_id} not found.")
        self.task_id = task_id


class ValidationError(TaskTrackerError):
    """An argument has the right shape but an unacceptable value."""
