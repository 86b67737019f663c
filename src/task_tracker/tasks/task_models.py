# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - values are the strings stored in the backing file;
    - any transition is allowed (todo -> done, done -> todo, ...).
    """

    TODO = "todo"
    IN_PROGRESS = "inprogress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus | str:
        """Known values become members; unknown strings are kept verbatim."""
        if raw is None or raw == "":
            return cls.TODO
        try:
            return cls(raw)
        except ValueError:
            return str(raw)


STATUS_DISPLAY: dict[TaskStatus, str] = {
    TaskStatus.TODO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.DONE: "Done",
}


def display_status(status: TaskStatus | str) -> str:
    if isinstance(status, TaskStatus):
        return STATUS_DISPLAY[status]
    return status


def now_timestamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


@dataclass(slots=True)
class Task:
    id: str
    title: str
    description: str = ""
    status: TaskStatus | str = TaskStatus.TODO
    created_at: str = ""

    # Fields written by other tools; kept so a load/save cycle does not drop them.
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, task_id: str, raw: dict[str, Any]) -> Task:
        known = {"title", "description", "status", "created_at"}
        return cls(
            id=task_id,
            title=str(raw.get("title") or ""),
            description=str(raw.get("description") or ""),
            status=TaskStatus.parse(raw.get("status")),
            created_at=str(raw.get("created_at") or ""),
            extra={k: v for k, v in raw.items() if k not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "status": str(self.status),
            "created_at": self.created_at,
        }
        out.update(self.extra)
        return out
