# tasks/task_view.py

from __future__ import annotations

from collections.abc import Mapping

from .task_models import Task, display_status


def render_tasks(tasks: Mapping[str, Task], title: str | None = None) -> str:
    """
    Render tasks as plain text, in collection order.

    [<id>] <title> (Status: <display status>)
        Description: <description>      (only when non-empty)
    """
    lines: list[str] = []
    if title:
        lines.append("")
        lines.append(title)
        lines.append("-" * len(title))

    if not tasks:
        lines.append("No tasks found.")
        return "\n".join(lines)

    for task_id, task in tasks.items():
        lines.append(f"[{task_id}] {task.title} (Status: {display_status(task.status)})")
        if task.description:
            lines.append(f"    Description: {task.description}")

    lines.append("")
    return "\n".join(lines)
