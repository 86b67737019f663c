# tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
import secrets
import time
from pathlib import Path
from typing import Any

from ..errors import NotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)

TaskCollection = dict[str, Task]


class TaskStore:
    """
    JSON file task store.

    The whole collection lives in one JSON object keyed by task id:
    - load() reads everything, save() rewrites everything
    - writes go to a sibling .tmp file first and are moved into place with os.replace

    Entries that are not objects are not turned into tasks, but they are written
    back unchanged by the next save().

    There is no locking: two processes saving at once means last writer wins.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        self._unparsed: dict[str, Any] = {}

    @property
    def path(self) -> Path:
        return self._path

    def ensure_initialized(self) -> None:
        if self._path.exists():
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text("{}", "utf-8")
        logger.info("Created task file %s", self._path)

    def load(self) -> TaskCollection:
        """
        Read the collection from disk.

        Malformed content (empty file, invalid JSON, a non-object document) is
        treated as "no tasks" so the tool stays usable; the next save replaces it.
        OSError (missing file, permissions) propagates.
        """
        self._unparsed = {}
        raw = self._path.read_bytes()
        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError, UnicodeDecodeError, or nesting deeper than the recursion limit
            logger.warning("Ignoring unparsable task file %s: %s", self._path, exc)
            return {}

        if not isinstance(data, dict):
            if data:
                logger.warning(
                    "Ignoring task file %s: expected an object, got %s",
                    self._path,
                    type(data).__name__,
                )
            return {}

        tasks: TaskCollection = {}
        for task_id, entry in data.items():
            if not isinstance(entry, dict):
                logger.warning("Keeping malformed task entry id=%s as-is", task_id)
                self._unparsed[task_id] = entry
                continue
            tasks[task_id] = Task.from_dict(task_id, entry)

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: TaskCollection) -> None:
        payload = {task_id: task.to_dict() for task_id, task in tasks.items()}
        for task_id, entry in self._unparsed.items():
            payload.setdefault(task_id, entry)
        text = json.dumps(payload, ensure_ascii=False, indent=4) + "\n"

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(text, "utf-8")
            os.replace(tmp, self._path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)

    @staticmethod
    def get(tasks: TaskCollection, task_id: str) -> Task:
        task = tasks.get(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    @staticmethod
    def new_task_id(tasks: TaskCollection) -> str:
        """
        Time-based id: 8 hex digits of seconds + 5 of microseconds.

        Two adds within the same microsecond (or a clock going backwards) can
        collide, so a random suffix is appended until the id is free.
        """
        now = time.time()
        sec = int(now)
        usec = int((now - sec) * 1_000_000)
        task_id = f"{sec:08x}{usec:05x}"
        while task_id in tasks:
            task_id = f"{task_id}{secrets.token_hex(2)}"
        return task_id
