# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.cli.main import run
from task_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_file: Path) -> TaskStore:
    """
    Real JSON store in a per-test temp dir.

    The file format is part of what we want to test, so there is no fake store.
    """
    s = TaskStore(tasks_file)
    s.ensure_initialized()
    return s


@pytest.fixture()
def cli(store: TaskStore, capsys):
    """Run one CLI invocation against the temp store; returns (exit_code, stdout)."""

    def _run(*args: str) -> tuple[int, str]:
        code = run(["task", *args], store)
        return code, capsys.readouterr().out

    return _run
