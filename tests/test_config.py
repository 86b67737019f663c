# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

from task_tracker.config import Settings, get_settings


def test_defaults(monkeypatch) -> None:
    for name in ("TASK_TRACKER_FILE", "TASK_TRACKER_LOG_LEVEL", "TASK_TRACKER_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.tasks_file == Path("tasks.json")
    assert s.log_level == "WARNING"
    assert s.console_log_level == logging.WARNING
    assert s.log_file is None


def test_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_TRACKER_FILE", str(tmp_path / "t.json"))
    monkeypatch.setenv("TASK_TRACKER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_TRACKER_LOG_FILE", str(tmp_path / "task.log"))

    s = Settings.from_env()
    assert s.tasks_file == tmp_path / "t.json"
    assert s.console_log_level == logging.DEBUG
    assert s.log_file == tmp_path / "task.log"


def test_invalid_values_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("TASK_TRACKER_FILE", "  ")
    monkeypatch.setenv("TASK_TRACKER_LOG_LEVEL", "chatty")

    s = Settings.from_env()
    assert s.tasks_file == Path("tasks.json")
    assert s.log_level == "WARNING"


def test_dotenv_is_read_from_working_directory_only(monkeypatch, tmp_path: Path) -> None:
    # setenv + delenv so whatever load_dotenv writes is undone after the test
    monkeypatch.setenv("TASK_TRACKER_FILE", "unset")
    monkeypatch.delenv("TASK_TRACKER_FILE")
    monkeypatch.setenv("TASK_TRACKER_LOG_LEVEL", "unset")
    monkeypatch.delenv("TASK_TRACKER_LOG_LEVEL")

    (tmp_path / ".env").write_text("TASK_TRACKER_FILE=from-parent.json\n", "utf-8")
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)

    get_settings.cache_clear()
    try:
        assert get_settings().tasks_file == Path("tasks.json")
    finally:
        get_settings.cache_clear()

    (project / ".env").write_text("TASK_TRACKER_LOG_LEVEL=error\n", "utf-8")
    try:
        assert get_settings().log_level == "ERROR"
    finally:
        get_settings.cache_clear()
