# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_tracker.cli.bootstrap import create_manager
from task_tracker.config import DEFAULT_TASKS_FILE, Settings
from task_tracker.logging_setup import setup_logging


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TASK_TRACKER_TASKS_FILE", "TASK_TRACKER_LOG_LEVEL", "TASK_TRACKER_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env(dotenv=False)

    assert s.tasks_file == DEFAULT_TASKS_FILE == Path("tasks.json")
    assert s.log_level == "WARNING"
    assert s.console_log_level == logging.WARNING
    assert s.log_dir is None


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_TRACKER_TASKS_FILE", str(tmp_path / "mine.json"))
    monkeypatch.setenv("TASK_TRACKER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_TRACKER_LOG_DIR", str(tmp_path / "logs"))

    s = Settings.from_env(dotenv=False)

    assert s.tasks_file == tmp_path / "mine.json"
    assert s.console_log_level == logging.DEBUG
    assert s.log_dir == tmp_path / "logs"


def test_settings_reads_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("TASK_TRACKER_TASKS_FILE", raising=False)
    (tmp_path / ".env").write_text(f"TASK_TRACKER_TASKS_FILE={tmp_path / 'from_dotenv.json'}\n", "utf-8")
    monkeypatch.chdir(tmp_path)

    s = Settings.from_env()

    assert s.tasks_file == tmp_path / "from_dotenv.json"


def test_unknown_log_level_falls_back_to_warning() -> None:
    assert Settings(log_level="chatty").console_log_level == logging.WARNING


def test_create_manager_uses_configured_file(settings: Settings) -> None:
    manager = create_manager(settings=settings)
    manager.add("configured")

    assert settings.tasks_file.exists()
    assert manager.store.path == settings.tasks_file


def test_setup_logging_writes_file_and_filters_console(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        setup_logging(console_level=logging.INFO, log_dir=tmp_path / "logs")

        logging.getLogger("task_tracker.test").debug("debug line")
        logging.getLogger("someone.else").warning("third-party warning")
        for h in root.handlers:
            h.flush()

        log_file = tmp_path / "logs" / "task_tracker.log"
        text = log_file.read_text("utf-8")
        assert "debug line" in text
        assert "third-party warning" in text

        console = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]
        assert len(console) == 1
        record = logging.LogRecord("someone.else", logging.WARNING, __file__, 1, "x", None, None)
        assert not console[0].filter(record)
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)


def test_setup_logging_unwritable_log_dir_falls_back_to_console(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", "utf-8")

    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        setup_logging(console_level=logging.WARNING, log_dir=blocker / "logs")

        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
        assert "Cannot write log file" in capsys.readouterr().err
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
