"""Tests for SessionDeck logging setup."""

import logging

from sessiondeck.constants import LOG_LEVEL_ENV
from sessiondeck.logging_config import setup_logging


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    logger = setup_logging()
    assert logger.name == "sessiondeck"
    assert logger.level == logging.DEBUG
    assert [type(h) for h in logger.handlers] == [logging.NullHandler]


def test_explicit_level_overrides_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    logger = setup_logging("WARNING")
    assert logger.level == logging.WARNING


def test_log_file_receives_module_logs(tmp_path, monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
    log_file = tmp_path / "logs" / "sessiondeck.log"
    setup_logging("DEBUG", log_file)

    logging.getLogger("sessiondeck.cli.tui.nav.focus").debug("Focus %s -> %s", "base", "branch")
    for handler in logging.getLogger("sessiondeck").handlers:
        handler.flush()

    assert "Focus base -> branch" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_does_not_stack_handlers(tmp_path, monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
    setup_logging("INFO", tmp_path / "a.log")
    logger = setup_logging("INFO", tmp_path / "b.log")
    assert len(logger.handlers) == 1
