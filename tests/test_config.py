"""Tests for configuration constants and logging setup."""

import logging

from cg2d import config
from cg2d.logging_config import setup_logging


class TestDefaultLogLevel:
    def test_unset(self, monkeypatch):
        monkeypatch.delenv(config.LOG_LEVEL_ENV, raising=False)
        assert config.default_log_level() == logging.WARNING

    def test_name(self, monkeypatch):
        monkeypatch.setenv(config.LOG_LEVEL_ENV, "debug")
        assert config.default_log_level() == logging.DEBUG

    def test_number(self, monkeypatch):
        monkeypatch.setenv(config.LOG_LEVEL_ENV, "15")
        assert config.default_log_level() == 15

    def test_unknown(self, monkeypatch):
        monkeypatch.setenv(config.LOG_LEVEL_ENV, "chatty")
        assert config.default_log_level() == logging.WARNING


def test_format_helpers():
    assert config.format_area(6) == "6.00 square units"
    assert config.format_volume(10.000000000000002) == "10.00 cubic units"


class TestSetupLogging:
    def test_console_handler(self):
        logger = setup_logging(logging.DEBUG)
        assert logger.name == "cg2d"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeated_setup_does_not_duplicate(self, tmp_path):
        setup_logging(logging.INFO)
        logger = setup_logging(logging.INFO, str(tmp_path / "cg2d.log"))
        assert len(logger.handlers) == 2

    def test_file_handler_receives_records(self, tmp_path):
        log_file = tmp_path / "cg2d.log"
        logger = setup_logging(logging.INFO, str(log_file))
        logging.getLogger("cg2d.shapes").info("hello from shapes")
        for handler in logger.handlers:
            handler.flush()
        assert "cg2d.shapes - INFO - hello from shapes" in log_file.read_text(encoding="utf-8")


class TestParseLogLevel:
    def test_name_and_number(self):
        assert config.parse_log_level("warning") == logging.WARNING
        assert config.parse_log_level(" 15 ") == 15

    def test_unknown_and_empty(self):
        assert config.parse_log_level("loud") is None
        assert config.parse_log_level("") is None


def test_setup_logging_closes_replaced_handlers(tmp_path):
    logger = setup_logging(logging.INFO, str(tmp_path / "first.log"))
    old_file_handler = logger.handlers[1]
    setup_logging(logging.INFO)
    assert old_file_handler not in logger.handlers
    assert old_file_handler.stream is None
