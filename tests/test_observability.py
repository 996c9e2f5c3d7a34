"""
Tests for logging setup — level resolution and handlers.
"""

from __future__ import annotations

import logging
from pathlib import Path

from csv_fixtures.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    ENV_LEVEL,
    configure_from_flags,
    resolve_level,
    setup_logging,
)


class TestResolveLevel:
    def test_flags_win(self, monkeypatch):
        monkeypatch.setenv(ENV_LEVEL, "ERROR")
        assert resolve_level(debug=True) == "DEBUG"
        assert resolve_level(verbose=True) == "INFO"
        assert resolve_level(quiet=True) == "ERROR"

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv(ENV_LEVEL, "INFO")
        assert resolve_level() == "INFO"

    def test_default_warning(self, monkeypatch):
        monkeypatch.delenv(ENV_LEVEL, raising=False)
        assert resolve_level() == "WARNING"


class TestSetupLogging:
    def test_console_level(self, restore_root_logger):
        setup_logging(level="INFO")
        root = restore_root_logger
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_unknown_level_is_warning(self, restore_root_logger):
        setup_logging(level="LOUD")
        assert restore_root_logger.level == logging.WARNING

    def test_file_handler(self, tmp_path: Path, restore_root_logger):
        log_file = tmp_path / "run.log"
        setup_logging(level="WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)

        logging.getLogger("csv_fixtures.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text()

    def test_quiets_werkzeug(self, restore_root_logger):
        setup_logging(level="INFO")
        assert logging.getLogger("werkzeug").level == logging.WARNING

    def test_debug_format_includes_line(self, restore_root_logger):
        setup_logging(level="DEBUG")
        fmt = restore_root_logger.handlers[0].formatter._fmt
        assert "%(lineno)d" in fmt


class TestConfigureFromFlags:
    def test_env_file(self, tmp_path: Path, monkeypatch, restore_root_logger):
        log_file = tmp_path / "env.log"
        monkeypatch.delenv(ENV_LEVEL, raising=False)
        monkeypatch.setenv(ENV_FILE, str(log_file))
        monkeypatch.setenv(ENV_FILE_LEVEL, "INFO")
        configure_from_flags()

        root = restore_root_logger
        assert root.level == logging.INFO
        logging.getLogger("csv_fixtures.test").info("from env")
        for h in root.handlers:
            h.flush()
        assert "from env" in log_file.read_text()

    def test_verbose_flag(self, monkeypatch, restore_root_logger):
        monkeypatch.delenv(ENV_FILE, raising=False)
        configure_from_flags(verbose=True)
        assert restore_root_logger.level == logging.INFO
