"""Unit tests for logging configuration module.

Tests verify that the logging configuration functions work correctly with different
scenarios including various log levels, formats, and file logging options.
"""

import logging
from pathlib import Path

import pytest

from projectkit.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    LOG_FILE_NAME,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


def _console_handler(root_logger: logging.Logger):
    return next(
        (h for h in root_logger.handlers if type(h) is logging.StreamHandler),
        None,
    )


def _file_handler(root_logger: logging.Logger):
    return next(
        (h for h in root_logger.handlers if isinstance(h, logging.FileHandler)),
        None,
    )


@pytest.fixture(autouse=True)
def _isolated_root_logger(restore_root_logger, monkeypatch):
    monkeypatch.delenv("PROJECTKIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PROJECTKIT_LOG_FORMAT", raising=False)
    monkeypatch.delenv("PROJECTKIT_ENABLE_FILE_LOGGING", raising=False)
    yield
    for module_name in MODULE_LOG_LEVELS:
        logging.getLogger(module_name).setLevel(logging.NOTSET)


class TestSetupLoggingLogLevels:
    """Test setup_logging with different log levels."""

    @pytest.mark.parametrize(
        "log_level,expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
            ("debug", logging.DEBUG),  # Test lowercase
            ("info", logging.INFO),
        ],
    )
    def test_setup_logging_with_different_levels(self, log_level, expected_level):
        """Test setup_logging configures correct log level."""
        setup_logging(log_level=log_level, enable_file=False)

        console_handler = _console_handler(logging.getLogger())

        assert console_handler is not None
        assert console_handler.level == expected_level

    def test_setup_logging_default_level(self):
        """Test setup_logging uses INFO as default level."""
        setup_logging(enable_file=False)

        console_handler = _console_handler(logging.getLogger())

        assert console_handler is not None
        assert console_handler.level == logging.INFO

    def test_setup_logging_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("PROJECTKIT_LOG_LEVEL", "warning")

        setup_logging(enable_file=False)

        assert _console_handler(logging.getLogger()).level == logging.WARNING

    def test_setup_logging_root_logger_level_is_debug(self):
        """Test root logger is set to DEBUG to capture all levels."""
        setup_logging(log_level="WARNING", enable_file=False)

        # Filtering happens at handler level
        assert logging.getLogger().level == logging.DEBUG


class TestSetupLoggingFormats:
    """Test setup_logging with different log formats."""

    @pytest.mark.parametrize(
        "log_format,expected_format",
        [
            ("simple", SIMPLE_FORMAT),
            ("detailed", DETAILED_FORMAT),
            ("json", JSON_FORMAT),
            ("unknown", DETAILED_FORMAT),
        ],
    )
    def test_setup_logging_with_different_formats(self, log_format, expected_format):
        """Test setup_logging configures correct format."""
        setup_logging(log_format=log_format, enable_file=False)

        console_handler = _console_handler(logging.getLogger())

        assert console_handler is not None
        assert console_handler.formatter._fmt == expected_format

    def test_setup_logging_default_format(self):
        """Test setup_logging uses detailed format by default."""
        setup_logging(enable_file=False)

        assert _console_handler(logging.getLogger()).formatter._fmt == DETAILED_FORMAT

    def test_setup_logging_format_with_timestamp(self):
        setup_logging(log_format="detailed", enable_file=False)

        assert _console_handler(logging.getLogger()).formatter.datefmt == "%Y-%m-%d %H:%M:%S"


class TestSetupLoggingFileHandling:
    """Test setup_logging file logging functionality."""

    def test_setup_logging_with_file_enabled(self, tmp_path):
        """Test setup_logging creates file handler when enabled."""
        setup_logging(log_level="ERROR", enable_file=True, log_file_dir=str(tmp_path))

        file_handler = _file_handler(logging.getLogger())

        assert file_handler is not None
        # File handler should always be DEBUG
        assert file_handler.level == logging.DEBUG
        assert Path(file_handler.baseFilename) == tmp_path / LOG_FILE_NAME

    def test_setup_logging_with_file_disabled(self):
        """Test setup_logging does not create file handler when disabled."""
        setup_logging(enable_file=False)

        assert _file_handler(logging.getLogger()) is None

    def test_setup_logging_creates_log_directory(self, tmp_path):
        """Test setup_logging creates log directory if it doesn't exist."""
        log_dir = tmp_path / "new_logs"
        assert not log_dir.exists()

        setup_logging(enable_file=True, log_file_dir=str(log_dir))

        assert log_dir.is_dir()

    def test_setup_logging_file_flag_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PROJECTKIT_ENABLE_FILE_LOGGING", "true")
        monkeypatch.setenv("PROJECTKIT_LOG_FILE_DIR", str(tmp_path))

        setup_logging()

        assert _file_handler(logging.getLogger()) is not None


class TestSetupLoggingHandlerManagement:
    """Test setup_logging handler management."""

    def test_setup_logging_removes_existing_handlers(self):
        """Test setup_logging removes existing handlers to avoid duplicates."""
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        assert len(logging.getLogger().handlers) == 1


class TestSetupLoggingModuleSpecificLevels:
    """Test module-specific log level configuration."""

    @pytest.mark.parametrize(
        "module_name,expected_level",
        [
            ("projectkit.source.resolver", logging.INFO),
            ("projectkit.source.registry", logging.INFO),
        ],
    )
    def test_module_specific_log_levels(self, module_name, expected_level):
        setup_logging(enable_file=False)

        assert logging.getLogger(module_name).level == expected_level

    def test_all_module_log_levels_configured(self):
        """Test all modules in MODULE_LOG_LEVELS are configured."""
        setup_logging(enable_file=False)

        for module_name, expected_level_str in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(module_name).level == getattr(logging, expected_level_str)

    def test_projectkit_loggers_inherit_root_level(self):
        setup_logging(log_level="DEBUG", enable_file=False)

        assert logging.getLogger("projectkit.resource.loader").getEffectiveLevel() == logging.DEBUG


class TestGetLogger:
    """Test get_logger function."""

    def test_get_logger_with_different_names(self):
        logger1 = get_logger("module1")
        logger2 = get_logger("module2")

        assert logger1 is not logger2
        assert logger1.name == "module1"
        assert logger2.name == "module2"

    def test_get_logger_same_name_returns_same_instance(self):
        assert get_logger("same_module") is get_logger("same_module")

    @pytest.mark.parametrize(
        "module_name",
        [
            "projectkit.source",
            "projectkit.ai.skill.loader",
            "custom_module",
        ],
    )
    def test_get_logger_with_various_names(self, module_name):
        logger = get_logger(module_name)

        assert isinstance(logger, logging.Logger)
        assert logger.name == module_name


class TestLoggingIntegration:
    """Integration tests for logging functionality."""

    def test_records_reach_the_log_file(self, tmp_path):
        setup_logging(log_level="ERROR", log_format="simple", enable_file=True, log_file_dir=str(tmp_path))

        get_logger("projectkit.test").debug("written to file only")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = (tmp_path / LOG_FILE_NAME).read_text()
        assert "DEBUG - projectkit.test - written to file only" in content
