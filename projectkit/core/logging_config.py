"""
Logging Configuration Module.

This module provides centralized logging configuration for ProjectKit.
It sets up console logging (and optionally file logging) with per-module
levels.

Features:
- Configurable log levels per module
- Console and file logging
- Simple, detailed and JSON-like record formats
"""

import logging
from pathlib import Path
from typing import Optional


def _get_logging_config():
    """Get logging configuration from the settings model.

    Settings are imported lazily so importing this module never triggers
    ``.env`` parsing on its own.
    """
    from projectkit.core.config import get_settings

    current = get_settings()
    return {
        "log_level": current.log_level.upper(),
        "log_format": current.log_format,
        "log_file_dir": current.log_file_dir,
        "enable_file_logging": current.enable_file_logging,
    }


# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

LOG_FILE_NAME = "projectkit.log"

# Module-specific log levels; other modules inherit the root level
MODULE_LOG_LEVELS = {
    # One DEBUG line per resolved URI and per registered driver
    "projectkit.source.resolver": "INFO",
    "projectkit.source.registry": "INFO",
}


def _select_format(fmt: str) -> str:
    if fmt == "json":
        return JSON_FORMAT
    if fmt == "simple":
        return SIMPLE_FORMAT
    return DETAILED_FORMAT


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: Optional[bool] = None,
    log_file_dir: Optional[str] = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Override default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override default format (simple, detailed, json)
        enable_file: Whether to enable file logging; defaults to the settings value
        log_file_dir: Override the directory the log file is written to
    """
    config = _get_logging_config()
    level = (log_level or config["log_level"]).upper()
    fmt = log_format or config["log_format"]
    file_enabled = config["enable_file_logging"] if enable_file is None else enable_file
    file_dir = log_file_dir or config["log_file_dir"]

    formatter = logging.Formatter(_select_format(fmt), datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, filter at handler level

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if file_enabled:
        Path(file_dir).mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(Path(file_dir) / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.debug("Logging configured: level=%s, format=%s, file_logging=%s", level, fmt, file_enabled)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)
