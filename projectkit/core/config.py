"""
Configuration Settings.

This module defines the ProjectKit configuration using Pydantic's BaseSettings.
All values are bound from environment variables and an optional ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    ProjectKit settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="PROJECTKIT_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log record format (simple, detailed, json)",
        alias="PROJECTKIT_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory that receives the log file when file logging is enabled",
        alias="PROJECTKIT_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write log records to <log_file_dir>/projectkit.log",
        alias="PROJECTKIT_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Project Layout
    # =====================================================================
    config_file_name: str = Field(
        default=".projectkit.yaml",
        description="Name of the project configuration file",
        alias="PROJECTKIT_CONFIG_FILE_NAME",
    )
    repository_dir: str = Field(
        default=".projectkit/repository",
        description="Project-relative directory holding the persisted resource repositories",
        alias="PROJECTKIT_REPOSITORY_DIR",
    )

    # =====================================================================
    # Source Drivers
    # =====================================================================
    driver_entry_point_group: str = Field(
        default="projectkit.source_drivers",
        description="Entry-point group scanned for third-party source drivers",
        alias="PROJECTKIT_DRIVER_ENTRY_POINT_GROUP",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide :class:`Settings` instance."""
    return Settings()


settings = get_settings()
