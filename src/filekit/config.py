"""Settings for the filekit command line."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_FILENAME = "config.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_config_file() -> Path:
    """Return the default settings location, ~/.filekit/config.yaml."""
    return Path.home() / ".filekit" / CONFIG_FILENAME


class Settings(BaseModel):
    """User settings loaded from ``~/.filekit/config.yaml``."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    directory_mode: int = Field(default=0o777, alias="directoryMode", ge=0, le=0o7777)
    log_level: str = Field(default="WARNING", alias="logLevel")

    @field_validator("directory_mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: object) -> object:
        """Accept octal strings such as ``"0755"``."""
        if isinstance(value, str):
            return int(value, 8)
        return value

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_file(cls, path: Path) -> Settings:
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            Parsed Settings.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If YAML or values are invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid settings file {path}: expected a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid settings file {path}: {e}") from e


def load_settings(path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults when no file exists.

    Args:
        path: Explicit settings file. Defaults to ~/.filekit/config.yaml.

    Returns:
        Settings instance.
    """
    path = path or default_config_file()
    if not path.exists():
        return Settings()
    return Settings.from_file(path)
