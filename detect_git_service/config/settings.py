"""
Configuration using pydantic-settings for environment-driven defaults.

Settings are read from ``DETECT_GIT_SERVICE_*`` environment variables. There
are no configuration files; callers that need something else pass it
explicitly (e.g. ``detect_with_command``).
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from detect_git_service.exceptions import ConfigurationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DetectorSettings(BaseSettings):
    """Detector settings.

    Example:
        >>> import os
        >>> os.environ["DETECT_GIT_SERVICE_GIT_COMMAND"] = "/usr/local/bin/git"
        >>> DetectorSettings().git_command
        '/usr/local/bin/git'
    """

    model_config = SettingsConfigDict(
        env_prefix="DETECT_GIT_SERVICE_",
        case_sensitive=False,
    )

    git_command: str = Field(default="git", description="Name or path of the git executable")
    log_level: LogLevel = Field(default="WARNING", description="Minimum log level for the CLI")

    @field_validator("git_command")
    @classmethod
    def validate_git_command(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("git_command must not be empty")
        return v.strip()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


def load_settings() -> DetectorSettings:
    """Load settings from the environment.

    Returns:
        Validated DetectorSettings

    Raises:
        ConfigurationError: If an environment variable holds an invalid value.
    """
    try:
        return DetectorSettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid detector settings: {e}") from e
