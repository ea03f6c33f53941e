"""
Configuration management using Pydantic Settings.

Settings are read from environment variables prefixed with STORY_SPOILER_.
Every field has a default matching the public deployment, so the suite runs
with no environment at all.

Usage:
    from story_spoiler.core.config import get_settings

    settings = get_settings()
    base_url = settings.api_base_url
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from story_spoiler.core.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_API_PASSWORD,
    DEFAULT_API_USERNAME,
    REQUEST_TIMEOUT_DEFAULT,
)
from story_spoiler.core.enums import Environment


class Settings(BaseSettings):
    """
    Suite settings (flat structure).

    Configuration precedence:
        1. Environment variables (STORY_SPOILER_API_BASE_URL, ...)
        2. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, ci)",
    )

    # Remote API
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Story Spoiler API base URL",
    )
    api_username: str = Field(
        default=DEFAULT_API_USERNAME,
        description="User name exchanged for a bearer token",
    )
    api_password: str = Field(
        default=DEFAULT_API_PASSWORD,
        description="Password exchanged for a bearer token",
    )
    request_timeout: float = Field(
        default=REQUEST_TIMEOUT_DEFAULT,
        description="HTTP request timeout in seconds",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of colored console output",
    )

    model_config = SettingsConfigDict(
        env_prefix="STORY_SPOILER_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        """
        Validate the request timeout is positive.

        Raises:
            ValueError: If timeout is zero or negative.
        """
        if v <= 0:
            raise ValueError("request_timeout must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def use_json_logs(self) -> bool:
        """
        Whether logs should be rendered as JSON.

        Returns:
            bool: True when log_json is set or running in CI.
        """
        return self.log_json or self.environment == Environment.CI


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
