"""Client settings loaded from the environment."""

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spoticlient.domain.exceptions import ConfigurationError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# Hey future me - throw_errors is the per-client switch between "raise UnexpectedError" and
# "return the fallback value" (False / [] / empty Paging). It lives HERE and gets handed to the
# Client at construction. Never read it from a module global at call time!
class Settings(BaseSettings):
    """Settings for a spoticlient Client.

    Every field can be overridden with a ``SPOTICLIENT_`` prefixed environment
    variable (e.g. ``SPOTICLIENT_THROW_ERRORS=true``) or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SPOTICLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = Field(
        default="https://api.spotify.com/v1",
        description="Base URL every request path is joined onto",
    )
    timeout: float = Field(
        default=30.0, gt=0, description="HTTP timeout in seconds"
    )
    throw_errors: bool = Field(
        default=False,
        description="Raise UnexpectedError instead of returning fallback values",
    )
    log_level: str = Field(default="INFO", description="Root log level")
    json_logs: bool = Field(default=False, description="Emit JSON formatted logs")

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
            )
        return level

    @property
    def numeric_log_level(self) -> int:
        """Log level as the ``logging`` module constant."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings read from the environment.

    Raises:
        ConfigurationError: If a SPOTICLIENT_ variable (or .env entry) is invalid
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid spoticlient settings: {e}") from e
