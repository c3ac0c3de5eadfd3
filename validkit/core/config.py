"""
Configuration management using Pydantic Settings.

Settings are read from environment variables prefixed with ``VALIDKIT_``
(for example ``VALIDKIT_DEFAULT_LOCALE=en-US``).

Usage:
    from validkit.core.config import settings

    settings.default_locale  # "zh-TW"
    if settings.use_json_logs:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from validkit.core.enums import Environment


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (``VALIDKIT_*``)
        2. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="VALIDKIT_",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    default_locale: str = Field(
        default="zh-TW",
        description="Locale used when no locale has been set for the current context",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool | None = Field(
        default=None,
        description="Force JSON (True) or console (False) log rendering. "
        "Defaults to JSON outside development.",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def use_json_logs(self) -> bool:
        """Whether logs should be rendered as JSON."""
        if self.log_json is not None:
            return self.log_json
        return not self.is_development


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance.

    Call ``get_settings.cache_clear()`` after changing environment variables.
    """
    return Settings()


settings = get_settings()
