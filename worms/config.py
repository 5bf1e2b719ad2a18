"""Configuration settings for the worms model — loaded from environment variables."""

from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings with env-driven overrides.

    All values can be overridden via environment variables prefixed with WORMS_.
    Example: WORMS_CHECK_PRECONDITIONS=false turns checked preconditions
    back into debug assertions.
    """

    # Raise PreconditionViolationError instead of asserting
    check_preconditions: bool = True

    # Logging
    log_level: str = "info"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="WORMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Singleton settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the process-wide settings (singleton pattern).

    Returns:
        Settings: The shared settings instance, created from the
        environment on first call.
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
