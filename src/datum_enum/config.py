"""
This module defines the runtime settings for datum_enum.

It uses Pydantic's `BaseSettings` so the few tunables the library exposes can
be supplied through environment variables prefixed with ``DATUM_ENUM_``. The
settings are read once and cached for the life of the process.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class EnumSettings(BaseSettings):
    """
    Configuration model for datum_enum.

    Attributes:
        log_level: Root log level applied by `configure_logging`.
        log_format: Format string for log records emitted to stdout.
        random_seed: Optional seed for the generator behind
                     `DataEnum.random_member`. Unseeded when None.
    """

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    # Random member selection
    random_seed: Optional[int] = None

    model_config = SettingsConfigDict(env_prefix="DATUM_ENUM_")


@lru_cache(maxsize=1)
def get_settings() -> EnumSettings:
    """Returns the process-wide settings instance."""
    return EnumSettings()


__all__ = ["EnumSettings", "get_settings"]
