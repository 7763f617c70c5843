"""
Library configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file), each
prefixed with GYM_HTTP_ so the helpers can live inside a host application
without clashing with its own settings.
"""

from __future__ import annotations

import codecs
import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HttpSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", env_prefix="GYM_HTTP_"
    )

    # Used by the one-shot HttpClient when push_data_async gets no client
    timeout: float = 5.0

    # Body and charset encoding when the caller passes encoding=None
    default_encoding: str = "utf-8"

    @field_validator("default_encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown text encoding: {value!r}") from exc
        return value


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", env_prefix="GYM_HTTP_"
    )

    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level: {value!r}")
        return value

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return value


@lru_cache(maxsize=1)
def get_settings() -> HttpSettings:
    """Return the process-wide HttpSettings, built on first use."""
    return HttpSettings()
