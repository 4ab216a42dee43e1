"""
settings.py — App Configuration
================================
Typed configuration for the Flask app, read once from the environment
(and an optional `.env` file) with Pydantic Settings.

    SORTVIZ_SECRET_KEY    – Flask session key (random per process if unset)
    SORTVIZ_LOG_LEVEL     – DEBUG / INFO / WARNING / ERROR / CRITICAL
    SORTVIZ_HOST          – bind address for `python main.py`
    SORTVIZ_PORT          – bind port
    SORTVIZ_MAX_SESSIONS  – how many browser sessions keep live controllers

Tests can rebuild the cached instance with `load_settings.cache_clear()`
after changing the environment.
"""

import logging
import secrets
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Attributes:
        secret_key   : Signs the session cookie that holds the controller token.
        log_level    : Root log level name.
        host         : Development server bind address.
        port         : Development server port.
        max_sessions : Least recently used sessions beyond this are dropped.
    """

    secret_key:   str          = Field(default_factory=lambda: secrets.token_hex(32))
    log_level:    LogLevelName = "INFO"
    host:         str          = "127.0.0.1"
    port:         int          = Field(default=5000, ge=1, le=65535)
    max_sessions: int          = Field(default=256, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="SORTVIZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def log_level_numeric(self) -> int:
        return getattr(logging, self.log_level)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    return Settings()
