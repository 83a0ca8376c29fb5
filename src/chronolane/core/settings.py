"""Centralized application configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the repository root: .env, .env.local, .env.dev/.env.test/.env.prod

Variables
---------
CHRONOLANE_ENV
    ``dev`` (default), ``test`` or ``prod``. Exposed as `Settings.environment`
    and the ``is_dev`` / ``is_test`` / ``is_prod`` helpers.
LOG_LEVEL
    Level name for every logger handed out by `get_logger` (default ``INFO``).
CHRONOLANE_DEFAULT_SCALE
    Zoom scale that `build_layout`, the CLI and ``POST /layout`` fall back to
    when the caller passes none. Must be > 0; anything else fails validation
    when settings are loaded.

Logging
-------
`get_logger(name)` attaches one StreamHandler with the format
``time | LEVEL | name | message``, sets the level from ``LOG_LEVEL`` and
turns off propagation, so repeated calls never stack handlers and the root
logger's configuration does not leak in.

Only surface-level knobs live here. The layout constants (proximity
tolerance, overflow threshold, palette) are fixed in the engine modules.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed application configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `CHRONOLANE_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    default_scale : float
        Zoom scale used when a caller does not pass one; maps from
        `CHRONOLANE_DEFAULT_SCALE`.
    """

    environment: EnvName = Field(default="dev", alias="CHRONOLANE_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    default_scale: float = Field(default=1.0, gt=0, alias="CHRONOLANE_DEFAULT_SCALE")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_dev(self) -> bool:
        """Return True if running in the development environment."""
        return self.environment == "dev"

    @property
    def is_test(self) -> bool:
        """Return True if running in the test environment."""
        return self.environment == "test"

    @property
    def is_prod(self) -> bool:
        """Return True if running in the production environment."""
        return self.environment == "prod"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests rebuild it via `load_settings.cache_clear()` after mutating
    `os.environ`.
    """
    os.environ.setdefault("CHRONOLANE_ENV", "dev")
    return Settings()


# Import-time read of env / .env files.
settings: Settings = load_settings()


def get_logger(name: str = "chronolane") -> logging.Logger:
    """Return a process-global logger configured to the current log level.

    The level is read through `load_settings()` so that a cache clear in
    tests is honoured by loggers created afterwards.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
