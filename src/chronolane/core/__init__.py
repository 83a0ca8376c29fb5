"""Core package initializer for Chronolane.

Holds settings, error types and the pydantic contracts shared by the engine,
the CLI and the API:
    from chronolane.core.settings import settings, load_settings, Settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
