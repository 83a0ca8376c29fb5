"""Exception types raised by Chronolane.

All engine failures are local input errors; nothing here is retryable.
`InvalidScaleError` also subclasses `ValueError` so the API's 400 handler
and plain `except ValueError` callers both catch it.
"""

from __future__ import annotations


class ChronolaneError(Exception):
    """Base class for every error raised by this package."""


class InvalidScaleError(ChronolaneError, ValueError):
    """Raised when a zoom scale is zero, negative or not finite."""

    def __init__(self, scale: object) -> None:
        super().__init__(f"scale must be a finite number greater than 0, got {scale!r}")
        self.scale = scale


class EventSourceError(ChronolaneError):
    """Raised when an event file or payload cannot be turned into events."""


__all__ = ["ChronolaneError", "InvalidScaleError", "EventSourceError"]
