"""Zoom scale checks and zoom-control helpers.

The zoom controls step the scale by a factor of 1.5 between
:data:`MIN_SCALE` and :data:`MAX_SCALE`. Anything reaching the engine must be
a finite, positive number; invalid scales raise instead of being clamped so
the code producing them gets fixed.
"""

from __future__ import annotations

import math
from typing import Final

from chronolane.core.errors import InvalidScaleError

MIN_SCALE: Final[float] = 0.1
MAX_SCALE: Final[float] = 1000.0
ZOOM_FACTOR: Final[float] = 1.5
BASE_CANVAS_HEIGHT: Final[float] = 800.0


def ensure_valid_scale(scale: float) -> float:
    """Return ``scale`` as a float, or raise :class:`InvalidScaleError`."""
    if isinstance(scale, bool):
        raise InvalidScaleError(scale)
    try:
        value = float(scale)
    except (TypeError, ValueError) as exc:
        raise InvalidScaleError(scale) from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidScaleError(scale)
    return value


def zoom_in(scale: float) -> float:
    return min(ensure_valid_scale(scale) * ZOOM_FACTOR, MAX_SCALE)


def zoom_out(scale: float) -> float:
    return max(ensure_valid_scale(scale) / ZOOM_FACTOR, MIN_SCALE)


def can_zoom_in(scale: float) -> bool:
    return ensure_valid_scale(scale) < MAX_SCALE


def can_zoom_out(scale: float) -> bool:
    return ensure_valid_scale(scale) > MIN_SCALE


def canvas_height(scale: float) -> float:
    """Suggested timeline height in pixels at ``scale``."""
    return BASE_CANVAS_HEIGHT * ensure_valid_scale(scale)


__all__ = [
    "BASE_CANVAS_HEIGHT",
    "MAX_SCALE",
    "MIN_SCALE",
    "ZOOM_FACTOR",
    "can_zoom_in",
    "can_zoom_out",
    "canvas_height",
    "ensure_valid_scale",
    "zoom_in",
    "zoom_out",
]
