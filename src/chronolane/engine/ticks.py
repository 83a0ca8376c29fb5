"""Tick generator: axis labels with a zoom-dependent step.

The step is ``total_years / (BASE_TICK_COUNT / scale)``, floored and never
below one year, so at scale 1 the axis gets roughly :data:`BASE_TICK_COUNT`
labels and the step grows linearly with the scale. Ticks sit on multiples
of the step, so year 0 and round centuries are hit whenever the step
divides them.
"""

from __future__ import annotations

import math
from typing import Final

from chronolane.core.contracts.layout import AxisRange, TimeMarker
from chronolane.core.settings import get_logger
from chronolane.engine.zoom import ensure_valid_scale

BASE_TICK_COUNT: Final[int] = 20

logger = get_logger(__name__)


def year_step(axis: AxisRange, scale: float) -> int:
    """Years between two consecutive ticks."""
    scale = ensure_valid_scale(scale)
    return max(1, math.floor(axis.total_years / (BASE_TICK_COUNT / scale)))


def classify(year: int, position: float) -> TimeMarker:
    """Build the marker for ``year``; the flags are not exclusive."""
    return TimeMarker(
        year=year,
        position=position,
        is_era=year == 0,
        is_century=year % 100 == 0,
        is_decade=year % 10 == 0,
    )


def generate_ticks(axis: AxisRange, scale: float) -> list[TimeMarker]:
    """Return the axis ticks for ``axis`` at ``scale``, ascending by year."""
    step = year_step(axis, scale)
    year = math.ceil(axis.min / step) * step
    markers: list[TimeMarker] = []
    while year <= axis.max:
        markers.append(classify(year, axis.position(year)))
        year += step
    logger.debug("generated %d ticks with a %d-year step", len(markers), step)
    return markers


__all__ = ["BASE_TICK_COUNT", "classify", "generate_ticks", "year_step"]
