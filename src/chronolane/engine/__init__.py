"""The chronological layout engine.

- :mod:`.axis`   — visible year window and the year → percent mapping.
- :mod:`.lanes`  — lane split, stable ordering and collision offsets.
- :mod:`.ticks`  — zoom-adaptive axis ticks.
- :mod:`.zoom`   — scale validation and zoom-control steps.
- :mod:`.formatting` — BCE/CE year labels.
"""

from __future__ import annotations

from .axis import DEFAULT_RANGE, compute_axis_range
from .lanes import OVERFLOW_OFFSET, PALETTE, PROXIMITY_PERCENT, resolve_lane, resolve_lanes
from .ticks import generate_ticks, year_step
from .zoom import ensure_valid_scale

__all__ = [
    "DEFAULT_RANGE",
    "OVERFLOW_OFFSET",
    "PALETTE",
    "PROXIMITY_PERCENT",
    "compute_axis_range",
    "ensure_valid_scale",
    "generate_ticks",
    "resolve_lane",
    "resolve_lanes",
    "year_step",
]
