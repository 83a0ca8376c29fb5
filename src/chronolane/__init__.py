"""Chronolane: a layout engine for two-lane vertical timelines.

The package turns a list of dated events and a zoom scale into axis ticks,
per-event coordinates, lane assignment and collision offsets. Rendering is
left to the caller.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.3.0"
