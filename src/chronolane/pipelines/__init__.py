"""Pipeline entry points for Chronolane.

Currently exposed:

- :func:`build_layout` — events + scale → :class:`TimelineLayout`,
  implemented in ``timeline_layout.py``.
- :func:`load_events` / :func:`parse_events` — JSON → events, implemented in
  ``sources.py``.
"""

from __future__ import annotations

from .sources import load_events, parse_events
from .timeline_layout import build_layout

__all__ = ["build_layout", "load_events", "parse_events"]
