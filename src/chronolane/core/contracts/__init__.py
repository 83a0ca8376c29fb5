"""Pydantic contracts shared by the engine, CLI and API."""

from __future__ import annotations

from .event import Lane, TimelineEvent
from .layout import (
    AxisRange,
    OverflowSummary,
    PeriodBar,
    PositionedEvent,
    TimelineLayout,
    TimeMarker,
)

__all__ = [
    "AxisRange",
    "Lane",
    "OverflowSummary",
    "PeriodBar",
    "PositionedEvent",
    "TimeMarker",
    "TimelineEvent",
    "TimelineLayout",
]
