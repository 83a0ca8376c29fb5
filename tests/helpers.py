"""Shared event builders for the Chronolane test suite."""

from __future__ import annotations

from itertools import count

from chronolane.core.contracts.event import TimelineEvent

_ids = count(1)


def point(year: int, position: float = 50, **extra: object) -> TimelineEvent:
    """A point-in-time event; right lane unless ``position`` is negative."""
    event_id = extra.pop("id", next(_ids))
    return TimelineEvent(
        id=event_id,  # type: ignore[arg-type]
        title=str(extra.pop("title", f"event {event_id}")),
        year_start=year,
        position=position,
        **extra,  # type: ignore[arg-type]
    )


def period(start: int, end: int, position: float = 50, **extra: object) -> TimelineEvent:
    """A period event spanning ``[start, end]``."""
    return point(start, position, year_end=end, is_period=True, **extra)
