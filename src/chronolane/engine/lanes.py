"""Layout resolver: lanes, ordering and collision offsets.

Each lane is resolved on its own in two phases:

1. **Order** — keep the lane's events and sort them by start year. The sort
   is stable, so equal years keep their input order and the layout is
   reproducible.
2. **Fold** — walk the sorted events, keeping an explicit ``placed`` list.
   An event conflicts with a placed one when their year intervals intersect
   or when their axis positions are closer than :data:`PROXIMITY_PERCENT`.
   It takes the lowest offset slot no conflicting event holds.

Slot numbers drive both the palette color and the overflow flag. Overflowing
events stay in the output; the caller decides how to surface them.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Final

from chronolane.core.contracts.event import Lane, TimelineEvent
from chronolane.core.contracts.layout import PositionedEvent
from chronolane.core.settings import get_logger

PositionFn = Callable[[float], float]

PROXIMITY_PERCENT: Final[float] = 5.0
OVERFLOW_OFFSET: Final[int] = 3
PALETTE: Final[tuple[str, ...]] = (
    "blue",
    "green",
    "purple",
    "red",
    "yellow",
    "pink",
    "indigo",
    "teal",
    "orange",
    "cyan",
)

logger = get_logger(__name__)


def color_for(offset_index: int) -> str:
    """Palette color for a slot, cycling once the palette runs out."""
    return PALETTE[offset_index % len(PALETTE)]


def spans_overlap(a: TimelineEvent, b: TimelineEvent) -> bool:
    """True if the closed year intervals of ``a`` and ``b`` intersect."""
    a_lo, a_hi = a.span
    b_lo, b_hi = b.span
    return not (a_hi < b_lo or a_lo > b_hi)


def first_free_offset(used: set[int]) -> int:
    """Smallest non-negative integer not in ``used``."""
    offset = 0
    while offset in used:
        offset += 1
    return offset


def events_in_lane(events: Sequence[TimelineEvent], lane: Lane) -> list[TimelineEvent]:
    """Events of ``lane`` sorted by start year, ties in input order."""
    members = [event for event in events if event.lane is lane]
    return sorted(members, key=lambda event: event.year_start)


def _place(event: TimelineEvent, y_position: float, offset_index: int) -> PositionedEvent:
    fields = event.model_dump(include=set(TimelineEvent.model_fields))
    return PositionedEvent(
        **fields,
        y_position=y_position,
        offset_index=offset_index,
        color=color_for(offset_index),
        is_overflowing=offset_index >= OVERFLOW_OFFSET,
    )


def resolve_lane(
    events: Sequence[TimelineEvent], lane: Lane, position: PositionFn
) -> list[PositionedEvent]:
    """Place the events of one lane and return them in axis order."""
    placed: list[PositionedEvent] = []
    for event in events_in_lane(events, lane):
        y_position = position(event.year_start)
        conflicts = {
            index
            for index, other in enumerate(placed)
            if spans_overlap(event, other)
            or abs(y_position - other.y_position) < PROXIMITY_PERCENT
        }
        used = {placed[index].offset_index for index in conflicts}
        placed.append(_place(event, y_position, first_free_offset(used)))

    overflowing = sum(1 for item in placed if item.is_overflowing)
    if overflowing:
        logger.debug("%s lane: %d of %d events overflow", lane, overflowing, len(placed))
    return placed


def resolve_lanes(
    events: Sequence[TimelineEvent], position: PositionFn
) -> dict[Lane, list[PositionedEvent]]:
    """Resolve both lanes independently."""
    return {lane: resolve_lane(events, lane, position) for lane in Lane}


__all__ = [
    "OVERFLOW_OFFSET",
    "PALETTE",
    "PROXIMITY_PERCENT",
    "color_for",
    "events_in_lane",
    "first_free_offset",
    "resolve_lane",
    "resolve_lanes",
    "spans_overlap",
]
