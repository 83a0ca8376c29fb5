"""
Timeline layout pipeline: from an event list and a zoom scale to a layout.

Flow Overview
-------------
1. **Scale check** — reject zero, negative or non-finite scales up front.
2. **Axis** — compute the padded year window from all events.
3. **Lanes** — resolve the left and right lanes independently against the
   window's position mapping.
4. **Ticks** — generate axis markers from the window and the scale only.
5. **Assembly** — derive period bars and per-lane overflow summaries from
   the resolved lanes and wrap everything in a :class:`TimelineLayout`.

Design Principles
-----------------
- **Pure**: no state survives a call. Callers that re-render often may cache
  results keyed on their own inputs.
- **Nothing dropped**: overflowing events stay in their lane, flagged, and
  are listed again in the overflow summary.
"""

from __future__ import annotations

from collections.abc import Sequence

from chronolane.core.contracts.event import Lane, TimelineEvent
from chronolane.core.contracts.layout import (
    AxisRange,
    OverflowSummary,
    PeriodBar,
    PositionedEvent,
    TimelineLayout,
)
from chronolane.core.settings import get_logger, load_settings
from chronolane.engine.axis import compute_axis_range
from chronolane.engine.lanes import resolve_lanes
from chronolane.engine.ticks import generate_ticks
from chronolane.engine.zoom import canvas_height, ensure_valid_scale

logger = get_logger(__name__)


def build_period_bars(
    lanes: dict[Lane, list[PositionedEvent]], axis: AxisRange
) -> list[PeriodBar]:
    """Duration bars for every period event that has an end year."""
    bars: list[PeriodBar] = []
    for lane, placed in lanes.items():
        for event in placed:
            if not event.is_period or event.year_end is None:
                continue
            bars.append(
                PeriodBar(
                    event_id=event.id,
                    lane=lane,
                    start_position=axis.position(event.year_start),
                    end_position=axis.position(event.year_end),
                    offset_index=event.offset_index,
                    color=event.color,
                    hidden=event.is_overflowing,
                )
            )
    return bars


def summarize_overflow(lanes: dict[Lane, list[PositionedEvent]]) -> dict[Lane, OverflowSummary]:
    """List the overflowing event ids of each lane."""
    return {
        lane: OverflowSummary(
            lane=lane, event_ids=[event.id for event in placed if event.is_overflowing]
        )
        for lane, placed in lanes.items()
    }


def build_layout(events: Sequence[TimelineEvent], scale: float | None = None) -> TimelineLayout:
    """Lay out ``events`` at ``scale``.

    Parameters
    ----------
    events:
        Events to place, in any order. They are read, never modified.
    scale:
        Zoom scale; ``None`` falls back to ``settings.default_scale``.

    Raises
    ------
    InvalidScaleError
        If ``scale`` is zero, negative or not finite.
    """
    if scale is None:
        scale = load_settings().default_scale
    scale = ensure_valid_scale(scale)

    axis = compute_axis_range(events)
    lanes = resolve_lanes(events, axis.position)
    markers = generate_ticks(axis, scale)

    layout = TimelineLayout(
        scale=scale,
        axis=axis,
        left=lanes[Lane.LEFT],
        right=lanes[Lane.RIGHT],
        markers=markers,
        period_bars=build_period_bars(lanes, axis),
        overflow=summarize_overflow(lanes),
        canvas_height=canvas_height(scale),
    )
    logger.debug(
        "layout: %d events (%d left, %d right), axis %.1f..%.1f, %d ticks",
        len(events),
        len(layout.left),
        len(layout.right),
        axis.min,
        axis.max,
        len(markers),
    )
    return layout


__all__ = ["build_layout", "build_period_bars", "summarize_overflow"]
