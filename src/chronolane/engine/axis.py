"""Axis calculator: the visible year window for a set of events.

The window covers every start year and every period end year, padded on
both sides by a tenth of the raw span but never by less than a century.
"""

from __future__ import annotations

from collections.abc import Sequence

from chronolane.core.contracts.event import TimelineEvent
from chronolane.core.contracts.layout import AxisRange

DEFAULT_RANGE = AxisRange(min=0, max=2024)
MIN_PADDING_YEARS = 100
PADDING_RATIO = 0.1


def contributing_years(events: Sequence[TimelineEvent]) -> list[int]:
    """Years that must fit on the axis: starts, plus ends of periods."""
    years: list[int] = []
    for event in events:
        years.append(event.year_start)
        years.append(event.end_year)
    return years


def compute_axis_range(events: Sequence[TimelineEvent]) -> AxisRange:
    """Return the padded year window for ``events``.

    An empty sequence yields :data:`DEFAULT_RANGE`.
    """
    if not events:
        return DEFAULT_RANGE.model_copy()

    years = contributing_years(events)
    raw_min, raw_max = min(years), max(years)
    padding = max(MIN_PADDING_YEARS, (raw_max - raw_min) * PADDING_RATIO)
    return AxisRange(min=raw_min - padding, max=raw_max + padding)


__all__ = ["DEFAULT_RANGE", "compute_axis_range", "contributing_years"]
