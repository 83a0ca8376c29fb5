"""Layout contracts produced by the engine.

This module defines the Pydantic v2 models handed to renderers:

- `AxisRange`       : visible year window and the year → percent mapping.
- `PositionedEvent` : an event with its axis position, offset slot, color and
  overflow flag.
- `TimeMarker`      : one axis tick with its styling class.
- `PeriodBar`       : the duration bar drawn next to a period event.
- `OverflowSummary` : which events of a lane could not be placed directly.
- `TimelineLayout`  : everything above for one `(events, scale)` call.

Notes
-----
- Positions are percentages of the axis length, not pixels.
- Models are rebuilt from scratch on every layout call and carry no identity
  beyond the source event's `id`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field, model_validator

from .event import Lane, TimelineEvent

# Returned by `AxisRange.position` when the range has zero width.
DEGENERATE_POSITION = 50.0


class AxisRange(BaseModel):
    """Visible year window of the timeline."""

    min: float
    max: float

    @model_validator(mode="after")
    def _ordered(self) -> AxisRange:
        if self.min > self.max:
            raise ValueError(f"axis min ({self.min}) must not exceed max ({self.max})")
        return self

    @property
    def total_years(self) -> float:
        return self.max - self.min

    def position(self, year: float) -> float:
        """Map ``year`` linearly onto ``[0, 100]``.

        Years outside the window land outside ``[0, 100]``. A zero-width
        window maps every year to the middle.
        """
        total = self.total_years
        if total == 0:
            return DEGENERATE_POSITION
        return (year - self.min) / total * 100


class PositionedEvent(TimelineEvent):
    """A `TimelineEvent` placed on the axis by the layout resolver."""

    y_position: float = Field(description="Percent along the axis of `year_start`")
    offset_index: int = Field(ge=0, description="Lateral slot; 0 is closest to the axis")
    color: str = Field(description="Palette entry chosen from `offset_index`")
    is_overflowing: bool = Field(description="True when the slot is past the visible ones")


class TimeMarker(BaseModel):
    """A single axis tick."""

    year: int
    position: float
    is_era: bool
    is_century: bool
    is_decade: bool


class PeriodBar(BaseModel):
    """Duration bar for a period event, styled like its anchoring card."""

    event_id: int | str
    lane: Lane
    start_position: float
    end_position: float
    offset_index: int = Field(ge=0)
    color: str
    hidden: bool = Field(description="Mirrors the anchoring event's overflow flag")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def top(self) -> float:
        return min(self.start_position, self.end_position)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def height(self) -> float:
        return abs(self.end_position - self.start_position)


class OverflowSummary(BaseModel):
    """Events of one lane flagged as overflowing, in lane order."""

    lane: Lane
    event_ids: list[int | str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> int:
        return len(self.event_ids)


class TimelineLayout(BaseModel):
    """Complete layout for one set of events at one zoom scale."""

    scale: float = Field(gt=0)
    axis: AxisRange
    left: list[PositionedEvent] = Field(default_factory=list)
    right: list[PositionedEvent] = Field(default_factory=list)
    markers: list[TimeMarker] = Field(default_factory=list)
    period_bars: list[PeriodBar] = Field(default_factory=list)
    overflow: dict[Lane, OverflowSummary] = Field(default_factory=dict)
    canvas_height: float = Field(ge=0, description="Suggested canvas height in pixels")

    def lane(self, lane: Lane) -> list[PositionedEvent]:
        """Return the positioned events of ``lane``."""
        return self.left if lane is Lane.LEFT else self.right


__all__ = [
    "AxisRange",
    "DEGENERATE_POSITION",
    "OverflowSummary",
    "PeriodBar",
    "PositionedEvent",
    "TimeMarker",
    "TimelineLayout",
]
