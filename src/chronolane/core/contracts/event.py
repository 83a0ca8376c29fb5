"""TimelineEvent — the dated record the layout engine places on the axis.

Events arrive from the event store already filtered. The engine reads them
and never mutates them; everything it derives lands on
:class:`~chronolane.core.contracts.layout.PositionedEvent` instead.

Lane and bias
-------------
The stored ``position`` value serves two purposes. Its sign picks the lane
(``< 0`` → left, ``>= 0`` → right). Its magnitude is kept as
``horizontal_bias`` for finer horizontal placement, which nothing consumes
yet. Both are exposed as computed fields so they survive serialization.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, computed_field


class Lane(StrEnum):
    """The half of the timeline an event is drawn on."""

    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def for_position(cls, position: float) -> Lane:
        """Map a raw ``position`` value to its lane by sign."""
        return cls.LEFT if position < 0 else cls.RIGHT


class TimelineEvent(BaseModel):
    """A point-in-time or period event as delivered by the event store."""

    id: int | str = Field(description="Opaque unique identifier")
    title: str
    year_start: int = Field(description="Start year; negative values are BCE")
    year_end: int | None = Field(
        default=None, description="End year, only meaningful when `is_period` is set"
    )
    is_period: bool = Field(default=False)
    position: float = Field(
        default=0.0, description="Side selector in [-100, 100]; the sign picks the lane"
    )
    notes: str | None = Field(default=None)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def lane(self) -> Lane:
        """Lane chosen by the sign of ``position``."""
        return Lane.for_position(self.position)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def horizontal_bias(self) -> float:
        """Raw ``position`` magnitude, reserved for horizontal placement."""
        return self.position

    @property
    def end_year(self) -> int:
        """The year the event stops at; points (and periods without an end) stop at the start."""
        if self.is_period and self.year_end is not None:
            return self.year_end
        return self.year_start

    @property
    def span(self) -> tuple[int, int]:
        """Closed ``(lo, hi)`` year interval, normalized if the bounds are inverted."""
        start, end = self.year_start, self.end_year
        return (min(start, end), max(start, end))


__all__ = ["Lane", "TimelineEvent"]
