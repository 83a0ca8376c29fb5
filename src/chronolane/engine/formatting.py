"""Human-readable year labels for ticks and event cards."""

from __future__ import annotations

from chronolane.core.contracts.event import TimelineEvent

ERA_LABEL = "CE"


def format_year(year: int) -> str:
    """Render ``year`` with a BCE suffix for negative years.

    Year 0 marks the start of the era and is labelled :data:`ERA_LABEL`.
    """
    if year == 0:
        return ERA_LABEL
    if year < 0:
        return f"{abs(year)} BCE"
    return str(year)


def format_period(event: TimelineEvent) -> str:
    """Label for an event card: a single year or ``start - end``."""
    if not event.is_period or event.year_end is None:
        return format_year(event.year_start)
    return f"{format_year(event.year_start)} - {format_year(event.year_end)}"


__all__ = ["ERA_LABEL", "format_period", "format_year"]
