"""
API Routes for timeline layouts.

Endpoints
---------
- `POST /layout`: Lay out a posted list of events at a zoom scale.

Design Decisions
----------------
- **Stateless**: Events are never stored. The caller fetches them from the
  event store and posts them here.
- **Synchronous**: The layout is pure and fast, so it runs inline.
"""

from __future__ import annotations

from fastapi import APIRouter

from chronolane.api.schemas import LayoutRequest
from chronolane.core.contracts.layout import TimelineLayout
from chronolane.pipelines.timeline_layout import build_layout

router = APIRouter(tags=["Layout"])


@router.post(
    "/layout",
    response_model=TimelineLayout,
    summary="Compute a timeline layout",
)
def compute_layout(request: LayoutRequest) -> TimelineLayout:
    """
    Compute lanes, offsets, ticks and period bars for the posted events.

    An invalid `scale` raises `InvalidScaleError`, which the application's
    `ValueError` handler turns into HTTP 400.
    """
    return build_layout(request.events, request.scale)


__all__ = ["router"]
