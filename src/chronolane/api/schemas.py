"""Request/response schemas for the Chronolane HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from chronolane.core.contracts.event import TimelineEvent
from chronolane.core.settings import EnvName


class LayoutRequest(BaseModel):
    """Body of `POST /layout`."""

    events: list[TimelineEvent] = Field(default_factory=list)
    # Checked by the engine so that bad scales surface as 400, not 422.
    scale: float | None = Field(default=None, description="Zoom scale; defaults to settings")


class HealthInfo(BaseModel):
    """Payload of `GET /health`."""

    status: str = "ok"
    environment: EnvName
    version: str


__all__ = ["HealthInfo", "LayoutRequest"]
