"""
Event sources: turning JSON from the event store into `TimelineEvent`s.

Two payload shapes are accepted:

- a bare JSON array of event records;
- the event API envelope ``{"success": true, "events": [...]}``. An envelope
  with ``success: false`` is reported with its ``error`` message.

The loader validates field types only. Search and year-range filtering have
already happened on the store side.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from chronolane.core.contracts.event import TimelineEvent
from chronolane.core.errors import EventSourceError
from chronolane.core.settings import get_logger

logger = get_logger(__name__)

_EVENTS_ADAPTER: TypeAdapter[list[TimelineEvent]] = TypeAdapter(list[TimelineEvent])


def _unwrap(payload: Any) -> Any:
    """Return the raw record list from either accepted payload shape."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, Mapping):
        if payload.get("success") is False:
            message = payload.get("error") or "event source reported a failure"
            raise EventSourceError(str(message))
        if "events" in payload:
            return payload["events"]
    raise EventSourceError(
        "expected a JSON array of events or an object with an 'events' array"
    )


def parse_events(payload: Any) -> list[TimelineEvent]:
    """Validate an already-decoded JSON payload into events."""
    records = _unwrap(payload)
    try:
        return _EVENTS_ADAPTER.validate_python(records)
    except ValidationError as exc:
        raise EventSourceError(f"invalid event records: {exc}") from exc


def load_events(path: Path) -> list[TimelineEvent]:
    """Read and validate events from a UTF-8 JSON file."""
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except OSError as exc:
        raise EventSourceError(f"cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise EventSourceError(f"{path} is not valid JSON: {exc}") from exc

    events = parse_events(payload)
    logger.info("loaded %d events from %s", len(events), path)
    return events


__all__ = ["load_events", "parse_events"]
