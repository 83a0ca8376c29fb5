"""
Integration tests for `POST /layout`.

Scope
-----
1.  Happy path: lanes, offsets and ticks come back as JSON.
2.  Defaults: a missing scale falls back to settings.
3.  Errors: bad scales map to 400, malformed events to 422.
"""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from chronolane.api.app import create_app


@pytest.fixture  # type: ignore[misc]
def client() -> TestClient:
    return TestClient(create_app())


def _event(event_id: int, year: int, position: float = 10, **extra: Any) -> dict[str, Any]:
    return {"id": event_id, "title": f"E{event_id}", "year_start": year, "position": position} | extra


def test_layout_happy_path(client: TestClient) -> None:
    body = {
        "events": [_event(n, 500) for n in range(1, 5)]
        + [_event(9, -500, position=-50), _event(8, 100, year_end=300, is_period=True)],
        "scale": 1,
    }
    resp = client.post("/layout", json=body)
    assert resp.status_code == 200, resp.text

    data = resp.json()
    assert data["scale"] == 1
    assert [e["id"] for e in data["left"]] == [9]
    assert data["left"][0]["lane"] == "left"

    right = data["right"]
    assert [e["id"] for e in right] == [8, 1, 2, 3, 4]
    crowd = [e for e in right if e["year_start"] == 500]
    assert [e["offset_index"] for e in crowd] == [0, 1, 2, 3]
    assert [e["is_overflowing"] for e in crowd] == [False, False, False, True]
    assert data["overflow"]["right"]["event_ids"] == [4]
    assert data["overflow"]["right"]["count"] == 1
    assert data["overflow"]["left"]["count"] == 0

    assert data["markers"], "ticks should be present"
    assert data["period_bars"][0]["event_id"] == 8
    assert data["period_bars"][0]["top"] == pytest.approx(700 / 12)
    assert data["period_bars"][0]["height"] == pytest.approx(200 / 12)


def test_layout_single_event_scenario(client: TestClient) -> None:
    resp = client.post("/layout", json={"events": [_event(1, 1000, position=50)], "scale": 1})
    data = resp.json()
    assert data["axis"] == {"min": 900, "max": 1100}
    assert data["right"][0]["y_position"] == 50
    assert data["right"][0]["offset_index"] == 0


def test_layout_empty_events_default_scale(client: TestClient) -> None:
    resp = client.post("/layout", json={"events": []})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["axis"] == {"min": 0, "max": 2024}
    assert data["left"] == [] and data["right"] == []
    assert data["scale"] > 0


@pytest.mark.parametrize("scale", [0, -2])
def test_layout_rejects_bad_scale(client: TestClient, scale: float) -> None:
    resp = client.post("/layout", json={"events": [_event(1, 10)], "scale": scale})
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Bad Request"
    assert "scale" in body["detail"]


def test_layout_rejects_malformed_events(client: TestClient) -> None:
    resp = client.post("/layout", json={"events": [{"id": 1, "title": "no year"}], "scale": 1})
    assert resp.status_code == 422
