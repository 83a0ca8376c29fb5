"""
Tests for the end-to-end layout pipeline (`build_layout`).

Scope
-----
1.  The example scenarios: single event, empty list, clustered events.
2.  Assembly: period bars, overflow summaries, canvas height.
3.  Configuration: the default scale comes from settings.
4.  Purity: repeated calls agree and inputs are left untouched.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from helpers import period, point

from chronolane.core.contracts.event import Lane
from chronolane.core.errors import InvalidScaleError
from chronolane.core.settings import load_settings
from chronolane.pipelines.timeline_layout import build_layout


@pytest.fixture  # type: ignore[misc]
def fresh_settings() -> Iterator[None]:
    """Rebuild settings before and after a test that mutates the environment."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def test_single_event_layout() -> None:
    layout = build_layout([point(1000, position=50)], scale=1)
    assert (layout.axis.min, layout.axis.max) == (900, 1100)
    assert layout.left == []
    (event,) = layout.right
    assert event.y_position == 50
    assert event.offset_index == 0
    assert event.is_overflowing is False
    assert layout.overflow[Lane.RIGHT].count == 0


def test_empty_layout() -> None:
    layout = build_layout([], scale=1)
    assert (layout.axis.min, layout.axis.max) == (0, 2024)
    assert layout.left == [] and layout.right == []
    assert layout.period_bars == []
    assert layout.markers, "the default range still has ticks"
    assert all(summary.count == 0 for summary in layout.overflow.values())


def test_overflow_summary_lists_flagged_events() -> None:
    events = [point(500, id=n) for n in range(1, 5)] + [point(500, position=-5, id=9)]
    layout = build_layout(events, scale=1)
    assert [e.offset_index for e in layout.right] == [0, 1, 2, 3]
    assert layout.overflow[Lane.RIGHT].event_ids == [4]
    assert layout.overflow[Lane.LEFT].event_ids == []


def test_period_bars_follow_anchor_event() -> None:
    events = [period(100, 200, id="a"), period(150, 300, id="b"), point(120, position=-1)]
    layout = build_layout(events, scale=1)
    bars = {bar.event_id: bar for bar in layout.period_bars}
    assert set(bars) == {"a", "b"}

    anchors = {event.id: event for event in layout.right}
    for event_id, bar in bars.items():
        assert bar.lane is Lane.RIGHT
        assert bar.offset_index == anchors[event_id].offset_index
        assert bar.color == anchors[event_id].color
        assert bar.hidden is False

    bar = bars["b"]
    assert bar.start_position == pytest.approx(layout.axis.position(150))
    assert bar.end_position == pytest.approx(layout.axis.position(300))
    assert bar.top == pytest.approx(bar.start_position)
    assert bar.height == pytest.approx(bar.end_position - bar.start_position)


def test_inverted_period_bar_has_positive_height() -> None:
    layout = build_layout([period(800, 200)], scale=1)
    (bar,) = layout.period_bars
    assert bar.top == pytest.approx(layout.axis.position(200))
    assert bar.height > 0


def test_hidden_period_bar_for_overflowing_anchor() -> None:
    events = [point(500) for _ in range(3)] + [period(500, 510, id="late")]
    layout = build_layout(events, scale=1)
    (bar,) = layout.period_bars
    assert bar.event_id == "late"
    assert bar.hidden is True


def test_canvas_height_and_scale() -> None:
    layout = build_layout([point(1)], scale=2.5)
    assert layout.scale == 2.5
    assert layout.canvas_height == 2000


def test_invalid_scale_raises_before_layout() -> None:
    with pytest.raises(InvalidScaleError):
        build_layout([point(1)], scale=0)


def test_default_scale_comes_from_settings(monkeypatch: Any, fresh_settings: None) -> None:
    monkeypatch.setenv("CHRONOLANE_DEFAULT_SCALE", "2")
    load_settings.cache_clear()
    layout = build_layout([point(1000)])
    assert layout.scale == 2
    assert layout.canvas_height == 1600


def test_layout_is_pure_and_repeatable() -> None:
    events = [point(500), period(100, 900), point(520, position=-3), point(-40)]
    before = [e.model_dump() for e in events]
    first = build_layout(events, scale=1.5)
    second = build_layout(events, scale=1.5)
    assert first.model_dump() == second.model_dump()
    assert [e.model_dump() for e in events] == before


def test_layout_serializes_to_json() -> None:
    layout = build_layout([period(-27, 476, id=1, position=-10)], scale=1)
    data = layout.model_dump(mode="json")
    assert data["left"][0]["lane"] == "left"
    assert data["left"][0]["horizontal_bias"] == -10
    assert set(data["overflow"]) == {"left", "right"}


def test_json_carries_bar_geometry_and_overflow_counts() -> None:
    """Renderers read `top`, `height` and `count` straight from the JSON payload."""
    events = [period(100, 300, id="a")] + [point(300, id=n) for n in range(1, 4)]
    data = build_layout(events, scale=1).model_dump(mode="json")

    (bar,) = data["period_bars"]
    assert bar["top"] == pytest.approx(25)
    assert bar["height"] == pytest.approx(50)

    assert data["overflow"]["right"]["count"] == 1
    assert data["overflow"]["right"]["event_ids"] == [3]
    assert data["overflow"]["left"]["count"] == 0


def test_inverted_period_bar_json_uses_upper_end() -> None:
    data = build_layout([period(300, 100, id="b")], scale=1).model_dump(mode="json")
    (bar,) = data["period_bars"]
    assert bar["top"] == pytest.approx(25)
    assert bar["height"] == pytest.approx(50)
