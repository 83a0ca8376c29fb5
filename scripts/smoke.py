# scripts/smoke.py
"""
Smoke Test Script for the Chronolane layout pipeline.

Usage
-----
1. Lay out the built-in sample events:
    $ python scripts/smoke.py

2. Lay out an event file exported from the event store:
    $ python scripts/smoke.py --file events.json --scale 2
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from chronolane.core.contracts.event import TimelineEvent
from chronolane.core.errors import ChronolaneError
from chronolane.core.settings import get_logger
from chronolane.engine.formatting import format_period
from chronolane.pipelines.sources import load_events
from chronolane.pipelines.timeline_layout import build_layout

# --------------------------------------------------------------------------- #
# Environment Setup
# --------------------------------------------------------------------------- #
env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)

# chronolane.* loggers carry their own handler and level (LOG_LEVEL).
logger = get_logger("chronolane.smoke")

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
SAMPLE_EVENTS = [
    TimelineEvent(id=1, title="Founding of Rome", year_start=-753, position=-40),
    TimelineEvent(
        id=2, title="Roman Republic", year_start=-509, year_end=-27, is_period=True, position=-20
    ),
    TimelineEvent(
        id=3, title="Roman Empire", year_start=-27, year_end=476, is_period=True, position=30
    ),
    TimelineEvent(id=4, title="Fall of the West", year_start=476, position=60),
    TimelineEvent(id=5, title="Charlemagne crowned", year_start=800, position=10),
    TimelineEvent(id=6, title="Battle of Tours", year_start=732, position=15),
    TimelineEvent(id=7, title="Hegira", year_start=622, position=25),
]


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run Chronolane Smoke Test")
    parser.add_argument("--file", "-f", type=str, help="Path to an events JSON file")
    parser.add_argument("--scale", "-s", type=float, default=1.0, help="Zoom scale")
    args = parser.parse_args()

    try:
        events = load_events(Path(args.file)) if args.file else SAMPLE_EVENTS
        logger.info("laying out %d events at scale %g", len(events), args.scale)
        layout = build_layout(events, args.scale)
    except ChronolaneError as exc:
        logger.error("smoke test failed: %s", exc)
        print(f"❌ Smoke test failed: {exc}")
        sys.exit(1)

    print(f"Axis: {layout.axis.min:g} .. {layout.axis.max:g} ({len(layout.markers)} ticks)")
    for name, lane in (("LEFT", layout.left), ("RIGHT", layout.right)):
        print(f"--- {name} ---")
        for event in lane:
            flag = " [overflow]" if event.is_overflowing else ""
            print(
                f"{event.y_position:6.2f}%  slot {event.offset_index} {event.color:<7} "
                f"{event.title} ({format_period(event)}){flag}"
            )
    print("✅ Smoke test complete")


if __name__ == "__main__":
    main()
