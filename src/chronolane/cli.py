# src/chronolane/cli.py
"""
Chronolane Command Line Interface (CLI).

This module implements the terminal interface using `typer` and `rich`.

Features
--------
- **Layout Tables**: Shows both lanes, the axis window and the ticks.
- **JSON Export**: Prints or saves the full layout for a renderer to consume.
- **Zoom Steps**: Computes the next zoom level the way the zoom controls do.

Usage
-----
    # Lay out an event file exported from the event store
    $ chronolane layout events.json --scale 2

    # Machine-readable output
    $ chronolane layout events.json --json -o layout.json

    # Next zoom level
    $ chronolane zoom 1.5 --out
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from chronolane.core.contracts.event import Lane
from chronolane.core.contracts.layout import TimelineLayout
from chronolane.core.errors import ChronolaneError
from chronolane.engine.formatting import format_period, format_year
from chronolane.engine.zoom import can_zoom_in, can_zoom_out, zoom_in, zoom_out
from chronolane.pipelines.sources import load_events
from chronolane.pipelines.timeline_layout import build_layout

# Settings such as CHRONOLANE_DEFAULT_SCALE may come from .env
load_dotenv()

app = typer.Typer(
    help="Chronolane: lay out dated events on a two-lane vertical timeline.",
    rich_markup_mode="markdown",
)
console = Console()


# --------------------------------------------------------------------------- #
# Helpers: Rendering
# --------------------------------------------------------------------------- #


def _lane_table(layout: TimelineLayout, lane: Lane) -> Table:
    """Build the table of positioned events for one lane."""
    table = Table(title=f"{lane.value.capitalize()} lane", title_justify="left")
    table.add_column("Title")
    table.add_column("When")
    table.add_column("Y %", justify="right")
    table.add_column("Slot", justify="right")
    table.add_column("Color")
    table.add_column("Overflow", justify="center")

    for event in layout.lane(lane):
        table.add_row(
            event.title,
            format_period(event),
            f"{event.y_position:.1f}",
            str(event.offset_index),
            event.color,
            "[red]yes[/red]" if event.is_overflowing else "",
        )
    return table


def _ticks_line(layout: TimelineLayout) -> str:
    """Tick labels on one line; centuries in bold, the era start in red."""
    labels = []
    for marker in layout.markers:
        label = format_year(marker.year)
        if marker.is_era:
            label = f"[bold red]{label}[/bold red]"
        elif marker.is_century:
            label = f"[bold]{label}[/bold]"
        labels.append(label)
    return " · ".join(labels)


def _render_layout(layout: TimelineLayout) -> None:
    """Print the layout as rich tables."""
    axis = layout.axis
    console.print(
        Panel.fit(
            f"Axis: [cyan]{axis.min:g}[/cyan] → [cyan]{axis.max:g}[/cyan]"
            f"   Scale: [magenta]{layout.scale:g}[/magenta]"
            f"   Height: {layout.canvas_height:g}px",
            title="Timeline",
            border_style="cyan",
        )
    )
    for lane in Lane:
        console.print(_lane_table(layout, lane))

    console.print(f"\n[bold]Ticks ({len(layout.markers)}):[/bold]")
    console.print(_ticks_line(layout))

    for lane, summary in layout.overflow.items():
        if summary.count:
            console.print(
                f"[yellow]{summary.count} event(s) overflow the {lane.value} lane[/yellow]"
            )


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def layout(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="JSON file with an event array or an `{events: [...]}` envelope.",
        ),
    ],
    scale: Annotated[
        float | None,
        typer.Option("--scale", "-s", help="Zoom scale (defaults to settings)."),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print the layout as JSON instead of tables."),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Also write the layout JSON to this path."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks."),
    ] = False,
) -> None:
    """
    Compute the timeline layout for an event file.
    """
    try:
        events = load_events(file)
        result = build_layout(events, scale)
    except ChronolaneError as e:
        console.print(f"[bold red]Layout Error:[/bold red] {e}")
        if verbose:
            traceback.print_exc()
        raise typer.Exit(code=1) from e

    payload = result.model_dump_json(indent=2)

    if output:
        try:
            output.write_text(payload, encoding="utf-8")
        except OSError as e:
            console.print(f"[bold red]Failed to save to {output}: {e}[/bold red]")
            raise typer.Exit(code=1) from e

    if json_output:
        typer.echo(payload)
        return

    _render_layout(result)
    if output:
        console.print(f"[dim]Layout saved to: {output}[/dim]")


@app.command()  # type: ignore[misc]
def zoom(
    scale: Annotated[float, typer.Argument(help="Current zoom scale.")],
    out: Annotated[
        bool,
        typer.Option("--out/--in", help="Zoom out instead of in."),
    ] = False,
) -> None:
    """
    Print the zoom scale the zoom controls would move to next.
    """
    try:
        if out:
            target, movable = zoom_out(scale), can_zoom_out(scale)
        else:
            target, movable = zoom_in(scale), can_zoom_in(scale)
    except ChronolaneError as e:
        console.print(f"[bold red]Zoom Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    console.print(f"{target:g}")
    if not movable:
        console.print("[dim]Already at the zoom limit.[/dim]")


if __name__ == "__main__":
    app()
