"""Command Line Interface for floorgraph.

This module provides a small CLI for inspecting, rendering and cleaning up
floorplan JSON files.
"""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core.configuration import CONFIG_DIM_UNIT, Configuration
from .core.dimensioning import cm_to_measure
from .core.topology import count_components
from .core.validators import validate_all
from .io.parser import load_floorplan, save_floorplan
from .visualization.generator import generate_floorplan_image

app = typer.Typer(
    name="floorgraph",
    help="A CLI tool for floorplan wall graphs, rooms and wall geometry",
    no_args_is_help=True,
)
console = Console()


def setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@app.command()
def info(
    plan: Path = typer.Option(..., "--plan", "-p", help="Path to floorplan JSON file"),
    unit: str = typer.Option(None, "--unit", "-u", help="Dimension unit: inch, m, cm or mm"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Show the rooms and walls of a floorplan."""
    setup_logging(verbose)
    if unit:
        Configuration.set_value(CONFIG_DIM_UNIT, unit)

    try:
        floorplan = load_floorplan(str(plan))
    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON - {e}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Loaded floorplan from {plan}")

    width, depth = floorplan.get_size()
    console.print(
        f"Corners: {len(floorplan.corners)}  Walls: {len(floorplan.walls)}  "
        f"Rooms: {len(floorplan.rooms)}  Components: {count_components(floorplan)}"
    )
    console.print(f"Size: {cm_to_measure(width)} x {cm_to_measure(depth)}")

    if floorplan.rooms:
        table = Table(title="Rooms")
        table.add_column("#", justify="right")
        table.add_column("Corners", justify="right")
        table.add_column("Floor area (m²)", justify="right")
        table.add_column("Texture", style="cyan")

        for i, room in enumerate(floorplan.rooms, 1):
            table.add_row(
                str(i),
                str(len(room.corners)),
                f"{room.area / 10000.0:.2f}",
                room.get_texture().url,
            )
        console.print(table)

    if floorplan.walls:
        table = Table(title="Walls")
        table.add_column("Wall", style="cyan")
        table.add_column("Length", justify="right")
        table.add_column("Thickness", justify="right")
        table.add_column("Orphan", justify="center")

        for wall in floorplan.walls:
            table.add_row(
                wall.id,
                cm_to_measure(wall.length()),
                f"{wall.thickness:g}",
                "yes" if wall.orphan else "",
            )
        console.print(table)

    orphans = sum(1 for wall in floorplan.walls if wall.orphan)
    if orphans:
        console.print(f"[yellow]![/yellow] {orphans} wall(s) do not bound any room")

    if not validate_all(floorplan):
        console.print("[red]✗[/red] Floorplan graph is inconsistent")
        raise typer.Exit(1)


@app.command()
def render(
    plan: Path = typer.Option(..., "--plan", "-p", help="Path to floorplan JSON file"),
    output: Path = typer.Option(..., "--out", help="Path to output PNG file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Render a floorplan to a PNG image."""
    setup_logging(verbose)
    try:
        floorplan = load_floorplan(str(plan))
    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except (json.JSONDecodeError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not generate_floorplan_image(floorplan, output):
        console.print(f"[red]✗[/red] Could not render {plan}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Image saved to {output}")


@app.command()
def snap(
    plan: Path = typer.Option(..., "--plan", "-p", help="Path to floorplan JSON file"),
    output: Path = typer.Option(..., "--out", help="Path to output floorplan JSON file"),
    tolerance: float = typer.Option(10.0, "--tolerance", "-t", help="Snap distance in cm"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Straighten nearly axis-aligned walls and save the result."""
    setup_logging(verbose)
    try:
        floorplan = load_floorplan(str(plan))
    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except (json.JSONDecodeError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    for wall in floorplan.walls:
        wall.snap_to_axis(tolerance)
    floorplan.update()

    save_floorplan(floorplan, str(output))
    console.print(f"[green]✓[/green] Snapped {len(floorplan.walls)} walls")
    console.print(f"[green]✓[/green] Floorplan saved to {output}")


if __name__ == "__main__":
    app()
