"""Define a command-line interface for inspecting and validating motion sequence files."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from motion_sequencing.io.logging import console
from motion_sequencing.io.pydantic_schemata import load_sequence_request
from motion_sequencing.kinematics import Point3D
from motion_sequencing.motion_planning import SequenceRequest
from motion_sequencing.sequencing.errors import SequenceError
from motion_sequencing.sequencing.sequence_validation import validate_sequence


def render_sequence_table(request: SequenceRequest, title: str) -> Table:
    """Render a table listing the items of a motion sequence."""
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Group", style="bold")
    table.add_column("Goal", style="magenta")
    table.add_column("Start state")
    table.add_column("Blend radius (m)", justify="right")

    for idx, item in enumerate(request):
        goal_kind = "cartesian" if isinstance(item.request.goal, Point3D) else "joint"
        start_state = "explicit" if item.has_start_state else "-"
        table.add_row(str(idx), item.group_name, goal_kind, start_state, f"{item.blend_radius:.3f}")

    return table


@click.command()
@click.argument("yaml_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check_sequence(yaml_path: Path) -> None:
    """Load the motion sequence in the given YAML file and check its structure."""
    try:
        request = load_sequence_request(yaml_path)
    except (ValueError, KeyError, RuntimeError) as error:
        console.print(f"[red]Invalid sequence file:[/] {escape(str(error))}")
        raise SystemExit(1) from error

    console.print(render_sequence_table(request, title=f"Motion sequence: {yaml_path.name}"))

    try:
        validate_sequence(request)
    except SequenceError as error:
        console.print(f"[red]Invalid sequence:[/] {escape(str(error))}")
        raise SystemExit(1) from error

    console.print(f"[green]Sequence of {len(request)} item(s) is valid.[/]")
