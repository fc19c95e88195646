"""Rich rendering utilities for the CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from graphex._report import OrientationReport, UniqueTopoReport


def _status(passed: bool) -> str:  # noqa: FBT001
    return "[green]✓ PASS[/green]" if passed else "[red]✗ FAIL[/red]"


def render_orientation_report(report: OrientationReport, console: Console) -> None:
    """Render the orientation checks as a Rich table.

    Args:
        report: OrientationReport to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("Check", style="dim")
    table.add_column("Graph", justify="right")
    table.add_column("Digraph", justify="right")
    table.add_column("Result")

    table.add_row(
        "Vertex count",
        str(report.graph_vertices),
        str(report.digraph_vertices),
        _status(report.same_vertex_count),
    )
    table.add_row(
        "Edge count",
        str(report.graph_edges),
        str(report.digraph_edges),
        _status(report.same_edge_count),
    )
    table.add_row("Edge correspondence", "", "", _status(report.edges_correspond))
    table.add_row("Strongly connected", "", "", _status(report.strongly_connected))

    console.print(table)


def render_unique_topo_reports(reports: list[tuple[str, UniqueTopoReport]], console: Console) -> None:
    """Render labelled topological order results as a Rich table.

    Args:
        reports: Pairs of (label, UniqueTopoReport) in display order.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Digraph", style="bold")
    table.add_column("Edges", justify="right")
    table.add_column("Topological order")
    table.add_column("Unique")

    for label, report in reports:
        unique = "[green]yes[/green]" if report.unique else "[yellow]no[/yellow]"
        table.add_row(label, str(report.edges), " ".join(map(str, report.order)), unique)

    console.print(table)
