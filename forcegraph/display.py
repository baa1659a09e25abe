"""Rich-based display utilities for the forcegraph CLI."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from .core.analysis import Analyzer
from .core.models import Graph, GraphSnapshot

console = Console()


def print_positions(snapshot: GraphSnapshot, title: str = "Node Positions", out: Optional[Console] = None) -> None:
    """Print a table of node positions."""
    out = out or console

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Node", style="dim")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("Weight", justify="right")
    table.add_column("Label")

    for node in snapshot.nodes:
        table.add_row(node.id, f"{node.x:.1f}", f"{node.y:.1f}", f"{node.weight:g}", node.label)

    out.print()
    out.print(table)
    out.print(f"[dim]{len(snapshot.nodes)} nodes, {len(snapshot.edges)} edges[/dim]")


def print_stats(graph: Graph, out: Optional[Console] = None) -> None:
    """Print graph statistics."""
    out = out or console
    analyzer = Analyzer(graph)
    components = analyzer.connected_components()
    largest = max((len(c) for c in components), default=0)

    table = Table(title="Graph Statistics", show_header=False)
    table.add_column("Metric", style="dim")
    table.add_column("Value", justify="right")

    stats = graph.stats()
    table.add_row("Nodes", str(stats["nodes"]))
    table.add_row("Edges", str(stats["edges"]))
    table.add_row("Average degree", f"{analyzer.average_degree():.3f}")
    table.add_row("Components", str(len(components)))
    table.add_row("Largest component", str(largest))

    out.print()
    out.print(table)
