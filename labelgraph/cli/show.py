"""CLI command rendering a sample graph's nodes and links."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.table import Table

from labelgraph.samples import build_sample

logger = logging.getLogger("labelgraph.cli.show")


def show_command(args, console: Optional[Console] = None) -> int:
    """Render a sample graph.

    Args:
        args: Parsed command-line arguments with ``sample`` and optional
            ``config``.
        console: Rich console to render to.

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    console = console or Console()
    try:
        graph = build_sample(args.sample, getattr(args, "config", None))
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("Show command failed: %s", e)
        return 1

    graph_type = graph.type()
    main_nodes = graph.get_main_nodes()

    nodes_table = Table(
        title=(
            f"{args.sample}: {'directed' if graph_type.directed else 'undirected'}, "
            f"{'weighted' if graph_type.weighted else 'unweighted'}"
        )
    )
    nodes_table.add_column("Node", style="bold")
    nodes_table.add_column("Main")
    nodes_table.add_column("Connected with")
    for key in graph.nodes():
        nodes_table.add_row(
            str(key),
            "*" if key in main_nodes else "",
            ", ".join(str(n) for n in graph.connected_with(key)),
        )
    console.print(nodes_table)

    arrow = "->" if graph_type.directed else "--"
    links_table = Table(title=f"{graph.link_count()} link(s)")
    links_table.add_column("Link")
    links_table.add_column("Weight", justify="right")
    for source, target, weight in graph.links():
        links_table.add_row(f"{source} {arrow} {target}", str(weight))
    console.print(links_table)
    return 0
