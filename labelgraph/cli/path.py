"""CLI commands answering path queries on a sample graph."""

from __future__ import annotations

import itertools
import logging
from typing import Optional

from rich.console import Console
from rich.table import Table

from labelgraph.graph.ops import iter_all_paths, shortest_path
from labelgraph.samples import build_sample

logger = logging.getLogger("labelgraph.cli.path")


def _path_weight(graph, path) -> float:
    return sum(graph.link_weight(a, b) for a, b in zip(path, path[1:]))


def path_command(args, console: Optional[Console] = None) -> int:
    """Print the shortest path between two nodes of a sample graph.

    Args:
        args: Parsed command-line arguments with ``sample``, ``start``,
            ``end`` and optional ``config``.
        console: Rich console to render to.

    Returns:
        int: 0 when a path exists, 1 when it does not or on failure.
    """
    console = console or Console()
    try:
        graph = build_sample(args.sample, getattr(args, "config", None))
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("Path command failed: %s", e)
        return 1

    result = shortest_path(graph, args.start, args.end)
    if not result.found:
        logger.warning("No path from %s to %s in %s", args.start, args.end, args.sample)
        console.print(f"No path from {args.start} to {args.end}")
        return 1

    console.print(" -> ".join(str(key) for key in result.path))
    console.print(f"distance: {result.distance}")
    return 0


def paths_command(args, console: Optional[Console] = None) -> int:
    """Print simple paths between two nodes of a sample graph.

    Args:
        args: Parsed command-line arguments with ``sample``, ``start``,
            ``end``, ``limit`` and optional ``config``. ``limit`` <= 0 means
            no limit.
        console: Rich console to render to.

    Returns:
        int: 0 when at least one path exists, 1 otherwise or on failure.
    """
    console = console or Console()
    try:
        graph = build_sample(args.sample, getattr(args, "config", None))
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("Paths command failed: %s", e)
        return 1

    limit = getattr(args, "limit", None)
    paths = iter_all_paths(graph, args.start, args.end)
    if isinstance(limit, int) and limit > 0:
        paths = itertools.islice(paths, limit)

    table = Table(title=f"Paths from {args.start} to {args.end}")
    table.add_column("#", justify="right")
    table.add_column("Path")
    table.add_column("Weight", justify="right")
    count = 0
    for count, path in enumerate(paths, start=1):
        table.add_row(str(count), " -> ".join(str(key) for key in path), str(_path_weight(graph, path)))

    if count == 0:
        logger.warning("No path from %s to %s in %s", args.start, args.end, args.sample)
        console.print(f"No path from {args.start} to {args.end}")
        return 1

    console.print(table)
    return 0
