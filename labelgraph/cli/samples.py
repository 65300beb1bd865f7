"""CLI command listing the bundled sample graphs."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.table import Table

from labelgraph.samples import list_samples

logger = logging.getLogger("labelgraph.cli.samples")


def samples_command(args, console: Optional[Console] = None) -> int:
    """Print the available samples.

    Args:
        args: Parsed command-line arguments (unused).
        console: Rich console to render to.

    Returns:
        int: Exit code.
    """
    console = console or Console()

    table = Table(title="Sample graphs")
    table.add_column("Name", style="bold")
    table.add_column("Directed")
    table.add_column("Weighted")
    table.add_column("Links", justify="right")
    table.add_column("Description")
    for sample in list_samples():
        table.add_row(
            sample.name,
            "yes" if sample.directed else "no",
            "yes" if sample.weighted else "no",
            str(len(sample.links)),
            sample.description,
        )
    console.print(table)
    return 0
