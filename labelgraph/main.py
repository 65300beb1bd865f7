"""Main CLI entry point for labelgraph.

Provides commands: samples, show, path, paths
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from labelgraph.cli.path import path_command, paths_command
from labelgraph.cli.samples import samples_command
from labelgraph.cli.show import show_command
from labelgraph.samples import SAMPLES

logger = logging.getLogger("labelgraph.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        description="Labelgraph - labeled graphs with path queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("samples", help="List bundled sample graphs")

    def add_sample_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "sample",
            choices=sorted(SAMPLES),
            help="Sample graph to load",
        )
        sub.add_argument(
            "-c",
            "--config",
            help=(
                "Optional graph configuration overriding the sample's flags. "
                "Can be a path to a TOML/JSON file or an inline TOML/JSON "
                "string, e.g. '{\"directed\": false}'."
            ),
        )

    show_parser = subparsers.add_parser("show", help="Show nodes and links of a sample graph")
    add_sample_args(show_parser)

    path_parser = subparsers.add_parser("path", help="Shortest path between two nodes")
    add_sample_args(path_parser)
    path_parser.add_argument("start", help="Start node")
    path_parser.add_argument("end", help="End node")

    paths_parser = subparsers.add_parser("paths", help="All simple paths between two nodes")
    add_sample_args(paths_parser)
    paths_parser.add_argument("start", help="Start node")
    paths_parser.add_argument("end", help="End node")
    paths_parser.add_argument(
        "--limit",
        type=int,
        default=50,
        help="Maximum number of paths to print (default: 50). Use <=0 for no limit.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command == "samples":
        return samples_command(args)
    elif args.command == "show":
        return show_command(args)
    elif args.command == "path":
        return path_command(args)
    elif args.command == "paths":
        return paths_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
