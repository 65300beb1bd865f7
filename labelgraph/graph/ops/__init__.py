"""Queries and conversions built on top of the graph store."""

from .all_paths import PathBuffer, all_paths, iter_all_paths
from .convert import GraphLike, to_networkx
from .shortest_path import PathResult, shortest_path

__all__ = [
    "GraphLike",
    "PathBuffer",
    "PathResult",
    "all_paths",
    "iter_all_paths",
    "shortest_path",
    "to_networkx",
]
