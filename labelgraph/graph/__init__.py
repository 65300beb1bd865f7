"""Public graph API surface."""

from labelgraph.graph.core import UNIT_WEIGHT, Graph, GraphType, NodeArena, NodeSlot, Weight
from labelgraph.graph.factory import (
    create_graph,
    directed_unweighted_graph,
    directed_weighted_graph,
    undirected_unweighted_graph,
    undirected_weighted_graph,
)
from labelgraph.graph.ops import (
    GraphLike,
    PathBuffer,
    PathResult,
    all_paths,
    iter_all_paths,
    shortest_path,
    to_networkx,
)

__all__ = [
    "Graph",
    "GraphLike",
    "GraphType",
    "NodeArena",
    "NodeSlot",
    "PathBuffer",
    "PathResult",
    "UNIT_WEIGHT",
    "Weight",
    "all_paths",
    "create_graph",
    "directed_unweighted_graph",
    "directed_weighted_graph",
    "iter_all_paths",
    "shortest_path",
    "to_networkx",
    "undirected_unweighted_graph",
    "undirected_weighted_graph",
]
