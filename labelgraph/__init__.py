"""Labeled graphs with shortest-path and simple-path queries.

Example:
    >>> from labelgraph import directed_weighted_graph
    >>> graph = directed_weighted_graph()
    >>> graph.add_link("Downtown", "University", 120)
    True
    >>> graph.add_link("University", "Hospital", 90)
    True
    >>> graph.shortest_path("Downtown", "Hospital").distance
    210
"""

from labelgraph.config import GraphConfig, MainNodePolicy, load_graph_config
from labelgraph.errors import GraphError, InvalidWeightError
from labelgraph.graph import (
    UNIT_WEIGHT,
    Graph,
    GraphType,
    PathResult,
    all_paths,
    create_graph,
    directed_unweighted_graph,
    directed_weighted_graph,
    iter_all_paths,
    shortest_path,
    to_networkx,
    undirected_unweighted_graph,
    undirected_weighted_graph,
)

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "GraphConfig",
    "GraphError",
    "GraphType",
    "InvalidWeightError",
    "MainNodePolicy",
    "PathResult",
    "UNIT_WEIGHT",
    "all_paths",
    "create_graph",
    "directed_unweighted_graph",
    "directed_weighted_graph",
    "iter_all_paths",
    "load_graph_config",
    "shortest_path",
    "to_networkx",
    "undirected_unweighted_graph",
    "undirected_weighted_graph",
]
