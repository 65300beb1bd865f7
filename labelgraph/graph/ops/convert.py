"""NetworkX views of a labeled graph.

The store keeps its own arena; these helpers materialize a NetworkX graph
for analysis utilities that want the wider NetworkX algorithm library.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

import networkx as nx

if TYPE_CHECKING:
    from ..core.graph import Graph

logger = logging.getLogger("labelgraph.graph.ops.convert")

GraphLike = Union[nx.Graph, nx.DiGraph]


def to_networkx(graph: "Graph") -> GraphLike:
    """Return a NetworkX copy of graph.

    Directed graphs become ``nx.DiGraph`` and undirected graphs ``nx.Graph``.
    Nodes are added in creation order with a boolean ``main`` attribute and
    every link carries its weight under ``weight``.

    Args:
        graph: Source graph.

    Returns:
        GraphLike: Independent NetworkX graph; later changes to either side
        are not reflected in the other.
    """
    nx_graph: GraphLike = nx.DiGraph() if graph.directed else nx.Graph()
    main_nodes = graph.get_main_nodes()
    for key in graph.nodes():
        nx_graph.add_node(key, main=key in main_nodes)
    for source, target, weight in graph.links():
        nx_graph.add_edge(source, target, weight=weight)

    logger.debug(
        "Materialized NetworkX view: %d nodes, %d edges",
        nx_graph.number_of_nodes(),
        nx_graph.number_of_edges(),
    )
    return nx_graph
