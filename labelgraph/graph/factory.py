"""Graph constructors.

``create_graph`` takes the two flags explicitly (or a GraphConfig); the
four named constructors fix one flag combination each.
"""

from __future__ import annotations

import logging
from typing import Optional

from labelgraph.config.loader import ConfigSource, load_graph_config
from labelgraph.config.schema import GraphConfig

from .core.graph import Graph

logger = logging.getLogger("labelgraph.graph.factory")


def create_graph(
    directed: Optional[bool] = None,
    weighted: Optional[bool] = None,
    *,
    config: ConfigSource = None,
) -> Graph:
    """Create an empty graph.

    Explicit flags override the corresponding config values; anything left
    unset falls back to the config, then to undirected and unweighted.

    Args:
        directed: Links are one-way when True.
        weighted: Links keep caller-supplied weights when True.
        config: GraphConfig, mapping, TOML/JSON path or inline text.

    Returns:
        Graph: New empty graph.
    """
    base = load_graph_config(config)
    overrides = {}
    if directed is not None:
        overrides["directed"] = directed
    if weighted is not None:
        overrides["weighted"] = weighted
    if overrides:
        base = GraphConfig.model_validate({**base.model_dump(), **overrides})
    logger.debug("Creating graph from config: %s", base)
    return Graph.from_config(base)


def undirected_unweighted_graph() -> Graph:
    return create_graph(directed=False, weighted=False)


def directed_unweighted_graph() -> Graph:
    return create_graph(directed=True, weighted=False)


def directed_weighted_graph() -> Graph:
    return create_graph(directed=True, weighted=True)


def undirected_weighted_graph() -> Graph:
    return create_graph(directed=False, weighted=True)
