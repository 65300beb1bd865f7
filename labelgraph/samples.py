"""Bundled sample graphs.

Three small datasets covering the common graph variants: a metro traffic
network (directed, weighted), a social network (undirected, unweighted) and
a project task plan (directed, unweighted).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from labelgraph.config.loader import ConfigSource, load_graph_config
from labelgraph.graph.core.graph import Graph

logger = logging.getLogger("labelgraph.samples")

LinkRow = Union[Tuple[str, str], Tuple[str, str, float]]


@dataclass(frozen=True)
class SampleGraph:
    """A named dataset and the graph variant it is meant for."""

    name: str
    description: str
    directed: bool
    weighted: bool
    links: Tuple[LinkRow, ...]
    main_nodes: Tuple[str, ...] = ()


METRO = SampleGraph(
    name="metro",
    description="Traffic flow with capacity between city districts",
    directed=True,
    weighted=True,
    links=(
        ("Downtown", "Mall", 150),
        ("Mall", "Airport", 200),
        ("Airport", "Hotel District", 100),
        ("Hotel District", "Downtown", 75),
        ("Downtown", "University", 120),
        ("University", "Hospital", 90),
        ("Hospital", "Mall", 110),
        ("Mall", "Residential Area", 180),
        ("Residential Area", "School District", 95),
        ("School District", "Downtown", 130),
        ("University", "Tech Park", 160),
        ("Tech Park", "Airport", 140),
        ("Tech Park", "Mall", 85),
        ("Hospital", "Residential Area", 70),
        ("Residential Area", "University", 105),
    ),
    main_nodes=("Downtown", "Mall", "Airport", "University"),
)

SOCIAL = SampleGraph(
    name="social",
    description="Friendship connections in a small social network",
    directed=False,
    weighted=False,
    links=(
        ("Alice", "Bob"),
        ("Bob", "Charlie"),
        ("Charlie", "David"),
        ("David", "Alice"),
        ("Alice", "Eve"),
        ("Eve", "Frank"),
        ("Frank", "Bob"),
        ("Charlie", "Grace"),
        ("Grace", "David"),
        ("Frank", "Henry"),
        ("Henry", "Alice"),
    ),
    main_nodes=("Alice", "Bob", "Charlie"),
)

PROJECT = SampleGraph(
    name="project",
    description="Task dependencies of a software project",
    directed=True,
    weighted=False,
    links=(
        ("Project Start", "Requirements"),
        ("Requirements", "Design"),
        ("Design", "Frontend Dev"),
        ("Design", "Backend Dev"),
        ("Frontend Dev", "Integration"),
        ("Backend Dev", "Integration"),
        ("Integration", "Testing"),
        ("Testing", "Deployment"),
        ("Deployment", "Project End"),
        ("Requirements", "Database Design"),
        ("Database Design", "Backend Dev"),
    ),
    main_nodes=("Project Start", "Integration", "Testing", "Project End"),
)

SAMPLES: Dict[str, SampleGraph] = {sample.name: sample for sample in (METRO, SOCIAL, PROJECT)}


def list_samples() -> List[SampleGraph]:
    return list(SAMPLES.values())


def build_sample(name: str, config: Optional[ConfigSource] = None) -> Graph:
    """Build the named sample graph.

    Args:
        name: Sample name (see SAMPLES).
        config: Optional configuration overriding the sample's own flags.
            Only keys present in the source take effect.

    Returns:
        Graph: Populated graph with the sample's main nodes tagged.

    Raises:
        KeyError: If name is not a known sample.
    """
    try:
        sample = SAMPLES[name]
    except KeyError:
        raise KeyError(f"Unknown sample '{name}'. Available: {', '.join(SAMPLES)}") from None

    settings = {"directed": sample.directed, "weighted": sample.weighted}
    if config is not None:
        loaded = load_graph_config(config)
        settings.update(loaded.model_dump(exclude_unset=True))
    graph = Graph.from_config(load_graph_config(settings))

    for row in sample.links:
        graph.add_link(*row)
    for key in sample.main_nodes:
        graph.set_main_node(key)

    logger.debug("Built sample %s: %r", name, graph)
    return graph
