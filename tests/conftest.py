"""Shared graph fixtures."""

from __future__ import annotations

import random
from typing import Callable

import pytest

from labelgraph.graph import (
    Graph,
    create_graph,
    directed_weighted_graph,
    undirected_unweighted_graph,
)

METRO_LINKS = [
    ("Downtown", "Mall", 150),
    ("Mall", "Airport", 200),
    ("Airport", "HotelDistrict", 100),
    ("HotelDistrict", "Downtown", 75),
    ("Downtown", "University", 120),
    ("University", "Hospital", 90),
    ("Hospital", "Mall", 110),
    ("Mall", "ResidentialArea", 180),
    ("ResidentialArea", "SchoolDistrict", 95),
    ("SchoolDistrict", "Downtown", 130),
    ("University", "TechPark", 160),
    ("TechPark", "Airport", 140),
    ("TechPark", "Mall", 85),
    ("Hospital", "ResidentialArea", 70),
    ("ResidentialArea", "University", 105),
]

SOCIAL_LINKS = [
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
]


@pytest.fixture
def metro_graph() -> Graph:
    """Directed weighted traffic network."""
    graph = directed_weighted_graph()
    for source, target, weight in METRO_LINKS:
        graph.add_link(source, target, weight)
    return graph


@pytest.fixture
def social_graph() -> Graph:
    """Undirected unweighted friendship network."""
    graph = undirected_unweighted_graph()
    for source, target in SOCIAL_LINKS:
        graph.add_link(source, target)
    return graph


@pytest.fixture
def random_graph_factory() -> Callable[..., Graph]:
    """Build reproducible random graphs with non-negative integer weights."""

    def _build(
        seed: int,
        directed: bool,
        weighted: bool = True,
        nodes: int = 12,
        density: float = 0.3,
    ) -> Graph:
        rng = random.Random(seed)
        graph = create_graph(directed=directed, weighted=weighted)
        for key in range(nodes):
            graph.add_node(key)
        for a in range(nodes):
            for b in range(nodes):
                if a != b and rng.random() < density:
                    graph.add_link(a, b, rng.randint(0, 20))
        return graph

    return _build
