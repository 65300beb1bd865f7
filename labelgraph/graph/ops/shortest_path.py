"""Single-pair shortest path over a labeled graph.

Dijkstra-style relaxation driven by a binary heap. The heap may hold
several entries for one node; entries that are stale by the time they are
popped (node already settled, or a shorter distance recorded since) are
skipped, so extraction always settles the node with the smallest current
distance. Ties between equal distances are resolved by push order, which
callers must not rely on.

Only non-negative weights are supported. Negative weights are not
rejected; the result is then unspecified.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Hashable, List, Set, Tuple, Union

if TYPE_CHECKING:
    from ..core.graph import Graph

logger = logging.getLogger("labelgraph.graph.ops.shortest_path")

_NO_PREDECESSOR = object()


@dataclass(frozen=True)
class PathResult:
    """Outcome of a shortest path query.

    Attributes:
        path: Keys from start to end inclusive; empty when no path exists.
        distance: Sum of link weights along path; ``math.inf`` when no path
            exists.
    """

    path: List[Hashable] = field(default_factory=list)
    distance: Union[int, float] = math.inf

    @property
    def found(self) -> bool:
        return bool(self.path)


def shortest_path(graph: "Graph", start: Hashable, end: Hashable) -> PathResult:
    """Find a minimum-weight path from start to end.

    Args:
        graph: Graph to search.
        start: Source key.
        end: Target key.

    Returns:
        PathResult: The path and its distance, or an empty path with
        infinite distance when either key is unknown or end is unreachable.
    """
    if not graph.has_node(start) or not graph.has_node(end):
        logger.debug("Shortest path %r -> %r: unknown endpoint", start, end)
        return PathResult()

    distances: Dict[Hashable, Union[int, float]] = {start: 0}
    previous: Dict[Hashable, Hashable] = {}
    visited: Set[Hashable] = set()
    # (distance, push order, key); push order keeps keys out of comparisons
    counter = itertools.count()
    frontier: List[Tuple[Union[int, float], int, Hashable]] = [(0, next(counter), start)]

    while frontier:
        distance, _, node = heapq.heappop(frontier)
        if node in visited or distance > distances.get(node, math.inf):
            continue
        visited.add(node)
        if node == end:
            break

        for neighbour in graph.connected_with(node) or ():
            if neighbour in visited:
                continue
            candidate = distance + graph.link_weight(node, neighbour)
            if candidate < distances.get(neighbour, math.inf):
                distances[neighbour] = candidate
                previous[neighbour] = node
                heapq.heappush(frontier, (candidate, next(counter), neighbour))

    if end not in distances:
        logger.debug("Shortest path %r -> %r: unreachable", start, end)
        return PathResult()

    path: List[Hashable] = [end]
    node = end
    while node != start:
        node = previous.get(node, _NO_PREDECESSOR)
        if node is _NO_PREDECESSOR:
            return PathResult()
        path.append(node)
    path.reverse()

    logger.debug(
        "Shortest path %r -> %r: %d hop(s), distance %s",
        start,
        end,
        len(path) - 1,
        distances[end],
    )
    return PathResult(path=path, distance=distances[end])
