"""Exhaustive simple-path enumeration.

Depth-first backtracking over one PathBuffer shared by the whole search: a
node is pushed when the search enters it and popped when the search leaves
it, so sibling branches never see each other's state and no produced path
repeats a node. The search keeps an explicit stack of neighbour iterators
rather than recursing, so path length is not bounded by the interpreter's
recursion limit.

The number of simple paths grows exponentially with graph density. Use
``iter_all_paths`` with ``itertools.islice`` to bound the work.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Hashable, Iterator, List, Set

if TYPE_CHECKING:
    from ..core.graph import Graph

logger = logging.getLogger("labelgraph.graph.ops.all_paths")

_EXHAUSTED = object()


class PathBuffer:
    """Ordered path under construction plus its membership set."""

    def __init__(self) -> None:
        self._order: List[Hashable] = []
        self._members: Set[Hashable] = set()

    def push(self, key: Hashable) -> None:
        self._order.append(key)
        self._members.add(key)

    def pop(self) -> Hashable:
        key = self._order.pop()
        self._members.discard(key)
        return key

    def snapshot(self) -> List[Hashable]:
        return list(self._order)

    def __contains__(self, key: object) -> bool:
        return key in self._members

    def __len__(self) -> int:
        return len(self._order)


def iter_all_paths(graph: "Graph", start: Hashable, end: Hashable) -> Iterator[List[Hashable]]:
    """Yield every simple path from start to end.

    Paths come out in depth-first order, following each node's neighbours
    in link creation order. Every yielded list is an independent copy.
    Nothing is yielded when either key is unknown.
    """
    if not graph.has_node(start) or not graph.has_node(end):
        return

    buffer = PathBuffer()
    buffer.push(start)
    if start == end:
        yield buffer.snapshot()
        return

    stack: List[Iterator[Hashable]] = [iter(graph.connected_with(start))]
    while stack:
        neighbour = next(stack[-1], _EXHAUSTED)
        if neighbour is _EXHAUSTED:
            stack.pop()
            buffer.pop()
            continue
        if neighbour in buffer:
            continue

        buffer.push(neighbour)
        if neighbour == end:
            yield buffer.snapshot()
            buffer.pop()
        else:
            stack.append(iter(graph.connected_with(neighbour)))


def all_paths(graph: "Graph", start: Hashable, end: Hashable) -> List[List[Hashable]]:
    """Return every simple path from start to end.

    Args:
        graph: Graph to search.
        start: Source key.
        end: Target key.

    Returns:
        List[List[Hashable]]: All paths; empty when either key is unknown or
        end is unreachable.
    """
    paths = list(iter_all_paths(graph, start, end))
    logger.debug("Enumerated %d simple path(s) %r -> %r", len(paths), start, end)
    return paths
