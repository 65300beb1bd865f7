"""Labeled graph store.

A Graph holds nodes identified by caller-supplied hashable keys and links
between distinct nodes. Whether links are one-way and whether they carry
caller-supplied weights is fixed at construction by two flags; every other
behaviour is shared by all four variants.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterator, List, Optional, Set, Tuple

from labelgraph.config.schema import GraphConfig, MainNodePolicy
from labelgraph.errors import InvalidWeightError

from ..ops.all_paths import all_paths as _all_paths
from ..ops.shortest_path import PathResult, shortest_path as _shortest_path
from .arena import NodeArena, NodeSlot, Weight

logger = logging.getLogger("labelgraph.graph.core.graph")

UNIT_WEIGHT: Weight = 1


@dataclass(frozen=True)
class GraphType:
    """Fixed configuration of a graph."""

    directed: bool
    weighted: bool


def _validate_weight(weight: Any) -> Weight:
    """Return weight unchanged if it is a finite real number.

    Raises:
        InvalidWeightError: For non-numeric values, booleans, NaN and
            infinities.
    """
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise InvalidWeightError(weight)
    if not math.isfinite(weight):
        raise InvalidWeightError(weight)
    return weight


class Graph:
    """In-memory labeled graph.

    Nodes are created explicitly with ``add_node`` or implicitly when a link
    names an unknown key. Undirected graphs store every link in both
    directions with the same weight; unweighted graphs store the unit
    weight for every link. Self loops are never stored.

    Mutating calls report whether anything changed instead of raising, and
    queries on unknown keys return empty or None results. The only error
    raised is InvalidWeightError for a bad explicit weight.

    The store is not synchronized; callers sharing a graph across threads
    must serialize access themselves.
    """

    def __init__(
        self,
        directed: bool = False,
        weighted: bool = False,
        main_node_policy: MainNodePolicy = MainNodePolicy.KEEP,
    ) -> None:
        """Initialize an empty graph.

        Args:
            directed: Links are one-way when True.
            weighted: Links keep caller-supplied weights when True.
            main_node_policy: Whether removing a node clears its main tag.
        """
        self._directed = bool(directed)
        self._weighted = bool(weighted)
        self._main_node_policy = MainNodePolicy(main_node_policy)
        self._arena = NodeArena()
        self._main_nodes: Set[Hashable] = set()

        logger.debug(
            "Graph initialized (directed=%s, weighted=%s)",
            self._directed,
            self._weighted,
        )

    @classmethod
    def from_config(cls, config: GraphConfig) -> "Graph":
        """Build an empty graph from a validated GraphConfig."""
        return cls(
            directed=config.directed,
            weighted=config.weighted,
            main_node_policy=config.main_node_policy,
        )

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    @property
    def main_node_policy(self) -> MainNodePolicy:
        return self._main_node_policy

    def type(self) -> GraphType:
        """Return the directed/weighted flags fixed at construction."""
        return GraphType(directed=self._directed, weighted=self._weighted)

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def add_node(self, key: Hashable) -> bool:
        """Add a node for key.

        Returns:
            bool: True if a node was created, False if key already exists.
        """
        if self._arena.find(key) is not None:
            return False
        slot = self._arena.allocate(key)
        logger.debug("Added node: %r (handle=%d)", key, slot.handle)
        return True

    def has_node(self, key: Hashable) -> bool:
        return key in self._arena

    def remove_node(self, key: Hashable) -> bool:
        """Remove a node together with every link touching it.

        Returns:
            bool: False if key is unknown.
        """
        slot = self._arena.find(key)
        if slot is None:
            return False

        for neighbour in list(slot.links):
            self._unlink(slot, self._arena.slot(neighbour))
        if self._directed:
            # Incoming links, including those from nodes this one does not
            # point back to.
            for source in list(slot.inbound):
                self._unlink(self._arena.slot(source), slot)

        self._arena.release(slot.handle)
        if self._main_node_policy is MainNodePolicy.CLEAR:
            self._main_nodes.discard(key)
        logger.debug("Removed node: %r (handle=%d)", key, slot.handle)
        return True

    def nodes(self) -> List[Hashable]:
        """Return all keys in creation order."""
        return [slot.key for slot in self._arena]

    def node_count(self) -> int:
        return len(self._arena)

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def add_link(self, key_a: Hashable, key_b: Hashable, weight: Optional[Weight] = None) -> bool:
        """Add a link from key_a to key_b, creating missing endpoints.

        On an unweighted graph, or when weight is None, the link gets the
        unit weight. Undirected graphs also store the reverse direction.

        Args:
            key_a: Source key.
            key_b: Target key.
            weight: Optional finite link weight (weighted graphs only).

        Returns:
            bool: True if the link was created; False for a self loop or an
            existing link.

        Raises:
            InvalidWeightError: If an explicit weight on a weighted graph is
                not a finite real number. Nothing is modified in that case.
        """
        if key_a == key_b:
            logger.debug("Ignoring self loop on %r", key_a)
            return False
        if self.has_link(key_a, key_b):
            return False

        if not self._weighted or weight is None:
            weight = UNIT_WEIGHT
        weight = _validate_weight(weight)

        self.add_node(key_a)
        self.add_node(key_b)
        source = self._arena.find(key_a)
        target = self._arena.find(key_b)

        source.links[target.handle] = weight
        target.inbound.add(source.handle)
        if not self._directed:
            target.links[source.handle] = weight
            source.inbound.add(target.handle)

        logger.debug("Added link: %r -> %r (weight=%s)", key_a, key_b, weight)
        return True

    def has_link(self, key_a: Hashable, key_b: Hashable) -> bool:
        source = self._arena.find(key_a)
        target = self._arena.find(key_b)
        if source is None or target is None:
            return False
        return target.handle in source.links

    def link_weight(self, key_a: Hashable, key_b: Hashable) -> Optional[Weight]:
        """Return the weight stored for key_a -> key_b, or None if absent."""
        source = self._arena.find(key_a)
        target = self._arena.find(key_b)
        if source is None or target is None:
            return None
        return source.links.get(target.handle)

    def remove_link(self, key_a: Hashable, key_b: Hashable) -> bool:
        """Remove the link key_a -> key_b (both directions when undirected).

        Returns:
            bool: False if the link did not exist.
        """
        if not self.has_link(key_a, key_b):
            return False
        self._unlink(self._arena.find(key_a), self._arena.find(key_b))
        logger.debug("Removed link: %r -> %r", key_a, key_b)
        return True

    def _unlink(self, source: NodeSlot, target: NodeSlot) -> None:
        source.links.pop(target.handle, None)
        target.inbound.discard(source.handle)
        if not self._directed:
            target.links.pop(source.handle, None)
            source.inbound.discard(target.handle)

    def connected_with(self, key: Hashable) -> Optional[List[Hashable]]:
        """Return keys reachable through one outgoing link.

        Neighbours come back in the order their links were created. Directed
        graphs report outgoing targets only.

        Returns:
            Optional[List[Hashable]]: Neighbour keys, or None if key is unknown.
        """
        slot = self._arena.find(key)
        if slot is None:
            return None
        return [self._arena.key_of(handle) for handle in slot.links]

    def predecessors(self, key: Hashable) -> Optional[List[Hashable]]:
        """Return keys holding a link into key, in creation order of those nodes.

        Returns:
            Optional[List[Hashable]]: Source keys, or None if key is unknown.
        """
        slot = self._arena.find(key)
        if slot is None:
            return None
        return [self._arena.key_of(handle) for handle in sorted(slot.inbound)]

    def links(self) -> List[Tuple[Hashable, Hashable, Weight]]:
        """Return every link once as (source, target, weight).

        An undirected link is reported once, oriented from the endpoint that
        was created first.
        """
        result: List[Tuple[Hashable, Hashable, Weight]] = []
        for slot in self._arena:
            for handle, weight in slot.links.items():
                if not self._directed and handle < slot.handle:
                    continue
                result.append((slot.key, self._arena.key_of(handle), weight))
        return result

    def link_count(self) -> int:
        """Return the number of links (undirected pairs count once)."""
        stored = sum(len(slot.links) for slot in self._arena)
        return stored if self._directed else stored // 2

    # ------------------------------------------------------------------
    # Main nodes
    # ------------------------------------------------------------------

    def set_main_node(self, key: Hashable) -> bool:
        """Tag a live node as main.

        Returns:
            bool: False if key does not name a live node.
        """
        if not self.has_node(key):
            return False
        self._main_nodes.add(key)
        return True

    def get_main_nodes(self) -> Set[Hashable]:
        """Return a copy of the main-node tags."""
        return set(self._main_nodes)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def shortest_path(self, start: Hashable, end: Hashable) -> PathResult:
        """Shortest path from start to end; see ops.shortest_path."""
        return _shortest_path(self, start, end)

    def all_paths(self, start: Hashable, end: Hashable) -> List[List[Hashable]]:
        """All simple paths from start to end; see ops.all_paths."""
        return _all_paths(self, start, end)

    def get_summary(self) -> Dict[str, Any]:
        """Get graph summary.

        Returns:
            Dict[str, Any]: Flags and node, link and main-node counts.
        """
        return {
            "directed": self._directed,
            "weighted": self._weighted,
            "node_count": self.node_count(),
            "link_count": self.link_count(),
            "main_node_count": len(self._main_nodes),
        }

    def __len__(self) -> int:
        return len(self._arena)

    def __contains__(self, key: object) -> bool:
        return key in self._arena

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.nodes())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(directed={self._directed}, "
            f"weighted={self._weighted}, nodes={self.node_count()}, "
            f"links={self.link_count()})"
        )
