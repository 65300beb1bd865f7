"""Node arena backing the graph store.

Nodes live in slots indexed by a dense integer handle. The handle counter
only moves forward, so a handle is never reused after its node is removed
and a handle held by a caller stays unambiguous for the arena's lifetime.
The slot carries its key, which makes the arena the single source of truth
for the key <-> handle bijection; the key index is only a lookup aid.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, List, Optional, Set, Union

Weight = Union[int, float]


@dataclass
class NodeSlot:
    """A live node.

    Attributes:
        handle: Arena handle assigned at creation.
        key: Caller-supplied key.
        links: Outgoing links, neighbour handle -> weight, in creation order.
        inbound: Handles of nodes holding a link to this one.
    """

    handle: int
    key: Hashable
    links: Dict[int, Weight] = field(default_factory=dict)
    inbound: Set[int] = field(default_factory=set)


class NodeArena:
    """Handle-indexed storage of NodeSlots plus a key index."""

    def __init__(self) -> None:
        self._slots: List[Optional[NodeSlot]] = []
        self._index: Dict[Hashable, int] = {}
        self._live = 0

    @property
    def next_handle(self) -> int:
        """Handle the next allocated node will receive."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._live

    def __contains__(self, key: Hashable) -> bool:
        try:
            return key in self._index
        except TypeError:
            # Unhashable keys can never name a node.
            return False

    def __iter__(self) -> Iterator[NodeSlot]:
        """Iterate live slots in ascending handle order."""
        for slot in self._slots:
            if slot is not None:
                yield slot

    def allocate(self, key: Hashable) -> NodeSlot:
        """Create a slot for a key that is not yet present."""
        if key in self._index:
            raise KeyError(f"Key already allocated: {key!r}")
        slot = NodeSlot(handle=len(self._slots), key=key)
        self._slots.append(slot)
        self._index[key] = slot.handle
        self._live += 1
        return slot

    def release(self, handle: int) -> NodeSlot:
        """Free a slot; the handle is retired, not recycled."""
        slot = self.slot(handle)
        self._slots[handle] = None
        del self._index[slot.key]
        self._live -= 1
        return slot

    def slot(self, handle: int) -> NodeSlot:
        """Return the live slot for a handle.

        Raises:
            KeyError: If the handle was never allocated or has been released.
        """
        if 0 <= handle < len(self._slots):
            slot = self._slots[handle]
            if slot is not None:
                return slot
        raise KeyError(f"No live node with handle {handle}")

    def find(self, key: Hashable) -> Optional[NodeSlot]:
        """Return the slot for a key, or None when the key is unknown."""
        try:
            handle = self._index.get(key)
        except TypeError:
            return None
        if handle is None:
            return None
        return self._slots[handle]

    def handle_of(self, key: Hashable) -> Optional[int]:
        slot = self.find(key)
        return slot.handle if slot is not None else None

    def key_of(self, handle: int) -> Hashable:
        return self.slot(handle).key
