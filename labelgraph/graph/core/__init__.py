"""Core graph storage."""

from .arena import NodeArena, NodeSlot, Weight
from .graph import UNIT_WEIGHT, Graph, GraphType

__all__ = [
    "Graph",
    "GraphType",
    "NodeArena",
    "NodeSlot",
    "UNIT_WEIGHT",
    "Weight",
]
