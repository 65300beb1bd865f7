"""Exception types raised by labelgraph."""

from typing import Any


class GraphError(Exception):
    """Base class for graph errors."""


class InvalidWeightError(GraphError, ValueError):
    """Raised when an explicit link weight is not a finite real number.

    Attributes:
        weight: The rejected value as supplied by the caller.
    """

    def __init__(self, weight: Any) -> None:
        self.weight = weight
        super().__init__(f"Weight must be a finite number, got {weight!r}")
