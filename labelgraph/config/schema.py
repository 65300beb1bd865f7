"""Configuration schema for graph construction.

Graphs are configured by two orthogonal flags plus the policy that decides
what happens to a main-node tag when its node is removed. The model is
validated with Pydantic so bad configuration is rejected before a graph is
built.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, field_validator


class MainNodePolicy(str, Enum):
    """What ``Graph.remove_node`` does with a main-node tag.

    KEEP leaves the tag in place, so a node re-created under the same key
    is main again. CLEAR drops the tag together with the node.
    """

    KEEP = "keep"
    CLEAR = "clear"


class GraphConfig(BaseModel):
    """Construction parameters for a Graph.

    Attributes:
        directed: Links are one-way when True.
        weighted: Links carry caller-supplied weights when True; otherwise
            every link has unit weight.
        main_node_policy: Tag handling on node removal.
    """

    directed: bool = False
    weighted: bool = False
    main_node_policy: MainNodePolicy = MainNodePolicy.KEEP

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("main_node_policy", mode="before")
    @classmethod
    def normalize_policy(cls, v: Any) -> Any:
        """Accept policy names regardless of case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GraphConfig":
        """Build a config from a mapping, accepting a nested ``[graph]`` table."""
        if "graph" in data and isinstance(data["graph"], dict):
            data = data["graph"]
        return cls.model_validate(data)
