"""Configuration schema and loading for labelgraph."""

from .loader import ConfigSource, load_graph_config
from .schema import GraphConfig, MainNodePolicy

__all__ = [
    "ConfigSource",
    "GraphConfig",
    "MainNodePolicy",
    "load_graph_config",
]
