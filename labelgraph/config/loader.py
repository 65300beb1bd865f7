"""Helpers for loading GraphConfig from TOML/JSON sources.

``load_graph_config`` accepts:

* None -> default GraphConfig
* dict -> GraphConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Union

from .schema import GraphConfig

logger = logging.getLogger("labelgraph.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], GraphConfig, None]


def _detect_format(text: str) -> str:
    stripped = text.lstrip()
    return "json" if stripped.startswith(("{", "[")) else "toml"


def _parse(text: str, fmt: str) -> Dict[str, Any]:
    try:
        if fmt == "json":
            data = json.loads(text)
        else:
            data = tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ValueError(f"Invalid {fmt.upper()} configuration: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError("Top-level configuration must be a mapping/dict")
    return data


def load_graph_config(source: ConfigSource) -> GraphConfig:
    """Load GraphConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns the default GraphConfig
            * GraphConfig: returned unchanged
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        GraphConfig instance.

    Raises:
        ValueError: If the text cannot be parsed or the file suffix is not
            supported.
        pydantic.ValidationError: If the values do not fit the schema.
    """
    if source is None:
        logger.debug("No config source provided; using default GraphConfig")
        return GraphConfig()

    if isinstance(source, GraphConfig):
        return source

    if isinstance(source, dict):
        logger.debug("Loading GraphConfig from provided dict")
        return GraphConfig.from_dict(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        if isinstance(source, Path) or (len(str(source)) < 4096 and path.is_file()):
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                raise ValueError(f"Unsupported config file type: {path.suffix or path.name}")
            text = path.read_text(encoding="utf-8")
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _detect_format(text)
            logger.debug("Loading configuration from inline %s string", fmt)

        return GraphConfig.from_dict(_parse(text, fmt))

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["ConfigSource", "load_graph_config"]
