"""Tests for configuration schema and loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from labelgraph.config import GraphConfig, MainNodePolicy, load_graph_config


def test_defaults() -> None:
    config = load_graph_config(None)

    assert config == GraphConfig()
    assert config.directed is False
    assert config.weighted is False
    assert config.main_node_policy is MainNodePolicy.KEEP


def test_config_instance_passes_through() -> None:
    config = GraphConfig(directed=True)

    assert load_graph_config(config) is config


def test_dict_source() -> None:
    config = load_graph_config({"directed": True, "weighted": True})

    assert config.directed is True
    assert config.weighted is True


def test_nested_graph_table() -> None:
    config = load_graph_config({"graph": {"weighted": True}})

    assert config.weighted is True
    assert config.directed is False


def test_policy_is_case_insensitive() -> None:
    assert load_graph_config({"main_node_policy": " CLEAR "}).main_node_policy is MainNodePolicy.CLEAR


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ValidationError):
        load_graph_config({"directed": True, "multigraph": True})


def test_invalid_policy_is_rejected() -> None:
    with pytest.raises(ValidationError):
        load_graph_config({"main_node_policy": "forget"})


def test_config_is_frozen() -> None:
    config = GraphConfig()

    with pytest.raises(ValidationError):
        config.directed = True


def test_inline_json() -> None:
    config = load_graph_config('{"directed": true, "main_node_policy": "clear"}')

    assert config.directed is True
    assert config.main_node_policy is MainNodePolicy.CLEAR


def test_inline_toml() -> None:
    config = load_graph_config('directed = true\nweighted = true\n')

    assert config.directed is True
    assert config.weighted is True


def test_toml_file(tmp_path: Path) -> None:
    path = tmp_path / "graph.toml"
    path.write_text('[graph]\nweighted = true\nmain_node_policy = "clear"\n', encoding="utf-8")

    config = load_graph_config(path)

    assert config.weighted is True
    assert config.main_node_policy is MainNodePolicy.CLEAR


def test_json_file_given_as_string(tmp_path: Path) -> None:
    path = tmp_path / "graph.json"
    path.write_text(json.dumps({"directed": True}), encoding="utf-8")

    config = load_graph_config(str(path))

    assert config.directed is True


def test_unsupported_file_suffix(tmp_path: Path) -> None:
    path = tmp_path / "graph.yaml"
    path.write_text("directed: true\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Unsupported config file type"):
        load_graph_config(path)


def test_unparsable_inline_text() -> None:
    with pytest.raises(ValueError, match="Invalid TOML"):
        load_graph_config("directed = = true")

    with pytest.raises(ValueError, match="Invalid JSON"):
        load_graph_config("{not json")


def test_top_level_must_be_mapping() -> None:
    with pytest.raises(ValueError, match="mapping"):
        load_graph_config("[1, 2]")


def test_unsupported_source_type() -> None:
    with pytest.raises(TypeError):
        load_graph_config(42)
