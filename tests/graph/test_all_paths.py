"""Tests for simple path enumeration."""

import itertools

import networkx as nx

from labelgraph.graph import (
    Graph,
    PathBuffer,
    all_paths,
    directed_unweighted_graph,
    iter_all_paths,
    to_networkx,
    undirected_unweighted_graph,
)


def test_empty_graph_has_no_paths() -> None:
    assert all_paths(Graph(), "X", "Y") == []


def test_unknown_endpoint_has_no_paths(social_graph) -> None:
    assert all_paths(social_graph, "Alice", "Nobody") == []
    assert all_paths(social_graph, "Nobody", "Alice") == []


def test_depth_first_order_follows_link_creation() -> None:
    graph = directed_unweighted_graph()
    graph.add_link("A", "B")
    graph.add_link("A", "C")
    graph.add_link("B", "D")
    graph.add_link("C", "D")
    graph.add_link("B", "C")

    assert all_paths(graph, "A", "D") == [
        ["A", "B", "D"],
        ["A", "B", "C", "D"],
        ["A", "C", "D"],
    ]


def test_cycles_do_not_repeat_nodes() -> None:
    graph = undirected_unweighted_graph()
    graph.add_link("A", "B")
    graph.add_link("B", "C")
    graph.add_link("C", "A")

    assert all_paths(graph, "A", "C") == [["A", "B", "C"], ["A", "C"]]


def test_directed_cycle_through_start_is_not_followed(metro_graph) -> None:
    paths = all_paths(metro_graph, "Downtown", "Hospital")

    assert ["Downtown", "University", "Hospital"] in paths
    for path in paths:
        assert path[0] == "Downtown"
        assert path[-1] == "Hospital"
        assert path.count("Downtown") == 1
        assert len(set(path)) == len(path)


def test_start_equals_end() -> None:
    graph = undirected_unweighted_graph()
    graph.add_link("A", "B")

    assert all_paths(graph, "A", "A") == [["A"]]


def test_unreachable_end_has_no_paths() -> None:
    graph = directed_unweighted_graph()
    graph.add_link("A", "B")
    graph.add_link("C", "A")

    assert all_paths(graph, "A", "C") == []


def test_method_delegates_to_query(social_graph) -> None:
    assert social_graph.all_paths("Eve", "Grace") == all_paths(social_graph, "Eve", "Grace")


def test_matches_networkx_simple_paths(random_graph_factory) -> None:
    """Enumeration is complete and every path is simple."""
    for directed in (True, False):
        for seed in range(4):
            graph = random_graph_factory(seed, directed=directed, nodes=7, density=0.35)
            reference = to_networkx(graph)
            for start, end in itertools.permutations(range(7), 2):
                ours = all_paths(graph, start, end)
                expected = {tuple(p) for p in nx.all_simple_paths(reference, start, end)}

                assert len(ours) == len(expected)
                assert {tuple(p) for p in ours} == expected
                for path in ours:
                    assert len(set(path)) == len(path)
                    assert all(graph.has_link(a, b) for a, b in zip(path, path[1:]))


def test_complete_graph_path_count() -> None:
    """K5 has sum over k of 3!/(3-k)! simple paths between two nodes."""
    graph = undirected_unweighted_graph()
    for a, b in itertools.combinations(range(5), 2):
        graph.add_link(a, b)

    assert len(all_paths(graph, 0, 4)) == 1 + 3 + 6 + 6


def test_iterator_is_lazy_and_yields_copies() -> None:
    graph = directed_unweighted_graph()
    for a, b in itertools.permutations(range(9), 2):
        graph.add_link(a, b)

    first_three = list(itertools.islice(iter_all_paths(graph, 0, 8), 3))
    assert len(first_three) == 3

    first_three[0].append("mutated")
    assert first_three[1][-1] == 8
    assert first_three[2][-1] == 8


def test_long_chain_is_not_limited_by_recursion() -> None:
    graph = directed_unweighted_graph()
    for key in range(2999):
        graph.add_link(key, key + 1)

    assert all_paths(graph, 0, 2999) == [list(range(3000))]


def test_path_buffer_push_pop() -> None:
    buffer = PathBuffer()
    buffer.push("A")
    buffer.push("B")

    assert "B" in buffer
    assert len(buffer) == 2
    assert buffer.snapshot() == ["A", "B"]
    assert buffer.pop() == "B"
    assert "B" not in buffer
    assert buffer.snapshot() == ["A"]
