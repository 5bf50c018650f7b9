"""Tests for state graph self-checks and the sparse adjacency export."""

from dataclasses import replace

import numpy as np

from siteswap.graph import (
    StateGraph,
    build_state_graph,
    check_transitions,
    to_adjacency,
    unreachable_states,
    validate_graph,
)


class TestAdjacency:
    """Sparse export of the edge map."""

    def test_shape_and_nnz(self) -> None:
        graph = build_state_graph(3, 5)
        adjacency, order = to_adjacency(graph)
        assert adjacency.shape == (10, 10)
        assert adjacency.nnz == graph.num_edges
        assert order == sorted(graph.nodes)

    def test_entries_are_label_plus_one(self) -> None:
        graph = build_state_graph(3, 5)
        adjacency, order = to_adjacency(graph)
        root = order.index(graph.root)
        idle = order.index(0b11100)
        # self-loop via throw 3, and the forced 0 back to root
        assert adjacency[root, root] == 4
        assert adjacency[idle, root] == 1

    def test_every_row_has_an_edge(self) -> None:
        graph = build_state_graph(2, 4)
        adjacency, _ = to_adjacency(graph)
        out_degree = np.diff(adjacency.indptr)
        assert (out_degree > 0).all()


class TestValidateGraph:
    """validate_graph accepts built graphs and reports corruption."""

    def test_built_graphs_are_valid(self) -> None:
        for balls, max_height in [(1, 1), (1, 3), (2, 3), (3, 5), (4, 7)]:
            graph = build_state_graph(balls, max_height)
            assert validate_graph(graph) == []

    def test_reversed_labels_reported(self) -> None:
        graph = build_state_graph(3, 5)
        edges = dict(graph.edges)
        edges[graph.root] = tuple(reversed(edges[graph.root]))
        errors = validate_graph(replace(graph, edges=edges))
        assert any("not ascending" in e for e in errors)

    def test_wrong_children_reported(self) -> None:
        graph = build_state_graph(3, 5)
        edges = dict(graph.edges)
        edges[graph.root] = edges[graph.root][:-1]
        errors = check_transitions(replace(graph, edges=edges))
        assert any("transition rule" in e for e in errors)

    def test_missing_root_reported(self) -> None:
        graph = build_state_graph(2, 3)
        errors = validate_graph(replace(graph, root=0b1))
        assert errors and "Root" in errors[0]


class TestReachability:
    """Nodes unreachable from the root are detected."""

    def test_built_graph_fully_reachable(self) -> None:
        assert unreachable_states(build_state_graph(3, 5)) == set()

    def test_detached_node(self) -> None:
        # x0 only loops to itself; 0x still points back to x0
        graph = StateGraph(
            balls=1,
            max_height=2,
            root=0b10,
            nodes=frozenset({0b10, 0b100}),
            edges={0b10: ((1, 0b10),), 0b100: ((0, 0b10),)},
        )
        assert unreachable_states(graph) == {0b100}
        assert validate_graph(graph) != []
