"""Tests for one-way street orientation."""

import random
from collections import Counter

import pytest

from graphex import (
    Graph,
    NotOrientableError,
    OrientationFailure,
    generators,
    is_strongly_connected,
    orient,
)


def _undirected(edges: list[tuple[int, int]]) -> Counter[tuple[int, int]]:
    return Counter((min(v, w), max(v, w)) for v, w in edges)


def _assert_valid_orientation(graph: Graph) -> None:
    digraph = orient(graph)
    assert digraph.V == graph.V
    assert digraph.E == graph.E
    assert _undirected(digraph.edges()) == _undirected(graph.edges())
    assert is_strongly_connected(digraph)


class TestOrientStructuredGraphs:
    """Orientation of bridgeless graphs with known shape."""

    def test_triangle(self) -> None:
        digraph = orient(Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)]))
        assert digraph.edges() == [(0, 1), (1, 2), (2, 0)]

    def test_cycle(self) -> None:
        _assert_valid_orientation(generators.cycle(12, random.Random(1)))

    def test_complete(self) -> None:
        _assert_valid_orientation(generators.complete(7))

    def test_wheel(self) -> None:
        _assert_valid_orientation(generators.wheel(9, random.Random(2)))

    def test_complete_bipartite(self) -> None:
        _assert_valid_orientation(generators.complete_bipartite(3, 4, random.Random(3)))

    def test_two_cycles_sharing_a_vertex(self) -> None:
        graph = Graph.from_edges(5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)])
        _assert_valid_orientation(graph)

    def test_parallel_edges(self) -> None:
        graph = Graph.from_edges(2, [(0, 1), (0, 1)])
        digraph = orient(graph)
        assert sorted(digraph.edges()) == [(0, 1), (1, 0)]

    def test_self_loop_kept(self) -> None:
        graph = Graph.from_edges(3, [(0, 1), (1, 2), (2, 0), (1, 1)])
        digraph = orient(graph)
        assert digraph.has_edge(1, 1)
        _assert_valid_orientation(graph)

    def test_long_cycle(self) -> None:
        vertices = 3000
        graph = Graph.from_edges(vertices, [(v, (v + 1) % vertices) for v in range(vertices)])
        _assert_valid_orientation(graph)


class TestOrientRandomGraphs:
    """Orientation of randomly drawn bridgeless graphs."""

    @pytest.mark.parametrize("seed", range(10))
    def test_random_bridgeless(self, seed: int) -> None:
        graph = generators.random_bridgeless(12, 0.4, random.Random(seed))
        _assert_valid_orientation(graph)

    @pytest.mark.parametrize("seed", range(5))
    def test_random_eulerian_cycle(self, seed: int) -> None:
        rng = random.Random(seed)
        graph = generators.eulerian_cycle(6, 20, rng)
        # Every vertex used by the walk lies on the closed walk; drop isolated ones
        used = sorted({v for edge in graph.edges() for v in edge})
        relabel = {v: i for i, v in enumerate(used)}
        compact = Graph.from_edges(len(used), [(relabel[v], relabel[w]) for v, w in graph.edges()])
        _assert_valid_orientation(compact)


class TestOrientTrivialGraphs:
    """Edge cases with no or one vertex."""

    def test_empty_graph(self) -> None:
        digraph = orient(Graph(0))
        assert digraph.V == 0
        assert digraph.E == 0

    def test_single_vertex(self) -> None:
        digraph = orient(Graph(1))
        assert digraph.V == 1
        assert digraph.E == 0


class TestNotOrientable:
    """Graphs that admit no strongly connected orientation."""

    def test_two_triangles_joined_by_bridge(self) -> None:
        graph = Graph.from_edges(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3), (2, 3)])
        with pytest.raises(NotOrientableError, match="bridge") as exc_info:
            orient(graph)
        assert exc_info.value.reason is OrientationFailure.BRIDGE
        assert exc_info.value.bridge == (2, 3)

    def test_single_edge(self) -> None:
        with pytest.raises(NotOrientableError) as exc_info:
            orient(Graph.from_edges(2, [(0, 1)]))
        assert exc_info.value.reason is OrientationFailure.BRIDGE

    def test_tree(self) -> None:
        with pytest.raises(NotOrientableError):
            orient(generators.binary_tree(7, random.Random(0)))

    def test_disconnected(self) -> None:
        graph = Graph.from_edges(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])
        with pytest.raises(NotOrientableError, match="not connected") as exc_info:
            orient(graph)
        assert exc_info.value.reason is OrientationFailure.DISCONNECTED
        assert exc_info.value.unreached == frozenset({3, 4, 5})

    def test_isolated_vertex(self) -> None:
        with pytest.raises(NotOrientableError):
            orient(Graph(2))


class TestOrientIdempotence:
    """Repeated calls on the same input."""

    def test_same_result_twice(self) -> None:
        graph = generators.random_bridgeless(10, 0.5, random.Random(11))
        assert orient(graph).edges() == orient(graph).edges()

    def test_input_not_modified(self) -> None:
        graph = generators.wheel(6, random.Random(5))
        before = graph.edges()
        orient(graph)
        assert graph.edges() == before
