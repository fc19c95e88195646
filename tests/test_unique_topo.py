"""Tests for the unique topological order decision."""

import pytest

from graphex import Digraph, NotAcyclicError, describe_topological_order, has_unique_topological_order

BOOK_EDGES = [(0, 5), (0, 1), (3, 5), (5, 2), (6, 0), (1, 4), (0, 2), (3, 6), (3, 4), (6, 4), (3, 2)]


@pytest.fixture
def book_digraph() -> Digraph:
    """The seven-vertex DAG from the textbook exercise."""
    return Digraph.from_edges(7, BOOK_EDGES)


class TestTextbookExample:
    def test_not_unique(self, book_digraph: Digraph) -> None:
        assert has_unique_topological_order(book_digraph) is False

    def test_unique_after_adding_two_to_one(self, book_digraph: Digraph) -> None:
        book_digraph.add_edge(2, 1)
        assert has_unique_topological_order(book_digraph) is True

    def test_forced_order(self, book_digraph: Digraph) -> None:
        book_digraph.add_edge(2, 1)
        report = describe_topological_order(book_digraph)
        assert report.order == [3, 6, 0, 5, 2, 1, 4]
        assert report.unique is True


class TestSmallDigraphs:
    @pytest.mark.parametrize("vertices", [1, 2, 3, 10, 100])
    def test_directed_path(self, vertices: int) -> None:
        digraph = Digraph.from_edges(vertices, [(v, v + 1) for v in range(vertices - 1)])
        assert has_unique_topological_order(digraph)

    def test_reversed_labels_path(self) -> None:
        digraph = Digraph.from_edges(4, [(3, 2), (2, 1), (1, 0)])
        assert has_unique_topological_order(digraph)

    def test_fork(self) -> None:
        digraph = Digraph.from_edges(3, [(0, 1), (0, 2)])
        assert not has_unique_topological_order(digraph)

    def test_join(self) -> None:
        digraph = Digraph.from_edges(3, [(0, 2), (1, 2)])
        assert not has_unique_topological_order(digraph)

    def test_transitive_tournament(self) -> None:
        digraph = Digraph.from_edges(4, [(v, w) for v in range(4) for w in range(v + 1, 4)])
        assert has_unique_topological_order(digraph)

    def test_empty(self) -> None:
        assert has_unique_topological_order(Digraph(0))

    def test_single_vertex(self) -> None:
        assert has_unique_topological_order(Digraph(1))

    def test_disconnected(self) -> None:
        digraph = Digraph.from_edges(4, [(0, 1), (2, 3)])
        assert not has_unique_topological_order(digraph)

    def test_isolated_vertices(self) -> None:
        assert not has_unique_topological_order(Digraph(2))

    def test_parallel_arcs(self) -> None:
        digraph = Digraph.from_edges(2, [(0, 1), (0, 1)])
        assert has_unique_topological_order(digraph)


class TestCycles:
    def test_three_cycle(self) -> None:
        digraph = Digraph.from_edges(3, [(0, 1), (1, 2), (2, 0)])
        with pytest.raises(NotAcyclicError):
            has_unique_topological_order(digraph)

    def test_self_loop(self) -> None:
        with pytest.raises(NotAcyclicError):
            has_unique_topological_order(Digraph.from_edges(1, [(0, 0)]))

    def test_cycle_behind_a_path(self) -> None:
        digraph = Digraph.from_edges(4, [(0, 1), (1, 2), (2, 3), (3, 2)])
        with pytest.raises(NotAcyclicError) as exc_info:
            has_unique_topological_order(digraph)
        assert exc_info.value.ordered == 2
        assert exc_info.value.vertices == 4


class TestIdempotence:
    def test_same_answer_twice(self, book_digraph: Digraph) -> None:
        first = has_unique_topological_order(book_digraph)
        second = has_unique_topological_order(book_digraph)
        assert first == second
        assert book_digraph.E == len(BOOK_EDGES)
