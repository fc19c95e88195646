"""Directed graph on the vertices ``0 .. V-1``."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from graphex._errors import InvalidVertexError

from ._algorithms import topological_sort

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class Digraph:
    """A directed multigraph with a fixed number of vertices.

    Successors are kept in insertion order for iteration and additionally
    counted in a hash map so that ``has_edge`` is O(1).
    """

    __slots__ = ("_adj", "_edge_count", "_indegree", "_successors", "_vertices")

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            msg = "Number of vertices in a Digraph must be non-negative"
            raise ValueError(msg)
        self._vertices = vertices
        self._edge_count = 0
        self._adj: list[list[int]] = [[] for _ in range(vertices)]
        self._successors: list[Counter[int]] = [Counter() for _ in range(vertices)]
        self._indegree: list[int] = [0] * vertices

    @classmethod
    def from_edges(cls, vertices: int, edges: Iterable[tuple[int, int]]) -> Digraph:
        """Build a digraph from a vertex count and a list of ``(source, target)`` arcs.

        Example:
            >>> dg = Digraph.from_edges(3, [(0, 1), (1, 2)])
            >>> dg.has_edge(0, 1), dg.has_edge(1, 0)
            (True, False)

        """
        digraph = cls(vertices)
        for v, w in edges:
            digraph.add_edge(v, w)
        return digraph

    @property
    def V(self) -> int:  # noqa: N802
        """Number of vertices."""
        return self._vertices

    @property
    def E(self) -> int:  # noqa: N802
        """Number of arcs."""
        return self._edge_count

    def validate_vertex(self, v: int) -> None:
        if not 0 <= v < self._vertices:
            raise InvalidVertexError(v, self._vertices)

    def add_edge(self, v: int, w: int) -> None:
        """Add the arc ``v->w``.

        Raises:
            InvalidVertexError: If either endpoint is out of range.

        """
        self.validate_vertex(v)
        self.validate_vertex(w)
        self._adj[v].append(w)
        self._successors[v][w] += 1
        self._indegree[w] += 1
        self._edge_count += 1

    def adj(self, v: int) -> Iterator[int]:
        """Iterate over the successors of ``v``."""
        self.validate_vertex(v)
        return iter(self._adj[v])

    def has_edge(self, v: int, w: int) -> bool:
        """Check whether the arc ``v->w`` exists."""
        self.validate_vertex(v)
        self.validate_vertex(w)
        return self._successors[v][w] > 0

    def outdegree(self, v: int) -> int:
        self.validate_vertex(v)
        return len(self._adj[v])

    def indegree(self, v: int) -> int:
        self.validate_vertex(v)
        return self._indegree[v]

    def edges(self) -> list[tuple[int, int]]:
        """Return every arc as ``(source, target)``, grouped by source."""
        return [(v, w) for v in range(self._vertices) for w in self._adj[v]]

    def reverse(self) -> Digraph:
        """Return a new digraph with every arc flipped."""
        reversed_digraph = Digraph(self._vertices)
        for v, w in self.edges():
            reversed_digraph.add_edge(w, v)
        return reversed_digraph

    def topological_order(self) -> list[int]:
        """Return the vertices in a topological order (Kahn's algorithm).

        Raises:
            NotAcyclicError: If the digraph contains a directed cycle.

        """
        return topological_sort({v: self._adj[v] for v in range(self._vertices)})

    def __str__(self) -> str:
        lines = [f"{self._vertices} vertices, {self._edge_count} edges"]
        lines.extend(f"{v}: {' '.join(map(str, self._adj[v]))}".rstrip() for v in range(self._vertices))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Digraph(V={self._vertices}, E={self._edge_count})"
