"""Undirected graph on the vertices ``0 .. V-1``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphex._errors import InvalidVertexError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class Graph:
    """An undirected multigraph with a fixed number of vertices.

    Edges are stored once in an edge table and referenced by id from the
    incidence list of each endpoint, so parallel edges stay distinguishable.
    A self-loop is referenced twice from its vertex and therefore shows up
    twice in ``adj(v)``.

    Complexity:
        - add_edge: O(1) amortized
        - adj, degree: O(deg(v)) and O(1)
        - V, E: O(1)

    """

    __slots__ = ("_edges", "_incident", "_vertices")

    def __init__(self, vertices: int) -> None:
        """Create a graph with ``vertices`` isolated vertices.

        Raises:
            ValueError: If ``vertices`` is negative.

        """
        if vertices < 0:
            msg = "Number of vertices must be non-negative"
            raise ValueError(msg)
        self._vertices = vertices
        self._edges: list[tuple[int, int]] = []
        self._incident: list[list[int]] = [[] for _ in range(vertices)]

    @classmethod
    def from_edges(cls, vertices: int, edges: Iterable[tuple[int, int]]) -> Graph:
        """Build a graph from a vertex count and a list of edges.

        Example:
            >>> g = Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)])
            >>> g.E
            3

        """
        graph = cls(vertices)
        for v, w in edges:
            graph.add_edge(v, w)
        return graph

    @property
    def V(self) -> int:  # noqa: N802
        """Number of vertices."""
        return self._vertices

    @property
    def E(self) -> int:  # noqa: N802
        """Number of edges."""
        return len(self._edges)

    def validate_vertex(self, v: int) -> None:
        """Raise InvalidVertexError unless ``0 <= v < V``."""
        if not 0 <= v < self._vertices:
            raise InvalidVertexError(v, self._vertices)

    def add_edge(self, v: int, w: int) -> int:
        """Add the undirected edge ``v-w``.

        Returns:
            The id of the new edge.

        Raises:
            InvalidVertexError: If either endpoint is out of range.

        """
        self.validate_vertex(v)
        self.validate_vertex(w)
        edge_id = len(self._edges)
        self._edges.append((v, w))
        self._incident[v].append(edge_id)
        self._incident[w].append(edge_id)
        return edge_id

    def adj(self, v: int) -> Iterator[int]:
        """Iterate over the neighbours of ``v``, one entry per incident edge end."""
        self.validate_vertex(v)
        return (self.other(edge_id, v) for edge_id in self._incident[v])

    def incident(self, v: int) -> list[int]:
        """Return the ids of the edges incident to ``v``."""
        self.validate_vertex(v)
        return list(self._incident[v])

    def endpoints(self, edge_id: int) -> tuple[int, int]:
        """Return the endpoints of an edge in insertion order."""
        return self._edges[edge_id]

    def other(self, edge_id: int, v: int) -> int:
        """Return the endpoint of ``edge_id`` that is not ``v``."""
        a, b = self._edges[edge_id]
        return b if a == v else a

    def degree(self, v: int) -> int:
        self.validate_vertex(v)
        return len(self._incident[v])

    def edges(self) -> list[tuple[int, int]]:
        """Return every edge once as ``(v, w)`` with ``v <= w``.

        Edges are listed by their smaller endpoint, then in insertion order.
        """
        result: list[tuple[int, int]] = []
        for v in range(self._vertices):
            seen: set[int] = set()
            for edge_id in self._incident[v]:
                w = self.other(edge_id, v)
                if w > v or (w == v and edge_id not in seen):
                    result.append((v, w))
                seen.add(edge_id)
        return result

    def __str__(self) -> str:
        lines = [f"{self._vertices} vertices, {self.E} edges"]
        lines.extend(f"{v}: {' '.join(map(str, self.adj(v)))}".rstrip() for v in range(self._vertices))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Graph(V={self._vertices}, E={self.E})"
