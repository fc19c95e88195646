"""Exceptions raised by graph construction and the graph algorithms."""

from ._str_enum_with_doc import StrEnumWithDoc


class GraphError(Exception):
    """Base class for all graphex errors."""


class InvalidVertexError(GraphError):
    """Raised when a vertex id lies outside ``[0, V)``."""

    def __init__(self, vertex: int, vertices: int) -> None:
        self.vertex = vertex
        self.vertices = vertices
        super().__init__(f"Vertex {vertex} is not between 0 and {vertices - 1}")


class OrientationFailure(StrEnumWithDoc):
    """Why an undirected graph admits no strongly connected orientation."""

    DISCONNECTED = "disconnected", "Some vertex is unreachable from vertex 0."
    BRIDGE = "bridge", "Some edge lies on no cycle."


class NotOrientableError(GraphError):
    """Raised when a graph is disconnected or has a bridge."""

    def __init__(
        self,
        reason: OrientationFailure,
        *,
        bridge: tuple[int, int] | None = None,
        unreached: frozenset[int] = frozenset(),
    ) -> None:
        self.reason = reason
        self.bridge = bridge
        self.unreached = unreached
        match reason:
            case OrientationFailure.BRIDGE:
                msg = f"Graph has a bridge {bridge[0]}-{bridge[1]}" if bridge else "Graph has a bridge"
            case OrientationFailure.DISCONNECTED:
                msg = f"Graph is not connected ({len(unreached)} vertices unreachable from 0)"
        super().__init__(msg)


class NotAcyclicError(GraphError):
    """Raised when a topological sort meets a directed cycle."""

    def __init__(self, ordered: int, vertices: int) -> None:
        self.ordered = ordered
        self.vertices = vertices
        super().__init__(f"Cycle detected in graph (ordered {ordered} of {vertices} vertices)")


class GenerationError(GraphError):
    """Raised when a generator cannot produce a graph with the requested property."""
