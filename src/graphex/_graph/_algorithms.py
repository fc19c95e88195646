"""Graph algorithms shared by the orientation and topological order checks."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Collection, Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

from graphex._errors import NotAcyclicError

if TYPE_CHECKING:
    from ._digraph import Digraph
    from ._undirected import Graph

T = TypeVar("T", bound=Hashable)


def topological_sort(successors: Mapping[T, Collection[T]]) -> list[T]:
    """Sort a graph topologically with Kahn's algorithm.

    Given a graph represented as a mapping from nodes to their successors,
    return nodes in an order where every arc goes from an earlier node to a
    later one. Parallel arcs are counted once each.

    Args:
        successors: Mapping from node to the collection of its successors.

    Returns:
        List of nodes in topological order.

    Raises:
        NotAcyclicError: If the graph contains a cycle.

    Example:
        >>> topological_sort({"a": ["b"], "b": ["c"], "c": []})
        ['a', 'b', 'c']

    """
    indegree: defaultdict[T, int] = defaultdict(int)
    for node, targets in successors.items():
        indegree[node] = indegree.get(node, 0)
        for target in targets:
            indegree[target] += 1

    queue = deque([node for node, deg in indegree.items() if deg == 0])
    order: list[T] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for successor in successors.get(node, []):
            indegree[successor] -= 1
            if indegree[successor] == 0:
                queue.append(successor)

    if len(order) != len(indegree):
        raise NotAcyclicError(len(order), len(indegree))

    return order


@dataclass(slots=True)
class EdgeClassification:
    """Result of a depth-first search that classifies every reached edge.

    Attributes:
        preorder: Discovery number per vertex, ``-1`` if never reached.
        low: Smallest discovery number reachable from the vertex's subtree
            using at most one back edge.
        tree_edges: ``(parent, child)`` pairs in discovery order.
        back_edges: ``(descendant, ancestor)`` pairs; self-loops appear as ``(v, v)``.
        bridges: Tree edges ``(parent, child)`` that lie on no cycle.

    """

    preorder: list[int]
    low: list[int]
    tree_edges: list[tuple[int, int]] = field(default_factory=list)
    back_edges: list[tuple[int, int]] = field(default_factory=list)
    bridges: list[tuple[int, int]] = field(default_factory=list)

    @property
    def unreached(self) -> frozenset[int]:
        """Vertices the search never discovered."""
        return frozenset(v for v, number in enumerate(self.preorder) if number == -1)


def classify_edges(graph: Graph, roots: Iterable[int] | None = None) -> EdgeClassification:
    """Run an iterative depth-first search over edge ids and classify each edge.

    Every edge is walked exactly once, so parallel edges are told apart and
    the edge back to the parent is not mistaken for a back edge.

    Args:
        graph: The undirected graph to search.
        roots: Vertices to start searches from, in order. Defaults to every
            vertex, which covers all connected components.

    Returns:
        The classification of every edge reachable from the roots.

    Raises:
        InvalidVertexError: If a root is not a vertex of the graph.

    """
    vertices = graph.V
    result = EdgeClassification(preorder=[-1] * vertices, low=[0] * vertices)
    preorder = result.preorder
    low = result.low
    used = [False] * graph.E
    counter = 0

    for root in range(vertices) if roots is None else roots:
        graph.validate_vertex(root)
        if preorder[root] != -1:
            continue
        preorder[root] = low[root] = counter
        counter += 1
        stack = [(root, iter(graph.incident(root)))]

        while stack:
            v, pending = stack[-1]
            descended = False
            for edge_id in pending:
                if used[edge_id]:
                    continue
                used[edge_id] = True
                w = graph.other(edge_id, v)
                if preorder[w] == -1:
                    preorder[w] = low[w] = counter
                    counter += 1
                    result.tree_edges.append((v, w))
                    stack.append((w, iter(graph.incident(w))))
                    descended = True
                    break
                # An unused edge to a discovered vertex always leads to an ancestor.
                result.back_edges.append((v, w))
                low[v] = min(low[v], preorder[w])
            if descended:
                continue

            stack.pop()
            if stack:
                parent = stack[-1][0]
                low[parent] = min(low[parent], low[v])
                if low[v] > preorder[parent]:
                    result.bridges.append((parent, v))

    return result


def find_bridges(graph: Graph) -> list[tuple[int, int]]:
    """Return every bridge of the graph as a ``(parent, child)`` DFS tree edge."""
    return classify_edges(graph).bridges


def connected_components(graph: Graph) -> list[int]:
    """Label each vertex with the id of its connected component.

    Components are numbered from 0 in order of their smallest vertex.
    """
    component = [-1] * graph.V
    count = 0
    for source in range(graph.V):
        if component[source] != -1:
            continue
        component[source] = count
        queue = deque([source])
        while queue:
            v = queue.popleft()
            for w in graph.adj(v):
                if component[w] == -1:
                    component[w] = count
                    queue.append(w)
        count += 1
    return component


def count_components(graph: Graph) -> int:
    """Return the number of connected components."""
    return len(set(connected_components(graph)))


def is_two_edge_connected(graph: Graph) -> bool:
    """Check whether the graph is connected and has no bridge."""
    if graph.V == 0:
        return True
    classification = classify_edges(graph, roots=[0])
    return not classification.unreached and not classification.bridges


def reachable(digraph: Digraph, source: int) -> set[int]:
    """Return the set of vertices reachable from ``source`` (including itself)."""
    visited = {source}
    stack = list(digraph.adj(source))
    while stack:
        current = stack.pop()
        if current not in visited:
            visited.add(current)
            stack.extend(digraph.adj(current))
    return visited


def is_strongly_connected(digraph: Digraph) -> bool:
    """Check whether every vertex is reachable from every other vertex.

    A digraph is strongly connected iff vertex 0 reaches every vertex both in
    the digraph and in its reverse.
    """
    if digraph.V <= 1:
        return True
    return len(reachable(digraph, 0)) == digraph.V and len(reachable(digraph.reverse(), 0)) == digraph.V
