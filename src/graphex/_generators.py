"""Random and structured undirected graph generators.

Every generator takes the random source explicitly, so a seeded
``random.Random`` gives reproducible graphs.

References:
    - Sedgewick, Wayne. "Algorithms", 4th ed. Section 4.1, GraphGenerator.
"""

import logging
import random

from ._errors import GenerationError
from ._graph import Graph, is_two_edge_connected
from ._str_enum_with_doc import StrEnumWithDoc

logger = logging.getLogger(__name__)


class GraphKind(StrEnumWithDoc):
    """Graph families that can be generated by name."""

    SIMPLE = "simple", "Uniformly random simple graph with a given edge count."
    ERDOS_RENYI = "erdos-renyi", "Each possible edge present with a given probability."
    COMPLETE = "complete", "Every pair of vertices joined."
    COMPLETE_BIPARTITE = "complete-bipartite", "Every cross pair of two halves joined."
    BIPARTITE = "bipartite", "Random bipartite graph with a given edge count."
    BIPARTITE_ERDOS_RENYI = "bipartite-erdos-renyi", "Each cross pair present with a given probability."
    PATH = "path", "Random Hamiltonian path."
    BINARY_TREE = "binary-tree", "Complete binary tree on shuffled vertices."
    CYCLE = "cycle", "Random Hamiltonian cycle."
    EULERIAN_CYCLE = "eulerian-cycle", "Closed random walk with a given edge count."
    EULERIAN_PATH = "eulerian-path", "Open random walk with a given edge count."
    WHEEL = "wheel", "Hub joined to every vertex of a cycle."
    STAR = "star", "Hub joined to every other vertex."
    REGULAR = "regular", "Random k-regular multigraph."
    BRIDGELESS = "bridgeless", "Erdos-Renyi graph redrawn until connected and bridgeless."


def _shuffled(vertices: int, rng: random.Random) -> list[int]:
    order = list(range(vertices))
    rng.shuffle(order)
    return order


def _check_probability(p: float) -> None:
    if not 0.0 <= p <= 1.0:
        msg = "Probability must be between 0 and 1"
        raise ValueError(msg)


def simple(vertices: int, edges: int, rng: random.Random) -> Graph:
    """Return a uniformly random simple graph with the given number of edges.

    Raises:
        ValueError: If no simple graph with that many edges exists.

    """
    if edges > vertices * (vertices - 1) // 2:
        msg = "Too many edges"
        raise ValueError(msg)
    if edges < 0:
        msg = "Too few edges"
        raise ValueError(msg)
    graph = Graph(vertices)
    seen: set[tuple[int, int]] = set()
    while graph.E < edges:
        v = rng.randrange(vertices)
        w = rng.randrange(vertices)
        edge = (min(v, w), max(v, w))
        if v != w and edge not in seen:
            seen.add(edge)
            graph.add_edge(v, w)
    return graph


def erdos_renyi(vertices: int, p: float, rng: random.Random) -> Graph:
    """Return a simple graph with each possible edge present with probability ``p``.

    Raises:
        ValueError: If ``p`` is not between 0 and 1.

    """
    _check_probability(p)
    graph = Graph(vertices)
    for v in range(vertices):
        for w in range(v + 1, vertices):
            if rng.random() < p:
                graph.add_edge(v, w)
    return graph


def complete(vertices: int) -> Graph:
    """Return the complete graph on ``vertices`` vertices."""
    return Graph.from_edges(vertices, ((v, w) for v in range(vertices) for w in range(v + 1, vertices)))


def bipartite(vertices1: int, vertices2: int, edges: int, rng: random.Random) -> Graph:
    """Return a random simple bipartite graph with the given number of edges.

    The two sides are a random split of the shuffled vertex ids.

    Raises:
        ValueError: If no such bipartite graph exists.

    """
    if edges > vertices1 * vertices2:
        msg = "Too many edges"
        raise ValueError(msg)
    if edges < 0:
        msg = "Too few edges"
        raise ValueError(msg)
    graph = Graph(vertices1 + vertices2)
    order = _shuffled(vertices1 + vertices2, rng)
    seen: set[tuple[int, int]] = set()
    while graph.E < edges:
        v = order[rng.randrange(vertices1)]
        w = order[vertices1 + rng.randrange(vertices2)]
        edge = (min(v, w), max(v, w))
        if edge not in seen:
            seen.add(edge)
            graph.add_edge(v, w)
    return graph


def complete_bipartite(vertices1: int, vertices2: int, rng: random.Random) -> Graph:
    """Return a complete bipartite graph on a random split of the vertices."""
    return bipartite(vertices1, vertices2, vertices1 * vertices2, rng)


def bipartite_erdos_renyi(vertices1: int, vertices2: int, p: float, rng: random.Random) -> Graph:
    """Return a bipartite graph with each cross pair present with probability ``p``."""
    _check_probability(p)
    order = _shuffled(vertices1 + vertices2, rng)
    graph = Graph(vertices1 + vertices2)
    for i in range(vertices1):
        for j in range(vertices2):
            if rng.random() < p:
                graph.add_edge(order[i], order[vertices1 + j])
    return graph


def path(vertices: int, rng: random.Random) -> Graph:
    """Return a path visiting every vertex in random order."""
    order = _shuffled(vertices, rng)
    graph = Graph(vertices)
    for v, w in zip(order, order[1:], strict=False):
        graph.add_edge(v, w)
    return graph


def binary_tree(vertices: int, rng: random.Random) -> Graph:
    """Return a complete binary tree on randomly labelled vertices."""
    order = _shuffled(vertices, rng)
    graph = Graph(vertices)
    for i in range(1, vertices):
        graph.add_edge(order[i], order[(i - 1) // 2])
    return graph


def cycle(vertices: int, rng: random.Random) -> Graph:
    """Return a cycle visiting every vertex in random order."""
    order = _shuffled(vertices, rng)
    graph = Graph(vertices)
    for v, w in zip(order, order[1:] + order[:1], strict=True):
        graph.add_edge(v, w)
    return graph


def eulerian_cycle(vertices: int, edges: int, rng: random.Random) -> Graph:
    """Return a closed random walk of ``edges`` edges (a multigraph).

    Raises:
        ValueError: If ``edges`` or ``vertices`` is not positive.

    """
    if edges <= 0:
        msg = "An Eulerian cycle must have at least one edge"
        raise ValueError(msg)
    if vertices <= 0:
        msg = "An Eulerian cycle must have at least one vertex"
        raise ValueError(msg)
    walk = [rng.randrange(vertices) for _ in range(edges)]
    graph = Graph(vertices)
    for v, w in zip(walk, walk[1:] + walk[:1], strict=True):
        graph.add_edge(v, w)
    return graph


def eulerian_path(vertices: int, edges: int, rng: random.Random) -> Graph:
    """Return an open random walk of ``edges`` edges (a multigraph).

    Raises:
        ValueError: If ``edges`` is negative or ``vertices`` is not positive.

    """
    if edges < 0:
        msg = "Negative number of edges"
        raise ValueError(msg)
    if vertices <= 0:
        msg = "An Eulerian path must have at least one vertex"
        raise ValueError(msg)
    walk = [rng.randrange(vertices) for _ in range(edges + 1)]
    graph = Graph(vertices)
    for v, w in zip(walk, walk[1:], strict=False):
        graph.add_edge(v, w)
    return graph


def wheel(vertices: int, rng: random.Random) -> Graph:
    """Return a hub joined to every vertex of a cycle on the remaining vertices.

    Raises:
        ValueError: If there are fewer than 2 vertices.

    """
    if vertices <= 1:
        msg = "Number of vertices must be at least 2"
        raise ValueError(msg)
    order = _shuffled(vertices, rng)
    hub, rim = order[0], order[1:]
    graph = Graph(vertices)
    for i in range(len(rim) - 1):
        graph.add_edge(rim[i], rim[i + 1])
    graph.add_edge(rim[-1], rim[0])
    for v in rim:
        graph.add_edge(hub, v)
    return graph


def star(vertices: int, rng: random.Random) -> Graph:
    """Return a hub joined to every other vertex.

    Raises:
        ValueError: If there are no vertices.

    """
    if vertices <= 0:
        msg = "Number of vertices must be at least 1"
        raise ValueError(msg)
    order = _shuffled(vertices, rng)
    graph = Graph(vertices)
    for v in order[1:]:
        graph.add_edge(order[0], v)
    return graph


def regular(vertices: int, k: int, rng: random.Random) -> Graph:
    """Return a uniformly random k-regular multigraph.

    The result is a random perfect matching on ``k`` copies of each vertex,
    so it may contain self-loops and parallel edges.

    Raises:
        ValueError: If ``vertices * k`` is odd.

    """
    if vertices * k % 2 != 0:
        msg = "Number of vertices * k must be even"
        raise ValueError(msg)
    copies = [v for _ in range(k) for v in range(vertices)]
    rng.shuffle(copies)
    graph = Graph(vertices)
    for i in range(0, len(copies), 2):
        graph.add_edge(copies[i], copies[i + 1])
    return graph


def random_bridgeless(vertices: int, p: float, rng: random.Random, max_attempts: int = 10_000) -> Graph:
    """Draw Erdos-Renyi graphs until one is connected and has no bridge.

    Args:
        vertices: Number of vertices.
        p: Edge probability of each draw.
        rng: Random source.
        max_attempts: Number of draws before giving up.

    Returns:
        A 2-edge-connected graph.

    Raises:
        GenerationError: If no draw within ``max_attempts`` qualifies.

    """
    for attempt in range(1, max_attempts + 1):
        graph = erdos_renyi(vertices, p, rng)
        if is_two_edge_connected(graph):
            logger.debug(f"Found bridgeless graph after {attempt} attempt(s)")
            return graph
    msg = f"No connected bridgeless graph on {vertices} vertices with p={p} after {max_attempts} attempts"
    raise GenerationError(msg)
