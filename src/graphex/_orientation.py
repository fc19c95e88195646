"""One-way street orientation of a bridgeless undirected graph.

By Robbins' theorem a connected undirected graph can be oriented into a
strongly connected digraph iff it has no bridge. The constructive proof is a
single depth-first search: tree edges point away from the root and back edges
point towards it, so every back edge closes a directed cycle with the tree
path it spans.
"""

import logging

from ._errors import NotOrientableError, OrientationFailure
from ._graph import Digraph, Graph, classify_edges

logger = logging.getLogger(__name__)


def orient(graph: Graph) -> Digraph:
    """Orient every edge of ``graph`` so that the result is strongly connected.

    Args:
        graph: A connected undirected graph without bridges.

    Returns:
        A new digraph on the same vertices with exactly one arc per edge.

    Raises:
        NotOrientableError: If the graph is not connected or has a bridge.

    Example:
        >>> triangle = Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)])
        >>> orient(triangle).edges()
        [(0, 1), (1, 2), (2, 0)]

    """
    logger.debug("Orienting graph with %d vertices and %d edges", graph.V, graph.E)
    digraph = Digraph(graph.V)
    if graph.V == 0:
        return digraph

    classification = classify_edges(graph, roots=[0])

    if classification.unreached:
        logger.debug("Unreached vertices: %s", sorted(classification.unreached))
        raise NotOrientableError(OrientationFailure.DISCONNECTED, unreached=classification.unreached)
    if classification.bridges:
        logger.debug("Bridges: %s", classification.bridges)
        raise NotOrientableError(OrientationFailure.BRIDGE, bridge=classification.bridges[0])

    for parent, child in classification.tree_edges:
        digraph.add_edge(parent, child)
    for descendant, ancestor in classification.back_edges:
        digraph.add_edge(descendant, ancestor)

    logger.debug(
        "Oriented %d tree edges and %d back edges",
        len(classification.tree_edges),
        len(classification.back_edges),
    )
    return digraph
