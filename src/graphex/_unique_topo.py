"""Decide whether a DAG has exactly one topological order."""

import logging
from itertools import pairwise

from ._graph import Digraph

logger = logging.getLogger(__name__)


def has_unique_topological_order(digraph: Digraph) -> bool:
    """Check whether ``digraph`` admits exactly one topological order.

    Any topological order is unique iff each pair of consecutive vertices in
    it is joined by a direct arc. If some consecutive pair is not, the two
    vertices can be swapped and the order is not forced.

    Args:
        digraph: A directed acyclic graph.

    Returns:
        True if the topological order is unique, False otherwise.

    Raises:
        NotAcyclicError: If the digraph contains a directed cycle.

    """
    order = digraph.topological_order()
    logger.debug("Topological order: %s", order)
    for earlier, later in pairwise(order):
        if not digraph.has_edge(earlier, later):
            logger.debug("No arc %d->%d, order is not unique", earlier, later)
            return False
    return True
