"""Validation reports for orientations and topological orders.

The reports are plain pydantic models so that the CLI can print them as
tables or dump them as JSON.
"""

import logging
from collections import Counter

from pydantic import BaseModel, ConfigDict, computed_field

from ._graph import Digraph, Graph, is_strongly_connected
from ._unique_topo import has_unique_topological_order

logger = logging.getLogger(__name__)


class OrientationReport(BaseModel):
    """Checks that a digraph is a strongly connected orientation of a graph."""

    model_config = ConfigDict(frozen=True)

    graph_vertices: int
    digraph_vertices: int
    graph_edges: int
    digraph_edges: int
    edges_correspond: bool
    strongly_connected: bool

    @computed_field
    @property
    def same_vertex_count(self) -> bool:
        return self.graph_vertices == self.digraph_vertices

    @computed_field
    @property
    def same_edge_count(self) -> bool:
        return self.graph_edges == self.digraph_edges

    @computed_field
    @property
    def passed(self) -> bool:
        """Whether every check holds."""
        return self.same_vertex_count and self.same_edge_count and self.edges_correspond and self.strongly_connected


class UniqueTopoReport(BaseModel):
    """Topological order of a DAG and whether it is the only one."""

    model_config = ConfigDict(frozen=True)

    vertices: int
    edges: int
    order: list[int]
    unique: bool


def _undirected_multiset(edges: list[tuple[int, int]]) -> Counter[tuple[int, int]]:
    return Counter((min(v, w), max(v, w)) for v, w in edges)


def check_orientation(graph: Graph, digraph: Digraph) -> OrientationReport:
    """Compare a graph with a candidate orientation of it.

    Args:
        graph: The undirected input graph.
        digraph: The digraph claimed to orient ``graph``.

    Returns:
        An OrientationReport with the outcome of each check.

    """
    report = OrientationReport(
        graph_vertices=graph.V,
        digraph_vertices=digraph.V,
        graph_edges=graph.E,
        digraph_edges=digraph.E,
        edges_correspond=_undirected_multiset(graph.edges()) == _undirected_multiset(digraph.edges()),
        strongly_connected=is_strongly_connected(digraph),
    )
    logger.debug(f"Orientation report: {report!r}")
    return report


def describe_topological_order(digraph: Digraph) -> UniqueTopoReport:
    """Compute a topological order of ``digraph`` and decide its uniqueness.

    Raises:
        NotAcyclicError: If the digraph contains a directed cycle.

    """
    return UniqueTopoReport(
        vertices=digraph.V,
        edges=digraph.E,
        order=digraph.topological_order(),
        unique=has_unique_topological_order(digraph),
    )
