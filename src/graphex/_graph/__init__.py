"""Graph module providing the graph model and its traversal algorithms.

This module contains:
- Graph: an undirected multigraph on vertices 0..V-1
- Digraph: a directed multigraph on vertices 0..V-1
- topological_sort, classify_edges and the connectivity checks built on them
"""

from ._algorithms import (
    EdgeClassification,
    classify_edges,
    connected_components,
    count_components,
    find_bridges,
    is_strongly_connected,
    is_two_edge_connected,
    reachable,
    topological_sort,
)
from ._digraph import Digraph
from ._undirected import Graph

__all__ = [
    "Digraph",
    "EdgeClassification",
    "Graph",
    "classify_edges",
    "connected_components",
    "count_components",
    "find_bridges",
    "is_strongly_connected",
    "is_two_edge_connected",
    "reachable",
    "topological_sort",
]
