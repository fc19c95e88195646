"""One-way street orientation and unique topological order on textbook graphs."""

__all__ = [
    "Digraph",
    "EdgeClassification",
    "GenerationError",
    "Graph",
    "GraphError",
    "GraphKind",
    "InvalidVertexError",
    "NotAcyclicError",
    "NotOrientableError",
    "OrientationFailure",
    "OrientationReport",
    "StrEnumWithDoc",
    "UniqueTopoReport",
    "check_orientation",
    "classify_edges",
    "connected_components",
    "count_components",
    "describe_topological_order",
    "find_bridges",
    "generators",
    "has_unique_topological_order",
    "is_strongly_connected",
    "is_two_edge_connected",
    "orient",
    "reachable",
    "to_dot",
    "topological_sort",
]

from . import _generators as generators
from ._dot import to_dot
from ._errors import (
    GenerationError,
    GraphError,
    InvalidVertexError,
    NotAcyclicError,
    NotOrientableError,
    OrientationFailure,
)
from ._generators import GraphKind
from ._graph import (
    Digraph,
    EdgeClassification,
    Graph,
    classify_edges,
    connected_components,
    count_components,
    find_bridges,
    is_strongly_connected,
    is_two_edge_connected,
    reachable,
    topological_sort,
)
from ._orientation import orient
from ._report import OrientationReport, UniqueTopoReport, check_orientation, describe_topological_order
from ._str_enum_with_doc import StrEnumWithDoc
from ._unique_topo import has_unique_topological_order
