"""Graphviz Dot rendering for graphs and digraphs."""

from ._graph import Digraph, Graph


def to_dot(graph: Graph | Digraph) -> str:
    """Render a graph as a Dot edge list.

    Undirected graphs become ``graph { v -- w ... }`` with each edge listed
    once; digraphs become ``digraph { v -> w ... }``. Isolated vertices are
    not listed.

    Example:
        >>> print(to_dot(Digraph.from_edges(2, [(0, 1)])))
        digraph {
        0 -> 1
        }

    """
    match graph:
        case Digraph():
            header, connector = "digraph", "->"
        case Graph():
            header, connector = "graph", "--"
        case _:
            msg = f"Cannot render {type(graph).__name__} as Dot"
            raise TypeError(msg)

    lines = [f"{header} {{"]
    lines.extend(f"{v} {connector} {w}" for v, w in graph.edges())
    lines.append("}")
    return "\n".join(lines)
