"""Unique topological order example for graphex.

The seven-vertex DAG from Sedgewick & Wayne has several topological orders.
Adding the arc 2->1 forces a single one.

Run with:
    python examples/unique_topo.py
"""

import graphex as gx

book = gx.Digraph.from_edges(
    7,
    [(0, 5), (0, 1), (3, 5), (5, 2), (6, 0), (1, 4), (0, 2), (3, 6), (3, 4), (6, 4), (3, 2)],
)

print(gx.has_unique_topological_order(book))  # False

book.add_edge(2, 1)

print(gx.has_unique_topological_order(book))  # True
print(book.topological_order())  # [3, 6, 0, 5, 2, 1, 4]
