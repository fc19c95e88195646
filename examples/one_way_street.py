"""One-way street example for graphex.

Draws a random connected, bridgeless street map, turns every street into a
one-way street and checks that every crossing can still reach every other.

Run with:
    python examples/one_way_street.py
"""

import random

import graphex as gx

# -----------------------------------------------------------------------------
# Street map
# -----------------------------------------------------------------------------

rng = random.Random(2024)
streets = gx.generators.random_bridgeless(10, 0.5, rng)

# -----------------------------------------------------------------------------
# Orientation and checks
# -----------------------------------------------------------------------------

one_way = gx.orient(streets)
report = gx.check_orientation(streets, one_way)

print(f"same number of vertices: {report.same_vertex_count}")
print(f"same number of edges:    {report.same_edge_count}")
print(f"strongly connected:      {report.strongly_connected}")

print(gx.to_dot(streets))
print(gx.to_dot(one_way))

# A bridge makes the map impossible to orient
bridged = gx.Graph.from_edges(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3), (2, 3)])
try:
    gx.orient(bridged)
except gx.NotOrientableError as e:
    print(f"not orientable: {e}")
