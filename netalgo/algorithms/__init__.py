"""Whole-graph structural and distance algorithms.

Every function here reads its input through the
:class:`~netalgo.graph.protocol.IndexedGraph` contract (NetworkX graphs are
wrapped automatically) and keeps all working state local to the call.
"""

from netalgo.algorithms.connectivity import (
    articulation_points,
    biconnected_component_edges,
    biconnected_components,
    cut_edges,
)
from netalgo.algorithms.floyd_warshall import (
    NegativeCycleError,
    edge_attr_cost,
    floyd_warshall,
    floyd_warshall_path,
)
from netalgo.algorithms.measure import BoundedMeasure, IntMeasure, NumberMeasure

__all__ = [
    # Connectivity
    "articulation_points",
    "cut_edges",
    "biconnected_components",
    "biconnected_component_edges",
    # Shortest paths
    "floyd_warshall",
    "floyd_warshall_path",
    "edge_attr_cost",
    "NegativeCycleError",
    # Measures
    "BoundedMeasure",
    "NumberMeasure",
    "IntMeasure",
]
