"""netalgo: structural connectivity and all-pairs shortest path analysis.

netalgo runs whole-graph algorithms over any graph that satisfies a small
capability contract (dense node index plus edge iteration). NetworkX graphs
are accepted directly.

Primary API:
    articulation_points() - Cut vertices of a graph
    cut_edges() - Bridges of a graph
    biconnected_components() - Maximal 2-connected node sets
    floyd_warshall() - All-pairs shortest-path distances
    floyd_warshall_path() - Distances plus paths for selected pairs
    from_networkx() - Wrap a NetworkX graph as an IndexedGraph

Example:
    import networkx as nx
    from netalgo import articulation_points, floyd_warshall

    G = nx.Graph([("A", "B"), ("B", "C")])
    articulation_points(G)          # {"B"}
    floyd_warshall(G)[("A", "C")]   # 2
"""

from __future__ import annotations

from netalgo import cli, logging
from netalgo._version import __version__
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
from netalgo.config import APSP_CONFIG, AllPairsConfig
from netalgo.graph.nx import NodeMap, NxIndexedGraph, from_networkx
from netalgo.graph.protocol import IndexedGraph
from netalgo.types.base import ParallelEdgePolicy
from netalgo.types.dto import EdgeRef

__all__ = [
    # Version
    "__version__",
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
    # Graph access
    "IndexedGraph",
    "NodeMap",
    "NxIndexedGraph",
    "from_networkx",
    "EdgeRef",
    # Configuration
    "AllPairsConfig",
    "APSP_CONFIG",
    "ParallelEdgePolicy",
    # Utilities
    "cli",
    "logging",
]
