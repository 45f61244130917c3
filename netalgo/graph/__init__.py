"""Graph access layer.

This package defines the `IndexedGraph` capability contract that every
algorithm consumes, a NetworkX adapter implementing it (`nx`), and loaders
for graph documents (`io`).
"""

from netalgo.graph.nx import NodeMap, NxIndexedGraph, as_indexed_graph, from_networkx
from netalgo.graph.protocol import IndexedGraph

__all__ = [
    "IndexedGraph",
    "NodeMap",
    "NxIndexedGraph",
    "as_indexed_graph",
    "from_networkx",
]
