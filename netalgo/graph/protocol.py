"""Capability contract that graphs must satisfy to be analysed.

The algorithms in :mod:`netalgo.algorithms` never touch a concrete graph
type. They read nodes and edges exclusively through :class:`IndexedGraph`,
which any storage layout can implement: adjacency dicts, matrices, edge
lists, or the networkx adapter in :mod:`netalgo.graph.nx`.
"""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from netalgo.types.base import NodeID
from netalgo.types.dto import EdgeRef


@runtime_checkable
class IndexedGraph(Protocol):
    """Read-only graph view with a dense node index.

    Implementations must map every node to a unique integer in
    ``[0, node_count())`` and back, both in O(1) expected time. Iteration
    methods must be restartable and finite.
    """

    def node_identifiers(self) -> Iterable[NodeID]:
        """Iterate over all node identifiers."""
        ...

    def node_count(self) -> int:
        """Return the number of nodes."""
        ...

    def to_index(self, node: NodeID) -> int:
        """Return the dense index of ``node``; raise KeyError if absent."""
        ...

    def from_index(self, index: int) -> NodeID:
        """Return the node identifier at dense ``index``."""
        ...

    def edges(self, node: NodeID) -> Iterable[EdgeRef]:
        """Iterate over edges leaving ``node``.

        For undirected graphs every incident edge is reported with ``node``
        as its source.
        """
        ...

    def edge_references(self) -> Iterable[EdgeRef]:
        """Iterate over every edge exactly once."""
        ...

    def is_directed(self) -> bool:
        """Return True if edges are directed."""
        ...
