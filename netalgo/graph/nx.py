"""NetworkX adapter for the :class:`~netalgo.graph.protocol.IndexedGraph` contract.

Example:
    >>> import networkx as nx
    >>> from netalgo.graph.nx import from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=10)
    >>> G.add_edge("B", "C", cost=5)
    >>>
    >>> graph = from_networkx(G)
    >>> graph.to_index("B")
    1
    >>> [(e.source, e.target) for e in graph.edges("A")]
    [('A', 'B')]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, Iterator, List, Union

from netalgo.types.base import NodeID
from netalgo.types.dto import EdgeRef

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Node names (any hashable) are mapped to contiguous integer indices
    starting from 0.

    Attributes:
        to_index: Maps original node names to integer indices
        to_name: Maps integer indices back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names.

        Args:
            names: List of node names in index order

        Returns:
            NodeMap with bidirectional mapping

        Raises:
            ValueError: If a name appears more than once.
        """
        to_index = {name: i for i, name in enumerate(names)}
        if len(to_index) != len(names):
            raise ValueError("Node names must be unique")
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


class NxIndexedGraph:
    """Read-only :class:`IndexedGraph` view over a NetworkX graph.

    Works with ``Graph``, ``DiGraph``, ``MultiGraph`` and ``MultiDiGraph``.
    The node index is frozen when the view is created; mutating the wrapped
    graph afterwards invalidates the view.

    Attributes:
        nx_graph: The wrapped NetworkX graph.
        node_map: Dense index mapping for the wrapped graph's nodes.
    """

    def __init__(self, nx_graph: NxGraph, node_map: NodeMap) -> None:
        self.nx_graph = nx_graph
        self.node_map = node_map
        self._multigraph = nx_graph.is_multigraph()

    def __repr__(self) -> str:
        kind = type(self.nx_graph).__name__
        return f"NxIndexedGraph({kind}, nodes={len(self.node_map)})"

    def node_identifiers(self) -> Iterator[NodeID]:
        return iter(self.node_map.to_index)

    def node_count(self) -> int:
        return len(self.node_map)

    def to_index(self, node: NodeID) -> int:
        try:
            return self.node_map.to_index[node]
        except KeyError:
            raise KeyError(f"Node '{node}' is not in the graph.") from None

    def from_index(self, index: int) -> NodeID:
        return self.node_map.to_name[index]

    def is_directed(self) -> bool:
        return self.nx_graph.is_directed()

    def edges(self, node: NodeID) -> Iterator[EdgeRef]:
        adjacency = self.nx_graph.adj[node]
        if self._multigraph:
            for neighbor, keyed in adjacency.items():
                for key, data in keyed.items():
                    yield EdgeRef(node, neighbor, key, data)
        else:
            for neighbor, data in adjacency.items():
                yield EdgeRef(node, neighbor, None, data)

    def edge_references(self) -> Iterator[EdgeRef]:
        if self._multigraph:
            for u, v, key, data in self.nx_graph.edges(keys=True, data=True):
                yield EdgeRef(u, v, key, data)
        else:
            for u, v, data in self.nx_graph.edges(data=True):
                yield EdgeRef(u, v, None, data)


def from_networkx(G: NxGraph, *, sort_nodes: bool = False) -> NxIndexedGraph:
    """Wrap a NetworkX graph so netalgo algorithms can consume it.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph)
        sort_nodes: If True, assign indices in ``str``-sorted node order
            instead of the graph's insertion order.

    Returns:
        NxIndexedGraph over ``G``.

    Raises:
        TypeError: If G is not a NetworkX graph
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_names = list(G.nodes())
    if sort_nodes:
        node_names.sort(key=str)
    return NxIndexedGraph(G, NodeMap.from_names(node_names))


def as_indexed_graph(graph: Any) -> Any:
    """Return ``graph`` as an IndexedGraph, wrapping NetworkX graphs on the fly."""
    import networkx as nx

    if isinstance(graph, nx.Graph):
        return from_networkx(graph)
    return graph
