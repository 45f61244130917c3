"""Articulation points, cut edges and biconnected components.

All three are read off a single low-link depth-first search (Hopcroft-Tarjan).
The search runs on an explicit stack of resumable frames, so arbitrarily
deep graphs never hit the interpreter recursion limit.

Notes:
    Edges are connectivity witnesses only: for directed graphs both endpoints
    see each other as neighbors, so results describe the underlying
    undirected multigraph. Self-loops are ignored. Parallel edges are kept
    as distinct witnesses, which is why a doubled edge is never a cut edge.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Set, Tuple

from netalgo.graph.nx import as_indexed_graph
from netalgo.graph.protocol import IndexedGraph
from netalgo.logging import get_logger
from netalgo.types.base import NodeID

logger = get_logger(__name__)

# (neighbor index, edge id) where edge id is the enumeration position of the edge
Adjacency = List[List[Tuple[int, int]]]
IndexPair = Tuple[int, int]


@dataclass
class _LowLinkResult:
    """Index-level output of one low-link search."""

    articulation: Set[int] = field(default_factory=set)
    bridges: List[IndexPair] = field(default_factory=list)
    components: List[List[IndexPair]] = field(default_factory=list)


def _undirected_adjacency(graph: IndexedGraph) -> Adjacency:
    """Build index-keyed neighbor lists with every edge visible from both ends."""
    adjacency: Adjacency = [[] for _ in range(graph.node_count())]
    for edge_id, edge in enumerate(graph.edge_references()):
        u = graph.to_index(edge.source)
        v = graph.to_index(edge.target)
        if u == v:
            continue
        adjacency[u].append((v, edge_id))
        adjacency[v].append((u, edge_id))
    return adjacency


def _low_link_search(adjacency: Adjacency, collect_components: bool) -> _LowLinkResult:
    """Run the iterative DFS over every root and collect low-link results.

    Args:
        adjacency: Undirected neighbor lists keyed by dense index.
        collect_components: Maintain the edge stack and emit biconnected
            components (costs extra memory proportional to edge count).

    Returns:
        Articulation indices, bridges and (optionally) component edge lists.
    """
    n = len(adjacency)
    # discovery == 0 means unvisited; timestamps start at 1
    discovery = [0] * n
    low = [0] * n
    parent_edge = [-1] * n
    time = 0

    result = _LowLinkResult()
    edge_stack: List[IndexPair] = []

    for root in range(n):
        if discovery[root]:
            continue

        time += 1
        discovery[root] = low[root] = time
        root_children = 0
        stack: List[Tuple[int, Iterator[Tuple[int, int]]]] = [
            (root, iter(adjacency[root]))
        ]

        while stack:
            v, neighbors = stack[-1]
            for w, edge_id in neighbors:
                if edge_id == parent_edge[v]:
                    continue
                if not discovery[w]:
                    # Tree edge: suspend v and descend into w
                    parent_edge[w] = edge_id
                    time += 1
                    discovery[w] = low[w] = time
                    if v == root:
                        root_children += 1
                    if collect_components:
                        edge_stack.append((v, w))
                    stack.append((w, iter(adjacency[w])))
                    break
                if discovery[w] < discovery[v]:
                    # Back edge to an ancestor
                    if discovery[w] < low[v]:
                        low[v] = discovery[w]
                    if collect_components:
                        edge_stack.append((v, w))
            else:
                # All neighbors of v done: return to the parent frame
                stack.pop()
                if not stack:
                    continue
                u = stack[-1][0]
                if low[v] < low[u]:
                    low[u] = low[v]
                if low[v] >= discovery[u]:
                    if u != root:
                        result.articulation.add(u)
                    if collect_components:
                        component: List[IndexPair] = []
                        while True:
                            edge = edge_stack.pop()
                            component.append(edge)
                            if edge == (u, v):
                                break
                        result.components.append(component)
                if low[v] > discovery[u]:
                    result.bridges.append((u, v))

        if root_children > 1:
            result.articulation.add(root)

    return result


def articulation_points(graph: IndexedGraph) -> Set[NodeID]:
    """Return the articulation points (cut vertices) of ``graph``.

    A node is an articulation point if removing it increases the number of
    connected components. Edge direction is ignored.

    Args:
        graph: Graph satisfying :class:`~netalgo.graph.protocol.IndexedGraph`,
            or a NetworkX graph.

    Returns:
        Set of node identifiers; empty for an empty or biconnected graph.
    """
    graph = as_indexed_graph(graph)
    found = _low_link_search(_undirected_adjacency(graph), collect_components=False)
    logger.debug(
        "articulation_points: %d nodes, %d cut vertices",
        graph.node_count(),
        len(found.articulation),
    )
    return {graph.from_index(i) for i in found.articulation}


def cut_edges(graph: IndexedGraph) -> List[Tuple[NodeID, NodeID]]:
    """Return the cut edges (bridges) of ``graph``.

    An edge is a bridge if removing it increases the number of connected
    components. Each bridge is reported once, oriented from its DFS-tree
    parent to its child. Parallel edges between two nodes are never bridges.

    Args:
        graph: IndexedGraph or NetworkX graph.

    Returns:
        List of ``(u, v)`` node pairs in discovery order.
    """
    graph = as_indexed_graph(graph)
    found = _low_link_search(_undirected_adjacency(graph), collect_components=False)
    logger.debug(
        "cut_edges: %d nodes, %d bridges", graph.node_count(), len(found.bridges)
    )
    return [(graph.from_index(u), graph.from_index(v)) for u, v in found.bridges]


def biconnected_component_edges(
    graph: IndexedGraph,
) -> List[List[Tuple[NodeID, NodeID]]]:
    """Return the edges of each biconnected component.

    Every non-loop edge belongs to exactly one component. Parallel edges
    appear once per instance.

    Args:
        graph: IndexedGraph or NetworkX graph.

    Returns:
        One list of ``(u, v)`` node pairs per component, in completion order.
    """
    graph = as_indexed_graph(graph)
    found = _low_link_search(_undirected_adjacency(graph), collect_components=True)
    logger.debug(
        "biconnected_component_edges: %d nodes, %d components",
        graph.node_count(),
        len(found.components),
    )
    to_id = graph.from_index
    return [[(to_id(u), to_id(v)) for u, v in comp] for comp in found.components]


def biconnected_components(graph: IndexedGraph) -> List[Set[NodeID]]:
    """Return the node set of each biconnected component.

    Articulation points belong to every component they join. Isolated nodes
    (and nodes with only self-loops) belong to no component.

    Args:
        graph: IndexedGraph or NetworkX graph.

    Returns:
        One node set per component, in completion order.
    """
    components: List[Set[NodeID]] = []
    for edges in biconnected_component_edges(graph):
        nodes: Set[NodeID] = set()
        for u, v in edges:
            nodes.add(u)
            nodes.add(v)
        components.append(nodes)
    return components
