"""All-pairs shortest paths (Floyd-Warshall).

Builds a dense ``V x V`` distance matrix over the graph's node index, relaxes
it through every intermediate node, and rejects graphs with negative cycles.
The path-tracking variant also keeps a predecessor matrix and reconstructs
concrete paths for requested ``(source, target)`` pairs.

Notes:
    Time is O(V^3) and memory O(V^2) (doubled when paths are tracked), so
    this is meant for graphs of at most a few thousand nodes. Use
    per-source Dijkstra/Bellman-Ford for anything larger or sparse.

    Equal-cost alternatives never replace an already known path: updates
    require a strictly smaller candidate, so the reconstructed path is the
    first one found in ``k``-major order.

Example:
    >>> import networkx as nx
    >>> from netalgo.algorithms.floyd_warshall import floyd_warshall_path
    >>> G = nx.DiGraph()
    >>> G.add_edge("a", "b", cost=1)
    >>> G.add_edge("b", "c", cost=2)
    >>> G.add_edge("a", "c", cost=4)
    >>> dist, paths = floyd_warshall_path(G, [("a", "c")])
    >>> dist[("a", "c")]
    3
    >>> paths[("a", "c")]
    [('a', 'b'), ('b', 'c')]
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Tuple

import networkx as nx
import numpy as np

from netalgo.algorithms.measure import BoundedMeasure, NumberMeasure
from netalgo.config import APSP_CONFIG, AllPairsConfig
from netalgo.graph.nx import as_indexed_graph
from netalgo.graph.protocol import IndexedGraph
from netalgo.logging import get_logger
from netalgo.types.base import Cost, NodeID, ParallelEdgePolicy
from netalgo.types.dto import EdgeRef

logger = get_logger(__name__)

NodePair = Tuple[NodeID, NodeID]
EdgeCostFunc = Callable[[EdgeRef], Cost]
DistanceMap = Dict[NodePair, Cost]
PathMap = Dict[NodePair, List[NodePair]]

# Matrices are row-major lists indexed by dense node index
DistMatrix = List[List[Cost]]
PrevMatrix = List[List[Optional[int]]]


class NegativeCycleError(nx.NetworkXUnbounded):
    """Raised when the graph contains a cycle of strictly negative total cost.

    Carries no information about where the cycle is.
    """


def edge_attr_cost(attr: str = "cost", default: Cost = 1) -> EdgeCostFunc:
    """Return an edge cost function reading ``attr`` from the edge data.

    Args:
        attr: Edge attribute holding the cost.
        default: Cost for edges without the attribute.

    Returns:
        Callable mapping an EdgeRef to its cost.
    """

    def cost(edge: EdgeRef) -> Cost:
        return edge.data.get(attr, default)

    return cost


def _init_matrices(
    graph: IndexedGraph,
    edge_cost: EdgeCostFunc,
    measure: BoundedMeasure,
    policy: ParallelEdgePolicy,
    track_paths: bool,
) -> Tuple[DistMatrix, Optional[PrevMatrix]]:
    """Seed distances with direct edges and zero self-distances.

    An edge whose cost is the measure's sentinel does not create a path.
    Every cost is checked with ``measure.validate`` before it is stored, so
    the outcome never depends on the parallel-edge policy.
    Self-loops with negative cost are kept on the diagonal so that they are
    reported as negative cycles.
    """
    n = graph.node_count()
    inf = measure.max()
    dist: DistMatrix = [[inf] * n for _ in range(n)]
    prev: Optional[PrevMatrix] = [[None] * n for _ in range(n)] if track_paths else None
    mirror = not graph.is_directed()
    keep_min = policy == ParallelEdgePolicy.MIN

    def seed(s: int, t: int, cost: Cost) -> None:
        if keep_min and not cost < dist[s][t]:
            return
        dist[s][t] = cost
        if prev is not None:
            prev[s][t] = None if cost == inf else s

    for edge in graph.edge_references():
        s = graph.to_index(edge.source)
        t = graph.to_index(edge.target)
        cost = edge_cost(edge)
        measure.validate(cost)
        seed(s, t, cost)
        if mirror and s != t:
            seed(t, s, cost)

    zero = measure.zero()
    for node in graph.node_identifiers():
        i = graph.to_index(node)
        if not dist[i][i] < zero:
            dist[i][i] = zero
        if prev is not None:
            prev[i][i] = i

    return dist, prev


def _relax(dist: DistMatrix, prev: Optional[PrevMatrix], measure: BoundedMeasure) -> None:
    """Relax ``dist`` (and ``prev``) in place through every intermediate node."""
    n = len(dist)
    inf = measure.max()
    add = measure.overflowing_add

    # k must stay the outermost loop
    for k in range(n):
        dist_k = dist[k]
        prev_k = prev[k] if prev is not None else None
        for i in range(n):
            dist_i = dist[i]
            d_ik = dist_i[k]
            if d_ik == inf:
                continue
            prev_i = prev[i] if prev is not None else None
            for j in range(n):
                d_kj = dist_k[j]
                if d_kj == inf:
                    continue
                candidate, overflow = add(d_ik, d_kj)
                if not overflow and candidate < dist_i[j]:
                    dist_i[j] = candidate
                    if prev_i is not None:
                        # Predecessor of j on the path through k, not k itself
                        prev_i[j] = prev_k[j]  # type: ignore[index]


def _relax_vectorized(
    dist: DistMatrix, prev: Optional[PrevMatrix]
) -> Tuple[DistMatrix, Optional[PrevMatrix]]:
    """Relax a NumberMeasure matrix with numpy, one ``k`` plane at a time.

    Row and column ``k`` cannot change during step ``k`` unless ``dist[k][k]``
    is negative, so updating the whole plane at once selects the same
    predecessors as the scalar loop on graphs without negative cycles.
    Non-finite sums are never smaller than a stored distance, which covers
    the overflow rule.
    """
    d = np.array(dist, dtype=np.float64)
    p = None
    if prev is not None:
        p = np.array(
            [[-1 if x is None else x for x in row] for row in prev], dtype=np.int64
        )

    for k in range(d.shape[0]):
        candidate = d[:, k, np.newaxis] + d[np.newaxis, k, :]
        improved = candidate < d
        if not improved.any():
            continue
        d = np.where(improved, candidate, d)
        if p is not None:
            p = np.where(improved, p[np.newaxis, k, :], p)

    out_prev: Optional[PrevMatrix] = None
    if p is not None:
        out_prev = [[None if x < 0 else x for x in row] for row in p.tolist()]
    return d.tolist(), out_prev


def _has_negative_cycle(dist: DistMatrix, measure: BoundedMeasure) -> bool:
    zero = measure.zero()
    return any(dist[i][i] < zero for i in range(len(dist)))


def _distance_map(graph: IndexedGraph, dist: DistMatrix) -> DistanceMap:
    ids = [graph.from_index(i) for i in range(len(dist))]
    return {
        (ids[i], ids[j]): value
        for i, row in enumerate(dist)
        for j, value in enumerate(row)
    }


def _path_from_tree(
    graph: IndexedGraph, prev: PrevMatrix, source: NodeID, target: NodeID
) -> List[NodePair]:
    """Walk ``prev`` back from ``target`` to ``source``.

    Returns:
        Node pairs ``(u, v)`` from source to target; empty when the pair is
        unreachable or ``source == target``.
    """
    u = graph.to_index(source)
    v = graph.to_index(target)
    if prev[u][v] is None:
        return []

    path: List[NodePair] = []
    while v != u:
        p = prev[u][v]
        path.append((graph.from_index(p), graph.from_index(v)))  # type: ignore[arg-type]
        v = p  # type: ignore[assignment]
    path.reverse()
    return path


def _solve(
    graph: IndexedGraph,
    edge_cost: Optional[EdgeCostFunc],
    measure: Optional[BoundedMeasure],
    parallel_edges: Optional[ParallelEdgePolicy],
    config: Optional[AllPairsConfig],
    track_paths: bool,
) -> Tuple[DistMatrix, Optional[PrevMatrix]]:
    """Shared driver: initialize, relax, and check for negative cycles."""
    cfg = config or APSP_CONFIG
    if edge_cost is None:
        edge_cost = edge_attr_cost()
    if measure is None:
        measure = NumberMeasure()
    policy = parallel_edges if parallel_edges is not None else cfg.parallel_edges

    n = graph.node_count()
    if n > cfg.warn_node_count:
        logger.warning(
            "All-pairs shortest paths on %d nodes allocates %d matrix cells "
            "and takes O(V^3) time",
            n,
            n * n * (2 if track_paths else 1),
        )

    dist, prev = _init_matrices(graph, edge_cost, measure, policy, track_paths)

    vectorized = isinstance(measure, NumberMeasure) and cfg.uses_vectorized(n)
    logger.debug(
        "Floyd-Warshall: %d nodes, paths=%s, policy=%s, vectorized=%s",
        n,
        track_paths,
        policy.name,
        vectorized,
    )
    if vectorized:
        dist, prev = _relax_vectorized(dist, prev)
    else:
        _relax(dist, prev, measure)

    if _has_negative_cycle(dist, measure):
        logger.debug("Negative cycle detected on the distance matrix diagonal")
        raise NegativeCycleError("Negative cycle detected.")

    return dist, prev


def floyd_warshall(
    graph: IndexedGraph,
    edge_cost: Optional[EdgeCostFunc] = None,
    *,
    measure: Optional[BoundedMeasure] = None,
    parallel_edges: Optional[ParallelEdgePolicy] = None,
    config: Optional[AllPairsConfig] = None,
) -> DistanceMap:
    """Compute shortest-path distances between every ordered pair of nodes.

    Edge costs may be negative as long as no cycle has negative total cost.
    For undirected graphs each edge is usable in both directions.

    Args:
        graph: IndexedGraph or NetworkX graph.
        edge_cost: Maps an EdgeRef to its cost. Defaults to the ``cost``
            edge attribute, 1 when missing.
        measure: Numeric capability of the cost type. Defaults to
            NumberMeasure (``math.inf`` for unreachable pairs).
        parallel_edges: Which parallel edge seeds the matrix. Defaults to
            ``config.parallel_edges``.
        config: Overrides the global APSP_CONFIG.

    Returns:
        Mapping ``(source, target) -> distance`` covering all ``V * V`` pairs.
        Unreachable pairs map to ``measure.max()``.

    Raises:
        NegativeCycleError: If any cycle has negative total cost.
        ValueError: If an edge cost is rejected by ``measure.validate``.
    """
    graph = as_indexed_graph(graph)
    dist, _ = _solve(graph, edge_cost, measure, parallel_edges, config, False)
    return _distance_map(graph, dist)


def floyd_warshall_path(
    graph: IndexedGraph,
    required_paths: Optional[Iterable[NodePair]] = None,
    edge_cost: Optional[EdgeCostFunc] = None,
    *,
    measure: Optional[BoundedMeasure] = None,
    parallel_edges: Optional[ParallelEdgePolicy] = None,
    config: Optional[AllPairsConfig] = None,
) -> Tuple[DistanceMap, PathMap]:
    """Compute all-pairs distances and shortest paths for selected pairs.

    Args:
        graph: IndexedGraph or NetworkX graph.
        required_paths: ``(source, target)`` pairs to reconstruct paths for.
        edge_cost: Maps an EdgeRef to its cost (see :func:`floyd_warshall`).
        measure: Numeric capability of the cost type.
        parallel_edges: Which parallel edge seeds the matrix.
        config: Overrides the global APSP_CONFIG.

    Returns:
        ``(distances, paths)`` where ``paths`` maps each requested pair to a
        list of ``(u, v)`` hops from source to target. The list is empty
        when the target is unreachable or equal to the source.

    Raises:
        NegativeCycleError: If any cycle has negative total cost.
        ValueError: If an edge cost is rejected by ``measure.validate``.
        KeyError: If a requested pair names a node not in the graph.
    """
    graph = as_indexed_graph(graph)
    requested = list(required_paths or [])
    for source, target in requested:
        graph.to_index(source)
        graph.to_index(target)

    dist, prev = _solve(graph, edge_cost, measure, parallel_edges, config, True)
    assert prev is not None

    paths: PathMap = {}
    for source, target in requested:
        paths[(source, target)] = _path_from_tree(graph, prev, source, target)
    return _distance_map(graph, dist), paths
