"""Configuration classes for netalgo components."""

from dataclasses import dataclass
from typing import Optional

from netalgo.types.base import ParallelEdgePolicy


@dataclass
class AllPairsConfig:
    """Configuration for all-pairs shortest path computation."""

    # Which parallel edge seeds the distance matrix
    parallel_edges: ParallelEdgePolicy = ParallelEdgePolicy.MIN

    # Node count at which numpy relaxation is used for NumberMeasure costs.
    # None disables the vectorized path.
    vectorize_min_nodes: Optional[int] = None

    # Node count above which a warning about O(V^2) memory is logged
    warn_node_count: int = 2000

    def uses_vectorized(self, node_count: int) -> bool:
        """Return True when a graph of ``node_count`` nodes should use numpy."""
        if self.vectorize_min_nodes is None:
            return False
        return node_count >= self.vectorize_min_nodes


# Global configuration instance
APSP_CONFIG = AllPairsConfig()
