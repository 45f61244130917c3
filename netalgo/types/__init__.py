"""Shared typing constructs for netalgo.

Defines node and edge aliases, the edge reference record handed to cost
functions, and the parallel-edge policy enum. Contains no algorithm logic.
"""

from netalgo.types.base import Cost, EdgeKey, NodeID, ParallelEdgePolicy
from netalgo.types.dto import EdgeRef

__all__ = [
    # Enums
    "ParallelEdgePolicy",
    # Type aliases
    "Cost",
    "EdgeKey",
    "NodeID",
    # DTOs
    "EdgeRef",
]
