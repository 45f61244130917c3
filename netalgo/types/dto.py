"""Immutable records exchanged between graphs and algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from netalgo.types.base import EdgeKey, NodeID


@dataclass(frozen=True)
class EdgeRef:
    """Reference to one edge as seen by the algorithms.

    For undirected graphs the same underlying edge may be reported with
    either orientation; ``source`` is always the endpoint it was reached from.

    Attributes:
        source: Source node identifier.
        target: Target node identifier.
        key: Parallel-edge key (``None`` for simple graphs).
        data: Edge attribute mapping owned by the graph (read-only by contract).
    """

    source: NodeID
    target: NodeID
    key: Optional[EdgeKey] = None
    data: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)
