"""Base type aliases and enums shared by the algorithms."""

from __future__ import annotations

from enum import IntEnum
from typing import Hashable, Union

#: Caller-facing node identifier.
NodeID = Hashable

#: Key distinguishing parallel edges between the same pair of nodes.
EdgeKey = Hashable

#: Default numeric cost (e.g. distance, latency, etc.).
Cost = Union[int, float]


class ParallelEdgePolicy(IntEnum):
    """How parallel edges between one ordered node pair seed the distance matrix."""

    #: Keep the cheapest of the parallel edges.
    MIN = 1
    #: Keep whichever parallel edge is enumerated last.
    LAST = 2

    @classmethod
    def from_string(cls, value: str) -> "ParallelEdgePolicy":
        """Parse a string into a ParallelEdgePolicy enum value.

        Args:
            value: Case-insensitive member name (e.g., "min", "LAST").

        Returns:
            The corresponding ParallelEdgePolicy member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid parallel edge policy '{value}'. Valid values are: {valid}"
            ) from None
