"""Numeric capability of cost types used by the distance matrix.

A measure supplies the "no path yet" sentinel, the zero used for
self-distances, and an addition that reports overflow instead of wrapping.
Ordering is taken from the values themselves (``<``).

Example:
    >>> m = IntMeasure(bits=8)
    >>> m.max()
    127
    >>> m.overflowing_add(100, 100)
    (-56, True)
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Generic, Tuple, TypeVar

K = TypeVar("K")


class BoundedMeasure(ABC, Generic[K]):
    """Numeric capability required of a distance type ``K``."""

    @abstractmethod
    def max(self) -> K:
        """Return the sentinel meaning "unreachable"."""

    @abstractmethod
    def zero(self) -> K:
        """Return the distance of a node to itself."""

    @abstractmethod
    def overflowing_add(self, a: K, b: K) -> Tuple[K, bool]:
        """Add two distances.

        Returns:
            ``(result, overflowed)``. When ``overflowed`` is True the result
            must not be used as a distance.
        """

    def is_max(self, value: K) -> bool:
        """Return True if ``value`` is the unreachable sentinel."""
        return value == self.max()

    def validate(self, cost: K) -> None:
        """Reject an edge cost the measure cannot represent.

        Raises:
            ValueError: If ``cost`` is outside the measure's domain.
        """


class NumberMeasure(BoundedMeasure[float]):
    """Python ``int``/``float`` costs with ``math.inf`` as the sentinel.

    Integer inputs stay integers (zero is ``0``), so a graph with integer
    costs yields integer distances and ``math.inf`` for unreachable pairs.
    A sum that is not finite counts as overflow.
    """

    def max(self) -> float:
        return math.inf

    def zero(self) -> int:
        return 0

    def overflowing_add(self, a: float, b: float) -> Tuple[float, bool]:
        result = a + b
        return result, not math.isfinite(result)

    def is_max(self, value: float) -> bool:
        return value == math.inf

    def __repr__(self) -> str:
        return "NumberMeasure()"

    def __eq__(self, other: object) -> bool:
        return type(other) is NumberMeasure

    def __hash__(self) -> int:
        return hash(NumberMeasure)


class IntMeasure(BoundedMeasure[int]):
    """Fixed-width signed integer costs.

    Models a ``bits``-wide two's complement integer: the sentinel is the
    largest representable value and sums outside the range overflow. The
    wrapped value is returned alongside the overflow flag.
    Edge costs must themselves be integers inside the range.

    Args:
        bits: Integer width, at least 2.

    Raises:
        ValueError: If ``bits`` is below 2.
    """

    def __init__(self, bits: int = 64) -> None:
        if bits < 2:
            raise ValueError(f"IntMeasure needs at least 2 bits, got {bits}")
        self.bits = bits
        self._max = (1 << (bits - 1)) - 1
        self._min = -(1 << (bits - 1))

    def max(self) -> int:
        return self._max

    def min(self) -> int:
        """Return the smallest representable value."""
        return self._min

    def zero(self) -> int:
        return 0

    def overflowing_add(self, a: int, b: int) -> Tuple[int, bool]:
        result = a + b
        if self._min <= result <= self._max:
            return result, False
        span = 1 << self.bits
        wrapped = (result - self._min) % span + self._min
        return wrapped, True

    def is_max(self, value: int) -> bool:
        return value == self._max

    def validate(self, cost: int) -> None:
        if isinstance(cost, bool) or not isinstance(cost, int):
            raise ValueError(
                f"Edge cost {cost!r} is not an integer; {self!r} needs integer costs"
            )
        if not self._min <= cost <= self._max:
            raise ValueError(
                f"Edge cost {cost} is outside [{self._min}, {self._max}] for {self!r}"
            )

    def __repr__(self) -> str:
        return f"IntMeasure(bits={self.bits})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, IntMeasure) and other.bits == self.bits

    def __hash__(self) -> int:
        return hash((IntMeasure, self.bits))
