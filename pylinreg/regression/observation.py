"""
Observation: one (x, y) data point.

Observations are immutable values. Equality, hashing and ordering use
the IEEE 754 total order on each component (the order Java's
Double.compare and numpy's sort use): -0.0 sorts before 0.0 and NaN
sorts after every other value and equals itself. Points are ordered
lexicographically, x first.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from numbers import Real
from typing import Any, Iterator

from pylinreg.core.exceptions import ValidationError


def _total_order_key(value: float) -> tuple[int, float, float]:
    """Sort key placing NaN last and -0.0 before 0.0."""
    if math.isnan(value):
        return (1, 0.0, 0.0)
    return (0, value, math.copysign(1.0, value))


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name}: expected a real number, got {value!r}")
    return float(value)


@total_ordering
@dataclass(frozen=True, eq=False)
class Observation:
    """
    Immutable (x, y) pair.

    Attributes:
        x: Predictor value
        y: Response value

    Examples:
        >>> Observation(1, 2) < Observation(1, 3) < Observation(2, 0)
        True
        >>> x, y = Observation.of(0.5, 2)
        >>> str(Observation(0.5, 2))
        '(0.5, 2.0)'
    """
    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, 'x', _as_float(self.x, 'x'))
        object.__setattr__(self, 'y', _as_float(self.y, 'y'))

    @classmethod
    def of(cls, x: float, y: float) -> Observation:
        """Factory equivalent to Observation(x, y)."""
        return cls(x, y)

    def _key(self) -> tuple[tuple[int, float, float], tuple[int, float, float]]:
        return (_total_order_key(self.x), _total_order_key(self.y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Observation):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Observation):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x!r}, {self.y!r})"
