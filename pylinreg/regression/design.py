"""
Regression Design.

Design is the immutable snapshot a fit is computed from: the observation
sequence, the x and y arrays extracted from it once, and the column
metadata captured during table ingestion. Building a Design is where the
fit preconditions are checked.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.validation import check_1d, check_array, check_min_samples, check_not_constant
from pylinreg.core.exceptions import DimensionError
from pylinreg.regression.observation import Observation

# Minimum observation counts for the two fit policies.
MIN_OBSERVATIONS_STRICT = 3
MIN_OBSERVATIONS_PERMISSIVE = 2


def min_observations(strict: bool) -> int:
    return MIN_OBSERVATIONS_STRICT if strict else MIN_OBSERVATIONS_PERMISSIVE


@dataclass(frozen=True)
class RegressionDesign:
    """
    Validated input of a simple linear regression.

    Immutable after construction; x and y are read-only arrays parallel
    to observations.

    Construction:
        RegressionDesign.build(observations)                 # from a builder
        RegressionDesign.from_arrays(x, y, strict=False)     # direct
    """
    _observations: tuple[Observation, ...]
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _strict: bool
    _column_name_x: str
    _column_name_y: str
    _column_names: tuple[str, ...]

    @classmethod
    def build(
        cls,
        observations: Iterable[Observation],
        *,
        strict: bool = True,
        column_name_x: str = 'x',
        column_name_y: str = 'y',
        column_names: tuple[str, ...] = (),
    ) -> RegressionDesign:
        """
        Snapshot observations and check the fit preconditions.

        Checks, in order:
            1. At least 3 observations (strict) or 2 (permissive)
            2. Strict only: x values are not all identical

        Raises:
            ValidationError: If a precondition fails
        """
        obs = tuple(observations)
        check_min_samples(len(obs), min_observations(strict), 'observations')

        x = np.fromiter((p.x for p in obs), dtype=np.float64, count=len(obs))
        y = np.fromiter((p.y for p in obs), dtype=np.float64, count=len(obs))
        if strict:
            check_not_constant(x, 'x')

        x.flags.writeable = False
        y.flags.writeable = False
        return cls(
            _observations=obs,
            _x=x,
            _y=y,
            _strict=strict,
            _column_name_x=column_name_x,
            _column_name_y=column_name_y,
            _column_names=tuple(column_names),
        )

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike, *, strict: bool = True) -> RegressionDesign:
        """Build Design directly from parallel x and y arrays."""
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        if x_arr.shape[0] != y_arr.shape[0]:
            raise DimensionError(
                f"Inconsistent lengths: x={x_arr.shape[0]}, y={y_arr.shape[0]}"
            )
        return cls.build(
            (Observation(float(a), float(b)) for a, b in zip(x_arr, y_arr)),
            strict=strict,
        )

    # === Properties ===

    @property
    def observations(self) -> tuple[Observation, ...]:
        return self._observations

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """x values, parallel to observations."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """y values, parallel to observations."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return len(self._observations)

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def min_observations(self) -> int:
        return min_observations(self._strict)

    @property
    def column_name_x(self) -> str:
        return self._column_name_x

    @property
    def column_name_y(self) -> str:
        return self._column_name_y

    @property
    def column_names(self) -> tuple[str, ...]:
        """Full header of the last ingested table; empty if none."""
        return self._column_names

    def __repr__(self) -> str:
        return f"RegressionDesign(n={self.n}, strict={self._strict})"
