"""
RegressionBuilder: the mutable accumulator in front of a fit.

Observations are collected from any mix of sources, then finalize()
snapshots them into a RegressionDesign and computes the fit exactly once.

Example:
    >>> from pylinreg.regression import RegressionBuilder, Observation
    >>> solution = (
    ...     RegressionBuilder()
    ...     .add(Observation(23, 45))
    ...     .add(0.33, 0.982)
    ...     .add_flat([1, 2, 3, 4])
    ...     .add_table("measurements.csv", columns=("time", "temp"))
    ...     .finalize()
    ... )

A builder is single-writer; callers sharing one across threads must
serialize the mutators themselves.
"""

from __future__ import annotations

import warnings
from typing import Any, Iterable, Literal

from numpy.typing import ArrayLike

from pylinreg.core.datasource import DataSource, TableSource, read_table_text
from pylinreg.core.exceptions import BuilderStateError, ValidationError
from pylinreg.core.validation import check_1d, check_array, check_even_length
from pylinreg.regression.backends import BackendChoice, get_backend
from pylinreg.regression.design import RegressionDesign
from pylinreg.regression.observation import Observation
from pylinreg.regression.selectors import ColumnSelector, coerce_selector
from pylinreg.regression.solution import RegressionSolution

BuilderState = Literal['open', 'finalized']


class RegressionBuilder:
    """
    Accumulates observations until finalize().

    Every mutator returns the builder so calls can be chained. After
    finalize() the builder is consumed: further mutators and a second
    finalize() raise BuilderStateError.

    Args:
        strict: If True (default) a fit needs at least 3 observations and
            x values that are not all identical. If False, 2 observations
            suffice and degenerate statistics are set to 0.0.
        backend: Computational backend ('auto', 'cpu' or 'cpu_two_pass').

    Raises:
        ValidationError: If the backend name is unknown
    """

    def __init__(self, *, strict: bool = True, backend: BackendChoice = 'auto'):
        self._strict = strict
        self._backend = get_backend(backend)
        self._observations: list[Observation] = []
        self._column_name_x = 'x'
        self._column_name_y = 'y'
        self._column_names: tuple[str, ...] = ()
        self._state: BuilderState = 'open'

    # === Mutators ===

    def add(self, point: Observation | float, y: float | None = None) -> RegressionBuilder:
        """
        Append one observation.

        Call as add(Observation(x, y)) or add(x, y).
        """
        self._check_open('add')
        if y is None:
            if not isinstance(point, Observation):
                raise ValidationError(
                    f"point: expected an Observation or add(x, y), got {point!r}"
                )
            self._observations.append(point)
        else:
            self._observations.append(Observation(point, y))
        return self

    def add_many(self, points: Iterable[Observation | tuple[float, float]]) -> RegressionBuilder:
        """
        Append observations in iteration order.

        Elements may be Observations or (x, y) pairs. All elements are
        converted before any is appended.
        """
        self._check_open('add_many')
        self._observations.extend([_as_observation(p, i) for i, p in enumerate(points)])
        return self

    def add_flat(self, values: ArrayLike) -> RegressionBuilder:
        """
        Append observations from alternating x, y values.

        Raises:
            DimensionError: If values is empty or has odd length
        """
        self._check_open('add_flat')
        flat = check_array(values, 'values')
        check_1d(flat, 'values')
        check_even_length(flat, 'values')
        self._observations.extend(
            Observation(float(x), float(y)) for x, y in flat.reshape(-1, 2)
        )
        return self

    def add_table(
        self,
        source: TableSource | DataSource,
        columns: ColumnSelector | tuple[int, int] | tuple[str, str] | None = None,
    ) -> RegressionBuilder:
        """
        Append observations from a comma-delimited table.

        The first non-blank line is the header. The selected columns are resolved
        against it before any data row is converted; every data row then
        contributes one observation, in file order. Ingestion is atomic:
        on error the builder is left unchanged.

        Args:
            source: Path (str or PathLike), open text handle, or DataSource
            columns: None for the first two columns, (int, int) indices,
                (str, str) header names, or a ByIndex/ByName selector

        Raises:
            ValidationError: Missing file, bad or unresolvable selector
            DimensionError: Index out of range, header narrower than 2
            ParseError: A selected field is missing or not a number
            SourceReadError: The source could not be read
        """
        self._check_open('add_table')
        selector = coerce_selector(columns)
        if isinstance(source, DataSource):
            table = source
            x_index, y_index = selector.resolve(table.column_names)
        else:
            text = read_table_text(source)
            x_index, y_index = selector.resolve(text.header)
            table = DataSource.from_text(text)
        x, y = table.read_pairs(x_index, y_index)

        self._observations.extend(Observation(float(a), float(b)) for a, b in zip(x, y))
        self._column_names = table.column_names
        self._column_name_x = table.column_names[x_index]
        self._column_name_y = table.column_names[y_index]
        return self

    # === Finalization ===

    def finalize(self) -> RegressionSolution:
        """
        Validate the accumulated observations and fit once.

        The builder hands its observations over to the solution and moves
        to the finalized state.

        Raises:
            ValidationError: Too few observations, or (strict) constant x
            BuilderStateError: If already finalized

        Warns:
            RuntimeWarning: Once per fitted value set to 0.0
        """
        return self._finalize(stacklevel=3)

    def _finalize(self, *, stacklevel: int) -> RegressionSolution:
        # stacklevel counts from here to the caller's frame
        self._check_open('finalize')
        design = RegressionDesign.build(
            self._observations,
            strict=self._strict,
            column_name_x=self._column_name_x,
            column_name_y=self._column_name_y,
            column_names=self._column_names,
        )
        result = self._backend.solve(design)
        for message in result.warnings:
            warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)

        self._state = 'finalized'
        self._observations = []
        return RegressionSolution(_result=result, _design=design)

    # === Properties ===

    @property
    def observations(self) -> tuple[Observation, ...]:
        """Snapshot of the accumulated observations."""
        return tuple(self._observations)

    @property
    def column_name_x(self) -> str:
        return self._column_name_x

    @property
    def column_name_y(self) -> str:
        return self._column_name_y

    @property
    def column_names(self) -> tuple[str, ...]:
        return self._column_names

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def is_finalized(self) -> bool:
        return self._state == 'finalized'

    def __len__(self) -> int:
        return len(self._observations)

    def __repr__(self) -> str:
        return (
            f"RegressionBuilder(n={len(self._observations)}, "
            f"strict={self._strict}, state={self._state!r})"
        )

    def _check_open(self, operation: str) -> None:
        if self._state != 'open':
            raise BuilderStateError(
                f"{operation}() called on a finalized RegressionBuilder", state=self._state
            )


def _as_observation(point: Any, position: int) -> Observation:
    if isinstance(point, Observation):
        return point
    try:
        x, y = point
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"points[{position}]: expected an Observation or (x, y) pair, got {point!r}"
        ) from e
    return Observation(x, y)
