"""
One-call entry points for regression.

Each function feeds a fresh RegressionBuilder from a single source and
finalizes it. Use the builder directly to combine sources.
"""

from typing import Iterable

from numpy.typing import ArrayLike

from pylinreg.core.datasource import DataSource, TableSource
from pylinreg.regression.backends import BackendChoice
from pylinreg.regression.builder import RegressionBuilder
from pylinreg.regression.observation import Observation
from pylinreg.regression.selectors import ColumnSelector
from pylinreg.regression.solution import RegressionSolution


def fit(
    points: Iterable[Observation | tuple[float, float]],
    *,
    strict: bool = True,
    backend: BackendChoice = 'auto',
) -> RegressionSolution:
    """
    Fit a line through a collection of points.

    Args:
        points: Observations or (x, y) pairs
        strict: Require 3 observations and non-constant x (default),
            or 2 observations with zero-coercion of degenerate fits
        backend: Computational backend

    Returns:
        RegressionSolution with slope, intercept and correlation

    Raises:
        ValidationError: If the points cannot support a fit

    Example:
        >>> from pylinreg.regression import fit
        >>> result = fit([(0, 1), (1, 3), (2, 5)])
        >>> result.slope, result.intercept
        (2.0, 1.0)
    """
    builder = RegressionBuilder(strict=strict, backend=backend).add_many(points)
    return builder._finalize(stacklevel=3)


def fit_flat(
    values: ArrayLike,
    *,
    strict: bool = True,
    backend: BackendChoice = 'auto',
) -> RegressionSolution:
    """
    Fit a line through alternating x, y values.

    Raises:
        DimensionError: If values is empty or has odd length
        ValidationError: If the points cannot support a fit
    """
    builder = RegressionBuilder(strict=strict, backend=backend).add_flat(values)
    return builder._finalize(stacklevel=3)


def fit_table(
    source: TableSource | DataSource,
    columns: ColumnSelector | tuple[int, int] | tuple[str, str] | None = None,
    *,
    strict: bool = True,
    backend: BackendChoice = 'auto',
) -> RegressionSolution:
    """
    Fit a line through two columns of a comma-delimited table.

    Args:
        source: Path (str or PathLike), open text handle, or DataSource
        columns: None (first two columns), (int, int), (str, str),
            ByIndex or ByName

    Returns:
        RegressionSolution carrying the table's column names

    Raises:
        ValidationError, DimensionError, ParseError, SourceReadError:
            see RegressionBuilder.add_table
    """
    builder = RegressionBuilder(strict=strict, backend=backend).add_table(source, columns)
    return builder._finalize(stacklevel=3)
