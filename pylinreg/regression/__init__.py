"""
Simple linear regression.

Ordinary least squares for one predictor: slope, intercept and Pearson
correlation over (x, y) observations gathered from points, flat value
sequences, or comma-delimited tables.

Public API:
    RegressionBuilder   - accumulate from several sources, finalize() once
    fit(points)         - one-call fit from points
    fit_flat(values)    - one-call fit from alternating x, y values
    fit_table(source)   - one-call fit from a table

Example:
    >>> from pylinreg.regression import RegressionBuilder
    >>> result = RegressionBuilder().add(0, 1).add(1, 3).add(2, 5).finalize()
    >>> print(result.slope, result.intercept, result.correlation)
"""

from pylinreg.regression.observation import Observation
from pylinreg.regression.selectors import ByIndex, ByName, ColumnSelector
from pylinreg.regression.design import (
    RegressionDesign,
    MIN_OBSERVATIONS_STRICT,
    MIN_OBSERVATIONS_PERMISSIVE,
)
from pylinreg.regression.solution import LinearParams, RegressionSolution
from pylinreg.regression.builder import RegressionBuilder
from pylinreg.regression.solvers import fit, fit_flat, fit_table

__all__ = [
    "fit",
    "fit_flat",
    "fit_table",
    "RegressionBuilder",
    "Observation",
    "ByIndex",
    "ByName",
    "ColumnSelector",
    "RegressionDesign",
    "RegressionSolution",
    "LinearParams",
    "MIN_OBSERVATIONS_STRICT",
    "MIN_OBSERVATIONS_PERMISSIVE",
]
