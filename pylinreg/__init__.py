"""
PyLinReg: simple linear regression with validated, multi-source ingestion.

Observations are accumulated from points, flat value sequences and
comma-delimited tables, then fitted once with a numerically stable
two-pass algorithm.

Submodules:
    core: Exceptions, result envelope, validation, table reading
    regression: Observation, RegressionBuilder, fit functions
"""

__version__ = "0.1.0"

from pylinreg import core
from pylinreg import regression
from pylinreg.regression import (
    Observation,
    RegressionBuilder,
    RegressionSolution,
    fit,
    fit_flat,
    fit_table,
)

__all__ = [
    "__version__",
    "core",
    "regression",
    "Observation",
    "RegressionBuilder",
    "RegressionSolution",
    "fit",
    "fit_flat",
    "fit_table",
]
