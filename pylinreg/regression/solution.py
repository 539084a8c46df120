"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinreg.core.result import Result

if TYPE_CHECKING:
    from pylinreg.regression.design import RegressionDesign
    from pylinreg.regression.observation import Observation


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for simple linear regression.

    slope, intercept and correlation are always finite; any of them that
    came out NaN or infinite was replaced by 0.0 and named in `coerced`.
    """
    slope: float
    intercept: float
    correlation: float
    mean_x: float
    mean_y: float
    sd_x: float
    sd_y: float
    covariance: float
    n: int
    coerced: tuple[str, ...] = ()


@dataclass(frozen=True)
class RegressionSolution:
    """
    User-facing regression results.

    Wraps the backend Result together with the design it was computed
    from. Pure data: nothing is recomputed after construction.
    """
    _result: Result[LinearParams]
    _design: 'RegressionDesign'

    @property
    def slope(self) -> float:
        """Fitted rate of change of y with respect to x (k)."""
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        """Fitted y at x = 0 (d)."""
        return self._result.params.intercept

    @property
    def correlation(self) -> float:
        """Pearson correlation coefficient (r)."""
        return self._result.params.correlation

    @property
    def params(self) -> LinearParams:
        return self._result.params

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def observations(self) -> tuple['Observation', ...]:
        return self._design.observations

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._design.x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._design.y

    @property
    def column_name_x(self) -> str:
        return self._design.column_name_x

    @property
    def column_name_y(self) -> str:
        return self._design.column_name_y

    @property
    def column_names(self) -> tuple[str, ...]:
        return self._design.column_names

    @property
    def design(self) -> 'RegressionDesign':
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __repr__(self) -> str:
        return (
            f"RegressionSolution(n={self.n}, slope={self.slope:.6g}, "
            f"intercept={self.intercept:.6g}, correlation={self.correlation:.6g})"
        )
