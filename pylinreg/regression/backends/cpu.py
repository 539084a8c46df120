"""
CPU reference backend for simple linear regression.

Two passes over the data: one for the means, one for the centered sums
of squares and cross-products. Centering before multiplying keeps the
sums accurate when the data sit far from the origin.
"""

from typing import Any

import numpy as np

from pylinreg.core.result import Result
from pylinreg.core.compute.timing import Timer
from pylinreg.regression.design import RegressionDesign
from pylinreg.regression.solution import LinearParams


def coerce_non_finite(value: float) -> tuple[float, bool]:
    """
    Replace NaN and +/-Inf with 0.0.

    Returns:
        (value or 0.0, whether it was replaced)
    """
    if np.isfinite(value):
        return float(value), False
    return 0.0, True


class CPUTwoPassBackend:
    """
    CPU backend using the two-pass centered algorithm.

    Implements the Backend protocol for RegressionDesign -> LinearParams.

    Degenerate inputs (zero variance in x or y) make r, k or d NaN or
    infinite. Each such field is set to 0.0, recorded in
    LinearParams.coerced and Result.warnings. Emitting warnings is left
    to the caller (RegressionBuilder.finalize).
    """

    @property
    def name(self) -> str:
        return 'cpu_two_pass'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Compute slope, intercept and Pearson correlation.

        Algorithm:
            1. meanX, meanY
            2. Sxx, Syy, Sxy over centered values
            3. sx = sqrt(Sxx/(n-1)), sy = sqrt(Syy/(n-1)), sxy = Sxy/(n-1)
            4. r = sxy / (sx*sy)
            5. k = r * sy / sx
            6. d = meanY - k*meanX  (with k already coerced; undefined
               when sx is 0)

        Args:
            design: Validated regression design

        Returns:
            Result containing LinearParams
        """
        timer = Timer()
        timer.start()

        x = design.x
        y = design.y
        n = design.n

        with timer.section('mean_pass'):
            mean_x = float(np.mean(x))
            mean_y = float(np.mean(y))

        with timer.section('deviation_pass'):
            dx = x - mean_x
            dy = y - mean_y
            sum_xx = float(dx @ dx)
            sum_yy = float(dy @ dy)
            sum_xy = float(dx @ dy)

        with timer.section('parameters'), np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            sd_x = np.sqrt(np.float64(sum_xx) / (n - 1))
            sd_y = np.sqrt(np.float64(sum_yy) / (n - 1))
            covariance = np.float64(sum_xy) / (n - 1)

            coerced: list[str] = []
            r, was_coerced = coerce_non_finite(covariance / (sd_x * sd_y))
            if was_coerced:
                coerced.append('correlation')
            k, was_coerced = coerce_non_finite(r * sd_y / sd_x)
            if was_coerced:
                coerced.append('slope')
            # no spread in x: the line is vertical and has no intercept
            d_raw = np.float64(mean_y) - k * np.float64(mean_x) if sd_x > 0 else np.nan
            d, was_coerced = coerce_non_finite(d_raw)
            if was_coerced:
                coerced.append('intercept')

        timer.stop()

        messages = tuple(
            f"{name} is not finite (sd_x={float(sd_x)!r}, sd_y={float(sd_y)!r}); set to 0.0"
            for name in coerced
        )

        params = LinearParams(
            slope=k,
            intercept=d,
            correlation=r,
            mean_x=mean_x,
            mean_y=mean_y,
            sd_x=float(sd_x),
            sd_y=float(sd_y),
            covariance=float(covariance),
            n=n,
            coerced=tuple(coerced),
        )

        info: dict[str, Any] = {
            'method': 'two_pass',
            'n': n,
            'min_observations': design.min_observations,
            'strict': design.strict,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=messages,
        )
