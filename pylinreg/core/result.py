"""
Generic result container for PyLinReg computations.

The Result class is the envelope every backend returns. Timing, warnings
and provenance live here so the regression payload stays pure numbers.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, n, minimum)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a finalized fit can never change
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the software that produced a result."""
    from pylinreg import __version__

    return {
        'pylinreg_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for regression computations.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Fitted parameters
        info: Structured metadata (method, n, minimum observations)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library and interpreter versions

    Examples:
        >>> Result(
        ...     params=LinearParams(...),
        ...     info={'method': 'two_pass', 'n': 5},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_two_pass'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
