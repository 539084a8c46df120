"""
Regression backends.

Available backends:
    CPUTwoPassBackend: CPU reference implementation, two-pass centered sums
"""

from typing import Literal

from pylinreg.core.exceptions import ValidationError
from pylinreg.regression.backends.cpu import CPUTwoPassBackend, coerce_non_finite

# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_two_pass']


def get_backend(choice: BackendChoice) -> CPUTwoPassBackend:
    """
    Select and instantiate the backend for a fit.

    Raises:
        ValidationError: If the backend name is unknown
    """
    if choice in ('auto', 'cpu', 'cpu_two_pass'):
        return CPUTwoPassBackend()
    raise ValidationError(f"Unknown backend: {choice!r}")


__all__ = [
    "BackendChoice",
    "CPUTwoPassBackend",
    "coerce_non_finite",
    "get_backend",
]
