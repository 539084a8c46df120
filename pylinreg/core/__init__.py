"""
Core infrastructure for PyLinReg.

Shared abstractions used by the regression package.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    datasource: Delimited-table reader
    compute: Timing
"""

from pylinreg.core.protocols import Backend
from pylinreg.core.result import Result
from pylinreg.core.datasource import DataSource
from pylinreg.core.exceptions import (
    PyLinRegError,
    ValidationError,
    DimensionError,
    ParseError,
    SourceReadError,
    BuilderStateError,
    InvariantError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Data
    "DataSource",
    # Exceptions
    "PyLinRegError",
    "ValidationError",
    "DimensionError",
    "ParseError",
    "SourceReadError",
    "BuilderStateError",
    "InvariantError",
]
