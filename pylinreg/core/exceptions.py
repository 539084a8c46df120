"""
Exception hierarchy for PyLinReg.

All exceptions inherit from PyLinRegError to allow catching any
library-specific error. Ingestion and fitting errors inherit from the
appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinRegError(Exception):
    """Base exception for all PyLinReg errors."""
    pass


class ValidationError(PyLinRegError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: too few
    observations, unresolvable columns, missing files and the like.
    """
    pass


class DimensionError(ValidationError):
    """
    Input has the wrong length or width.

    Raised for flat numeric sequences that cannot be paired, column
    indices outside the header, and headers narrower than two columns.
    """
    pass


class ParseError(ValidationError):
    """
    A selected field of a data row is not a valid number.

    Attributes:
        line_number: 1-based line number in the source (header is line 1)
        column: Name of the column holding the bad field
        value: The offending text, or None if the field was missing
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        column: str | None = None,
        value: str | None = None,
    ):
        super().__init__(message)
        self.line_number = line_number
        self.column = column
        self.value = value


class SourceReadError(PyLinRegError):
    """
    The table source exists but could not be opened or read.

    Always chained to the underlying OSError.

    Attributes:
        path: The path that failed, or None for an open handle
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class BuilderStateError(PyLinRegError):
    """
    Operation is not allowed in the builder's current state.

    Attributes:
        state: The state the builder was in ('open' or 'finalized')
    """

    def __init__(self, message: str, state: str):
        super().__init__(message)
        self.state = state


class InvariantError(PyLinRegError):
    """
    An internal invariant was violated.

    Signals a defect in PyLinReg, not a recoverable input problem.
    """
    pass
