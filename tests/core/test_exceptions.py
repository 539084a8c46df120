"""
Tests for PyLinReg exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLinRegError)
    - Diagnostic attributes on ParseError, SourceReadError, BuilderStateError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pylinreg.core.exceptions import (
    BuilderStateError,
    DimensionError,
    InvariantError,
    ParseError,
    PyLinRegError,
    SourceReadError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLinRegError."""

    def test_validation_error_is_pylinreg_error(self):
        with pytest.raises(PyLinRegError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("odd length")

    def test_parse_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise ParseError("not a number")

    def test_source_read_error_is_not_validation_error(self):
        """I/O faults are not input validation failures."""
        err = SourceReadError("permission denied")
        assert isinstance(err, PyLinRegError)
        assert not isinstance(err, ValidationError)

    def test_builder_state_error_is_pylinreg_error(self):
        with pytest.raises(PyLinRegError):
            raise BuilderStateError("finalized", state="finalized")

    def test_invariant_error_is_not_validation_error(self):
        err = InvariantError("unreachable")
        assert isinstance(err, PyLinRegError)
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestParseError:

    def test_all_attributes(self):
        err = ParseError("line 3: bad", line_number=3, column="b", value="abc")
        assert str(err) == "line 3: bad"
        assert err.line_number == 3
        assert err.column == "b"
        assert err.value == "abc"

    def test_defaults_are_none(self):
        err = ParseError("bad")
        assert err.line_number is None
        assert err.column is None
        assert err.value is None


class TestSourceReadError:

    def test_path_attribute(self):
        err = SourceReadError("cannot read", path="/tmp/data.csv")
        assert err.path == "/tmp/data.csv"

    def test_path_defaults_to_none(self):
        assert SourceReadError("cannot read").path is None


class TestBuilderStateError:

    def test_state_attribute(self):
        with pytest.raises(BuilderStateError) as exc_info:
            raise BuilderStateError("add() after finalize()", state="finalized")
        assert exc_info.value.state == "finalized"
        assert "finalize" in str(exc_info.value)
