"""
Column selectors for table ingestion.

A selector picks the x and y columns of a table, either by zero-based
index or by exact header name. Resolution always happens against the
header, before any data row is converted.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Any, Union

from pylinreg.core.exceptions import DimensionError, InvariantError, ValidationError
from pylinreg.core.validation import check_column_index, check_column_name


def _check_header(header: tuple[str, ...]) -> None:
    if len(header) < 2:
        raise DimensionError(
            f"header: need at least 2 columns to select x and y, got {len(header)}"
        )


@dataclass(frozen=True)
class ByIndex:
    """Select x and y by zero-based column index."""
    x: int
    y: int

    def resolve(self, header: tuple[str, ...]) -> tuple[int, int]:
        """
        Validate the indices against a header.

        Raises:
            ValidationError: Index negative or not an int, or indices equal
            DimensionError: Header too narrow or index out of range
        """
        _check_header(header)
        for label, index in (('x column', self.x), ('y column', self.y)):
            if not _is_index(index):
                raise ValidationError(f"{label}: expected integer column index, got {index!r}")
            if index < 0:
                raise ValidationError(f"{label}: column index must be non-negative, got {index}")
        if self.x == self.y:
            raise ValidationError(
                f"columns: x and y select the same column (x={self.x}, y={self.y})"
            )
        width = len(header)
        return (
            check_column_index(self.x, width, 'x column'),
            check_column_index(self.y, width, 'y column'),
        )


@dataclass(frozen=True)
class ByName:
    """Select x and y by exact, case-sensitive header name."""
    x: str
    y: str

    def resolve(self, header: tuple[str, ...]) -> tuple[int, int]:
        """
        Map the names to indices, first match in header order.

        Raises:
            ValidationError: Name blank, names equal, or name not in header
            DimensionError: Header too narrow
        """
        _check_header(header)
        check_column_name(self.x, 'x column')
        check_column_name(self.y, 'y column')
        if self.x == self.y:
            raise ValidationError(
                f"columns: x and y name the same column ({self.x!r})"
            )

        x_index = _find(header, self.x, 'x column')
        y_index = _find(header, self.y, 'y column')
        if x_index == y_index:
            raise InvariantError(
                f"distinct names {self.x!r} and {self.y!r} resolved to the same index {x_index}"
            )
        return x_index, y_index


ColumnSelector = Union[ByIndex, ByName]


def _find(header: tuple[str, ...], column: str, label: str) -> int:
    try:
        return header.index(column)
    except ValueError:
        raise ValidationError(
            f"{label}: {column!r} not found in header {list(header)}"
        ) from None


def _is_index(value: Any) -> bool:
    # numpy integers are Integral; bool is excluded
    return isinstance(value, Integral) and not isinstance(value, bool)


def coerce_selector(columns: Any) -> ColumnSelector:
    """
    Normalize user input into a ColumnSelector.

    Accepts None (first two columns), a ByIndex/ByName instance, or a
    pair of ints or a pair of strings.

    Raises:
        ValidationError: If columns has any other shape
    """
    if columns is None:
        return ByIndex(0, 1)
    if isinstance(columns, (ByIndex, ByName)):
        return columns
    if isinstance(columns, (tuple, list)) and len(columns) == 2:
        x, y = columns
        if isinstance(x, str) and isinstance(y, str):
            return ByName(x, y)
        if _is_index(x) and _is_index(y):
            return ByIndex(int(x), int(y))
    raise ValidationError(
        f"columns: expected None, ByIndex, ByName, or a pair of ints or strings, got {columns!r}"
    )
