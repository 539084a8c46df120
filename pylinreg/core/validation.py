"""
Input validation utilities for PyLinReg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (mixed types) or in any
    other non-numeric dtype (strings, bytes, datetimes).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_even_length(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a flat sequence can be split into (x, y) pairs.

    Args:
        array: 1D array of alternating x and y values
        name: Parameter name for error messages

    Raises:
        DimensionError: If the array is empty or has odd length
    """
    n = array.shape[0]
    if n == 0:
        raise DimensionError(f"{name}: empty sequence, expected alternating x, y values")
    if n % 2 != 0:
        raise DimensionError(
            f"{name}: odd number of values ({n}), expected alternating x, y values"
        )


def check_min_samples(n: int, min_samples: int, name: str) -> None:
    """
    Verify there are at least the minimum number of observations.

    Raises:
        ValidationError: If n < min_samples
    """
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} observations, got {n}"
        )


def check_not_constant(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a column is not a single repeated value.

    A constant predictor leaves the slope undefined (vertical scatter).

    Raises:
        ValidationError: If every element equals the first one
    """
    if array.shape[0] > 0 and np.all(array == array[0]):
        raise ValidationError(
            f"{name}: all values are identical ({array[0]!r}), slope is undefined"
        )


def check_column_index(index: Any, width: int, name: str) -> int:
    """
    Verify a column index selects a column of a header of given width.

    Args:
        index: Zero-based column index
        width: Number of header columns
        name: Parameter name for error messages

    Returns:
        The index as int

    Raises:
        ValidationError: If index is not an integer or is negative
        DimensionError: If index >= width
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise ValidationError(f"{name}: expected integer column index, got {index!r}")
    if index < 0:
        raise ValidationError(f"{name}: column index must be non-negative, got {index}")
    if index >= width:
        raise DimensionError(
            f"{name}: column index {index} out of range for header with {width} columns"
        )
    return int(index)


def check_column_name(column: Any, name: str) -> str:
    """
    Verify a column name is a non-blank string.

    Raises:
        ValidationError: If column is not a string or is blank
    """
    if not isinstance(column, str):
        raise ValidationError(f"{name}: expected column name string, got {column!r}")
    if not column.strip():
        raise ValidationError(f"{name}: column name must not be blank, got {column!r}")
    return column
