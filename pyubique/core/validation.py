"""
Input validation utilities for pyubique.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyubique.core.defaults import VALID_DIMS
from pyubique.core.exceptions import ArgumentError, FormatError, ShapeError


_ROW_TYPES = (list, tuple, np.ndarray)


def check_required(value: Any, name: str) -> None:
    """
    Verify a required argument was supplied.

    Args:
        value: Argument to check
        name: Parameter name for error messages

    Raises:
        ArgumentError: If value is None
    """
    if value is None:
        raise ArgumentError(f"{name}: not enough input arguments")


def check_dim(dim: Any, name: str = 'dim') -> int:
    """
    Verify a reduction dimension is 0 (rows) or 1 (columns).

    Returns:
        The dimension as a plain int

    Raises:
        ArgumentError: If dim is not 0 or 1
    """
    if isinstance(dim, bool) or not isinstance(dim, (int, np.integer)):
        raise ArgumentError(f"{name}: expected 0 or 1, got {dim!r}")
    if int(dim) not in VALID_DIMS:
        raise ArgumentError(f"{name}: expected 0 or 1, got {dim}")
    return int(dim)


def _is_row(element: Any) -> bool:
    # 0-d arrays are scalar elements, not rows
    if isinstance(element, np.ndarray):
        return element.ndim > 0
    return isinstance(element, _ROW_TYPES)


def check_rectangular(rows: list | tuple, name: str) -> None:
    """
    Verify a nested sequence describes a rectangular matrix.

    A flat sequence (no nested rows) passes trivially. A sequence mixing
    scalars and rows, or holding rows of unequal length, is rejected.

    Args:
        rows: Nested list/tuple to check
        name: Parameter name for error messages

    Raises:
        ShapeError: If the rows are ragged or mixed with scalars
    """
    nested = [_is_row(row) for row in rows]
    if not any(nested):
        return
    if not all(nested):
        raise ShapeError(f"{name}: mixes scalar elements with rows")

    lengths = [len(row) for row in rows]
    if len(set(lengths)) > 1:
        raise ShapeError(
            f"{name}: all rows must have the same length, got lengths {lengths}",
            expected=lengths[0],
            actual=max(set(lengths) - {lengths[0]}),
        )


def check_array(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Integers are promoted to float64. Boolean arrays keep their dtype so
    logical results survive a round trip through the kernel. Complex
    input is rejected: kernel results are real.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating or boolean dtype

    Raises:
        ShapeError: If the input is a ragged nested sequence
        FormatError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except ValueError as e:
        raise ShapeError(f"{name}: inhomogeneous shape: {e}") from e
    except TypeError as e:
        raise FormatError(
            f"{name}: cannot convert to array: {e}",
            value_type=type(array).__name__,
        ) from e

    if result.dtype == object:
        raise FormatError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data",
            value_type=type(array).__name__,
        )

    if result.dtype == np.bool_:
        return result

    if not np.issubdtype(result.dtype, np.number):
        raise FormatError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data",
            value_type=str(result.dtype),
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise FormatError(
            f"{name}: complex dtype {result.dtype}, expected real numeric data",
            value_type=str(result.dtype),
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        ShapeError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise ShapeError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_same_shape(
    shape_x: tuple[int, int],
    shape_y: tuple[int, int],
    names: tuple[str, str] = ('x', 'y'),
) -> None:
    """
    Verify two operand shapes agree exactly.

    Raises:
        ShapeError: If the shapes differ
    """
    if shape_x != shape_y:
        raise ShapeError(
            f"Inconsistent shapes: {names[0]}={shape_x}, {names[1]}={shape_y}",
            expected=shape_x,
            actual=shape_y,
        )


def check_square(array: NDArray[Any], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        ShapeError: If the array is not 2D or rows != columns
    """
    check_ndim(array, 2, name)
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise ShapeError(
            f"{name}: matrix must be square, got shape {array.shape}",
            expected=(n_rows, n_rows),
            actual=array.shape,
        )


def check_index(index: Any, upper: int, name: str) -> int:
    """
    Verify an index is an integer in the range [0, upper).

    Returns:
        The index as a plain int

    Raises:
        ShapeError: If index is not an integer or is out of bounds
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise ShapeError(
            f"{name}: index must be an integer between 0 and {upper - 1}, got {index!r}"
        )
    if not 0 <= index < upper:
        raise ShapeError(
            f"{name}: index must be an integer between 0 and {upper - 1}, got {index}",
            expected=upper,
            actual=int(index),
        )
    return int(index)
