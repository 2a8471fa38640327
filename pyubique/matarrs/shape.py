"""
Size and orientation queries.

Sizes follow the row-major convention of core.Operand: a scalar is 1x1,
a vector of length N is 1xN, a matrix is RxC.
"""

from __future__ import annotations

from typing import Any

from pyubique.core.exceptions import FormatError, ShapeError
from pyubique.core.operand import Operand


def size(x: Any) -> tuple[int, int]:
    """
    (rows, cols) of x.

        size(5)                       # (1, 1)
        size([5, 6, 7])               # (1, 3)
        size([[3, 2, 7], [4, 5, 6]])  # (2, 3)
    """
    return Operand.from_value(x, 'x').shape


def _array_shape(x: Any) -> tuple[int, int]:
    op = Operand.from_value(x, 'x')
    if op.is_scalar:
        raise FormatError("x: input must be an array or matrix", value_type=type(x).__name__)
    return op.shape


def nrows(x: Any) -> int:
    """Number of rows. A vector has one row."""
    return _array_shape(x)[0]


def ncols(x: Any) -> int:
    """
    Number of columns.

        ncols([5, 6, 7])   # 3
        ncols([[]])        # 0
    """
    return _array_shape(x)[1]


def numel(x: Any) -> int:
    """Total number of elements."""
    rows, cols = size(x)
    return rows * cols


def _non_empty_matrix(x: Any) -> Operand:
    op = Operand.from_value(x, 'x')
    if not op.is_matrix or op.is_empty:
        raise ShapeError("x: input must be a non-empty matrix", actual=op.shape)
    return op


def iscolumn(x: Any) -> bool:
    """
    True for a matrix with exactly one column.

        iscolumn([[2], [2]])   # True
        iscolumn([[2, 2]])     # False

    Raises
    ------
    ShapeError
        If x is not a non-empty matrix.
    """
    return _non_empty_matrix(x).shape[1] == 1


def isrow(x: Any) -> bool:
    """True for a vector or a matrix with exactly one row."""
    op = Operand.from_value(x, 'x')
    return not op.is_scalar and op.shape[0] == 1


def issquare(x: Any) -> bool:
    """True for a matrix with as many rows as columns."""
    op = Operand.from_value(x, 'x')
    rows, cols = op.shape
    return op.is_matrix and rows == cols
