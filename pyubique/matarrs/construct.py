"""
Matrix construction and rearrangement.

All functions return new arrays; inputs are never modified in place.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyubique.core.defaults import (
    DEFAULT_LINSPACE_POINTS, DEFAULT_LOGSPACE_POINTS, DIM_ROWS,
)
from pyubique.core.exceptions import ArgumentError, FormatError, ShapeError
from pyubique.core.operand import Operand
from pyubique.core.validation import check_dim, check_index, check_required


def tomat(x: Any) -> NDArray:
    """
    Promote a scalar or vector to a matrix.

        tomat(5)           # [[5]]
        tomat([5, 6, 3])   # [[5, 6, 3]]
        tomat([[1, 2]])    # [[1, 2]]
    """
    op = Operand.from_value(x, 'x')
    return op.data.reshape(op.shape).copy()


def transpose(x: Any) -> Any:
    """Transpose. Scalars are returned unchanged; a vector becomes a column."""
    op = Operand.from_value(x, 'x')
    if op.is_scalar:
        return x
    return tomat(op).T.copy()


def flatten(x: Any, dim: int = DIM_ROWS) -> Any:
    """
    Flatten a matrix into a vector.

    Parameters
    ----------
    x : scalar, vector or matrix
        Scalars and vectors are returned unchanged.
    dim : int
        0 (default) concatenates rows, 1 concatenates columns.

        flatten([[1, 1, -1], [1, -2, 3], [2, 3, 1]], dim=1)
        # [1, 1, 2, 1, -2, 3, -1, 3, 1]
    """
    dim = check_dim(dim)
    op = Operand.from_value(x, 'x')
    if not op.is_matrix:
        return x
    return op.data.flatten(order='C' if dim == DIM_ROWS else 'F')


def flipud(x: Any) -> Any:
    """
    Reverse the order of the rows. Scalars are returned unchanged.

    Raises
    ------
    ShapeError
        If x is a vector, which has no rows to reorder.
    """
    op = Operand.from_value(x, 'x')
    if op.is_scalar:
        return x
    if op.is_vector:
        raise ShapeError("x: flipud requires a matrix, got a vector", actual=op.shape)
    return op.data[::-1].copy()


def fliplr(x: Any) -> Any:
    """Reverse the order of the columns. Scalars are returned unchanged."""
    op = Operand.from_value(x, 'x')
    if op.is_scalar:
        return x
    return op.data[..., ::-1].copy()


def cat(dim: int, *args: Any) -> NDArray:
    """
    Concatenate scalars, vectors and matrices.

    Parameters
    ----------
    dim : int
        0 stacks vertically (column counts must agree), 1 horizontally
        (row counts must agree).
    *args
        Operands; scalars are 1x1 and vectors 1xN.

    Raises
    ------
    ArgumentError
        If no operands are given.
    ShapeError
        If the operands cannot be joined along dim.
    """
    dim = check_dim(dim)
    if not args:
        raise ArgumentError("cat: not enough input arguments")

    blocks = [tomat(arg) for arg in args]
    # the axis that is not concatenated must agree
    keep = 1 if dim == DIM_ROWS else 0
    extents = [block.shape[keep] for block in blocks]
    if len(set(extents)) > 1:
        label = 'columns' if keep == 1 else 'rows'
        raise ShapeError(
            f"cat: operands have different numbers of {label}: {extents}",
            expected=extents[0],
            actual=max(set(extents) - {extents[0]}),
        )

    return np.concatenate(blocks, axis=dim)


def horzcat(*args: Any) -> NDArray:
    """
    Concatenate horizontally.

        horzcat(5, 6, 7)                                    # [[5, 6, 7]]
        horzcat([[5, 6, 5], [7, 8, -1]], [[-1], [4]])       # [[5, 6, 5, -1], [7, 8, -1, 4]]
    """
    return cat(1, *args)


def vertcat(*args: Any) -> NDArray:
    """Concatenate vertically."""
    return cat(0, *args)


def getcol(x: Any, n: int) -> NDArray:
    """Column n (0-based) of x as a vector."""
    data = tomat(x)
    index = check_index(n, data.shape[1], 'n')
    return data[:, index].copy()


def setcol(col: Any, x: Any, n: int) -> NDArray:
    """
    Replace column n (0-based) of matrix x with col.

        setcol([2, 0], [[5, 6, 5], [7, 8, -1]], 0)   # [[2, 6, 5], [0, 8, -1]]

    Raises
    ------
    ShapeError
        If x is not a matrix, col is not a vector, n is out of range, or
        col does not have one element per row of x.
    """
    mat = Operand.from_value(x, 'x')
    if not mat.is_matrix:
        raise ShapeError("x: input matrix must be a 2D array", actual=mat.shape)

    column = Operand.from_value(col, 'col')
    if not column.is_vector:
        raise ShapeError("col: column vector must be a 1D array", actual=column.shape)

    n_rows, n_cols = mat.shape
    index = check_index(n, n_cols, 'n')

    if column.shape[1] != n_rows:
        raise ShapeError(
            f"col: length {column.shape[1]} must match the number of matrix rows {n_rows}",
            expected=n_rows,
            actual=column.shape[1],
        )

    result = np.array(mat.data, dtype=np.result_type(mat.data, column.data))
    result[:, index] = column.data
    return result


def sub2ind(size: Any, index: Any) -> int | NDArray:
    """
    Convert [row, col] subscripts to column-major linear indices.

    Parameters
    ----------
    size : (rows, cols)
    index : [row, col] or a list of [row, col] pairs (0-based)

    Returns
    -------
    int for a single pair, integer array for several.

        sub2ind([2, 3], [1, 2])                     # 5
        sub2ind([2, 3], [[0, 0], [1, 0], [0, 1]])   # [0, 1, 2]
    """
    check_required(size, 'size')
    check_required(index, 'index')

    dims = Operand.from_value(size, 'size')
    if not dims.is_vector or dims.shape[1] != 2:
        raise ShapeError("size: expected [rows, cols]", expected=2, actual=dims.shape[1])

    subs = tomat(index)
    if subs.shape[1] != 2:
        raise ShapeError(
            f"index: expected [row, col] pairs, got {subs.shape[1]} columns",
            expected=2,
            actual=subs.shape[1],
        )

    n_rows = int(dims.data[0])
    linear = subs[:, 0].astype(np.int64) + subs[:, 1].astype(np.int64) * n_rows
    if linear.shape[0] == 1:
        return int(linear[0])
    return linear


def squeeze(x: Any) -> Any:
    """
    Remove leading singleton dimensions from nested input deeper than 2D.

    Numbers and strings are returned unchanged. Works for string arrays too.

        squeeze([[[[3, 4, 5]]]])   # [[3, 4, 5]]
    """
    check_required(x, 'x')
    if isinstance(x, str) or np.ndim(x) == 0:
        return x

    try:
        data = np.asarray(x)
    except ValueError as e:
        raise ShapeError(f"x: inhomogeneous shape: {e}") from e

    while data.ndim > 2:
        if data.shape[0] != 1:
            raise ShapeError(
                f"x: cannot squeeze non-singleton leading dimension of shape {data.shape}",
                expected=1,
                actual=data.shape[0],
            )
        data = data[0]
    return data.copy()


def linspace(a: Any, b: Any, n: int = DEFAULT_LINSPACE_POINTS) -> NDArray:
    """n evenly spaced points from a to b inclusive."""
    check_required(a, 'a')
    check_required(b, 'b')
    if not (np.isscalar(a) and np.isscalar(b)) or isinstance(a, str) or isinstance(b, str):
        raise FormatError("linspace: bounds must be numbers")
    return np.linspace(a, b, int(n))


def logspace(a: Any, b: Any, n: int = DEFAULT_LOGSPACE_POINTS) -> NDArray:
    """
    n logarithmically spaced points from 10**a to 10**b inclusive.

        logspace(-1, 1, 3)   # [0.1, 1, 10]
    """
    return np.power(10.0, linspace(a, b, n))
