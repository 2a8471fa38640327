"""
Broadcasting and reduction kernel.

Three primitives shared by every numeric routine in pyubique:

    arrayfun(x, func)        - apply a scalar function to every element
    broadcast(x, y, func)    - pair two operands element-wise
    vectorfun(dim, x, func)  - apply a vector function along rows or columns

Broadcasting rules (see broadcast()):
    scalar x scalar          -> scalar
    scalar x vector/matrix   -> scalar applied against every element
    vector x vector          -> element-wise, lengths must agree
    matrix x matrix          -> element-wise, shapes must agree
    vector x matrix          -> vector paired with every row,
                                vector length must equal the row length
Operands whose shapes disagree are rejected; there is no padding or
truncation.
"""

from __future__ import annotations

from typing import Any, Callable
import numpy as np
from numpy.typing import DTypeLike

from pyubique.core.defaults import DIM_ROWS
from pyubique.core.exceptions import ArgumentError, ShapeError
from pyubique.core.operand import Operand
from pyubique.core.validation import check_dim, check_required, check_same_shape


def arrayfun(
    x: Any,
    func: Callable[..., Any],
    *args: Any,
    otype: DTypeLike = np.float64,
) -> Any:
    """
    Apply ``func`` to every scalar element of ``x``, preserving structure.

    Parameters
    ----------
    x : scalar, vector or matrix
    func : callable
        Scalar function ``func(element, *args)``.
    *args
        Extra arguments forwarded to every call.
    otype : dtype
        dtype of the output array for vector/matrix input.

    Returns
    -------
    ``func(x, *args)`` for scalar input, otherwise an array of the same
    shape as ``x``.
    """
    op = Operand.from_value(x, 'x')

    if op.is_scalar:
        return func(op.value, *args)

    mapped = np.vectorize(lambda element: func(element, *args), otypes=[otype])
    return mapped(op.data)


def _check_pair(a: Operand, b: Operand) -> None:
    """Validate that two non-scalar operands can be paired."""
    if a.kind == b.kind:
        check_same_shape(a.shape, b.shape)
        return

    vector, matrix = (a, b) if a.is_vector else (b, a)
    row_length = matrix.shape[1]
    if vector.shape[1] != row_length:
        raise ShapeError(
            f"Vector length {vector.shape[1]} does not match matrix row length {row_length}",
            expected=row_length,
            actual=vector.shape[1],
        )


def broadcast(
    x: Any,
    y: Any,
    func: Callable[[Any, Any], Any],
    otype: DTypeLike = np.float64,
) -> Any:
    """
    Pair ``x`` and ``y`` element-wise under the broadcasting rules.

    Parameters
    ----------
    x, y : scalar, vector or matrix
    func : callable
        Binary scalar function ``func(a, b)``.
    otype : dtype
        dtype of the output array when either operand is non-scalar.

    Raises
    ------
    ArgumentError
        If either operand is missing.
    ShapeError
        If two non-scalar operands have incompatible shapes.
    """
    a = Operand.from_value(x, 'x')
    b = Operand.from_value(y, 'y')

    if a.is_scalar and b.is_scalar:
        return func(a.value, b.value)

    if not (a.is_scalar or b.is_scalar):
        _check_pair(a, b)

    mapped = np.vectorize(func, otypes=[otype])
    return mapped(a.data, b.data)


def vectorfun(
    dim: int,
    x: Any,
    func: Callable[..., Any],
    *args: Any,
) -> Any:
    """
    Apply a vector function along the rows or columns of ``x``.

    Parameters
    ----------
    dim : int
        0 applies ``func`` to every row, 1 to every column. Ignored for
        vector input.
    x : scalar, vector or matrix
        Scalars are returned unchanged.
    func : callable
        ``func(vector, *args)`` returning a scalar or a vector.
    *args
        Extra arguments forwarded to every call.

    Returns
    -------
    For vector input, ``func(x, *args)``. For matrix input, per-lane
    results reassembled as follows:

        dim=0, scalar results -> column (rows, 1)
        dim=1, scalar results -> row (1, cols)
        vector results        -> one output row per input lane

    Raises
    ------
    ArgumentError
        If ``x`` is missing or empty, or ``dim`` is not 0 or 1.
    """
    dim = check_dim(dim)
    check_required(x, 'x')

    op = Operand.from_value(x, 'x')

    if op.is_scalar:
        return x

    if op.is_empty:
        raise ArgumentError("x: not enough input arguments")

    if op.is_vector:
        return func(op.data, *args)

    lanes = op.data if dim == DIM_ROWS else op.data.T
    results = [func(lane, *args) for lane in lanes]

    if all(np.ndim(r) == 0 for r in results):
        stacked = np.asarray(results)
        return stacked.reshape(-1, 1) if dim == DIM_ROWS else stacked.reshape(1, -1)

    return np.vstack(results)
