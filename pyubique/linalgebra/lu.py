"""
LU decomposition and determinant.

LU factorization with partial pivoting uses LAPACK getrf via
scipy.linalg.lu_factor. The determinant is the product of the diagonal of
U times the sign of the row permutation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import warnings
import numpy as np
import scipy.linalg as sla
from numpy.typing import NDArray

from pyubique.core.exceptions import ShapeError
from pyubique.core.operand import Operand
from pyubique.core.validation import check_square


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition with partial pivoting, P @ A = L @ U.

    Attributes:
        LU: Combined factors (strict lower part of L below the diagonal, U on
            and above it), as returned by LAPACK
        piv: LAPACK pivot indices; row i was interchanged with row piv[i]
        L: Unit lower triangular factor (n x n)
        U: Upper triangular factor (n x n)
        P: Row permutation matrix (n x n)
        sign: Permutation sign, +1.0 for an even number of row swaps,
              -1.0 for an odd number
    """
    LU: NDArray[np.floating[Any]]
    piv: NDArray[np.integer[Any]]
    L: NDArray[np.floating[Any]]
    U: NDArray[np.floating[Any]]
    P: NDArray[np.floating[Any]]
    sign: float


def _as_square_matrix(x: Any, name: str) -> NDArray[np.floating[Any]]:
    op = Operand.from_value(x, name)
    if not op.is_matrix:
        raise ShapeError(
            f"{name}: input must be a matrix, got a {op.kind}",
            actual=op.shape,
        )
    data = np.asarray(op.data, dtype=np.float64)
    check_square(data, name)
    return data


def lu(x: Any) -> LUResult:
    """
    LU decomposition with partial pivoting.

    Parameters
    ----------
    x : matrix
        Square matrix (n x n).

    Returns
    -------
    LUResult with combined factors, pivots, L, U, P and permutation sign.

    Raises
    ------
    ShapeError
        If x is not a square matrix.
    """
    a = _as_square_matrix(x, 'x')
    n = a.shape[0]

    # Singular input is valid here; det() reports it as zero.
    # Non-finite entries propagate into the factors instead of raising.
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', sla.LinAlgWarning)
        lu_mat, piv = sla.lu_factor(a, check_finite=False)

    perm = np.arange(n)
    swaps = 0
    for i, p in enumerate(piv):
        if p != i:
            perm[[i, p]] = perm[[p, i]]
            swaps += 1

    L = np.tril(lu_mat, k=-1) + np.eye(n)
    U = np.triu(lu_mat)
    P = np.eye(n)[perm]

    return LUResult(
        LU=lu_mat,
        piv=piv,
        L=L,
        U=U,
        P=P,
        sign=-1.0 if swaps % 2 else 1.0,
    )


def det(x: Any) -> float:
    """
    Matrix determinant via LU decomposition.

    Examples
    --------
        det([[1, 5], [6, 2]])                    # -28
        det([[1, 2, 3], [0, 4, 5], [1, 0, 6]])   # 22

    Raises
    ------
    ArgumentError
        If x is missing.
    ShapeError
        If x is a scalar, a vector or a non-square matrix.
    """
    a = _as_square_matrix(x, 'x')
    if a.shape[0] == 0:
        return 1.0

    factors = lu(a)
    determinant = factors.sign * float(np.prod(np.diag(factors.LU)))
    # normalize -0.0
    return determinant + 0.0
