"""
Central moments, skewness and kurtosis.

Non-finite results are valid outputs: constant data has zero variance, so
its skewness and kurtosis are NaN. numpy floating-point warnings for those
divisions are suppressed. The bias-corrected forms (flag=0) are evaluated
as written even when the sample is too small for the correction, in which
case a RuntimeWarning is issued and the formula's non-finite or negative
value is returned.
"""

from __future__ import annotations

from typing import Any
import warnings
import numpy as np
from numpy.typing import NDArray

from pyubique.core.defaults import DEFAULT_BIAS_FLAG, DEFAULT_REDUCE_DIM, DIM_ROWS
from pyubique.core.kernel import vectorfun
from pyubique.core.operand import Operand
from pyubique.core.validation import check_dim, check_required


def _central_moment(a: NDArray, order: int) -> np.floating:
    mu = np.mean(a)
    return np.mean((a - mu) ** order)


def _skewness(a: NDArray, flag: int) -> np.floating:
    n = a.shape[0]
    with np.errstate(divide='ignore', invalid='ignore'):
        s = _central_moment(a, 3) / _central_moment(a, 2) ** 1.5
        if flag == 1:
            return s
        return s * np.sqrt(n * (n - 1)) / np.float64(n - 2)


def _kurtosis(a: NDArray, flag: int) -> np.floating:
    n = a.shape[0]
    with np.errstate(divide='ignore', invalid='ignore'):
        k = _central_moment(a, 4) / _central_moment(a, 2) ** 2
        if flag == 1:
            return k
        return ((n + 1) * k - 3 * (n - 1)) * (n - 1) / np.float64((n - 2) * (n - 3)) + 3


def _is_array_input(x: Any) -> bool:
    return not Operand.from_value(x, 'x').is_scalar


def _warn_small_sample(x: Any, flag: int, dim: int, minimum: int, name: str) -> None:
    """
    Warn when the bias correction is undefined for the lane length.

    Issued once per call, from the public function, so the warning points
    at the caller rather than into the kernel.
    """
    op = Operand.from_value(x, 'x')
    if flag != 0 or op.is_scalar or op.is_empty:
        return

    rows, cols = op.shape
    n = cols if op.is_vector or check_dim(dim) == DIM_ROWS else rows
    if n < minimum:
        warnings.warn(
            f"{name}: bias correction needs at least {minimum} observations, got {n}",
            RuntimeWarning,
            stacklevel=3,
        )


def mean(x: Any, dim: int = DEFAULT_REDUCE_DIM) -> Any:
    """
    Arithmetic mean.

        mean([5, 6, 3])                 # 4.666666666666667
        mean([[5, 6, 5], [7, 8, -1]])   # [[5.333...], [4.666...]]
    """
    return vectorfun(dim, x, np.mean)


def moment(x: Any, k: int, dim: int = DEFAULT_REDUCE_DIM) -> Any:
    """
    k-th central moment, mean((x - mean(x)) ** k).

    Parameters
    ----------
    x : vector or matrix
        Scalar input yields NaN.
    k : int
        Order of the moment. The first central moment is zero, the second
        is the (biased) variance.
    dim : int
        0 (default) per row, 1 per column.

    Examples
    --------
        moment([1, 2, 3, 4, 5], 4)                           # 6.8
        moment([[0.003, 0.026], [0.015, -0.009]], 2, dim=1)  # [[3.6e-05, 0.00030625]]
    """
    check_required(k, 'k')
    if not _is_array_input(x):
        return np.nan
    return vectorfun(dim, x, _central_moment, k)


def skewness(
    x: Any,
    flag: int = DEFAULT_BIAS_FLAG,
    dim: int = DEFAULT_REDUCE_DIM,
) -> Any:
    """
    Skewness, m3 / m2 ** 1.5.

    Parameters
    ----------
    x : vector or matrix
        Scalar input yields NaN.
    flag : int
        1 (default) returns the plain ratio; 0 applies the bias correction
        sqrt(n (n - 1)) / (n - 2).
    dim : int
        0 (default) per row, 1 per column.
    """
    if not _is_array_input(x):
        return np.nan
    _warn_small_sample(x, flag, dim, 3, 'skewness')
    return vectorfun(dim, x, _skewness, flag)


def kurtosis(
    x: Any,
    flag: int = DEFAULT_BIAS_FLAG,
    dim: int = DEFAULT_REDUCE_DIM,
) -> Any:
    """
    Kurtosis, m4 / m2 ** 2 (not excess kurtosis).

    Parameters
    ----------
    x : vector or matrix
        Scalar input yields NaN.
    flag : int
        1 (default) returns the plain ratio; 0 applies the bias correction

            ((n + 1) k - 3 (n - 1)) (n - 1) / ((n - 2) (n - 3)) + 3

        which is undefined for n <= 3 (the result is then inf, NaN or
        meaningless, and a RuntimeWarning is issued).
    dim : int
        0 (default) per row, 1 per column.

    Examples
    --------
        x = [0.003, 0.026, 0.015, -0.009, 0.014, 0.024, 0.015, 0.066, -0.014, 0.039]
        kurtosis(x)             # 3.0375811...
        kurtosis(x, flag=0)     # 4.0307...
        kurtosis([1, 1, 1, 1])  # nan
    """
    if not _is_array_input(x):
        return np.nan
    _warn_small_sample(x, flag, dim, 4, 'kurtosis')
    return vectorfun(dim, x, _kurtosis, flag)
