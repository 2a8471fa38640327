"""
Type predicates.

Predicates answer a yes/no question about their input and never raise:
input the classifier rejects (ragged rows, strings, None, ...) is simply
not a vector or a matrix.
"""

from __future__ import annotations

from typing import Any
import numpy as np

from pyubique.core.exceptions import ValidationError
from pyubique.core.operand import Operand, is_scalar_value


def _kind(x: Any) -> str | None:
    try:
        return Operand.from_value(x, 'x').kind
    except ValidationError:
        return None


def isnumber(x: Any) -> bool:
    """True for a numeric scalar (booleans excluded)."""
    if isinstance(x, (bool, np.bool_)):
        return False
    if isinstance(x, np.ndarray):
        return x.ndim == 0 and np.issubdtype(x.dtype, np.number)
    return is_scalar_value(x)


def islogical(x: Any) -> bool:
    """True for a boolean scalar."""
    return isinstance(x, (bool, np.bool_))


def isstring(x: Any) -> bool:
    """True for a str."""
    return isinstance(x, str)


def isvector(x: Any) -> bool:
    """True for a flat numeric sequence or 1D array, including []."""
    return _kind(x) == 'vector'


def isarray(x: Any) -> bool:
    """Alias of isvector()."""
    return isvector(x)


def ismatrix(x: Any) -> bool:
    """True for a rectangular list of rows or a 2D array."""
    return _kind(x) == 'matrix'


def isempty(x: Any) -> bool:
    """True for an empty string, vector or matrix."""
    if isinstance(x, str):
        return len(x) == 0
    kind = _kind(x)
    if kind in ('vector', 'matrix'):
        return Operand.from_value(x, 'x').is_empty
    return False
