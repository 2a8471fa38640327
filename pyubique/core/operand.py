"""
Operand: shape-classified wrapper for kernel inputs.

Every numeric routine classifies its inputs exactly once, at entry, into
one of three kinds: scalar, vector or matrix. Downstream code dispatches
on ``Operand.kind`` instead of probing types repeatedly.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Number
from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray

from pyubique.core.exceptions import FormatError, ShapeError
from pyubique.core.validation import (
    check_array, check_rectangular, check_required,
)


Kind = Literal['scalar', 'vector', 'matrix']


def is_scalar_value(x: Any) -> bool:
    """True for Python/numpy numbers, booleans and 0-d arrays."""
    if isinstance(x, (Number, np.number, np.bool_)):
        return True
    return isinstance(x, np.ndarray) and x.ndim == 0


@dataclass(frozen=True)
class Operand:
    """
    Classified kernel input. Immutable after construction.

    Shapes follow the row-major convention: a vector of length N has
    shape (1, N); a matrix with R rows of C elements has shape (R, C);
    a scalar has shape (1, 1).

    Construction:
        Operand.from_value(x, 'x')
    """
    _kind: Kind
    _data: NDArray[Any]

    @classmethod
    def from_value(cls, value: Any, name: str = 'x') -> Operand:
        """
        Classify ``value`` as a scalar, vector or matrix.

        Parameters
        ----------
        value : scalar, sequence, nested sequence or ndarray
            Input to classify. Lists of equal-length lists and 2D arrays
            are matrices; flat sequences and 1D arrays are vectors.
        name : str
            Parameter name for error messages.
        """
        if isinstance(value, Operand):
            return value

        check_required(value, name)

        if isinstance(value, (str, bytes)):
            raise FormatError(
                f"{name}: expected a number, vector or matrix, got a string",
                value_type=type(value).__name__,
            )

        if is_scalar_value(value):
            return cls(_kind='scalar', _data=check_array(value, name))

        if isinstance(value, (list, tuple)):
            check_rectangular(value, name)
        elif not isinstance(value, np.ndarray):
            raise FormatError(
                f"{name}: unsupported input type {type(value).__name__}",
                value_type=type(value).__name__,
            )

        data = check_array(value, name)

        if data.ndim == 1:
            return cls(_kind='vector', _data=data)
        if data.ndim == 2:
            return cls(_kind='matrix', _data=data)

        raise ShapeError(
            f"{name}: expected a vector or matrix, got {data.ndim}D with shape {data.shape}",
            expected=2,
            actual=data.ndim,
        )

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def data(self) -> NDArray[Any]:
        """Underlying array: 0D for scalars, 1D for vectors, 2D for matrices."""
        return self._data

    @property
    def is_scalar(self) -> bool:
        return self._kind == 'scalar'

    @property
    def is_vector(self) -> bool:
        return self._kind == 'vector'

    @property
    def is_matrix(self) -> bool:
        return self._kind == 'matrix'

    @property
    def is_empty(self) -> bool:
        """Whether the operand has no elements along some axis."""
        return self._data.size == 0

    @property
    def value(self) -> Any:
        """Python scalar for scalar operands."""
        return self._data.item()

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols) of the operand."""
        if self._kind == 'scalar':
            return (1, 1)
        if self._kind == 'vector':
            return (1, self._data.shape[0])
        return self._data.shape

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"Operand(kind={self._kind}, shape=({rows}, {cols}))"
