"""
Core infrastructure for pyubique.

This module provides the shared abstractions and utilities used by all
domain-specific submodules (elemop, stats, linalgebra, datatype, ...).

Key components:
    operand: Operand shape classifier (scalar / vector / matrix)
    kernel: arrayfun, broadcast, vectorfun
    exceptions: Exception hierarchy
    validation: Input validators
    defaults: Documented defaults for optional parameters
"""

from pyubique.core.operand import Operand
from pyubique.core.kernel import arrayfun, broadcast, vectorfun
from pyubique.core.exceptions import (
    UbiqueError,
    ValidationError,
    ArgumentError,
    ShapeError,
    FormatError,
    NumericalError,
)

__all__ = [
    # Classifier
    "Operand",
    # Kernel
    "arrayfun",
    "broadcast",
    "vectorfun",
    # Exceptions
    "UbiqueError",
    "ValidationError",
    "ArgumentError",
    "ShapeError",
    "FormatError",
    "NumericalError",
]
