"""
Linear algebra.

Public API:
    lu(x)   - LU decomposition with partial pivoting
    det(x)  - Determinant via LU decomposition
"""

from pyubique.linalgebra.lu import LUResult, lu, det

__all__ = [
    "LUResult",
    "lu",
    "det",
]
