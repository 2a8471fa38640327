"""
pyubique: numeric, matrix, statistics and date helpers for Python.

Small, stateless functions that accept scalars, vectors (flat sequences)
and matrices (lists of equal-length rows) alike, dispatching through a
shared broadcasting and reduction kernel.

Submodules:
    core: Operand classifier, kernel, exceptions, validation, defaults
    datatype: Type predicates and date conversions
    elemop: Rounding, cumulative operations, comparisons, arithmetic
    elmath: exp, erf, erfc
    linalgebra: LU decomposition and determinant
    matarrs: Size queries and matrix construction
    stats: Mean, median, central moments, skewness, kurtosis
"""

__version__ = "0.1.0"

from pyubique import core
from pyubique.core import (
    Operand,
    arrayfun,
    broadcast,
    vectorfun,
    UbiqueError,
    ValidationError,
    ArgumentError,
    ShapeError,
    FormatError,
    NumericalError,
)
from pyubique.datatype import (
    datenum,
    datestr,
    datevec,
    now,
    isnumber,
    islogical,
    isstring,
    isvector,
    isarray,
    ismatrix,
    isempty,
)
from pyubique.elemop import (
    round,
    ceil,
    floor,
    cummax,
    cummin,
    cumsum,
    diff,
    eq,
    ne,
    ge,
    gt,
    le,
    lt,
    plus,
    minus,
    times,
    rdivide,
)
from pyubique.elmath import exp, erf, erfc
from pyubique.linalgebra import LUResult, lu, det
from pyubique.matarrs import (
    size,
    nrows,
    ncols,
    numel,
    iscolumn,
    isrow,
    issquare,
    tomat,
    transpose,
    flatten,
    flipud,
    fliplr,
    cat,
    horzcat,
    vertcat,
    getcol,
    setcol,
    sub2ind,
    squeeze,
    linspace,
    logspace,
)
from pyubique.stats import mean, median, moment, skewness, kurtosis

__all__ = [
    "__version__",
    "core",
    # Kernel
    "Operand",
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
    # datatype
    "datenum",
    "datestr",
    "datevec",
    "now",
    "isnumber",
    "islogical",
    "isstring",
    "isvector",
    "isarray",
    "ismatrix",
    "isempty",
    # elemop
    "round",
    "ceil",
    "floor",
    "cummax",
    "cummin",
    "cumsum",
    "diff",
    "eq",
    "ne",
    "ge",
    "gt",
    "le",
    "lt",
    "plus",
    "minus",
    "times",
    "rdivide",
    # elmath
    "exp",
    "erf",
    "erfc",
    # linalgebra
    "LUResult",
    "lu",
    "det",
    # matarrs
    "size",
    "nrows",
    "ncols",
    "numel",
    "iscolumn",
    "isrow",
    "issquare",
    "tomat",
    "transpose",
    "flatten",
    "flipud",
    "fliplr",
    "cat",
    "horzcat",
    "vertcat",
    "getcol",
    "setcol",
    "sub2ind",
    "squeeze",
    "linspace",
    "logspace",
    # stats
    "mean",
    "median",
    "moment",
    "skewness",
    "kurtosis",
]
