"""
Exception hierarchy for pyubique.

All exceptions inherit from UbiqueError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class UbiqueError(Exception):
    """Base exception for all pyubique errors."""
    pass


class ValidationError(UbiqueError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ArgumentError(ValidationError):
    """
    A required input is missing or the call arity is too low.

    Also raised for out-of-range option values such as an unknown
    reduction dimension.
    """
    pass


class ShapeError(ValidationError):
    """
    Operand shapes are invalid or inconsistent.

    Raised for ragged matrices, mismatched operand shapes, non-square
    input to determinant routines and out-of-bounds row/column indices.

    Attributes:
        expected: Expected shape or extent, if known
        actual: Shape or extent that was received, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class FormatError(ValidationError):
    """
    Input has the wrong kind or lacks a required format.

    Raised when a date string is supplied without a pattern, or when an
    input is neither numeric nor a string/array where one is required.

    Attributes:
        value_type: Name of the offending input type, if known
    """

    def __init__(self, message: str, value_type: str | None = None):
        super().__init__(message)
        self.value_type = value_type


class NumericalError(UbiqueError):
    """
    Numerical computation failed.

    Non-finite results (for example the kurtosis of constant data) are
    valid outputs and never raise this error.
    """
    pass
