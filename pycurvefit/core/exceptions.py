"""
Exception hierarchy for pycurvefit.

All exceptions inherit from CurveFitError to allow catching any
library-specific error. Every error raised by the library today is a
validation failure detected at the call site, so the concrete errors
hang off ValidationError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class CurveFitError(Exception):
    """Base exception for all pycurvefit errors."""
    pass


class ValidationError(CurveFitError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Paired sequences have inconsistent shapes.

    Raised when x and y differ in length during fitting or scoring,
    or when an input is not one-dimensional.
    """
    pass


class TypeMismatchError(ValidationError):
    """
    A serialized record belongs to a different model family.

    Attributes:
        expected: Fully-qualified name of the importing family
        actual: Name tag found on the record (None if absent)
    """

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: str | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidPropertyError(ValidationError):
    """
    An undefined statistic was requested by name.

    Attributes:
        name: The property that was requested
        owner: Fully-qualified name of the type it was requested from
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        owner: str | None = None
    ):
        super().__init__(message)
        self.name = name
        self.owner = owner
