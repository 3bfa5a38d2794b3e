"""
Exception hierarchy for SampleStats.

All exceptions inherit from SampleStatsError to allow catching any
library-specific error.

Only caller errors and distinct failures raise. Recoverable conditions
(out-of-range index, empty sample, wrong point arity) are reported as
None results or no-ops by the containers themselves.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class SampleStatsError(Exception):
    """Base exception for all SampleStats errors."""
    pass


class ValidationError(SampleStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g.
    non-numeric sample values or a negative standard deviation.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when input that must be 1D (a sample) or a sequence of 1D
    columns (a multi-dimensional sample) has the wrong shape.
    """
    pass


class NumericalError(SampleStatsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateRegressionError(NumericalError):
    """
    Least-squares line is undefined.

    Raised when every x value is identical (or there are no points), so
    the slope denominator sum((x - mean(x))**2) is zero.

    Attributes:
        n: Number of points in the pair
        sum_squares_x: The sum of squared x deviations that was zero
    """

    def __init__(
        self,
        message: str,
        n: int | None = None,
        sum_squares_x: float | None = None,
    ):
        super().__init__(message)
        self.n = n
        self.sum_squares_x = sum_squares_x
