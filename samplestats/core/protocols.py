"""
Core protocols for SampleStats.

These define structural interfaces shared across the package. We use
Protocol (structural typing) rather than ABC (nominal typing) so that
read-only views and user-defined generators satisfy them without
inheriting from anything.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Undefined statistics are None, never a placeholder number
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StatisticalSample(Protocol):
    """
    Read interface of a univariate sample.

    Implemented by Sample (mutable) and SampleView (read-only façade
    handed out by the paired and multi-dimensional containers).

    Every statistic returns None when it is undefined for the current
    data (empty sample, or fewer than two values for the sample variance).
    """

    @property
    def n(self) -> int:
        """Number of values."""
        ...

    @property
    def sum(self) -> float | None:
        ...

    @property
    def mean(self) -> float | None:
        ...

    @property
    def median(self) -> float | None:
        ...

    @property
    def variance(self) -> float | None:
        """Sample variance (n - 1 denominator)."""
        ...

    @property
    def standard_deviation(self) -> float | None:
        ...

    @property
    def variance_population(self) -> float | None:
        """Population variance (n denominator)."""
        ...

    @property
    def standard_deviation_population(self) -> float | None:
        ...

    @property
    def min(self) -> float | None:
        ...

    @property
    def max(self) -> float | None:
        ...

    def get_at(self, index: int) -> float | None:
        """Value at index, or None when the index is out of range."""
        ...


@runtime_checkable
class Distribution(Protocol):
    """
    Protocol for pseudo-random variate generators.

    A distribution is constructed with fixed parameters. draw() produces
    one variate; the moment accessors report the theoretical values of
    the distribution, not of any drawn data.
    """

    def draw(self) -> float:
        """Generate one random variate."""
        ...

    def mean(self) -> float:
        """Theoretical mean of the distribution."""
        ...

    def standard_deviation(self) -> float:
        """Theoretical standard deviation of the distribution."""
        ...

    def variance(self) -> float:
        """Theoretical variance of the distribution."""
        ...
