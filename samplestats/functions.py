"""
One-shot convenience functions.

Each function wraps its input in a throwaway container and reads one
statistic back. Use the containers directly when several statistics of
the same data are needed, so the intermediate results are shared.

Note that sum, min and max shadow the builtins inside this module's
namespace; import the module (``from samplestats import functions``) or
the names you need rather than star-importing it.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from samplestats.descriptive.sample import Sample
from samplestats.bivariate.pair import CorrelatedPair
from samplestats.bivariate.solution import LineFit
from samplestats.distributions.normal import NormalDistribution
from samplestats.distributions._common import SeedLike


def mean(data: ArrayLike) -> float | None:
    """Arithmetic mean; None for empty data."""
    return Sample(data).mean


def median(data: ArrayLike) -> float | None:
    """Median; None for empty data."""
    return Sample(data).median


def sum(data: ArrayLike) -> float | None:
    """Total of the values; None for empty data."""
    return Sample(data).sum


def variance(data: ArrayLike) -> float | None:
    """Sample variance (n - 1); None for fewer than two values."""
    return Sample(data).variance


def variance_population(data: ArrayLike) -> float | None:
    """Population variance (n); None for empty data."""
    return Sample(data).variance_population


def standard_deviation(data: ArrayLike) -> float | None:
    """Sample standard deviation; None for fewer than two values."""
    return Sample(data).standard_deviation


def standard_deviation_population(data: ArrayLike) -> float | None:
    """Population standard deviation; None for empty data."""
    return Sample(data).standard_deviation_population


def min(data: ArrayLike) -> float | None:
    return Sample(data).min


def max(data: ArrayLike) -> float | None:
    return Sample(data).max


def sort(data: ArrayLike) -> list[float]:
    """Sorted copy of data; the input is not modified."""
    sample = Sample(data)
    sample.sort()
    return list(sample)


def covariance(x: ArrayLike, y: ArrayLike) -> float | None:
    """Sample covariance of two sequences (truncated to the shorter)."""
    return CorrelatedPair(x, y).covariance


def covariance_population(x: ArrayLike, y: ArrayLike) -> float | None:
    """Population covariance of two sequences (truncated to the shorter)."""
    return CorrelatedPair(x, y).covariance_population


def correlation(x: ArrayLike, y: ArrayLike) -> float | None:
    """Pearson correlation using sample statistics."""
    return CorrelatedPair(x, y)._correlation(population=False, stacklevel=2)


def correlation_population(x: ArrayLike, y: ArrayLike) -> float | None:
    """Pearson correlation using population statistics."""
    return CorrelatedPair(x, y)._correlation(population=True, stacklevel=2)


def line_of_best_fit(x: ArrayLike, y: ArrayLike) -> LineFit:
    """
    Least-squares line of y on x.

    Raises:
        DegenerateRegressionError: If all x values are equal.
    """
    return CorrelatedPair(x, y).line_of_best_fit


def random_normal(mean: float = 0.0, std: float = 1.0, *, seed: SeedLike = None) -> float:
    """
    One draw from N(mean, std**2).

    A fresh generator is built per call, so the Box-Muller partner variate
    is discarded. Keep a NormalDistribution around for repeated draws.
    """
    return NormalDistribution(mean, std, seed=seed).draw()
