"""
Exponential-type variate generator using inverse-CDF sampling.
"""

from __future__ import annotations

import math

from samplestats.core.validation import check_scalar, check_finite, check_positive
from samplestats.distributions._common import SeedLike, VariateGenerator


class GeometricDistribution(VariateGenerator):
    """
    Generates numbers with CDF(x) = 1 - exp(-rate * x), x >= 0.

    Inverting the CDF at a uniform r gives x = -ln(r) / rate. The mean and
    standard deviation are both 1 / rate.

    Parameters
    ----------
    rate : float
        The rate parameter lambda, > 0.
    seed : int, numpy.random.Generator, or None
        Random seed for reproducibility.
    """

    def __init__(self, rate: float = 1.0, *, seed: SeedLike = None):
        super().__init__(seed)
        self._rate = check_scalar(rate, "rate")
        check_finite(self._rate, "rate")
        check_positive(self._rate, "rate")

    @property
    def rate(self) -> float:
        return self._rate

    def draw(self) -> float:
        return -math.log(self._uniform()) / self._rate

    def mean(self) -> float:
        return 1.0 / self._rate

    def standard_deviation(self) -> float:
        return 1.0 / self._rate

    def variance(self) -> float:
        return 1.0 / (self._rate * self._rate)

    def __repr__(self) -> str:
        return f"GeometricDistribution(rate={self._rate})"
