"""
Normal (Gaussian) variate generator using the Box-Muller transform.
"""

from __future__ import annotations

import math

from samplestats.core.validation import (
    check_scalar, check_finite, check_non_negative,
)
from samplestats.distributions._common import SeedLike, VariateGenerator


class NormalDistribution(VariateGenerator):
    """
    Generates numbers from N(mean, std**2).

    Each Box-Muller evaluation turns two uniform variates u1, u2 into two
    normal variates:

        z1 = sqrt(-2 ln u1) * cos(2 pi u2)
        z2 = sqrt(-2 ln u2) * cos(2 pi u1)

    One is returned and the other is kept for the next draw(), halving
    the number of log/sqrt/cos evaluations. The pending slot is None when
    empty, so a pending variate of exactly 0.0 is still returned.

    Parameters
    ----------
    mean : float
        Location of the distribution.
    std : float
        Standard deviation, >= 0.
    seed : int, numpy.random.Generator, or None
        Random seed for reproducibility.
    """

    def __init__(self, mean: float = 0.0, std: float = 1.0, *, seed: SeedLike = None):
        super().__init__(seed)
        self._mean = check_scalar(mean, "mean")
        self._std = check_scalar(std, "std")
        check_finite(self._mean, "mean")
        check_finite(self._std, "std")
        check_non_negative(self._std, "std")
        self._pending: float | None = None

    def draw(self) -> float:
        """Generate one normally distributed number."""
        if self._pending is not None:
            out = self._pending
            self._pending = None
            return out

        u1 = self._uniform()
        u2 = self._uniform()
        z1 = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        z2 = math.sqrt(-2.0 * math.log(u2)) * math.cos(2.0 * math.pi * u1)
        self._pending = self._std * z2 + self._mean
        return self._std * z1 + self._mean

    def mean(self) -> float:
        return self._mean

    def standard_deviation(self) -> float:
        return self._std

    def variance(self) -> float:
        return self._std * self._std

    def __repr__(self) -> str:
        return f"NormalDistribution(mean={self._mean}, std={self._std})"
