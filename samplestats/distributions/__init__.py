"""
Pseudo-random variate generators for named distributions.

Every generator satisfies the Distribution protocol
(draw, mean, standard_deviation, variance).

Usage:
    from samplestats.distributions import NormalDistribution

    gen = NormalDistribution(80, 10, seed=42)
    x = gen.draw()
    sample = gen.to_sample(1000)
"""

from samplestats.distributions.normal import NormalDistribution
from samplestats.distributions.geometric import GeometricDistribution

__all__ = [
    "NormalDistribution",
    "GeometricDistribution",
]
