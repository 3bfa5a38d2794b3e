"""
Bivariate statistics.

Public API:
    CorrelatedPair  - two index-aligned samples with covariance,
                      correlation and least-squares line
    LineFit         - slope/intercept result of line_of_best_fit
"""

from samplestats.bivariate.pair import CorrelatedPair
from samplestats.bivariate.solution import LineFit

__all__ = [
    "CorrelatedPair",
    "LineFit",
]
