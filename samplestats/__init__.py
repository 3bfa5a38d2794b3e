"""
SampleStats: sample containers with memoized descriptive statistics.

Containers hold numeric samples and compute statistics lazily, caching
each result until the data next changes.

Submodules:
    descriptive: Sample (univariate)
    bivariate: CorrelatedPair (covariance, correlation, line of best fit)
    multivariate: MultiSample (N index-aligned dimensions)
    distributions: Normal and Geometric variate generators
    functions: one-shot wrappers over the containers
    combinatorics: factorial, permutations, choose
"""

__version__ = "0.1.0"

from samplestats.descriptive import Sample, SampleView
from samplestats.bivariate import CorrelatedPair, LineFit
from samplestats.multivariate import MultiSample
from samplestats.distributions import NormalDistribution, GeometricDistribution
from samplestats import functions
from samplestats import combinatorics

__all__ = [
    "__version__",
    "Sample",
    "SampleView",
    "CorrelatedPair",
    "LineFit",
    "MultiSample",
    "NormalDistribution",
    "GeometricDistribution",
    "functions",
    "combinatorics",
]
