"""
Multi-dimensional samples.
"""

from samplestats.multivariate.multisample import MultiSample

__all__ = [
    "MultiSample",
]
