"""
Univariate descriptive statistics.

Public API:
    Sample      - mutable sample with memoized statistics
    SampleView  - read-only view handed out by multi-axis containers
"""

from samplestats.descriptive.sample import Sample, SampleView

__all__ = [
    "Sample",
    "SampleView",
]
