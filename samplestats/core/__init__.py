"""
Core infrastructure for SampleStats.

This module provides shared abstractions and utilities used by all
container and generator submodules.

Key components:
    protocols: StatisticalSample, Distribution protocols
    exceptions: Exception hierarchy
    validation: Input validators
"""

from samplestats.core.protocols import StatisticalSample, Distribution
from samplestats.core.exceptions import (
    SampleStatsError,
    ValidationError,
    DimensionError,
    NumericalError,
    DegenerateRegressionError,
)

__all__ = [
    # Protocols
    "StatisticalSample",
    "Distribution",
    # Exceptions
    "SampleStatsError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "DegenerateRegressionError",
]
