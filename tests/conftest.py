"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def scenario_values():
    """Classic textbook sample: mean 5, population variance 4."""
    return [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]


@pytest.fixture
def noisy_line(rng):
    """Points scattered around y = 1.5 x - 2."""
    x = rng.uniform(-10, 10, size=200)
    y = 1.5 * x - 2.0 + rng.standard_normal(200)
    return x, y
