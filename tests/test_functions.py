"""
Tests for the one-shot convenience functions.
"""

import numpy as np
import pytest

from samplestats import functions
from samplestats.bivariate import LineFit
from samplestats.core.exceptions import DegenerateRegressionError


class TestUnivariate:

    def test_values(self, scenario_values):
        assert functions.mean(scenario_values) == 5.0
        assert functions.sum(scenario_values) == 40.0
        assert functions.median(scenario_values) == 4.5
        assert functions.min(scenario_values) == 2.0
        assert functions.max(scenario_values) == 9.0
        np.testing.assert_allclose(functions.variance(scenario_values), 32.0 / 7.0, rtol=1e-12)
        np.testing.assert_allclose(functions.variance_population(scenario_values), 4.0)
        np.testing.assert_allclose(
            functions.standard_deviation(scenario_values), np.sqrt(32.0 / 7.0), rtol=1e-12
        )
        np.testing.assert_allclose(
            functions.standard_deviation_population(scenario_values), 2.0
        )

    def test_empty_input(self):
        assert functions.mean([]) is None
        assert functions.sum([]) is None
        assert functions.variance([1.0]) is None

    def test_sort_returns_copy(self):
        data = [3.0, 1.0, 2.0]
        assert functions.sort(data) == [1.0, 2.0, 3.0]
        assert data == [3.0, 1.0, 2.0]

    def test_builtins_untouched(self):
        assert sum([1, 2]) == 3
        assert min(1, 2) == 1


class TestBivariate:

    def test_values(self):
        x, y = [1, 2, 3], [2, 4, 6]
        assert functions.covariance(x, y) == 2.0
        np.testing.assert_allclose(functions.covariance_population(x, y), 4.0 / 3.0)
        assert functions.correlation(x, y) == 1.0
        np.testing.assert_allclose(functions.correlation_population(x, y), 1.0)
        assert functions.line_of_best_fit(x, y) == LineFit(slope=2.0, intercept=0.0)

    def test_degenerate(self):
        with pytest.raises(DegenerateRegressionError):
            functions.line_of_best_fit([1, 1, 1], [4, 5, 6])

    @pytest.mark.parametrize("func", [functions.correlation, functions.correlation_population])
    def test_zero_variance_warning_points_at_caller(self, func):
        with pytest.warns(RuntimeWarning, match="x has zero variance") as record:
            assert func([0.1, 0.1, 0.1], [1.0, 2.0, 4.0]) is None
        assert record[0].filename == __file__


class TestRandomNormal:

    def test_seeded(self):
        assert functions.random_normal(80, 10, seed=4) == functions.random_normal(80, 10, seed=4)

    def test_finite(self):
        assert np.isfinite(functions.random_normal())
