"""
Tests for the random variate generators.

Moment checks are statistical: tolerances are several standard errors
wide and the generators are seeded, so results are reproducible.
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from samplestats.core.exceptions import ValidationError
from samplestats.core.protocols import Distribution
from samplestats.descriptive import Sample
from samplestats.distributions import GeometricDistribution, NormalDistribution


def _scripted_uniforms(gen, values):
    """Replace the generator's uniform source with a fixed script."""
    script = iter(values)
    gen._uniform = lambda: next(script)


class TestNormalMoments:

    def test_theoretical_moments(self):
        gen = NormalDistribution(80, 10)
        assert gen.mean() == 80.0
        assert gen.standard_deviation() == 10.0
        assert gen.variance() == 100.0

    def test_standard_normal_draws(self):
        gen = NormalDistribution(0, 1, seed=42)
        sample = gen.to_sample(20000)
        assert abs(sample.mean) < 0.05
        assert abs(sample.standard_deviation - 1.0) < 0.05

    def test_shifted_and_scaled(self):
        draws = NormalDistribution(80, 10, seed=1).draws(20000)
        np.testing.assert_allclose(np.mean(draws), 80.0, atol=0.5)
        np.testing.assert_allclose(np.std(draws, ddof=1), 10.0, rtol=0.05)

    def test_kolmogorov_smirnov(self):
        draws = NormalDistribution(0, 1, seed=7).draws(5000)
        assert sp_stats.kstest(draws, 'norm').pvalue > 1e-4

    def test_zero_std_is_constant(self):
        gen = NormalDistribution(3.5, 0, seed=0)
        assert all(gen.draw() == 3.5 for _ in range(5))


class TestBoxMullerPairing:

    def test_second_draw_uses_cached_partner(self):
        gen = NormalDistribution(1.0, 2.0)
        _scripted_uniforms(gen, [0.25, 0.6])
        first = gen.draw()
        second = gen.draw()
        z1 = math.sqrt(-2 * math.log(0.25)) * math.cos(2 * math.pi * 0.6)
        z2 = math.sqrt(-2 * math.log(0.6)) * math.cos(2 * math.pi * 0.25)
        assert first == 2.0 * z1 + 1.0
        assert second == 2.0 * z2 + 1.0
        assert gen._pending is None

    def test_third_draw_starts_new_pair(self):
        gen = NormalDistribution(0, 1)
        _scripted_uniforms(gen, [0.3, 0.7, 0.9, 0.2])
        gen.draw()
        gen.draw()
        third = gen.draw()
        assert third == math.sqrt(-2 * math.log(0.9)) * math.cos(2 * math.pi * 0.2)

    def test_cached_zero_is_not_discarded(self):
        gen = NormalDistribution(0, 1)
        # u2 = 1 makes the partner variate exactly 0.0; a third uniform
        # request would exhaust the script
        _scripted_uniforms(gen, [0.5, 1.0])
        gen.draw()
        assert gen._pending == 0.0
        assert gen.draw() == 0.0
        assert gen._pending is None

    def test_uniforms_consumed_per_pair(self):
        gen = NormalDistribution(0, 1)
        calls = []

        def uniform():
            calls.append(1)
            return 0.5

        gen._uniform = uniform
        for _ in range(6):
            gen.draw()
        assert len(calls) == 6

    def test_seed_reproducible(self):
        a = NormalDistribution(0, 1, seed=123).draws(10)
        b = NormalDistribution(0, 1, seed=123).draws(10)
        np.testing.assert_array_equal(a, b)

    def test_accepts_generator_as_seed(self):
        rng = np.random.default_rng(5)
        gen = NormalDistribution(0, 1, seed=rng)
        assert np.isfinite(gen.draw())


class TestNormalValidation:

    def test_negative_std(self):
        with pytest.raises(ValidationError, match="std: must be non-negative"):
            NormalDistribution(0, -1)

    def test_non_finite_parameters(self):
        with pytest.raises(ValidationError, match="mean: must be finite"):
            NormalDistribution(float('nan'), 1)
        with pytest.raises(ValidationError, match="std: must be finite"):
            NormalDistribution(0, float('inf'))

    def test_non_numeric(self):
        with pytest.raises(ValidationError):
            NormalDistribution("zero", 1)


class TestGeometric:

    def test_theoretical_moments(self):
        gen = GeometricDistribution(4.0)
        assert gen.rate == 4.0
        assert gen.mean() == 0.25
        assert gen.standard_deviation() == 0.25
        assert gen.variance() == 0.0625

    def test_inverse_cdf(self):
        gen = GeometricDistribution(2.0)
        _scripted_uniforms(gen, [math.exp(-1.0), 1.0])
        np.testing.assert_allclose(gen.draw(), 0.5, rtol=1e-12)
        assert gen.draw() == 0.0

    def test_draw_moments(self):
        sample = GeometricDistribution(0.5, seed=3).to_sample(20000)
        np.testing.assert_allclose(sample.mean, 2.0, rtol=0.05)
        np.testing.assert_allclose(sample.standard_deviation, 2.0, rtol=0.05)
        assert sample.min >= 0.0

    def test_matches_exponential(self):
        draws = GeometricDistribution(1.5, seed=11).draws(5000)
        assert sp_stats.kstest(draws, 'expon', args=(0, 1 / 1.5)).pvalue > 1e-4

    @pytest.mark.parametrize("rate", [0, -1.0, float('inf')])
    def test_invalid_rate(self, rate):
        with pytest.raises(ValidationError, match="rate"):
            GeometricDistribution(rate)


class TestBatchHelpers:

    def test_draws_shape(self):
        draws = GeometricDistribution(1.0, seed=0).draws(7)
        assert draws.shape == (7,)
        assert draws.dtype == np.float64

    def test_draws_zero(self):
        assert NormalDistribution(seed=0).draws(0).shape == (0,)

    def test_draws_negative(self):
        with pytest.raises(ValidationError, match="count"):
            NormalDistribution(seed=0).draws(-1)

    def test_to_sample(self):
        sample = NormalDistribution(seed=0).to_sample(5)
        assert isinstance(sample, Sample)
        assert sample.n == 5

    def test_draws_follow_single_draw_sequence(self):
        a = NormalDistribution(0, 1, seed=9)
        b = NormalDistribution(0, 1, seed=9)
        singles = [a.draw() for _ in range(5)]
        np.testing.assert_array_equal(b.draws(5), singles)

    @pytest.mark.parametrize("gen", [NormalDistribution(), GeometricDistribution()])
    def test_satisfies_protocol(self, gen):
        assert isinstance(gen, Distribution)
