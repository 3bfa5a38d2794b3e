"""
Tests for the top-level package surface.
"""

import samplestats


def test_version():
    assert samplestats.__version__ == "0.1.0"


def test_public_names():
    for name in samplestats.__all__:
        assert hasattr(samplestats, name)


def test_containers_interoperate():
    gen = samplestats.NormalDistribution(0, 1, seed=2)
    xs = gen.draws(50)
    pair = samplestats.CorrelatedPair(xs, 3.0 * xs + 1.0)
    fit = pair.line_of_best_fit
    assert abs(fit.slope - 3.0) < 1e-9
    assert abs(fit.intercept - 1.0) < 1e-9
    multi = samplestats.MultiSample([xs, 2.0 * xs])
    assert abs(multi.mean_of(1) - 2.0 * pair.x.mean) < 1e-12
