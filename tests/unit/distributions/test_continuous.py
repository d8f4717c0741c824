from __future__ import annotations

import math

import numpy as np
import pytest

from distconform import (
    Beta,
    ContinuousUniform,
    Gamma,
    InvalidArgumentError,
    LogNormal,
    Normal,
    StudentT,
    Weibull,
    create_random_source,
)


@pytest.mark.smoke
@pytest.mark.parametrize(
    ("distribution", "x", "expected"),
    [
        (Beta(1.0, 1.0), 0.3, 0.3),
        (Beta(2.0, 2.0), 0.5, 0.5),
        (ContinuousUniform(0.0, 1.0), 0.25, 0.25),
        (ContinuousUniform(-2.0, 2.0), 3.0, 1.0),
        (ContinuousUniform(-2.0, 2.0), -3.0, 0.0),
        (Gamma(1.0, 1.0), 1.0, 1.0 - math.exp(-1.0)),
        (Gamma(1.0, 2.0), 1.0, 1.0 - math.exp(-2.0)),
        (Normal(0.0, 1.0), 0.0, 0.5),
        (Normal(3.0, 2.0), 3.0, 0.5),
        (Weibull(1.0, 1.0), 1.0, 1.0 - math.exp(-1.0)),
        (LogNormal(1.0, 1.0), math.e, 0.5),
        (LogNormal(1.0, 1.0), -1.0, 0.0),
        (StudentT(0.0, 1.0, 5.0), 0.0, 0.5),
        (StudentT(2.0, 3.0, 5.0), 2.0, 0.5),
    ],
    ids=str,
)
def test_cdf_values(distribution, x, expected):
    assert distribution.cdf(x) == pytest.approx(expected)


@pytest.mark.sanity
@pytest.mark.parametrize(
    ("factory", "args"),
    [
        (Beta, (0.0, 1.0)),
        (Beta, (1.0, -1.0)),
        (ContinuousUniform, (2.0, 1.0)),
        (ContinuousUniform, (0.0, float("inf"))),
        (Gamma, (1.0, 0.0)),
        (Gamma, (-1.0, 1.0)),
        (Normal, (0.0, 0.0)),
        (Normal, (float("nan"), 1.0)),
        (Weibull, (-1.0, 1.0)),
        (Weibull, (1.0, 0.0)),
        (LogNormal, (0.0, -1.0)),
        (StudentT, (0.0, 1.0, 0.0)),
        (StudentT, (0.0, -1.0, 5.0)),
    ],
)
def test_invalid_parameters(factory, args):
    with pytest.raises(InvalidArgumentError):
        factory(*args)


class TestContinuousUniform:
    @pytest.mark.smoke
    def test_initialization(self):
        dist = ContinuousUniform(0.0, 1.0)
        assert dist.parameters == {"lower": 0.0, "upper": 1.0}
        assert str(dist) == "ContinuousUniform(lower=0.0, upper=1.0)"

    @pytest.mark.sanity
    def test_sample_range(self):
        dist = ContinuousUniform(2.0, 3.0, random_source=create_random_source(1))
        values = np.array([dist.sample() for _ in range(5_000)])
        assert values.min() >= 2.0
        assert values.max() <= 3.0
        assert values.mean() == pytest.approx(2.5, abs=0.02)

    @pytest.mark.sanity
    def test_degenerate(self):
        dist = ContinuousUniform(2.0, 2.0)
        assert dist.sample() == 2.0
        assert dist.cdf(1.999) == 0.0
        assert dist.cdf(2.0) == 1.0


class TestMoments:
    @pytest.mark.sanity
    @pytest.mark.parametrize(
        ("distribution", "mean", "tolerance"),
        [
            (Beta(2.0, 5.0), 2.0 / 7.0, 0.01),
            (Gamma(2.0, 4.0), 0.5, 0.02),
            (Normal(1.0, 2.0), 1.0, 0.07),
            (Weibull(1.0, 2.0), 2.0, 0.07),
            (LogNormal(0.0, 0.5), math.exp(0.125), 0.03),
            (StudentT(3.0, 1.0, 5.0), 3.0, 0.05),
        ],
        ids=str,
    )
    def test_sample_mean(self, distribution, mean, tolerance):
        distribution.random_source = create_random_source(seed=1)
        values = np.array([distribution.sample() for _ in range(20_000)])
        assert values.mean() == pytest.approx(mean, abs=tolerance)

    @pytest.mark.sanity
    def test_supports(self):
        source = create_random_source(seed=3)
        beta = Beta(0.5, 0.5, random_source=source)
        gamma = Gamma(1.0, 1.0, random_source=source)
        weibull = Weibull(1.5, 1.0, random_source=source)
        lognormal = LogNormal(1.0, 1.0, random_source=source)
        for _ in range(1_000):
            assert 0.0 <= beta.sample() <= 1.0
            assert gamma.sample() >= 0.0
            assert weibull.sample() >= 0.0
            assert lognormal.sample() > 0.0
