"""
Continuous distributions sampled from numpy and evaluated with scipy.stats.
"""

from __future__ import annotations

import math

from scipy import stats

from distconform.distributions.base import ContinuousDistribution, check_parameter
from distconform.random_source import RandomSource

__all__ = [
    "Beta",
    "ContinuousUniform",
    "Gamma",
    "LogNormal",
    "Normal",
    "StudentT",
    "Weibull",
]


def _check_positive(name: str, value: float):
    check_parameter(
        math.isfinite(value) and value > 0.0,
        f"{name} must be a finite positive number, got {value}",
    )


def _check_finite(name: str, value: float):
    check_parameter(math.isfinite(value), f"{name} must be finite, got {value}")


class Beta(ContinuousDistribution):
    """
    Beta distribution on [0, 1].

    :param a: First shape parameter, positive
    :param b: Second shape parameter, positive
    """

    def __init__(self, a: float, b: float, random_source: RandomSource | None = None):
        _check_positive("a", a)
        _check_positive("b", b)
        super().__init__(random_source)
        self.a = float(a)
        self.b = float(b)
        self._rv = stats.beta(self.a, self.b)

    @property
    def parameters(self) -> dict[str, float | int | list[float]]:
        return {"a": self.a, "b": self.b}

    def cdf(self, x: float) -> float:
        return float(self._rv.cdf(x))

    def sample(self) -> float:
        return float(self.random_source.beta(self.a, self.b))


class ContinuousUniform(ContinuousDistribution):
    """
    Uniform distribution on [lower, upper].

    A zero-width interval is allowed and degenerates to a point mass at ``lower``.

    :param lower: Lower end of the interval
    :param upper: Upper end of the interval, at least ``lower``
    """

    def __init__(
        self, lower: float, upper: float, random_source: RandomSource | None = None
    ):
        _check_finite("lower", lower)
        _check_finite("upper", upper)
        check_parameter(lower <= upper, f"lower must be <= upper, got {lower} > {upper}")
        super().__init__(random_source)
        self.lower = float(lower)
        self.upper = float(upper)

    @property
    def parameters(self) -> dict[str, float | int | list[float]]:
        return {"lower": self.lower, "upper": self.upper}

    def cdf(self, x: float) -> float:
        if x < self.lower:
            return 0.0
        if x >= self.upper:
            return 1.0
        return (x - self.lower) / (self.upper - self.lower)

    def sample(self) -> float:
        return float(self.random_source.uniform(self.lower, self.upper))


class Gamma(ContinuousDistribution):
    """
    Gamma distribution parameterized by shape and rate (inverse scale).

    :param shape: Shape parameter, positive
    :param rate: Rate parameter, positive
    """

    def __init__(
        self, shape: float, rate: float, random_source: RandomSource | None = None
    ):
        _check_positive("shape", shape)
        _check_positive("rate", rate)
        super().__init__(random_source)
        self.shape = float(shape)
        self.rate = float(rate)
        self._rv = stats.gamma(self.shape, scale=1.0 / self.rate)

    @property
    def parameters(self) -> dict[str, float | int | list[float]]:
        return {"shape": self.shape, "rate": self.rate}

    def cdf(self, x: float) -> float:
        return float(self._rv.cdf(x))

    def sample(self) -> float:
        return float(self.random_source.gamma(self.shape, 1.0 / self.rate))


class Normal(ContinuousDistribution):
    """
    Normal distribution.

    :param mean: Mean of the distribution
    :param std_dev: Standard deviation, positive
    """

    def __init__(
        self, mean: float, std_dev: float, random_source: RandomSource | None = None
    ):
        _check_finite("mean", mean)
        _check_positive("std_dev", std_dev)
        super().__init__(random_source)
        self.mean = float(mean)
        self.std_dev = float(std_dev)
        self._rv = stats.norm(loc=self.mean, scale=self.std_dev)

    @property
    def parameters(self) -> dict[str, float | int | list[float]]:
        return {"mean": self.mean, "std_dev": self.std_dev}

    def cdf(self, x: float) -> float:
        return float(self._rv.cdf(x))

    def sample(self) -> float:
        return float(self.random_source.normal(self.mean, self.std_dev))


class Weibull(ContinuousDistribution):
    """
    Weibull distribution on [0, inf).

    :param shape: Shape parameter, positive
    :param scale: Scale parameter, positive
    """

    def __init__(
        self, shape: float, scale: float, random_source: RandomSource | None = None
    ):
        _check_positive("shape", shape)
        _check_positive("scale", scale)
        super().__init__(random_source)
        self.shape = float(shape)
        self.scale = float(scale)
        self._rv = stats.weibull_min(self.shape, scale=self.scale)

    @property
    def parameters(self) -> dict[str, float | int | list[float]]:
        return {"shape": self.shape, "scale": self.scale}

    def cdf(self, x: float) -> float:
        return float(self._rv.cdf(x))

    def sample(self) -> float:
        return float(self.scale * self.random_source.weibull(self.shape))


class LogNormal(ContinuousDistribution):
    """
    Distribution of ``exp(Y)`` where ``Y`` is normal with mean ``mu`` and
    standard deviation ``sigma``.

    :param mu: Mean of the underlying normal distribution
    :param sigma: Standard deviation of the underlying normal distribution,
        positive
    """

    def __init__(
        self, mu: float, sigma: float, random_source: RandomSource | None = None
    ):
        _check_finite("mu", mu)
        _check_positive("sigma", sigma)
        super().__init__(random_source)
        self.mu = float(mu)
        self.sigma = float(sigma)
        self._rv = stats.lognorm(self.sigma, scale=math.exp(self.mu))

    @property
    def parameters(self) -> dict[str, float | int | list[float]]:
        return {"mu": self.mu, "sigma": self.sigma}

    def cdf(self, x: float) -> float:
        return float(self._rv.cdf(x))

    def sample(self) -> float:
        return float(self.random_source.lognormal(self.mu, self.sigma))


class StudentT(ContinuousDistribution):
    """
    Location-scale Student's t distribution.

    :param location: Location parameter
    :param scale: Scale parameter, positive
    :param dof: Degrees of freedom, positive
    """

    def __init__(
        self,
        location: float,
        scale: float,
        dof: float,
        random_source: RandomSource | None = None,
    ):
        _check_finite("location", location)
        _check_positive("scale", scale)
        _check_positive("dof", dof)
        super().__init__(random_source)
        self.location = float(location)
        self.scale = float(scale)
        self.dof = float(dof)
        self._rv = stats.t(self.dof, loc=self.location, scale=self.scale)

    @property
    def parameters(self) -> dict[str, float | int | list[float]]:
        return {"location": self.location, "scale": self.scale, "dof": self.dof}

    def cdf(self, x: float) -> float:
        return float(self._rv.cdf(x))

    def sample(self) -> float:
        return float(
            self.location + self.scale * self.random_source.standard_t(self.dof)
        )
