"""
Discrete distributions sampled from numpy and evaluated with scipy.stats.

Each distribution draws from its bound random source and evaluates its CDF with
a frozen scipy.stats distribution, which floors non-integer arguments so that
``cdf(upper) - cdf(lower)`` is the probability mass in ``(lower, upper]``.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy import stats

from distconform.distributions.base import DiscreteDistribution, check_parameter
from distconform.random_source import RandomSource

__all__ = ["Bernoulli", "Binomial", "Categorical", "DiscreteUniform"]


class Bernoulli(DiscreteDistribution):
    """
    Single trial taking the value 1 with probability ``p`` and 0 otherwise.

    :param p: Probability of success, in [0, 1]
    """

    def __init__(self, p: float, random_source: RandomSource | None = None):
        check_parameter(0.0 <= p <= 1.0, f"p must be in [0, 1], got {p}")
        super().__init__(random_source)
        self.p = float(p)
        self._rv = stats.bernoulli(self.p)

    @property
    def parameters(self) -> dict[str, float | int | list[float]]:
        return {"p": self.p}

    def cdf(self, x: float) -> float:
        return float(self._rv.cdf(x))

    def sample(self) -> int:
        return int(self.random_source.random() < self.p)


class Binomial(DiscreteDistribution):
    """
    Number of successes in ``n`` independent trials with success probability ``p``.

    :param p: Probability of success of each trial, in [0, 1]
    :param n: Number of trials, a non-negative integer
    """

    def __init__(self, p: float, n: int, random_source: RandomSource | None = None):
        check_parameter(0.0 <= p <= 1.0, f"p must be in [0, 1], got {p}")
        check_parameter(
            isinstance(n, int | np.integer) and n >= 0,
            f"n must be a non-negative integer, got {n}",
        )
        super().__init__(random_source)
        self.p = float(p)
        self.n = int(n)
        self._rv = stats.binom(self.n, self.p)

    @property
    def parameters(self) -> dict[str, float | int | list[float]]:
        return {"p": self.p, "n": self.n}

    def cdf(self, x: float) -> float:
        return float(self._rv.cdf(x))

    def sample(self) -> int:
        return int(self.random_source.binomial(self.n, self.p))


class Categorical(DiscreteDistribution):
    """
    Distribution over the indices ``0..k-1`` with the given relative weights.

    Weights are normalized to probabilities, so they need not sum to one.

    :param probabilities: Non-negative weights, one per category, with a
        positive sum
    """

    def __init__(
        self,
        probabilities: Sequence[float],
        random_source: RandomSource | None = None,
    ):
        weights = np.asarray(probabilities, dtype=float)
        check_parameter(
            weights.ndim == 1 and weights.size > 0,
            "probabilities must be a non-empty sequence",
        )
        check_parameter(
            bool(np.all(np.isfinite(weights)) and np.all(weights >= 0.0)),
            "probabilities must be finite and non-negative",
        )
        check_parameter(weights.sum() > 0.0, "probabilities must not all be zero")
        super().__init__(random_source)
        self.probabilities = weights / weights.sum()
        self._cumulative = np.cumsum(self.probabilities)
        self._rv = stats.rv_discrete(
            values=(np.arange(self.probabilities.size), self.probabilities)
        )

    @property
    def parameters(self) -> dict[str, float | int | list[float]]:
        return {"probabilities": [float(prob) for prob in self.probabilities]}

    def cdf(self, x: float) -> float:
        return float(self._rv.cdf(x))

    def sample(self) -> int:
        # inverse CDF on a single uniform draw, clipped against rounding at the top
        index = int(
            np.searchsorted(self._cumulative, self.random_source.random(), "right")
        )
        return min(index, self.probabilities.size - 1)


class DiscreteUniform(DiscreteDistribution):
    """
    Uniform distribution over the integers ``lower..upper`` inclusive.

    :param lower: Smallest value in the support
    :param upper: Largest value in the support, at least ``lower``
    """

    def __init__(
        self, lower: int, upper: int, random_source: RandomSource | None = None
    ):
        check_parameter(
            isinstance(lower, int | np.integer) and isinstance(upper, int | np.integer),
            f"lower and upper must be integers, got {lower} and {upper}",
        )
        check_parameter(lower <= upper, f"lower must be <= upper, got {lower} > {upper}")
        super().__init__(random_source)
        self.lower = int(lower)
        self.upper = int(upper)
        self._rv = stats.randint(self.lower, self.upper + 1)

    @property
    def parameters(self) -> dict[str, float | int | list[float]]:
        return {"lower": self.lower, "upper": self.upper}

    def cdf(self, x: float) -> float:
        return float(self._rv.cdf(x))

    def sample(self) -> int:
        return int(self.random_source.integers(self.lower, self.upper, endpoint=True))
