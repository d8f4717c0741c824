"""
Capability contract shared by every distribution under test.

A distribution exposes a bound random source, a cumulative distribution function,
and two sampling paths: ``sample`` for a single draw and ``samples`` for a lazy,
unbounded sequence of draws. Both paths consume the bound random source in the
same way, so truncating ``samples`` to N values is statistically equivalent to
calling ``sample`` N times.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Annotated, Generic, Literal, TypeVar

from distconform.errors import InvalidArgumentError
from distconform.random_source import (
    RandomSource,
    create_random_source,
    validate_random_source,
)

__all__ = [
    "ContinuousDistribution",
    "DiscreteDistribution",
    "Distribution",
    "DistributionKind",
    "SampleT",
    "check_parameter",
]

SampleT = TypeVar("SampleT", int, float)

DistributionKind = Annotated[
    Literal["discrete", "continuous"],
    "Whether a distribution produces integer-valued or real-valued samples",
]


def check_parameter(condition: bool, message: str):
    """
    Raise an InvalidArgumentError with the given message if condition is False.

    :param condition: Result of the parameter validation
    :param message: Description of the constraint that was violated
    :raises InvalidArgumentError: If the condition does not hold
    """
    if not condition:
        raise InvalidArgumentError(message)


class Distribution(ABC, Generic[SampleT]):
    """
    Abstract base for a univariate distribution with a pluggable random source.

    Subclasses implement ``cdf`` and ``sample``; ``samples`` is derived from
    ``sample``. A freshly constructed distribution binds its own unseeded source,
    so ``random_source`` is never unset.

    Example:
    ::
        normal = Normal(0.0, 1.0)
        normal.random_source = create_random_source(seed=1)
        first = normal.sample()
        batch = list(itertools.islice(normal.samples(), 100))

    :cvar kind: Whether the distribution is discrete or continuous
    """

    kind: DistributionKind

    def __init__(self, random_source: RandomSource | None = None):
        self._random_source: RandomSource = (
            validate_random_source(random_source)
            if random_source is not None
            else create_random_source()
        )

    @property
    def random_source(self) -> RandomSource:
        """
        :return: The random source currently used for sampling
        """
        return self._random_source

    @random_source.setter
    def random_source(self, source: RandomSource):
        # validated before assignment so a rejected source leaves the old one bound
        self._random_source = validate_random_source(source)

    @property
    def name(self) -> str:
        """
        :return: The distribution's type name, e.g. "Normal"
        """
        return self.__class__.__name__

    @property
    @abstractmethod
    def parameters(self) -> dict[str, float | int | list[float]]:
        """
        :return: The parameters the distribution was constructed with, by name
        """
        ...

    @abstractmethod
    def cdf(self, x: float) -> float:
        """
        Evaluate the cumulative distribution function.

        :param x: The point to evaluate at
        :return: P(X <= x), in [0, 1]
        """
        ...

    @abstractmethod
    def sample(self) -> SampleT:
        """
        Draw a single value from the bound random source.

        :return: The sampled value
        """
        ...

    def samples(self) -> Iterator[SampleT]:
        """
        Lazily draw an unbounded sequence of values.

        Every call returns a new single-pass generator. Each value is drawn with
        ``sample`` from whichever random source is bound at that point, so the
        generator must be truncated, e.g. with ``itertools.islice``.

        :return: A generator yielding one sample per step
        """
        while True:
            yield self.sample()

    def __str__(self) -> str:
        params = ", ".join(f"{key}={value}" for key, value in self.parameters.items())
        return f"{self.name}({params})"

    def __repr__(self) -> str:
        return str(self)


class DiscreteDistribution(Distribution[int]):
    """Base for distributions whose samples are integers."""

    kind: DistributionKind = "discrete"


class ContinuousDistribution(Distribution[float]):
    """Base for distributions whose samples are real numbers."""

    kind: DistributionKind = "continuous"
