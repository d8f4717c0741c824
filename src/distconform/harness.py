"""
Orchestration of the conformance checks over a registry of distributions.

The harness holds one representative instance of each discrete and continuous
distribution under test. Before every conformance run it binds a single seeded
random source to all of them and then checks each distribution sequentially, so
a run is reproducible end to end from one seed. Alongside the statistical
checks it verifies the random source contract: a source is always bound, can be
replaced, and cannot be cleared.
"""

from __future__ import annotations

import itertools
import time
from collections.abc import Iterable, Sequence
from typing import Annotated, Literal

import numpy as np
from loguru import logger
from pydantic import Field, computed_field

from distconform.conformance import ConformanceReport, SamplingPath, check_conformance
from distconform.distributions import (
    Bernoulli,
    Beta,
    Binomial,
    Categorical,
    ContinuousDistribution,
    ContinuousUniform,
    DiscreteDistribution,
    DiscreteUniform,
    Distribution,
    Gamma,
    LogNormal,
    Normal,
    StudentT,
    Weibull,
)
from distconform.errors import InvalidArgumentError
from distconform.histogram import Histogram
from distconform.random_source import (
    RandomSource,
    create_random_source,
    validate_random_source,
)
from distconform.settings import ConformanceSettings, settings
from distconform.utils.pydantic_utils import StandardBaseModel

__all__ = [
    "CheckResult",
    "CheckType",
    "ConformanceHarness",
    "HarnessResult",
    "default_continuous_distributions",
    "default_discrete_distributions",
]

CheckType = Annotated[
    Literal[
        "random_source_bound",
        "random_source_settable",
        "null_random_source_rejected",
        "conformance",
    ],
    "Kinds of checks the harness runs against each distribution",
]


def default_discrete_distributions() -> list[DiscreteDistribution]:
    """
    :return: One instance of every discrete distribution with canonical parameters
    """
    return [
        Bernoulli(0.6),
        Binomial(0.7, 10),
        Categorical([0.7, 0.3]),
        DiscreteUniform(1, 10),
    ]


def default_continuous_distributions() -> list[ContinuousDistribution]:
    """
    :return: One instance of every continuous distribution with canonical
        parameters
    """
    return [
        Beta(1.0, 1.0),
        ContinuousUniform(0.0, 1.0),
        Gamma(1.0, 1.0),
        Normal(0.0, 1.0),
        Weibull(1.0, 1.0),
        LogNormal(1.0, 1.0),
        StudentT(0.0, 1.0, 5.0),
    ]


class CheckResult(StandardBaseModel):
    """Outcome of one check against one distribution."""

    check: CheckType = Field(description="The kind of check that was run")
    distribution: str = Field(description="Identity of the checked distribution")
    passed: bool = Field(description="Whether the distribution passed the check")
    path: SamplingPath | None = Field(
        default=None, description="Sampling path, for conformance checks"
    )
    message: str = Field(default="", description="Details about the outcome")
    report: ConformanceReport | None = Field(
        default=None, description="The full report, for conformance checks"
    )


class HarnessResult(StandardBaseModel):
    """Every check result of a harness run and the parameters it ran with."""

    config: ConformanceSettings = Field(
        description="Tolerance parameters and seed used for the run"
    )
    results: list[CheckResult] = Field(default_factory=list)
    duration: float = Field(default=0.0, description="Wall time of the run in seconds")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def failures(self) -> list[CheckResult]:
        return [result for result in self.results if not result.passed]


class ConformanceHarness:
    """
    Runs the random source contract checks and the histogram conformance checks
    over a fixed set of distributions.

    Example:
    ::
        harness = ConformanceHarness(
            config=ConformanceSettings(sample_count=100_000, bucket_count=20)
        )
        result = harness.run()
        for failure in result.failures:
            print(failure.message)

    :param discrete_distributions: Discrete distributions to check, defaults to
        one instance of each built-in discrete distribution
    :param continuous_distributions: Continuous distributions to check, defaults
        to one instance of each built-in continuous distribution
    :param config: Tolerance parameters and seed, defaults to the configured
        settings
    """

    def __init__(
        self,
        discrete_distributions: Iterable[DiscreteDistribution] | None = None,
        continuous_distributions: Iterable[ContinuousDistribution] | None = None,
        config: ConformanceSettings | None = None,
    ):
        self.discrete_distributions: list[DiscreteDistribution] = (
            list(discrete_distributions)
            if discrete_distributions is not None
            else default_discrete_distributions()
        )
        self.continuous_distributions: list[ContinuousDistribution] = (
            list(continuous_distributions)
            if continuous_distributions is not None
            else default_continuous_distributions()
        )
        self.config = config if config is not None else settings.conformance

    @property
    def distributions(self) -> list[Distribution]:
        """
        :return: All distributions, discrete first, in registration order
        """
        return [*self.discrete_distributions, *self.continuous_distributions]

    def select(self, names: Sequence[str]) -> ConformanceHarness:
        """
        Create a harness over a subset of this harness's distributions.

        :param names: Distribution type names to keep, matched case-insensitively
        :return: A new harness sharing the selected instances and the config
        :raises InvalidArgumentError: If a name matches no distribution
        """
        wanted = {name.lower() for name in names}
        known = {dist.name.lower() for dist in self.distributions}
        if unknown := wanted - known:
            raise InvalidArgumentError(
                f"Unknown distribution(s) {sorted(unknown)}, "
                f"expected any of {sorted(known)}"
            )

        return ConformanceHarness(
            discrete_distributions=[
                dist
                for dist in self.discrete_distributions
                if dist.name.lower() in wanted
            ],
            continuous_distributions=[
                dist
                for dist in self.continuous_distributions
                if dist.name.lower() in wanted
            ],
            config=self.config,
        )

    def create_random_source(self) -> RandomSource:
        """
        :return: A new random source seeded from the config
        """
        return create_random_source(self.config.seed, self.config.bit_generator)

    def bind_random_source(self, source: RandomSource) -> RandomSource:
        """
        Bind one shared random source to every distribution.

        :param source: The random source to share
        :return: The bound source
        :raises InvalidArgumentError: If the source is not a valid random source
        """
        validate_random_source(source)
        for dist in self.distributions:
            dist.random_source = source
        logger.debug(f"Bound shared random source to {len(self.distributions)} dists")

        return source

    def validate_random_sources(self) -> list[CheckResult]:
        """
        Check that every distribution has a random source bound.

        :return: One result per distribution
        """
        return [
            CheckResult(
                check="random_source_bound",
                distribution=str(dist),
                passed=dist.random_source is not None,
                message=(
                    "random source is bound"
                    if dist.random_source is not None
                    else "random source is unset"
                ),
            )
            for dist in self.distributions
        ]

    def check_can_set_random_source(self) -> list[CheckResult]:
        """
        Check that every distribution accepts a new, valid random source.

        :return: One result per distribution
        """
        results = []
        for dist in self.distributions:
            source = create_random_source()
            try:
                dist.random_source = source
            except InvalidArgumentError as err:
                results.append(
                    CheckResult(
                        check="random_source_settable",
                        distribution=str(dist),
                        passed=False,
                        message=f"rejected a valid random source: {err}",
                    )
                )
                continue

            replaced = dist.random_source is source
            results.append(
                CheckResult(
                    check="random_source_settable",
                    distribution=str(dist),
                    passed=replaced,
                    message=(
                        "random source replaced"
                        if replaced
                        else "assigned random source was not bound"
                    ),
                )
            )

        return results

    def check_rejects_null_random_source(self) -> list[CheckResult]:
        """
        Check that clearing the random source raises InvalidArgumentError and
        leaves the previous source bound.

        :return: One result per distribution
        """
        results = []
        for dist in self.distributions:
            previous = dist.random_source
            try:
                dist.random_source = None  # type: ignore[assignment]
            except InvalidArgumentError:
                kept = dist.random_source is previous
                message = (
                    "rejected None" if kept else "rejected None but lost its source"
                )
            else:
                kept = False
                message = "assigning None did not raise InvalidArgumentError"

            results.append(
                CheckResult(
                    check="null_random_source_rejected",
                    distribution=str(dist),
                    passed=kept,
                    message=message,
                )
            )

        return results

    def draw_samples(
        self,
        distribution: Distribution,
        path: SamplingPath,
        count: int | None = None,
    ) -> np.ndarray:
        """
        Draw a sample population through one of the two sampling paths.

        :param distribution: The distribution to sample
        :param path: "sample" to call sample() count times, "samples" to take
            count values from one samples() sequence
        :param count: Number of samples, defaults to the configured sample count
        :return: The samples as a float array
        :raises InvalidArgumentError: If the path is unknown or count < 1
        """
        count = count if count is not None else self.config.sample_count
        if count < 1:
            raise InvalidArgumentError(f"count must be >= 1, got {count}")

        if path == "sample":
            draws = (distribution.sample() for _ in range(count))
        elif path == "samples":
            draws = itertools.islice(distribution.samples(), count)
        else:
            raise InvalidArgumentError(
                f"path must be 'sample' or 'samples', got {path!r}"
            )

        return np.fromiter(draws, dtype=float, count=count)

    def check_distribution(
        self, distribution: Distribution, path: SamplingPath
    ) -> ConformanceReport:
        """
        Sample a distribution, bucket the samples, and compare against its CDF.

        Uses whichever random source is bound to the distribution.

        :param distribution: The distribution to check
        :param path: The sampling path to draw with
        :return: The conformance report
        """
        start = time.perf_counter()
        samples = self.draw_samples(distribution, path)
        histogram = Histogram.from_samples(samples, self.config.bucket_count)
        report = check_conformance(
            histogram,
            distribution,
            accuracy=self.config.sample_accuracy,
            sample_count=samples.size,
            path=path,
        )
        logger.info(
            f"Checked {distribution} via {path}() in "
            f"{time.perf_counter() - start:.2f}s: "
            f"{'passed' if report.passed else 'failed'}"
        )

        return report

    def run_conformance(self, path: SamplingPath) -> list[ConformanceReport]:
        """
        Bind a freshly seeded shared random source and check every distribution.

        :param path: The sampling path to draw with
        :return: One report per distribution, discrete first
        """
        self.bind_random_source(self.create_random_source())
        logger.info(
            f"Running {path}() conformance over {len(self.distributions)} "
            f"distributions with N={self.config.sample_count}, "
            f"buckets={self.config.bucket_count}, "
            f"accuracy={self.config.sample_accuracy}, seed={self.config.seed}"
        )

        return [self.check_distribution(dist, path) for dist in self.distributions]

    def run(
        self, paths: Sequence[SamplingPath] = ("sample", "samples")
    ) -> HarnessResult:
        """
        Run the random source contract checks, then the conformance checks for
        each requested sampling path, then check again that every distribution
        still has a random source bound.

        :param paths: Sampling paths to run conformance checks for
        :return: Every check result
        """
        start = time.perf_counter()
        results = [
            *self.validate_random_sources(),
            *self.check_can_set_random_source(),
            *self.check_rejects_null_random_source(),
        ]

        for path in paths:
            results.extend(
                CheckResult(
                    check="conformance",
                    distribution=report.distribution,
                    passed=report.passed,
                    path=path,
                    message=report.summary(settings.max_reported_violations),
                    report=report,
                )
                for report in self.run_conformance(path)
            )
        results.extend(self.validate_random_sources())

        result = HarnessResult(
            config=self.config,
            results=results,
            duration=time.perf_counter() - start,
        )
        if result.passed:
            logger.info(f"All {len(results)} checks passed in {result.duration:.2f}s")
        else:
            logger.error(
                f"{len(result.failures)} of {len(results)} checks failed "
                f"in {result.duration:.2f}s"
            )

        return result
