"""
Comparison of a sampled histogram against a distribution's CDF.

For every bucket the empirical probability ``count / sample_count`` is compared
with the theoretical probability ``cdf(upper_bound) - cdf(lower_bound)``. A bucket
violates the check when the absolute difference is not strictly below the
configured accuracy. All buckets are checked and every violation is collected
into a ``ConformanceReport``; raising is left to ``raise_for_violations`` or
``assert_conformance`` so callers can choose to collect or fail fast.
"""

from __future__ import annotations

import math
from typing import Annotated, Literal

from loguru import logger
from pydantic import Field, computed_field

from distconform.distributions import Distribution
from distconform.errors import ConformanceError, InvalidArgumentError
from distconform.histogram import Histogram
from distconform.settings import settings
from distconform.utils.pydantic_utils import StandardBaseModel

__all__ = [
    "BucketViolation",
    "ConformanceReport",
    "SamplingPath",
    "assert_conformance",
    "check_conformance",
]

SamplingPath = Annotated[
    Literal["sample", "samples"],
    "How samples were drawn: repeated single draws or the lazy sequence",
]


class BucketViolation(StandardBaseModel):
    """
    A bucket whose empirical probability deviates from the theoretical one by at
    least the accuracy of the check.
    """

    bucket_index: int = Field(description="Position of the bucket in the histogram")
    lower_bound: float = Field(description="Exclusive lower bound of the bucket")
    upper_bound: float = Field(description="Inclusive upper bound of the bucket")
    count: int = Field(description="Number of samples in the bucket")
    empirical_probability: float = Field(
        description="Fraction of all samples that fell in the bucket"
    )
    theoretical_probability: float = Field(
        description="cdf(upper_bound) - cdf(lower_bound)"
    )
    deviation: float = Field(
        description="Absolute difference of the empirical and theoretical values"
    )

    def __str__(self) -> str:
        return (
            f"bucket {self.bucket_index} ({self.lower_bound:.6g}, "
            f"{self.upper_bound:.6g}]: empirical={self.empirical_probability:.6f} "
            f"theoretical={self.theoretical_probability:.6f} "
            f"deviation={self.deviation:.6f}"
        )


class ConformanceReport(StandardBaseModel):
    """
    Outcome of checking one distribution's histogram against its CDF.

    Example:
    ::
        report = check_conformance(histogram, normal, accuracy=0.01)
        if not report.passed:
            print(report.summary())
        report.raise_for_violations()
    """

    distribution: str = Field(description="Identity of the checked distribution")
    path: SamplingPath | None = Field(
        default=None, description="The sampling path the samples were drawn with"
    )
    sample_count: int = Field(description="Total number of samples, N")
    bucket_count: int = Field(description="Number of histogram buckets checked")
    accuracy: float = Field(description="Exclusive bound on a bucket's deviation")
    max_deviation: float = Field(description="Largest deviation over all buckets")
    violations: list[BucketViolation] = Field(
        default_factory=list, description="Every bucket that failed the check"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return not self.violations

    def summary(self, max_reported: int | None = None) -> str:
        """
        Describe the outcome, listing violating buckets.

        :param max_reported: Maximum number of violations to list, all if None
        :return: A multi-line, human readable summary
        """
        via = f" via {self.path}()" if self.path else ""
        header = (
            f"{self.distribution}{via}: {self.bucket_count} buckets, "
            f"N={self.sample_count}, accuracy={self.accuracy}, "
            f"max deviation={self.max_deviation:.6f}"
        )
        if self.passed:
            return f"{header}, passed"

        listed = (
            self.violations
            if max_reported is None
            else self.violations[:max_reported]
        )
        lines = [f"{header}, {len(self.violations)} violating bucket(s)"]
        lines.extend(f"  {violation}" for violation in listed)
        if len(listed) < len(self.violations):
            lines.append(f"  ... {len(self.violations) - len(listed)} more")

        return "\n".join(lines)

    def raise_for_violations(self, max_reported: int | None = None):
        """
        :param max_reported: Maximum number of violations in the error message
        :raises ConformanceError: If any bucket violated the check
        """
        if not self.passed:
            raise ConformanceError(self.summary(max_reported), report=self)


def check_conformance(
    histogram: Histogram,
    distribution: Distribution,
    accuracy: float | None = None,
    sample_count: int | None = None,
    path: SamplingPath | None = None,
) -> ConformanceReport:
    """
    Compare every bucket of a histogram with the distribution's CDF.

    :param histogram: Histogram of samples drawn from the distribution
    :param distribution: The distribution whose CDF defines the expected mass
    :param accuracy: Exclusive bound on each bucket's absolute deviation,
        defaults to the configured sample accuracy
    :param sample_count: Total sample count N to normalize counts with,
        defaults to the histogram's data count
    :param path: Optional sampling path recorded on the report
    :return: The report with all violating buckets
    :raises InvalidArgumentError: If accuracy or sample_count is not positive
    """
    accuracy = (
        accuracy if accuracy is not None else settings.conformance.sample_accuracy
    )
    sample_count = sample_count if sample_count is not None else histogram.data_count

    if not accuracy > 0.0:
        raise InvalidArgumentError(f"accuracy must be positive, got {accuracy}")
    if sample_count < 1:
        raise InvalidArgumentError(f"sample_count must be >= 1, got {sample_count}")

    violations: list[BucketViolation] = []
    max_deviation = 0.0

    for index, bucket in enumerate(histogram):
        empirical = bucket.count / sample_count
        theoretical = distribution.cdf(bucket.upper_bound) - distribution.cdf(
            bucket.lower_bound
        )
        deviation = abs(empirical - theoretical)
        # a NaN deviation is the largest, max() would skip it
        max_deviation = (
            deviation if math.isnan(deviation) else max(max_deviation, deviation)
        )

        # written so a NaN from the CDF counts as a violation
        if not deviation < accuracy:
            violations.append(
                BucketViolation(
                    bucket_index=index,
                    lower_bound=bucket.lower_bound,
                    upper_bound=bucket.upper_bound,
                    count=bucket.count,
                    empirical_probability=empirical,
                    theoretical_probability=theoretical,
                    deviation=deviation,
                )
            )

    report = ConformanceReport(
        distribution=str(distribution),
        path=path,
        sample_count=sample_count,
        bucket_count=len(histogram),
        accuracy=accuracy,
        max_deviation=max_deviation,
        violations=violations,
    )

    if report.passed:
        logger.debug(report.summary())
    else:
        logger.warning(report.summary(settings.max_reported_violations))

    return report


def assert_conformance(
    histogram: Histogram,
    distribution: Distribution,
    accuracy: float | None = None,
    sample_count: int | None = None,
    path: SamplingPath | None = None,
) -> ConformanceReport:
    """
    Check a histogram against the distribution's CDF and raise on any violation.

    Takes the same arguments as ``check_conformance``.

    :return: The passing report
    :raises ConformanceError: If any bucket violated the check
    """
    report = check_conformance(
        histogram,
        distribution,
        accuracy=accuracy,
        sample_count=sample_count,
        path=path,
    )
    report.raise_for_violations(settings.max_reported_violations)

    return report
