"""
Equal-width histograms over sampled data for comparison against a CDF.

Buckets are lower-exclusive and upper-inclusive, ``(lower_bound, upper_bound]``,
and the first bucket's lower bound is the next float below the smallest sample so
that every sample falls in exactly one bucket. With that rule the theoretical
probability of a bucket is ``cdf(upper_bound) - cdf(lower_bound)`` for both
discrete and continuous variables.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import overload

import numpy as np
from loguru import logger
from pydantic import Field

from distconform.errors import InvalidArgumentError
from distconform.utils.pydantic_utils import StandardBaseModel

__all__ = ["Bucket", "Histogram"]


class Bucket(StandardBaseModel):
    """
    A half-open interval ``(lower_bound, upper_bound]`` and the number of samples
    that fell inside it.
    """

    lower_bound: float = Field(description="Exclusive lower bound of the bucket")
    upper_bound: float = Field(description="Inclusive upper bound of the bucket")
    count: int = Field(description="Number of samples in the bucket", ge=0)

    @property
    def width(self) -> float:
        return self.upper_bound - self.lower_bound

    def contains(self, value: float) -> bool:
        """
        :param value: The value to test
        :return: True if lower_bound < value <= upper_bound
        """
        return self.lower_bound < value <= self.upper_bound


class Histogram(Sequence[Bucket]):
    """
    Ordered, contiguous buckets partitioning the observed range of a sample set.

    Built with ``from_samples``, which splits ``[min, max]`` of the data into
    ``bucket_count`` equal-width buckets. If every sample has the same value the
    range has zero width and the histogram instead holds a single bucket
    containing all samples.

    Example:
    ::
        histogram = Histogram.from_samples([0.1, 0.4, 0.4, 0.9], bucket_count=2)
        [bucket.count for bucket in histogram]  # [3, 1]

    :param buckets: The ordered buckets, each upper bound equal to the next
        bucket's lower bound
    :param data_count: Total number of samples the buckets were built from
    """

    def __init__(self, buckets: Sequence[Bucket], data_count: int):
        if not buckets:
            raise InvalidArgumentError("a histogram requires at least one bucket")

        self._buckets = tuple(buckets)
        self._upper_bounds = np.array(
            [bucket.upper_bound for bucket in self._buckets], dtype=float
        )
        self.data_count = data_count

    @classmethod
    def from_samples(
        cls, samples: Iterable[float] | np.ndarray, bucket_count: int
    ) -> Histogram:
        """
        Bucket a finite population of samples.

        :param samples: Finite array, sequence, or iterator of real values;
            unbounded iterators must be truncated before they are passed in
        :param bucket_count: Number of equal-width buckets, at least 1
        :return: The populated histogram
        :raises InvalidArgumentError: If bucket_count is less than 1, or the
            samples are empty or contain non-finite values
        """
        if not isinstance(bucket_count, int | np.integer) or bucket_count < 1:
            raise InvalidArgumentError(
                f"bucket_count must be an integer >= 1, got {bucket_count}"
            )

        data = (
            np.asarray(samples, dtype=float)
            if isinstance(samples, np.ndarray | Sequence)
            else np.fromiter(samples, dtype=float)
        ).ravel()

        if data.size == 0:
            raise InvalidArgumentError("cannot build a histogram from zero samples")
        if not np.all(np.isfinite(data)):
            raise InvalidArgumentError("samples must all be finite")

        minimum = float(data.min())
        maximum = float(data.max())
        first_lower = float(np.nextafter(minimum, -np.inf))

        if minimum == maximum:
            logger.debug(
                f"All {data.size} samples equal {minimum}, "
                "using a single degenerate bucket"
            )
            return cls(
                [Bucket(lower_bound=first_lower, upper_bound=maximum, count=data.size)],
                data_count=int(data.size),
            )

        bucket_count = int(bucket_count)
        # ranges wider than the largest float are bucketed at half scale
        scale = 1.0 if np.isfinite(maximum - minimum) else 0.5
        width = (maximum * scale - minimum * scale) / bucket_count
        steps = np.arange(bucket_count + 1, dtype=float)
        edges = (minimum * scale + width * steps) / scale
        edges[-1] = maximum
        counts = np.bincount(
            cls._bucket_indices(data, edges, minimum, width, scale),
            minlength=bucket_count,
        )

        buckets = [
            Bucket(
                lower_bound=first_lower if index == 0 else float(edges[index]),
                upper_bound=float(edges[index + 1]),
                count=int(counts[index]),
            )
            for index in range(bucket_count)
        ]
        logger.debug(
            f"Built histogram of {data.size} samples over [{minimum}, {maximum}] "
            f"with {bucket_count} buckets"
        )

        return cls(buckets, data_count=int(data.size))

    @staticmethod
    def _bucket_indices(
        data: np.ndarray,
        edges: np.ndarray,
        minimum: float,
        width: float,
        scale: float,
    ) -> np.ndarray:
        bucket_count = edges.size - 1
        indices = np.clip(
            np.ceil((data * scale - minimum * scale) / width).astype(np.int64) - 1,
            0,
            bucket_count - 1,
        )

        # the closed form can land one bucket off at an edge due to rounding,
        # shift until each value agrees with the stored edges
        while True:
            down = (indices > 0) & (data <= edges[indices])
            up = (indices < bucket_count - 1) & (data > edges[indices + 1])
            if not (down.any() or up.any()):
                return indices
            indices[down] -= 1
            indices[up] += 1

    @property
    def buckets(self) -> tuple[Bucket, ...]:
        return self._buckets

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    @property
    def lower_bound(self) -> float:
        return self._buckets[0].lower_bound

    @property
    def upper_bound(self) -> float:
        return self._buckets[-1].upper_bound

    def bucket_index_of(self, value: float) -> int:
        """
        Find the index of the bucket containing a value.

        :param value: The value to locate
        :return: Index of the bucket with lower_bound < value <= upper_bound
        :raises InvalidArgumentError: If the value is outside the histogram
        """
        if not self.lower_bound < value <= self.upper_bound:
            raise InvalidArgumentError(
                f"{value} is outside the histogram range "
                f"({self.lower_bound}, {self.upper_bound}]"
            )

        return int(np.searchsorted(self._upper_bounds, value, side="left"))

    def bucket_of(self, value: float) -> Bucket:
        """
        :param value: The value to locate
        :return: The bucket containing the value
        :raises InvalidArgumentError: If the value is outside the histogram
        """
        return self._buckets[self.bucket_index_of(value)]

    @overload
    def __getitem__(self, index: int) -> Bucket: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Bucket, ...]: ...

    def __getitem__(self, index):
        return self._buckets[index]

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return (
            f"Histogram(bucket_count={self.bucket_count}, "
            f"data_count={self.data_count}, "
            f"range=({self.lower_bound}, {self.upper_bound}])"
        )
