from __future__ import annotations

import itertools
import math
from collections.abc import Iterator

import numpy as np
import pytest

from distconform import (
    ContinuousDistribution,
    ContinuousUniform,
    DiscreteDistribution,
    Distribution,
    InvalidArgumentError,
    create_random_source,
    default_continuous_distributions,
    default_discrete_distributions,
)


def all_distributions() -> list[Distribution]:
    return [*default_discrete_distributions(), *default_continuous_distributions()]


@pytest.fixture(params=all_distributions(), ids=lambda dist: dist.name)
def distribution(request) -> Distribution:
    return request.param


class TestDistributionBase:
    @pytest.mark.smoke
    def test_class_signatures(self):
        """Test the abstract contract of Distribution."""
        for method in ("cdf", "sample", "samples", "parameters", "random_source"):
            assert hasattr(Distribution, method)
        assert isinstance(Distribution.random_source, property)
        assert issubclass(DiscreteDistribution, Distribution)
        assert issubclass(ContinuousDistribution, Distribution)
        assert DiscreteDistribution.kind == "discrete"
        assert ContinuousDistribution.kind == "continuous"

    @pytest.mark.sanity
    def test_invalid_implementation(self):
        """Test that a subclass without cdf and sample cannot be constructed."""

        class InvalidDistribution(ContinuousDistribution):
            pass

        with pytest.raises(TypeError):
            InvalidDistribution()  # type: ignore[abstract]

    @pytest.mark.smoke
    def test_concrete_implementation(self):
        """Test that a minimal subclass satisfies the contract."""

        class PointMass(DiscreteDistribution):
            @property
            def parameters(self):
                return {"value": 3}

            def cdf(self, x: float) -> float:
                return 1.0 if x >= 3 else 0.0

            def sample(self) -> int:
                self.random_source.random()
                return 3

        dist = PointMass()
        assert dist.random_source is not None
        assert dist.sample() == 3
        assert list(itertools.islice(dist.samples(), 4)) == [3, 3, 3, 3]
        assert str(dist) == "PointMass(value=3)"


class TestRandomSourceContract:
    @pytest.mark.smoke
    def test_bound_after_construction(self, distribution: Distribution):
        assert distribution.random_source is not None
        assert isinstance(distribution.random_source, np.random.Generator)

    @pytest.mark.smoke
    def test_constructed_with_source(self):
        source = create_random_source(seed=3)
        dist = ContinuousUniform(0.0, 1.0, random_source=source)
        assert dist.random_source is source

    @pytest.mark.smoke
    def test_set_random_source(self, distribution: Distribution):
        source = create_random_source(seed=7)
        distribution.random_source = source
        assert distribution.random_source is source

    @pytest.mark.sanity
    def test_set_none_raises_and_keeps_previous(self, distribution: Distribution):
        previous = distribution.random_source
        with pytest.raises(InvalidArgumentError):
            distribution.random_source = None  # type: ignore[assignment]
        assert distribution.random_source is previous

    @pytest.mark.sanity
    def test_set_invalid_type_raises(self, distribution: Distribution):
        previous = distribution.random_source
        with pytest.raises(InvalidArgumentError):
            distribution.random_source = 42  # type: ignore[assignment]
        assert distribution.random_source is previous

    @pytest.mark.sanity
    def test_invalid_error_is_value_error(self, distribution: Distribution):
        with pytest.raises(ValueError, match="must not be None"):
            distribution.random_source = None  # type: ignore[assignment]


class TestSamplingContract:
    @pytest.mark.smoke
    def test_sample_type(self, distribution: Distribution):
        value = distribution.sample()
        if distribution.kind == "discrete":
            assert isinstance(value, int)
        else:
            assert isinstance(value, float)

    @pytest.mark.smoke
    def test_samples_is_lazy_generator(self, distribution: Distribution):
        first = distribution.samples()
        second = distribution.samples()
        assert isinstance(first, Iterator)
        assert iter(first) is first
        assert first is not second
        assert len(list(itertools.islice(first, 25))) == 25

    @pytest.mark.sanity
    def test_sample_and_samples_consume_source_identically(
        self, distribution: Distribution
    ):
        distribution.random_source = create_random_source(seed=11)
        singles = [distribution.sample() for _ in range(200)]

        distribution.random_source = create_random_source(seed=11)
        lazy = list(itertools.islice(distribution.samples(), 200))

        assert singles == lazy

    @pytest.mark.sanity
    def test_samples_reads_current_source(self):
        dist = ContinuousUniform(0.0, 1.0, random_source=create_random_source(5))
        sequence = dist.samples()
        next(sequence)

        dist.random_source = create_random_source(seed=9)
        expected = create_random_source(seed=9).uniform(0.0, 1.0)
        assert next(sequence) == expected

    @pytest.mark.sanity
    def test_seeded_sampling_reproducible(self, distribution: Distribution):
        distribution.random_source = create_random_source(seed=2)
        first = [distribution.sample() for _ in range(50)]
        distribution.random_source = create_random_source(seed=2)
        second = [distribution.sample() for _ in range(50)]
        assert first == second


class TestCdfContract:
    @pytest.mark.smoke
    def test_range_and_monotonic(self, distribution: Distribution):
        grid = np.linspace(-20.0, 40.0, 601)
        values = np.array([distribution.cdf(float(x)) for x in grid])
        assert np.all(values >= 0.0)
        assert np.all(values <= 1.0)
        assert np.all(np.diff(values) >= 0.0)
        assert values[0] == pytest.approx(0.0, abs=1e-4)
        assert values[-1] == pytest.approx(1.0, abs=1e-2)

    @pytest.mark.sanity
    def test_independent_of_random_source(self, distribution: Distribution):
        before = [distribution.cdf(x) for x in (-1.0, 0.5, 2.0, 7.0)]
        for _ in range(100):
            distribution.sample()
        distribution.random_source = create_random_source(seed=99)
        after = [distribution.cdf(x) for x in (-1.0, 0.5, 2.0, 7.0)]
        assert before == after
        assert all(isinstance(value, float) for value in after)

    @pytest.mark.smoke
    def test_name_and_str(self, distribution: Distribution):
        assert distribution.name == type(distribution).__name__
        assert str(distribution).startswith(f"{distribution.name}(")
        assert repr(distribution) == str(distribution)
        for key in distribution.parameters:
            assert f"{key}=" in str(distribution)
        assert not math.isnan(distribution.cdf(0.0))
