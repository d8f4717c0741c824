from __future__ import annotations

import pytest

from distconform import (
    ConformanceSettings,
    RandomSource,
    configure_logger,
    create_random_source,
    settings,
)


@pytest.fixture
def small_config() -> ConformanceSettings:
    """
    Tolerance parameters small enough for unit tests while keeping every bucket's
    sampling noise several standard deviations below the accuracy.
    """
    return ConformanceSettings(
        sample_count=100_000, bucket_count=10, sample_accuracy=0.01, seed=1
    )


@pytest.fixture
def seeded_source() -> RandomSource:
    return create_random_source(seed=1)


@pytest.fixture
def restore_logger():
    yield
    configure_logger(settings.logging)
