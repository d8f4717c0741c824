"""
distconform validates random variate generators against their analytical
distributions by comparing sampled histograms with each distribution's CDF.
"""

from .logger import configure_logger, logger
from .settings import (
    ConformanceSettings,
    LoggingSettings,
    Settings,
    print_config,
    reload_settings,
    settings,
)
from .errors import ConformanceError, DistConformError, InvalidArgumentError
from .random_source import RandomSource, create_random_source, validate_random_source
from .distributions import (
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
from .histogram import Bucket, Histogram
from .conformance import (
    BucketViolation,
    ConformanceReport,
    SamplingPath,
    assert_conformance,
    check_conformance,
)
from .harness import (
    CheckResult,
    ConformanceHarness,
    HarnessResult,
    default_continuous_distributions,
    default_discrete_distributions,
)

__all__ = [
    "Bernoulli",
    "Beta",
    "Binomial",
    "Bucket",
    "BucketViolation",
    "Categorical",
    "CheckResult",
    "ConformanceError",
    "ConformanceHarness",
    "ConformanceReport",
    "ConformanceSettings",
    "ContinuousDistribution",
    "ContinuousUniform",
    "DiscreteDistribution",
    "DiscreteUniform",
    "DistConformError",
    "Distribution",
    "Gamma",
    "HarnessResult",
    "Histogram",
    "InvalidArgumentError",
    "LogNormal",
    "LoggingSettings",
    "Normal",
    "RandomSource",
    "SamplingPath",
    "Settings",
    "StudentT",
    "Weibull",
    "assert_conformance",
    "check_conformance",
    "configure_logger",
    "create_random_source",
    "default_continuous_distributions",
    "default_discrete_distributions",
    "logger",
    "print_config",
    "reload_settings",
    "settings",
    "validate_random_source",
]
