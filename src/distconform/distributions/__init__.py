from .base import (
    ContinuousDistribution,
    DiscreteDistribution,
    Distribution,
    DistributionKind,
    SampleT,
    check_parameter,
)
from .continuous import (
    Beta,
    ContinuousUniform,
    Gamma,
    LogNormal,
    Normal,
    StudentT,
    Weibull,
)
from .discrete import Bernoulli, Binomial, Categorical, DiscreteUniform

__all__ = [
    "Bernoulli",
    "Beta",
    "Binomial",
    "Categorical",
    "ContinuousDistribution",
    "ContinuousUniform",
    "DiscreteDistribution",
    "DiscreteUniform",
    "Distribution",
    "DistributionKind",
    "Gamma",
    "LogNormal",
    "Normal",
    "SampleT",
    "StudentT",
    "Weibull",
    "check_parameter",
]
