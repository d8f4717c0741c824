"""
Exception types raised by the conformance harness.

Separates programmer contract violations, raised synchronously where an invalid
value is supplied, from statistical conformance failures, raised when sampled
data does not follow a distribution's CDF within the configured accuracy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from distconform.conformance import ConformanceReport

__all__ = ["ConformanceError", "DistConformError", "InvalidArgumentError"]


class DistConformError(Exception):
    """Base class for all errors raised by distconform."""


class InvalidArgumentError(DistConformError, ValueError):
    """
    Raised when a caller supplies a value that violates a contract, such as
    binding an unset random source or constructing a distribution with
    out-of-range parameters.
    """


class ConformanceError(DistConformError, AssertionError):
    """
    Raised when the sampled histogram of a distribution deviates from its CDF
    by at least the configured accuracy in one or more buckets.

    :param message: Human readable summary of the failing buckets
    :param report: The full conformance report the failure was derived from
    """

    def __init__(self, message: str, report: ConformanceReport):
        super().__init__(message)
        self.report = report
