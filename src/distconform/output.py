"""
Console rendering of harness results.

Prints one table row per check with its outcome and, for conformance checks,
the largest bucket deviation, followed by the violating buckets of every failed
check.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from distconform.harness import CheckResult, HarnessResult
from distconform.settings import settings
from distconform.utils import Console

__all__ = ["HarnessConsoleOutput"]


@dataclass
class HarnessConsoleOutput:
    """
    Writes a HarnessResult to a rich console.

    :param console: Console to print to, a new one by default
    :param max_reported_violations: Violations to list per failed check
    """

    console: Console = field(default_factory=Console)
    max_reported_violations: int = field(
        default_factory=lambda: settings.max_reported_violations
    )

    def print_result(self, result: HarnessResult):
        """
        Print the results table, failure details, and the overall outcome.

        :param result: The harness result to print
        """
        config = result.config
        self.console.print_table(
            ["Check", "Path", "Distribution", "Result", "Max Deviation"],
            [
                [check.check for check in result.results],
                [check.path or "-" for check in result.results],
                [check.distribution for check in result.results],
                ["passed" if check.passed else "FAILED" for check in result.results],
                [self._format_deviation(check) for check in result.results],
            ],
            title=(
                f"Conformance with N={config.sample_count}, "
                f"buckets={config.bucket_count}, "
                f"accuracy={config.sample_accuracy}, seed={config.seed}"
            ),
        )

        for failure in result.failures:
            details = (
                failure.report.summary(self.max_reported_violations)
                if failure.report is not None
                else failure.message
            )
            self.console.print_update(
                f"{failure.check} failed for {failure.distribution}",
                details,
                "error",
            )

        if result.passed:
            self.console.print_update(
                f"All {len(result.results)} checks passed in {result.duration:.2f}s",
                status="success",
            )
        else:
            self.console.print_update(
                f"{len(result.failures)} of {len(result.results)} checks failed "
                f"in {result.duration:.2f}s",
                status="error",
            )

    @staticmethod
    def _format_deviation(check: CheckResult) -> str:
        if check.report is None:
            return "-"
        return f"{check.report.max_deviation:.6f}"
