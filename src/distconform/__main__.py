"""
distconform command-line interface entry point.

Runs the conformance harness against the built-in distributions and reports a
pass/fail result per distribution and check, listing every bucket whose
empirical probability strayed from the CDF. Tolerance parameters default to the
DISTCONFORM__CONFORMANCE__* settings and can be overridden per run.

Example:
::
    # Full run with the configured tolerance parameters
    distconform run

    # Quick run over two distributions through the lazy sampling path
    distconform run --path samples --sample-count 200000 \\
        --distribution Normal,Binomial

    # Show the registered distributions and the effective settings
    distconform list
    distconform config
"""

from __future__ import annotations

import click
from pydantic import ValidationError

from distconform.conformance import SamplingPath
from distconform.errors import InvalidArgumentError
from distconform.harness import ConformanceHarness
from distconform.output import HarnessConsoleOutput
from distconform.random_source import BitGeneratorType
from distconform.settings import ConformanceSettings, print_config, settings
from distconform.utils import Console, get_literal_vals, list_set_env, parse_list

__all__ = ["cli", "config", "list_distributions", "run"]

PATH_CHOICES: list[str] = [*sorted(get_literal_vals(SamplingPath)), "both"]
"""Sampling path choices for a run, "both" runs each path in turn."""


@click.group()
@click.version_option(
    package_name="distconform", message="distconform version: %(version)s"
)
def cli():
    """Statistical conformance checks for random variate generators."""


@cli.command(
    "run",
    help=(
        "Sample every registered distribution, bucket the samples into a "
        "histogram and compare each bucket with the distribution's CDF. "
        "Exits with status 1 if any check fails."
    ),
)
@click.option(
    "--path",
    type=click.Choice(PATH_CHOICES),
    default="both",
    show_default=True,
    help="Sampling path: repeated sample() calls, the samples() sequence, or both.",
)
@click.option(
    "--sample-count",
    type=int,
    default=None,
    help="Samples per distribution and path. Defaults to the configured value.",
)
@click.option(
    "--bucket-count",
    type=int,
    default=None,
    help="Histogram buckets compared with the CDF. Defaults to the configured value.",
)
@click.option(
    "--accuracy",
    type=float,
    default=None,
    help="Allowed deviation per bucket. Defaults to the configured value.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed of the shared random source. Defaults to the configured value.",
)
@click.option(
    "--bit-generator",
    type=click.Choice(sorted(get_literal_vals(BitGeneratorType))),
    default=None,
    help="Bit generator for the shared random source.",
)
@click.option(
    "--distribution",
    "distributions",
    multiple=True,
    callback=parse_list,
    help=(
        "Distribution type names to check, comma separated or repeated. "
        "Defaults to all registered distributions."
    ),
)
@click.pass_context
def run(
    ctx: click.Context,
    path: str,
    sample_count: int | None,
    bucket_count: int | None,
    accuracy: float | None,
    seed: int | None,
    bit_generator: str | None,
    distributions: list[str] | None,
):
    overrides = {
        key: value
        for key, value in {
            "sample_count": sample_count,
            "bucket_count": bucket_count,
            "sample_accuracy": accuracy,
            "seed": seed,
            "bit_generator": bit_generator,
        }.items()
        if value is not None
    }
    try:
        conformance = ConformanceSettings(
            **{**settings.conformance.model_dump(), **overrides}
        )
    except ValidationError as err:
        raise click.BadParameter(str(err)) from err

    harness = ConformanceHarness(config=conformance)
    if distributions:
        try:
            harness = harness.select(distributions)
        except InvalidArgumentError as err:
            raise click.BadParameter(str(err), param_hint="--distribution") from err

    paths: list[SamplingPath] = (
        ["sample", "samples"] if path == "both" else [path]  # type: ignore[list-item]
    )
    console = Console()
    with console.print_update_step(
        f"Checking {len(harness.distributions)} distributions via {', '.join(paths)}"
    ) as step:
        result = harness.run(paths)
        step.finish(
            "Run complete",
            status_level="success" if result.passed else "error",
        )

    HarnessConsoleOutput(console=console).print_result(result)
    if not result.passed:
        ctx.exit(1)


@cli.command("list", help="List the registered distributions.")
def list_distributions():
    harness = ConformanceHarness()
    Console().print_table(
        ["Distribution", "Kind", "Parameters"],
        [
            [dist.name for dist in harness.distributions],
            [dist.kind for dist in harness.distributions],
            [str(dist) for dist in harness.distributions],
        ],
    )


@cli.command(
    help=(
        "Print out the available configuration settings that can be set "
        "through environment variables."
    )
)
def config():
    print_config()
    if set_env := list_set_env():
        click.echo(f"Set in environment: {', '.join(set_env)}")


if __name__ == "__main__":
    cli()
