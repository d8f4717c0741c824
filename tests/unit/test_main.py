from __future__ import annotations

import pytest
from click.testing import CliRunner

from distconform.__main__ import PATH_CHOICES, cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner(env={"COLUMNS": "250"})


@pytest.mark.smoke
def test_path_choices():
    assert PATH_CHOICES == ["sample", "samples", "both"]


@pytest.mark.smoke
def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "distconform version" in result.output


@pytest.mark.smoke
def test_list(runner):
    result = runner.invoke(cli, ["list"])
    assert result.exit_code == 0, result.output
    for expected in ("Bernoulli(p=0.6)", "StudentT", "continuous", "discrete"):
        assert expected in result.output


@pytest.mark.smoke
def test_config(runner, monkeypatch):
    monkeypatch.setenv("DISTCONFORM__CONFORMANCE__SEED", "7")
    result = runner.invoke(cli, ["config"])
    assert result.exit_code == 0, result.output
    assert "DISTCONFORM__CONFORMANCE__SAMPLE_ACCURACY" in result.output
    assert "Set in environment: DISTCONFORM__CONFORMANCE__SEED" in result.output


@pytest.mark.sanity
def test_run_passes(runner):
    result = runner.invoke(
        cli,
        [
            "run",
            "--path",
            "samples",
            "--sample-count",
            "20000",
            "--bucket-count",
            "5",
            "--accuracy",
            "0.05",
            "--distribution",
            "Normal,Bernoulli",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "Normal(mean=0.0, std_dev=1.0)" in result.output
    assert "Bernoulli(p=0.6)" in result.output
    assert "Gamma" not in result.output
    assert "FAILED" not in result.output
    assert "checks passed" in result.output


@pytest.mark.sanity
def test_run_fails_with_exit_code(runner):
    result = runner.invoke(
        cli,
        [
            "run",
            "--path",
            "sample",
            "--sample-count",
            "5000",
            "--bucket-count",
            "5",
            "--accuracy",
            "1e-9",
            "--distribution",
            "ContinuousUniform",
        ],
    )
    assert result.exit_code == 1, result.output
    assert "FAILED" in result.output
    assert "violating bucket(s)" in result.output


@pytest.mark.sanity
@pytest.mark.parametrize(
    "args",
    [
        ["--distribution", "Cauchy"],
        ["--sample-count", "0"],
        ["--accuracy", "2.0"],
        ["--path", "batch"],
        ["--bit-generator", "xorshift"],
    ],
)
def test_run_invalid_options(runner, args):
    result = runner.invoke(cli, ["run", *args])
    assert result.exit_code == 2, result.output
