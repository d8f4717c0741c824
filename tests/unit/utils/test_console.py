from __future__ import annotations

import pytest

from distconform.utils.console import (
    Console,
    ConsoleUpdateStep,
    StatusIcons,
    StatusStyles,
)


@pytest.fixture
def console() -> Console:
    return Console(record=True, width=120)


@pytest.mark.smoke
def test_status_mappings_cover_levels():
    levels = {"debug", "info", "warning", "error", "success"}
    assert set(StatusIcons) == levels
    assert set(StatusStyles) == levels


class TestConsole:
    @pytest.mark.smoke
    def test_print_update(self, console):
        console.print_update("All checks passed", status="success")
        text = console.export_text()
        assert text.startswith(f"{StatusIcons['success']} All checks passed")

    @pytest.mark.sanity
    def test_print_update_details(self, console):
        console.print_update("Check failed", "bucket 3 [0.2, 0.3]", "error")
        lines = [line.rstrip() for line in console.export_text().splitlines()]
        assert lines[0] == f"{StatusIcons['error']} Check failed"
        assert lines[1] == "  bucket 3 [0.2, 0.3]"

    @pytest.mark.sanity
    def test_print_update_without_details(self, console):
        console.print_update("Starting", None)
        assert console.export_text().rstrip() == f"{StatusIcons['info']} Starting"

    @pytest.mark.smoke
    def test_print_table(self, console):
        console.print_table(
            ["Distribution", "Result"],
            [["Normal", "Bernoulli"], ["passed", "FAILED"]],
            title="Results",
        )
        lines = [line.rstrip() for line in console.export_text().splitlines()]
        assert lines[0] == f"{StatusIcons['info']} Results"
        assert lines[1] == "|==============|========|"
        assert lines[2] == "| Distribution | Result |"
        assert lines[3] == "|--------------|--------|"
        assert lines[4] == "| Normal       | passed |"
        assert lines[5] == "| Bernoulli    | FAILED |"
        assert lines[6] == "|==============|========|"

    @pytest.mark.sanity
    def test_print_table_escapes_markup(self, console):
        console.print_table(["Bucket"], [["[bold]x[/bold]"]])
        assert "[bold]x[/bold]" in console.export_text()


class TestConsoleUpdateStep:
    @pytest.mark.smoke
    def test_finish(self, console):
        with console.print_update_step("Sampling Normal") as step:
            assert isinstance(step, ConsoleUpdateStep)
            step.update("Building histogram", status_level="debug")
            assert step.title == "Building histogram"
            step.finish("Normal passed", status_level="success")

        assert step.status_level == "success"
        assert f"{StatusIcons['success']} Normal passed" in console.export_text()

    @pytest.mark.sanity
    def test_quiet_console(self):
        console = Console(record=True, quiet=True)
        with console.print_update_step("Sampling") as step:
            step.finish("done")
        assert step._status is None
        assert console.export_text() == ""
