"""
Rich console helpers for reporting harness progress and results.

Status lines carry an icon and a style per level, long running work is wrapped
in a spinner step, and results are laid out as plain character tables whose
border and separator characters come from the output settings so they render
the same in terminals and captured logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Annotated, Any, Literal

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.padding import Padding
from rich.status import Status
from rich.text import Text

from distconform.settings import settings

__all__ = [
    "Colors",
    "Console",
    "ConsoleUpdateStep",
    "StatusIcons",
    "StatusLevel",
    "StatusStyles",
]

StatusLevel = Annotated[
    Literal["debug", "info", "warning", "error", "success"],
    "Severity of a console status line, selects its icon and style",
]


class Colors:
    """
    Named colors used by the status styles.

    :cvar info: Neutral progress and titles
    :cvar success: Passing checks
    :cvar warning: Suspicious but non-failing output
    :cvar error: Failing checks
    """

    info: str = "light_steel_blue"
    success: str = "chartreuse1"
    warning: str = "#FDB516"
    error: str = "orange_red1"


StatusIcons: Annotated[
    Mapping[str, str], "Icon printed in front of a status line, per level"
] = {
    "debug": "…",
    "info": "ℹ",
    "warning": "⚠",
    "error": "✖",
    "success": "✔",
}

StatusStyles: Annotated[
    Mapping[str, str], "Rich style applied to a status line, per level"
] = {
    "debug": "dim",
    **{
        level: f"bold {getattr(Colors, level)}"
        for level in ("info", "warning", "error", "success")
    },
}


def _styled(title: str, level: str) -> str:
    return f"[{StatusStyles.get(level, 'bold')}]{escape(title)}[/]"


@dataclass
class ConsoleUpdateStep:
    """
    Spinner shown while a step runs, replaced by a status line when it
    finishes.

    Example:
    ::
        console = Console()
        with console.print_update_step("Sampling Normal(0, 1)") as step:
            step.update("Building histogram")
            step.finish("Normal(0, 1) passed", status_level="success")

    :param console: Console the spinner and final line are written to
    :param title: Text shown next to the spinner
    :param details: Extra text printed below the final line
    :param status_level: Level used to style the spinner text
    :param spinner: Name of a rich spinner animation
    """

    console: Console
    title: str
    details: Any | None = None
    status_level: StatusLevel = "info"
    spinner: str = "dots"
    _status: Status | None = None

    def __enter__(self) -> ConsoleUpdateStep:
        if not self.console.quiet:
            self._status = self.console.status(
                _styled(self.title, self.status_level), spinner=self.spinner
            )
            self._status.start()
        return self

    def update(self, title: str, status_level: StatusLevel | None = None):
        """
        :param title: Replacement spinner text
        :param status_level: Replacement level, unchanged if None
        """
        self.title = title
        self.status_level = status_level or self.status_level
        if self._status is not None:
            self._status.update(status=_styled(title, self.status_level))

    def finish(
        self,
        title: str,
        details: Any | None = None,
        status_level: StatusLevel = "info",
    ):
        """
        Stop the spinner and print the outcome as a status line.

        :param title: Outcome text
        :param details: Extra text printed below the outcome
        :param status_level: Level of the outcome line
        """
        self.title = title
        self.status_level = status_level
        if self._status is not None:
            self._status.stop()
        self.console.print_update(title, details or self.details, status_level)

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._status is not None:
            self._status.stop()


class Console(RichConsole):
    """
    Rich console with status lines, spinner steps and character tables.

    Example:
    ::
        console = Console()
        console.print_update("Starting run", status="info")
        console.print_table(["Check", "Result"], [["conformance"], ["passed"]])
    """

    def print_update(
        self,
        title: str,
        details: Any | None = None,
        status: StatusLevel = "info",
    ):
        """
        :param title: Status text
        :param details: Extra text printed dimmed and indented below the line
        :param status: Level selecting the icon and style
        """
        self.print(
            Text.assemble(
                f"{StatusIcons.get(status, '•')} ",
                (title, StatusStyles.get(status, "bold")),
            )
        )
        self.print_update_details(details)

    def print_update_details(self, details: Any | None):
        if not details:
            return
        self.print(Padding(Text(str(details)), (0, 0, 0, 2), style="dim"))

    def print_update_step(
        self,
        title: str,
        status: StatusLevel = "info",
        details: Any | None = None,
        spinner: str = "dots",
    ) -> ConsoleUpdateStep:
        """
        :return: A context manager showing a spinner until the step finishes
        """
        return ConsoleUpdateStep(
            console=self,
            title=title,
            details=details,
            status_level=status,
            spinner=spinner,
        )

    def print_table(
        self,
        header_cols: Sequence[str],
        value_cols: Sequence[Sequence[str]],
        title: str | None = None,
    ):
        """
        Print a table given column-wise values, framed by border rows and with
        a header separator.

        :param header_cols: One header per column
        :param value_cols: The cells of each column, top to bottom
        :param title: Status line printed above the table
        """
        if title is not None:
            self.print_update(title)

        columns = [[header, *values] for header, values in zip(
            header_cols, value_cols, strict=True
        )]
        widths = [max(len(cell) for cell in column) + 2 for column in columns]
        row_count = max((len(column) for column in columns), default=0)
        rows = [
            [column[idx] if idx < len(column) else "" for column in columns]
            for idx in range(row_count)
        ]

        self.print_table_divider(widths, settings.table_border_char)
        if rows:
            self.print_table_row(rows[0], widths, cell_style="bold")
        self.print_table_divider(widths, settings.table_headers_border_char)
        for row in rows[1:]:
            self.print_table_row(row, widths)
        self.print_table_divider(widths, settings.table_border_char)

    def print_table_divider(self, widths: Sequence[int], char: str):
        self.print_table_row(
            [""] * len(widths), widths, fill=char, cell_style="bold"
        )

    def print_table_row(
        self,
        values: Sequence[str],
        widths: Sequence[int],
        fill: str = " ",
        cell_style: str = "",
    ):
        """
        Print one row, each cell padded by one fill character on the left and
        filled out to its column width.

        :param values: Cell text, one per column
        :param widths: Column widths including padding
        :param fill: Character used to pad cells
        :param cell_style: Rich style wrapped around every cell
        """
        separator = f"[bold]{escape(settings.table_column_separator_char)}[/bold]"
        cells = []
        for value, width in zip(values, widths, strict=True):
            text = f"{fill}{value}" if value else ""
            cell = escape(text.ljust(width, fill))
            cells.append(f"[{cell_style}]{cell}[/{cell_style}]" if cell_style else cell)

        self.print(
            separator + separator.join(cells) + separator,
            overflow="ignore",
            crop=False,
        )
