"""Console reporter: FilteredStringView → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fsview.domain.model.view import FilteredStringView


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults (convenience).
    Immutable (frozen dataclass).

    Attributes:
        show_rejected: Render filtered-out characters (styled) instead of hiding them.
        show_summary: Print raw/filtered counts under the view.
        accepted_style: Rich style for accepted characters.
        rejected_style: Rich style for rejected characters.
        color: Emit ANSI styling. False = plain text.
        width: Console width.
    """

    show_rejected: bool = True
    show_summary: bool = True
    accepted_style: str = "bold green"
    rejected_style: str = "dim strike"
    color: bool = True
    width: int = 120


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Shows the raw window of a view with accepted characters highlighted.
    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, view: FilteredStringView) -> str:
        """Format view as rich formatted string.

        Args:
            view: View to render.

        Returns:
            Raw window with accepted/rejected styling, plus optional summary.
        """
        output = StringIO()
        console = self._console(output)

        console.print(self._render_view(view), soft_wrap=True)
        if self._config.show_summary:
            console.print(f"[bold]raw[/bold] {view.raw_length}, [bold]filtered[/bold] {view.size()}")

        return output.getvalue()

    def report_segments(self, segments: Sequence[FilteredStringView]) -> str:
        """Format views (e.g. split() output) as a rich table.

        Args:
            segments: Views to list, in order.

        Returns:
            Table with index, filtered text and raw bounds per segment.
        """
        output = StringIO()
        console = self._console(output)

        table = Table(title=f"Segments ({len(segments)})")
        table.add_column("#", justify="right")
        table.add_column("Text")
        table.add_column("Raw bounds")

        for index, segment in enumerate(segments):
            start, stop = segment.bounds
            table.add_row(str(index), Text(repr(segment.to_string())), Text(f"[{start}, {stop})"))

        console.print(table)
        return output.getvalue()

    def _console(self, output: StringIO) -> Console:
        return Console(
            file=output,
            force_terminal=self._config.color,
            color_system="standard" if self._config.color else None,
            width=self._config.width,
            highlight=False,
        )

    def _render_view(self, view: FilteredStringView) -> Text:
        """Render the raw window, styling each character by predicate."""
        text = Text()
        raw = view.data or ""
        start, stop = view.bounds
        accepted = set(view.positions())

        for pos in range(start, stop):
            if pos in accepted:
                text.append(raw[pos], style=self._config.accepted_style)
            elif self._config.show_rejected:
                text.append(raw[pos], style=self._config.rejected_style)

        return text
