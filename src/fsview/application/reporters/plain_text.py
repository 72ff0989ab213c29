"""Plain text reporter.

Stdlib-only reporter for the filtered sequence, as stream output writes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from fsview.domain.model.view import FilteredStringView


@dataclass(frozen=True, slots=True)
class PlainTextConfig:
    """Configuration for plain text reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        separator: Text written after each character.
        terminator: Text written once at the end.
    """

    separator: str = ""
    terminator: str = ""


class PlainTextReporter:
    """Plain text reporter: filtered characters, nothing else."""

    def __init__(self, config: PlainTextConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or PlainTextConfig()

    def report(self, view: FilteredStringView) -> str:
        """Format view's filtered sequence."""
        separator = self._config.separator
        body = "".join(char + separator for char in view) if separator else view.to_string()
        return body + self._config.terminator

    def write(self, view: FilteredStringView, output: TextIO) -> TextIO:
        """Write report(view) to output. Returns output."""
        output.write(self.report(view))
        return output
