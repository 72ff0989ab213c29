"""Reporter protocol for view output.

Users extend fsview by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fsview.domain.model.view import FilteredStringView


class ViewReporter(Protocol):
    """Contract for reporters.

    Output is str, not print(). Caller decides destination.
    fsview provides PlainTextReporter and ConsoleReporter.
    Built-in reporters are NOT special - same interface, same status.
    """

    def report(self, view: FilteredStringView) -> str:
        """Format a view.

        Args:
            view: View to format.

        Returns:
            Formatted text.
        """
        ...
