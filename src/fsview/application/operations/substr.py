"""substr: sub-view by filtered position and count."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsview.domain.model.view import FilteredStringView


def substr(view: FilteredStringView, pos: int = 0, count: int = 0) -> FilteredStringView:
    """Create view of up to count filtered characters starting at filtered index pos.

    The result is bounded by raw offsets into the same backing string,
    so it stays valid across copies of the source view.

    Args:
        view: Source view.
        pos: First filtered index.
        count: Number of characters. <= 0 or past the end = to the end.

    Returns:
        New view sharing string and predicate. Empty (empty raw window at
        the start of view) if pos < 0 or pos >= size.
    """
    positions = view.positions()
    size = len(positions)
    if pos < 0 or pos >= size:
        start, _ = view.bounds
        return view.restrict(start, start)

    remaining = size - pos
    taken = remaining if count <= 0 or count > remaining else count
    return view.span(pos, pos + taken, positions)
