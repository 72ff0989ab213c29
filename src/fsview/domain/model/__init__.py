"""Domain model: view, cursors, ordering."""

from fsview.domain.model.cursor import Cursor, ReverseCursor
from fsview.domain.model.ordering import Ordering
from fsview.domain.model.view import FilteredStringView

__all__ = [
    "Cursor",
    "FilteredStringView",
    "Ordering",
    "ReverseCursor",
]
