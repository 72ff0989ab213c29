"""compare: three-way comparison of filtered sequences."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fsview.domain.model.ordering import Ordering

if TYPE_CHECKING:
    from fsview.domain.model.view import FilteredStringView


def compare(lhs: FilteredStringView, rhs: FilteredStringView) -> Ordering:
    """Lexicographic three-way comparison of filtered sequences.

    Buffer identity plays no part: views over different strings with the
    same filtered characters are EQUAL.
    """
    left = lhs.to_string()
    right = rhs.to_string()
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL
