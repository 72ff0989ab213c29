"""split: cut a view into segments on a token."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsview.domain.model.view import FilteredStringView


def split(view: FilteredStringView, token: FilteredStringView) -> list[FilteredStringView]:
    """Split view's filtered sequence on occurrences of token's filtered sequence.

    Matches are found left to right, non-overlapping, over the filtered
    sequences, so characters the predicates reject are transparent.
    Segments may be empty. A token at the very end yields a trailing empty
    segment. Segment for segment this equals str(view).split(str(token)).

    Edge cases:
        - token not found: one segment covering the whole view
        - view empty: one empty segment
        - token empty: one segment covering the whole view

    Args:
        view: View to split.
        token: Separator view.

    Returns:
        Segments in order. Each shares view's backing string and predicate,
        narrowed to its own raw window.
    """
    positions = view.positions()
    text = view.to_string()
    needle = token.to_string()

    if not needle:
        return [view.copy()]

    segments: list[FilteredStringView] = []
    first = 0
    while True:
        match = text.find(needle, first)
        if match == -1:
            segments.append(view.span(first, len(text), positions))
            return segments
        segments.append(view.span(first, match, positions))
        first = match + len(needle)
