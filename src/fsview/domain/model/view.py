"""Filtered string view: non-owning, read-only, lazily filtered."""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, TextIO

from fsview.domain.exceptions import InvalidSourceError, InvalidSliceError, OutOfRangeError
from fsview.domain.model.cursor import Cursor, ReverseCursor
from fsview.domain.predicates.base import accept_all
from fsview.domain.predicates.composite import ensure_callable

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from fsview.domain.predicates.base import Predicate


class FilteredStringView:
    """View over the characters of a string that satisfy a predicate.

    The view borrows its backing string: it keeps a reference, never copies
    it, and never mutates it. Every query rescans the raw window, nothing
    is cached, so predicates should be pure.

    A view covers a raw window [start, stop) of the backing string.
    Views built from a string cover all of it; split/substr/slicing
    produce narrower windows over the same string object.

    Default state (no source, or after take()): data is None, window is
    empty, predicate is accept_all. It behaves as an empty view.

    Views are mutable through take()/assign() and therefore unhashable.
    """

    __slots__ = ("_predicate", "_source", "_start", "_stop")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, source: str | None = None, predicate: Predicate = accept_all) -> None:
        """Initialize view over source.

        Args:
            source: Backing string. None = default (empty) view.
            predicate: Character filter. Default keeps everything.

        Raises:
            InvalidSourceError: If source is not str or None.
            InvalidPredicateError: If predicate is not callable.
        """
        if source is not None and not isinstance(source, str):
            raise InvalidSourceError(type(source))
        ensure_callable(predicate)

        self._source = source
        self._start = 0
        self._stop = 0 if source is None else len(source)
        self._predicate = predicate

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def data(self) -> str | None:
        """Raw backing string, unfiltered. None in the default state."""
        return self._source

    @property
    def predicate(self) -> Predicate:
        """Stored predicate."""
        return self._predicate

    @property
    def bounds(self) -> tuple[int, int]:
        """Raw window [start, stop) into data."""
        return self._start, self._stop

    @property
    def raw_length(self) -> int:
        """Number of raw characters in the window, accepted or not."""
        return self._stop - self._start

    def size(self) -> int:
        """Number of accepted characters. O(raw_length), not cached."""
        return sum(1 for _ in self._accepted())

    def empty(self) -> bool:
        """True if no character in the window is accepted."""
        return next(self._accepted(), None) is None

    def positions(self) -> tuple[int, ...]:
        """Raw offsets of accepted characters, in order."""
        return tuple(self._accepted())

    def at(self, index: int) -> str:
        """Return the index-th accepted character.

        Raises:
            OutOfRangeError: If index < 0 or index >= size().
        """
        if index < 0:
            raise OutOfRangeError(index, self.size())
        raw = self._raw()
        for n, pos in enumerate(self._accepted()):
            if n == index:
                return raw[pos]
        raise OutOfRangeError(index, self.size())

    def to_string(self) -> str:
        """Materialize the filtered sequence as a new string."""
        return "".join(self)

    # ------------------------------------------------------------------
    # Narrowing
    # ------------------------------------------------------------------

    def restrict(self, start: int, stop: int) -> FilteredStringView:
        """View over the same string and predicate, window intersected with [start, stop).

        Args:
            start: First raw offset to keep.
            stop: Raw offset one past the last to keep.

        Returns:
            New view. Empty window if the ranges do not overlap.
        """
        new_start = min(max(self._start, start), self._stop)
        new_stop = max(new_start, min(self._stop, stop))
        return self._windowed(new_start, new_stop, self._predicate)

    def span(self, first: int, last: int, positions: Sequence[int] | None = None) -> FilteredStringView:
        """View over filtered indices [first, last), sharing string and predicate.

        Args:
            first: First filtered index (clamped to [0, size]).
            last: Filtered index one past the end (clamped to [first, size]).
            positions: Precomputed positions(), to avoid rescanning.

        Returns:
            New view. Empty span keeps an empty window at the raw
            position of filtered index first.
        """
        if positions is None:
            positions = self.positions()
        count = len(positions)
        first = min(max(first, 0), count)
        last = min(max(last, first), count)
        if first == last:
            anchor = positions[first] if first < count else self._stop
            return self.restrict(anchor, anchor)
        return self.restrict(positions[first], positions[last - 1] + 1)

    # ------------------------------------------------------------------
    # Cursors and iteration
    # ------------------------------------------------------------------

    def begin(self) -> Cursor:
        """Cursor at the first accepted character, or end() if none."""
        return self._cursor(self._start - 1).next()

    def end(self) -> Cursor:
        """End sentinel cursor. Never scans."""
        return self._cursor(self._stop)

    def rbegin(self) -> ReverseCursor:
        """Reverse cursor at the last accepted character, or rend() if none."""
        return ReverseCursor(self.end().prev())

    def rend(self) -> ReverseCursor:
        """Reverse sentinel cursor."""
        return ReverseCursor(self._cursor(self._start - 1))

    def __iter__(self) -> Iterator[str]:
        cursor, end = self.begin(), self.end()
        while cursor != end:
            yield cursor.value
            cursor = cursor.next()

    def __reversed__(self) -> Iterator[str]:
        cursor, rend = self.rbegin(), self.rend()
        while cursor != rend:
            yield cursor.value
            cursor = cursor.next()

    # ------------------------------------------------------------------
    # Copy / move
    # ------------------------------------------------------------------

    def copy(self) -> FilteredStringView:
        """Copy sharing the same backing string."""
        return self._windowed(self._start, self._stop, self._predicate)

    __copy__ = copy

    def copy_with(self, predicate: Predicate) -> FilteredStringView:
        """Copy sharing string and window, filtered by predicate instead.

        Raises:
            InvalidPredicateError: If predicate is not callable.
        """
        return self._windowed(self._start, self._stop, predicate)

    def take(self) -> FilteredStringView:
        """Move: return a view with this state, reset this view to default."""
        moved = self.copy()
        self._source = None
        self._start = 0
        self._stop = 0
        self._predicate = accept_all
        return moved

    def assign(self, other: FilteredStringView) -> FilteredStringView:
        """Copy-assign other's state into this view. Returns self."""
        if other is not self:
            self._source = other._source
            self._start = other._start
            self._stop = other._stop
            self._predicate = other._predicate
        return self

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.empty()

    def __getitem__(self, key: int | slice) -> str | FilteredStringView:
        """Filtered indexing (checked, same as at()) or contiguous slicing."""
        if isinstance(key, slice):
            positions = self.positions()
            start, stop, step = key.indices(len(positions))
            if step != 1:
                raise InvalidSliceError(step)
            return self.span(start, stop, positions)
        return self.at(operator.index(key))

    def __contains__(self, item: object) -> bool:
        return isinstance(item, str) and item in self.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def write_to(self, stream: TextIO) -> TextIO:
        """Write the filtered sequence to stream. Returns stream."""
        stream.write(self.to_string())
        return stream

    def __eq__(self, other: object) -> bool:
        text = _filtered_text(other)
        if text is None:
            return NotImplemented
        return self.to_string() == text

    def __lt__(self, other: object) -> bool:
        text = _filtered_text(other)
        if text is None:
            return NotImplemented
        return self.to_string() < text

    def __le__(self, other: object) -> bool:
        text = _filtered_text(other)
        if text is None:
            return NotImplemented
        return self.to_string() <= text

    def __gt__(self, other: object) -> bool:
        text = _filtered_text(other)
        if text is None:
            return NotImplemented
        return self.to_string() > text

    def __ge__(self, other: object) -> bool:
        text = _filtered_text(other)
        if text is None:
            return NotImplemented
        return self.to_string() >= text

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _raw(self) -> str:
        return self._source if self._source is not None else ""

    def _accepted(self) -> Iterator[int]:
        """Raw offsets of accepted characters, lazily."""
        raw = self._raw()
        predicate = self._predicate
        for pos in range(self._start, self._stop):
            if predicate(raw[pos]):
                yield pos

    def _cursor(self, position: int) -> Cursor:
        return Cursor(
            source=self._raw(),
            position=position,
            predicate=self._predicate,
            lower=self._start,
            upper=self._stop,
        )

    def _windowed(self, start: int, stop: int, predicate: Predicate) -> FilteredStringView:
        view = FilteredStringView(self._source, predicate)
        view._start = start
        view._stop = stop
        return view


def _filtered_text(other: object) -> str | None:
    """Filtered sequence of a comparison operand. str compares as itself."""
    if isinstance(other, FilteredStringView):
        return other.to_string()
    if isinstance(other, str):
        return other
    return None
