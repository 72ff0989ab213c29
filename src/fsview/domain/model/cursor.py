"""Bidirectional cursors over a filtered view.

Cursor walks the raw backing string and skips characters the predicate
rejects. Cursors are immutable values: next()/prev() return new cursors.

Valid positions of a cursor built by a view:
    - raw offset of an accepted character inside [lower, upper)
    - upper: end sentinel (one past the window)
    - lower - 1: reverse sentinel (one before the window)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fsview.domain.exceptions import CursorRangeError

if TYPE_CHECKING:
    from fsview.domain.predicates.base import Predicate


@dataclass(frozen=True, slots=True, eq=False)
class Cursor:
    """Forward/backward cursor over accepted characters.

    Equality is raw position only. Cursors from different views
    are not meaningfully comparable (caller responsibility, not checked).

    Attributes:
        source: Backing string (borrowed, never copied).
        position: Raw offset into source.
        predicate: Copy of the owning view's predicate.
        lower: First raw offset of the view window.
        upper: End sentinel of the view window.
    """

    source: str
    position: int
    predicate: Predicate
    lower: int
    upper: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.lower - 1 <= self.position <= self.upper:
            raise CursorRangeError(self.position, f"outside window [{self.lower}, {self.upper})")

    @property
    def at_end(self) -> bool:
        """Cursor is at the end sentinel."""
        return self.position == self.upper

    @property
    def at_rend(self) -> bool:
        """Cursor is at the reverse sentinel."""
        return self.position == self.lower - 1

    @property
    def value(self) -> str:
        """Character at the current position.

        Raises:
            CursorRangeError: At either sentinel.
        """
        if self.at_end or self.at_rend:
            raise CursorRangeError(self.position, "cannot dereference a sentinel")
        return self.source[self.position]

    def next(self, steps: int = 1) -> Cursor:
        """Advance to the steps-th following accepted character.

        Stops at the end sentinel regardless of predicate.

        Raises:
            CursorRangeError: If stepping from the end sentinel.
        """
        if steps < 0:
            return self.prev(-steps)
        pos = self.position
        for _ in range(steps):
            if pos == self.upper:
                raise CursorRangeError(pos, "cannot advance past end")
            pos += 1
            while pos < self.upper and not self.predicate(self.source[pos]):
                pos += 1
        return self._moved(pos)

    def prev(self, steps: int = 1) -> Cursor:
        """Retreat to the steps-th preceding accepted character.

        Stops at the reverse sentinel regardless of predicate.

        Raises:
            CursorRangeError: If stepping from the reverse sentinel.
        """
        if steps < 0:
            return self.next(-steps)
        pos = self.position
        rend = self.lower - 1
        for _ in range(steps):
            if pos == rend:
                raise CursorRangeError(pos, "cannot retreat before start")
            pos -= 1
            while pos > rend and not self.predicate(self.source[pos]):
                pos -= 1
        return self._moved(pos)

    def _moved(self, position: int) -> Cursor:
        return Cursor(
            source=self.source,
            position=position,
            predicate=self.predicate,
            lower=self.lower,
            upper=self.upper,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.position == other.position

    def __hash__(self) -> int:
        return hash(self.position)


@dataclass(frozen=True, slots=True, eq=False)
class ReverseCursor:
    """Cursor walking a view back to front.

    Wraps a Cursor pointing at the current character:
    next() retreats the wrapped cursor, prev() advances it.

    Attributes:
        base: Wrapped forward cursor.
    """

    base: Cursor

    @property
    def position(self) -> int:
        """Raw position of the wrapped cursor."""
        return self.base.position

    @property
    def value(self) -> str:
        """Character at the current position."""
        return self.base.value

    def next(self, steps: int = 1) -> ReverseCursor:
        """Move towards the front of the view."""
        return ReverseCursor(self.base.prev(steps))

    def prev(self, steps: int = 1) -> ReverseCursor:
        """Move towards the back of the view."""
        return ReverseCursor(self.base.next(steps))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReverseCursor):
            return NotImplemented
        return self.base.position == other.base.position

    def __hash__(self) -> int:
        return hash(self.base.position)
