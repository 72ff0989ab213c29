"""Character predicates.

Factories return predicates over a single character.
Character classes follow the C locale: ASCII only, one code point per char.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsview.domain.predicates.base import Predicate

_DIGITS = frozenset(string.digits)
_SPACE = frozenset(string.whitespace)
_ALPHA = frozenset(string.ascii_letters)
_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)
_PUNCT = frozenset(string.punctuation)


def is_char(expected: str) -> Predicate:
    """Create predicate: character equals expected.

    Args:
        expected: Single character to match.

    Returns:
        Predicate function

    Raises:
        ValueError: If expected is not exactly one character
    """
    if len(expected) != 1:
        raise ValueError(f"expected must be a single character, got {expected!r}")

    def predicate(char: str) -> bool:
        return char == expected

    return predicate


def one_of(chars: str) -> Predicate:
    """Create predicate: character is one of chars.

    Args:
        chars: Characters to keep. Empty = keep nothing.

    Returns:
        Predicate function
    """
    char_set = frozenset(chars)

    def predicate(char: str) -> bool:
        return char in char_set

    return predicate


def none_of(chars: str) -> Predicate:
    """Create predicate: character is not one of chars.

    Args:
        chars: Characters to drop. Empty = keep everything.

    Returns:
        Predicate function
    """
    char_set = frozenset(chars)

    def predicate(char: str) -> bool:
        return char not in char_set

    return predicate


def in_range(first: str, last: str) -> Predicate:
    """Create predicate: first <= character <= last (by code point).

    Raises:
        ValueError: If bounds are not single characters or first > last
    """
    if len(first) != 1 or len(last) != 1:
        raise ValueError(f"bounds must be single characters, got {first!r} and {last!r}")
    if first > last:
        raise ValueError(f"first ({first!r}) must be <= last ({last!r})")

    def predicate(char: str) -> bool:
        return first <= char <= last

    return predicate


def is_digit(char: str) -> bool:
    """Character is an ASCII decimal digit."""
    return char in _DIGITS


def is_space(char: str) -> bool:
    """Character is ASCII whitespace."""
    return char in _SPACE


def is_alpha(char: str) -> bool:
    """Character is an ASCII letter."""
    return char in _ALPHA


def is_alnum(char: str) -> bool:
    """Character is an ASCII letter or digit."""
    return char in _ALPHA or char in _DIGITS


def is_upper(char: str) -> bool:
    """Character is an ASCII uppercase letter."""
    return char in _UPPER


def is_lower(char: str) -> bool:
    """Character is an ASCII lowercase letter."""
    return char in _LOWER


def is_punct(char: str) -> bool:
    """Character is ASCII punctuation."""
    return char in _PUNCT
