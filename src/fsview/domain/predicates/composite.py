"""Composite predicates: AND, OR, NOT composition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fsview.domain.exceptions import InvalidPredicateError

if TYPE_CHECKING:
    from fsview.domain.predicates.base import Predicate


def ensure_callable(predicate: object) -> None:
    """Raise InvalidPredicateError unless predicate is callable. FAIL-FIRST."""
    if not callable(predicate):
        raise InvalidPredicateError(type(predicate))


def all_of(*predicates: Predicate) -> Predicate:
    """Create predicate that requires ALL predicates to pass (AND).

    Predicates are evaluated left to right and stop at the first rejection.

    Args:
        *predicates: Predicates to compose.

    Returns:
        Predicate that returns True only if all predicates return True.
        Empty predicates = always True.

    Raises:
        InvalidPredicateError: If any argument is not callable.
    """
    for predicate in predicates:
        ensure_callable(predicate)

    def _predicate(char: str) -> bool:
        return all(p(char) for p in predicates)

    return _predicate


def any_of(*predicates: Predicate) -> Predicate:
    """Create predicate that requires ANY predicate to pass (OR).

    Args:
        *predicates: Predicates to compose.

    Returns:
        Predicate that returns True if any predicate returns True.
        Empty predicates = always False.

    Raises:
        InvalidPredicateError: If any argument is not callable.
    """
    for predicate in predicates:
        ensure_callable(predicate)

    def _predicate(char: str) -> bool:
        return any(p(char) for p in predicates)

    return _predicate


def negate(predicate: Predicate) -> Predicate:
    """Create predicate that negates another predicate (NOT).

    Args:
        predicate: Predicate to negate.

    Returns:
        Predicate that returns opposite of input predicate.
    """
    ensure_callable(predicate)

    def _predicate(char: str) -> bool:
        return not predicate(char)

    return _predicate
