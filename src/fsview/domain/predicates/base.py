"""Predicate type alias and the default predicate."""

from collections.abc import Callable

# Predicate function: takes a single character, returns True to keep it
Predicate = Callable[[str], bool]


def accept_all(char: str) -> bool:  # noqa: ARG001
    """Default predicate: every character is kept."""
    return True
