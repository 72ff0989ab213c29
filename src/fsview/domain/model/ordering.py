"""Three-way comparison result."""

from enum import IntEnum


class Ordering(IntEnum):
    """Strong ordering of two filtered sequences.

    Values match the sign convention of a three-way comparison,
    so Ordering compares directly against 0.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1
