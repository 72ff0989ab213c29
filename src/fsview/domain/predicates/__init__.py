"""Domain predicates.

Predicates are pure functions: Predicate = Callable[[str], bool]
True = keep character, False = filter it out.

Usage:
    from fsview.domain.predicates import all_of, is_digit, is_space

    pred = all_of(is_digit, negate(is_char("0")))
"""

from fsview.domain.predicates.base import Predicate, accept_all
from fsview.domain.predicates.char_predicates import (
    in_range,
    is_alnum,
    is_alpha,
    is_char,
    is_digit,
    is_lower,
    is_punct,
    is_space,
    is_upper,
    none_of,
    one_of,
)
from fsview.domain.predicates.composite import all_of, any_of, ensure_callable, negate

__all__ = [
    # Type alias and default
    "Predicate",
    "accept_all",
    # Composition
    "all_of",
    "any_of",
    "ensure_callable",
    "negate",
    # Character predicates
    "in_range",
    "is_alnum",
    "is_alpha",
    "is_char",
    "is_digit",
    "is_lower",
    "is_punct",
    "is_space",
    "is_upper",
    "none_of",
    "one_of",
]
