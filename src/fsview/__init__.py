"""fsview - non-owning, lazily filtered views over strings."""

__version__ = "0.1.0"

from fsview.application.operations import compare, compose, split, substr
from fsview.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    PlainTextConfig,
    PlainTextReporter,
    ViewReporter,
)
from fsview.domain.exceptions import (
    CursorRangeError,
    FilteredViewError,
    InvalidPredicateError,
    InvalidSliceError,
    InvalidSourceError,
    OutOfRangeError,
)
from fsview.domain.model import Cursor, FilteredStringView, Ordering, ReverseCursor
from fsview.domain.predicates import (
    Predicate,
    accept_all,
    all_of,
    any_of,
    in_range,
    is_alnum,
    is_alpha,
    is_char,
    is_digit,
    is_lower,
    is_punct,
    is_space,
    is_upper,
    negate,
    none_of,
    one_of,
)

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "Cursor",
    "CursorRangeError",
    "FilteredStringView",
    "FilteredViewError",
    "InvalidPredicateError",
    "InvalidSliceError",
    "InvalidSourceError",
    "Ordering",
    "OutOfRangeError",
    "PlainTextConfig",
    "PlainTextReporter",
    "Predicate",
    "ReverseCursor",
    "ViewReporter",
    "__version__",
    "accept_all",
    "all_of",
    "any_of",
    "compare",
    "compose",
    "in_range",
    "is_alnum",
    "is_alpha",
    "is_char",
    "is_digit",
    "is_lower",
    "is_punct",
    "is_space",
    "is_upper",
    "negate",
    "none_of",
    "one_of",
    "split",
    "substr",
]
