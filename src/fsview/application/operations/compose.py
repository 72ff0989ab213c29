"""compose: conjoin extra predicates onto a view."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fsview.domain.predicates.composite import all_of

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fsview.domain.model.view import FilteredStringView
    from fsview.domain.predicates.base import Predicate


def compose(view: FilteredStringView, predicates: Iterable[Predicate]) -> FilteredStringView:
    """Create view keeping characters accepted by view AND every predicate.

    Predicates are evaluated left to right after the view's own predicate,
    stopping at the first rejection. Order changes cost, never the result.

    Args:
        view: Source view. Its string and raw window are shared.
        predicates: Extra predicates, in evaluation order.

    Returns:
        New view over the same backing string with the combined predicate.

    Raises:
        InvalidPredicateError: If any predicate is not callable.
    """
    combined = all_of(view.predicate, *predicates)
    return view.copy_with(combined)
