"""Domain exceptions: all public errors of fsview.

All exceptions visible to users are defined in domain.
Application code raises these, never its own public exceptions.
"""

from __future__ import annotations


class FilteredViewError(Exception):
    """Base for all fsview error exceptions.

    Allows: except FilteredViewError to catch all library errors.
    """


class OutOfRangeError(FilteredViewError, IndexError):
    """Filtered index outside [0, size).

    Raised by FilteredStringView.at() and indexing.
    Inherits IndexError for semantic correctness.

    Attributes:
        index: Offending filtered index.
        size: Filtered size of the view at the time of the call.
    """

    def __init__(self, index: int, size: int) -> None:
        """Initialize with offending index and filtered size."""
        self.index = index
        self.size = size
        super().__init__(f"FilteredStringView.at({index}): invalid index, filtered size is {size}")


class CursorRangeError(FilteredViewError, IndexError):
    """Cursor dereferenced or stepped past a sentinel.

    Attributes:
        position: Raw position of the cursor.
        reason: What was attempted.
    """

    def __init__(self, position: int, reason: str) -> None:
        """Initialize with raw position and reason."""
        self.position = position
        self.reason = reason
        super().__init__(f"cursor at raw position {position}: {reason}")


class InvalidSourceError(FilteredViewError, TypeError):
    """Backing source must be str or None.

    Attributes:
        got: Actual type received.
    """

    def __init__(self, got: type) -> None:
        """Initialize with actual type."""
        self.got = got
        super().__init__(f"source must be str or None, got {got.__name__}")


class InvalidPredicateError(FilteredViewError, TypeError):
    """Predicate must be callable.

    Inherits TypeError for semantic correctness.

    Attributes:
        got: Actual type received.
    """

    def __init__(self, got: type) -> None:
        """Initialize with actual type."""
        self.got = got
        super().__init__(f"predicate must be callable, got {got.__name__}")


class InvalidSliceError(FilteredViewError, ValueError):
    """Views only support contiguous slices.

    Attributes:
        step: Rejected slice step.
    """

    def __init__(self, step: int) -> None:
        """Initialize with rejected step."""
        self.step = step
        super().__init__(f"slice step must be 1, got {step}")
