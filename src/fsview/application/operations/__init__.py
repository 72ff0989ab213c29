"""Free functions building new views from existing ones.

None of them copy characters: results reference the same backing string.
"""

from fsview.application.operations.compare import compare
from fsview.application.operations.compose import compose
from fsview.application.operations.split import split
from fsview.application.operations.substr import substr

__all__ = [
    "compare",
    "compose",
    "split",
    "substr",
]
