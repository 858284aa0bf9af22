"""Editor package containing the overlay model and the deferred text buffer."""

from .mutable_string import CommitResult, MutableString
from .overlays import InvalidRangeError, MutableStringError, Overlay, OverlapError

__all__ = [
    "CommitResult",
    "InvalidRangeError",
    "MutableString",
    "MutableStringError",
    "Overlay",
    "OverlapError",
]
