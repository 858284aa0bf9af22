"""Batched, deferred text editing over codepoint ranges."""

from .core.ranges import Range, is_valid_range
from .editor.mutable_string import CommitResult, MutableString
from .editor.overlays import InvalidRangeError, MutableStringError, Overlay, OverlapError

__version__ = "0.1.0"

__all__ = [
    "CommitResult",
    "InvalidRangeError",
    "MutableString",
    "MutableStringError",
    "Overlay",
    "OverlapError",
    "Range",
    "is_valid_range",
]
