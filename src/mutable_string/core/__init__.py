"""Core value types shared by the editing primitives."""

from .ranges import Range, is_valid_range

__all__ = ["Range", "is_valid_range"]
