"""Structured helpers for representing codepoint spans."""

from __future__ import annotations

import operator
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(slots=True, frozen=True)
class Range(Sequence[int]):
    """Half-open ``[pos, end)`` interval over codepoint offsets.

    Bounds are stored as given. An inverted or negative range is a legal value
    here and is only rejected when validated against a concrete text length.
    """

    pos: int
    end: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "pos", self._coerce_index(self.pos, "pos"))
        object.__setattr__(self, "end", self._coerce_index(self.end, "end"))

    @staticmethod
    def _coerce_index(value: Any, label: str) -> int:
        if isinstance(value, bool):
            raise TypeError(f"Range {label} must be an integer")
        try:
            return operator.index(value)
        except TypeError as exc:
            raise TypeError(f"Range {label} must be an integer") from exc

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int | slice) -> int | tuple[int, ...]:
        if isinstance(index, slice):
            return self.to_tuple()[index]
        if index == 0:
            return self.pos
        if index == 1:
            return self.end
        raise IndexError("Range index out of range")

    def __iter__(self) -> Iterator[int]:
        yield self.pos
        yield self.end

    @property
    def length(self) -> int:
        """Return the number of codepoints covered by the range."""

        return self.end - self.pos

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when the range is a zero-width insertion point."""

        return self.pos == self.end

    def is_valid_for(self, text_length: int) -> bool:
        return is_valid_range(self, text_length)

    def to_tuple(self) -> tuple[int, int]:
        """Return the range as a ``(pos, end)`` tuple."""

        return (self.pos, self.end)

    def to_dict(self) -> dict[str, int]:
        return {"pos": self.pos, "end": self.end}

    @classmethod
    def from_value(cls, value: Any) -> Range:
        """Coerce ``value`` into a :class:`Range`.

        Accepts a :class:`Range`, a two-item sequence, a mapping with
        ``pos``/``end`` (or ``start``/``end``) keys, or any object exposing
        those attributes.
        """

        if isinstance(value, Range):
            return value
        if value is None:
            raise ValueError("Range value is required")
        if isinstance(value, Mapping):
            pos = value.get("pos", value.get("start"))
            end = value.get("end")
            if pos is None or end is None:
                raise ValueError("Range mappings require pos and end keys")
            return cls(pos, end)
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            seq = list(value)
            if len(seq) != 2:
                raise ValueError("Range sequences must have exactly two entries")
            return cls(seq[0], seq[1])
        pos = getattr(value, "pos", getattr(value, "start", None))
        end = getattr(value, "end", None)
        if pos is not None and end is not None:
            return cls(pos, end)
        raise TypeError("Unsupported Range input")

    @classmethod
    def at(cls, pos: int) -> Range:
        """Return a zero-width range at ``pos``."""

        return cls(pos, pos)


def is_valid_range(r: Range, text_length: int) -> bool:
    """Return ``True`` when ``0 <= r.pos <= r.end <= text_length``."""

    if r.pos > r.end:
        return False
    if r.pos < 0 or r.end > text_length:
        return False
    return True


__all__ = ["Range", "is_valid_range"]
