"""Overlay descriptors and the single-pass splice that applies them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Tuple

from ..core.ranges import Range

LOGGER = logging.getLogger(__name__)


class MutableStringError(RuntimeError):
    """Base class for recoverable editing errors."""

    def __init__(self, message: str, *, reason: str) -> None:
        super().__init__(message)
        self.reason = reason

    def details(self) -> dict[str, Any]:
        return {"reason": self.reason, "message": str(self)}


class InvalidRangeError(MutableStringError, ValueError):
    """Raised when a span falls outside the text it targets."""

    def __init__(self, span: Range, text_length: int) -> None:
        super().__init__("invalid or out of bounds range", reason="invalid_range")
        self.span = span
        self.text_length = text_length

    def details(self) -> dict[str, Any]:
        payload = super().details()
        payload["span"] = self.span.to_tuple()
        payload["text_length"] = self.text_length
        return payload


class OverlapError(MutableStringError):
    """Raised when two pending overlays claim the same codepoints."""

    def __init__(self, previous: Overlay, current: Overlay) -> None:
        super().__init__("ranges overlap", reason="range_overlap")
        self.previous = previous
        self.current = current

    def details(self) -> dict[str, Any]:
        payload = super().details()
        payload["previous"] = self.previous.span.to_tuple()
        payload["current"] = self.current.span.to_tuple()
        return payload


@dataclass(slots=True, frozen=True)
class Overlay:
    """Pending edit: replace the codepoints in ``span`` with ``text``."""

    span: Range
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError("Overlay text must be a str")

    @property
    def is_insertion(self) -> bool:
        return self.span.is_empty

    @property
    def is_deletion(self) -> bool:
        return not self.text and not self.span.is_empty

    @property
    def delta(self) -> int:
        """Return how many codepoints this overlay adds (negative when shrinking)."""

        return len(self.text) - self.span.length


@dataclass(slots=True)
class SpliceResult:
    """Text produced by applying a batch of overlays."""

    text: str
    spans: Tuple[Range, ...]


def sort_overlays(overlays: Iterable[Overlay]) -> List[Overlay]:
    """Return ``overlays`` ordered by ``(pos, end)``.

    An insertion sorts ahead of a wider span sharing its start. The sort is
    stable, so identical spans keep their call order.
    """

    return sorted(overlays, key=lambda overlay: (overlay.span.pos, overlay.span.end))


def splice(text: str, overlays: Iterable[Overlay]) -> SpliceResult:
    """Apply ``overlays`` to ``text`` in one left-to-right pass.

    Untouched gaps between overlays are copied through verbatim. Abutting
    overlays are allowed; any overlay starting before its predecessor ends
    raises :class:`OverlapError` before anything is produced.
    """

    ordered = sort_overlays(overlays)
    pieces: list[str] = []
    spans: list[Range] = []
    raw_cursor = 0
    out_cursor = 0
    previous: Overlay | None = None

    for overlay in ordered:
        if previous is not None and overlay.span.pos < previous.span.end:
            LOGGER.debug(
                "Overlay %s overlaps %s", overlay.span.to_tuple(), previous.span.to_tuple()
            )
            raise OverlapError(previous, overlay)

        gap = text[raw_cursor : overlay.span.pos]
        pieces.append(gap)
        out_cursor += len(gap)

        pieces.append(overlay.text)
        spans.append(Range(out_cursor, out_cursor + len(overlay.text)))
        out_cursor += len(overlay.text)

        raw_cursor = overlay.span.end
        previous = overlay

    pieces.append(text[raw_cursor:])
    return SpliceResult(text="".join(pieces), spans=tuple(spans))


def summarize(before: str, after: str) -> str:
    delta = len(after) - len(before)
    if delta == 0:
        return "commit: Δ0"
    sign = "+" if delta > 0 else "-"
    return f"commit: {sign}{abs(delta)} chars"


__all__ = [
    "MutableStringError",
    "InvalidRangeError",
    "OverlapError",
    "Overlay",
    "SpliceResult",
    "sort_overlays",
    "splice",
    "summarize",
]
