"""Deferred text buffer that batches edits and applies them in one commit."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple

from ..core.ranges import Range, is_valid_range
from ..services.settings import Settings
from .overlays import InvalidRangeError, Overlay, splice, summarize

__all__ = ["CommitResult", "MutableString"]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CommitResult:
    """Outcome of a successful :meth:`MutableString.commit`."""

    text: str
    spans: Tuple[Range, ...]
    summary: str


class MutableString:
    """Text value that queues overlays and applies them atomically.

    Every mutation validates its range against the current committed text and
    queues an :class:`Overlay`; the text itself only changes in
    :meth:`commit`. Ranges are codepoint offsets, and all ranges queued in one
    batch refer to the same committed text regardless of call order.

    Example::

        ms = MutableString("hello world")
        ms.replace_range(Range(0, 5), "hi")
        ms.insert(5, " there")
        ms.append("!")
        ms.commit()
        ms.text  # "hi there world!"

    Instances are not thread-safe; callers sharing one across threads must
    hold their own lock around the mutate-then-commit sequence.
    """

    def __init__(self, text: str = "", *, settings: Settings | None = None) -> None:
        if not isinstance(text, str):
            raise TypeError("MutableString text must be a str")
        self._text = text
        self._overlays: List[Overlay] = []
        self._settings = settings or Settings()

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    @property
    def text(self) -> str:
        """Return the committed text (pending overlays are not applied)."""

        return self._text

    @property
    def overlays(self) -> Tuple[Overlay, ...]:
        """Return the pending overlays in call order."""

        return tuple(self._overlays)

    @property
    def has_pending(self) -> bool:
        return bool(self._overlays)

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"MutableString({self._text!r}, pending={len(self._overlays)})"

    def snapshot(self) -> Dict[str, Any]:
        """Return a serializable view of the buffer for diagnostics."""

        return {
            "text": self._text,
            "length": len(self._text),
            "overlays": [
                {"span": overlay.span.to_tuple(), "text": overlay.text} for overlay in self._overlays
            ],
        }

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def replace_range(self, r: Range | Any, text: str) -> None:
        """Queue replacing the codepoints in ``r`` with ``text``."""

        span = Range.from_value(r)
        self._ensure_valid(span)
        self._overlays.append(Overlay(span=span, text=text))
        LOGGER.debug("Queued overlay %s -> %r (%d pending)", span.to_tuple(), text, len(self._overlays))

    def insert(self, pos: int, text: str) -> None:
        """Queue inserting ``text`` before the codepoint at ``pos``."""

        self.replace_range(Range.at(pos), text)

    def append(self, text: str) -> None:
        """Queue ``text`` at the end of the committed text."""

        self.insert(len(self._text), text)

    def delete_range(self, r: Range | Any) -> None:
        """Queue removal of the codepoints in ``r``."""

        span = Range.from_value(r)
        self._ensure_valid(span)
        self.replace_range(span, "")

    def discard(self) -> int:
        """Drop every pending overlay and return how many were dropped."""

        dropped = len(self._overlays)
        self._overlays.clear()
        if dropped:
            LOGGER.debug("Discarded %d pending overlays", dropped)
        return dropped

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------
    def preview(self) -> str:
        """Return the text a commit would produce without applying it."""

        return splice(self._text, self._overlays).text

    def commit(self) -> CommitResult:
        """Apply all pending overlays to the text in a single pass.

        Overlays are ordered by start then end position (call order breaks
        remaining ties) and spliced left to right, copying the untouched text
        between them. An insertion at the start of a replaced span lands in
        front of the replacement whichever was queued first.
        Abutting overlays are fine. If any overlay starts before the previous
        one ends, :class:`OverlapError` is raised and neither the text nor the
        pending overlays change.
        """

        before = self._text
        count = len(self._overlays)
        result = splice(before, self._overlays)

        self._text = result.text
        self._overlays.clear()

        summary = summarize(before, result.text)
        level = logging.INFO if self._settings.commit_summary_logging else logging.DEBUG
        LOGGER.log(level, "Committed %d overlays (%s)", count, summary)
        return CommitResult(text=result.text, spans=result.spans, summary=summary)

    @contextmanager
    def batch(self) -> Iterator[MutableString]:
        """Commit the overlays queued inside the ``with`` block on clean exit.

        When the block raises, the overlays stay pending and the exception
        propagates.
        """

        yield self
        self.commit()

    def _ensure_valid(self, span: Range) -> None:
        if not is_valid_range(span, len(self._text)):
            LOGGER.debug("Rejected range %s for text of length %d", span.to_tuple(), len(self._text))
            raise InvalidRangeError(span, len(self._text))
