"""Validation helpers shared across document services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .document import TextDocument
    from .state import Selection


class DocumentRangeError(RuntimeError):
    """Raised when callers hand out offsets, lines or edits outside a snapshot."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


def ensure_offset(document: "TextDocument", offset: int) -> int:
    if offset < 0 or offset > document.length:
        raise DocumentRangeError("Offset out of range", offset=offset)
    return offset


def ensure_range(document: "TextDocument", start: int, end: int) -> tuple[int, int]:
    ensure_offset(document, start)
    ensure_offset(document, end)
    if start > end:
        raise DocumentRangeError("Range start after end", offset=start)
    return start, end


def ensure_selection(document: "TextDocument", selection: "Selection") -> "Selection":
    ensure_offset(document, selection.anchor)
    ensure_offset(document, selection.head)
    return selection
