"""Replacement edits and position mapping through an edit batch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace ``[start, end)`` of a snapshot with ``text``."""

    start: int
    end: int
    text: str

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid edit range [{self.start}, {self.end})")

    @property
    def delta(self) -> int:
        return len(self.text) - (self.end - self.start)


def sort_edits(edits: Iterable[TextEdit]) -> list[TextEdit]:
    return sorted(edits, key=lambda edit: (edit.start, edit.end))


def map_offset(offset: int, edits: Iterable[TextEdit]) -> int:
    """Map ``offset`` from the pre-edit snapshot onto the post-edit text.

    Positions inside a replaced range keep their distance from the edit
    start, clamped to the replacement length.
    """

    shift = 0
    for edit in sort_edits(edits):
        if offset < edit.start:
            break
        if offset >= edit.end:
            shift += edit.delta
            continue
        return edit.start + shift + min(offset - edit.start, len(edit.text))
    return offset + shift


__all__ = ["TextEdit", "map_offset", "sort_edits"]
