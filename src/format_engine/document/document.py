"""Immutable, offset-addressed text snapshots."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from .edits import TextEdit, sort_edits
from .validation import DocumentRangeError, ensure_offset, ensure_range


@dataclass(frozen=True, slots=True)
class Line:
    """One line of a snapshot. ``end`` excludes the ``\\n`` or ``\\r\\n`` break."""

    number: int
    start: int
    end: int
    text: str

    @property
    def length(self) -> int:
        return self.end - self.start


def _split_lines(text: str) -> Tuple[Line, ...]:
    lines: list[Line] = []
    offset = 0
    for number, raw in enumerate(text.split("\n"), start=1):
        content = raw[:-1] if raw.endswith("\r") else raw
        end = offset + len(content)
        lines.append(Line(number=number, start=offset, end=end, text=content))
        offset += len(raw) + 1
    return tuple(lines)


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Snapshot of a document.

    Lines are split on ``"\\n"``; a ``"\\r"`` before it belongs to the line
    break, not to ``Line.text``. Offsets always address the exact source
    text. A snapshot always has at least one (possibly empty) line. Edits never
    mutate a snapshot; ``apply_edits`` returns the next version.
    """

    text: str = ""
    version: int = 0
    _lines: Tuple[Line, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_lines", _split_lines(self.text))

    @classmethod
    def from_text(cls, text: str) -> "TextDocument":
        return cls(text=text)

    @property
    def lines(self) -> Tuple[Line, ...]:
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def length(self) -> int:
        return len(self.text)

    def line(self, number: int) -> Line:
        """Return the 1-indexed line ``number``."""

        if number < 1 or number > len(self._lines):
            raise DocumentRangeError(f"Line {number} out of range")
        return self._lines[number - 1]

    def line_at(self, offset: int) -> Line:
        """Return the line containing ``offset``."""

        ensure_offset(self, offset)
        index = bisect_right(self._lines, offset, key=lambda line: line.start) - 1
        return self._lines[max(index, 0)]

    def slice(self, start: int, end: int) -> str:
        ensure_range(self, start, end)
        return self.text[start:end]

    def offset_at(self, row: int, col: int) -> int:
        """Convert a 0-indexed ``(row, col)`` location into an offset."""

        line = self.line(row + 1)
        if col < 0 or col > line.length:
            raise DocumentRangeError("Column out of range", offset=line.start + col)
        return line.start + col

    def location_of(self, offset: int) -> Tuple[int, int]:
        line = self.line_at(offset)
        return (line.number - 1, offset - line.start)

    def apply_edits(self, edits: Iterable[TextEdit]) -> "TextDocument":
        """Apply a batch of non-overlapping edits against this snapshot.

        All offsets refer to this snapshot; the batch succeeds or fails as a
        whole.
        """

        ordered = sort_edits(edits)
        pieces: list[str] = []
        cursor = 0
        for edit in ordered:
            ensure_range(self, edit.start, edit.end)
            if edit.start < cursor:
                raise DocumentRangeError("Overlapping edits", offset=edit.start)
            pieces.append(self.text[cursor : edit.start])
            pieces.append(edit.text)
            cursor = edit.end
        pieces.append(self.text[cursor:])
        return TextDocument(text="".join(pieces), version=self.version + 1)


__all__ = ["Line", "TextDocument"]
