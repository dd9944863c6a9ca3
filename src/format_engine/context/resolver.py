"""Selection-aware format detection.

Detection looks at whole touched lines rather than the exact selected
substring, so selecting part of a bold line still reports bold:

- inline styles are active when ANY touched line carries them
- heading levels are active only on single-line selections
- bullet is active only when ALL touched lines are bullet items

With ``has_selection=False`` (a bare caret) inline styles are never reported;
only the block styles of the caret line are.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from format_engine.document import Line, TextDocument
from format_engine.runtime.telemetry import span
from format_engine.styles import INLINE_TYPES, STYLES, FormatState, FormatType
from format_engine.styles.block import heading_level


@dataclass(frozen=True, slots=True)
class LineContext:
    """Lines touched by a selection plus the selected text."""

    lines: Tuple[Line, ...]
    is_single_line: bool
    selected_text: str
    start_line_from: int
    end_line_to: int


def touched_lines(document: TextDocument, start: int, end: int) -> Tuple[Line, ...]:
    """Every line overlapping ``[start, end]``; a caret touches its own line."""

    if start > end:
        start, end = end, start
    first = document.line_at(start).number
    last = document.line_at(end).number
    return tuple(document.line(number) for number in range(first, last + 1))


def is_multi_line_selection(document: TextDocument, start: int, end: int) -> bool:
    return document.line_at(start).number != document.line_at(end).number


def selection_context(document: TextDocument, start: int, end: int) -> LineContext:
    if start > end:
        start, end = end, start
    lines = touched_lines(document, start, end)
    return LineContext(
        lines=lines,
        is_single_line=len(lines) == 1,
        selected_text=document.slice(start, end),
        start_line_from=lines[0].start,
        end_line_to=lines[-1].end,
    )


def _any_line(lines: Sequence[Line], detect: Callable[[str], bool]) -> bool:
    return any(detect(line.text) for line in lines)


def _every_line(lines: Sequence[Line], detect: Callable[[str], bool]) -> bool:
    return bool(lines) and all(detect(line.text) for line in lines)


def resolve_format_state(
    document: TextDocument,
    start: int,
    end: int,
    *,
    has_selection: Optional[bool] = None,
) -> FormatState:
    """Context-aware format flags for ``[start, end)``.

    ``has_selection`` defaults to ``start != end``; inline flags are only
    reported for a real selection.
    """

    if has_selection is None:
        has_selection = start != end
    with span(
        "context::resolve",
        component="context",
        metadata={"start": start, "end": end, "has_selection": has_selection},
    ) as handle:
        lines = touched_lines(document, start, end)
        single = len(lines) == 1
        handle.add_metadata("lines", len(lines))

        flags: dict[str, bool] = {}
        for fmt, spec in STYLES.items():
            if fmt in INLINE_TYPES:
                flags[fmt.value] = has_selection and _any_line(lines, spec.detect)
            elif fmt is FormatType.BULLET:
                flags[fmt.value] = _every_line(lines, spec.detect)
            else:
                flags[fmt.value] = single and _every_line(lines, spec.detect)
        return FormatState(**flags)


def line_heading_level(line: Line) -> int:
    return heading_level(line.text)


def all_lines_share_heading_level(lines: Sequence[Line]) -> bool:
    """True when every line has the same heading level (0 included)."""

    if not lines:
        return False
    first = line_heading_level(lines[0])
    return all(line_heading_level(line) == first for line in lines)


def common_heading_level(lines: Sequence[Line]) -> int:
    if not all_lines_share_heading_level(lines):
        return 0
    return line_heading_level(lines[0])


__all__ = [
    "LineContext",
    "touched_lines",
    "is_multi_line_selection",
    "selection_context",
    "resolve_format_state",
    "line_heading_level",
    "all_lines_share_heading_level",
    "common_heading_level",
]
