"""Toggle orchestration: turn a format request into edits or a refusal.

Decision rules:

- caret only: block styles toggle the caret line; inline styles are refused
- single-line selection: inline styles toggle the selected substring, block
  styles toggle the whole line
- multi-line selection: headings are refused, bullet toggles every touched
  line independently, inline styles wrap the selected text across lines

Nothing here mutates a document. Callers apply ``ToggleOutcome.edits`` as a
single atomic batch and re-resolve the format state afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from format_engine.context import selection_context
from format_engine.document import Selection, TextDocument, TextEdit
from format_engine.runtime.telemetry import span
from format_engine.styles import STYLES, FormatType

REFUSED_INLINE_WITHOUT_SELECTION = "inline_requires_selection"
REFUSED_HEADING_MULTI_LINE = "heading_multi_line"


@dataclass(frozen=True, slots=True)
class ToggleOutcome:
    """Result of a toggle request.

    ``selection`` is ``None`` when the caller should keep its current
    selection and map it through the edits.
    """

    status: Literal["applied", "refused"]
    format_type: FormatType
    edits: tuple[TextEdit, ...] = ()
    selection: Optional[Selection] = None
    reason: Optional[str] = None

    @property
    def applied(self) -> bool:
        return self.status == "applied"

    @property
    def refused(self) -> bool:
        return self.status == "refused"

    @property
    def label(self) -> str:
        return f"format::{self.format_type.value}"


def _refuse(fmt: FormatType, reason: str) -> ToggleOutcome:
    return ToggleOutcome(status="refused", format_type=fmt, reason=reason)


def can_toggle(
    fmt: FormatType | str, *, has_selection: bool, is_single_line: bool
) -> Optional[str]:
    """Return the refusal reason for this selection shape, or ``None``."""

    fmt = FormatType(fmt)
    if not has_selection and fmt.is_inline:
        return REFUSED_INLINE_WITHOUT_SELECTION
    if fmt.is_heading and not is_single_line:
        return REFUSED_HEADING_MULTI_LINE
    return None


def toggle_format(
    document: TextDocument, selection: Selection, fmt: FormatType | str
) -> ToggleOutcome:
    fmt = FormatType(fmt)
    spec = STYLES[fmt]
    with span(
        "actions::toggle_format",
        component="actions",
        metadata={
            "format": fmt.value,
            "anchor": selection.anchor,
            "head": selection.head,
        },
    ) as handle:
        if selection.empty:
            reason = can_toggle(fmt, has_selection=False, is_single_line=True)
            if reason:
                handle.add_metadata("refused", reason)
                return _refuse(fmt, reason)
            line = document.line_at(selection.head)
            edit = TextEdit(line.start, line.end, spec.toggle(line.text))
            return ToggleOutcome(status="applied", format_type=fmt, edits=(edit,))

        context = selection_context(document, selection.start, selection.end)
        reason = can_toggle(
            fmt, has_selection=True, is_single_line=context.is_single_line
        )
        if reason:
            handle.add_metadata("refused", reason)
            return _refuse(fmt, reason)

        if fmt.is_block:
            edits = tuple(
                TextEdit(line.start, line.end, spec.toggle(line.text))
                for line in context.lines
            )
            handle.add_metadata("lines", len(edits))
            if not context.is_single_line:
                return ToggleOutcome(status="applied", format_type=fmt, edits=edits)
            start = edits[0].start
            return ToggleOutcome(
                status="applied",
                format_type=fmt,
                edits=edits,
                selection=Selection(start, start + len(edits[0].text)),
            )

        replacement = spec.toggle(context.selected_text)
        start = selection.start
        return ToggleOutcome(
            status="applied",
            format_type=fmt,
            edits=(TextEdit(start, selection.end, replacement),),
            selection=Selection(start, start + len(replacement)),
        )


__all__ = [
    "ToggleOutcome",
    "can_toggle",
    "toggle_format",
    "REFUSED_INLINE_WITHOUT_SELECTION",
    "REFUSED_HEADING_MULTI_LINE",
]
