"""Formatting session binding a buffer to the resolver and orchestrator."""

from __future__ import annotations

from typing import Callable, Optional

from format_engine.actions.toggle import ToggleOutcome, toggle_format
from format_engine.context import LineContext, resolve_format_state, selection_context
from format_engine.document import Buffer, BufferDelta, Selection
from format_engine.runtime import telemetry
from format_engine.styles import FormatState, FormatType
from format_engine.toolbar import ButtonState, toolbar_state

from .bus import EventBus

SnippetBuilder = Callable[..., str]


def apply_outcome(buffer: Buffer, outcome: ToggleOutcome) -> Optional[BufferDelta]:
    """Apply an applied outcome as one undoable transaction; refusals are no-ops."""

    if outcome.refused:
        return None
    return buffer.apply(outcome.edits, selection=outcome.selection, label=outcome.label)


class FormattingSession:
    """Owns a buffer and keeps hosts informed through ``format.*`` events.

    Events: ``format.state`` (``FormatState``), ``format.applied`` and
    ``format.refused`` (``ToggleOutcome``), ``buffer.changed`` (``BufferDelta``).
    """

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        bus: Optional[EventBus] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self.buffer = buffer or Buffer()
        self.bus = bus or EventBus()
        self._logger_name = logger_name

    @classmethod
    def from_text(
        cls, text: str, *, bus: Optional[EventBus] = None
    ) -> "FormattingSession":
        return cls(Buffer.from_text(text), bus=bus)

    @property
    def text(self) -> str:
        return self.buffer.text

    @property
    def selection(self) -> Selection:
        return self.buffer.selection

    @property
    def has_selection(self) -> bool:
        return not self.buffer.selection.empty

    def line_context(self) -> LineContext:
        selection = self.buffer.selection
        return selection_context(self.buffer.document, selection.start, selection.end)

    def format_state(self) -> FormatState:
        selection = self.buffer.selection
        return resolve_format_state(
            self.buffer.document,
            selection.start,
            selection.end,
            has_selection=not selection.empty,
        )

    def toolbar(self) -> tuple[ButtonState, ...]:
        return toolbar_state(
            self.format_state(),
            has_selection=self.has_selection,
            is_single_line=self.line_context().is_single_line,
        )

    def select(self, anchor: int, head: Optional[int] = None) -> FormatState:
        self.buffer.select(anchor, head)
        return self._publish_state()

    def toggle(self, fmt: FormatType | str) -> ToggleOutcome:
        outcome = toggle_format(self.buffer.document, self.buffer.selection, fmt)
        data = {"format": outcome.format_type.value, "status": outcome.status}
        if outcome.refused:
            telemetry.record_event(
                "format.refused",
                data={**data, "reason": outcome.reason},
                logger_name=self._logger_name,
            )
            self.bus.emit("format.refused", outcome)
            return outcome

        delta = apply_outcome(self.buffer, outcome)
        telemetry.record_event(
            "format.applied",
            level="debug",
            data={**data, "edits": len(outcome.edits)},
            logger_name=self._logger_name,
        )
        self.bus.emit("format.applied", outcome)
        self.bus.emit("buffer.changed", delta)
        self._publish_state()
        return outcome

    def insert(self, text: str) -> BufferDelta:
        """Insert ``text`` at the caret, replacing any selected text."""

        selection = self.buffer.selection
        if selection.empty:
            delta = self.buffer.insert_text(text, offset=selection.head)
        else:
            delta = self.buffer.replace_range(selection.start, selection.end, text)
        self.bus.emit("buffer.changed", delta)
        self._publish_state()
        return delta

    def insert_snippet(self, builder: SnippetBuilder, *args: object) -> BufferDelta:
        """Insert ``builder(current_line, *args)`` (see ``actions.insert``)."""

        line = self.buffer.document.line_at(self.buffer.selection.head)
        return self.insert(builder(line.text, *args))

    def undo(self) -> Optional[BufferDelta]:
        return self._after_history(self.buffer.undo())

    def redo(self) -> Optional[BufferDelta]:
        return self._after_history(self.buffer.redo())

    def _after_history(self, delta: Optional[BufferDelta]) -> Optional[BufferDelta]:
        if delta is not None:
            self.bus.emit("buffer.changed", delta)
            self._publish_state()
        return delta

    def _publish_state(self) -> FormatState:
        state = self.format_state()
        self.bus.emit("format.state", state)
        return state


__all__ = ["FormattingSession", "apply_outcome"]
