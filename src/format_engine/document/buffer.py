"""Mutable buffer façade combining a document snapshot, selection and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from typing import ContextManager, Iterable, Optional

from format_engine.runtime import telemetry

from .document import TextDocument
from .edits import TextEdit
from .state import Selection
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_selection


@dataclass(slots=True)
class BufferView:
    """Host-friendly snapshot of the buffer."""

    version: int
    text: str
    selection: Selection
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    selection: Selection
    edits: tuple[TextEdit, ...]
    label: str


class Buffer:
    """Owns the current snapshot; every mutation is one undoable transaction."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[TextDocument] = None,
        selection: Optional[Selection] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or TextDocument()
        self.selection = ensure_selection(
            self.document, selection or Selection.caret(0)
        )
        self.undo_timeline = undo or UndoTimeline()

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=TextDocument.from_text(text))

    @property
    def text(self) -> str:
        return self.document.text

    def snapshot(self, *, attributes: Optional[dict[str, str]] = None) -> BufferView:
        return BufferView(
            version=self.document.version,
            text=self.document.text,
            selection=self.selection,
            attributes=dict(attributes or {}),
        )

    def select(self, anchor: int, head: Optional[int] = None) -> Selection:
        selection = Selection(anchor=anchor, head=anchor if head is None else head)
        self.selection = ensure_selection(self.document, selection)
        return self.selection

    def apply(
        self,
        edits: Iterable[TextEdit],
        *,
        selection: Optional[Selection] = None,
        label: str,
    ) -> BufferDelta:
        """Apply ``edits`` atomically.

        ``selection`` replaces the current one after the edit; when omitted the
        current selection is mapped through the edits.
        """

        batch = tuple(edits)
        with Transaction(self, label) as tx:
            before = self.document
            selection_before = self.selection
            after = before.apply_edits(batch)
            if selection is None:
                selection = self.selection.map(batch)
            self.document = after
            self.selection = ensure_selection(after, selection)
            tx.commit(before.text, after.text, selection_before, self.selection)

        return BufferDelta(
            version=self.document.version,
            text=self.document.text,
            selection=self.selection,
            edits=batch,
            label=label,
        )

    def replace_range(
        self, start: int, end: int, text: str, *, label: str = "replace_range"
    ) -> BufferDelta:
        caret = Selection.caret(start + len(text))
        return self.apply([TextEdit(start, end, text)], selection=caret, label=label)

    def insert_text(self, text: str, *, offset: Optional[int] = None) -> BufferDelta:
        position = self.selection.head if offset is None else offset
        return self.apply([TextEdit(position, position, text)], label="insert_text")

    def set_text(self, text: str, *, label: str = "set_text") -> BufferDelta:
        edit = TextEdit(0, self.document.length, text)
        return self.apply([edit], selection=Selection.caret(len(text)), label=label)

    def undo(self) -> Optional[BufferDelta]:
        entry = self.undo_timeline.undo()
        if entry is None:
            return None
        return self._restore(
            entry.before_text, entry.selection_before, f"undo::{entry.label}"
        )

    def redo(self) -> Optional[BufferDelta]:
        entry = self.undo_timeline.redo()
        if entry is None:
            return None
        return self._restore(
            entry.after_text, entry.selection_after, f"redo::{entry.label}"
        )

    def _restore(self, text: str, selection: Selection, label: str) -> BufferDelta:
        with telemetry.span(
            name=f"buffer::{label}",
            component=True,
            metadata={"buffer": self.name},
        ):
            version = self.document.version + 1
            self.document = TextDocument(text=text, version=version)
            self.selection = ensure_selection(self.document, selection)
        return BufferDelta(
            version=self.document.version,
            text=text,
            selection=self.selection,
            edits=(),
            label=label,
        )


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(
        self,
        before_text: str,
        after_text: str,
        selection_before: Selection,
        selection_after: Selection,
    ) -> None:
        self.buffer.undo_timeline.push(
            UndoEntry(
                label=self.label,
                before_text=before_text,
                after_text=after_text,
                selection_before=selection_before,
                selection_after=selection_after,
            )
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "BufferDelta", "BufferView", "Transaction"]
