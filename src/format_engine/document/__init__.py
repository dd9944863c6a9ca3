"""Document snapshots, selections, edits and the undoable buffer."""

from .buffer import Buffer, BufferDelta, BufferView, Transaction
from .document import Line, TextDocument
from .edits import TextEdit, map_offset
from .state import Selection
from .undo import UndoEntry, UndoTimeline
from .validation import (
    DocumentRangeError,
    ensure_offset,
    ensure_range,
    ensure_selection,
)

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferView",
    "Transaction",
    "Line",
    "TextDocument",
    "TextEdit",
    "map_offset",
    "Selection",
    "UndoEntry",
    "UndoTimeline",
    "DocumentRangeError",
    "ensure_offset",
    "ensure_range",
    "ensure_selection",
]
