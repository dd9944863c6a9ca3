"""Undo/redo history: one entry per buffer transaction."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from .state import Selection

DEFAULT_HISTORY_LIMIT = 500


@dataclass(slots=True)
class UndoEntry:
    """Full-text snapshots around one transaction plus its selections."""

    label: str
    before_text: str
    after_text: str
    selection_before: Selection
    selection_after: Selection


class UndoTimeline:
    """Two-stack history; recording a new entry discards anything undone.

    ``limit`` caps the undo side, dropping the oldest entries first.
    """

    def __init__(self, *, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("history limit must be positive")
        self._done: Deque[UndoEntry] = deque(maxlen=limit)
        self._undone: List[UndoEntry] = []

    def __len__(self) -> int:
        return len(self._done) + len(self._undone)

    def push(self, entry: UndoEntry) -> None:
        self._undone.clear()
        self._done.append(entry)

    def can_undo(self) -> bool:
        return bool(self._done)

    def can_redo(self) -> bool:
        return bool(self._undone)

    def undo(self) -> Optional[UndoEntry]:
        if not self._done:
            return None
        entry = self._done.pop()
        self._undone.append(entry)
        return entry

    def redo(self) -> Optional[UndoEntry]:
        if not self._undone:
            return None
        entry = self._undone.pop()
        self._done.append(entry)
        return entry

    def clear(self) -> None:
        self._done.clear()
        self._undone.clear()


__all__ = ["DEFAULT_HISTORY_LIMIT", "UndoEntry", "UndoTimeline"]
