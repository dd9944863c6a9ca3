"""Selection ranges over document offsets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .edits import TextEdit, map_offset


@dataclass(frozen=True, slots=True)
class Selection:
    """Anchor/head pair; ``anchor == head`` is a bare caret."""

    anchor: int
    head: int

    @classmethod
    def caret(cls, offset: int) -> "Selection":
        return cls(anchor=offset, head=offset)

    @property
    def start(self) -> int:
        return min(self.anchor, self.head)

    @property
    def end(self) -> int:
        return max(self.anchor, self.head)

    @property
    def empty(self) -> bool:
        return self.anchor == self.head

    def map(self, edits: Iterable[TextEdit]) -> "Selection":
        batch = tuple(edits)
        return Selection(
            anchor=map_offset(self.anchor, batch),
            head=map_offset(self.head, batch),
        )


__all__ = ["Selection"]
