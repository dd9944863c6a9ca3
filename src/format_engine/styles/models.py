"""Format types, the resolved format state and per-style operation bundles."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from typing import Callable, Dict


class FormatType(str, Enum):
    """The eight styles the engine can detect and toggle."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    BULLET = "bullet"

    @property
    def is_inline(self) -> bool:
        return self in INLINE_TYPES

    @property
    def is_heading(self) -> bool:
        return self in HEADING_TYPES

    @property
    def is_block(self) -> bool:
        return not self.is_inline

    @property
    def heading_level(self) -> int:
        """1-3 for heading types, 0 otherwise."""

        if not self.is_heading:
            return 0
        return int(self.value[1])


INLINE_TYPES = frozenset(
    {FormatType.BOLD, FormatType.ITALIC, FormatType.UNDERLINE, FormatType.STRIKETHROUGH}
)
HEADING_TYPES = frozenset({FormatType.H1, FormatType.H2, FormatType.H3})


@dataclass(frozen=True, slots=True)
class FormatState:
    """Which styles are active for a selection.

    At most one heading flag is set: a line has exactly one heading level.
    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    h1: bool = False
    h2: bool = False
    h3: bool = False
    bullet: bool = False

    @classmethod
    def empty(cls) -> "FormatState":
        return cls()

    def get(self, fmt: FormatType | str) -> bool:
        return bool(getattr(self, FormatType(fmt).value))

    def active(self) -> tuple[FormatType, ...]:
        return tuple(
            FormatType(item.name) for item in fields(self) if getattr(self, item.name)
        )

    def as_dict(self) -> Dict[str, bool]:
        return asdict(self)

    def without_inline(self) -> "FormatState":
        return replace(
            self, bold=False, italic=False, underline=False, strikethrough=False
        )


@dataclass(frozen=True, slots=True)
class StyleSpec:
    """detect/apply/remove triple for one format type."""

    type: FormatType
    detect: Callable[[str], bool]
    apply: Callable[[str], str]
    remove: Callable[[str], str]

    def toggle(self, text: str) -> str:
        return self.remove(text) if self.detect(text) else self.apply(text)


__all__ = [
    "FormatType",
    "FormatState",
    "StyleSpec",
    "INLINE_TYPES",
    "HEADING_TYPES",
]
