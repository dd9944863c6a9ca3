"""Line-level styles: ATX headings (levels 1-3) and bullet items."""

from __future__ import annotations

import re

MAX_HEADING_LEVEL = 3
HEADING_PREFIX = re.compile(r"^#+\s+")
BULLET_MARKER = re.compile(r"^[-*]\s")
BULLET_PREFIX = re.compile(r"^[-*]\s+")


def heading_level(text: str) -> int:
    """Return 1-3 when ``text`` opens with that many ``#`` and a space, else 0."""

    trimmed = text.strip()
    level = len(trimmed) - len(trimmed.lstrip("#"))
    if 0 < level <= MAX_HEADING_LEVEL and trimmed[level : level + 1] == " ":
        return level
    return 0


def is_heading(text: str, level: int) -> bool:
    return heading_level(text) == level


def apply_heading(text: str, level: int) -> str:
    if not 1 <= level <= MAX_HEADING_LEVEL:
        raise ValueError(f"heading level must be 1-{MAX_HEADING_LEVEL}, got {level}")
    return f"{'#' * level} {remove_heading(text)}"


def remove_heading(text: str) -> str:
    return HEADING_PREFIX.sub("", text.strip(), count=1)


def toggle_heading(text: str, level: int) -> str:
    if is_heading(text, level):
        return remove_heading(text)
    return apply_heading(text, level)


def is_h1(text: str) -> bool:
    return is_heading(text, 1)


def is_h2(text: str) -> bool:
    return is_heading(text, 2)


def is_h3(text: str) -> bool:
    return is_heading(text, 3)


def apply_h1(text: str) -> str:
    return apply_heading(text, 1)


def apply_h2(text: str) -> str:
    return apply_heading(text, 2)


def apply_h3(text: str) -> str:
    return apply_heading(text, 3)


def toggle_h1(text: str) -> str:
    return toggle_heading(text, 1)


def toggle_h2(text: str) -> str:
    return toggle_heading(text, 2)


def toggle_h3(text: str) -> str:
    return toggle_heading(text, 3)


def is_bullet(text: str) -> bool:
    return BULLET_MARKER.match(text.strip()) is not None


def apply_bullet(text: str) -> str:
    return f"- {remove_bullet(text)}"


def remove_bullet(text: str) -> str:
    return BULLET_PREFIX.sub("", text.strip(), count=1)


def toggle_bullet(text: str) -> str:
    return remove_bullet(text) if is_bullet(text) else apply_bullet(text)


__all__ = [
    "MAX_HEADING_LEVEL",
    "heading_level",
    "is_heading",
    "apply_heading",
    "remove_heading",
    "toggle_heading",
    "is_h1",
    "is_h2",
    "is_h3",
    "apply_h1",
    "apply_h2",
    "apply_h3",
    "toggle_h1",
    "toggle_h2",
    "toggle_h3",
    "is_bullet",
    "apply_bullet",
    "remove_bullet",
    "toggle_bullet",
]
