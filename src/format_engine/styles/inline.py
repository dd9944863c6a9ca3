"""Inline styles: spans wrapped in HTML tags or ``~~`` markers.

Detection always looks at the stripped text. Appliers wrap the text they are
given untouched, so callers decide which slice (selection or line) to pass.
"""

from __future__ import annotations

BOLD_OPEN, BOLD_CLOSE = "<b>", "</b>"
ITALIC_OPEN, ITALIC_CLOSE = "<i>", "</i>"
UNDERLINE_OPEN, UNDERLINE_CLOSE = "<u>", "</u>"
STRIKE_MARKER = "~~"


def _is_wrapped(text: str, opening: str, closing: str) -> bool:
    # Content must be non-empty: "<b></b>" alone is not bold.
    return (
        text.startswith(opening)
        and text.endswith(closing)
        and len(text) > len(opening) + len(closing)
    )


def _unwrap(text: str, opening: str, closing: str) -> str:
    return text[len(opening) : len(text) - len(closing)]


def is_bold(text: str) -> bool:
    return _is_wrapped(text.strip(), BOLD_OPEN, BOLD_CLOSE)


def apply_bold(text: str) -> str:
    return f"{BOLD_OPEN}{text}{BOLD_CLOSE}"


def remove_bold(text: str) -> str:
    """Strip every outer ``<b>`` layer: ``<b><b>x</b></b>`` -> ``x``."""

    result = text.strip()
    while _is_wrapped(result, BOLD_OPEN, BOLD_CLOSE):
        result = _unwrap(result, BOLD_OPEN, BOLD_CLOSE)
    return result


def toggle_bold(text: str) -> str:
    return remove_bold(text) if is_bold(text) else apply_bold(text)


def is_italic(text: str) -> bool:
    """Italic unless the text is (also) bold-delimited; bold wins."""

    trimmed = text.strip()
    if trimmed.startswith(BOLD_OPEN) or trimmed.endswith(BOLD_CLOSE):
        return False
    return _is_wrapped(trimmed, ITALIC_OPEN, ITALIC_CLOSE)


def apply_italic(text: str) -> str:
    return f"{ITALIC_OPEN}{text}{ITALIC_CLOSE}"


def remove_italic(text: str) -> str:
    result = text.strip()
    while _is_wrapped(result, ITALIC_OPEN, ITALIC_CLOSE):
        result = _unwrap(result, ITALIC_OPEN, ITALIC_CLOSE)
    return result


def toggle_italic(text: str) -> str:
    return remove_italic(text) if is_italic(text) else apply_italic(text)


def is_underline(text: str) -> bool:
    return _is_wrapped(text.strip(), UNDERLINE_OPEN, UNDERLINE_CLOSE)


def apply_underline(text: str) -> str:
    return f"{UNDERLINE_OPEN}{text}{UNDERLINE_CLOSE}"


def remove_underline(text: str) -> str:
    """Strip a single ``<u>`` layer; non-underlined text comes back unchanged."""

    trimmed = text.strip()
    if not is_underline(trimmed):
        return text
    return _unwrap(trimmed, UNDERLINE_OPEN, UNDERLINE_CLOSE)


def toggle_underline(text: str) -> str:
    return remove_underline(text) if is_underline(text) else apply_underline(text)


def is_strikethrough(text: str) -> bool:
    return _is_wrapped(text.strip(), STRIKE_MARKER, STRIKE_MARKER)


def apply_strikethrough(text: str) -> str:
    return f"{STRIKE_MARKER}{text}{STRIKE_MARKER}"


def remove_strikethrough(text: str) -> str:
    trimmed = text.strip()
    if not is_strikethrough(trimmed):
        return text
    return _unwrap(trimmed, STRIKE_MARKER, STRIKE_MARKER)


def toggle_strikethrough(text: str) -> str:
    if is_strikethrough(text):
        return remove_strikethrough(text)
    return apply_strikethrough(text)


__all__ = [
    "is_bold",
    "apply_bold",
    "remove_bold",
    "toggle_bold",
    "is_italic",
    "apply_italic",
    "remove_italic",
    "toggle_italic",
    "is_underline",
    "apply_underline",
    "remove_underline",
    "toggle_underline",
    "is_strikethrough",
    "apply_strikethrough",
    "remove_strikethrough",
    "toggle_strikethrough",
]
