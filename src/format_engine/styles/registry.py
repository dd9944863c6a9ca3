"""Dispatch table mapping each ``FormatType`` to its style operations."""

from __future__ import annotations

from functools import partial
from types import MappingProxyType
from typing import Mapping

from . import block, inline
from .models import FormatState, FormatType, StyleSpec

STYLES: Mapping[FormatType, StyleSpec] = MappingProxyType(
    {
        FormatType.BOLD: StyleSpec(
            FormatType.BOLD, inline.is_bold, inline.apply_bold, inline.remove_bold
        ),
        FormatType.ITALIC: StyleSpec(
            FormatType.ITALIC,
            inline.is_italic,
            inline.apply_italic,
            inline.remove_italic,
        ),
        FormatType.UNDERLINE: StyleSpec(
            FormatType.UNDERLINE,
            inline.is_underline,
            inline.apply_underline,
            inline.remove_underline,
        ),
        FormatType.STRIKETHROUGH: StyleSpec(
            FormatType.STRIKETHROUGH,
            inline.is_strikethrough,
            inline.apply_strikethrough,
            inline.remove_strikethrough,
        ),
        **{
            heading: StyleSpec(
                heading,
                partial(block.is_heading, level=heading.heading_level),
                partial(block.apply_heading, level=heading.heading_level),
                block.remove_heading,
            )
            for heading in (FormatType.H1, FormatType.H2, FormatType.H3)
        },
        FormatType.BULLET: StyleSpec(
            FormatType.BULLET,
            block.is_bullet,
            block.apply_bullet,
            block.remove_bullet,
        ),
    }
)


def style_for(fmt: FormatType | str) -> StyleSpec:
    return STYLES[FormatType(fmt)]


def toggle_format(text: str, fmt: FormatType | str) -> str:
    """Toggle ``fmt`` on ``text`` without any selection context."""

    return style_for(fmt).toggle(text)


def is_format_applied(text: str, fmt: FormatType | str) -> bool:
    return style_for(fmt).detect(text)


def detect_format_state(text: str) -> FormatState:
    """Plain detection of every style on a single string."""

    return FormatState(
        **{fmt.value: spec.detect(text) for fmt, spec in STYLES.items()}
    )


__all__ = [
    "STYLES",
    "style_for",
    "toggle_format",
    "is_format_applied",
    "detect_format_state",
]
