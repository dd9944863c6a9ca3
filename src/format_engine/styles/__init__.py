"""Per-style detectors and appliers plus the ``FormatType`` dispatch table."""

from .block import (
    apply_bullet,
    apply_h1,
    apply_h2,
    apply_h3,
    apply_heading,
    heading_level,
    is_bullet,
    is_h1,
    is_h2,
    is_h3,
    is_heading,
    remove_bullet,
    remove_heading,
    toggle_bullet,
    toggle_h1,
    toggle_h2,
    toggle_h3,
    toggle_heading,
)
from .inline import (
    apply_bold,
    apply_italic,
    apply_strikethrough,
    apply_underline,
    is_bold,
    is_italic,
    is_strikethrough,
    is_underline,
    remove_bold,
    remove_italic,
    remove_strikethrough,
    remove_underline,
    toggle_bold,
    toggle_italic,
    toggle_strikethrough,
    toggle_underline,
)
from .models import HEADING_TYPES, INLINE_TYPES, FormatState, FormatType, StyleSpec
from .registry import (
    STYLES,
    detect_format_state,
    is_format_applied,
    style_for,
    toggle_format,
)

__all__ = [
    "FormatType",
    "FormatState",
    "StyleSpec",
    "INLINE_TYPES",
    "HEADING_TYPES",
    "STYLES",
    "style_for",
    "toggle_format",
    "is_format_applied",
    "detect_format_state",
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
