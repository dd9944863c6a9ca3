"""Selection-context resolution: touched lines and context-aware format state."""

from .resolver import (
    LineContext,
    all_lines_share_heading_level,
    common_heading_level,
    is_multi_line_selection,
    line_heading_level,
    resolve_format_state,
    selection_context,
    touched_lines,
)

__all__ = [
    "LineContext",
    "touched_lines",
    "is_multi_line_selection",
    "selection_context",
    "resolve_format_state",
    "line_heading_level",
    "all_lines_share_heading_level",
    "common_heading_level",
]
