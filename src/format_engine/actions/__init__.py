"""Editing verbs: format toggling and Markdown snippet insertion."""

from .insert import (
    TableConfig,
    generate_blockquote,
    generate_code_block,
    generate_image,
    generate_link,
    generate_ordered_list,
    generate_table,
    generate_unordered_list,
    insert_blockquote,
    insert_code_block,
    insert_image,
    insert_link,
    insert_ordered_list,
    insert_table,
    insert_unordered_list,
)
from .toggle import (
    REFUSED_HEADING_MULTI_LINE,
    REFUSED_INLINE_WITHOUT_SELECTION,
    ToggleOutcome,
    can_toggle,
    toggle_format,
)

__all__ = [
    "ToggleOutcome",
    "can_toggle",
    "toggle_format",
    "REFUSED_HEADING_MULTI_LINE",
    "REFUSED_INLINE_WITHOUT_SELECTION",
    "TableConfig",
    "generate_table",
    "insert_table",
    "generate_image",
    "insert_image",
    "generate_link",
    "insert_link",
    "generate_code_block",
    "insert_code_block",
    "generate_blockquote",
    "insert_blockquote",
    "generate_unordered_list",
    "insert_unordered_list",
    "generate_ordered_list",
    "insert_ordered_list",
]
