"""Markdown snippet generators for the insert menu.

Each ``insert_*`` helper takes the content of the caret line: on an empty
(whitespace-only) line the snippet goes in as is, otherwise it is pushed
below the current content with one or two leading newlines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

DEFAULT_LIST_ITEMS: tuple[str, ...] = ("Item 1", "Item 2", "Item 3")


@dataclass(frozen=True, slots=True)
class TableConfig:
    columns: int = 3
    rows: int = 3
    has_header: bool = True

    def __post_init__(self) -> None:
        if self.columns < 1:
            raise ValueError("table needs at least one column")
        if self.rows < 0:
            raise ValueError("rows cannot be negative")


def _place(current_line: str, snippet: str, *, separator: str) -> str:
    if not current_line.strip():
        return snippet
    return f"{separator}{snippet}"


def generate_table(config: TableConfig | None = None) -> str:
    config = config or TableConfig()
    lines: list[str] = []
    if config.has_header:
        headers = [f"**Header {index + 1}**" for index in range(config.columns)]
        lines.append(f"| {' | '.join(headers)} |")
        lines.append(f"|{'|'.join(['----------'] * config.columns)}|")
    empty_row = f"| {' | '.join([''] * config.columns)} |"
    lines.extend(empty_row for _ in range(config.rows))
    return "\n".join(lines)


def insert_table(current_line: str, config: TableConfig | None = None) -> str:
    return _place(current_line, generate_table(config), separator="\n\n")


def generate_image(alt_text: str = "Image", url: str = "") -> str:
    return f"![{alt_text}]({url})"


def insert_image(current_line: str, alt_text: str = "Image", url: str = "") -> str:
    return _place(current_line, generate_image(alt_text, url), separator="\n")


def generate_link(text: str = "Link text", url: str = "") -> str:
    return f"[{text}]({url})"


def insert_link(current_line: str, text: str = "Link text", url: str = "") -> str:
    return _place(current_line, generate_link(text, url), separator="\n")


def generate_code_block(language: str = "javascript", code: str = "") -> str:
    return f"```{language}\n{code}\n```"


def insert_code_block(
    current_line: str, language: str = "javascript", code: str = ""
) -> str:
    return _place(current_line, generate_code_block(language, code), separator="\n\n")


def generate_blockquote(text: str = "") -> str:
    return f"> {text}"


def insert_blockquote(current_line: str, text: str = "") -> str:
    return _place(current_line, generate_blockquote(text), separator="\n")


def generate_unordered_list(items: Sequence[str] = DEFAULT_LIST_ITEMS) -> str:
    return "\n".join(f"- {item}" for item in items)


def insert_unordered_list(
    current_line: str, items: Sequence[str] = DEFAULT_LIST_ITEMS
) -> str:
    return _place(current_line, generate_unordered_list(items), separator="\n\n")


def generate_ordered_list(items: Sequence[str] = DEFAULT_LIST_ITEMS) -> str:
    return "\n".join(f"{index}. {item}" for index, item in enumerate(items, start=1))


def insert_ordered_list(
    current_line: str, items: Sequence[str] = DEFAULT_LIST_ITEMS
) -> str:
    return _place(current_line, generate_ordered_list(items), separator="\n\n")


__all__ = [
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
