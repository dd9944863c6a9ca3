from __future__ import annotations

import pytest

from format_engine.actions import (
    TableConfig,
    generate_blockquote,
    generate_code_block,
    generate_image,
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


def test_default_table_has_header_and_empty_rows() -> None:
    lines = generate_table().split("\n")

    assert lines[0] == "| **Header 1** | **Header 2** | **Header 3** |"
    assert lines[1] == "|----------|----------|----------|"
    assert lines[2:] == ["|  |  |  |"] * 3


def test_table_without_header() -> None:
    table = generate_table(TableConfig(columns=2, rows=1, has_header=False))

    assert table == "|  |  |"


def test_table_config_validation() -> None:
    with pytest.raises(ValueError):
        TableConfig(columns=0)
    with pytest.raises(ValueError):
        TableConfig(rows=-1)


def test_snippets_go_in_as_is_on_blank_lines() -> None:
    assert insert_table("   ") == generate_table()
    assert insert_image("") == "![Image]()"
    assert insert_blockquote("", "quoted") == "> quoted"


def test_snippets_are_pushed_below_existing_content() -> None:
    assert insert_table("text").startswith("\n\n| **Header 1**")
    assert insert_link("text") == "\n[Link text]()"
    assert insert_image("text", "logo", "logo.png") == "\n![logo](logo.png)"
    assert insert_code_block("text").startswith("\n\n```javascript\n")
    assert insert_unordered_list("text") == "\n\n- Item 1\n- Item 2\n- Item 3"
    assert insert_ordered_list("text", ["a"]) == "\n\n1. a"


def test_generators() -> None:
    assert generate_image() == "![Image]()"
    assert generate_code_block("python", "print(1)") == "```python\nprint(1)\n```"
    assert generate_blockquote() == "> "
    assert generate_unordered_list(["x", "y"]) == "- x\n- y"
    assert generate_ordered_list(["x", "y"]) == "1. x\n2. y"
