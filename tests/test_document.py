from __future__ import annotations

import pytest

from format_engine.document import (
    DocumentRangeError,
    Selection,
    TextDocument,
    TextEdit,
    map_offset,
)


def make_document(text: str = "ab\ncd\n") -> TextDocument:
    return TextDocument.from_text(text)


def test_lines_keep_exact_offsets() -> None:
    document = make_document()

    assert document.line_count == 3
    second = document.line(2)
    assert (second.start, second.end, second.text) == (3, 5, "cd")
    assert document.line(3).text == ""
    assert TextDocument().line_count == 1


def test_line_at_maps_newline_to_preceding_line() -> None:
    document = make_document()

    assert document.line_at(2).number == 1
    assert document.line_at(3).number == 2
    assert document.line_at(document.length).number == 3


def test_out_of_range_access_raises() -> None:
    document = make_document()

    with pytest.raises(DocumentRangeError):
        document.line(4)
    with pytest.raises(DocumentRangeError) as excinfo:
        document.line_at(99)
    assert excinfo.value.offset == 99
    with pytest.raises(DocumentRangeError):
        document.slice(4, 2)


def test_location_round_trip() -> None:
    document = make_document()

    assert document.offset_at(1, 1) == 4
    assert document.location_of(4) == (1, 1)
    with pytest.raises(DocumentRangeError):
        document.offset_at(0, 5)


def test_apply_edits_uses_snapshot_offsets() -> None:
    document = make_document("hello world")

    updated = document.apply_edits(
        [TextEdit(6, 11, "there"), TextEdit(0, 5, "HELLO")]
    )

    assert updated.text == "HELLO there"
    assert updated.version == document.version + 1
    assert document.text == "hello world"


def test_overlapping_edits_fail_as_a_whole() -> None:
    document = make_document("hello world")

    with pytest.raises(DocumentRangeError):
        document.apply_edits([TextEdit(0, 5, "x"), TextEdit(3, 6, "y")])


def test_text_edit_rejects_inverted_range() -> None:
    with pytest.raises(ValueError):
        TextEdit(5, 3, "")
    assert TextEdit(2, 6, "x").delta == -3


def test_map_offset_through_edits() -> None:
    prefix = [TextEdit(0, 0, "- ")]
    assert map_offset(0, prefix) == 2
    assert map_offset(5, prefix) == 7

    replace = [TextEdit(2, 6, "x")]
    assert map_offset(1, replace) == 1
    assert map_offset(4, replace) == 3
    assert map_offset(8, replace) == 5


def test_selection_properties_and_mapping() -> None:
    selection = Selection(anchor=7, head=2)

    assert (selection.start, selection.end) == (2, 7)
    assert not selection.empty
    assert Selection.caret(3).empty
    assert selection.map([TextEdit(0, 0, "ab")]) == Selection(anchor=9, head=4)


def test_crlf_break_is_not_part_of_line_text() -> None:
    document = TextDocument.from_text("ab\r\ncd")

    first, second = document.lines
    assert (first.start, first.end, first.text) == (0, 2, "ab")
    assert (second.start, second.end, second.text) == (4, 6, "cd")
    assert document.line_at(3).number == 1
