from __future__ import annotations

from format_engine.context import (
    all_lines_share_heading_level,
    common_heading_level,
    is_multi_line_selection,
    resolve_format_state,
    selection_context,
    touched_lines,
)
from format_engine.document import TextDocument


def make_document(text: str) -> TextDocument:
    return TextDocument.from_text(text)


def test_inline_flags_are_true_when_any_line_matches() -> None:
    document = make_document("<b>bold</b>\nplain")

    state = resolve_format_state(document, 0, document.length)

    assert state.bold
    assert not state.italic


def test_partial_selection_reports_whole_line_style() -> None:
    document = make_document("<b>bold</b>")

    assert resolve_format_state(document, 3, 7).bold


def test_caret_never_reports_inline_styles() -> None:
    document = make_document("<b>bold</b>")

    state = resolve_format_state(document, 5, 5, has_selection=False)

    assert not state.bold
    assert not resolve_format_state(document, 3, 3).bold
    assert resolve_format_state(document, 3, 3, has_selection=True).bold


def test_bullet_requires_every_line() -> None:
    mixed = make_document("- a\nb")
    full = make_document("- a\n- b")

    assert not resolve_format_state(mixed, 0, mixed.length).bullet
    assert resolve_format_state(full, 0, full.length).bullet


def test_headings_only_on_single_line() -> None:
    document = make_document("# a\n# b")

    multi = resolve_format_state(document, 0, document.length)
    single = resolve_format_state(document, 0, 1)
    caret = resolve_format_state(document, 5, 5, has_selection=False)

    assert not multi.h1
    assert single.h1
    assert caret.h1 and not caret.h2


def test_reversed_range_is_normalized() -> None:
    document = make_document("- a\n- b")

    assert resolve_format_state(document, document.length, 0).bullet
    assert len(touched_lines(document, 5, 1)) == 2


def test_selection_context_reports_line_bounds() -> None:
    document = make_document("first\nsecond\nthird")

    context = selection_context(document, 2, 8)

    assert not context.is_single_line
    assert [line.number for line in context.lines] == [1, 2]
    assert context.selected_text == "rst\nse"
    assert (context.start_line_from, context.end_line_to) == (0, 12)
    assert is_multi_line_selection(document, 2, 8)
    assert not is_multi_line_selection(document, 0, 5)


def test_heading_level_helpers() -> None:
    document = make_document("## a\n## b\n# c")
    lines = document.lines

    assert all_lines_share_heading_level(lines[:2])
    assert common_heading_level(lines[:2]) == 2
    assert common_heading_level(lines) == 0
    assert not all_lines_share_heading_level(())
