from __future__ import annotations

import pytest

from format_engine.styles import (
    STYLES,
    FormatState,
    FormatType,
    apply_bullet,
    apply_h1,
    apply_h2,
    apply_heading,
    detect_format_state,
    heading_level,
    is_bold,
    is_bullet,
    is_format_applied,
    is_h1,
    is_h2,
    is_h3,
    is_italic,
    is_strikethrough,
    is_underline,
    remove_bold,
    remove_bullet,
    remove_heading,
    remove_italic,
    remove_strikethrough,
    remove_underline,
    toggle_bold,
    toggle_bullet,
    toggle_format,
    toggle_h1,
    toggle_strikethrough,
    toggle_underline,
)


def test_bold_detection_trims_and_requires_content() -> None:
    assert is_bold("<b>x</b>")
    assert is_bold("  <b>x</b>\t")
    assert not is_bold("<b></b>")
    assert not is_bold("x <b>y</b>")


def test_remove_bold_strips_every_layer() -> None:
    assert remove_bold("<b><b>x</b></b>") == "x"
    assert remove_bold(remove_bold("<b><b>x</b></b>")) == "x"


def test_toggle_bold_twice_restores_wrapped_text() -> None:
    assert toggle_bold(toggle_bold("<b>x</b>")) == "<b>x</b>"
    assert toggle_bold("plain") == "<b>plain</b>"


def test_italic_yields_to_bold() -> None:
    assert is_italic("<i>x</i>")
    assert not is_italic("<b>x</b>")
    assert not is_italic("<b><i>x</i></b>")
    assert remove_italic("<i><i>x</i></i>") == "x"


@pytest.mark.parametrize(
    "toggle, sample",
    [
        (toggle_underline, "x"),
        (toggle_underline, "<u>x</u>"),
        (toggle_underline, "  padded"),
        (toggle_strikethrough, "x"),
        (toggle_strikethrough, "~~x~~"),
    ],
)
def test_single_layer_toggles_are_involutions(toggle, sample: str) -> None:
    assert toggle(toggle(sample)) == sample


def test_single_layer_removers_leave_plain_text_alone() -> None:
    assert remove_underline("plain ") == "plain "
    assert remove_strikethrough("~~") == "~~"
    assert remove_underline("<u><u>x</u></u>") == "<u>x</u>"
    assert is_underline("<u>x</u>") and is_strikethrough("~~x~~")


@pytest.mark.parametrize(
    "fmt, sample",
    [
        (FormatType.BOLD, "<b><b>x</b></b>"),
        (FormatType.ITALIC, "<i>x</i>"),
        (FormatType.UNDERLINE, "<u>x</u>"),
        (FormatType.STRIKETHROUGH, "~~x~~"),
        (FormatType.H1, "# title"),
        (FormatType.H2, "## title"),
        (FormatType.H3, "###   title"),
        (FormatType.BULLET, "* item"),
    ],
)
def test_remove_is_idempotent(fmt: FormatType, sample: str) -> None:
    remove = STYLES[fmt].remove
    assert remove(remove(sample)) == remove(sample)


def test_heading_levels_are_exclusive() -> None:
    for sample in ("# a", "## a", "### a", "#### a", "#a", "plain"):
        assert sum((is_h1(sample), is_h2(sample), is_h3(sample))) <= 1
    assert heading_level("#### deep") == 0
    assert heading_level("  ## spaced") == 2
    assert heading_level("# ") == 0


def test_apply_heading_normalizes_existing_prefix() -> None:
    assert apply_h2(apply_h1("text")) == "## text"
    assert apply_h1("## Already H2") == "# Already H2"
    assert toggle_h1("# title") == "title"
    assert remove_heading("#### deep") == "deep"


def test_apply_heading_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        apply_heading("text", 4)


def test_bullet_markers() -> None:
    assert is_bullet("- item")
    assert is_bullet("* item")
    assert not is_bullet("-item")
    assert apply_bullet("* item") == "- item"
    assert remove_bullet("-   item") == "item"
    assert toggle_bullet(toggle_bullet("item")) == "item"


def test_registry_dispatch_by_name() -> None:
    assert toggle_format("x", "bold") == "<b>x</b>"
    assert is_format_applied("## x", FormatType.H2)
    with pytest.raises(ValueError):
        toggle_format("x", "blink")


def test_detect_format_state_and_helpers() -> None:
    state = detect_format_state("<b>x</b>")

    assert state.bold and not state.italic
    assert state.active() == (FormatType.BOLD,)
    assert state.get("bold") is True
    assert state.without_inline() == FormatState.empty()
    assert state.as_dict()["bold"] is True


def test_format_type_kinds() -> None:
    assert FormatType.BOLD.is_inline
    assert FormatType.BULLET.is_block and not FormatType.BULLET.is_heading
    assert FormatType.H3.heading_level == 3
    assert FormatType.ITALIC.heading_level == 0
