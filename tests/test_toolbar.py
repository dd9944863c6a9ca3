from __future__ import annotations

import pytest

from format_engine.styles import FormatState, FormatType
from format_engine.toolbar import (
    TOOLBAR_BUTTONS,
    ButtonState,
    ToolbarNavigator,
    toolbar_state,
)


def make_states(**flags: bool) -> dict[FormatType, ButtonState]:
    states = toolbar_state(
        FormatState(**flags), has_selection=True, is_single_line=False
    )
    return {state.button.type: state for state in states}


def test_toolbar_lists_every_style_once() -> None:
    assert [button.type for button in TOOLBAR_BUTTONS] == list(FormatType)


def test_active_and_enabled_flags() -> None:
    states = make_states(bold=True, bullet=True)

    assert states[FormatType.BOLD].active
    assert states[FormatType.BULLET].active
    assert not states[FormatType.ITALIC].active
    assert not states[FormatType.H1].enabled
    assert states[FormatType.BULLET].enabled


def test_disabled_buttons_explain_themselves() -> None:
    states = make_states()

    assert states[FormatType.BOLD].tooltip == "Bold (Ctrl+B)"
    assert states[FormatType.H2].tooltip.endswith("(disabled for this selection)")


def test_caret_disables_inline_buttons() -> None:
    states = toolbar_state(FormatState(), has_selection=False, is_single_line=True)

    enabled = [state.button.type for state in states if state.enabled]
    assert enabled == [FormatType.H1, FormatType.H2, FormatType.H3, FormatType.BULLET]


def test_navigator_wraps_in_both_directions() -> None:
    navigator = ToolbarNavigator()

    assert navigator.focused() is None
    assert navigator.previous().type is FormatType.BULLET
    assert navigator.next().type is FormatType.BOLD
    assert navigator.previous().type is FormatType.BULLET

    navigator.reset()
    assert navigator.next().type is FormatType.BOLD
    assert navigator.focused().type is FormatType.BOLD


def test_navigator_requires_buttons() -> None:
    with pytest.raises(ValueError):
        ToolbarNavigator(())
