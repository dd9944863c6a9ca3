"""Formatting toolbar: button catalog, per-button state and keyboard focus."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Sequence

from format_engine.actions.toggle import can_toggle
from format_engine.styles import FormatState, FormatType


@dataclass(frozen=True, slots=True)
class ToolbarButton:
    type: FormatType
    label: str
    tooltip: str
    group: Literal["inline", "block"]


TOOLBAR_BUTTONS: tuple[ToolbarButton, ...] = (
    ToolbarButton(FormatType.BOLD, "Bold", "Bold (Ctrl+B)", "inline"),
    ToolbarButton(FormatType.ITALIC, "Italic", "Italic (Ctrl+I)", "inline"),
    ToolbarButton(FormatType.UNDERLINE, "Underline", "Underline (Ctrl+U)", "inline"),
    ToolbarButton(
        FormatType.STRIKETHROUGH, "Strikethrough", "Strikethrough", "inline"
    ),
    ToolbarButton(FormatType.H1, "Heading 1", "Heading 1 (single-line only)", "block"),
    ToolbarButton(FormatType.H2, "Heading 2", "Heading 2 (single-line only)", "block"),
    ToolbarButton(FormatType.H3, "Heading 3", "Heading 3 (single-line only)", "block"),
    ToolbarButton(FormatType.BULLET, "Bullet List", "Bullet List", "block"),
)


@dataclass(frozen=True, slots=True)
class ButtonState:
    button: ToolbarButton
    active: bool
    enabled: bool

    @property
    def tooltip(self) -> str:
        if self.enabled:
            return self.button.tooltip
        return f"{self.button.tooltip} (disabled for this selection)"


def toolbar_state(
    format_state: FormatState,
    *,
    has_selection: bool,
    is_single_line: bool,
    buttons: Sequence[ToolbarButton] = TOOLBAR_BUTTONS,
) -> tuple[ButtonState, ...]:
    """Button states; a button is disabled exactly when its toggle would be refused."""

    return tuple(
        ButtonState(
            button=button,
            active=format_state.get(button.type),
            enabled=can_toggle(
                button.type,
                has_selection=has_selection,
                is_single_line=is_single_line,
            )
            is None,
        )
        for button in buttons
    )


class ToolbarNavigator:
    """Arrow-key focus over the toolbar; ``-1`` means nothing is focused."""

    def __init__(self, buttons: Sequence[ToolbarButton] = TOOLBAR_BUTTONS) -> None:
        if not buttons:
            raise ValueError("toolbar needs at least one button")
        self.buttons = tuple(buttons)
        self.index = -1

    def next(self) -> ToolbarButton:
        self.index = (self.index + 1) % len(self.buttons)
        return self.buttons[self.index]

    def previous(self) -> ToolbarButton:
        start = self.index if self.index >= 0 else 0
        self.index = (start - 1) % len(self.buttons)
        return self.buttons[self.index]

    def focused(self) -> Optional[ToolbarButton]:
        if self.index < 0:
            return None
        return self.buttons[self.index]

    def reset(self) -> None:
        self.index = -1


__all__ = [
    "ToolbarButton",
    "TOOLBAR_BUTTONS",
    "ButtonState",
    "toolbar_state",
    "ToolbarNavigator",
]
