"""Formatting toolbar model shared by host adapters."""

from .model import (
    TOOLBAR_BUTTONS,
    ButtonState,
    ToolbarButton,
    ToolbarNavigator,
    toolbar_state,
)

__all__ = [
    "TOOLBAR_BUTTONS",
    "ButtonState",
    "ToolbarButton",
    "ToolbarNavigator",
    "toolbar_state",
]
