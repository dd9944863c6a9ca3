"""State handed to keymap action handlers and the result they return."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from format_engine.session import FormattingSession
from format_engine.toolbar import ToolbarNavigator


@dataclass(slots=True)
class ActionResult:
    """Outcome of a dispatched key."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class ActionContext:
    """Explicit UI state handed to every action handler."""

    session: FormattingSession
    navigator: ToolbarNavigator = field(default_factory=ToolbarNavigator)
    flags: Dict[str, bool] = field(default_factory=dict)

    def current_flags(self) -> Dict[str, bool]:
        return {**self.flags, "has_selection": self.session.has_selection}


__all__ = ["ActionContext", "ActionResult"]
