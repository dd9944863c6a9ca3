"""Declarative keyboard shortcuts for formatting and toolbar navigation."""

from .context import ActionContext, ActionResult
from .defaults import (
    DEFAULT_ACTIONS,
    DEFAULT_BINDINGS,
    TOOLBAR_OPEN_FLAG,
    load_default_keymaps,
)
from .dispatch import KeymapDispatcher
from .models import ActionRef, Binding, KeyStroke, WhenClause
from .registry import (
    KeymapConflictError,
    KeymapRegistry,
    RegistryStats,
    ResolutionMatch,
)

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "WhenClause",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
    "ActionContext",
    "ActionResult",
    "KeymapDispatcher",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "TOOLBAR_OPEN_FLAG",
    "load_default_keymaps",
]
