"""Built-in formatting shortcuts and toolbar keyboard navigation."""

from __future__ import annotations

from functools import partial
from typing import Iterable, Sequence

from format_engine.styles import FormatType

from .context import ActionContext, ActionResult
from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry, ResolutionMatch

TOOLBAR_OPEN_FLAG = "toolbar_open"


def toggle_action(
    context: ActionContext, match: ResolutionMatch, *, fmt: FormatType
) -> ActionResult:
    del match
    outcome = context.session.toggle(fmt)
    return ActionResult(
        consumed=True,
        status=outcome.status,
        message=outcome.reason or outcome.label,
    )


def open_toolbar(context: ActionContext, match: ResolutionMatch) -> ActionResult:
    del match
    context.flags[TOOLBAR_OPEN_FLAG] = True
    context.navigator.reset()
    return ActionResult(consumed=True, status="toolbar_open")


def close_toolbar(context: ActionContext, match: ResolutionMatch) -> ActionResult:
    del match
    context.flags[TOOLBAR_OPEN_FLAG] = False
    context.navigator.reset()
    return ActionResult(consumed=True, status="toolbar_close")


def focus_next(context: ActionContext, match: ResolutionMatch) -> ActionResult:
    del match
    button = context.navigator.next()
    return ActionResult(consumed=True, status="toolbar_focus", message=button.label)


def focus_previous(context: ActionContext, match: ResolutionMatch) -> ActionResult:
    del match
    button = context.navigator.previous()
    return ActionResult(consumed=True, status="toolbar_focus", message=button.label)


def activate_focused(context: ActionContext, match: ResolutionMatch) -> ActionResult:
    button = context.navigator.focused()
    if button is None:
        return ActionResult(consumed=True, status="noop")
    return toggle_action(context, match, fmt=button.type)


_SHORTCUTS: tuple[tuple[FormatType, str], ...] = (
    (FormatType.BOLD, "ctrl+b"),
    (FormatType.ITALIC, "ctrl+i"),
    (FormatType.UNDERLINE, "ctrl+u"),
    (FormatType.STRIKETHROUGH, "ctrl+shift+x"),
    (FormatType.H1, "ctrl+alt+1"),
    (FormatType.H2, "ctrl+alt+2"),
    (FormatType.H3, "ctrl+alt+3"),
    (FormatType.BULLET, "ctrl+shift+8"),
)

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    *(
        ActionRef(
            id=f"format.{fmt.value}",
            handler=partial(toggle_action, fmt=fmt),
            description=f"Toggle {fmt.value}",
        )
        for fmt, _ in _SHORTCUTS
    ),
    ActionRef(id="toolbar.open", handler=open_toolbar, description="Open toolbar"),
    ActionRef(id="toolbar.close", handler=close_toolbar, description="Close toolbar"),
    ActionRef(id="toolbar.next", handler=focus_next, description="Focus next button"),
    ActionRef(
        id="toolbar.previous",
        handler=focus_previous,
        description="Focus previous button",
    ),
    ActionRef(
        id="toolbar.activate",
        handler=activate_focused,
        description="Toggle the focused button",
    ),
)

_WHEN_OPEN = (TOOLBAR_OPEN_FLAG,)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    *(
        Binding(
            id=f"format.{fmt.value}",
            stroke=KeyStroke.parse(keys),
            action_id=f"format.{fmt.value}",
        )
        for fmt, keys in _SHORTCUTS
    ),
    Binding(
        id="toolbar.open",
        stroke=KeyStroke.parse("ctrl+."),
        action_id="toolbar.open",
    ),
    Binding(
        id="toolbar.close",
        stroke=KeyStroke("escape"),
        action_id="toolbar.close",
        when=_WHEN_OPEN,
    ),
    Binding(
        id="toolbar.next",
        stroke=KeyStroke("right"),
        action_id="toolbar.next",
        when=_WHEN_OPEN,
    ),
    Binding(
        id="toolbar.previous",
        stroke=KeyStroke("left"),
        action_id="toolbar.previous",
        when=_WHEN_OPEN,
    ),
    Binding(
        id="toolbar.activate",
        stroke=KeyStroke("enter"),
        action_id="toolbar.activate",
        when=_WHEN_OPEN,
    ),
    Binding(
        id="toolbar.activate.space",
        stroke=KeyStroke("space"),
        action_id="toolbar.activate",
        when=_WHEN_OPEN,
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and bindings."""

    excluded = set(exclude_bindings or ())
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)
    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)
    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "TOOLBAR_OPEN_FLAG",
    "load_default_keymaps",
]
