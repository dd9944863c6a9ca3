"""Key dispatch: resolve a stroke against the registry and run its action."""

from __future__ import annotations

from typing import Iterable, Optional

from format_engine.runtime.telemetry import span

from .context import ActionContext, ActionResult
from .defaults import load_default_keymaps
from .models import KeyStroke
from .registry import KeymapRegistry


class KeymapDispatcher:
    """Routes key strokes to actions; loads the default keymap when none is given."""

    def __init__(
        self,
        context: ActionContext,
        registry: Optional[KeymapRegistry] = None,
        *,
        logger_name: str | None = None,
    ) -> None:
        self.context = context
        if registry is None:
            registry = KeymapRegistry(logger_name=logger_name)
            load_default_keymaps(registry)
        self.registry = registry
        self._logger_name = logger_name

    def handle_key(self, key: str, modifiers: Iterable[str] = ()) -> ActionResult:
        stroke = KeyStroke(key=key, modifiers=tuple(modifiers))
        match = self.registry.lookup(stroke, self.context.current_flags())
        if match is None:
            return ActionResult(consumed=False, status="miss")
        with span(
            "keymaps::dispatch",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"stroke": stroke.token, "binding_id": match.binding.id},
        ) as handle:
            result = match.action(self.context, match)
            if not isinstance(result, ActionResult):
                raise TypeError(
                    f"Action '{match.action.id}' returned {type(result).__name__}"
                )
            handle.add_metadata("status", result.status)
            return result


__all__ = ["KeymapDispatcher"]
