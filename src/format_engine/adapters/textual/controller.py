"""Textual-facing controller wiring a FormattingSession into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Sequence, Tuple

from format_engine.actions.toggle import ToggleOutcome
from format_engine.document import BufferView
from format_engine.keymaps import ActionContext, ActionResult, KeymapDispatcher
from format_engine.session import FormattingSession
from format_engine.styles import FormatType
from format_engine.toolbar import ButtonState

Location = Tuple[int, int]


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the controller uses to update Textual widgets."""

    update_text: Callable[[BufferView], None]
    update_toolbar: Callable[[Sequence[ButtonState]], None] = _noop
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


def describe_toolbar(states: Iterable[ButtonState]) -> str:
    """One-line toolbar: ``[x]`` active, ``[ ]`` inactive, ``[-]`` disabled."""

    parts = []
    for state in states:
        if not state.enabled:
            marker = "-"
        elif state.active:
            marker = "x"
        else:
            marker = " "
        parts.append(f"[{marker}] {state.button.label}")
    return "  ".join(parts)


class TextualFormatAdapter:
    """Bridges a session, its keymap and bus events to a Textual surface."""

    EVENTS = ("format.state", "format.applied", "format.refused", "buffer.changed")

    def __init__(
        self,
        session: FormattingSession,
        hooks: TextualUIHooks,
        *,
        dispatcher: Optional[KeymapDispatcher] = None,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.dispatcher = dispatcher or KeymapDispatcher(ActionContext(session))
        for event in self.EVENTS:
            session.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )
        self._refresh_text()
        self._refresh_toolbar()

    def handle_textual_key(
        self, key: str, *, modifiers: Iterable[str] = ()
    ) -> ActionResult:
        """Dispatch a key; ``key`` may carry modifiers (``"ctrl+b"``)."""

        parts = [part for part in key.split("+") if part]
        if not parts:
            return ActionResult(consumed=False, status="miss")
        strokes = tuple(parts[:-1]) + tuple(modifiers)
        self._log_state("key ->", key=key, mods=strokes)
        result = self.dispatcher.handle_key(parts[-1], strokes)
        if result.consumed:
            self.hooks.update_status(result.message or result.status)
            self._refresh_toolbar()
        self._log_state("result <-", consumed=result.consumed, status=result.status)
        return result

    def press(self, fmt: FormatType | str) -> ToggleOutcome:
        """Toolbar click."""

        outcome = self.session.toggle(fmt)
        self.hooks.update_status(outcome.reason or outcome.label)
        return outcome

    def sync_text(self, text: str) -> None:
        """Adopt an edit typed directly into the host widget."""

        if text == self.session.text:
            return
        self.session.buffer.set_text(text, label="host_edit")
        self._refresh_toolbar()

    def sync_selection(self, anchor: Location, head: Location) -> None:
        """Adopt a host selection given as ``(row, column)`` locations."""

        document = self.session.buffer.document
        self.session.select(document.offset_at(*anchor), document.offset_at(*head))

    def selection_locations(self) -> Tuple[Location, Location]:
        document = self.session.buffer.document
        selection = self.session.selection
        return (
            document.location_of(selection.anchor),
            document.location_of(selection.head),
        )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)
        if name == "format.state":
            self._refresh_toolbar()
        elif name == "buffer.changed":
            self._refresh_text()
        elif name == "format.refused" and isinstance(payload, ToggleOutcome):
            self.hooks.update_status(f"refused::{payload.reason}")

    def _refresh_text(self) -> None:
        self.hooks.update_text(self.session.buffer.snapshot())

    def _refresh_toolbar(self) -> None:
        self.hooks.update_toolbar(self.session.toolbar())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.session.buffer
        return {
            "buffer": buffer.name,
            "version": buffer.document.version,
            "selection": (buffer.selection.anchor, buffer.selection.head),
            "toolbar_open": self.dispatcher.context.flags.get("toolbar_open", False),
        }


__all__ = ["TextualFormatAdapter", "TextualUIHooks", "describe_toolbar"]
