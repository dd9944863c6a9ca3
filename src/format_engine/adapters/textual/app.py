"""Executable Textual app hosting the formatting engine."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static, TextArea
    from textual.widgets.text_area import Selection as AreaSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use format_engine.adapters.textual.app"
    ) from exc

from format_engine.document import BufferView
from format_engine.runtime import telemetry
from format_engine.session import FormattingSession
from format_engine.toolbar import ButtonState

from .controller import TextualFormatAdapter, TextualUIHooks, describe_toolbar

SAMPLE_TEXT = """# Formatting demo
Select text and press Ctrl+B, Ctrl+I, Ctrl+U or Ctrl+Shift+X.
- bullets toggle per line with Ctrl+Shift+8
Ctrl+. opens the toolbar; arrows move, Enter applies, Escape closes."""


# Textual names some printable keys; keymaps use the characters.
_KEY_ALIASES = {"full_stop": ".", "comma": ",", "minus": "-", "asterisk": "*"}


@dataclass
class UIState:
    toolbar_text: str = ""
    status_text: str = ""


class FormatEngineApp(App[None]):  # pragma: no cover - manual demo
    """Minimal Textual UI: a text area with a formatting toolbar."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#toolbar {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#editor {
		height: 1fr;
		border: round $accent;
	}

	#status-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, text: str = SAMPLE_TEXT) -> None:
        super().__init__()
        self._state = UIState()
        self._initial_text = text
        self.adapter: TextualFormatAdapter | None = None
        self._editor: TextArea | None = None
        self._toolbar_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._toolbar_widget = Static("", id="toolbar")
        self._editor = TextArea(self._initial_text, id="editor")
        self._status_widget = Static("", id="status-line")
        yield self._toolbar_widget
        yield self._editor
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_text=self._update_text,
            update_toolbar=self._update_toolbar,
            update_status=self._update_status,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        session = FormattingSession.from_text(self._initial_text)
        self.adapter = TextualFormatAdapter(session, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key == "ctrl+q":
            return
        result = self.adapter.handle_textual_key(self._normalize_key(event.key))
        if result.consumed:
            event.prevent_default()
            event.stop()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.adapter:
            self.adapter.sync_text(event.text_area.text)

    def on_text_area_selection_changed(
        self, event: TextArea.SelectionChanged
    ) -> None:
        if self.adapter:
            self.adapter.sync_text(event.text_area.text)
            selection = event.selection
            self.adapter.sync_selection(selection.start, selection.end)

    @staticmethod
    def _normalize_key(key: str) -> str:
        *modifiers, name = key.split("+")
        return "+".join([*modifiers, _KEY_ALIASES.get(name, name)])

    def _update_text(self, view: BufferView) -> None:
        if self._editor is None or self.adapter is None:
            return
        if self._editor.text != view.text:
            self._editor.load_text(view.text)
        anchor, head = self.adapter.selection_locations()
        if self._editor.selection != AreaSelection(anchor, head):
            self._editor.selection = AreaSelection(anchor, head)

    def _update_toolbar(self, states: Sequence[ButtonState]) -> None:
        self._state.toolbar_text = describe_toolbar(states)
        if self._toolbar_widget:
            self._toolbar_widget.update(self._state.toolbar_text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "format.applied":
            self._update_status(name)

    def _log_line(self, line: str) -> None:
        telemetry.get_logger().debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the formatting engine demo.")
    parser.add_argument(
        "--text-file",
        default=os.environ.get("FORMAT_ENGINE_TEXT_FILE"),
        help="File whose contents seed the editor (default: built-in sample)",
    )
    parser.add_argument(
        "--log-preset",
        choices=sorted(telemetry.PRESETS),
        default=os.environ.get("FORMAT_ENGINE_LOG_PRESET"),
        help="telelog preset to configure before starting",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:  # pragma: no cover
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    text = SAMPLE_TEXT
    if args.text_file:
        text = Path(args.text_file).read_text(encoding="utf-8")
    FormatEngineApp(text=text).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
