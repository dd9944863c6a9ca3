from __future__ import annotations

from typing import List, Sequence

from format_engine.adapters.textual import (
    TextualFormatAdapter,
    TextualUIHooks,
    describe_toolbar,
)
from format_engine.session import FormattingSession
from format_engine.toolbar import ButtonState


def make_adapter(
    text: str = "Hello world",
    *,
    texts: List[str] | None = None,
    statuses: List[str] | None = None,
    toolbars: List[Sequence[ButtonState]] | None = None,
    events: List[tuple[str, object | None]] | None = None,
    logs: List[str] | None = None,
) -> TextualFormatAdapter:
    texts = texts if texts is not None else []
    statuses = statuses if statuses is not None else []
    toolbars = toolbars if toolbars is not None else []
    events = events if events is not None else []
    logs = logs if logs is not None else []
    hooks = TextualUIHooks(
        update_text=lambda view: texts.append(view.text),
        update_toolbar=lambda states: toolbars.append(states),
        update_status=lambda status: statuses.append(status),
        handle_event=lambda name, payload: events.append((name, payload)),
        log=lambda line: logs.append(line),
    )
    return TextualFormatAdapter(FormattingSession.from_text(text), hooks)


def test_adapter_pushes_initial_snapshot() -> None:
    texts: List[str] = []
    toolbars: List[Sequence[ButtonState]] = []

    make_adapter(texts=texts, toolbars=toolbars)

    assert texts == ["Hello world"]
    assert len(toolbars) == 1
    assert len(toolbars[0]) == 8


def test_adapter_applies_shortcut_to_host_selection() -> None:
    texts: List[str] = []
    statuses: List[str] = []
    adapter = make_adapter(texts=texts, statuses=statuses)

    adapter.sync_selection((0, 6), (0, 11))
    result = adapter.handle_textual_key("ctrl+b")

    assert result.consumed
    assert texts[-1] == "Hello <b>world</b>"
    assert statuses[-1] == "format::bold"
    assert adapter.selection_locations() == ((0, 6), (0, 18))


def test_adapter_surfaces_refusals() -> None:
    statuses: List[str] = []
    events: List[tuple[str, object | None]] = []
    adapter = make_adapter(statuses=statuses, events=events)

    adapter.handle_textual_key("ctrl+u")

    assert "refused::inline_requires_selection" in statuses
    assert [name for name, _ in events] == ["format.refused"]


def test_adapter_press_and_host_edits() -> None:
    texts: List[str] = []
    adapter = make_adapter("title", texts=texts)

    adapter.press("h2")
    assert texts[-1] == "## title"

    adapter.sync_text("## title!")
    assert adapter.session.text == "## title!"
    adapter.sync_text("## title!")
    assert len(adapter.session.buffer.undo_timeline) == 2


def test_adapter_ignores_unbound_keys() -> None:
    adapter = make_adapter()

    result = adapter.handle_textual_key("x")

    assert not result.consumed
    assert result.status == "miss"


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter = make_adapter(logs=logs)

    adapter.handle_textual_key("ctrl+.")

    assert any(line.startswith("key ->") for line in logs)
    assert any("toolbar_open=True" in line for line in logs)


def test_describe_toolbar_marks_state() -> None:
    adapter = make_adapter("- item")
    adapter.sync_selection((0, 0), (0, 6))

    line = describe_toolbar(adapter.session.toolbar())

    assert line.startswith("[ ] Bold")
    assert "[x] Bullet List" in line
    assert "[ ] Heading 1" in line

    adapter.sync_selection((0, 2), (0, 2))
    assert "[-] Bold" in describe_toolbar(adapter.session.toolbar())
