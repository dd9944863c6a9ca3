from __future__ import annotations

from typing import List

from format_engine.actions import insert_link
from format_engine.actions.toggle import ToggleOutcome
from format_engine.document import BufferDelta, Selection
from format_engine.session import EventBus, FormattingSession, apply_outcome
from format_engine.styles import FormatState, FormatType


def make_session(text: str = "Hello world") -> tuple[FormattingSession, List[str]]:
    bus = EventBus()
    names: List[str] = []
    for event in ("format.applied", "format.refused", "buffer.changed", "format.state"):
        bus.subscribe(event, lambda payload, name=event: names.append(name))
    return FormattingSession.from_text(text, bus=bus), names


def test_applied_toggle_emits_events_in_order() -> None:
    session, names = make_session()
    session.select(0, 5)
    names.clear()

    session.toggle("bold")

    assert names == ["format.applied", "buffer.changed", "format.state"]


def test_refused_toggle_only_emits_refusal() -> None:
    session, names = make_session()
    names.clear()

    outcome = session.toggle("italic")

    assert outcome.refused
    assert names == ["format.refused"]


def test_state_is_resolved_after_every_toggle() -> None:
    session, _ = make_session("Hello")
    states: List[FormatState] = []
    session.bus.subscribe("format.state", states.append)

    session.select(0, 5)
    session.toggle("bold")

    assert session.text == "<b>Hello</b>"
    assert states[-1].bold
    assert session.format_state().bold


def test_caret_state_hides_inline_styles() -> None:
    session, _ = make_session("<b>Hello</b>")

    state = session.select(4)

    assert not state.bold
    assert not session.has_selection


def test_undo_and_redo_publish_changes() -> None:
    session, names = make_session()
    session.select(6, 11)
    session.toggle("underline")
    names.clear()

    delta = session.undo()

    assert isinstance(delta, BufferDelta)
    assert session.text == "Hello world"
    assert names == ["buffer.changed", "format.state"]
    assert session.redo() is not None
    assert session.text == "Hello <u>world</u>"
    assert session.redo() is None


def test_insert_replaces_selection() -> None:
    session, _ = make_session()
    session.select(0, 5)

    session.insert("Howdy")

    assert session.text == "Howdy world"
    assert session.selection == Selection.caret(5)


def test_insert_snippet_uses_caret_line() -> None:
    session, _ = make_session("abc")
    session.select(3)

    session.insert_snippet(insert_link, "docs", "https://example.com")

    assert session.text == "abc\n[docs](https://example.com)"


def test_toolbar_reflects_selection_shape() -> None:
    session, _ = make_session("one\ntwo")
    session.select(1)

    caret = {state.button.type.value: state for state in session.toolbar()}
    assert not caret["bold"].enabled
    assert caret["h1"].enabled

    session.select(0, 7)
    spanning = {state.button.type.value: state for state in session.toolbar()}
    assert spanning["bold"].enabled
    assert not spanning["h2"].enabled
    assert spanning["bullet"].enabled


def test_apply_outcome_ignores_refusals() -> None:
    session, _ = make_session()
    refused = ToggleOutcome(
        status="refused", format_type=FormatType.BOLD, reason="nope"
    )

    assert apply_outcome(session.buffer, refused) is None
    assert len(session.buffer.undo_timeline) == 0


def test_bus_unsubscribe() -> None:
    bus = EventBus()
    seen: List[object] = []
    bus.subscribe("ping", seen.append)
    bus.emit("ping", 1)
    bus.unsubscribe("ping", seen.append)
    bus.emit("ping", 2)

    assert seen == [1]
