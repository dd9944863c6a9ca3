"""Key strokes, flag conditions, actions and the bindings tying them together."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

MODIFIERS = frozenset({"alt", "ctrl", "meta", "shift"})


def _clean_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    cleaned = {name.strip().lower() for name in modifiers if name.strip()}
    unknown = cleaned - MODIFIERS
    if unknown:
        raise ValueError(f"unknown modifier(s): {', '.join(sorted(unknown))}")
    return tuple(sorted(cleaned))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """A key chord such as ``ctrl+b``; modifiers are stored sorted."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        key = self.key.strip().lower()
        if not key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "modifiers", _clean_modifiers(self.modifiers))

    @classmethod
    def parse(cls, chord: str) -> "KeyStroke":
        """``"ctrl+shift+x"`` -> ``KeyStroke("x", ("ctrl", "shift"))``."""

        *modifiers, key = chord.strip().split("+") if chord.strip() else [""]
        return cls(key=key, modifiers=tuple(modifiers))

    @property
    def token(self) -> str:
        return "+".join((*self.modifiers, self.key))

    @property
    def label(self) -> str:
        """Human-readable chord, e.g. ``Ctrl+Shift+X``."""

        return "+".join(part.capitalize() for part in (*self.modifiers, self.key))


@dataclass(frozen=True, slots=True)
class WhenClause:
    """Gate on a boolean UI flag; ``!flag`` requires it to be false."""

    flag: str
    expected: bool = True

    def __post_init__(self) -> None:
        if not self.flag:
            raise ValueError("flag cannot be empty")

    @classmethod
    def parse(cls, expression: str) -> "WhenClause":
        text = expression.strip()
        negated = text.startswith("!")
        return cls(text[1:] if negated else text, not negated)

    def evaluate(self, flags: Mapping[str, bool]) -> bool:
        return bool(flags.get(self.flag, False)) is self.expected


@dataclass(frozen=True, slots=True)
class ActionRef:
    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Maps one stroke to an action id.

    ``stroke`` may be given as a chord string and ``when`` as ``"flag"`` /
    ``"!flag"`` strings; both are normalized on construction.
    """

    id: str
    stroke: KeyStroke
    action_id: str
    when: tuple[WhenClause, ...] = ()
    priority: int = 0

    def __post_init__(self) -> None:
        if not self.id or not self.action_id:
            raise ValueError("binding needs both an id and an action_id")
        if isinstance(self.stroke, str):
            object.__setattr__(self, "stroke", KeyStroke.parse(self.stroke))
        clauses = tuple(
            item if isinstance(item, WhenClause) else WhenClause.parse(item)
            for item in self.when
        )
        object.__setattr__(self, "when", clauses)

    @property
    def when_map(self) -> Mapping[str, bool]:
        return MappingProxyType({clause.flag: clause.expected for clause in self.when})

    def allows(self, flags: Mapping[str, bool]) -> bool:
        return all(clause.evaluate(flags) for clause in self.when)


__all__ = ["MODIFIERS", "KeyStroke", "WhenClause", "ActionRef", "Binding"]
