"""Keymap registry: actions by id, bindings bucketed by stroke token."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Mapping, Optional

from format_engine.runtime.telemetry import span

from .models import ActionRef, Binding, KeyStroke


@dataclass(slots=True)
class RegistryStats:
    action_count: int
    binding_count: int
    tokens: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Binding chosen for a stroke, paired with its action."""

    binding: Binding
    action: ActionRef


class KeymapConflictError(RuntimeError):
    """A binding would be ambiguous with bindings already registered."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        self.binding = binding
        self.conflicts = tuple(conflicts)
        names = ", ".join(existing.id for existing in self.conflicts)
        super().__init__(
            f"Binding '{binding.id}' ({binding.stroke.token}) clashes with {names}"
        )


def can_fire_together(left: Binding, right: Binding) -> bool:
    """True unless some flag is required true by one and false by the other."""

    right_map = right.when_map
    return all(
        right_map.get(clause.flag, clause.expected) == clause.expected
        for clause in left.when
    )


class KeymapRegistry:
    """Owns action references and stroke bindings.

    Two bindings on the same stroke conflict when they share a priority and
    their ``when`` clauses can hold at the same time; a higher priority is
    the way to shadow a binding on purpose.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._logger_name = logger_name
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_token: Dict[str, Dict[str, Binding]] = {}

    def get_action(self, action_id: str) -> ActionRef:
        if action_id not in self._actions:
            raise KeyError(f"Action '{action_id}' is not registered")
        return self._actions[action_id]

    def get_binding(self, binding_id: str) -> Binding:
        if binding_id not in self._bindings:
            raise KeyError(f"Binding '{binding_id}' is not registered")
        return self._bindings[binding_id]

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if action.id in self._actions and not replace:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "stroke": binding.stroke.token},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' needs unregistered action "
                    f"'{binding.action_id}'"
                )
            previous = self._bindings.get(binding.id)
            if previous is not None and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            clashes = [
                other
                for other in self.detect_conflicts(binding)
                if other is not previous
            ]
            if clashes and not replace:
                handle.add_metadata("conflicts", [other.id for other in clashes])
                raise KeymapConflictError(binding, clashes)

            if previous is not None:
                clashes.append(previous)
            for stale in clashes:
                self._discard(stale)
            self._bindings[binding.id] = binding
            self._by_token.setdefault(binding.stroke.token, {})[binding.id] = binding
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.get(binding_id)
        if binding is not None:
            self._discard(binding)
        return binding

    def iter_bindings(self) -> Iterator[Binding]:
        return iter(tuple(self._bindings.values()))

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        bucket = self._by_token.get(binding.stroke.token, {})
        return [
            other
            for _, other in sorted(bucket.items())
            if other.priority == binding.priority and can_fire_together(binding, other)
        ]

    def lookup(
        self,
        stroke: KeyStroke | str,
        flags: Optional[Mapping[str, bool]] = None,
    ) -> Optional[ResolutionMatch]:
        """Highest-priority binding for ``stroke`` whose ``when`` clauses hold."""

        if isinstance(stroke, str):
            stroke = KeyStroke.parse(stroke)
        active = flags or {}
        candidates = [
            binding
            for binding in self._by_token.get(stroke.token, {}).values()
            if binding.allows(active)
        ]
        if not candidates:
            return None
        best = min(candidates, key=lambda binding: (-binding.priority, binding.id))
        return ResolutionMatch(binding=best, action=self.get_action(best.action_id))

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            tokens=tuple(sorted(self._by_token)),
        )

    def _discard(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        token = binding.stroke.token
        bucket = self._by_token.get(token, {})
        bucket.pop(binding.id, None)
        if not bucket:
            self._by_token.pop(token, None)


__all__ = [
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "ResolutionMatch",
    "can_fire_together",
]
