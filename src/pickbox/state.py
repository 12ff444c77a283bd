"""Interaction state record and its store."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Callable

from pickbox.config import SelectConfig
from pickbox.options import Option

Callback = Callable[["StateStore", str, Any, Any], None]


@dataclass(frozen=True)
class SelectState:
    """Snapshot of one control's mutable state.

    ``highlighted_index`` indexes the full option list, never the filtered
    one. ``is_open`` and ``is_focused`` are independent flags.
    """

    is_open: bool = False
    is_focused: bool = False
    search_value: str = ""
    highlighted_index: int = 0
    selected: tuple[Option, ...] = ()

    @classmethod
    def initial(cls, config: SelectConfig) -> SelectState:
        return cls(
            search_value=config.initial_search_value,
            highlighted_index=config.initial_highlighted_index,
            selected=config.initial_selected,
        )

    def evolve(self, **changes: Any) -> SelectState:
        return replace(self, **changes)


class StateStore:
    """Holds the current SelectState and notifies watchers on change.

    The state is only ever swapped wholesale via ``replace``; watchers fire
    per field that actually changed, in declaration order.
    """

    def __init__(self, initial: SelectState) -> None:
        self._state = initial
        self._watchers: dict[str, list[Callback]] = {}

    def get_state(self) -> SelectState:
        return self._state

    def watch(self, key: str, callback: Callback) -> Callable[[], None]:
        """Watch a field (or ``"*"`` for any field). Returns an unwatch callable."""
        self._watchers.setdefault(key, []).append(callback)
        return lambda: self._watchers.get(key, []) and self._watchers[key].remove(callback)

    def replace(self, new_state: SelectState) -> list[str]:
        """Commit ``new_state`` and return the names of the fields that changed."""
        old_state = self._state
        changed = [f.name for f in fields(SelectState) if getattr(old_state, f.name) != getattr(new_state, f.name)]
        if not changed:
            return changed
        self._state = new_state
        for key in changed:
            old = getattr(old_state, key)
            new = getattr(new_state, key)
            for cb in list(self._watchers.get(key, ())):
                cb(self, key, old, new)
            for cb in list(self._watchers.get("*", ())):
                cb(self, key, old, new)
        return changed
