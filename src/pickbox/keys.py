"""Keyboard dispatch for the combobox input."""

from __future__ import annotations

from enum import Enum

from pickbox import transitions
from pickbox.config import SelectConfig
from pickbox.state import SelectState
from pickbox.transitions import Transition, as_transition


class KeyAction(Enum):
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    TAB = "tab"
    BACKSPACE = "backspace"


# DOM ``KeyboardEvent.which`` codes.
KEY_CODES = {
    38: KeyAction.UP,
    40: KeyAction.DOWN,
    13: KeyAction.ENTER,
    9: KeyAction.TAB,
    8: KeyAction.BACKSPACE,
    46: KeyAction.BACKSPACE,
}

# Textual key names, plus DOM ``KeyboardEvent.key`` spellings.
KEY_NAMES = {
    "up": KeyAction.UP,
    "arrowup": KeyAction.UP,
    "down": KeyAction.DOWN,
    "arrowdown": KeyAction.DOWN,
    "enter": KeyAction.ENTER,
    "tab": KeyAction.TAB,
    "backspace": KeyAction.BACKSPACE,
    "delete": KeyAction.BACKSPACE,
}


def resolve_key(key: str | int) -> KeyAction | None:
    """Map a key name or key code to the action it triggers, if any."""
    if isinstance(key, int):
        return KEY_CODES.get(key)
    return KEY_NAMES.get(key.lower())


def key_transition(state: SelectState, config: SelectConfig, key: str | int) -> tuple[Transition, bool]:
    """Apply the transition bound to ``key``.

    Returns the transition and whether the platform's default handling of
    the key (scrolling, form submit) should be suppressed.
    """
    action = resolve_key(key)
    if action is KeyAction.UP:
        return Transition(transitions.navigate_up(state, config)), True
    if action is KeyAction.DOWN:
        return Transition(transitions.navigate_down(state, config)), True
    if action is KeyAction.ENTER and state.is_open:
        return as_transition(transitions.confirm_highlighted(state, config)), True
    if action is KeyAction.TAB:
        return Transition(transitions.dismiss(state, config)), False
    if action is KeyAction.BACKSPACE:
        return as_transition(transitions.remove_last(state, config)), False
    return Transition(state), False
