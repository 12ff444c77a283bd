"""Pure state transitions for the select control.

Every function takes the current SelectState and the SelectConfig and
returns the next state, never mutating anything. Transitions that also
need the input region focused return a ``Transition`` carrying that
request. Functions are total: impossible requests (empty options, stale
indices) return the state unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pickbox.config import SelectConfig
from pickbox.options import Option, index_of, visible_indices
from pickbox.state import SelectState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    """A next state plus whether focus should return to the input."""

    state: SelectState
    focus_input: bool = False


def as_transition(result: SelectState | Transition) -> Transition:
    if isinstance(result, Transition):
        return result
    return Transition(result)


# -- open / close -------------------------------------------------------------


def open_options(state: SelectState, config: SelectConfig | None = None) -> SelectState:
    return state.evolve(is_open=True, is_focused=True)


def close_options(state: SelectState, config: SelectConfig | None = None) -> SelectState:
    return state.evolve(is_open=False, is_focused=False)


# Events that are plain open/close under another name.
dismiss = close_options
outside_interaction = close_options
blur_selected_chip = close_options
focus_input = open_options
focus_chip = open_options


def recompute_search_value(state: SelectState, config: SelectConfig) -> SelectState:
    """Derive the search text after ``is_open`` flips.

    Closed single-select shows the selected label; closed multi-select shows
    nothing. Opening restores the label (single) or the configured initial
    search text (multi). When opening, a highlight hidden by the new search
    text moves to the first visible option.
    """
    first_label = state.selected[0].label if state.selected else ""
    if config.multi:
        search = config.initial_search_value if state.is_open else ""
    elif state.is_open:
        search = first_label or config.initial_search_value
    else:
        search = first_label
    state = state.evolve(search_value=search)
    if state.is_open:
        state = _snap_highlight(state, config)
    return state


def _snap_highlight(state: SelectState, config: SelectConfig) -> SelectState:
    """Move the highlight to the first visible option if the filter hides it."""
    visible = visible_indices(config.options, state.search_value, config.is_searchable)
    if visible and state.highlighted_index not in visible:
        return state.evolve(highlighted_index=visible[0])
    return state


# -- navigation ---------------------------------------------------------------


def _step(visible: list[int], current: int, direction: int) -> int:
    """Next visible full-list index from ``current``, wrapping at the ends."""
    if current in visible:
        pos = visible.index(current)
        return visible[(pos + direction) % len(visible)]
    if direction > 0:
        return next((i for i in visible if i > current), visible[0])
    return next((i for i in reversed(visible) if i < current), visible[-1])


def _navigate(state: SelectState, config: SelectConfig, direction: int) -> SelectState:
    if not config.options:
        logger.debug("%s: navigation ignored, no options", config.name)
        return state
    if not state.is_open:
        state = recompute_search_value(open_options(state), config)
    visible = visible_indices(config.options, state.search_value, config.is_searchable)
    if not visible:
        return state
    return state.evolve(highlighted_index=_step(visible, state.highlighted_index, direction))


def navigate_up(state: SelectState, config: SelectConfig) -> SelectState:
    return _navigate(state, config, -1)


def navigate_down(state: SelectState, config: SelectConfig) -> SelectState:
    return _navigate(state, config, 1)


# -- selection ----------------------------------------------------------------


def add_selected(state: SelectState, config: SelectConfig, option: Option) -> Transition:
    if config.multi:
        selected = state.selected + (option,)
    else:
        selected = (option,)
    return Transition(state.evolve(selected=selected, search_value=""), focus_input=config.multi)


def remove_selected(state: SelectState, config: SelectConfig, index: int) -> Transition:
    if not 0 <= index < len(state.selected):
        logger.debug("%s: remove ignored, stale index %d", config.name, index)
        return Transition(state)
    selected = state.selected[:index] + state.selected[index + 1 :]
    state = state.evolve(selected=selected)
    if not config.multi:
        state = state.evolve(search_value="")
    return Transition(state, focus_input=True)


def select_or_deselect(state: SelectState, config: SelectConfig, option: Option) -> Transition:
    """Toggle in multi mode, replace in single mode."""
    index = index_of(state.selected, option)
    if index >= 0 and config.multi:
        return remove_selected(state, config, index)
    return add_selected(state, config, option)


def remove_last(state: SelectState, config: SelectConfig) -> SelectState | Transition:
    if not config.multi or state.search_value:
        return state
    if not state.selected:
        return state
    return remove_selected(state, config, len(state.selected) - 1)


def confirm_highlighted(state: SelectState, config: SelectConfig) -> SelectState | Transition:
    if not state.is_open:
        return state
    index = state.highlighted_index
    if not 0 <= index < len(config.options):
        logger.debug("%s: confirm ignored, nothing to highlight", config.name)
        return state
    if index not in visible_indices(config.options, state.search_value, config.is_searchable):
        logger.debug("%s: confirm ignored, highlighted option %d is filtered out", config.name, index)
        return state
    result = select_or_deselect(state, config, config.options[index])
    if not config.multi:
        result = Transition(close_options(result.state), result.focus_input)
    return result


def click_option(state: SelectState, config: SelectConfig, option: Option, index: int) -> Transition:
    """Toggle ``option`` and move the highlight to it."""
    result = select_or_deselect(state, config, option)
    state = result.state
    if 0 <= index < len(config.options):
        state = state.evolve(highlighted_index=index)
    if not config.multi:
        state = close_options(state)
    return Transition(state, result.focus_input)


# -- search -------------------------------------------------------------------


def search(state: SelectState, config: SelectConfig, text: str) -> SelectState:
    """Set the search text; keep the highlight on a visible option."""
    if not config.is_searchable:
        return state
    return _snap_highlight(state.evolve(search_value=text), config)
