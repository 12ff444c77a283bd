"""SelectEngine: one headless combobox instance."""

from __future__ import annotations

import logging
from typing import Any, Callable

from pickbox import transitions
from pickbox.bindings import Binding, BindingGenerator, CustomHandlers
from pickbox.config import SelectConfig
from pickbox.keys import key_transition
from pickbox.options import Option, filter_options
from pickbox.regions import FocusableRegion, PointerDown, PointerSource, Region
from pickbox.state import SelectState, StateStore
from pickbox.transitions import Transition, as_transition

logger = logging.getLogger(__name__)

Observer = Callable[["SelectEngine", SelectState, SelectState], None]


class SelectEngine:
    """Owns the interaction state of one select control.

    All state changes go through the event methods below. Each event runs
    its transition, re-derives the search text if ``is_open`` flipped,
    commits the result, notifies observers, and finally asks the input
    region for focus when the transition requested it.

    If a ``pointer_source`` is given, the engine subscribes once here and
    unsubscribes once in ``dispose()`` (or on leaving a ``with`` block).
    """

    def __init__(self, config: SelectConfig, pointer_source: PointerSource | None = None) -> None:
        self.config = config
        self._store = StateStore(SelectState.initial(config))
        self._bindings = BindingGenerator(self)
        self._observers: list[Observer] = []
        self._input_region: FocusableRegion | None = None
        self._menu_region: Region | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self._disposed = False
        if pointer_source is not None:
            self._unsubscribe = pointer_source.subscribe(self._on_pointer_down)

    # -- lifecycle ------------------------------------------------------------

    def dispose(self) -> None:
        """Release the pointer subscription. Further events are ignored."""
        if self._disposed:
            return
        self._disposed = True
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._observers.clear()
        self._input_region = None
        self._menu_region = None

    @property
    def disposed(self) -> bool:
        return self._disposed

    def __enter__(self) -> SelectEngine:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.dispose()

    # -- snapshots ------------------------------------------------------------

    @property
    def state(self) -> SelectState:
        return self._store.get_state()

    def get_state(self) -> SelectState:
        return self._store.get_state()

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def is_focused(self) -> bool:
        return self.state.is_focused

    @property
    def search_value(self) -> str:
        return self.state.search_value

    @property
    def highlighted_index(self) -> int:
        return self.state.highlighted_index

    @property
    def selected_options(self) -> tuple[Option, ...]:
        return self.state.selected

    @property
    def filtered_options(self) -> list[Option]:
        return filter_options(self.config.options, self.state.search_value, self.config.is_searchable)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Call ``observer(engine, old, new)`` after every committed change."""
        self._observers.append(observer)
        return lambda: observer in self._observers and self._observers.remove(observer)

    def watch(self, key: str, callback: Callable[..., None]) -> Callable[[], None]:
        """Watch a single state field. See ``StateStore.watch``."""
        return self._store.watch(key, callback)

    # -- regions --------------------------------------------------------------

    def register_input(self, region: FocusableRegion | None) -> None:
        self._input_region = region

    def register_menu(self, region: Region | None) -> None:
        self._menu_region = region

    def _request_focus(self) -> None:
        region = self._input_region
        if region is None:
            logger.debug("%s: focus requested but no input region registered", self.config.name)
            return
        region.focus()

    def _on_pointer_down(self, event: PointerDown) -> None:
        if self._input_region is None or self._menu_region is None:
            return
        if self._input_region.contains(event.target) or self._menu_region.contains(event.target):
            return
        self.outside_interaction()

    # -- dispatch -------------------------------------------------------------

    def _commit(self, event: str, result: SelectState | Transition) -> Transition:
        if self._disposed:
            logger.debug("%s: %s ignored, engine disposed", self.config.name, event)
            return Transition(self.state)
        result = as_transition(result)
        before = self.state
        after = result.state
        if after.is_open != before.is_open:
            after = transitions.recompute_search_value(after, self.config)
        changed = self._store.replace(after)
        if changed:
            logger.debug("%s: %s changed %s", self.config.name, event, ", ".join(changed))
            for observer in list(self._observers):
                observer(self, before, after)
        if result.focus_input:
            self._request_focus()
        return Transition(after, result.focus_input)

    def open(self) -> None:
        self._commit("open", transitions.open_options(self.state, self.config))

    def close(self) -> None:
        self._commit("close", transitions.close_options(self.state, self.config))

    def navigate_up(self) -> None:
        self._commit("navigate_up", transitions.navigate_up(self.state, self.config))

    def navigate_down(self) -> None:
        self._commit("navigate_down", transitions.navigate_down(self.state, self.config))

    def confirm_highlighted(self) -> None:
        self._commit("confirm_highlighted", transitions.confirm_highlighted(self.state, self.config))

    def select_or_deselect(self, option: Option) -> None:
        self._commit("select_or_deselect", transitions.select_or_deselect(self.state, self.config, option))

    def remove_selected(self, index: int) -> None:
        self._commit("remove_selected", transitions.remove_selected(self.state, self.config, index))

    def remove_last(self) -> None:
        self._commit("remove_last", transitions.remove_last(self.state, self.config))

    def click_option(self, option: Option, index: int, *event: Any) -> None:
        self._commit("click_option", transitions.click_option(self.state, self.config, option, index))

    def dismiss(self) -> None:
        self._commit("dismiss", transitions.dismiss(self.state, self.config))

    def search(self, text: str) -> None:
        self._commit("search", transitions.search(self.state, self.config, text))

    def outside_interaction(self) -> None:
        self._commit("outside_interaction", transitions.outside_interaction(self.state, self.config))

    def blur_selected_chip(self, *event: Any) -> None:
        self._commit("blur_selected_chip", transitions.blur_selected_chip(self.state, self.config))

    def focus_input(self, *event: Any) -> None:
        self._commit("focus_input", transitions.focus_input(self.state, self.config))

    def focus_chip(self, *event: Any) -> None:
        self._commit("focus_chip", transitions.focus_chip(self.state, self.config))

    def key_down(self, key: str | int) -> bool:
        """Handle a key press on the input. Returns True to suppress the default action."""
        if self._disposed:
            return False
        result, prevent_default = key_transition(self.state, self.config, key)
        self._commit(f"key {key!r}", result)
        return prevent_default

    # -- bindings -------------------------------------------------------------

    def bind_input(
        self,
        custom_handlers: CustomHandlers | None = None,
        prop_overrides: dict[str, Any] | None = None,
    ) -> Binding:
        return self._bindings.input(custom_handlers, prop_overrides)

    def bind_option(
        self,
        index: int,
        option: Option,
        is_selected: bool | None = None,
        key: Any = None,
        custom_handlers: CustomHandlers | None = None,
        prop_overrides: dict[str, Any] | None = None,
    ) -> Binding:
        return self._bindings.option(index, option, is_selected, key, custom_handlers, prop_overrides)

    def bind_options(
        self,
        custom_handlers: CustomHandlers | None = None,
        prop_overrides: dict[str, Any] | None = None,
    ) -> list[Binding]:
        return list(self._bindings.options(custom_handlers, prop_overrides))

    def bind_label(
        self,
        custom_handlers: CustomHandlers | None = None,
        prop_overrides: dict[str, Any] | None = None,
    ) -> Binding:
        return self._bindings.label(custom_handlers, prop_overrides)

    def bind_menu(
        self,
        custom_handlers: CustomHandlers | None = None,
        prop_overrides: dict[str, Any] | None = None,
    ) -> Binding:
        return self._bindings.menu(custom_handlers, prop_overrides)

    def bind_selected_option(
        self,
        selected_option: Option,
        index: int,
        custom_handlers: CustomHandlers | None = None,
        prop_overrides: dict[str, Any] | None = None,
    ) -> Binding:
        return self._bindings.selected_option(selected_option, index, custom_handlers, prop_overrides)
