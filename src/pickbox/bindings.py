"""Binding descriptors for the five combobox roles.

A descriptor is a bag of element attributes (``props``) plus derived values
and actions (``meta``) that a renderer attaches to its own elements.
Attribute names follow the DOM/ARIA spelling so assistive-technology
contracts carry over unchanged. Builders only read engine state; every
callback routes back through the engine's event methods.

Each builder accepts two overlays, applied in order after the base props:

- ``custom_handlers``: called with the builder's context as keyword
  arguments, returns a mapping merged into props.
- ``prop_overrides``: a mapping merged last.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING, Any, Callable, Iterator, Mapping

from pickbox.options import Option, index_of, visible_indices

if TYPE_CHECKING:
    from pickbox.engine import SelectEngine

CustomHandlers = Callable[..., Mapping[str, Any]]


@dataclass
class Binding:
    props: dict[str, Any] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)


def _layer(
    base: dict[str, Any],
    custom_handlers: CustomHandlers | None,
    prop_overrides: Mapping[str, Any] | None,
    **context: Any,
) -> dict[str, Any]:
    props = dict(base)
    if custom_handlers is not None:
        props.update(custom_handlers(**context))
    if prop_overrides:
        props.update(prop_overrides)
    return props


def menu_id(name: str) -> str:
    return f"{name}-options"


class BindingGenerator:
    """Builds descriptors from an engine's current state."""

    def __init__(self, engine: SelectEngine) -> None:
        self._engine = engine

    @property
    def _name(self) -> str:
        return self._engine.config.name

    def input(
        self,
        custom_handlers: CustomHandlers | None = None,
        prop_overrides: Mapping[str, Any] | None = None,
    ) -> Binding:
        engine = self._engine
        state = engine.state
        base = {
            "tabIndex": "0",
            "autoComplete": "off",
            "role": "combobox",
            "type": "text",
            "aria-autocomplete": "list",
            "aria-expanded": state.is_open,
            "aria-haspopup": True,
            "aria-labelledby": self._name,
            "aria-controls": menu_id(self._name),
            "id": self._name,
            "value": state.search_value,
            "ref": engine.register_input,
            "onChange": engine.search,
            "onKeyDown": engine.key_down,
            "onFocus": engine.focus_input,
        }
        return Binding(props=_layer(base, custom_handlers, prop_overrides))

    def option(
        self,
        index: int,
        option: Option,
        is_selected: bool | None = None,
        key: Any = None,
        custom_handlers: CustomHandlers | None = None,
        prop_overrides: Mapping[str, Any] | None = None,
    ) -> Binding:
        """Descriptor for one option. ``index`` is the option's full-list index."""
        engine = self._engine
        state = engine.state
        member = index_of(state.selected, option) >= 0
        if is_selected is None:
            is_selected = member
        base = {
            "key": option.value if option.value is not None else key,
            "value": option.value,
            "role": "option",
            "aria-selected": is_selected,
            "type": "text",
            "id": f"{self._name}-option-{option.value}",
            "onClick": partial(engine.click_option, option, index),
        }
        return Binding(
            props=_layer(base, custom_handlers, prop_overrides, index=index, option=option),
            meta={
                "is_selected": member,
                "is_active": index == state.highlighted_index,
                "option": option,
                "index": index,
                "handle_option_click": engine.select_or_deselect,
            },
        )

    def options(
        self,
        custom_handlers: CustomHandlers | None = None,
        prop_overrides: Mapping[str, Any] | None = None,
    ) -> Iterator[Binding]:
        """Option descriptors for every visible option, with full-list indices."""
        engine = self._engine
        config = engine.config
        for index in visible_indices(config.options, engine.state.search_value, config.is_searchable):
            yield self.option(
                index,
                config.options[index],
                custom_handlers=custom_handlers,
                prop_overrides=prop_overrides,
            )

    def label(
        self,
        custom_handlers: CustomHandlers | None = None,
        prop_overrides: Mapping[str, Any] | None = None,
    ) -> Binding:
        return Binding(props=_layer({"htmlFor": self._name}, custom_handlers, prop_overrides))

    def menu(
        self,
        custom_handlers: CustomHandlers | None = None,
        prop_overrides: Mapping[str, Any] | None = None,
    ) -> Binding:
        engine = self._engine
        base = {
            "aria-expanded": engine.state.is_open,
            "aria-labelledby": self._name,
            "role": "listbox",
            "id": menu_id(self._name),
            "ref": engine.register_menu,
        }
        return Binding(props=_layer(base, custom_handlers, prop_overrides), meta={})

    def selected_option(
        self,
        selected_option: Option,
        index: int,
        custom_handlers: CustomHandlers | None = None,
        prop_overrides: Mapping[str, Any] | None = None,
    ) -> Binding:
        """Descriptor for a chip showing one selected option (multi mode)."""
        engine = self._engine
        base = {
            "aria-expanded": engine.state.is_open,
            "id": f"{self._name}-selected-{index}",
            "onFocus": engine.focus_chip,
            "onBlur": engine.blur_selected_chip,
        }
        return Binding(
            props=_layer(
                base,
                custom_handlers,
                prop_overrides,
                selected_option=selected_option,
                index=index,
            ),
            meta={
                "remove_selected_option": partial(engine.remove_selected, index),
                "selected_option": selected_option,
                "index": index,
            },
        )
