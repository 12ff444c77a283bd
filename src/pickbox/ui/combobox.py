"""Textual combobox driven by a SelectEngine."""

from __future__ import annotations

from typing import Any

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.events import Blur, Click, DescendantBlur, DescendantFocus, Focus, Key
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Label, OptionList, Static
from textual.widgets.option_list import Option as ListOption

from pickbox.bindings import Binding
from pickbox.config import SelectConfig
from pickbox.engine import SelectEngine
from pickbox.options import Option
from pickbox.regions import PointerSource


class WidgetRegion:
    """Engine region backed by a widget's on-screen area.

    Pointer targets are ``(screen_x, screen_y)`` tuples.
    """

    def __init__(self, widget: Widget) -> None:
        self.widget = widget

    def contains(self, target: Any) -> bool:
        if not self.widget.is_attached or not self.widget.display:
            return False
        x, y = target
        return self.widget.region.contains(x, y)

    def focus(self) -> None:
        self.widget.focus()


class ComboLabel(Label):
    """Label that focuses its input when clicked."""

    def __init__(self, text: str, binding: Binding, **kwargs) -> None:
        super().__init__(text, **kwargs)
        self.html_for = binding.props["htmlFor"]

    def on_click(self, event: Click) -> None:
        event.stop()
        if self.parent is not None:
            self.parent.query_one(f"#{self.html_for}", Input).focus()


class Chip(Static, can_focus=True):
    """A selected option in multi mode. Click or backspace removes it."""

    BINDINGS = [
        ("backspace", "remove", "Remove"),
        ("delete", "remove", "Remove"),
    ]

    DEFAULT_CSS = """
    Chip {
        width: auto;
        height: 1;
        padding: 0 1;
        margin-right: 1;
        background: $primary-darken-2;
    }
    Chip:focus {
        background: $primary;
    }
    """

    def __init__(self, binding: Binding) -> None:
        option: Option = binding.meta["selected_option"]
        super().__init__(f"{option.label} ×")
        self.binding = binding

    def on_focus(self, event: Focus) -> None:
        self.binding.props["onFocus"]()

    def on_blur(self, event: Blur) -> None:
        # Focus moved back to our own input, which reopens immediately.
        focused = self.app.focused
        if self.parent is not None and isinstance(focused, Input) and focused.parent is self.parent.parent:
            return
        self.binding.props["onBlur"]()

    def on_click(self, event: Click) -> None:
        event.stop()
        self.action_remove()

    def action_remove(self) -> None:
        self.binding.meta["remove_selected_option"]()


class OptionMenu(OptionList):
    """The dropdown. Never takes focus so the input keeps it while clicking."""

    can_focus = False


class Combobox(Container):
    """Label, chips, text input and option menu bound to one SelectEngine.

    The widget renders whatever the engine's bindings say and feeds every
    key, focus, click and text change back into the engine.
    """

    class Changed(Message):
        """Posted when the selection changes."""

        def __init__(self, combobox: Combobox, selected: tuple[Option, ...]) -> None:
            super().__init__()
            self.combobox = combobox
            self.selected = selected

        @property
        def control(self) -> Combobox:
            return self.combobox

    DEFAULT_CSS = """
    Combobox {
        height: auto;
    }
    Combobox > .chips {
        height: auto;
    }
    Combobox > OptionMenu {
        max-height: 8;
        display: none;
    }
    Combobox > OptionMenu.-visible {
        display: block;
    }
    """

    def __init__(
        self,
        config: SelectConfig,
        *,
        label: str = "",
        placeholder: str = "",
        pointer_source: PointerSource | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.engine = SelectEngine(config, pointer_source=pointer_source)
        self._label = label
        self._placeholder = placeholder
        self._visible: list[Binding] = []
        self._unsubscribe = self.engine.subscribe(self._on_engine_change)
        self._unwatch = self.engine.watch("selected", self._on_selected_change)

    @property
    def selected(self) -> tuple[Option, ...]:
        return self.engine.selected_options

    def compose(self) -> ComposeResult:
        inp = self.engine.bind_input()
        menu = self.engine.bind_menu()
        if self._label:
            yield ComboLabel(self._label, self.engine.bind_label())
        if self.engine.config.multi:
            yield Horizontal(classes="chips")
        yield Input(
            value=inp.props["value"],
            placeholder=self._placeholder,
            id=inp.props["id"],
        )
        yield OptionMenu(id=menu.props["id"])

    def on_mount(self) -> None:
        inp = self.query_one(Input)
        menu = self.query_one(OptionMenu)
        self.engine.bind_input().props["ref"](WidgetRegion(inp))
        self.engine.bind_menu().props["ref"](WidgetRegion(menu))
        self._sync()

    def on_unmount(self) -> None:
        self._unsubscribe()
        self._unwatch()
        self.engine.dispose()

    # -- engine -> widgets ---------------------------------------------------

    def _on_engine_change(self, engine: SelectEngine, old, new) -> None:
        self._sync(chips=old.selected != new.selected)

    def _on_selected_change(self, store, key: str, old, new) -> None:
        self.post_message(self.Changed(self, new))

    def _sync(self, chips: bool = True) -> None:
        """Push the current bindings into the child widgets."""
        if not self.is_attached:
            return
        inp = self.query_one(Input)
        props = self.engine.bind_input().props
        if inp.value != props["value"]:
            inp.value = props["value"]

        menu = self.query_one(OptionMenu)
        menu_props = self.engine.bind_menu().props
        menu.set_class(menu_props["aria-expanded"], "-visible")
        self._visible = self.engine.bind_options()
        menu.clear_options()
        menu.add_options(
            [
                ListOption(("✓ " if b.meta["is_selected"] else "  ") + b.meta["option"].label)
                for b in self._visible
            ]
        )
        for pos, binding in enumerate(self._visible):
            if binding.meta["is_active"]:
                menu.highlighted = pos
                break

        if chips and self.engine.config.multi:
            self._sync_chips()

    def _sync_chips(self) -> None:
        container = self.query_one(".chips", Horizontal)
        container.remove_children()
        container.mount_all(
            Chip(self.engine.bind_selected_option(option, index))
            for index, option in enumerate(self.engine.selected_options)
        )

    # -- widgets -> engine ---------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.value == self.engine.search_value:
            return
        self.engine.bind_input().props["onChange"](event.value)
        # Non-searchable controls reject typed text.
        if event.value != self.engine.search_value:
            self._sync(chips=False)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()

    def _on_key(self, event: Key) -> None:
        """Intercept navigation keys before the Input handles them."""
        if not isinstance(self.app.focused, Input) or self.app.focused.parent is not self:
            return
        if event.key not in ("up", "down", "enter", "tab", "backspace", "delete"):
            return
        if self.engine.bind_input().props["onKeyDown"](event.key):
            event.prevent_default()
            event.stop()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Mouse click on a dropdown entry."""
        event.stop()
        if 0 <= event.option_index < len(self._visible):
            self._visible[event.option_index].props["onClick"]()

    def on_descendant_focus(self, event: DescendantFocus) -> None:
        focused = self.app.focused
        if isinstance(focused, Input) and focused.parent is self:
            self.engine.bind_input().props["onFocus"]()

    def on_descendant_blur(self, event: DescendantBlur) -> None:
        """Close the menu when focus leaves the widget entirely."""
        self.call_after_refresh(self._maybe_close_on_blur)

    def _maybe_close_on_blur(self) -> None:
        if not self.is_attached:
            return
        focused = self.app.focused
        if focused is None or focused not in self.walk_children():
            self.engine.dismiss()
