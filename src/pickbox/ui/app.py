"""Demo Textual application hosting one Combobox."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.events import MouseDown
from textual.widgets import Static

from pickbox.config import SelectConfig
from pickbox.options import Option
from pickbox.regions import PointerEvents
from pickbox.ui.combobox import Combobox


def describe(selected: tuple[Option, ...]) -> str:
    if not selected:
        return "Nothing selected"
    return "Selected: " + ", ".join(option.label for option in selected)


class PickboxApp(App[tuple[Option, ...]]):
    """Shows a combobox and the current selection. Exits with the selection."""

    CSS = """
    Screen {
        padding: 1 2;
    }
    #selection {
        margin-top: 1;
        color: $text-muted;
    }
    """

    TITLE = "pickbox"
    BINDINGS = [
        Binding("ctrl+q", "finish", "Quit", priority=True),
        Binding("escape", "finish", "Quit"),
    ]

    def __init__(self, config: SelectConfig, label: str = "") -> None:
        super().__init__()
        self.config = config
        self.label = label
        self.pointer = PointerEvents()

    def compose(self) -> ComposeResult:
        yield Combobox(self.config, label=self.label, pointer_source=self.pointer)
        yield Static(describe(self.config.initial_selected), id="selection")

    def on_mouse_down(self, event: MouseDown) -> None:
        self.pointer.press((event.screen_x, event.screen_y))

    def on_combobox_changed(self, event: Combobox.Changed) -> None:
        self.query_one("#selection", Static).update(describe(event.selected))

    def action_finish(self) -> None:
        self.exit(self.query_one(Combobox).selected)
