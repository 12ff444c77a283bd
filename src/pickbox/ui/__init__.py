"""Textual UI for pickbox."""

from pickbox.ui.app import PickboxApp
from pickbox.ui.combobox import Chip, Combobox, OptionMenu, WidgetRegion

__all__ = [
    "Chip",
    "Combobox",
    "OptionMenu",
    "PickboxApp",
    "WidgetRegion",
]
