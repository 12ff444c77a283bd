"""Headless combobox/select interaction engine."""

from pickbox.bindings import Binding
from pickbox.config import ConfigError, SelectConfig
from pickbox.engine import SelectEngine
from pickbox.options import Option, filter_options
from pickbox.regions import PointerDown, PointerEvents
from pickbox.state import SelectState

__all__ = [
    "Binding",
    "ConfigError",
    "Option",
    "PointerDown",
    "PointerEvents",
    "SelectConfig",
    "SelectEngine",
    "SelectState",
    "filter_options",
]
