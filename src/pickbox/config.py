"""Select configuration and its construction-time defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from pickbox.options import Option

DEFAULT_NAME = "my-select"

# Accepted spellings for each field, snake_case first.
_ALIASES = {
    "options": "options",
    "is_searchable": "is_searchable",
    "isSearchable": "is_searchable",
    "name": "name",
    "multi": "multi",
    "initial_selected": "initial_selected",
    "initialSelectedItem": "initial_selected",
    "initial_search_value": "initial_search_value",
    "initialSearchValue": "initial_search_value",
    "initial_highlighted_index": "initial_highlighted_index",
    "initialHighlightedIndex": "initial_highlighted_index",
}


class ConfigError(ValueError):
    """Raised when configuration input cannot be understood."""


def coerce_option(raw: Any, options: Sequence[Option] = ()) -> Option:
    """Turn an Option, ``{value, label}`` mapping, ``(label, value)`` pair or
    bare value into an Option.

    Bare values are looked up in ``options`` first; unknown strings become
    an option labelled by themselves.
    """
    if isinstance(raw, Option):
        return raw
    if isinstance(raw, Mapping):
        if "value" not in raw:
            raise ConfigError(f"option mapping has no 'value': {raw!r}")
        value = raw["value"]
        label = raw.get("label", value)
        return Option(value=value, label=str(label))
    if isinstance(raw, (tuple, list)):
        if len(raw) != 2:
            raise ConfigError(f"option pair must be (label, value): {raw!r}")
        label, value = raw
        return Option(value=value, label=str(label))
    for option in options:
        if option.value == raw:
            return option
    if isinstance(raw, (str, int, float, bool)):
        return Option(value=raw, label=str(raw))
    raise ConfigError(f"cannot interpret {raw!r} as an option")


@dataclass(frozen=True)
class SelectConfig:
    """Configuration snapshot for one select control.

    ``None`` for the ``initial_*`` fields means "derive the default":

    - ``initial_selected``: empty when multi, else the first option.
    - ``initial_search_value``: ``""`` when searchable or multi, else the
      first option's label.
    - ``initial_highlighted_index``: 0.

    Defaults are computed once, here. Later changes to the options list do
    not re-derive them.
    """

    options: tuple[Option, ...] = ()
    is_searchable: bool = False
    name: str = DEFAULT_NAME
    multi: bool = False
    initial_selected: tuple[Option, ...] | None = None
    initial_search_value: str | None = None
    initial_highlighted_index: int | None = None

    def __post_init__(self) -> None:
        options = tuple(self.options)
        object.__setattr__(self, "options", options)

        if self.initial_selected is None:
            selected: tuple[Option, ...] = () if self.multi or not options else (options[0],)
        else:
            selected = tuple(self.initial_selected)
            if not self.multi:
                selected = selected[:1]
        object.__setattr__(self, "initial_selected", selected)

        if self.initial_search_value is None:
            if self.is_searchable or self.multi or not options:
                search = ""
            else:
                search = options[0].label
            object.__setattr__(self, "initial_search_value", search)

        index = self.initial_highlighted_index or 0
        if options:
            index = min(max(index, 0), len(options) - 1)
        else:
            index = 0
        object.__setattr__(self, "initial_highlighted_index", index)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SelectConfig:
        """Build a config from a plain mapping.

        Keys may be snake_case or the camelCase names used by web
        combobox hooks (``isSearchable``, ``initialSelectedItem``...).
        """
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            target = _ALIASES.get(key)
            if target is None:
                raise ConfigError(f"unknown configuration key: {key!r}")
            if target in kwargs:
                raise ConfigError(f"configuration key given twice: {target!r}")
            kwargs[target] = value

        raw_options = kwargs.get("options") or []
        if isinstance(raw_options, (str, bytes)) or not isinstance(raw_options, Sequence):
            raise ConfigError("options must be a list")
        options = tuple(coerce_option(raw) for raw in raw_options)
        kwargs["options"] = options

        raw_selected = kwargs.get("initial_selected")
        if raw_selected is not None:
            # A single option given on its own, e.g. ``initialSelectedItem: green``.
            if isinstance(raw_selected, (Mapping, Option, str, bytes)) or not isinstance(raw_selected, Sequence):
                raw_selected = [raw_selected]
            kwargs["initial_selected"] = tuple(coerce_option(raw, options) for raw in raw_selected)

        for flag in ("is_searchable", "multi"):
            if flag in kwargs and not isinstance(kwargs[flag], bool):
                raise ConfigError(f"{flag} must be true or false")
        if "name" in kwargs and (not isinstance(kwargs["name"], str) or not kwargs["name"]):
            raise ConfigError("name must be a non-empty string")
        if "initial_highlighted_index" in kwargs and not isinstance(kwargs["initial_highlighted_index"], int):
            raise ConfigError("initial_highlighted_index must be an integer")

        return cls(**kwargs)
