"""Options and label filtering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class Option:
    """A selectable option. Identity is by ``value``."""

    value: Any
    label: str

    def same_as(self, other: Option) -> bool:
        return self.value == other.value


def filter_options(options: Sequence[Option], search_value: str, is_searchable: bool) -> list[Option]:
    """Return options whose label contains the search text, case-insensitively.

    Non-searchable controls ignore the search text entirely.
    """
    if not is_searchable:
        return list(options)
    query_lower = search_value.casefold()
    return [option for option in options if query_lower in option.label.casefold()]


def visible_indices(options: Sequence[Option], search_value: str, is_searchable: bool) -> list[int]:
    """Full-list indices of the options that survive filtering, in order."""
    if not is_searchable:
        return list(range(len(options)))
    query_lower = search_value.casefold()
    return [i for i, option in enumerate(options) if query_lower in option.label.casefold()]


def index_of(selected: Sequence[Option], option: Option) -> int:
    """Position of ``option`` in ``selected`` by value, or -1."""
    for i, candidate in enumerate(selected):
        if candidate.same_as(option):
            return i
    return -1
