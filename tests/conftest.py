"""Shared fixtures for engine tests."""

import pytest

from pickbox.config import SelectConfig
from pickbox.engine import SelectEngine
from pickbox.options import Option

A = Option("a", "Apple")
B = Option("b", "Banana")
C = Option("c", "Cherry")
RED = Option("red", "Red")


class FakeRegion:
    """Region that contains a fixed set of targets and records focus calls."""

    def __init__(self, *targets):
        self.targets = set(targets)
        self.focus_calls = 0

    def contains(self, target):
        return target in self.targets

    def focus(self):
        self.focus_calls += 1


@pytest.fixture
def abc():
    return (A, B, C)


@pytest.fixture
def single(abc):
    return SelectEngine(SelectConfig(options=abc))


@pytest.fixture
def multi(abc):
    return SelectEngine(SelectConfig(options=abc, multi=True))


@pytest.fixture
def searchable(abc):
    return SelectEngine(SelectConfig(options=abc, is_searchable=True))


@pytest.fixture
def regions():
    """Input and menu regions, as a (input, menu) pair."""
    return FakeRegion("input"), FakeRegion("menu", "menu-item")
