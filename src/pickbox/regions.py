"""Abstract screen regions and the pointer-down input source.

The engine never touches a real widget tree. Rendering adapters register
objects that can answer "does this region contain the event target?" and,
for the input, "take focus". Pointer-down events arrive through any object
with a ``subscribe`` method that returns an unsubscribe callable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

PointerHandler = Callable[["PointerDown"], None]


@dataclass(frozen=True)
class PointerDown:
    """A pointer press somewhere on screen. ``target`` is adapter-defined."""

    target: Any


@runtime_checkable
class Region(Protocol):
    def contains(self, target: Any) -> bool: ...


@runtime_checkable
class FocusableRegion(Region, Protocol):
    def focus(self) -> Any: ...


class PointerSource(Protocol):
    def subscribe(self, handler: PointerHandler) -> Callable[[], None]: ...


class PointerEvents:
    """Minimal in-process pointer source.

    Adapters call ``press(target)`` from their own mouse handlers; every
    subscribed handler is called in subscription order.
    """

    def __init__(self) -> None:
        self._handlers: list[PointerHandler] = []

    def __len__(self) -> int:
        return len(self._handlers)

    def subscribe(self, handler: PointerHandler) -> Callable[[], None]:
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def press(self, target: Any) -> None:
        event = PointerDown(target)
        for handler in list(self._handlers):
            handler(event)
