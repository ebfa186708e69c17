"""A small event dispatcher and the argument types it carries."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

S = TypeVar("S")
A = TypeVar("A")

Handler = Callable[[Any, Any], None]


@dataclass(frozen=True)
class MouseWheelEventArg:
    """Mouse wheel rotation."""

    value: float


@dataclass(frozen=True)
class MouseEventArg:
    """Mouse position in window coordinates."""

    x: int
    y: int


@dataclass(frozen=True)
class KeyEventArg:
    """Virtual key code."""

    key: int


class Event(Generic[S, A]):
    """An ordered list of handlers called as ``handler(sender, arg)``."""

    def __init__(self) -> None:
        self._handlers: list[Callable[[S, A], None]] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)

    def reaction(self, func: Callable[[S, A], None]) -> Callable[[S, A], None]:
        """Append a handler and return it, so it can be used as a decorator."""
        with self._lock:
            self._handlers.append(func)
        return func

    def remove_reaction(self, func: Callable[[S, A], None]) -> None:
        """Remove every registration equal to ``func``."""
        with self._lock:
            self._handlers = [h for h in self._handlers if h != func]

    def remove_all_reactions(self) -> None:
        with self._lock:
            self._handlers.clear()

    def emit(self, sender: S, arg: A) -> None:
        """Call every handler, in registration order."""
        with self._lock:
            handlers = list(self._handlers)
        for handler in handlers:
            handler(sender, arg)