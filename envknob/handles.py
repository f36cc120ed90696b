"""ENVKNOB FILE PURPOSE
Purpose: registered knob handles (identity-stable cells updated in place).
Hot path: yes (handles are read directly by callers, often per request).
Feature flags: none.
Failure mode: n/a; values are only written by KnobRegistry.
"""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class _Handle(Generic[T]):
    __slots__ = ("name", "_value", "_lock")

    def __init__(self, name: str, value: T) -> None:
        self.name = name
        self._value = value
        self._lock = threading.Lock()

    def get(self) -> T:
        with self._lock:
            return self._value

    def _update(self, value: T) -> None:
        with self._lock:
            self._value = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.get()!r})"


class StringKnob(_Handle[str]):
    pass


class BoolKnob(_Handle[bool]):
    def __bool__(self) -> bool:
        return self.get()
