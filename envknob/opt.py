"""ENVKNOB FILE PURPOSE
Purpose: OptBool, a boolean that can also be unset.
Hot path: no.
Feature flags: none.
Failure mode: n/a.
"""

from __future__ import annotations

from enum import Enum


class OptBool(str, Enum):
    UNSET = ""
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def from_bool(cls, b: bool) -> "OptBool":
        return cls.TRUE if b else cls.FALSE

    def get(self) -> tuple[bool, bool]:
        """Return ``(value, ok)``; ``ok`` is False when unset."""
        if self is OptBool.UNSET:
            return False, False
        return self is OptBool.TRUE, True

    def equal_bool(self, b: bool) -> bool:
        v, ok = self.get()
        return ok and v == b
