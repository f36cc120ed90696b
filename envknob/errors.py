"""ENVKNOB FILE PURPOSE
Purpose: knob error types.
Hot path: no.
Feature flags: none.
Failure mode: n/a.
"""

from __future__ import annotations


class InvalidKnobError(ValueError):
    """A knob is set but its value does not parse as the requested type."""

    def __init__(self, name: str, value: str, kind: str) -> None:
        self.name = name
        self.value = value
        self.kind = kind
        super().__init__(f"invalid {kind} environment variable {name} value {value!r}")


class KnobInitError(RuntimeError):
    """A guarded accessor was called while a module was still being imported."""
