"""ENVKNOB FILE PURPOSE
Purpose: value grammars for knobs (boolean spellings, base-10 integers).
Hot path: yes (called on every typed accessor read).
Feature flags: none.
Failure mode: ValueError on anything outside the grammar.
"""

from __future__ import annotations

import re

TRUTHY: frozenset[str] = frozenset({"1", "t", "true", "y", "yes", "on"})
FALSY: frozenset[str] = frozenset({"0", "f", "false", "n", "no", "off"})

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_bool(value: str) -> bool:
    lv = value.lower()
    if lv in TRUTHY:
        return True
    if lv in FALSY:
        return False
    raise ValueError(f"invalid boolean: {value!r}")


def format_bool(b: bool) -> str:
    return "true" if b else "false"


def parse_int(value: str) -> int:
    # int() alone would also take "1_000" and surrounding whitespace or newlines
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"invalid integer: {value!r}")
    return int(value, 10)
