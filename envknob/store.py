"""ENVKNOB FILE PURPOSE
Purpose: knob store (currently active knob name -> last non-empty raw value).
Hot path: yes (every accessor call notes its value here; O(1) under the lock).
Feature flags: none.
Failure mode: none; pure in-memory bookkeeping plus calls to the injected logf.
"""

from __future__ import annotations

import threading
from typing import Callable

Logf = Callable[[str], None]


_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def quote(value: str) -> str:
    """Double-quote value so it always stays on one line."""
    out: list[str] = []
    for ch in value:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        elif ord(ch) < 0x100:
            out.append(f"\\x{ord(ch):02x}")
        elif ord(ch) < 0x10000:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(f"\\U{ord(ch):08x}")
    return '"' + "".join(out) + '"'


class KnobStore:
    """Snapshot of the knobs in play, not a history.

    ``lock`` is shared with the registry that owns this store so that the
    handle maps and the active set change together.
    """

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self._set: dict[str, str] = {}

    def observe(self, name: str, value: str) -> None:
        with self.lock:
            self.note_locked(name, value)

    def note_locked(self, name: str, value: str) -> None:
        if value:
            self._set[name] = value
        else:
            self._set.pop(name, None)

    def active(self) -> dict[str, str]:
        with self.lock:
            return dict(self._set)

    def lines(self) -> list[str]:
        with self.lock:
            return [f"envknob: {k}={quote(self._set[k])}" for k in sorted(self._set)]

    def log_current(self, logf: Logf) -> None:
        # logf runs under the lock so the output is one point-in-time view
        with self.lock:
            for k in sorted(self._set):
                logf(f"envknob: {k}={quote(self._set[k])}")
