"""ENVKNOB FILE PURPOSE
Purpose: KnobRegistry, typed access to environment-variable debug knobs.
Hot path: yes (accessors re-read the environment on every call; one short lock hold each).
Feature flags: none of its own; every knob name passes through here.
Failure mode: unset => default; malformed => fatal (exit, or raise under on_invalid="raise").

Knobs are tweakables for developers, or for operators when asked to by a
developer while debugging something. They are not a stable interface.

One registry is built by the composition root (main.py) and handed to
whatever needs knob access. Tests build their own with a private environ.
"""

from __future__ import annotations

import inspect
import os
from collections.abc import MutableMapping
from typing import NoReturn

from envknob.config import ON_INVALID_CHOICES
from envknob.errors import InvalidKnobError, KnobInitError
from envknob.handles import BoolKnob, StringKnob
from envknob.logging import logger
from envknob.opt import OptBool
from envknob.parse import format_bool, parse_bool, parse_int
from envknob.store import KnobStore, Logf


class KnobRegistry:
    def __init__(
        self,
        environ: MutableMapping[str, str] | None = None,
        *,
        on_invalid: str = "exit",
        strict_init: bool = False,
    ) -> None:
        if on_invalid not in ON_INVALID_CHOICES:
            raise ValueError(f"on_invalid must be one of {ON_INVALID_CHOICES}, got {on_invalid!r}")
        self._environ = os.environ if environ is None else environ
        self._on_invalid = on_invalid
        self._strict_init = strict_init
        self._store = KnobStore()
        self._reg_str: dict[str, StringKnob] = {}
        self._reg_bool: dict[str, BoolKnob] = {}
        self._in_main = False

    @property
    def store(self) -> KnobStore:
        return self._store

    @property
    def on_invalid(self) -> str:
        return self._on_invalid

    @property
    def in_main(self) -> bool:
        return self._in_main

    # --- knob store ---

    def log_current(self, logf: Logf) -> None:
        """Log the currently set knobs, one ``envknob: NAME="value"`` line each, sorted by name."""
        self._store.log_current(logf)

    def active(self) -> dict[str, str]:
        return self._store.active()

    # --- plain accessors ---

    def string(self, name: str) -> str:
        """Return the named environment variable ("" if unset).

        A non-empty value is tracked as an in-use knob.
        """
        v = self._getenv(name)
        self._store.observe(name, v)
        return v

    def bool(self, name: str) -> bool:
        """Return the boolean value of the named knob, False if unset.

        An invalid value is fatal.
        """
        return self.bool_or(name, False)

    def bool_default_true(self, name: str) -> bool:
        return self.bool_or(name, True)

    def bool_or(self, name: str, implicit: bool) -> bool:
        self._assert_not_in_init()
        val = self._getenv(name)
        if val == "":
            return implicit
        try:
            b = parse_bool(val)
        except ValueError:
            self._invalid(name, val, "boolean")
        self._store.observe(name, format_bool(b))  # canonicalize
        return b

    def lookup_bool(self, name: str) -> tuple[bool, bool]:
        """Return ``(value, ok)`` where ok reports whether the knob was set."""
        self._assert_not_in_init()
        val = self._getenv(name)
        if val == "":
            return False, False
        try:
            return parse_bool(val), True
        except ValueError:
            self._invalid(name, val, "boolean")

    def opt_bool(self, name: str) -> OptBool:
        """Like bool, but lets the caller tell implicitly and explicitly false apart."""
        self._assert_not_in_init()
        b, ok = self.lookup_bool(name)
        if not ok:
            return OptBool.UNSET
        return OptBool.from_bool(b)

    def lookup_int(self, name: str) -> tuple[int, bool]:
        self._assert_not_in_init()
        val = self._getenv(name)
        if val == "":
            return 0, False
        try:
            v = parse_int(val)
        except ValueError:
            self._invalid(name, val, "integer")
        self._store.observe(name, val)
        return v, True

    # --- registered handles ---

    def register_string(self, name: str) -> StringKnob:
        """Return the handle for the named knob, creating it on first use.

        The handle's value follows later setenv calls for the same name.
        """
        with self._store.lock:
            h = self._reg_str.get(name)
            if h is None:
                val = self._getenv(name)
                if val:
                    self._store.note_locked(name, val)
                h = StringKnob(name, val)
                self._reg_str[name] = h
            return h

    def register_bool(self, name: str) -> BoolKnob:
        with self._store.lock:
            h = self._reg_bool.get(name)
            if h is None:
                h = BoolKnob(name, False)
                self._set_bool_locked(h, self._getenv(name))
                self._reg_bool[name] = h
            return h

    def setenv(self, name: str, value: str) -> None:
        """Set (or with "" unset) the environment variable and update registered handles.

        A malformed value for a registered bool handle is fatal and leaves
        the environment unchanged.
        """
        with self._store.lock:
            bh = self._reg_bool.get(name)
            if bh is not None and value:
                try:
                    parse_bool(value)
                except ValueError:
                    self._invalid(name, value, "boolean")

            if value:
                self._environ[name] = value
            else:
                self._environ.pop(name, None)

            sh = self._reg_str.get(name)
            if sh is not None:
                sh._update(value)
            if bh is not None:
                self._set_bool_locked(bh, value)
            else:
                self._store.note_locked(name, value)

    def _set_bool_locked(self, h: BoolKnob, val: str) -> None:
        if val == "":
            self._store.note_locked(h.name, "")
            h._update(False)
            return
        try:
            b = parse_bool(val)
        except ValueError:
            self._invalid(h.name, val, "boolean")
        self._store.note_locked(h.name, format_bool(b))
        h._update(b)

    # --- init-phase guard ---

    def set_in_main(self) -> None:
        """Mark that the entry point is running, so init-time checks can stop."""
        self._in_main = True

    def _assert_not_in_init(self) -> None:
        if self._in_main:
            return
        if self._strict_init:
            raise KnobInitError("envknob check called before set_in_main")
        frame = inspect.currentframe()
        try:
            while frame is not None:
                # a module body other than __main__ is an import in progress
                mod = frame.f_globals.get("__name__")
                if frame.f_code.co_name == "<module>" and mod != "__main__":
                    raise KnobInitError(f"envknob check called while importing module {mod!r}")
                frame = frame.f_back
        finally:
            del frame

    # --- internals ---

    def _getenv(self, name: str) -> str:
        return self._environ.get(name) or ""

    def _invalid(self, name: str, value: str, kind: str) -> NoReturn:
        err = InvalidKnobError(name, value, kind)
        if self._on_invalid == "raise":
            raise err
        logger.critical("%s", err)
        raise SystemExit(str(err)) from err
