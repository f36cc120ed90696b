"""ENVKNOB FILE PURPOSE
Purpose: service-level settings read straight from the environment.
Hot path: no (read once at startup by logging and the composition root).
Feature flags: ENVKNOB_DEBUG, ENVKNOB_ON_INVALID, ENVKNOB_STRICT_INIT.
Failure mode: safe defaults when unset.

These do not go through KnobRegistry: they are needed before one exists.
"""

from __future__ import annotations

import os

ON_INVALID_CHOICES = ("exit", "raise")


def env_flag(name: str, default: str = "0") -> bool:
    v = (os.getenv(name) or default).strip().lower()
    return v in ("1", "true", "yes", "on")


def is_debug() -> bool:
    return env_flag("ENVKNOB_DEBUG", "0")


def on_invalid_policy() -> str:
    v = (os.getenv("ENVKNOB_ON_INVALID") or "exit").strip().lower()
    return v if v in ON_INVALID_CHOICES else "exit"


def strict_init() -> bool:
    return env_flag("ENVKNOB_STRICT_INIT", "0")


def admin_api_key() -> str | None:
    key = os.getenv("ENVKNOB_ADMIN_API_KEY", "").strip()
    return key or None
