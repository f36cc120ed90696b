"""ENVKNOB FILE PURPOSE
Purpose: discover and mount one-file feature modules from `features/`.
Hot path: no (startup only).
Feature flags: ENVKNOB_FEATURE_* (read through the app's KnobRegistry).
Failure mode: invalid feature => skipped (debug logs only when ENVKNOB_DEBUG=1);
    malformed ENVKNOB_FEATURE_* value => fatal like any boolean knob.
"""

from __future__ import annotations

import importlib
import pkgutil
import re
from typing import Any

from fastapi import FastAPI

from envknob.config import is_debug
from envknob.feature_registry import FeatureRegistry, FeatureSpec
from envknob.knobs import KnobRegistry
from envknob.logging import logger

_ENV_RE = re.compile(r"^ENVKNOB_FEATURE_[A-Z0-9_]+$")


def _validate(feature: Any) -> dict[str, Any] | None:
    if not isinstance(feature, dict):
        return None
    required = {"key", "router", "enabled_env"}
    if not required.issubset(feature.keys()):
        return None
    if not isinstance(feature.get("key"), str) or not feature["key"]:
        return None
    env = feature.get("enabled_env")
    if not isinstance(env, str) or not _ENV_RE.match(env):
        return None
    return feature


def load_features(app: FastAPI, knobs: KnobRegistry, registry: FeatureRegistry) -> None:
    import features  # package

    discovered: dict[str, FeatureSpec] = {}
    enabled: dict[str, FeatureSpec] = {}

    for mod in pkgutil.iter_modules(features.__path__):
        if mod.ispkg or mod.name.startswith("_"):
            continue
        m = importlib.import_module(f"features.{mod.name}")
        d = _validate(getattr(m, "FEATURE", None))
        if d is None:
            if is_debug():
                logger.warning("FEATURE_INVALID module=%s", mod.name)
            continue

        spec = FeatureSpec(key=d["key"], enabled_env=d["enabled_env"], router=d["router"])
        discovered[spec.key] = spec

        if knobs.bool(spec.enabled_env):
            app.include_router(spec.router)
            enabled[spec.key] = spec

    registry.set_discovered(discovered)
    registry.set_enabled(enabled)

    if is_debug():
        logger.info("FEATURES_DISCOVERED keys=%s", sorted(discovered.keys()))
        logger.info("FEATURES_ENABLED keys=%s", sorted(enabled.keys()))
