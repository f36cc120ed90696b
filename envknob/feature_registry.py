"""ENVKNOB FILE PURPOSE
Purpose: feature registry (discovered and enabled feature modules).
Hot path: low (read-only lookups).
Feature flags: ENVKNOB_FEATURE_*.
Failure mode: registry empty => app has only core routes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FeatureSpec:
    key: str
    enabled_env: str
    router: Any


class FeatureRegistry:
    def __init__(self) -> None:
        self._discovered: dict[str, FeatureSpec] = {}
        self._enabled: dict[str, FeatureSpec] = {}

    def set_discovered(self, specs: dict[str, FeatureSpec]) -> None:
        self._discovered = dict(specs)

    def set_enabled(self, specs: dict[str, FeatureSpec]) -> None:
        self._enabled = dict(specs)

    def discovered_features(self) -> dict[str, FeatureSpec]:
        return dict(self._discovered)

    def enabled_features(self) -> dict[str, FeatureSpec]:
        return dict(self._enabled)
