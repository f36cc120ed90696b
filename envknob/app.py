"""ENVKNOB FILE PURPOSE
Purpose: create FastAPI app, attach the KnobRegistry and mount enabled features.
Hot path: no (startup only).
Feature flags: ENVKNOB_FEATURE_*.
Failure mode: start with core routes even if no features enabled.
"""

from __future__ import annotations

from fastapi import FastAPI, Request

from envknob.config import on_invalid_policy, strict_init
from envknob.feature_loader import load_features
from envknob.feature_registry import FeatureRegistry
from envknob.knobs import KnobRegistry


def get_knobs(request: Request) -> KnobRegistry:
    return request.app.state.knobs


def create_app(knobs: KnobRegistry | None = None) -> FastAPI:
    if knobs is None:
        knobs = KnobRegistry(on_invalid=on_invalid_policy(), strict_init=strict_init())

    app = FastAPI()
    app.state.knobs = knobs
    app.state.features = FeatureRegistry()

    @app.get("/")
    async def root() -> dict[str, bool]:
        return {"ok": True}

    load_features(app, knobs, app.state.features)
    return app
