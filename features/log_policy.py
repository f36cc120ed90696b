"""ENVKNOB FILE PURPOSE
Purpose: log-upload / support opt-out status and switch.
Hot path: no.
Feature flags: ENVKNOB_FEATURE_LOG_POLICY; reads and sets TS_NO_LOGS_NO_SUPPORT.
Failure mode: switch requires admin bearer; it can only be turned on, not off.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header

from envknob.admin import require_admin_bearer
from envknob.app import get_knobs
from envknob.knobs import KnobRegistry
from envknob.wellknown import no_logs_no_support, set_no_logs_no_support

router = APIRouter(prefix="/logs", tags=["logs"])


@router.get("/policy")
async def policy(knobs: KnobRegistry = Depends(get_knobs)) -> dict[str, bool]:
    return {"no_logs_no_support": no_logs_no_support(knobs)}


@router.post("/no-logs-no-support")
async def enable_no_logs_no_support(
    authorization: str | None = Header(default=None),
    knobs: KnobRegistry = Depends(get_knobs),
) -> dict[str, bool]:
    require_admin_bearer(authorization)
    set_no_logs_no_support(knobs)
    return {"no_logs_no_support": no_logs_no_support(knobs)}


FEATURE = {
    "key": "log_policy",
    "router": router,
    "enabled_env": "ENVKNOB_FEATURE_LOG_POLICY",
}
