"""ENVKNOB FILE PURPOSE
Purpose: debug endpoints listing the knobs in play and updating a knob at runtime.
Hot path: no (operator/debug only).
Feature flags: ENVKNOB_FEATURE_DEBUG.
Failure mode: listing never fails; update requires admin bearer; names outside the knob
    pattern, ENVKNOB_* service settings and NUL in values => 422; malformed bool for a
    registered handle => 422 under on_invalid="raise", process exit otherwise.
"""

from __future__ import annotations

import re

from fastapi import APIRouter, Depends, Header, HTTPException
from pydantic import BaseModel, Field, field_validator

from envknob.admin import require_admin_bearer
from envknob.app import get_knobs
from envknob.errors import InvalidKnobError
from envknob.knobs import KnobRegistry

router = APIRouter(prefix="/debug/envknobs", tags=["debug"])

_NAME_RE = re.compile(r"[A-Z][A-Z0-9_]*")
_RESERVED_PREFIX = "ENVKNOB_"


class KnobUpdate(BaseModel):
    value: str = Field(default="", max_length=4096)

    @field_validator("value")
    @classmethod
    def _no_nul(cls, v: str) -> str:
        if "\x00" in v:
            raise ValueError("value must not contain NUL")
        return v


def _check_name(name: str) -> None:
    if not _NAME_RE.fullmatch(name):
        raise HTTPException(status_code=422, detail=f"invalid knob name {name!r}")
    if name.startswith(_RESERVED_PREFIX):
        raise HTTPException(status_code=422, detail=f"{name} is a service setting, not a knob")


@router.get("")
async def list_knobs(knobs: KnobRegistry = Depends(get_knobs)) -> dict:
    return {
        "knobs": knobs.active(),
        "lines": knobs.store.lines(),
        "in_main": knobs.in_main,
    }


@router.put("/{name}")
async def update_knob(
    name: str,
    body: KnobUpdate,
    authorization: str | None = Header(default=None),
    knobs: KnobRegistry = Depends(get_knobs),
) -> dict:
    require_admin_bearer(authorization)
    _check_name(name)
    try:
        knobs.setenv(name, body.value)
    except InvalidKnobError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return {"ok": True, "name": name, "active": name in knobs.active()}


FEATURE = {
    "key": "envknobs_debug",
    "router": router,
    "enabled_env": "ENVKNOB_FEATURE_DEBUG",
}
