"""ENVKNOB FILE PURPOSE
Purpose: admin bearer check shared by the operator-only feature endpoints.
Hot path: no (admin control-plane only).
Feature flags: none; key from ENVKNOB_ADMIN_API_KEY.
Failure mode: no key configured => every admin call is unauthorized.
"""

from __future__ import annotations

from fastapi import HTTPException

from envknob.config import admin_api_key


def authorized(auth_header: str | None) -> bool:
    configured = admin_api_key()
    if not configured or not isinstance(auth_header, str):
        return False
    prefix = "Bearer "
    if not auth_header.startswith(prefix):
        return False
    token = auth_header[len(prefix) :].strip()
    return token == configured


def require_admin_bearer(authorization: str | None) -> None:
    if not authorized(authorization):
        raise HTTPException(status_code=401, detail="unauthorized")
