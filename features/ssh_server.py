"""ENVKNOB FILE PURPOSE
Purpose: report whether the SSH server may run and which debug SSH knobs are set.
Hot path: no.
Feature flags: ENVKNOB_FEATURE_SSH; reads TS_DISABLE_SSH_SERVER, TS_DEBUG_SSH_POLICY_FILE,
    TS_DEBUG_SSH_IGNORE_TAILNET_POLICY.
Failure mode: malformed boolean knob => fatal (per registry policy).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from envknob.app import get_knobs
from envknob.knobs import KnobRegistry
from envknob.wellknown import can_sshd, ssh_ignore_tailnet_policy, ssh_policy_file

router = APIRouter(prefix="/ssh", tags=["ssh"])


@router.get("/status")
async def status(knobs: KnobRegistry = Depends(get_knobs)) -> dict:
    return {
        "can_sshd": can_sshd(knobs),
        "policy_file": ssh_policy_file(knobs) or None,
        "ignore_tailnet_policy": ssh_ignore_tailnet_policy(knobs),
    }


FEATURE = {
    "key": "ssh_server",
    "router": router,
    "enabled_env": "ENVKNOB_FEATURE_SSH",
}
