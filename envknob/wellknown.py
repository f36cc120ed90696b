"""ENVKNOB FILE PURPOSE
Purpose: named knobs shared across the system.
Hot path: yes (thin wrappers over KnobRegistry accessors).
Feature flags: TAILSCALE_USE_WIP_CODE, TS_DISABLE_SSH_SERVER, TS_DEBUG_SSH_POLICY_FILE,
    TS_DEBUG_SSH_IGNORE_TAILNET_POLICY, TS_NO_LOGS_NO_SUPPORT.
Failure mode: as KnobRegistry (malformed booleans are fatal).
"""

from __future__ import annotations

from envknob.knobs import KnobRegistry

USE_WIP_CODE = "TAILSCALE_USE_WIP_CODE"
DISABLE_SSH_SERVER = "TS_DISABLE_SSH_SERVER"
SSH_POLICY_FILE = "TS_DEBUG_SSH_POLICY_FILE"
SSH_IGNORE_TAILNET_POLICY = "TS_DEBUG_SSH_IGNORE_TAILNET_POLICY"
NO_LOGS_NO_SUPPORT = "TS_NO_LOGS_NO_SUPPORT"


def use_wip_code(knobs: KnobRegistry) -> bool:
    """Whether work-in-progress code paths are permitted."""
    return knobs.bool(USE_WIP_CODE)


def can_sshd(knobs: KnobRegistry) -> bool:
    """Whether the SSH server is allowed to run.

    If disabled, the SSH server won't start (won't intercept port 22) and
    any attempt to re-enable it results in an error.
    """
    return not knobs.bool(DISABLE_SSH_SERVER)


def ssh_policy_file(knobs: KnobRegistry) -> str:
    """Path, if any, to an SSH policy JSON file for development."""
    return knobs.string(SSH_POLICY_FILE)


def ssh_ignore_tailnet_policy(knobs: KnobRegistry) -> bool:
    return knobs.bool(SSH_IGNORE_TAILNET_POLICY)


def no_logs_no_support(knobs: KnobRegistry) -> bool:
    """Whether the client opted out of log uploads and technical support."""
    return knobs.bool(NO_LOGS_NO_SUPPORT)


def set_no_logs_no_support(knobs: KnobRegistry) -> None:
    knobs.setenv(NO_LOGS_NO_SUPPORT, "true")


def touch_all(knobs: KnobRegistry) -> None:
    # reads each named knob once so a snapshot shows the ones that are set
    use_wip_code(knobs)
    can_sshd(knobs)
    ssh_policy_file(knobs)
    ssh_ignore_tailnet_policy(knobs)
    no_logs_no_support(knobs)
