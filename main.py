"""ENVKNOB FILE PURPOSE
Purpose: FastAPI entrypoint; the one place the process KnobRegistry is built.
Hot path: no (process-level startup only).
Feature flags: ENVKNOB_ON_INVALID, ENVKNOB_STRICT_INIT, ENVKNOB_FEATURE_*.
Failure mode: fail fast on import errors and malformed knobs.
"""

from envknob.app import create_app
from envknob.config import on_invalid_policy, strict_init
from envknob.knobs import KnobRegistry
from envknob.logging import logf

knobs = KnobRegistry(on_invalid=on_invalid_policy(), strict_init=strict_init())
knobs.set_in_main()

app = create_app(knobs)
knobs.log_current(logf)
