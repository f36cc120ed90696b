"""ENVKNOB FILE PURPOSE
Purpose: logging setup with strict debug gating, plus the always-on logf used for knob snapshots.
Hot path: yes (logger calls occur in hot paths; default is quiet).
Feature flags: ENVKNOB_DEBUG.
Failure mode: never crash due to logging.
"""

from __future__ import annotations

import logging

from envknob.config import is_debug


def _configure() -> logging.Logger:
    logger = logging.getLogger("envknob_ng")
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO if is_debug() else logging.WARNING)
    return logger


logger = _configure()

# knob snapshots are always shown; they go through the parent handler
knob_logger = logging.getLogger("envknob_ng.knobs")
knob_logger.setLevel(logging.INFO)


def logf(line: str) -> None:
    knob_logger.info("%s", line)
