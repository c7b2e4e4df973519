"""Fault-injection hook driven by the developer toggles.

Views wrapped with ``inject_faults`` stall while the ``sleeping`` toggle is on
and fail with ``MisbehavingError`` while ``misbehaving`` is on. Log lines use
the ``<ERROR_CODE> route=<path> reason=<reason>`` format so log-based alarms
can match on them.
"""

from __future__ import annotations

import functools
import logging
import time

from flask import current_app, jsonify, request

from toggles.developer.state import get_toggle_state

logger = logging.getLogger(__name__)

MISBEHAVE_ERROR_CODE = "FAULT_DEVELOPER_MISBEHAVE"
SLEEP_ERROR_CODE = "FAULT_DEVELOPER_SLEEP"


class MisbehavingError(Exception):
    """Raised by a guarded view while the misbehave toggle is on."""

    error_code = MISBEHAVE_ERROR_CODE

    def __init__(self, route: str):
        super().__init__(f"{route} is misbehaving")
        self.route = route


def inject_faults(view):
    """Apply the active toggles before running ``view``."""

    @functools.wraps(view)
    def wrapper(*args, **kwargs):
        state = get_toggle_state()

        if state.is_sleeping():
            delay = float(current_app.config.get("TOGGLE_SLEEP_SECONDS", 5.0))
            logger.warning(
                f"{SLEEP_ERROR_CODE} route={request.path} "
                f"reason=sleeping delay={delay:.2f}"
            )
            time.sleep(delay)

        if state.is_misbehaving():
            raise MisbehavingError(request.path)

        return view(*args, **kwargs)

    return wrapper


def handle_misbehaving(error: MisbehavingError):
    """Turn a ``MisbehavingError`` into a 500 JSON response."""
    logger.error(
        f"{error.error_code} route={error.route} reason=misbehaving"
    )
    return (
        jsonify(
            {
                "status": "error",
                "error_code": error.error_code,
                "detail": "misbehaving",
            }
        ),
        500,
    )
