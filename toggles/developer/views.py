"""Developer blueprint: switch the simulated faults on and off.

Endpoints
---------
GET /developer/misbehave  - guarded endpoints start failing
GET /developer/behave     - guarded endpoints stop failing
GET /developer/sleep      - guarded endpoints start stalling
GET /developer/awake      - guarded endpoints stop stalling
GET /developer/status     - current value of both toggles
GET /developer/ping       - guarded endpoint for fault-tolerance clients
"""

import logging

from flask import Blueprint, Response, jsonify

from toggles.developer.faults import (
    MisbehavingError,
    handle_misbehaving,
    inject_faults,
)
from toggles.developer.state import get_toggle_state
from toggles.observability.metrics import metrics_collector

logger = logging.getLogger(__name__)

developer = Blueprint("developer", __name__, url_prefix="/developer")
developer.app_errorhandler(MisbehavingError)(handle_misbehaving)


def _toggled(flag: str, active: bool, reply: str) -> Response:
    logger.info("Toggle changed", extra={"flag": flag, "active": active})
    metrics_collector.record_flag("ToggleState", "Flag", flag, active)
    return Response(reply, mimetype="text/plain")


@developer.get("/misbehave")
def misbehave():
    get_toggle_state().set_misbehaving(True)
    return _toggled("misbehaving", True, "I am misbehaving")


@developer.get("/behave")
def behave():
    get_toggle_state().set_misbehaving(False)
    return _toggled("misbehaving", False, "I am back")


@developer.get("/sleep")
def sleep():
    get_toggle_state().set_sleeping(True)
    return _toggled("sleeping", True, "I am sleeping")


@developer.get("/awake")
def awake():
    get_toggle_state().set_sleeping(False)
    return _toggled("sleeping", False, "Neo, awake")


@developer.get("/status")
def status():
    return jsonify(get_toggle_state().snapshot())


@developer.get("/ping")
@inject_faults
def ping():
    return Response("pong", mimetype="text/plain")
