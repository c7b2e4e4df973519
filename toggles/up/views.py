from datetime import datetime, timezone

from flask import Blueprint, jsonify

from toggles.developer.state import get_toggle_state
from toggles.observability.logging_config import SERVICE_NAME
from toggles.observability.metrics import metrics_collector

up = Blueprint("up", __name__, url_prefix="/up")


@up.get("/")
def index():
    return ""


@up.get("/health")
def health():
    """
    Report the service and its toggles.

    Toggles are simulated faults, so an active one is listed in the message
    but never turns the service unhealthy.
    """
    state = get_toggle_state()
    faults = state.active()
    toggles = {
        "healthy": True,
        **state.snapshot(),
        "message": (
            f"Simulating: {', '.join(faults)}" if faults else "No faults active"
        ),
    }
    metrics_collector.record_flag("HealthStatus", "Component", "toggles", True)

    return jsonify(
        {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": SERVICE_NAME,
            "components": {"toggles": toggles},
        }
    )
