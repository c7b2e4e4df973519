"""Request hooks: timing, fault tagging and one metric per request."""

import logging
import time

from flask import g, request

from toggles.developer.state import get_toggle_state
from toggles.observability.metrics import metrics_collector

logger = logging.getLogger(__name__)


class ObservabilityMiddleware:
    """Tag every request with the fault toggles in force when it started.

    A request is counted exactly once: by ``after_request`` when Flask built
    a response, otherwise by ``teardown_request`` as a 500.
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.before_request(self.start)
        app.after_request(self.finish)
        app.teardown_request(self.fail)

    @staticmethod
    def start():
        g.started = time.perf_counter()
        g.request_id = request.headers.get("X-Request-ID", "unknown")
        g.faults = get_toggle_state().active()

    @classmethod
    def finish(cls, response):
        latency_ms = cls._record(response.status_code)
        response.headers["X-Request-ID"] = g.get("request_id", "unknown")
        response.headers["X-Response-Time"] = f"{latency_ms:.2f}"
        return response

    @classmethod
    def fail(cls, exception=None):
        if exception is None or g.get("recorded"):
            return

        logger.error(
            f"Unhandled {type(exception).__name__} on {request.path}",
            extra={"request_id": g.get("request_id", "unknown")},
            exc_info=exception,
        )
        cls._record(500)

    @staticmethod
    def _record(status_code: int) -> float:
        started = g.get("started")
        latency_ms = (
            (time.perf_counter() - started) * 1000 if started is not None else 0.0
        )
        faults = g.get("faults", [])
        g.recorded = True

        logger.info(
            f"{request.method} {request.path} {status_code}",
            extra={
                "request_id": g.get("request_id", "unknown"),
                "status_code": status_code,
                "latency_ms": round(latency_ms, 2),
                "faults": faults,
            },
        )
        metrics_collector.record_request(
            endpoint=request.endpoint or request.path,
            method=request.method,
            status_code=status_code,
            latency_ms=latency_ms,
            faults=faults,
        )
        return latency_ms
