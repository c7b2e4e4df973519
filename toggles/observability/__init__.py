"""Observability module for structured logging, request tracking and metrics."""

from toggles.observability.logging_config import setup_logging
from toggles.observability.metrics import MetricsCollector
from toggles.observability.middleware import ObservabilityMiddleware

__all__ = ["setup_logging", "MetricsCollector", "ObservabilityMiddleware"]
