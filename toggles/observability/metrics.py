"""Metrics for request traffic and toggle state.

Every metric is logged at DEBUG. When CloudWatch shipping is enabled it is
also sent with ``put_metric_data``; shipping errors are logged, never raised.
"""

import logging
import os
from datetime import datetime, timezone
from typing import Optional

import boto3

logger = logging.getLogger(__name__)

NAMESPACE = "DeveloperToggles"


class MetricsCollector:
    def __init__(self, namespace=NAMESPACE, enabled=None):
        if enabled is None:
            enabled = (
                os.getenv("ENABLE_CLOUDWATCH_METRICS", "false").lower() == "true"
            )
        self.namespace = namespace
        self.enabled = enabled
        self.client = None

        if self.enabled:
            try:
                self.client = boto3.client(
                    "cloudwatch", region_name=os.getenv("AWS_REGION", "us-east-1")
                )
            except Exception as e:
                logger.error(
                    "CloudWatch metrics unavailable", extra={"error": str(e)}
                )
                self.enabled = False

    def put_metric(
        self,
        metric_name: str,
        value: float,
        unit: str = "Count",
        dimensions: Optional[dict] = None,
    ):
        datum = {
            "MetricName": metric_name,
            "Value": value,
            "Unit": unit,
            "Timestamp": datetime.now(timezone.utc),
        }
        if dimensions:
            datum["Dimensions"] = [
                {"Name": name, "Value": str(v)} for name, v in dimensions.items()
            ]

        logger.debug(f"Metric: {metric_name}={value}", extra={"metric": datum})

        if not (self.enabled and self.client):
            return
        try:
            self.client.put_metric_data(
                Namespace=self.namespace, MetricData=[datum]
            )
        except Exception as e:
            logger.error(
                "Failed to send metric to CloudWatch",
                extra={"metric_name": metric_name, "error": str(e)},
            )

    def record_request(
        self,
        endpoint: str,
        method: str,
        status_code: int,
        latency_ms: float,
        faults: Optional[list] = None,
    ):
        """
        Record latency and count for one request, plus an error on 5xx.

        ``faults`` lists the toggles that were on, so injected failures can
        be told apart from real ones.
        """
        dimensions = {
            "Endpoint": endpoint,
            "Method": method,
            "StatusCode": str(status_code),
            "Faults": ",".join(faults) if faults else "none",
        }

        self.put_metric(
            "RequestLatency", latency_ms, "Milliseconds", dimensions
        )
        self.put_metric("RequestCount", 1, dimensions=dimensions)
        if status_code >= 500:
            self.put_metric("ErrorCount", 1, dimensions=dimensions)

    def record_flag(self, metric_name: str, dimension: str, name: str, on: bool):
        """Record a boolean as 1/0, e.g. ``ToggleState`` or ``HealthStatus``."""
        self.put_metric(metric_name, 1 if on else 0, dimensions={dimension: name})


metrics_collector = MetricsCollector()
