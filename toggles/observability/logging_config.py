"""JSON logging to stdout, with optional CloudWatch Logs shipping."""

import logging
import os
import sys

import boto3
import watchtower
from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "developer-toggles"


class ServiceJsonFormatter(JsonFormatter):
    """Adds level, logger and service context to every JSON record."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["service"] = SERVICE_NAME
        log_record["environment"] = os.getenv("FLASK_ENV", "production")


def cloudwatch_handler(config):
    """Build a watchtower handler from the CLOUDWATCH_* settings."""
    handler = watchtower.CloudWatchLogHandler(
        log_group_name=config.get("CLOUDWATCH_LOG_GROUP", SERVICE_NAME),
        log_stream_name=config.get("CLOUDWATCH_LOG_STREAM", "error-logs"),
        boto3_client=boto3.client(
            "logs", region_name=config.get("AWS_REGION", "us-east-1")
        ),
        send_interval=10,
        create_log_group=True,
    )
    level_name = config.get("CLOUDWATCH_LOG_LEVEL", "ERROR").upper()
    handler.setLevel(getattr(logging, level_name, logging.ERROR))
    return handler


def setup_logging(app=None):
    """
    Install one JSON stdout handler on the root logger.

    With an app, its logger follows the root level and, when
    CLOUDWATCH_ENABLED is set, the FAULT_DEVELOPER_* error lines are also
    shipped to CloudWatch.

    Returns:
        Root logger instance
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    formatter = ServiceJsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    stdout = logging.StreamHandler(sys.stdout)
    stdout.setFormatter(formatter)

    # Replace handlers from an earlier call; leave foreign ones alone.
    root = logging.getLogger()
    root.handlers = [
        h for h in root.handlers
        if not isinstance(h.formatter, ServiceJsonFormatter)
    ] + [stdout]
    root.setLevel(level)

    if app is not None:
        app.logger.setLevel(level)
        if app.config.get("CLOUDWATCH_ENABLED"):
            shipper = cloudwatch_handler(app.config)
            shipper.setFormatter(formatter)
            root.addHandler(shipper)
            app.logger.info(
                "CloudWatch logging enabled",
                extra={"log_group": app.config.get("CLOUDWATCH_LOG_GROUP")},
            )

    return root
