import os


def _env_flag(name, default="false"):
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.environ["SECRET_KEY"]
DEBUG = _env_flag("FLASK_DEBUG")

# Unset by default so requests are accepted under any Host header.
SERVER_NAME = os.getenv("SERVER_NAME")

# Delay applied to guarded endpoints while the sleep toggle is on.
TOGGLE_SLEEP_SECONDS = float(os.getenv("TOGGLE_SLEEP_SECONDS", "5.0"))

# CloudWatch Logs.
CLOUDWATCH_ENABLED = _env_flag("CLOUDWATCH_ENABLED")
AWS_REGION = os.getenv("AWS_REGION", "us-east-1")
CLOUDWATCH_LOG_GROUP = os.getenv("CLOUDWATCH_LOG_GROUP", "developer-toggles")
CLOUDWATCH_LOG_STREAM = os.getenv("CLOUDWATCH_LOG_STREAM", "error-logs")
CLOUDWATCH_LOG_LEVEL = os.getenv("CLOUDWATCH_LOG_LEVEL", "ERROR")
