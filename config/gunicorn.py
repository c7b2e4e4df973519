# -*- coding: utf-8 -*-

import multiprocessing
import os

bind = f"0.0.0.0:{os.getenv('PORT', '8000')}"
accesslog = "-"
errorlog = "-"
access_log_format = (
    "%(h)s %(l)s %(u)s %(t)s '%(r)s' %(s)s %(b)s '%(f)s' '%(a)s' in %(D)sµs"  # noqa: E501
)

capture_output = True

loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Toggle state lives in the worker process, so a single worker keeps one
# shared state; concurrency comes from its threads.
worker_class = os.getenv("WEB_WORKER_CLASS", "gthread")
workers = int(os.getenv("WEB_CONCURRENCY", 1))
threads = int(os.getenv("PYTHON_MAX_THREADS", multiprocessing.cpu_count() * 4))

reload = os.getenv("WEB_RELOAD", "false").lower() in ("1", "true", "yes", "on")

# Must stay above TOGGLE_SLEEP_SECONDS or sleeping requests get killed.
timeout = int(os.getenv("WEB_TIMEOUT", 120))

wsgi_app = "toggles.app:create_app()"
