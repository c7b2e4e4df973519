"""Thin ``requests`` wrapper for flipping toggles on a running instance.

Used by the ``flask toggle`` command and by test harnesses that need to
switch faults on and off around a scenario.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"

ACTIONS = ("misbehave", "behave", "sleep", "awake", "status")


class ToggleClient:
    """Synchronous client for the ``/developer`` endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def _get(self, path: str) -> requests.Response:
        url = f"{self._base_url}/developer/{path}"
        logger.debug("GET %s", url)
        response = self._session.get(url, timeout=self._timeout)
        response.raise_for_status()
        return response

    def misbehave(self) -> str:
        return self._get("misbehave").text

    def behave(self) -> str:
        return self._get("behave").text

    def sleep(self) -> str:
        return self._get("sleep").text

    def awake(self) -> str:
        return self._get("awake").text

    def status(self) -> dict[str, Any]:
        return self._get("status").json()

    def run(self, action: str) -> str | dict[str, Any]:
        """Dispatch one of ``ACTIONS`` by name."""
        if action not in ACTIONS:
            raise ValueError(f"Unknown toggle action: {action}")
        return getattr(self, action)()
