"""Fault toggles shared by the request handlers of one application.

A single ``ToggleState`` is created by ``create_app`` and stored on
``app.extensions["toggles"]``. Views and the fault-injection hook look it up
through ``get_toggle_state`` instead of reaching for a module global.
"""

from __future__ import annotations

import threading

from flask import current_app


class ToggleState:
    """Two independent boolean flags: ``misbehaving`` and ``sleeping``.

    Gunicorn's gthread workers serve requests concurrently, so each flag has
    its own lock.
    """

    def __init__(self) -> None:
        self._misbehaving = False
        self._sleeping = False
        self._misbehave_lock = threading.Lock()
        self._sleep_lock = threading.Lock()

    def __repr__(self) -> str:
        return (
            f"<ToggleState misbehaving={self.is_misbehaving()} "
            f"sleeping={self.is_sleeping()}>"
        )

    def is_misbehaving(self) -> bool:
        with self._misbehave_lock:
            return self._misbehaving

    def set_misbehaving(self, active: bool) -> None:
        with self._misbehave_lock:
            self._misbehaving = bool(active)

    def is_sleeping(self) -> bool:
        with self._sleep_lock:
            return self._sleeping

    def set_sleeping(self, active: bool) -> None:
        with self._sleep_lock:
            self._sleeping = bool(active)

    def snapshot(self) -> dict[str, bool]:
        """Return the current value of both flags."""
        return {
            "misbehaving": self.is_misbehaving(),
            "sleeping": self.is_sleeping(),
        }

    def active(self) -> list[str]:
        """Names of the flags that are currently on."""
        return [flag for flag, on in self.snapshot().items() if on]

    def reset(self) -> None:
        """Turn both flags off."""
        self.set_misbehaving(False)
        self.set_sleeping(False)


def get_toggle_state() -> ToggleState:
    """Return the ``ToggleState`` owned by the current application."""
    return current_app.extensions["toggles"]
