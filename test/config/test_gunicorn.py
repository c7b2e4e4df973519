"""Tests for the gunicorn server settings."""

import importlib

import config.gunicorn


def test_single_worker_by_default(monkeypatch):
    monkeypatch.delenv("WEB_CONCURRENCY", raising=False)

    try:
        settings = importlib.reload(config.gunicorn)

        assert settings.workers == 1
        assert settings.worker_class == "gthread"
        assert settings.threads > 1
    finally:
        monkeypatch.undo()
        importlib.reload(config.gunicorn)


def test_worker_count_from_env(monkeypatch):
    monkeypatch.setenv("WEB_CONCURRENCY", "3")

    try:
        assert importlib.reload(config.gunicorn).workers == 3
    finally:
        monkeypatch.undo()
        importlib.reload(config.gunicorn)
