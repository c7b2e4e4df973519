import click
import requests
from flask import Flask
from werkzeug.debug import DebuggedApplication
from werkzeug.middleware.proxy_fix import ProxyFix

from toggles.developer.client import ACTIONS, DEFAULT_BASE_URL, ToggleClient
from toggles.developer.state import ToggleState
from toggles.developer.views import developer
from toggles.observability import ObservabilityMiddleware, setup_logging
from toggles.up.views import up


def create_app(settings_override=None):
    """
    Create a Flask application using the app factory pattern.

    :param settings_override: Override settings
    :return: Flask app
    """
    app = Flask(__name__)

    app.config.from_object("config.settings")

    if settings_override:
        app.config.update(settings_override)

    # One ToggleState per app, shared by every request thread.
    app.extensions["toggles"] = ToggleState()

    setup_logging(app)
    middleware(app)

    app.register_blueprint(up)
    app.register_blueprint(developer)

    register_cli(app)

    return app


def middleware(app):
    """Wrap the WSGI app and install the request observability hooks."""
    if app.debug:
        app.wsgi_app = DebuggedApplication(app.wsgi_app, evalex=True)

    # Gunicorn sits behind a proxy; trust its X-Forwarded-* headers.
    app.wsgi_app = ProxyFix(app.wsgi_app)

    ObservabilityMiddleware(app)


def register_cli(app):
    """Register custom Flask CLI commands."""

    @app.cli.command("toggle")
    @click.argument("action", type=click.Choice(ACTIONS))
    @click.option(
        "--base-url",
        envvar="TOGGLE_BASE_URL",
        default=DEFAULT_BASE_URL,
        show_default=True,
        help="Root URL of the running instance.",
    )
    def toggle_command(action, base_url):
        """Flip a fault toggle (or show status) on a running instance."""
        try:
            result = ToggleClient(base_url).run(action)
        except requests.RequestException as e:
            click.echo(f"Toggle {action} failed: {e}", err=True)
            raise SystemExit(1)

        if isinstance(result, dict):
            for flag, active in result.items():
                click.echo(f"{flag}: {'on' if active else 'off'}")
        else:
            click.echo(result)
