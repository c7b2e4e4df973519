import os

import pytest

os.environ.setdefault("SECRET_KEY", "insecure-test-key")

from toggles.app import create_app  # noqa: E402


@pytest.fixture(scope="session")
def app():
    """
    Setup our flask test app, this only gets executed once.

    :return: Flask app
    """
    params = {
        "DEBUG": False,
        "TESTING": True,
        "SERVER_NAME": "localhost:8000",
        "TOGGLE_SLEEP_SECONDS": 0,
        "CLOUDWATCH_ENABLED": False,
    }

    _app = create_app(settings_override=params)

    # Establish an application context before running the tests.
    ctx = _app.app_context()
    ctx.push()

    yield _app

    ctx.pop()


@pytest.fixture(scope="function")
def client(app):
    """
    Setup an app client, this gets executed for each test function.

    :param app: Pytest fixture
    :return: Flask app client
    """
    yield app.test_client()


@pytest.fixture(autouse=True)
def toggle_state(app):
    """
    Give each test the app's toggle state with both flags off.

    :param app: Pytest fixture
    :return: ToggleState
    """
    state = app.extensions["toggles"]
    state.reset()

    yield state

    state.reset()

