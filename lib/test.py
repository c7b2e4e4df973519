import pytest


class ViewTestMixin(object):
    """
    Automatically load in the app and client, this is common for views.
    """

    @pytest.fixture(autouse=True)
    def set_common_fixtures(self, app, client):
        self.app = app
        self.client = client
