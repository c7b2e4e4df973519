"""Tests for the /developer blueprint."""

from flask import url_for

from lib.test import ViewTestMixin


class TestDeveloperViews(ViewTestMixin):
    def test_misbehave_then_behave(self, toggle_state):
        response = self.client.get(url_for("developer.misbehave"))
        assert response.status_code == 200
        assert response.get_data(as_text=True) == "I am misbehaving"
        assert response.mimetype == "text/plain"
        assert toggle_state.is_misbehaving() is True

        response = self.client.get("/developer/behave")
        assert response.status_code == 200
        assert response.get_data(as_text=True) == "I am back"
        assert toggle_state.is_misbehaving() is False

    def test_sleep_then_awake(self, toggle_state):
        assert toggle_state.is_sleeping() is False

        response = self.client.get("/developer/sleep")
        assert response.get_data(as_text=True) == "I am sleeping"
        assert toggle_state.is_sleeping() is True

        response = self.client.get("/developer/awake")
        assert response.get_data(as_text=True) == "Neo, awake"
        assert toggle_state.is_sleeping() is False

    def test_repeated_toggle_keeps_state(self, toggle_state):
        for _ in range(3):
            response = self.client.get("/developer/misbehave")
            assert response.status_code == 200

        assert toggle_state.is_misbehaving() is True

    def test_toggles_do_not_affect_each_other(self, toggle_state):
        self.client.get("/developer/misbehave")
        self.client.get("/developer/sleep")
        self.client.get("/developer/awake")

        assert toggle_state.snapshot() == {
            "misbehaving": True,
            "sleeping": False,
        }

    def test_status_reports_both_flags(self):
        assert self.client.get("/developer/status").get_json() == {
            "misbehaving": False,
            "sleeping": False,
        }

        self.client.get("/developer/sleep")

        assert self.client.get("/developer/status").get_json() == {
            "misbehaving": False,
            "sleeping": True,
        }

    def test_toggle_change_is_logged(self, caplog):
        caplog.set_level("INFO", logger="toggles.developer.views")

        self.client.get("/developer/sleep")

        records = [r for r in caplog.records if r.msg == "Toggle changed"]
        assert len(records) == 1
        assert records[0].flag == "sleeping"
        assert records[0].active is True

    def test_toggle_change_records_metric(self, monkeypatch):
        from toggles.developer import views as developer_views

        seen = []
        monkeypatch.setattr(
            developer_views.metrics_collector,
            "record_flag",
            lambda metric, dimension, flag, on: seen.append((metric, flag, on)),
        )

        self.client.get("/developer/misbehave")
        self.client.get("/developer/behave")

        assert seen == [
            ("ToggleState", "misbehaving", True),
            ("ToggleState", "misbehaving", False),
        ]

    def test_responses_carry_tracing_headers(self):
        response = self.client.get(
            "/developer/awake", headers={"X-Request-ID": "req-42"}
        )

        assert response.headers["X-Request-ID"] == "req-42"
        assert "X-Response-Time" in response.headers
