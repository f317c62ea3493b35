"""Tests for ApiClient request building and error translation."""

import pytest
import requests

from conftest import FakeResponse
from pulse_dashboard.errors import FetchError


class TestGetJson:
    def test_decodes_json_and_passes_params(self, make_client):
        client = make_client({("/api/clickup/analytics", "summary"): {"ok": True}})
        assert client.get_json("/api/clickup/analytics", params={"action": "summary"}) == {"ok": True}
        assert client.session.calls == [
            ("GET", "/api/clickup/analytics", {"action": "summary"}, None)
        ]

    def test_empty_params_are_not_sent(self, make_client):
        client = make_client({("/api/clickup/analytics", None): {}})
        client.get_json("/api/clickup/analytics", params={})
        assert client.session.calls[0][2] is None

    def test_http_error_carries_status_code(self, make_client):
        client = make_client({("/api/x", None): FakeResponse(status_code=500)})
        with pytest.raises(FetchError) as exc_info:
            client.get_json("/api/x")
        assert exc_info.value.status_code == 500
        assert exc_info.value.url == "http://backend.test/api/x"
        assert "API error (500)" in str(exc_info.value)

    def test_unknown_route_is_404(self, make_client):
        client = make_client()
        with pytest.raises(FetchError) as exc_info:
            client.get_json("/api/missing")
        assert exc_info.value.status_code == 404

    def test_invalid_json(self, make_client):
        client = make_client({("/api/x", None): FakeResponse(invalid_json=True)})
        with pytest.raises(FetchError, match="Invalid JSON"):
            client.get_json("/api/x")

    def test_connection_error_has_no_status(self, make_client):
        client = make_client({("/api/x", None): requests.ConnectionError("refused")})
        with pytest.raises(FetchError) as exc_info:
            client.get_json("/api/x")
        assert exc_info.value.status_code is None
        assert "Cannot reach backend" in str(exc_info.value)

    def test_timeout(self, make_client):
        client = make_client({("/api/x", None): requests.Timeout()})
        with pytest.raises(FetchError, match="timed out"):
            client.get_json("/api/x")


class TestPostJson:
    def test_sends_json_body(self, make_client):
        client = make_client({("/api/continuous-learning", None): {"success": True}})
        client.post_json("/api/continuous-learning", {"action": "start-learning"})
        method, path, params, body = client.session.calls[0]
        assert method == "POST"
        assert params is None
        assert body == {"action": "start-learning"}

    def test_query_params(self, make_client):
        route = "/api/workflows/ml/auto-retraining"
        client = make_client({(route, "trigger_retraining"): {"success": True}})
        client.post_json(route, {"force": True}, params={"action": "trigger_retraining"})
        assert client.session.calls[0][2] == {"action": "trigger_retraining"}


class TestUrls:
    def test_url_for_joins_without_double_slash(self, make_client):
        client = make_client()
        assert client.url_for("/api/x") == "http://backend.test/api/x"
        assert client.url_for("api/x") == "http://backend.test/api/x"

    def test_close_closes_session(self, make_client):
        client = make_client()
        client.close()
        assert client.session.closed
