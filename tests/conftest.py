"""
Pytest configuration for the dashboard tests

Provides a fake requests session (so ApiClient runs its real decoding path
without a network), a manual timer factory for driving Pollers tick by tick,
and a minimal panel stub.
"""

from urllib.parse import urlsplit

import pytest
import requests

from pulse_dashboard.client import ApiClient


class FakeResponse:
    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Routes ``(path, action)`` to a payload, FakeResponse, or exception.

    ``action`` is the ``action`` query parameter (None when absent). Every
    request is recorded in ``calls`` as ``(method, path, params, json)``.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = False

    def _dispatch(self, method, url, params=None, json=None, timeout=None):
        path = urlsplit(url).path
        self.calls.append((method, path, params, json))
        key = (path, (params or {}).get("action"))
        if key not in self.routes:
            return FakeResponse(status_code=404)
        result = self.routes[key]
        if isinstance(result, Exception):
            raise result
        if isinstance(result, FakeResponse):
            return result
        return FakeResponse(result)

    def get(self, url, params=None, timeout=None):
        return self._dispatch("GET", url, params=params, timeout=timeout)

    def post(self, url, json=None, params=None, timeout=None):
        return self._dispatch("POST", url, params=params, json=json, timeout=timeout)

    def close(self):
        self.closed = True


class FakeTimer:
    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.started = False
        self.cancelled = 0

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled += 1

    def fire(self):
        self.function()


class FakeTimerFactory:
    """Stands in for ``threading.Timer``; timers only run when fired."""

    def __init__(self):
        self.timers = []

    def __call__(self, interval, function):
        timer = FakeTimer(interval, function)
        self.timers.append(timer)
        return timer

    @property
    def last(self):
        return self.timers[-1]


class StubPanel:
    """Panel with a scripted fetch: each call pops the next result."""

    def __init__(self, results, mock=None, name="stub", interval_ms=5_000):
        self.name = name
        self.title = "Stub"
        self.interval_ms = interval_ms
        self.error_message = "Failed to load stub"
        self._results = list(results)
        self._mock = mock if mock is not None else {"items": [{"id": "mock"}], "summary": {"total": 1}}
        self.fetches = 0

    def fetch(self, client):
        self.fetches += 1
        result = self._results.pop(0) if len(self._results) > 1 else self._results[0]
        if isinstance(result, Exception):
            raise result
        return result

    def mock(self):
        return dict(self._mock)


@pytest.fixture
def make_client():
    """Build an ApiClient over a FakeSession with the given routes."""

    def _make(routes=None):
        session = FakeSession(routes)
        return ApiClient(base_url="http://backend.test/", timeout=3, session=session)

    return _make


@pytest.fixture
def timers():
    return FakeTimerFactory()
