"""
Tests for the refresh cycle: reconcile(), record_failure(), refresh_panel()
and the Poller lifecycle.
"""

import pandas as pd
import pytest
import requests

from conftest import StubPanel
from pulse_dashboard.errors import FetchError
from pulse_dashboard.panels import PANELS
from pulse_dashboard.polling import (
    PanelState,
    Poller,
    is_empty,
    reconcile,
    record_failure,
    refresh_panel,
)

MOCK = {"items": [{"id": "mock"}], "summary": {"total": 1}}


class TestIsEmpty:
    @pytest.mark.parametrize("value", [None, [], {}, "", (), pd.DataFrame()])
    def test_empty_values(self, value):
        assert is_empty(value)

    @pytest.mark.parametrize("value", [[1], {"a": 1}, "x", 0, False, pd.DataFrame({"a": [1]})])
    def test_non_empty_values(self, value):
        assert not is_empty(value)


class TestReconcile:
    def test_full_live_payload(self):
        payload = {"items": [{"id": "live"}], "summary": {"total": 5}}
        state = reconcile(PanelState(), payload, MOCK)
        assert state.data == payload
        assert state.source == "live"
        assert state.loading is False
        assert state.error is None
        assert isinstance(state.last_updated, pd.Timestamp)
        assert state.reconcile_count == 1

    def test_empty_payload_falls_back_to_mock(self):
        state = reconcile(PanelState(), {"items": [], "summary": None}, MOCK)
        assert state.data == MOCK
        assert state.source == "mock"

    def test_none_payload_falls_back_to_mock(self):
        state = reconcile(PanelState(), None, MOCK)
        assert state.data == MOCK
        assert state.source == "mock"

    def test_partial_payload_fills_only_missing_sections(self):
        state = reconcile(PanelState(), {"items": [{"id": "live"}], "summary": {}}, MOCK)
        assert state.data["items"] == [{"id": "live"}]
        assert state.data["summary"] == {"total": 1}
        assert state.source == "partial"

    def test_extra_live_sections_are_kept(self):
        payload = {"items": [{"id": "live"}], "summary": {"total": 2}, "extra": [1]}
        state = reconcile(PanelState(), payload, MOCK)
        assert state.data["extra"] == [1]

    def test_clears_previous_error(self):
        state = PanelState(error="boom", data={"items": [1]})
        reconcile(state, {"items": [{"id": "live"}], "summary": {"total": 2}}, MOCK)
        assert state.error is None

    def test_replaces_previous_snapshot(self):
        state = PanelState(data={"items": [{"id": "old"}], "stale": True})
        reconcile(state, {"items": [{"id": "new"}], "summary": {"total": 2}}, MOCK)
        assert "stale" not in state.data
        assert state.data["items"] == [{"id": "new"}]


class TestRecordFailure:
    def test_keeps_existing_data(self):
        data = {"items": [{"id": "live"}]}
        state = PanelState(data=data, source="live", loading=False)
        record_failure(state, "Failed to load stub: timeout", MOCK)
        assert state.data is data
        assert state.source == "live"
        assert state.error == "Failed to load stub: timeout"
        assert state.loading is False

    def test_first_failure_uses_mock(self):
        state = record_failure(PanelState(), "down", MOCK)
        assert state.data == MOCK
        assert state.source == "mock"
        assert state.error == "down"

    def test_without_mock_leaves_data_empty(self):
        state = record_failure(PanelState(), "down")
        assert state.data is None


class TestRefreshPanel:
    def test_success(self):
        panel = StubPanel([{"items": [{"id": "live"}], "summary": {"total": 3}}])
        state = refresh_panel(panel, None, PanelState())
        assert state.source == "live"
        assert state.error is None

    def test_fetch_error_is_reported_not_raised(self):
        panel = StubPanel([FetchError("Cannot reach backend")])
        state = refresh_panel(panel, None, PanelState())
        assert state.error == "Failed to load stub: Cannot reach backend"
        assert state.data == MOCK

    def test_failure_after_success_keeps_last_good_data(self):
        live = {"items": [{"id": "live"}], "summary": {"total": 3}}
        panel = StubPanel([live, FetchError("API error (500)")])
        state = refresh_panel(panel, None, PanelState())
        state = refresh_panel(panel, None, state)
        assert state.data == live
        assert "API error (500)" in state.error

    def test_malformed_payload_is_reported(self):
        panel = StubPanel([KeyError("metrics")])
        state = refresh_panel(panel, None, PanelState())
        assert state.error.startswith("Failed to load stub")

    def test_unexpected_exception_is_reported_not_raised(self):
        live = {"items": [{"id": "live"}], "summary": {"total": 3}}
        panel = StubPanel([live, AttributeError("'str' object has no attribute 'get'")])
        state = refresh_panel(panel, None, PanelState())
        state = refresh_panel(panel, None, state)
        assert state.error.startswith("Failed to load stub: unexpected response")
        assert "has no attribute" in state.error
        assert state.data == live


class TestPoller:
    def test_start_fetches_immediately_and_arms_timer(self, timers):
        panel = StubPanel([{"items": [1], "summary": {"total": 1}}])
        poller = Poller(panel, None, timer_factory=timers).start()
        assert panel.fetches == 1
        assert poller.running
        assert len(timers.timers) == 1
        assert timers.last.interval == 5.0
        assert timers.last.started

    def test_each_tick_arms_the_next_timer(self, timers):
        panel = StubPanel([{"items": [1], "summary": {"total": 1}}])
        poller = Poller(panel, None, timer_factory=timers).start()
        timers.last.fire()
        timers.last.fire()
        assert panel.fetches == 3
        assert poller.fetch_count == 3
        assert len(timers.timers) == 3

    def test_stop_cancels_pending_timer_exactly_once(self, timers):
        panel = StubPanel([{"items": [1], "summary": {"total": 1}}])
        poller = Poller(panel, None, timer_factory=timers).start()
        poller.stop()
        poller.stop()
        assert timers.last.cancelled == 1
        assert poller.cancel_count == 1
        assert not poller.running

    def test_no_fetch_after_stop(self, timers):
        panel = StubPanel([{"items": [1], "summary": {"total": 1}}])
        poller = Poller(panel, None, timer_factory=timers).start()
        pending = timers.last
        poller.stop()
        pending.fire()
        assert panel.fetches == 1
        assert len(timers.timers) == 1

    def test_context_manager_tears_down(self, timers):
        panel = StubPanel([{"items": [1], "summary": {"total": 1}}])
        with Poller(panel, None, timer_factory=timers) as poller:
            assert poller.running
        assert not poller.running
        assert timers.last.cancelled == 1

    def test_context_manager_tears_down_on_error(self, timers):
        panel = StubPanel([{"items": [1], "summary": {"total": 1}}])
        with pytest.raises(RuntimeError):
            with Poller(panel, None, timer_factory=timers):
                raise RuntimeError("render failed")
        assert timers.last.cancelled == 1

    def test_result_finishing_after_stop_is_discarded(self, timers):
        state = PanelState()
        poller = None

        class StopsMidFetch(StubPanel):
            def fetch(self, client):
                result = super().fetch(client)
                if self.fetches == 2:
                    poller.stop()
                return result

        panel = StopsMidFetch([
            {"items": [{"id": "first"}], "summary": {"total": 1}},
            {"items": [{"id": "second"}], "summary": {"total": 2}},
        ])
        poller = Poller(panel, None, state=state, timer_factory=timers).start()
        timers.last.fire()
        assert state.data["items"] == [{"id": "first"}]
        assert state.reconcile_count == 1
        assert len(timers.timers) == 1

    def test_failure_keeps_polling(self, timers):
        panel = StubPanel([FetchError("down"), {"items": [1], "summary": {"total": 1}}])
        poller = Poller(panel, None, timer_factory=timers).start()
        assert poller.state.error is not None
        timers.last.fire()
        assert poller.state.error is None
        assert poller.state.source == "live"

    def test_on_update_called_per_cycle(self, timers):
        seen = []
        panel = StubPanel([{"items": [1], "summary": {"total": 1}}])
        Poller(panel, None, timer_factory=timers, on_update=seen.append).start()
        timers.last.fire()
        assert len(seen) == 2

    def test_double_start_rejected(self, timers):
        panel = StubPanel([{"items": [1], "summary": {"total": 1}}])
        poller = Poller(panel, None, timer_factory=timers).start()
        with pytest.raises(RuntimeError):
            poller.start()

    @pytest.mark.parametrize("interval_ms", [4_999, 30_001, 0])
    def test_interval_out_of_range(self, interval_ms):
        panel = StubPanel([{}])
        with pytest.raises(ValueError):
            Poller(panel, None, interval_ms=interval_ms)

    def test_interval_override(self, timers):
        panel = StubPanel([{"items": [1], "summary": {"total": 1}}])
        Poller(panel, None, interval_ms=30_000, timer_factory=timers).start()
        assert timers.last.interval == 30.0

    def test_unexpected_failure_keeps_data_and_polling(self, timers):
        live = {"items": [{"id": "live"}], "summary": {"total": 3}}
        panel = StubPanel([live, AttributeError("bad shape"), live])
        poller = Poller(panel, None, timer_factory=timers).start()
        timers.last.fire()
        assert "bad shape" in poller.state.error
        assert poller.state.data == live
        assert len(timers.timers) == 2
        assert timers.last.started
        timers.last.fire()
        assert poller.state.error is None
        assert len(timers.timers) == 3

    def test_failing_on_update_does_not_end_polling(self, timers):
        def explode(state):
            raise RuntimeError("render failed")

        panel = StubPanel([{"items": [1], "summary": {"total": 1}}])
        poller = Poller(panel, None, timer_factory=timers, on_update=explode).start()
        assert len(timers.timers) == 1
        timers.last.fire()
        assert panel.fetches == 2
        assert len(timers.timers) == 2
        assert poller.running


class TestPollerWithPerformanceLoader:
    ROUTE = ("/api/tactical-analysis/performance", "health")
    REPORT = {"success": True, "data": {"performance_report": {
        "metrics": [{"end_time": "2024-03-01T10:00:00Z", "duration_ms": 500, "memory_usage_mb": 120}],
        "system_health": {"memory_usage_mb": 120, "uptime_ms": 1000},
        "cache_stats": {"hit_rate": 0.9},
    }}}

    def test_transport_failure_keeps_last_report_and_rearms(self, make_client, timers):
        client = make_client({self.ROUTE: self.REPORT})
        poller = Poller(PANELS["performance_monitor"], client, timer_factory=timers).start()
        assert poller.state.source == "live"
        good = poller.state.data

        client.session.routes[self.ROUTE] = requests.ConnectionError("refused")
        timers.last.fire()
        assert poller.state.error.startswith("Failed to fetch performance data")
        assert poller.state.data == good
        assert len(timers.timers) == 2
        assert timers.last.started

    def test_malformed_report_keeps_polling(self, make_client, timers):
        client = make_client({self.ROUTE: self.REPORT})
        poller = Poller(PANELS["performance_monitor"], client, timer_factory=timers).start()

        client.session.routes[self.ROUTE] = {
            "success": True, "data": {"performance_report": {"metrics": ["oops"], "system_health": "ok"}},
        }
        timers.last.fire()
        assert poller.state.error is None
        assert poller.state.source == "mock"
        assert poller.state.reconcile_count == 2
        assert len(timers.timers) == 2

        client.session.routes[self.ROUTE] = self.REPORT
        timers.last.fire()
        assert poller.state.source == "live"
        assert len(timers.timers) == 3
