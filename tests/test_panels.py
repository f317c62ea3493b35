"""
End-to-end panel refresh against a fake backend: every panel's loader
sections line up with its mock dataset, so fallback works section by section.
"""

import pytest
import requests

from pulse_dashboard.config import MAX_INTERVAL_MS, MIN_INTERVAL_MS, PANEL_REGISTRY
from pulse_dashboard.dashboard import get_panel_view
from pulse_dashboard.panels import PANELS, get_panel
from pulse_dashboard.polling import PanelState, Poller, refresh_panel


@pytest.mark.parametrize("name", list(PANELS))
def test_loader_sections_match_mock_sections(name, make_client):
    panel = PANELS[name]
    assert set(panel.fetch(make_client())) == set(panel.mock())


@pytest.mark.parametrize("name", list(PANELS))
def test_backend_without_data_falls_back_to_mock(name, make_client):
    panel = PANELS[name]
    state = refresh_panel(panel, make_client(), PanelState())
    assert state.source == "mock"
    assert state.error is None
    assert state.data.keys() == panel.mock().keys()


@pytest.mark.parametrize("name", list(PANELS))
def test_unreachable_backend_reports_error_and_shows_mock(name, make_client):
    panel = PANELS[name]
    routes = {
        (path, params.get("action")): requests.ConnectionError("refused")
        for path, params in panel.endpoints.values()
    }
    state = refresh_panel(panel, make_client(routes), PanelState())
    assert state.error.startswith(panel.error_message)
    assert state.source == "mock"


def test_partial_backend_data(make_client):
    route = "/api/tactical-analysis/recommendations"
    client = make_client({(route, None): {"recommendations": [{"id": "live-1", "priority": "high"}]}})
    state = refresh_panel(PANELS["recommendations"], client, PanelState())
    assert state.source == "partial"
    assert state.data["recommendations"] == [{"id": "live-1", "priority": "high"}]
    assert state.data["metrics"]["total_recommendations"] == 15


def test_intervals_within_bounds():
    for panel in PANELS.values():
        if panel.polls:
            assert MIN_INTERVAL_MS <= panel.interval_ms <= MAX_INTERVAL_MS
    assert PANELS["performance_monitor"].interval_ms == 5_000
    assert PANELS["ml_navigation"].interval_ms == 5_000
    assert PANELS["continuous_learning"].interval_ms == 30_000


@pytest.mark.parametrize("name", ["ab_testing", "cross_platform"])
def test_on_demand_panels_have_no_poller(name, timers):
    panel = PANELS[name]
    assert not panel.polls
    with pytest.raises(ValueError, match="on demand"):
        Poller(panel, None, timer_factory=timers)
    assert timers.timers == []


def test_malformed_section_renders_as_missing(make_client):
    client = make_client({("/api/continuous-learning", "metrics"): {
        "success": True, "data": {"learning_status": "active"},
    }})
    state = refresh_panel(PANELS["continuous_learning"], client, PanelState())
    assert state.source == "partial"
    assert state.data["status"] == "active"
    view = get_panel_view("continuous_learning", state)
    assert view["cards"]["is_active"] is False
    assert view["cards"]["model_accuracy_pct"] == 87.4


def test_registry_and_panels_agree():
    assert set(PANELS) == set(PANEL_REGISTRY)


def test_get_panel_unknown():
    with pytest.raises(KeyError, match="Available"):
        get_panel("nope")
