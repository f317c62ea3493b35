"""Tests for the dashboard-ready view functions."""

import pandas as pd
import pytest

from pulse_dashboard.dashboard import (
    VIEW_BUILDERS,
    filter_recommendations,
    get_panel_headline,
    get_panel_view,
    get_recommendations_view,
    get_retraining_view,
    sort_recommendations,
)
from pulse_dashboard.panels import PANELS
from pulse_dashboard.polling import PanelState, reconcile

RECS = [
    {"id": "a", "category": "revenue", "priority": "medium", "status": "new", "confidence": 0.7,
     "estimated_impact": {"revenue_increase": 50_000}, "created_at": "2024-01-02T00:00:00Z"},
    {"id": "b", "category": "efficiency", "priority": "high", "status": "in_progress", "confidence": 0.9,
     "estimated_impact": {"cost_reduction": 80_000}, "created_at": "2024-01-01T00:00:00Z"},
    {"id": "c", "category": "revenue", "priority": "low", "status": "new", "confidence": 0.95,
     "estimated_impact": {}, "created_at": "2024-01-03T00:00:00Z"},
    {"id": "d", "category": "risk", "priority": "high", "status": "new", "confidence": 0.6,
     "estimated_impact": {"revenue_increase": 120_000}, "created_at": None},
]


def ids(recs):
    return [r["id"] for r in recs]


class TestFilterRecommendations:
    def test_all_filters_off(self):
        assert ids(filter_recommendations(RECS)) == ["a", "b", "c", "d"]

    def test_single_filter(self):
        assert ids(filter_recommendations(RECS, category="revenue")) == ["a", "c"]

    def test_combined_filters(self):
        assert ids(filter_recommendations(RECS, category="revenue", priority="low", status="new")) == ["c"]

    def test_no_match(self):
        assert filter_recommendations(RECS, status="dismissed") == []


class TestSortRecommendations:
    def test_priority_is_stable_within_level(self):
        assert ids(sort_recommendations(RECS, "priority")) == ["b", "d", "a", "c"]

    def test_confidence_descending(self):
        assert ids(sort_recommendations(RECS, "confidence")) == ["c", "b", "a", "d"]

    def test_impact_uses_revenue_then_cost(self):
        assert ids(sort_recommendations(RECS, "impact")) == ["d", "b", "a", "c"]

    def test_created_newest_first_missing_last(self):
        assert ids(sort_recommendations(RECS, "created")) == ["c", "a", "b", "d"]

    def test_unknown_key_keeps_order(self):
        assert ids(sort_recommendations(RECS, "alphabetical")) == ["a", "b", "c", "d"]

    def test_input_not_mutated(self):
        original = list(RECS)
        sort_recommendations(RECS, "confidence")
        assert RECS == original


def _mock_state(panel_name):
    return reconcile(PanelState(), {}, PANELS[panel_name].mock())


@pytest.mark.parametrize("panel_name", list(PANELS))
def test_every_panel_renders_from_mock_data(panel_name):
    view = get_panel_view(panel_name, _mock_state(panel_name))
    assert view["cards"]


@pytest.mark.parametrize("panel_name", list(PANELS))
def test_every_panel_renders_from_empty_state(panel_name):
    view = get_panel_view(panel_name, PanelState())
    assert "cards" in view


@pytest.mark.parametrize("bad_value", ["oops", ["oops", 3], 7])
@pytest.mark.parametrize("panel_name", list(PANELS))
def test_every_panel_renders_sections_of_the_wrong_type(panel_name, bad_value):
    sections = {name: bad_value for name in PANELS[panel_name].mock()}
    view = get_panel_view(panel_name, PanelState(data=sections, source="live", loading=False))
    assert "cards" in view


def test_learning_view_ignores_scalar_status():
    state = _mock_state("continuous_learning")
    state.data["status"] = "active"
    state.data["insights"] = ["oops", {"confidence_score": 0.5}]
    view = get_panel_view("continuous_learning", state)
    assert view["cards"]["is_active"] is False
    assert view["cards"]["pending_feedback"] == 0
    assert view["insights"] == [{"confidence_score": 0.5}]


@pytest.mark.parametrize("panel_name", list(PANELS))
def test_rendering_is_idempotent(panel_name):
    state = _mock_state(panel_name)
    first = get_panel_view(panel_name, state)
    second = get_panel_view(panel_name, state)
    assert first.keys() == second.keys()
    for key, value in first.items():
        if isinstance(value, pd.DataFrame):
            assert value.equals(second[key])
        else:
            assert value == second[key]


def test_view_builders_cover_every_panel():
    assert set(VIEW_BUILDERS) == set(PANELS)


def test_recommendations_view_applies_filters():
    state = _mock_state("recommendations")
    view = get_recommendations_view(state, category="efficiency")
    assert [r["category"] for r in view["recommendations"]] == ["efficiency"]
    assert view["cards"]["revenue_impact_k"] == 425
    assert view["cards"]["implementation_rate_pct"] == 33


def test_retraining_view_summary():
    state = _mock_state("ml_retraining")
    view = get_retraining_view(state)
    assert view["cards"]["total_models"] == 5
    assert view["cards"]["active_training_jobs"] == 2
    assert view["cards"]["success_rate"] == 62.5
    assert len(view["improvement_chart"]) == 7
    assert view["improvement_chart"]["name"].iloc[0] == "Training 1"


def test_headline_reports_source_and_error():
    state = _mock_state("clickup")
    state.error = "Failed to load ClickUp analytics: down"
    headline = get_panel_headline("clickup", state)
    assert headline["source"] == "mock"
    assert headline["error"] == "Failed to load ClickUp analytics: down"
    assert headline["cards"]["completion_rate"] == pytest.approx(89 / 156 * 100)
