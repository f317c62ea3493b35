"""
Dashboard-ready output functions.

These are the entry points the Streamlit front end calls. Each view builder
takes a reconciled PanelState and returns a plain dict of header cards and
DataFrames; nothing here reads the network or mutates state, so rendering
the same state twice yields the same view.
"""

import logging

import pandas as pd

from .config import PRIORITY_ORDER
from .kpis import (
    average_model_accuracy,
    classify_confidence,
    clickup_summary,
    count_anomalies,
    count_critical_insights,
    integration_health_score,
    retraining_summary,
)
from .loaders.utils import as_mapping, as_records
from .polling import PanelState
from .transforms import (
    build_clickup_time_series,
    build_feature_importance,
    build_learning_history,
    build_model_table,
    build_model_updates,
    build_performance_series,
    build_platform_predictions,
    build_priority_distribution,
    build_source_table,
    build_status_distribution,
    build_team_productivity,
    build_training_jobs,
)

logger = logging.getLogger(__name__)

SORT_KEYS = ("priority", "confidence", "impact", "created")


def _text_items(value) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [str(item) for item in value if item is not None]


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------
def filter_recommendations(
    recommendations: list[dict],
    category: str = "all",
    priority: str = "all",
    status: str = "all",
) -> list[dict]:
    """Keep recommendations matching every non-``"all"`` filter."""
    return [
        rec for rec in recommendations
        if (category == "all" or rec.get("category") == category)
        and (priority == "all" or rec.get("priority") == priority)
        and (status == "all" or rec.get("status") == status)
    ]


def _impact_value(rec: dict) -> float:
    impact = as_mapping(rec.get("estimated_impact"))
    return impact.get("revenue_increase") or impact.get("cost_reduction") or 0


def _created_value(rec: dict) -> pd.Timestamp:
    try:
        ts = pd.Timestamp(rec.get("created_at"))
    except (ValueError, TypeError):
        return pd.Timestamp.min
    if ts is pd.NaT:
        return pd.Timestamp.min
    return ts.tz_convert(None) if ts.tzinfo is not None else ts


def sort_recommendations(recommendations: list[dict], sort_by: str = "priority") -> list[dict]:
    """Sort descending by priority, confidence, impact, or creation time.

    The sort is stable; an unknown ``sort_by`` returns the input order.
    """
    if sort_by == "priority":
        key = lambda rec: PRIORITY_ORDER.get(rec.get("priority"), 0)  # noqa: E731
    elif sort_by == "confidence":
        key = lambda rec: rec.get("confidence") or 0  # noqa: E731
    elif sort_by == "impact":
        key = _impact_value
    elif sort_by == "created":
        key = _created_value
    else:
        return list(recommendations)
    return sorted(recommendations, key=key, reverse=True)


def get_recommendations_view(
    state: PanelState,
    category: str = "all",
    priority: str = "all",
    status: str = "all",
    sort_by: str = "priority",
) -> dict:
    data = as_mapping(state.data)
    recs = sort_recommendations(
        filter_recommendations(as_records(data.get("recommendations")), category, priority, status),
        sort_by,
    )
    metrics = as_mapping(data.get("metrics"))
    trends = as_mapping(data.get("trends"))
    return {
        "cards": {
            "total_recommendations": metrics.get("total_recommendations", 0),
            "high_priority": metrics.get("high_priority", 0),
            "revenue_impact_k": round((metrics.get("potential_revenue_impact") or 0) / 1000),
            "implementation_rate_pct": round((metrics.get("implementation_rate") or 0) * 100),
            "implemented": metrics.get("implemented", 0),
            "average_confidence_pct": round((metrics.get("average_confidence") or 0) * 100),
        },
        "recommendations": recs,
        "category_distribution": pd.DataFrame(
            list(as_mapping(metrics.get("category_distribution")).items()),
            columns=["category", "count"],
        ),
        "trends": pd.DataFrame(as_records(trends.get("recommendation_trends"))),
        "category_performance": pd.DataFrame(as_records(trends.get("category_performance"))),
    }


# ---------------------------------------------------------------------------
# Continuous learning
# ---------------------------------------------------------------------------
def get_learning_view(state: PanelState) -> dict:
    data = as_mapping(state.data)
    metrics = as_mapping(data.get("metrics"))
    status = as_mapping(data.get("status"))
    insights = as_records(data.get("insights"))
    return {
        "cards": {
            "is_active": bool(status.get("is_active")),
            "model_accuracy_pct": round((metrics.get("model_accuracy") or 0) * 100, 1),
            "improvement_rate_pct": round((metrics.get("improvement_rate") or 0) * 100, 1),
            "prediction_confidence_pct": round((metrics.get("prediction_confidence") or 0) * 100, 1),
            "pending_feedback": status.get("pending_feedback_count", 0),
        },
        "metrics": metrics,
        "insights": sorted(insights, key=lambda i: i.get("confidence_score") or 0, reverse=True),
        "model_updates": build_model_updates(data.get("model_updates")),
        "history": build_learning_history(data.get("history")),
    }


# ---------------------------------------------------------------------------
# Tactical analysis
# ---------------------------------------------------------------------------
def get_tactical_view(state: PanelState) -> dict:
    data = as_mapping(state.data)
    insights = as_records(data.get("insights"))
    predictions = as_records(data.get("predictions"))
    sources = as_records(data.get("sources"))
    analytics = as_mapping(data.get("analytics"))
    return {
        "cards": {
            "health_score": integration_health_score(sources),
            "avg_model_accuracy": average_model_accuracy(predictions),
            "critical_insights": count_critical_insights(insights),
            "anomalies_detected": count_anomalies(predictions),
        },
        "insights": [i for i in insights if (i.get("confidence") or 0) > 0.7],
        "predictions": pd.DataFrame(predictions),
        "sources": build_source_table(sources),
        "performance": build_performance_series(data.get("performance")),
        "feature_importance": build_feature_importance(analytics.get("feature_importance")),
        "model_performance": as_mapping(analytics.get("model_performance")),
        "data_drift": as_mapping(analytics.get("data_drift")),
    }


def get_data_integration_view(state: PanelState) -> dict:
    data = as_mapping(state.data)
    sources = as_records(data.get("sources"))
    metrics = as_mapping(data.get("metrics"))
    table = build_source_table(sources)
    return {
        "cards": {
            "total_sources": metrics.get("total_sources", len(sources)),
            "healthy_sources": metrics.get("healthy_sources", int((table["status"] == "healthy").sum())),
            "avg_quality_score": metrics.get("avg_quality_score", integration_health_score(sources)),
            "overall_uptime": metrics.get("overall_uptime", 0),
        },
        "sources": table,
        "status_counts": table["status"].value_counts().rename_axis("status").reset_index(name="count"),
    }


def get_performance_view(state: PanelState) -> dict:
    data = as_mapping(state.data)
    series = build_performance_series(data.get("metrics"))
    health = as_mapping(data.get("system_health"))
    cache = as_mapping(data.get("cache_stats"))
    latest = series.iloc[-1].to_dict() if not series.empty else {}
    return {
        "cards": {
            "overall_status": health.get("overall_status", "healthy"),
            "memory_usage": latest.get("memory_usage"),
            "throughput": latest.get("throughput"),
            "cache_hit_rate": cache.get("hit_rate"),
        },
        "series": series,
        "services": pd.DataFrame(as_records(health.get("services_status"))),
        "cache_stats": cache,
    }


# ---------------------------------------------------------------------------
# ML models
# ---------------------------------------------------------------------------
def get_retraining_view(state: PanelState) -> dict:
    data = as_mapping(state.data)
    models = as_records(data.get("models"))
    history = as_records(data.get("history"))
    jobs = build_training_jobs(history)
    chart = jobs.head(7).copy()
    chart["name"] = [f"Training {i + 1}" for i in range(len(chart))]
    chart["improvement_pct"] = (chart["performance_improvement"].astype(float) * 100).round(2)
    return {
        "cards": retraining_summary(models, history),
        "models": build_model_table(models),
        "jobs": jobs,
        "improvement_chart": chart[["name", "improvement_pct"]],
        "status_distribution": build_status_distribution(models),
        "schedules": pd.DataFrame(as_records(data.get("schedules"))),
    }


def get_navigation_view(state: PanelState) -> dict:
    data = as_mapping(state.data)
    status = as_mapping(data.get("model_status"))
    performance = as_mapping(status.get("performance"))
    segments = as_records(data.get("segments"))
    return {
        "cards": {
            "loaded": bool(status.get("loaded")),
            "version": status.get("version"),
            "accuracy_pct": round((performance.get("accuracy") or 0) * 100, 1),
            "needs_retraining": bool(status.get("needs_retraining")),
            "segments": len(segments),
        },
        "performance": performance,
        "feature_importance": build_feature_importance(performance.get("feature_importance")),
        "training_jobs": pd.DataFrame(as_records(data.get("training_jobs"))),
        "predictions": [
            {**p, "confidence_band": classify_confidence(p.get("confidence_score"))}
            for p in as_records(data.get("predictions"))
        ],
        "segments": segments,
    }


# ---------------------------------------------------------------------------
# Marketing
# ---------------------------------------------------------------------------
def get_ab_testing_view(state: PanelState) -> dict:
    summary = as_mapping(as_mapping(state.data).get("summary"))
    overview = as_mapping(summary.get("performance_overview"))
    roi = as_mapping(summary.get("roi_impact"))
    trending = as_mapping(summary.get("trending_insights"))
    by_type = as_mapping(overview.get("performance_by_type"))
    return {
        "cards": {
            "total_tests": overview.get("total_tests", 0),
            "running_tests": overview.get("running_tests", 0),
            "average_improvement": overview.get("average_improvement", 0),
            "roi_from_testing": roi.get("roi_from_testing", 0),
        },
        "performance_by_type": pd.DataFrame(
            [{"test_type": k, **(v if isinstance(v, dict) else {"value": v})} for k, v in by_type.items()]
        ),
        "recent_wins": pd.DataFrame(as_records(trending.get("recent_wins"))),
        "opportunities": _text_items(trending.get("optimization_opportunities")),
        "conversion": as_mapping(roi.get("conversion_optimization")),
        "cost_analysis": as_mapping(summary.get("cost_analysis")),
    }


def get_clickup_view(state: PanelState) -> dict:
    data = as_mapping(state.data)
    task_metrics = as_mapping(data.get("task_metrics"))
    sync_metrics = as_mapping(data.get("sync_metrics"))
    return {
        "cards": {
            **task_metrics,
            **clickup_summary(task_metrics, sync_metrics),
        },
        "workflow_metrics": as_mapping(data.get("workflow_metrics")),
        "sync_metrics": sync_metrics,
        "time_series": build_clickup_time_series(data.get("time_series")),
        "priority": build_priority_distribution(data.get("priority")),
        "team": build_team_productivity(data.get("team")),
    }


def get_cross_platform_view(state: PanelState) -> dict:
    analysis = as_mapping(as_mapping(state.data).get("analysis"))
    return {
        "cards": {"cross_platform_score": analysis.get("cross_platform_score", 0)},
        "predictions": build_platform_predictions(analysis.get("platform_predictions")),
        "insights": as_records(analysis.get("universal_insights")),
        "recommendations": _text_items(analysis.get("optimization_recommendations")),
        "benchmarks": pd.DataFrame(as_records(analysis.get("competitor_benchmarks"))),
    }


VIEW_BUILDERS = {
    "continuous_learning": get_learning_view,
    "tactical_analysis": get_tactical_view,
    "recommendations": get_recommendations_view,
    "data_integration": get_data_integration_view,
    "performance_monitor": get_performance_view,
    "ml_retraining": get_retraining_view,
    "ml_navigation": get_navigation_view,
    "ab_testing": get_ab_testing_view,
    "clickup": get_clickup_view,
    "cross_platform": get_cross_platform_view,
}


def get_panel_view(panel_name: str, state: PanelState) -> dict:
    """Single entry point: build the view dict for any registered panel."""
    return VIEW_BUILDERS[panel_name](state)


def get_panel_headline(panel_name: str, state: PanelState) -> dict:
    """Status line for a panel: source, last update, error, header cards."""
    view = get_panel_view(panel_name, state)
    return {
        "panel": panel_name,
        "source": state.source,
        "last_updated": state.last_updated,
        "error": state.error,
        "cards": view["cards"],
    }
