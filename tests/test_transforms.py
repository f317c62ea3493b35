"""Tests for section-to-DataFrame transforms."""

import pandas as pd

from pulse_dashboard.config import JOB_STATUS_COLORS, RAG_COLORS
from pulse_dashboard.transforms import (
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


def test_empty_inputs_keep_columns():
    assert list(build_learning_history([]).columns) == ["date", "accuracy", "engagement", "roi"]
    assert build_training_jobs(None).empty
    assert "color" in build_source_table([]).columns
    assert list(build_status_distribution([]).columns) == ["name", "value"]


def test_learning_history_sorted_and_bad_dates_dropped():
    df = build_learning_history([
        {"date": "2024-01-02", "accuracy": 0.8},
        {"date": "garbage", "accuracy": 0.1},
        {"date": "2024-01-01", "accuracy": 0.7},
    ])
    assert df["accuracy"].tolist() == [0.7, 0.8]


def test_model_updates_flatten_validation_metrics():
    df = build_model_updates([{
        "update_id": "u1",
        "update_timestamp": "2024-01-01T00:00:00Z",
        "validation_metrics": {"precision": 0.9, "recall": 0.8, "f1_score": 0.85},
    }])
    row = df.iloc[0]
    assert row["precision"] == 0.9
    assert row["f1_score"] == 0.85
    assert row["update_timestamp"] == pd.Timestamp("2024-01-01")


class TestTrainingJobs:
    def test_duration_only_when_both_timestamps_parse(self):
        df = build_training_jobs([
            {"job_id": "a", "started_at": "2024-01-01T10:00:00", "completed_at": "2024-01-01T10:30:00"},
            {"job_id": "b", "started_at": "2024-01-01T10:00:00"},
        ])
        assert df.loc[0, "duration_ms"] == 30 * 60 * 1000
        assert pd.isna(df.loc[1, "duration_ms"])

    def test_limit(self):
        df = build_training_jobs([{"job_id": str(i)} for i in range(15)])
        assert len(df) == 10
        assert df["job_id"].tolist()[0] == "0"

    def test_model_types_joined(self):
        df = build_training_jobs([{"job_id": "a", "model_types": ["x", "y"]}])
        assert df.loc[0, "model_types"] == "x, y"


def test_model_table_last_training_prefers_deployment():
    df = build_model_table([
        {"model_id": "m1", "status": "deployed",
         "created_at": "2024-01-01", "deployed_at": "2024-01-05"},
        {"model_id": "m2", "status": "training", "created_at": "2024-01-03"},
    ])
    assert df.loc[0, "last_training"] == pd.Timestamp("2024-01-05")
    assert df.loc[1, "last_training"] == pd.Timestamp("2024-01-03")
    assert df.loc[0, "color"] == JOB_STATUS_COLORS["deployed"]


def test_status_distribution_drops_zero_buckets():
    df = build_status_distribution([{"status": "deployed"}, {"status": "deployed"}, {"status": "failed"}])
    assert df.to_dict("records") == [{"name": "Deployed", "value": 2}, {"name": "Failed", "value": 1}]


def test_performance_series_keeps_newest_points():
    metrics = [
        {"timestamp": (pd.Timestamp("2024-01-01") + pd.Timedelta(minutes=i)).isoformat() + "Z", "cpu_usage": i}
        for i in range(25)
    ]
    df = build_performance_series(list(reversed(metrics)))
    assert len(df) == 20
    assert df["cpu_usage"].tolist() == list(range(5, 25))
    assert df["timestamp"].dt.tz is None


def test_source_table_accepts_both_shapes():
    df = build_source_table([
        {"name": "Shopify", "status": "healthy"},
        {"source": "Kajabi", "status": "error"},
    ])
    assert df["name"].tolist() == ["Shopify", "Kajabi"]


def test_priority_distribution_recomputes_share():
    df = build_priority_distribution([{"priority": "High", "count": 1}, {"priority": "Low", "count": 3}])
    assert df["percentage"].tolist() == [25.0, 75.0]


def test_team_sorted_by_productivity():
    df = build_team_productivity([
        {"user_name": "A", "productivity_score": 70},
        {"user_name": "B", "productivity_score": 90},
    ])
    assert df["user_name"].tolist() == ["B", "A"]


def test_platform_predictions_coloured_by_confidence():
    df = build_platform_predictions({
        "instagram": {"predicted_engagement_rate": 0.05, "confidence_score": 0.9},
        "twitter": {"predicted_engagement_rate": 0.02, "confidence_score": 0.5},
    })
    assert df.set_index("platform").loc["instagram", "color"] == RAG_COLORS["green"]
    assert df.set_index("platform").loc["twitter", "color"] == RAG_COLORS["red"]


def test_feature_importance_accepts_mapping_or_records():
    from_map = build_feature_importance({"a": 0.1, "b": 0.5})
    from_records = build_feature_importance([{"feature": "a", "importance": 0.1},
                                             {"feature": "b", "importance": 0.5}])
    assert from_map["feature"].tolist() == ["b", "a"]
    assert from_records.equals(from_map)
