"""
Data transforms: turn reconciled panel sections (lists of JSON records)
into chart- and table-ready DataFrames.

All functions are pure and accept empty input, returning an empty frame
with the documented columns.
"""

import logging

import pandas as pd

from .config import MAX_PERFORMANCE_POINTS, MAX_TRAINING_JOBS
from .kpis import confidence_color, status_color
from .loaders.utils import as_mapping, as_records, parse_timestamp

logger = logging.getLogger(__name__)


def _frame(records: list[dict] | None, columns: list[str]) -> pd.DataFrame:
    """Build a DataFrame restricted to ``columns``, adding any that are missing."""
    df = pd.DataFrame(as_records(records))
    for col in columns:
        if col not in df.columns:
            df[col] = None
    return df[columns].copy()


def build_learning_history(history: list[dict]) -> pd.DataFrame:
    """Daily learning performance.

    Returns
    -------
    DataFrame with columns: date, accuracy, engagement, roi
    """
    df = _frame(history, ["date", "accuracy", "engagement", "roi"])
    if df.empty:
        return df
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    return df.dropna(subset=["date"]).sort_values("date").reset_index(drop=True)


def build_model_updates(updates: list[dict]) -> pd.DataFrame:
    """Flatten model version updates, one row per update.

    Returns
    -------
    DataFrame with columns: update_id, model_version, performance_improvement,
        accuracy_delta, training_data_size, update_timestamp,
        deployment_status, precision, recall, f1_score
    """
    rows = []
    for update in as_records(updates):
        validation = as_mapping(update.get("validation_metrics"))
        rows.append({
            "update_id": update.get("update_id"),
            "model_version": update.get("model_version"),
            "performance_improvement": update.get("performance_improvement"),
            "accuracy_delta": update.get("accuracy_delta"),
            "training_data_size": update.get("training_data_size"),
            "update_timestamp": parse_timestamp(update.get("update_timestamp")),
            "deployment_status": update.get("deployment_status"),
            "precision": validation.get("precision"),
            "recall": validation.get("recall"),
            "f1_score": validation.get("f1_score"),
        })
    return _frame(rows, [
        "update_id", "model_version", "performance_improvement", "accuracy_delta",
        "training_data_size", "update_timestamp", "deployment_status",
        "precision", "recall", "f1_score",
    ])


def build_training_jobs(history: list[dict], limit: int = MAX_TRAINING_JOBS) -> pd.DataFrame:
    """The ``limit`` most recent training jobs with run duration.

    Duration (ms) is only set when both ``started_at`` and ``completed_at``
    parse.

    Returns
    -------
    DataFrame with columns: job_id, model_types, status,
        performance_improvement, training_data_size, created_at, duration_ms
    """
    rows = []
    for job in as_records(history)[:limit]:
        started = parse_timestamp(job.get("started_at"))
        completed = parse_timestamp(job.get("completed_at"))
        duration = (
            (completed - started).total_seconds() * 1000
            if started is not None and completed is not None
            else None
        )
        model_types = job.get("model_types")
        rows.append({
            "job_id": job.get("job_id"),
            "model_types": ", ".join(map(str, model_types)) if isinstance(model_types, list) else "",
            "status": job.get("status"),
            "performance_improvement": job.get("performance_improvement") or 0,
            "training_data_size": job.get("training_data_size") or 0,
            "created_at": parse_timestamp(job.get("created_at")),
            "duration_ms": duration,
        })
    return _frame(rows, [
        "job_id", "model_types", "status", "performance_improvement",
        "training_data_size", "created_at", "duration_ms",
    ])


def build_model_table(models: list[dict]) -> pd.DataFrame:
    """Model registry with ``last_training`` from deployed_at, else created_at."""
    rows = [
        {
            "model_id": m.get("model_id"),
            "model_name": m.get("model_name"),
            "model_type": m.get("model_type"),
            "status": m.get("status"),
            "accuracy": m.get("accuracy") or 0,
            "last_training": parse_timestamp(
                m.get("last_training") or m.get("deployed_at") or m.get("created_at")
            ),
            "color": status_color(m.get("status")),
        }
        for m in as_records(models)
    ]
    return _frame(rows, [
        "model_id", "model_name", "model_type", "status", "accuracy", "last_training", "color",
    ])


def build_status_distribution(models: list[dict]) -> pd.DataFrame:
    """Model counts per lifecycle status; zero buckets are dropped.

    Returns
    -------
    DataFrame with columns: name, value
    """
    buckets = [
        ("Deployed", "deployed"),
        ("Training", "training"),
        ("Validation", "validation"),
        ("Failed", "failed"),
    ]
    statuses = [m.get("status") for m in as_records(models)]
    rows = [
        {"name": label, "value": statuses.count(status)}
        for label, status in buckets
        if statuses.count(status) > 0
    ]
    return _frame(rows, ["name", "value"])


def build_performance_series(metrics: list[dict], limit: int = MAX_PERFORMANCE_POINTS) -> pd.DataFrame:
    """Last ``limit`` performance samples, oldest first."""
    columns = [
        "timestamp", "cpu_usage", "memory_usage", "response_time", "duration",
        "throughput", "error_rate", "cache_hit_rate", "queue_size", "active_connections",
    ]
    df = _frame(metrics, columns)
    if df.empty:
        return df
    df["timestamp"] = pd.to_datetime(df["timestamp"], errors="coerce", utc=True).dt.tz_convert(None)
    df = df.dropna(subset=["timestamp"]).sort_values("timestamp")
    return df.tail(limit).reset_index(drop=True)


def build_source_table(sources: list[dict]) -> pd.DataFrame:
    """Data sources with a status colour column.

    Accepts both the full inventory shape (``name``) and the tactical
    summary shape (``source``).
    """
    rows = []
    for s in as_records(sources):
        rows.append({
            "name": s.get("name") or s.get("source"),
            "type": s.get("type"),
            "status": s.get("status"),
            "records_count": s.get("records_count"),
            "data_quality_score": s.get("data_quality_score"),
            "last_sync": parse_timestamp(s.get("last_sync")),
            "last_error": s.get("last_error"),
            "color": status_color(s.get("status")),
        })
    return _frame(rows, [
        "name", "type", "status", "records_count", "data_quality_score",
        "last_sync", "last_error", "color",
    ])


def build_clickup_time_series(time_series: list[dict]) -> pd.DataFrame:
    df = _frame(time_series, ["date", "tasks_created", "tasks_completed", "sync_events", "webhook_events"])
    if df.empty:
        return df
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    return df.dropna(subset=["date"]).sort_values("date").reset_index(drop=True)


def build_priority_distribution(priority: list[dict]) -> pd.DataFrame:
    """Task counts per priority with the share recomputed from counts."""
    df = _frame(priority, ["priority", "count", "percentage"])
    if df.empty:
        return df
    df["count"] = pd.to_numeric(df["count"], errors="coerce").fillna(0)
    total = df["count"].sum()
    if total:
        df["percentage"] = (df["count"] / total * 100).round(1)
    return df


def build_team_productivity(team: list[dict]) -> pd.DataFrame:
    df = _frame(team, [
        "user_name", "tasks_completed", "time_tracked", "completion_rate", "productivity_score",
    ])
    if df.empty:
        return df
    return df.sort_values("productivity_score", ascending=False).reset_index(drop=True)


def build_platform_predictions(platform_predictions: dict | None) -> pd.DataFrame:
    """One row per platform from the ``platform_predictions`` mapping."""
    rows = []
    for platform, pred in as_mapping(platform_predictions).items():
        pred = as_mapping(pred)
        confidence = pred.get("confidence_score")
        rows.append({
            "platform": platform,
            "predicted_engagement_rate": pred.get("predicted_engagement_rate"),
            "predicted_reach": pred.get("predicted_reach"),
            "predicted_impressions": pred.get("predicted_impressions"),
            "viral_potential": pred.get("viral_potential"),
            "confidence_score": confidence,
            "color": confidence_color(confidence),
        })
    return _frame(rows, [
        "platform", "predicted_engagement_rate", "predicted_reach",
        "predicted_impressions", "viral_potential", "confidence_score", "color",
    ])


def build_feature_importance(importance: dict | list | None) -> pd.DataFrame:
    """Feature importance sorted descending.

    Accepts a ``{feature: weight}`` mapping or a list of
    ``{"feature", "importance"}`` records.
    """
    if isinstance(importance, dict):
        records = [{"feature": k, "importance": v} for k, v in importance.items()]
    else:
        records = as_records(importance)
    df = _frame(records, ["feature", "importance"])
    if df.empty:
        return df
    return df.sort_values("importance", ascending=False).reset_index(drop=True)
