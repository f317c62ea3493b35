"""
Pure KPI functions with no side effects.

Provides colour/RAG classification for confidence, improvement, impact and
status values, plus the summary numbers shown on panel header cards.
"""

import logging

import pandas as pd

from .config import (
    IMPACT_COLORS,
    JOB_STATUS_COLORS,
    RAG_COLORS,
    STATUS_COLORS,
)

logger = logging.getLogger(__name__)

MEMORY_WARNING_MB = 300
MEMORY_CRITICAL_MB = 500


def classify_confidence(score: float | None) -> str:
    """Return 'green', 'amber', 'red' (or 'grey' when missing).

    green  if score >= 0.8
    amber  if score >= 0.6
    red    otherwise
    """
    if score is None or pd.isna(score):
        return "grey"
    if score >= 0.8:
        return "green"
    if score >= 0.6:
        return "amber"
    return "red"


def classify_improvement(improvement: float | None) -> str:
    """Positive change is green, negative red, zero or missing grey."""
    if improvement is None or pd.isna(improvement):
        return "grey"
    if improvement > 0:
        return "green"
    if improvement < 0:
        return "red"
    return "grey"


def classify_memory_health(memory_usage_mb: float | None) -> str:
    """'critical' above 500 MB, 'warning' above 300 MB, else 'healthy'."""
    if memory_usage_mb is None or pd.isna(memory_usage_mb):
        return "healthy"
    if memory_usage_mb > MEMORY_CRITICAL_MB:
        return "critical"
    if memory_usage_mb > MEMORY_WARNING_MB:
        return "warning"
    return "healthy"


def confidence_color(score: float | None) -> str:
    return RAG_COLORS[classify_confidence(score)]


def improvement_color(improvement: float | None) -> str:
    return RAG_COLORS[classify_improvement(improvement)]


def impact_color(level: str | None) -> str:
    return IMPACT_COLORS.get(level or "", IMPACT_COLORS["low"])


def status_color(status: str | None) -> str:
    """Colour for job, model, or data-source status labels."""
    status = status or ""
    if status in JOB_STATUS_COLORS:
        return JOB_STATUS_COLORS[status]
    return STATUS_COLORS.get(status, RAG_COLORS["grey"])


def cache_hit_rate(hits: float | None, misses: float | None) -> float:
    """Hit rate as a percentage; 0 when either count is missing or both are 0."""
    if not hits or misses is None:
        return 0.0
    total = hits + misses
    if total == 0:
        return 0.0
    return hits / total * 100


def throughput_per_second(points_processed: float | None, duration_ms: float | None) -> float:
    if not points_processed or not duration_ms:
        return 0.0
    return points_processed / (duration_ms / 1000)


def retraining_summary(models: list[dict], history: list[dict]) -> dict:
    """Header numbers for the ML retraining panel.

    Returns
    -------
    Dict with keys:
        total_models, active_training_jobs, success_rate (percent),
        avg_improvement (fraction, mean over completed jobs)
    """
    completed = [job for job in history if job.get("status") == "completed"]
    active = [job for job in history if job.get("status") in ("running", "pending")]

    success_rate = len(completed) / len(history) * 100 if history else 0.0
    avg_improvement = (
        sum(job.get("performance_improvement") or 0 for job in completed) / len(completed)
        if completed
        else 0.0
    )
    return {
        "total_models": len(models),
        "active_training_jobs": len(active),
        "success_rate": success_rate,
        "avg_improvement": avg_improvement,
    }


def integration_health_score(sources: list[dict]) -> int:
    """Mean data-quality score across sources, rounded."""
    if not sources:
        return 0
    total = sum(s.get("data_quality_score") or 0 for s in sources)
    return round(total / len(sources))


def average_model_accuracy(predictions: list[dict]) -> int:
    """Mean prediction-model accuracy as a whole percentage."""
    if not predictions:
        return 0
    total = sum(p.get("model_accuracy") or 0 for p in predictions)
    return round(total / len(predictions) * 100)


def count_critical_insights(insights: list[dict], min_confidence: float = 0.8) -> int:
    return sum(
        1 for i in insights
        if i.get("impact") == "high" and (i.get("confidence") or 0) > min_confidence
    )


def count_anomalies(predictions: list[dict], threshold: float = 0.7) -> int:
    return sum(1 for p in predictions if (p.get("anomaly_score") or 0) > threshold)


def clickup_summary(task_metrics: dict, sync_metrics: dict) -> dict:
    """Completion and sync rates recomputed from raw counts where possible."""
    total = task_metrics.get("total_tasks") or 0
    completed = task_metrics.get("completed_tasks") or 0
    syncs = sync_metrics.get("total_syncs") or 0
    ok_syncs = sync_metrics.get("successful_syncs") or 0
    return {
        "completion_rate": completed / total * 100 if total else 0.0,
        "sync_success_rate": ok_syncs / syncs * 100 if syncs else 0.0,
        "overdue_share": (task_metrics.get("overdue_tasks") or 0) / total * 100 if total else 0.0,
    }
