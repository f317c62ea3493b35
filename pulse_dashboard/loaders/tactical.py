"""
Loaders for the tactical-analysis routes.

The four tactical panels (analysis overview, recommendations, data
integration, performance monitor) all read from ``/api/tactical-analysis/*``.
Each route answers a bare JSON object whose list lives under a fixed key
(``predictions``, ``sources``, ``metrics`` ...), except the performance
health route which uses the success/data envelope.
"""

import logging

from ..config import MAX_PERFORMANCE_POINTS, PANEL_REGISTRY
from ..kpis import cache_hit_rate, classify_memory_health, throughput_per_second
from .base import fetch_sections
from .utils import as_mapping, as_records, parse_timestamp, pick, safe_float, unwrap

logger = logging.getLogger(__name__)

_PERFORMANCE_ROUTE = "/api/tactical-analysis/performance"


def load_tactical_analysis(client) -> dict:
    """Insights, predictions, source status, performance series and analytics."""
    raw = fetch_sections(client, PANEL_REGISTRY["tactical_analysis"]["endpoints"])
    predictions = raw["predictions"]

    return {
        "insights": pick(predictions, "insights", []),
        "predictions": pick(predictions, "predictions", []),
        "sources": pick(raw["sources"], "sources", []),
        "performance": pick(raw["performance"], "metrics", []),
        "analytics": pick(predictions, "analytics"),
    }


def load_recommendations(client) -> dict:
    raw = fetch_sections(client, PANEL_REGISTRY["recommendations"]["endpoints"])
    return {
        "recommendations": pick(raw["recommendations"], "recommendations", []),
        "metrics": pick(raw["metrics"], "metrics"),
        "trends": pick(raw["trends"], "trends"),
    }


def load_data_integration(client) -> dict:
    raw = fetch_sections(client, PANEL_REGISTRY["data_integration"]["endpoints"])
    return {
        "sources": pick(raw["sources"], "sources", []),
        "metrics": pick(raw["metrics"], "metrics"),
    }


def format_performance_report(report: dict) -> dict:
    """Reshape a backend ``performance_report`` into panel sections.

    - metrics: one row per measured operation, newest 20 kept, with cache
      hit rate and throughput derived from raw counters.
    - system_health: status from memory usage (>500 MB critical,
      >300 MB warning).
    - cache_stats: request split derived from the reported hit rate.

    Metric entries that are not objects are skipped, and a health or cache
    block that is not an object is treated as absent.
    """
    metrics = []
    health = as_mapping(pick(report, "system_health"))
    queue_size = health.get("queue_size") or 0
    for metric in as_records(pick(report, "metrics")):
        ended = parse_timestamp(metric.get("end_time"))
        duration = safe_float(metric.get("duration_ms"))
        processed = safe_float(metric.get("data_points_processed"))
        metrics.append({
            "timestamp": ended.isoformat() if ended is not None else None,
            "duration": duration,
            "memory_usage": safe_float(metric.get("memory_usage_mb")),
            "data_points_processed": processed,
            "cache_hit_rate": cache_hit_rate(
                safe_float(metric.get("cache_hits")), safe_float(metric.get("cache_misses"))
            ),
            "throughput": throughput_per_second(processed, duration),
            "queue_size": queue_size,
        })
    metrics = metrics[-MAX_PERFORMANCE_POINTS:]

    system_health = None
    if health:
        memory_mb = safe_float(health.get("memory_usage_mb"))
        status = classify_memory_health(memory_mb)
        uptime = safe_float(health.get("uptime_ms")) or 0
        system_health = {
            "overall_status": status,
            "memory_status": status,
            "memory_usage_mb": memory_mb,
            "uptime": uptime,
            "services_status": [
                {"name": "Tactical Engine", "status": "running", "memory_usage": memory_mb},
            ],
        }

    cache_stats = None
    cache = as_mapping(pick(report, "cache_stats"))
    if cache:
        hit_rate = safe_float(cache.get("hit_rate")) or 0.0
        cache_stats = {
            "total_requests": 1000,
            "cache_hits": hit_rate * 1000,
            "cache_misses": (1 - hit_rate) * 1000,
            "hit_rate": hit_rate * 100,
            "miss_rate": (1 - hit_rate) * 100,
            "cache_size_mb": safe_float(cache.get("memory_usage")),
            "cache_entries": cache.get("size"),
        }

    return {"metrics": metrics, "system_health": system_health, "cache_stats": cache_stats}


def load_performance_health(client) -> dict:
    raw = fetch_sections(client, PANEL_REGISTRY["performance_monitor"]["endpoints"])
    data = unwrap(raw["health"], "Failed to load performance data")
    report = as_mapping(pick(data, "performance_report"))
    if not report:
        return {"metrics": [], "system_health": None, "cache_stats": None}
    return format_performance_report(report)


def run_load_test(client, concurrency: int = 100, iterations: int = 60) -> dict:
    """Start a backend load test and return its ``load_test_results``."""
    logger.info("Running load test: concurrency=%d iterations=%d", concurrency, iterations)
    response = client.post_json(
        _PERFORMANCE_ROUTE,
        {"action": "load_test", "parameters": {"concurrency": concurrency, "iterations": iterations}},
    )
    data = unwrap(response, "Failed to run load test")
    return pick(data, "load_test_results", {})
