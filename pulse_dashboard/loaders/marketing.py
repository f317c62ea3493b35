"""
Loaders and actions for the marketing-performance routes:
A/B testing summary, ClickUp analytics, and cross-platform content analysis.
"""

import logging
import math

from ..config import PANEL_REGISTRY, PLATFORM_OPTIONS
from ..errors import ValidationError
from .base import fetch_sections
from .utils import pick, safe_float, unwrap

logger = logging.getLogger(__name__)

_CROSS_PLATFORM_ROUTE = "/api/cross-platform-analysis"


def load_ab_testing_summary(client) -> dict:
    raw = fetch_sections(client, PANEL_REGISTRY["ab_testing"]["endpoints"])
    return {"summary": unwrap(raw["summary"], "Failed to fetch A/B testing analytics")}


def load_clickup_analytics(client) -> dict:
    """ClickUp analytics; keys follow the backend's camelCase names."""
    raw = fetch_sections(client, PANEL_REGISTRY["clickup"]["endpoints"])
    data = raw["analytics"]
    return {
        "task_metrics": pick(data, "taskMetrics"),
        "workflow_metrics": pick(data, "workflowMetrics"),
        "sync_metrics": pick(data, "syncMetrics"),
        "time_series": pick(data, "timeSeriesData", []),
        "priority": pick(data, "priorityData", []),
        "team": pick(data, "teamData", []),
    }


def load_cross_platform_demo(client) -> dict:
    raw = fetch_sections(client, PANEL_REGISTRY["cross_platform"]["endpoints"])
    return {"analysis": unwrap(raw["demo"], "Demo analysis failed")}


# ---------------------------------------------------------------------------
# Cross-platform actions
# ---------------------------------------------------------------------------
def _check_platforms(platforms: list[str], message: str) -> list[str]:
    if not platforms:
        raise ValidationError(message)
    unknown = [p for p in platforms if p not in PLATFORM_OPTIONS]
    if unknown:
        raise ValidationError(f"Unknown platform(s): {', '.join(unknown)}")
    return platforms


def _get_analysis(client, params: dict, failure: str) -> dict:
    logger.info("Cross-platform %s for %s", params["action"], params.get("platforms") or params.get("current_platforms"))
    return unwrap(client.get_json(_CROSS_PLATFORM_ROUTE, params=params), failure)


def analyze_content(
    client,
    content: str,
    platforms: list[str],
    hashtags: str = "",
    content_type: str = "general",
    target_audience: str = "",
) -> dict:
    if not content.strip():
        raise ValidationError("Please enter content to analyze")
    _check_platforms(platforms, "Please select at least one platform")

    params = {
        "action": "analyze",
        "content": content.strip(),
        "hashtags": hashtags.strip(),
        "platforms": ",".join(platforms),
        "content_type": content_type,
    }
    if target_audience:
        params["target_audience"] = target_audience
    return _get_analysis(client, params, "Analysis failed")


def run_benchmark(
    client,
    platforms: list[str],
    engagement_rate: float | str = 0.05,
    reach: float | str = 1000,
    conversion_rate: float | str = 0.02,
    content_type: str = "general",
) -> dict:
    _check_platforms(platforms, "Please select at least one platform for benchmarking")

    values = {
        "engagement_rate": safe_float(engagement_rate),
        "reach": safe_float(reach),
        "conversion_rate": safe_float(conversion_rate),
    }
    invalid = [name for name, value in values.items() if value is None or not math.isfinite(value)]
    if invalid:
        raise ValidationError(f"Invalid numeric value for {', '.join(invalid)}")

    params = {
        "action": "benchmark",
        "platforms": ",".join(platforms),
        "content_type": content_type,
        **{name: str(value) for name, value in values.items()},
    }
    return _get_analysis(client, params, "Benchmark analysis failed")


def generate_universal_optimizations(
    client,
    content: str,
    current_platforms: list[str],
    target_platforms: list[str] | None = None,
    content_type: str = "general",
    target_audience: str = "",
) -> dict:
    if not content.strip():
        raise ValidationError("Please enter content for optimization")
    _check_platforms(current_platforms, "Please select current platforms")

    params = {
        "action": "universal-optimizations",
        "content": content.strip(),
        "current_platforms": ",".join(current_platforms),
        "target_platforms": ",".join(target_platforms or []),
        "content_type": content_type,
    }
    if target_audience:
        params["target_audience"] = target_audience
    return _get_analysis(client, params, "Universal optimization failed")
