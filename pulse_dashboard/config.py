"""
Configuration: API location, panel registry, colour maps, constants.

PANEL_REGISTRY maps each panel name to its display title, refresh interval
(milliseconds, or None for a panel that is only fetched on demand) and the
backend endpoints it reads from.
"""

import os

# ---------------------------------------------------------------------------
# Backend location, overridable from the environment
# ---------------------------------------------------------------------------
API_BASE_URL: str = os.environ.get("PULSE_API_BASE_URL", "http://localhost:3000")
REQUEST_TIMEOUT: float = float(os.environ.get("PULSE_REQUEST_TIMEOUT", "10"))

# "development" enables full tracebacks in fetch-failure logs
ENVIRONMENT: str = os.environ.get("PULSE_ENV", "production")
DEV_MODE: bool = ENVIRONMENT == "development"

# ---------------------------------------------------------------------------
# Product identity
# ---------------------------------------------------------------------------
PRODUCT_NAME = "Pulse Analytics"

# ---------------------------------------------------------------------------
# Refresh intervals
# ---------------------------------------------------------------------------
MIN_INTERVAL_MS = 5_000
MAX_INTERVAL_MS = 30_000

# ---------------------------------------------------------------------------
# Panel Registry
# ---------------------------------------------------------------------------
# title: display title
# interval_ms: poll interval, 5000-30000; None for panels fetched on demand
# endpoints: section name -> (path, query params)
PANEL_REGISTRY: dict[str, dict] = {
    "continuous_learning": {
        "title": "Continuous Learning",
        "interval_ms": 30_000,
        "endpoints": {
            "metrics": ("/api/continuous-learning", {"action": "metrics"}),
        },
    },
    "tactical_analysis": {
        "title": "Tactical Analysis",
        "interval_ms": 30_000,
        "endpoints": {
            "predictions": ("/api/tactical-analysis/ml-predictions", {}),
            "sources": ("/api/tactical-analysis/data-integration", {}),
            "performance": ("/api/tactical-analysis/performance", {}),
        },
    },
    "recommendations": {
        "title": "AI Recommendations",
        "interval_ms": 30_000,
        "endpoints": {
            "recommendations": ("/api/tactical-analysis/recommendations", {}),
            "metrics": ("/api/tactical-analysis/recommendations", {"action": "metrics"}),
            "trends": ("/api/tactical-analysis/recommendations", {"action": "trends"}),
        },
    },
    "data_integration": {
        "title": "Data Integration Status",
        "interval_ms": 30_000,
        "endpoints": {
            "sources": ("/api/tactical-analysis/data-integration", {}),
            "metrics": ("/api/tactical-analysis/data-integration", {"action": "metrics"}),
        },
    },
    "performance_monitor": {
        "title": "Performance Monitor",
        "interval_ms": 5_000,
        "endpoints": {
            "health": ("/api/tactical-analysis/performance", {"action": "health"}),
        },
    },
    "ml_retraining": {
        "title": "ML Auto-Retraining",
        "interval_ms": 30_000,
        "endpoints": {
            "models": ("/api/workflows/ml/auto-retraining", {"action": "models"}),
            "history": ("/api/workflows/ml/auto-retraining", {"action": "history"}),
            "metrics": ("/api/workflows/ml/auto-retraining", {"action": "metrics"}),
        },
    },
    "ml_navigation": {
        "title": "ML Navigation",
        "interval_ms": 5_000,
        "endpoints": {
            "model_status": ("/api/ml/navigation/train", {}),
        },
    },
    "ab_testing": {
        "title": "A/B Testing Performance",
        "interval_ms": None,
        "endpoints": {
            "summary": ("/api/content-ab-testing/performance", {"action": "summary"}),
        },
    },
    "clickup": {
        "title": "ClickUp Analytics",
        "interval_ms": 30_000,
        "endpoints": {
            "analytics": ("/api/clickup/analytics", {}),
        },
    },
    "cross_platform": {
        "title": "Cross-Platform Analysis",
        "interval_ms": None,
        "endpoints": {
            "demo": ("/api/cross-platform-analysis", {"action": "demo"}),
        },
    },
}

# ---------------------------------------------------------------------------
# Colour maps
# ---------------------------------------------------------------------------
RAG_COLORS = {
    "green": "#22c55e",
    "amber": "#f59e0b",
    "red": "#ef4444",
    "grey": "#6b7280",
}

STATUS_COLORS = {
    "healthy": "#22c55e",
    "warning": "#f59e0b",
    "error": "#ef4444",
    "critical": "#ef4444",
    "offline": "#6b7280",
}

JOB_STATUS_COLORS = {
    "completed": "#22c55e",
    "deployed": "#22c55e",
    "running": "#3b82f6",
    "training": "#3b82f6",
    "failed": "#ef4444",
    "pending": "#f59e0b",
}

IMPACT_COLORS = {
    "critical": "#b91c1c",
    "high": "#ef4444",
    "medium": "#f59e0b",
    "low": "#6b7280",
}

CATEGORY_COLORS = {
    "revenue": "#22c55e",
    "efficiency": "#3b82f6",
    "customer": "#f59e0b",
    "risk": "#ef4444",
    "growth": "#8b5cf6",
}

PRIORITY_COLORS = {
    "high": "#ef4444",
    "medium": "#f59e0b",
    "low": "#22c55e",
}

CHART_COLORS = ["#3b82f6", "#10b981", "#f59e0b", "#ef4444", "#8b5cf6"]

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
PRIORITY_ORDER = {"high": 3, "medium": 2, "low": 1}

PLATFORM_OPTIONS = {
    "instagram": "Instagram",
    "linkedin": "LinkedIn",
    "twitter": "Twitter",
    "facebook": "Facebook",
    "tiktok": "TikTok",
    "youtube": "YouTube",
}

CONTENT_TYPES = [
    "general",
    "announcement",
    "educational",
    "promotional",
    "entertainment",
    "news",
]

# Series caps for chart tables
MAX_TRAINING_JOBS = 10
MAX_PERFORMANCE_POINTS = 20
