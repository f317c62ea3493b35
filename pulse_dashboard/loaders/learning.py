"""
Loader and actions for the continuous-learning routes.

GET  /api/continuous-learning?action=metrics
POST /api/continuous-learning  {"action": "start-learning" | "stop-learning" |
                                 "trigger-retraining" | "simulate-learning-cycle"}

Responses use the ``{"success": bool, "data": ..., "message": ...}`` envelope.
"""

import logging

from ..config import PANEL_REGISTRY
from .base import fetch_sections
from .utils import pick, unwrap

logger = logging.getLogger(__name__)

_ROUTE = "/api/continuous-learning"


def load_learning_data(client) -> dict:
    """Fetch current learning metrics and split them into panel sections.

    Returns
    -------
    Dict with keys: metrics, status, insights, model_updates, history
    """
    raw = fetch_sections(client, PANEL_REGISTRY["continuous_learning"]["endpoints"])
    data = unwrap(raw["metrics"], "Failed to load learning data")

    return {
        "metrics": pick(data, "current_metrics"),
        "status": pick(data, "learning_status"),
        "insights": pick(data, "recent_insights", []),
        "model_updates": pick(data, "model_versions", []),
        "history": pick(data, "historical_performance", []),
    }


def _post_action(client, action: str, **extra) -> dict:
    payload = {"action": action, **extra}
    logger.info("Continuous learning action: %s", action)
    response = client.post_json(_ROUTE, payload)
    return unwrap(response, f"Failed to run {action}")


def start_learning(client) -> dict:
    return _post_action(client, "start-learning")


def stop_learning(client) -> dict:
    return _post_action(client, "stop-learning")


def trigger_learning_retraining(client, force: bool = True) -> dict:
    return _post_action(client, "trigger-retraining", force=force)


def simulate_learning_cycle(client) -> dict:
    return _post_action(client, "simulate-learning-cycle")
