"""
Loaders and actions for the ML model routes.

- Auto-retraining: ``/api/workflows/ml/auto-retraining?action=models|history|metrics``
- Navigation model: ``/api/ml/navigation/train`` (GET status, POST new job)
"""

import logging

import pandas as pd

from ..config import PANEL_REGISTRY
from ..errors import ActionError
from .base import fetch_sections
from .utils import pick, unwrap

logger = logging.getLogger(__name__)

_RETRAINING_ROUTE = "/api/workflows/ml/auto-retraining"
_NAVIGATION_ROUTE = "/api/ml/navigation/train"

DEFAULT_RETRAIN_MODELS = ["content_performance", "engagement_prediction"]


def load_retraining_data(client) -> dict:
    """Model registry, training history and retraining schedules.

    ``models`` and ``history`` are only taken from responses reporting
    success; anything else leaves the section empty.
    """
    raw = fetch_sections(client, PANEL_REGISTRY["ml_retraining"]["endpoints"])

    models = []
    models_resp = raw["models"]
    if pick(models_resp, "success", False):
        models = pick(models_resp, "models", [])

    history = []
    history_resp = raw["history"]
    if pick(history_resp, "success", False):
        history = pick(history_resp, "training_history", [])

    return {
        "models": models,
        "history": history,
        "schedules": pick(raw["metrics"], "schedules", []),
    }


def trigger_manual_retraining(client, model_types: list[str] | None = None, force: bool = True) -> dict:
    model_types = model_types or DEFAULT_RETRAIN_MODELS
    logger.info("Triggering manual retraining for %s", ", ".join(model_types))
    response = client.post_json(
        _RETRAINING_ROUTE,
        {"force": force, "model_types": model_types},
        params={"action": "trigger_retraining"},
    )
    return unwrap(response, "Failed to trigger retraining")


def load_navigation_status(client) -> dict:
    raw = fetch_sections(client, PANEL_REGISTRY["ml_navigation"]["endpoints"])
    status = raw["model_status"]
    return {
        "model_status": pick(status, "model_status"),
        "training_jobs": pick(status, "training_jobs", []),
        "predictions": pick(status, "recent_predictions", []),
        "segments": pick(status, "user_segments", []),
    }


def default_training_config() -> dict:
    return {
        "model_type": "random_forest",
        "parameters": {
            "n_estimators": 100,
            "max_depth": 10,
            "min_samples_split": 5,
            "random_state": 42,
        },
        "feature_selection": {"enabled": True, "method": "variance_threshold", "n_features": 20},
        "cross_validation": {"enabled": True, "folds": 5, "scoring": "accuracy"},
        "hyperparameter_tuning": {"enabled": False, "method": "grid_search", "param_distributions": {}},
    }


def start_navigation_training(
    client,
    config: dict | None = None,
    lookback_days: int = 30,
    now: pd.Timestamp | None = None,
) -> dict:
    """Submit a navigation-model training job.

    Returns the new active job: ``{"id", "status": "pending", "started_at"}``.
    """
    now = now if now is not None else pd.Timestamp.now()
    payload = {
        "model_config": config or default_training_config(),
        "data_range": {
            "start_date": (now - pd.Timedelta(days=lookback_days)).isoformat(),
            "end_date": now.isoformat(),
        },
        "training_options": {"min_session_duration": 30, "exclude_bounce_sessions": True},
    }
    result = unwrap(client.post_json(_NAVIGATION_ROUTE, payload), "Failed to start training")
    job_id = pick(result, "job_id")
    if not job_id:
        raise ActionError(pick(result, "error") or "Training job was not created")
    logger.info("Navigation training job submitted: %s", job_id)
    return {"id": job_id, "status": "pending", "started_at": now.isoformat()}
