"""
Shared utilities for API loaders: envelope unwrapping, number coercion,
timestamp parsing.
"""

import logging
from typing import Any

import pandas as pd

from ..errors import ActionError

logger = logging.getLogger(__name__)


def unwrap(response: Any, default_message: str = "Request failed") -> Any:
    """Return the ``data`` member of a ``{"success": ..., "data": ...}`` envelope.

    Responses without a ``success`` key are returned unchanged. A response
    with ``success: false`` raises ActionError carrying the backend message.
    """
    if not isinstance(response, dict) or "success" not in response:
        return response
    if not response["success"]:
        message = response.get("message") or response.get("error") or default_message
        raise ActionError(message)
    return response.get("data", response)


def pick(response: Any, key: str, default: Any = None) -> Any:
    """Get ``key`` from a dict response, tolerating non-dict payloads."""
    if isinstance(response, dict):
        value = response.get(key)
        return default if value is None else value
    return default


def as_mapping(value: Any) -> dict:
    """``value`` if it is a dict, otherwise an empty dict."""
    return value if isinstance(value, dict) else {}


def as_records(value: Any) -> list[dict]:
    """The dict items of a list section.

    A section of any other type counts as empty, and non-dict items are
    dropped, so a malformed payload degrades to fewer rows.
    """
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, dict)]


def safe_float(val: Any) -> float | None:
    """Coerce a value to float, returning None for non-numeric values."""
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, str):
        val = val.strip()
        if not val:
            return None
        if val.endswith("%"):
            val = val[:-1]
    try:
        return float(val)
    except (ValueError, TypeError):
        return None


def parse_timestamp(val: Any) -> pd.Timestamp | None:
    """Parse an ISO string or epoch milliseconds into a naive pd.Timestamp.

    Returns None for missing or unparseable values.
    """
    if val is None or val == "":
        return None
    try:
        if isinstance(val, (int, float)) and not isinstance(val, bool):
            ts = pd.Timestamp(int(val), unit="ms")
        else:
            ts = pd.Timestamp(val)
    except (ValueError, TypeError):
        logger.warning("Could not parse timestamp value: %s", val)
        return None
    if ts is pd.NaT:
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert(None)
    return ts
