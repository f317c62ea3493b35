"""
Multi-endpoint fetch helper shared by panel loaders.

A panel reading several routes issues one GET per route. A route answering
with an HTTP error status leaves its section empty (and so eligible for
mock fallback); a transport failure aborts the whole cycle.
"""

import logging

from ..errors import FetchError

logger = logging.getLogger(__name__)


def fetch_sections(client, endpoints: dict[str, tuple[str, dict]]) -> dict:
    """GET every ``name -> (path, params)`` entry and return ``name -> json``."""
    results: dict = {}
    for name, (path, params) in endpoints.items():
        try:
            results[name] = client.get_json(path, params=params)
        except FetchError as exc:
            if exc.status_code is None:
                raise
            logger.warning("Section '%s' unavailable: %s", name, exc)
            results[name] = None
    return results
