"""
HTTP client for the analytics backend.

Thin wrapper over a ``requests.Session``: joins paths onto the base URL,
applies the request timeout, and turns every transport, status, or JSON
failure into a FetchError so callers deal with a single exception type.
"""

import logging
from typing import Any

import requests

from .config import API_BASE_URL, REQUEST_TIMEOUT
from .errors import FetchError

logger = logging.getLogger(__name__)


class ApiClient:
    """JSON GET/POST against the dashboard API routes.

    Parameters
    ----------
    base_url : Backend root, e.g. ``http://localhost:3000``.
    timeout : Per-request timeout in seconds.
    session : Optional pre-built session (tests pass a fake here).
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_json(self, path: str, params: dict | None = None) -> Any:
        url = self.url_for(path)
        try:
            resp = self.session.get(url, params=params or None, timeout=self.timeout)
        except requests.Timeout as exc:
            raise FetchError(f"Request to {url} timed out", url=url) from exc
        except requests.RequestException as exc:
            raise FetchError(f"Cannot reach backend at {url}: {exc}", url=url) from exc
        return self._decode(resp, url)

    def post_json(self, path: str, payload: dict, params: dict | None = None) -> Any:
        url = self.url_for(path)
        try:
            resp = self.session.post(
                url, json=payload, params=params or None, timeout=self.timeout
            )
        except requests.Timeout as exc:
            raise FetchError(f"Request to {url} timed out", url=url) from exc
        except requests.RequestException as exc:
            raise FetchError(f"Cannot reach backend at {url}: {exc}", url=url) from exc
        return self._decode(resp, url)

    @staticmethod
    def _decode(resp: requests.Response, url: str) -> Any:
        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            raise FetchError(
                f"API error ({resp.status_code}) from {url}",
                url=url,
                status_code=resp.status_code,
            ) from exc
        try:
            return resp.json()
        except ValueError as exc:
            raise FetchError(f"Invalid JSON from {url}", url=url, status_code=resp.status_code) from exc

    def close(self) -> None:
        self.session.close()
