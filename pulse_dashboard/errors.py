"""Exceptions raised by fetchers and panel actions."""


class DashboardError(Exception):
    """Base class for all dashboard errors."""


class FetchError(DashboardError):
    """A request failed: network error, HTTP error status, or unparseable JSON."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ActionError(DashboardError):
    """The backend answered but reported ``success: false``."""


class ValidationError(DashboardError):
    """Form input rejected before any request was sent."""
