"""
Polling and reconciliation of panel data.

Every panel follows the same refresh cycle:

    Poller tick -> panel fetcher -> reconcile() -> rendered view

- ``refresh_panel`` runs one cycle and never raises: fetch failures become
  an error string on the PanelState and the previous data is kept.
- ``reconcile`` merges a live payload into state section by section. Any
  section the backend left empty is filled from the panel's mock dataset,
  so a rendered panel is never blank.
- ``Poller`` fetches immediately on ``start()`` and then once per interval
  on a chain of ``threading.Timer`` handles. The next timer is armed only
  after the current cycle finishes, so cycles of one panel never overlap,
  and it is armed even when a cycle or ``on_update`` fails.
  ``stop()`` cancels the pending handle exactly once; it is also called on
  context-manager exit.
"""

import copy
import logging
import threading
from dataclasses import dataclass, fields
from typing import Any, Callable

import pandas as pd

from .config import DEV_MODE, MAX_INTERVAL_MS, MIN_INTERVAL_MS
from .errors import DashboardError

logger = logging.getLogger(__name__)


@dataclass
class PanelState:
    """Snapshot of one panel's data as last reconciled."""

    data: dict | None = None
    error: str | None = None
    loading: bool = True
    source: str | None = None  # "live", "partial", "mock"
    last_updated: pd.Timestamp | None = None
    reconcile_count: int = 0


def is_empty(value: Any) -> bool:
    """True for None and for empty lists, dicts, strings and DataFrames."""
    if value is None:
        return True
    if isinstance(value, pd.DataFrame):
        return value.empty
    if isinstance(value, (list, tuple, dict, str)):
        return len(value) == 0
    return False


def reconcile(state: PanelState, payload: dict | None, mock: dict) -> PanelState:
    """Merge a successful fetch into ``state``.

    Each section of ``mock`` is used where the live payload has no data for
    that section. The whole data dict is replaced; nothing from the previous
    snapshot survives a successful reconciliation.
    """
    payload = payload or {}
    merged: dict = {}
    substituted = 0

    for section, fallback in mock.items():
        live = payload.get(section)
        if is_empty(live):
            merged[section] = fallback
            substituted += 1
        else:
            merged[section] = live

    # Sections the backend returned that have no mock counterpart
    for section, live in payload.items():
        if section not in merged:
            merged[section] = live

    if substituted == 0:
        source = "live"
    elif substituted == len(mock):
        source = "mock"
    else:
        source = "partial"

    if substituted:
        logger.info("Mock fallback used for %d of %d sections", substituted, len(mock))

    state.data = merged
    state.source = source
    state.error = None
    state.loading = False
    state.last_updated = pd.Timestamp.now()
    state.reconcile_count += 1
    return state


def record_failure(state: PanelState, message: str, mock: dict | None = None) -> PanelState:
    """Surface a failed fetch on ``state`` without discarding its data.

    Only a panel that has never loaded gets the mock dataset, so the first
    render after a failure still has something to show.
    """
    state.error = message
    state.loading = False
    if state.data is None and mock is not None:
        state.data = dict(mock)
        state.source = "mock"
    return state


def refresh_panel(panel, client, state: PanelState) -> PanelState:
    """Run one fetch/reconcile cycle for ``panel``.

    Transport, HTTP and envelope failures arrive as DashboardError. Anything
    else raised by a loader means the backend sent a shape it could not
    read; both end up as the panel's error string.
    """
    try:
        payload = panel.fetch(client)
    except DashboardError as exc:
        if DEV_MODE:
            logger.exception("Error loading %s", panel.name)
        else:
            logger.warning("Error loading %s: %s", panel.name, exc)
        return record_failure(state, f"{panel.error_message}: {exc}", panel.mock())
    except Exception as exc:
        logger.exception("Unexpected payload for %s", panel.name)
        return record_failure(
            state, f"{panel.error_message}: unexpected response ({exc!r})", panel.mock()
        )
    return reconcile(state, payload, panel.mock())


class Poller:
    """Periodic refresh driver for a single panel.

    Parameters
    ----------
    panel : Panel definition (see ``panels.Panel``).
    client : ApiClient used by the panel fetcher.
    interval_ms : Override for the panel's refresh interval.
    timer_factory : Callable ``(seconds, fn) -> timer`` returning an object
        with ``start()`` and ``cancel()``. Defaults to ``threading.Timer``.
    on_update : Optional callback invoked with the state after every cycle.
    """

    def __init__(
        self,
        panel,
        client,
        state: PanelState | None = None,
        interval_ms: int | None = None,
        timer_factory: Callable = threading.Timer,
        on_update: Callable[[PanelState], None] | None = None,
    ):
        interval_ms = interval_ms if interval_ms is not None else panel.interval_ms
        if interval_ms is None:
            raise ValueError(f"{panel.name} is fetched on demand and has no refresh interval")
        if not MIN_INTERVAL_MS <= interval_ms <= MAX_INTERVAL_MS:
            raise ValueError(
                f"interval_ms must be within {MIN_INTERVAL_MS}-{MAX_INTERVAL_MS}, got {interval_ms}"
            )
        self.panel = panel
        self.client = client
        self.state = state if state is not None else PanelState()
        self.interval_ms = interval_ms
        self.on_update = on_update
        self._timer_factory = timer_factory
        self._timer = None
        self._lock = threading.Lock()
        self._started = False
        self._stopped = False
        self.fetch_count = 0
        self.cancel_count = 0

    @property
    def running(self) -> bool:
        return self._started and not self._stopped

    def start(self) -> "Poller":
        with self._lock:
            if self._started:
                raise RuntimeError(f"Poller for {self.panel.name} already started")
            self._started = True
        logger.info("Polling %s every %d ms", self.panel.name, self.interval_ms)
        self._tick()
        return self

    def stop(self) -> None:
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
            self.cancel_count += 1
        logger.info("Stopped polling %s after %d fetches", self.panel.name, self.fetch_count)

    def _tick(self) -> None:
        if self._stopped:
            return
        self.fetch_count += 1
        try:
            result = refresh_panel(self.panel, self.client, copy.copy(self.state))

            with self._lock:
                # A cycle finishing after teardown must not write state
                if self._stopped:
                    return
                for field in fields(PanelState):
                    setattr(self.state, field.name, getattr(result, field.name))

            if self.on_update is not None:
                self.on_update(self.state)
        except Exception:
            # Timer threads have no caller to report to
            logger.exception("Refresh cycle for %s failed", self.panel.name)
        finally:
            self._schedule()

    def _schedule(self) -> None:
        with self._lock:
            if self._stopped:
                return
            timer = self._timer_factory(self.interval_ms / 1000, self._tick)
            if hasattr(timer, "daemon"):
                timer.daemon = True
            self._timer = timer
        timer.start()

    def __enter__(self) -> "Poller":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
