"""
Pulse Analytics: headless refresh runner.

Fetches every dashboard panel once, reconciles the results (falling back to
sample data where the backend has none) and prints panel summaries. With
``--watch`` it keeps every polling panel refreshing on its own interval for
the given number of seconds, then tears the pollers down.

Usage:
    python main.py
    python main.py --watch 60
    python main.py --panel performance_monitor --watch 20
"""

import argparse
import logging
import time
from contextlib import ExitStack
from typing import Callable

from pulse_dashboard.client import ApiClient
from pulse_dashboard.config import API_BASE_URL, DEV_MODE, PRODUCT_NAME
from pulse_dashboard.dashboard import get_panel_headline
from pulse_dashboard.panels import PANELS, get_panel
from pulse_dashboard.polling import PanelState, Poller, refresh_panel

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.DEBUG if DEV_MODE else logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def print_headline(panel_name: str, state: PanelState) -> None:
    headline = get_panel_headline(panel_name, state)
    updated = f"{state.last_updated:%H:%M:%S}" if state.last_updated is not None else "never"
    print(f"\n{PANELS[panel_name].title} [{headline['source']}] updated {updated}")
    if headline["error"]:
        print(f"  ERROR: {headline['error']}")
    for key, value in headline["cards"].items():
        if isinstance(value, float):
            value = f"{value:,.2f}"
        print(f"  {key:28s} | {value}")


def run_once(client: ApiClient, panel_names: list[str]) -> dict[str, PanelState]:
    states = {}
    for name in panel_names:
        states[name] = refresh_panel(PANELS[name], client, PanelState())
        print_headline(name, states[name])
    return states


def run_watch(client_factory: Callable[[], ApiClient], panel_names: list[str], seconds: float) -> list[Poller]:
    """Poll the panels for ``seconds``; every poller is stopped on exit.

    Each poller gets its own client, so no requests.Session is shared between
    timer threads. Panels fetched on demand are fetched once up front.
    """
    polled = [name for name in panel_names if PANELS[name].polls]
    on_demand = [name for name in panel_names if not PANELS[name].polls]
    pollers = []
    with ExitStack() as stack:
        if on_demand:
            client = client_factory()
            stack.callback(client.close)
            run_once(client, on_demand)
        for name in polled:
            client = client_factory()
            stack.callback(client.close)
            pollers.append(stack.enter_context(
                Poller(
                    PANELS[name],
                    client,
                    on_update=lambda state, name=name: print_headline(name, state),
                )
            ))
        try:
            time.sleep(seconds)
        except KeyboardInterrupt:
            print("\nInterrupted.")
    for poller in pollers:
        logger.info("%s: %d fetches, %d timer cancels", poller.panel.name, poller.fetch_count, poller.cancel_count)
    return pollers


def main() -> None:
    parser = argparse.ArgumentParser(description=f"{PRODUCT_NAME} headless refresh runner")
    parser.add_argument("--watch", type=float, metavar="SECONDS",
                        help="keep polling for SECONDS instead of fetching once")
    parser.add_argument("--panel", action="append", choices=list(PANELS),
                        help="restrict to this panel (repeatable)")
    parser.add_argument("--base-url", default=API_BASE_URL, help="backend root URL")
    args = parser.parse_args()

    panel_names = [get_panel(name).name for name in args.panel] if args.panel else list(PANELS)
    client = ApiClient(base_url=args.base_url)

    print("=" * 70)
    print(f"  {PRODUCT_NAME.upper()}: Live BI Dashboard")
    print(f"  Backend: {client.base_url}")
    print("=" * 70)

    try:
        if args.watch:
            print(f"\n[ 1 ] POLLING {len(panel_names)} PANELS FOR {args.watch:g}s")
            print("-" * 40)
            run_watch(lambda: ApiClient(base_url=args.base_url), panel_names, args.watch)
        else:
            print(f"\n[ 1 ] FETCHING {len(panel_names)} PANELS")
            print("-" * 40)
            states = run_once(client, panel_names)

            print("\n")
            print("[ 2 ] DATA SOURCES")
            print("-" * 40)
            for name, state in states.items():
                print(f"  {name:22s} | {state.source:8s} | {'error' if state.error else 'ok'}")
    finally:
        client.close()

    print("\n" + "=" * 70)
    print("  Done.")
    print("=" * 70)


if __name__ == "__main__":
    main()
