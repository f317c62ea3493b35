"""
Panel registry: binds each dashboard panel to its loader and mock dataset.

To add a panel:
    Add its endpoints and interval to config.PANEL_REGISTRY, write a loader
    returning a dict of sections, write a simulator function returning the
    same sections, and register both here.
"""

import logging
from typing import Callable

from . import simulator
from .config import PANEL_REGISTRY
from .loaders import (
    load_ab_testing_summary,
    load_clickup_analytics,
    load_cross_platform_demo,
    load_data_integration,
    load_learning_data,
    load_navigation_status,
    load_performance_health,
    load_recommendations,
    load_retraining_data,
    load_tactical_analysis,
)

logger = logging.getLogger(__name__)


class Panel:
    """A dashboard panel definition.

    ``loader(client)`` returns the live sections; ``mock_factory()`` returns
    the fallback sections with the same keys.
    """

    def __init__(
        self,
        name: str,
        loader: Callable,
        mock_factory: Callable[[], dict],
        error_message: str,
    ):
        registry = PANEL_REGISTRY[name]
        self.name = name
        self.title = registry["title"]
        self.interval_ms = registry["interval_ms"]
        self.endpoints = registry["endpoints"]
        self.loader = loader
        self.mock_factory = mock_factory
        self.error_message = error_message

    @property
    def polls(self) -> bool:
        """False for panels fetched only on first view or on request."""
        return self.interval_ms is not None

    def fetch(self, client) -> dict:
        return self.loader(client)

    def mock(self) -> dict:
        return self.mock_factory()

    def __repr__(self) -> str:
        return f"Panel({self.name!r}, interval_ms={self.interval_ms})"


PANELS: dict[str, Panel] = {
    panel.name: panel
    for panel in [
        Panel(
            "continuous_learning",
            load_learning_data,
            simulator.generate_learning_data,
            "Network error loading learning data",
        ),
        Panel(
            "tactical_analysis",
            load_tactical_analysis,
            simulator.generate_tactical_data,
            "Failed to load tactical analysis data",
        ),
        Panel(
            "recommendations",
            load_recommendations,
            simulator.generate_recommendations,
            "Failed to load recommendations",
        ),
        Panel(
            "data_integration",
            load_data_integration,
            simulator.generate_data_integration,
            "Failed to load data integration status",
        ),
        Panel(
            "performance_monitor",
            load_performance_health,
            simulator.generate_performance_metrics,
            "Failed to fetch performance data",
        ),
        Panel(
            "ml_retraining",
            load_retraining_data,
            simulator.generate_retraining_data,
            "Failed to fetch ML data",
        ),
        Panel(
            "ml_navigation",
            load_navigation_status,
            simulator.generate_navigation_data,
            "Failed to fetch model status",
        ),
        Panel(
            "ab_testing",
            load_ab_testing_summary,
            simulator.generate_ab_testing_summary,
            "Failed to fetch A/B testing analytics",
        ),
        Panel(
            "clickup",
            load_clickup_analytics,
            simulator.generate_clickup_analytics,
            "Failed to load ClickUp analytics",
        ),
        Panel(
            "cross_platform",
            load_cross_platform_demo,
            lambda: {"analysis": simulator.generate_cross_platform_analysis()},
            "Failed to run demo analysis",
        ),
    ]
}


def get_panel(name: str) -> Panel:
    try:
        return PANELS[name]
    except KeyError:
        raise KeyError(f"Unknown panel '{name}'. Available: {', '.join(PANELS)}") from None
