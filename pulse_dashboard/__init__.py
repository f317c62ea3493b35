"""
Pulse Analytics: live BI dashboard data layer

Data layer for a set of self-refreshing analytics panels (continuous
learning, tactical analysis, recommendations, data integration, performance,
ML retraining and navigation, A/B testing, ClickUp, cross-platform content).

Every panel runs the same cycle: a poller fires on the panel's interval, the
panel's loader fetches its backend routes, and the reconciler merges the
result into a PanelState, filling any section the backend left empty from a
deterministic mock dataset. Panels registered without an interval (A/B testing,
cross-platform demo) run the same cycle once on first view and on request.

To connect to Streamlit:
    Call polling.refresh_panel(panel, client, state) inside a fragment with
    ``run_every`` set to the panel interval, then render
    dashboard.get_panel_view(panel.name, state).

To poll headless:
    Wrap polling.Poller(panel, client) in a ``with`` block; leaving the block
    cancels the pending timer.

To add a panel:
    Add its routes and interval to config.PANEL_REGISTRY, write a loader and
    a simulator function returning the same section keys, register both in
    panels.PANELS and add a view builder to dashboard.VIEW_BUILDERS.
"""
