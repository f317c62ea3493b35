"""
Pulse Analytics: live BI dashboard

Run with:  streamlit run app.py

Each polling panel is a Streamlit fragment re-run on its own refresh interval.
A run fetches the panel's endpoints, reconciles the payload into the panel's
PanelState (mock sections fill anything the backend left empty) and renders
from that state only. Switching pages stops the previous panel's fragment.
Panels without an interval are fetched on first view and from a button.
"""

import logging

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from pulse_dashboard.client import ApiClient
from pulse_dashboard.config import (
    CATEGORY_COLORS,
    CHART_COLORS,
    CONTENT_TYPES,
    DEV_MODE,
    PLATFORM_OPTIONS,
    PRIORITY_COLORS,
    PRODUCT_NAME,
    RAG_COLORS,
)
from pulse_dashboard.dashboard import SORT_KEYS, get_panel_view, get_recommendations_view
from pulse_dashboard.errors import DashboardError
from pulse_dashboard.kpis import impact_color, improvement_color, status_color
from pulse_dashboard.loaders import (
    analyze_content,
    generate_universal_optimizations,
    run_benchmark,
    run_load_test,
    simulate_learning_cycle,
    start_learning,
    start_navigation_training,
    stop_learning,
    trigger_learning_retraining,
    trigger_manual_retraining,
)
from pulse_dashboard.panels import PANELS
from pulse_dashboard.polling import PanelState, refresh_panel

logging.basicConfig(
    level=logging.DEBUG if DEV_MODE else logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title=f"{PRODUCT_NAME} Dashboard",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded",
)


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------
if "client" not in st.session_state:
    st.session_state.client = ApiClient()
if "panel_states" not in st.session_state:
    st.session_state.panel_states = {name: PanelState() for name in PANELS}
if "flash" not in st.session_state:
    st.session_state.flash = {}
if "results" not in st.session_state:
    st.session_state.results = {}

client: ApiClient = st.session_state.client

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
st.sidebar.title(PRODUCT_NAME)
st.sidebar.markdown("Live BI Dashboard")
st.sidebar.divider()

panel_name = st.sidebar.radio(
    "Navigate",
    list(PANELS),
    format_func=lambda name: PANELS[name].title,
)

st.sidebar.divider()
st.sidebar.caption(f"Backend: {client.base_url}")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def stat_card(label: str, value, color: str = RAG_COLORS["grey"], note: str = ""):
    st.markdown(
        f"""
        <div style="background: linear-gradient(135deg, {color}22, {color}11);
                    border-left: 4px solid {color};
                    border-radius: 8px; padding: 16px; margin-bottom: 8px;">
            <div style="font-size: 13px; color: #888; font-weight: 600; text-transform: uppercase;">{label}</div>
            <div style="font-size: 28px; font-weight: 700; color: #222; margin: 4px 0;">{value}</div>
            <div style="font-size: 13px; color: #666;">{note}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def badge(text: str, color: str) -> str:
    return (
        f"<span style='background:{color}22; color:{color}; border-radius:4px; "
        f"padding:2px 8px; font-size:12px; font-weight:600;'>{text}</span>"
    )


def state_banner(state: PanelState):
    if state.error:
        st.error(state.error)
    if state.source == "mock":
        st.warning("Showing sample data: the backend returned no data for this panel.")
    elif state.source == "partial":
        st.info("Some sections are showing sample data.")
    if state.last_updated is not None:
        st.caption(f"Last updated {state.last_updated:%H:%M:%S} · source: {state.source}")


def run_action(key: str, action, success_message: str, *args, **kwargs):
    """Button callback: run a backend action and leave a message for the panel."""
    try:
        result = action(client, *args, **kwargs)
    except DashboardError as exc:
        logger.warning("Action %s failed: %s", key, exc)
        st.session_state.flash[key] = ("error", str(exc))
        return
    st.session_state.results[key] = result
    st.session_state.flash[key] = ("success", success_message)


def show_flash(key: str):
    kind, message = st.session_state.flash.pop(key, (None, None))
    if kind == "error":
        st.error(message)
    elif kind == "success":
        st.success(message)


def line_chart(df: pd.DataFrame, x: str, columns: list[str], title: str, height: int = 350):
    fig = go.Figure()
    for i, col in enumerate(columns):
        fig.add_trace(go.Scatter(
            x=df[x], y=df[col], name=col.replace("_", " ").title(),
            mode="lines", line=dict(color=CHART_COLORS[i % len(CHART_COLORS)], width=2),
        ))
    fig.update_layout(title=title, height=height, plot_bgcolor="rgba(0,0,0,0)")
    st.plotly_chart(fig, use_container_width=True)


def pct(value, digits: int = 1) -> str:
    return f"{value:.{digits}f}%" if value is not None else "N/A"


# ===========================================================================
# PANEL: Continuous Learning
# ===========================================================================
def render_continuous_learning(view: dict):
    cards = view["cards"]
    cols = st.columns(4)
    with cols[0]:
        active = cards["is_active"]
        stat_card("Learning Loop", "Active" if active else "Paused",
                  RAG_COLORS["green" if active else "grey"],
                  f"{cards['pending_feedback']} pending feedback")
    with cols[1]:
        stat_card("Model Accuracy", pct(cards["model_accuracy_pct"]), CHART_COLORS[0])
    with cols[2]:
        stat_card("Improvement Rate", pct(cards["improvement_rate_pct"]),
                  improvement_color(cards["improvement_rate_pct"]))
    with cols[3]:
        stat_card("Prediction Confidence", pct(cards["prediction_confidence_pct"]), CHART_COLORS[4])

    show_flash("learning")
    b1, b2, b3, b4 = st.columns(4)
    b1.button("Start Learning", on_click=run_action,
              args=("learning", start_learning, "Continuous learning started"))
    b2.button("Stop Learning", on_click=run_action,
              args=("learning", stop_learning, "Continuous learning stopped"))
    b3.button("Trigger Retraining", on_click=run_action,
              args=("learning", trigger_learning_retraining, "Retraining triggered"))
    b4.button("Simulate Cycle", on_click=run_action,
              args=("learning", simulate_learning_cycle, "Learning cycle simulated"))

    history = view["history"]
    if not history.empty:
        line_chart(history, "date", ["accuracy", "engagement"], "Learning Performance (14 days)")

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Recent Insights")
        for insight in view["insights"]:
            color = impact_color(insight.get("impact_level"))
            st.markdown(
                f"{badge(insight.get('impact_level', ''), color)} "
                f"**{insight.get('insight_type', '').replace('_', ' ').title()}** "
                f"({insight.get('confidence_score', 0):.0%})<br>{insight.get('description', '')}",
                unsafe_allow_html=True,
            )
    with col2:
        st.subheader("Model Updates")
        st.dataframe(view["model_updates"], use_container_width=True, hide_index=True)


# ===========================================================================
# PANEL: Tactical Analysis
# ===========================================================================
def render_tactical_analysis(view: dict):
    cards = view["cards"]
    cols = st.columns(4)
    with cols[0]:
        stat_card("Data Health", f"{cards['health_score']}%", CHART_COLORS[1])
    with cols[1]:
        stat_card("Model Accuracy", f"{cards['avg_model_accuracy']}%", CHART_COLORS[0])
    with cols[2]:
        stat_card("Critical Insights", cards["critical_insights"], RAG_COLORS["red"])
    with cols[3]:
        stat_card("Anomalies", cards["anomalies_detected"], RAG_COLORS["amber"])

    tab1, tab2, tab3 = st.tabs(["Insights", "Predictions", "Performance"])
    with tab1:
        for insight in view["insights"]:
            st.markdown(
                f"{badge(insight.get('impact', ''), impact_color(insight.get('impact')))} "
                f"{insight.get('insight', '')} ({insight.get('confidence', 0):.0%})",
                unsafe_allow_html=True,
            )
        st.subheader("Data Sources")
        st.dataframe(view["sources"].drop(columns=["color"]), use_container_width=True, hide_index=True)
    with tab2:
        predictions = view["predictions"]
        if not predictions.empty:
            fig = px.bar(predictions, x="model_type", y="predicted_value", color="trend",
                         color_discrete_sequence=CHART_COLORS, height=350)
            fig.update_layout(plot_bgcolor="rgba(0,0,0,0)")
            st.plotly_chart(fig, use_container_width=True)
        importance = view["feature_importance"]
        if not importance.empty:
            fig = go.Figure(go.Bar(x=importance["importance"], y=importance["feature"],
                                   orientation="h", marker_color=CHART_COLORS[0]))
            fig.update_layout(title="Feature Importance", height=300, plot_bgcolor="rgba(0,0,0,0)")
            st.plotly_chart(fig, use_container_width=True)
    with tab3:
        perf = view["performance"]
        if not perf.empty:
            line_chart(perf, "timestamp", ["cpu_usage", "memory_usage"], "System Resources")
            line_chart(perf, "timestamp", ["response_time"], "Response Time (ms)", height=280)


# ===========================================================================
# PANEL: Recommendations
# ===========================================================================
def render_recommendations(view: dict):
    state = st.session_state.panel_states["recommendations"]
    f1, f2, f3, f4 = st.columns(4)
    category = f1.selectbox("Category", ["all", *CATEGORY_COLORS], key="rec_category")
    priority = f2.selectbox("Priority", ["all", *PRIORITY_COLORS], key="rec_priority")
    status = f3.selectbox("Status", ["all", "new", "in_progress", "implemented", "dismissed"], key="rec_status")
    sort_by = f4.selectbox("Sort by", list(SORT_KEYS), key="rec_sort")
    view = get_recommendations_view(state, category, priority, status, sort_by)

    cards = view["cards"]
    cols = st.columns(4)
    with cols[0]:
        stat_card("Recommendations", cards["total_recommendations"], CHART_COLORS[0],
                  f"{cards['high_priority']} high priority")
    with cols[1]:
        stat_card("Revenue Impact", f"${cards['revenue_impact_k']}K", RAG_COLORS["green"])
    with cols[2]:
        stat_card("Implementation Rate", f"{cards['implementation_rate_pct']}%", CHART_COLORS[4],
                  f"{cards['implemented']} implemented")
    with cols[3]:
        stat_card("Avg Confidence", f"{cards['average_confidence_pct']}%", CHART_COLORS[1])

    for rec in view["recommendations"]:
        with st.expander(f"{rec.get('title')} · {rec.get('confidence', 0):.0%} confidence"):
            st.markdown(
                f"{badge(rec.get('priority', ''), PRIORITY_COLORS.get(rec.get('priority'), RAG_COLORS['grey']))} "
                f"{badge(rec.get('category', ''), CATEGORY_COLORS.get(rec.get('category'), RAG_COLORS['grey']))} "
                f"{badge(rec.get('status', ''), RAG_COLORS['grey'])}",
                unsafe_allow_html=True,
            )
            st.write(rec.get("description", ""))
            for step in rec.get("action_steps") or []:
                st.markdown(f"{step.get('step')}. {step.get('description')} ({step.get('estimated_effort')} effort)")
    if not view["recommendations"]:
        st.info("No recommendations match the selected filters.")

    dist = view["category_distribution"]
    if not dist.empty:
        fig = px.pie(dist, names="category", values="count", color="category",
                     color_discrete_map=CATEGORY_COLORS, height=320)
        st.plotly_chart(fig, use_container_width=True)


# ===========================================================================
# PANEL: Data Integration
# ===========================================================================
def render_data_integration(view: dict):
    cards = view["cards"]
    cols = st.columns(4)
    with cols[0]:
        stat_card("Sources", cards["total_sources"], CHART_COLORS[0])
    with cols[1]:
        stat_card("Healthy", cards["healthy_sources"], RAG_COLORS["green"])
    with cols[2]:
        stat_card("Avg Quality", f"{cards['avg_quality_score']}%", CHART_COLORS[1])
    with cols[3]:
        stat_card("Uptime", f"{cards['overall_uptime']}%", CHART_COLORS[4])

    for _, row in view["sources"].iterrows():
        error = f" · {row['last_error']}" if row["last_error"] else ""
        st.markdown(
            f"<div style='border-left: 3px solid {row['color']}; padding: 4px 8px; margin: 4px 0;'>"
            f"<b>{row['name']}</b> {badge(row['status'], row['color'])} "
            f"{row['records_count']:,} records · quality {row['data_quality_score']}%{error}</div>",
            unsafe_allow_html=True,
        )


# ===========================================================================
# PANEL: Performance Monitor
# ===========================================================================
def render_performance_monitor(view: dict):
    cards = view["cards"]
    cols = st.columns(4)
    with cols[0]:
        stat_card("System", cards["overall_status"].title(), status_color(cards["overall_status"]))
    with cols[1]:
        memory = cards["memory_usage"]
        stat_card("Memory", f"{memory:.1f} MB" if memory is not None else "N/A", CHART_COLORS[0])
    with cols[2]:
        throughput = cards["throughput"]
        stat_card("Throughput", f"{throughput:,.0f}/s" if throughput is not None else "N/A", CHART_COLORS[1])
    with cols[3]:
        stat_card("Cache Hit Rate", pct(cards["cache_hit_rate"]), CHART_COLORS[4])

    show_flash("load_test")
    st.button("Run Load Test", on_click=run_action,
              args=("load_test", run_load_test, "Load test completed"))
    if "load_test" in st.session_state.results:
        st.json(st.session_state.results["load_test"], expanded=False)

    series = view["series"]
    if not series.empty:
        line_chart(series, "timestamp", ["memory_usage", "cpu_usage"], "Resource Usage")
        line_chart(series, "timestamp", ["throughput"], "Throughput", height=280)
    services = view["services"]
    if not services.empty:
        st.dataframe(services, use_container_width=True, hide_index=True)


# ===========================================================================
# PANEL: ML Auto-Retraining
# ===========================================================================
def render_ml_retraining(view: dict):
    cards = view["cards"]
    cols = st.columns(4)
    with cols[0]:
        stat_card("Models", cards["total_models"], CHART_COLORS[0])
    with cols[1]:
        stat_card("Active Jobs", cards["active_training_jobs"], CHART_COLORS[2])
    with cols[2]:
        stat_card("Success Rate", pct(cards["success_rate"]), RAG_COLORS["green"])
    with cols[3]:
        stat_card("Avg Improvement", pct(cards["avg_improvement"] * 100, 2),
                  improvement_color(cards["avg_improvement"]))

    show_flash("retraining")
    st.button("Trigger Retraining", on_click=run_action,
              args=("retraining", trigger_manual_retraining, "Manual retraining triggered"))

    col1, col2 = st.columns(2)
    with col1:
        chart = view["improvement_chart"]
        if not chart.empty:
            fig = go.Figure(go.Bar(x=chart["name"], y=chart["improvement_pct"], marker_color=CHART_COLORS[1]))
            fig.update_layout(title="Performance Improvement (%)", height=320, plot_bgcolor="rgba(0,0,0,0)")
            st.plotly_chart(fig, use_container_width=True)
    with col2:
        dist = view["status_distribution"]
        if not dist.empty:
            fig = px.pie(dist, names="name", values="value", height=320,
                         color_discrete_sequence=CHART_COLORS)
            st.plotly_chart(fig, use_container_width=True)

    st.subheader("Models")
    st.dataframe(view["models"].drop(columns=["color"]), use_container_width=True, hide_index=True)
    st.subheader("Training Jobs")
    st.dataframe(view["jobs"], use_container_width=True, hide_index=True)


# ===========================================================================
# PANEL: ML Navigation
# ===========================================================================
def render_ml_navigation(view: dict):
    cards = view["cards"]
    cols = st.columns(4)
    with cols[0]:
        stat_card("Model", "Loaded" if cards["loaded"] else "Not loaded",
                  RAG_COLORS["green" if cards["loaded"] else "red"], f"v{cards['version']}")
    with cols[1]:
        stat_card("Accuracy", pct(cards["accuracy_pct"]), CHART_COLORS[0])
    with cols[2]:
        retrain = cards["needs_retraining"]
        stat_card("Retraining", "Needed" if retrain else "Up to date",
                  RAG_COLORS["amber" if retrain else "green"])
    with cols[3]:
        stat_card("Segments", cards["segments"], CHART_COLORS[4])

    show_flash("navigation")
    st.button("Start Training", on_click=run_action,
              args=("navigation", start_navigation_training, "Training job submitted"))
    job = st.session_state.results.get("navigation")
    if job:
        st.info(f"Active job {job['id']}: {job['status']} (started {job['started_at']})")

    importance = view["feature_importance"]
    if not importance.empty:
        fig = go.Figure(go.Bar(x=importance["importance"], y=importance["feature"],
                               orientation="h", marker_color=CHART_COLORS[0]))
        fig.update_layout(title="Feature Importance", height=300, plot_bgcolor="rgba(0,0,0,0)")
        st.plotly_chart(fig, use_container_width=True)

    for prediction in view["predictions"]:
        color = RAG_COLORS[prediction["confidence_band"]]
        confidence = prediction.get("confidence_score") or 0
        st.markdown(
            f"Next page **{prediction.get('predicted_page')}** {badge(f'{confidence:.0%}', color)}",
            unsafe_allow_html=True,
        )
    st.dataframe(view["training_jobs"], use_container_width=True, hide_index=True)


# ===========================================================================
# PANEL: A/B Testing
# ===========================================================================
def render_ab_testing(view: dict):
    cards = view["cards"]
    cols = st.columns(4)
    with cols[0]:
        stat_card("Total Tests", cards["total_tests"], CHART_COLORS[0])
    with cols[1]:
        stat_card("Running", cards["running_tests"], CHART_COLORS[2])
    with cols[2]:
        stat_card("Avg Improvement", pct(cards["average_improvement"]),
                  improvement_color(cards["average_improvement"]))
    with cols[3]:
        stat_card("Testing ROI", pct(cards["roi_from_testing"]), RAG_COLORS["green"])

    by_type = view["performance_by_type"]
    if not by_type.empty and "avg_improvement" in by_type.columns:
        fig = go.Figure(go.Bar(x=by_type["test_type"], y=by_type["avg_improvement"],
                               marker_color=CHART_COLORS[0]))
        fig.update_layout(title="Average Improvement by Test Type (%)", height=320,
                          plot_bgcolor="rgba(0,0,0,0)")
        st.plotly_chart(fig, use_container_width=True)

    wins = view["recent_wins"]
    if not wins.empty:
        st.subheader("Recent Results")
        st.dataframe(wins, use_container_width=True, hide_index=True)
    for opportunity in view["opportunities"]:
        st.markdown(f"- {opportunity}")


# ===========================================================================
# PANEL: ClickUp
# ===========================================================================
def render_clickup(view: dict):
    cards = view["cards"]
    cols = st.columns(4)
    with cols[0]:
        stat_card("Tasks", cards.get("total_tasks", 0), CHART_COLORS[0],
                  f"{cards.get('in_progress_tasks', 0)} in progress")
    with cols[1]:
        stat_card("Completion", pct(cards["completion_rate"]), RAG_COLORS["green"])
    with cols[2]:
        stat_card("Overdue", cards.get("overdue_tasks", 0), RAG_COLORS["red"],
                  f"{cards['overdue_share']:.1f}% of tasks")
    with cols[3]:
        stat_card("Sync Success", pct(cards["sync_success_rate"]), CHART_COLORS[4])

    series = view["time_series"]
    if not series.empty:
        line_chart(series, "date", ["tasks_created", "tasks_completed"], "Task Activity (30 days)")

    col1, col2 = st.columns(2)
    with col1:
        priority = view["priority"]
        if not priority.empty:
            fig = px.pie(priority, names="priority", values="count", height=320,
                         color_discrete_sequence=CHART_COLORS)
            st.plotly_chart(fig, use_container_width=True)
    with col2:
        team = view["team"]
        if not team.empty:
            fig = go.Figure(go.Bar(x=team["user_name"], y=team["productivity_score"],
                                   marker_color=CHART_COLORS[1]))
            fig.update_layout(title="Team Productivity", height=320, plot_bgcolor="rgba(0,0,0,0)")
            st.plotly_chart(fig, use_container_width=True)


# ===========================================================================
# PANEL: Cross-Platform
# ===========================================================================
def render_cross_platform(view: dict):
    stat_card("Cross-Platform Score", view["cards"]["cross_platform_score"], CHART_COLORS[0])

    predictions = view["predictions"]
    if not predictions.empty:
        fig = go.Figure(go.Bar(x=predictions["platform"], y=predictions["predicted_engagement_rate"],
                               marker_color=predictions["color"].tolist()))
        fig.update_layout(title="Predicted Engagement Rate", height=320, plot_bgcolor="rgba(0,0,0,0)")
        st.plotly_chart(fig, use_container_width=True)
    for rec in view["recommendations"]:
        st.markdown(f"- {rec}")

    tab1, tab2, tab3 = st.tabs(["Analyze", "Benchmark", "Universal Optimizations"])
    with tab1:
        with st.form("analyze_form"):
            content = st.text_area("Content")
            hashtags = st.text_input("Hashtags")
            platforms = st.multiselect("Platforms", list(PLATFORM_OPTIONS), format_func=PLATFORM_OPTIONS.get)
            content_type = st.selectbox("Content type", CONTENT_TYPES)
            submitted = st.form_submit_button("Analyze")
        if submitted:
            run_action("analyze", analyze_content, "Analysis complete", content, platforms,
                       hashtags=hashtags, content_type=content_type)
        show_flash("analyze")
        if "analyze" in st.session_state.results:
            st.json(st.session_state.results["analyze"], expanded=False)
    with tab2:
        with st.form("benchmark_form"):
            platforms = st.multiselect("Platforms", list(PLATFORM_OPTIONS), format_func=PLATFORM_OPTIONS.get)
            engagement = st.text_input("Engagement rate", "0.05")
            reach = st.text_input("Reach", "1000")
            conversion = st.text_input("Conversion rate", "0.02")
            submitted = st.form_submit_button("Benchmark")
        if submitted:
            run_action("benchmark", run_benchmark, "Benchmark complete", platforms,
                       engagement_rate=engagement, reach=reach, conversion_rate=conversion)
        show_flash("benchmark")
        if "benchmark" in st.session_state.results:
            st.json(st.session_state.results["benchmark"], expanded=False)
    with tab3:
        with st.form("universal_form"):
            content = st.text_area("Content")
            current = st.multiselect("Current platforms", list(PLATFORM_OPTIONS), format_func=PLATFORM_OPTIONS.get)
            target = st.multiselect("Target platforms", list(PLATFORM_OPTIONS), format_func=PLATFORM_OPTIONS.get)
            submitted = st.form_submit_button("Optimize")
        if submitted:
            run_action("universal", generate_universal_optimizations, "Optimizations generated",
                       content, current, target_platforms=target)
        show_flash("universal")
        if "universal" in st.session_state.results:
            st.json(st.session_state.results["universal"], expanded=False)


RENDERERS = {
    "continuous_learning": render_continuous_learning,
    "tactical_analysis": render_tactical_analysis,
    "recommendations": render_recommendations,
    "data_integration": render_data_integration,
    "performance_monitor": render_performance_monitor,
    "ml_retraining": render_ml_retraining,
    "ml_navigation": render_ml_navigation,
    "ab_testing": render_ab_testing,
    "clickup": render_clickup,
    "cross_platform": render_cross_platform,
}


# ===========================================================================
# Live panel
# ===========================================================================
panel = PANELS[panel_name]
st.title(panel.title)


def refresh_current():
    states = st.session_state.panel_states
    states[panel.name] = refresh_panel(panel, client, states[panel.name])


def live_panel():
    refresh_current()
    state = st.session_state.panel_states[panel.name]
    state_banner(state)
    RENDERERS[panel.name](get_panel_view(panel.name, state))


def on_demand_panel():
    state = st.session_state.panel_states[panel.name]
    if state.data is None:
        refresh_current()
        state = st.session_state.panel_states[panel.name]
    label = "Run Demo Analysis" if panel.name == "cross_platform" else "Refresh"
    st.button(label, key=f"refresh_{panel.name}", on_click=refresh_current)
    state_banner(state)
    RENDERERS[panel.name](get_panel_view(panel.name, state))


if panel.polls:
    st.fragment(live_panel, run_every=panel.interval_ms / 1000)()
else:
    on_demand_panel()
