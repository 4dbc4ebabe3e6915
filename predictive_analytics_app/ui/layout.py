"""Reusable layout helpers for Streamlit pages."""

from __future__ import annotations

import streamlit as st

from core.config.catalog import MetricDescriptor, get_insight_type
from core.explainability.insights import Insight
from core.pipeline import MetricPrediction

from .charts import plot_sparkline
from .session import STAGES, STAGE_LABELS, is_stage_complete, reset_pipeline


def page_header(title: str, description: str = ""):
    """Render a standardized page header."""
    st.title(title)
    if description:
        st.caption(description)
    st.divider()


def pipeline_progress_sidebar():
    """Show pipeline progress in the sidebar."""
    with st.sidebar:
        st.subheader("Pipeline Progress")
        for stage in STAGES:
            label = STAGE_LABELS.get(stage, stage)
            icon = "+" if is_stage_complete(stage) else " "
            st.text(f"[{icon}] {label}")

        st.divider()
        if st.button("Reset", type="secondary"):
            reset_pipeline()
            st.rerun()


def metric_card(metric: MetricDescriptor, prediction: MetricPrediction):
    """Current value, forecast average and accuracy label for one metric."""
    with st.container(border=True):
        st.markdown(f"**{metric.name}**")
        st.caption(metric.description)

        if not prediction.has_forecast:
            st.info("Not enough history to forecast.")
            return

        change = prediction.change_percent
        col1, col2, col3 = st.columns(3)
        col1.metric("Current", f"{prediction.latest_value:.0f}")
        col2.metric(
            "Forecast Avg",
            f"{prediction.forecast_average:.0f}",
            delta=f"{change:.1f}%" if change is not None else None,
        )
        col3.metric("Accuracy", f"{prediction.accuracy}%")

        st.plotly_chart(
            plot_sparkline(prediction, metric.color),
            use_container_width=True,
            config={"displayModeBar": False},
            key=f"spark_{metric.id}",
        )

        if prediction.anomalies:
            st.warning(f"{len(prediction.anomalies)} anomalies detected")


def insight_list(insights: list[Insight]):
    """Render insights with their type title and confidence."""
    if not insights:
        st.info("No insights for this metric yet.")
        return

    for insight in insights:
        meta = get_insight_type(insight.type)
        with st.container(border=True):
            st.markdown(f"**{meta.title}** · {insight.confidence * 100:.0f}% confidence")
            st.write(insight.message)
            if insight.action:
                st.caption(insight.action)
