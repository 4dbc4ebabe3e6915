"""Reusable Streamlit widget patterns."""

from __future__ import annotations

import streamlit as st

from core.config.catalog import ANOMALY_RULES, get_prediction_metrics, get_prediction_models


def metric_selector(key: str = "selected_metric") -> str:
    metrics = get_prediction_metrics()
    ids = [m.id for m in metrics]
    names = {m.id: m.name for m in metrics}
    # Initial value comes from session state (see init_session_state)
    return st.selectbox(
        "Metric",
        ids,
        format_func=lambda mid: names[mid],
        key=key,
    )


def model_selector(default_model: str, key: str) -> str:
    """Model picker; defaults to the metric's catalog model."""
    models = get_prediction_models()
    ids = [m.id for m in models]
    labels = {m.id: f"{m.name} ({m.accuracy}%)" for m in models}
    return st.selectbox(
        "Prediction Model",
        ids,
        index=ids.index(default_model) if default_model in ids else 0,
        format_func=lambda mid: labels[mid],
        key=key,
        help="Accuracy figures are static labels for each model.",
    )


def analysis_settings_panel() -> tuple[float, str, bool]:
    """Confidence level, anomaly rule and pattern detection settings."""
    with st.expander("Analysis Settings", expanded=False):
        confidence = st.radio(
            "Confidence Level",
            [0.95, 0.99],
            format_func=lambda c: f"{c:.0%}",
            horizontal=True,
            key="confidence_level",
        )
        method = st.selectbox(
            "Anomaly Rule",
            list(ANOMALY_RULES.keys()),
            format_func=lambda m: ANOMALY_RULES[m].description,
            key="anomaly_method",
        )
        patterns = st.checkbox(
            "Detect weekly patterns",
            key="detect_patterns",
            help="Adds a pattern insight when the history repeats every 7 days.",
        )
    return confidence, method, patterns
