"""Session state for the dashboard: loaded history, predictions and settings."""

from __future__ import annotations

import datetime

import streamlit as st

from core.data.ingestion import HistoryBundle
from core.pipeline import MetricPrediction

# Pipeline stages
DATA_LOADED = "data_loaded"
PREDICTIONS_RUN = "predictions_run"

STAGES = [DATA_LOADED, PREDICTIONS_RUN]

STAGE_LABELS = {
    DATA_LOADED: "History Loaded",
    PREDICTIONS_RUN: "Predictions Generated",
}

# Widget-backed keys; the widgets in ui.widgets read their initial values from here
SETTINGS_DEFAULTS = {
    "selected_metric": "document_uploads",
    "confidence_level": 0.95,
    "anomaly_method": "z_score",
    "detect_patterns": False,
}


def init_session_state():
    defaults = {
        "pipeline_stages": {s: False for s in STAGES},
        "history": None,
        "predictions": {},
        "model_overrides": {},
        "history_source": None,
        "prediction_settings": None,
        "run_log": [],
        **SETTINGS_DEFAULTS,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


def set_stage(stage: str, value: bool = True):
    if "pipeline_stages" not in st.session_state:
        st.session_state["pipeline_stages"] = {s: False for s in STAGES}
    st.session_state["pipeline_stages"][stage] = value


def is_stage_complete(stage: str) -> bool:
    return st.session_state.get("pipeline_stages", {}).get(stage, False)


def require_stage(stage: str, message: str | None = None) -> bool:
    """Warn and return False when a prerequisite stage has not run yet."""
    if is_stage_complete(stage):
        return True
    st.warning(message or f"Please complete the '{STAGE_LABELS.get(stage, stage)}' step first.")
    return False


def store_history(bundle: HistoryBundle, source_key: str | None = None) -> bool:
    """Replace the loaded history; predictions from the previous history are dropped.

    `source_key` identifies an uploaded file. The same key seen again on a rerun
    leaves the session untouched and returns False. Loading without a key keeps
    the last key, so a file still sitting in the uploader is not reloaded.
    """
    if source_key is not None and source_key == st.session_state.get("history_source"):
        return False
    st.session_state["history"] = bundle
    if source_key is not None:
        st.session_state["history_source"] = source_key
    st.session_state["predictions"] = {}
    st.session_state["prediction_settings"] = None
    set_stage(DATA_LOADED)
    set_stage(PREDICTIONS_RUN, False)
    log_action(f"Loaded {bundle.source_name or 'history'} ({len(bundle.metric_ids)} metrics)")
    return True


def cached_predictions(settings: tuple) -> dict[str, MetricPrediction] | None:
    """Predictions stored for these settings since the history was last loaded."""
    if settings == st.session_state.get("prediction_settings"):
        return st.session_state.get("predictions")
    return None


def store_predictions(predictions: dict[str, MetricPrediction], settings: tuple):
    st.session_state["predictions"] = predictions
    st.session_state["prediction_settings"] = settings
    set_stage(PREDICTIONS_RUN)
    with_forecast = sum(1 for p in predictions.values() if p.has_forecast)
    log_action(f"Computed predictions: {with_forecast}/{len(predictions)} metrics with a forecast")


def reset_pipeline():
    """Clear history, predictions and settings."""
    for key in list(st.session_state.keys()):
        del st.session_state[key]
    init_session_state()


def log_action(message: str):
    st.session_state.setdefault("run_log", []).append(
        {"timestamp": datetime.datetime.now().isoformat(), "message": message}
    )
