"""Page 1: Load daily metric history from a file or the sample generator."""

import streamlit as st
import pandas as pd

from ui.layout import page_header
from ui.session import store_history
from core.config.catalog import get_prediction_metrics
from core.data.ingestion import load_file, load_frame
from core.data.sample import generate_sample_history
from core.data.validation import check_history

page_header(
    "History Upload",
    "Load one value per day for each metric, oldest first. JSON payloads use the "
    "predictions endpoint shape: {\"historical\": {metric_id: [...]}}.",
)

# --- Template ---
with st.expander("Expected Format"):
    metric_ids = [m.id for m in get_prediction_metrics()]
    template_df = pd.DataFrame({"date": pd.date_range("2026-01-01", periods=3, freq="D")})
    for mid in metric_ids:
        template_df[mid] = [10, 12, 11]
    st.dataframe(template_df, use_container_width=True)

# --- Source ---
st.subheader("1. Choose a Source")
col1, col2 = st.columns(2)
with col1:
    uploaded_file = st.file_uploader(
        "Upload JSON, Excel (.xlsx) or CSV",
        type=["json", "xlsx", "csv"],
    )
with col2:
    n_days = st.slider("Sample days", min_value=14, max_value=180, value=60)
    use_sample = st.button("Use Sample Data")

# The uploader keeps its file across reruns; only a new file replaces the history
if uploaded_file is not None and uploaded_file.file_id != st.session_state.get("history_source"):
    try:
        bundle = load_file(uploaded_file, uploaded_file.name)
    except Exception as e:
        st.error(f"Error loading file: {e}")
        st.stop()
    store_history(bundle, source_key=uploaded_file.file_id)
elif use_sample:
    store_history(load_frame(generate_sample_history(n_days=n_days), source_name=f"sample ({n_days} days)"))

# --- Diagnostics ---
bundle = st.session_state.get("history")
if bundle is not None:
    st.subheader("2. History Diagnostics")
    st.caption(f"Source: {bundle.source_name}")

    rows = []
    for metric_id in bundle.metric_ids:
        report = check_history(metric_id, bundle.get(metric_id))
        rows.append({
            "Metric": metric_id,
            "Days": report.stats["n_points"],
            "Mean": round(report.stats["mean"], 1),
            "Min": report.stats["min"],
            "Max": report.stats["max"],
            "Issues": "; ".join(i.message for i in report.issues) or "None",
        })
    st.dataframe(pd.DataFrame(rows), use_container_width=True)

    if bundle.dates is not None:
        st.line_chart(pd.DataFrame(bundle.series, index=bundle.dates))
    else:
        st.line_chart(pd.DataFrame({k: pd.Series(v) for k, v in bundle.series.items()}))
