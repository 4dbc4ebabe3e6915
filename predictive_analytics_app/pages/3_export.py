"""Page 3: Export forecasts, anomalies and insights."""

import streamlit as st

from ui.layout import page_header
from ui.session import require_stage, log_action, PREDICTIONS_RUN
from core.export.csv_export import export_predictions_csv, predictions_to_frame
from core.export.excel_report import create_predictions_workbook

page_header("Export", "Download the latest predictions.")

if not require_stage(PREDICTIONS_RUN, "Please generate predictions first."):
    st.stop()

predictions = st.session_state["predictions"]

st.dataframe(predictions_to_frame(predictions), use_container_width=True)

col1, col2 = st.columns(2)
with col1:
    if st.download_button(
        "Download CSV",
        data=export_predictions_csv(predictions),
        file_name="predictions.csv",
        mime="text/csv",
    ):
        log_action("Exported predictions CSV")
with col2:
    if st.download_button(
        "Download Excel Report",
        data=create_predictions_workbook(predictions),
        file_name="predictions.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ):
        log_action("Exported predictions workbook")

with st.expander("Run Log"):
    for entry in st.session_state.get("run_log", []):
        st.text(f"{entry['timestamp'][:19]}  {entry['message']}")
