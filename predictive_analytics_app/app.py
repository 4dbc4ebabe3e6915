"""Predictive Analytics Dashboard - Main Entry Point.

Run with: streamlit run app.py
"""

import logging

import streamlit as st

st.set_page_config(
    page_title="Predictive Analytics",
    page_icon="crystal_ball",
    layout="wide",
    initial_sidebar_state="expanded",
)

from ui.session import init_session_state
from ui.layout import pipeline_progress_sidebar

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Initialize session state
init_session_state()

# Define pages
pages = {
    "Data": [
        st.Page("pages/1_data_upload.py", title="History Upload", icon=":material/upload_file:"),
    ],
    "Analytics": [
        st.Page("pages/2_predictions.py", title="Predictions", icon=":material/trending_up:"),
    ],
    "Results": [
        st.Page("pages/3_export.py", title="Export", icon=":material/download:"),
    ],
}

# Navigation
pg = st.navigation(pages)

# Sidebar: pipeline progress
pipeline_progress_sidebar()

# Sidebar: app info
with st.sidebar:
    st.divider()
    st.caption("Predictive Analytics v1.0")
    st.caption("Daily forecasts, anomaly detection and insights for platform activity.")

# Run the selected page
pg.run()
