"""Page 2: Forecasts, anomalies and insights per metric."""

import streamlit as st

from ui.charts import plot_prediction
from ui.layout import page_header, metric_card, insight_list
from ui.session import require_stage, cached_predictions, store_predictions, DATA_LOADED
from ui.widgets import metric_selector, model_selector, analysis_settings_panel
from core.config.catalog import get_metric, get_prediction_metrics, get_prediction_models
from core.eda.anomalies import anomalies_to_frame
from core.pipeline import process_all_metrics

page_header(
    "Predictive Analytics",
    "Multi-day forecasts with confidence bands, anomaly flags and insights for every metric.",
)

if not require_stage(DATA_LOADED, "Please load metric history first."):
    st.stop()

bundle = st.session_state["history"]

# --- Settings ---
confidence, anomaly_method, detect_patterns = analysis_settings_panel()
selected_metric = metric_selector()
metric = get_metric(selected_metric)
overrides = dict(st.session_state.get("model_overrides", {}))
overrides[selected_metric] = model_selector(
    overrides.get(selected_metric, metric.model),
    key=f"model_{selected_metric}",
)
st.session_state["model_overrides"] = overrides

settings = (tuple(sorted(overrides.items())), confidence, anomaly_method, detect_patterns)
predictions = cached_predictions(settings)
if predictions is None:
    predictions = process_all_metrics(
        bundle.series,
        models=overrides,
        confidence=confidence,
        anomaly_method=anomaly_method,
        detect_patterns=detect_patterns,
    )
    store_predictions(predictions, settings)

# --- Metric cards ---
st.subheader("Metrics")
metrics = get_prediction_metrics()
cols = st.columns(3)
for i, m in enumerate(metrics):
    with cols[i % 3]:
        metric_card(m, predictions[m.id])

# --- Selected metric detail ---
prediction = predictions[selected_metric]
st.subheader(f"{metric.name} Forecast")
if prediction.has_forecast:
    fig = plot_prediction(prediction, bundle.dates, f"{metric.name} ({metric.unit})", color=metric.color)
    st.plotly_chart(fig, use_container_width=True)
else:
    st.info("At least 3 days of history are needed to forecast this metric.")

col1, col2 = st.columns([3, 2])
with col1:
    st.subheader("Insights")
    insight_list(prediction.insights)
with col2:
    st.subheader("Anomalies")
    if prediction.anomalies:
        st.dataframe(anomalies_to_frame(prediction.anomalies, bundle.dates), use_container_width=True)
    else:
        st.caption("No anomalies detected.")

# --- Model catalog ---
with st.expander("Prediction Models"):
    for model in get_prediction_models():
        st.markdown(f"**{model.name}** · {model.accuracy}%")
        st.caption(f"{model.description}. Best for: {', '.join(model.best_for[:2])}")
