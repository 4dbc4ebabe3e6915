"""Plotly chart builders for the predictive analytics dashboard."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from core.pipeline import MetricPrediction, format_prediction_data

# Consistent color palette
COLORS = {
    "blue": "#3b82f6",
    "purple": "#a855f7",
    "emerald": "#10b981",
    "green": "#22c55e",
    "amber": "#f59e0b",
    "indigo": "#6366f1",
    "red": "#ef4444",
}


def plot_prediction(
    prediction: MetricPrediction,
    dates: pd.Series | None = None,
    title: str = "Forecast",
    color: str = "blue",
    show_ci: bool = True,
) -> go.Figure:
    """History, dashed forecast, confidence ribbon and anomaly markers."""
    chart = format_prediction_data(prediction.historical, prediction.forecast, dates)
    labels = chart["labels"]
    history_ds, forecast_ds = chart["datasets"]
    line_color = COLORS.get(color, COLORS["blue"])

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=labels,
        y=history_ds["data"],
        name=history_ds["label"],
        line=dict(color=line_color, width=2),
    ))
    fig.add_trace(go.Scatter(
        x=labels,
        y=forecast_ds["data"],
        name=forecast_ds["label"],
        line=dict(color=COLORS["purple"], width=2, dash="dash"),
    ))

    n_hist = len(prediction.historical)
    if show_ci and prediction.confidence:
        future = labels[n_hist:]
        upper = [b.upper for b in prediction.confidence]
        lower = [b.lower for b in prediction.confidence]
        fig.add_trace(go.Scatter(
            x=list(future) + list(future[::-1]),
            y=upper + lower[::-1],
            fill="toself",
            fillcolor=f"rgba({_hex_to_rgb(COLORS['purple'])}, 0.15)",
            line=dict(color="rgba(255,255,255,0)"),
            name="Confidence Band",
            showlegend=False,
        ))

    if prediction.anomalies:
        fig.add_trace(go.Scatter(
            x=[labels[a.index] for a in prediction.anomalies],
            y=[a.value for a in prediction.anomalies],
            mode="markers",
            name="Anomalies",
            marker=dict(
                size=11,
                symbol="x",
                color=[COLORS["red"] if a.severity == "critical" else COLORS["amber"] for a in prediction.anomalies],
            ),
        ))

    fig.update_layout(
        title=title,
        xaxis_title="Date" if dates is not None else "Day",
        yaxis_title="Value",
        hovermode="x unified",
        template="plotly_white",
        height=450,
    )
    return fig


def plot_sparkline(prediction: MetricPrediction, color: str = "blue") -> go.Figure:
    """Mini bar chart: last 7 days plus the first 3 forecast days."""
    recent = prediction.historical[-7:]
    ahead = prediction.forecast[:3]
    base = COLORS.get(color, COLORS["blue"])

    fig = go.Figure(go.Bar(
        y=recent + ahead,
        marker_color=[base] * len(recent) + [COLORS["purple"]] * len(ahead),
    ))
    fig.update_layout(
        height=80,
        margin=dict(l=0, r=0, t=0, b=0),
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        showlegend=False,
        template="plotly_white",
    )
    return fig


def _hex_to_rgb(hex_color: str) -> str:
    """Convert hex color to rgb string for rgba()."""
    hex_color = hex_color.lstrip("#")
    r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
    return f"{r},{g},{b}"
