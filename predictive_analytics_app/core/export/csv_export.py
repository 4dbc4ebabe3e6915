"""CSV export utilities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict
from io import BytesIO

import pandas as pd

from ..pipeline import MetricPrediction


def predictions_to_frame(predictions: Mapping[str, MetricPrediction]) -> pd.DataFrame:
    """One row per metric and forecast day, with the confidence band."""
    rows = []
    for metric_id, pred in predictions.items():
        for step, band in enumerate(pred.confidence, start=1):
            rows.append({
                "metric": metric_id,
                "model": pred.model,
                "day": step,
                "forecast": band.value,
                "lower": round(band.lower, 2),
                "upper": round(band.upper, 2),
            })
    return pd.DataFrame(rows, columns=["metric", "model", "day", "forecast", "lower", "upper"])


def anomalies_frame(predictions: Mapping[str, MetricPrediction]) -> pd.DataFrame:
    rows = [
        {"metric": metric_id, **asdict(a)}
        for metric_id, pred in predictions.items()
        for a in pred.anomalies
    ]
    return pd.DataFrame(rows, columns=["metric", "index", "value", "z_score", "severity", "type"])


def insights_frame(predictions: Mapping[str, MetricPrediction]) -> pd.DataFrame:
    rows = [
        {"metric": metric_id, **asdict(i)}
        for metric_id, pred in predictions.items()
        for i in pred.insights
    ]
    return pd.DataFrame(rows, columns=["metric", "type", "message", "confidence", "action"])


def export_predictions_csv(predictions: Mapping[str, MetricPrediction]) -> BytesIO:
    """Export forecasts with bands to CSV."""
    output = BytesIO()
    predictions_to_frame(predictions).to_csv(output, index=False)
    output.seek(0)
    return output
