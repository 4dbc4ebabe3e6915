"""Per-metric prediction pipeline: forecast, anomalies, bands and insights."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from .config.catalog import MetricDescriptor, get_metric, get_model_accuracy, get_prediction_metrics
from .eda.anomalies import Anomaly, detect_anomalies
from .explainability.insights import Insight, generate_insights
from .models.base import SeriesLike, as_array
from .models.confidence import ConfidenceBand, calculate_confidence_interval
from .models.registry import forecast_next_days, resolve_model_id

logger = logging.getLogger(__name__)


@dataclass
class MetricPrediction:
    metric_id: str
    model: str
    historical: list[float]
    forecast: list[float]
    confidence: list[ConfidenceBand] = field(default_factory=list)
    anomalies: list[Anomaly] = field(default_factory=list)
    insights: list[Insight] = field(default_factory=list)
    accuracy: int = 0

    @property
    def latest_value(self) -> float | None:
        return self.historical[-1] if self.historical else None

    @property
    def forecast_average(self) -> float | None:
        return float(np.mean(self.forecast)) if self.forecast else None

    @property
    def change_percent(self) -> float | None:
        """Forecast mean against the latest observation, in percent."""
        latest = self.latest_value
        avg = self.forecast_average
        if latest is None or avg is None or latest == 0:
            return None
        return (avg - latest) / latest * 100

    @property
    def has_forecast(self) -> bool:
        return len(self.forecast) > 0


def process_metric(
    metric: MetricDescriptor | str,
    history: SeriesLike,
    model: str | None = None,
    forecast_days: int | None = None,
    confidence: float = 0.95,
    anomaly_method: str = "z_score",
    detect_patterns: bool = False,
) -> MetricPrediction:
    """Run the full pipeline for one metric.

    `metric` is a catalog descriptor or id; model and horizon default to the
    metric's catalog settings (linear regression and 7 days for ids outside
    the catalog).
    """
    descriptor = get_metric(metric) if isinstance(metric, str) else metric
    metric_id = metric if isinstance(metric, str) else metric.id

    requested = model or (descriptor.model if descriptor else "linear_regression")
    days = forecast_days if forecast_days is not None else (descriptor.forecast_days if descriptor else 7)
    model_id = resolve_model_id(requested)

    y = as_array(history)
    forecast = forecast_next_days(y, model_id, days)
    anomalies = detect_anomalies(y, method=anomaly_method)
    bands = calculate_confidence_interval(forecast, confidence)
    insights = generate_insights(y, forecast, anomalies, detect_patterns=detect_patterns)

    if not forecast:
        logger.info("No forecast for %s: %d historical point(s)", metric_id, len(y))

    return MetricPrediction(
        metric_id=metric_id,
        model=model_id,
        historical=[float(v) for v in y],
        forecast=forecast,
        confidence=bands,
        anomalies=anomalies,
        insights=insights,
        accuracy=get_model_accuracy(model_id),
    )


def process_all_metrics(
    historical: Mapping[str, SeriesLike],
    models: Mapping[str, str] | None = None,
    **kwargs,
) -> dict[str, MetricPrediction]:
    """Process every catalog metric; metrics absent from `historical` get an empty history."""
    models = models or {}
    results = {}
    for metric in get_prediction_metrics():
        history = historical.get(metric.id, [])
        results[metric.id] = process_metric(metric, history, model=models.get(metric.id), **kwargs)
    return results


def format_prediction_data(
    historical: SeriesLike,
    forecast: SeriesLike,
    dates: SeriesLike | pd.DatetimeIndex | None = None,
) -> dict:
    """Align history and forecast on one axis for charting.

    The forecast dataset is padded with None over the history and starts at
    the last historical value so the two lines join.
    """
    h = [float(v) for v in as_array(historical)]
    f = [float(v) for v in as_array(forecast)]

    if dates is not None and len(h) > 0:
        history_dates = pd.to_datetime(pd.Series(list(dates))).reset_index(drop=True)
        future = pd.date_range(history_dates.iloc[-1] + pd.Timedelta(days=1), periods=len(f), freq="D")
        labels = list(history_dates) + list(future)
    else:
        labels = list(range(len(h) + len(f)))

    if h:
        forecast_data = [None] * (len(h) - 1) + [h[-1]] + f
    else:
        forecast_data = list(f)

    return {
        "labels": labels,
        "datasets": [
            {"label": "Historical Data", "data": h + [None] * len(f)},
            {"label": "Forecast", "data": forecast_data},
        ],
    }
