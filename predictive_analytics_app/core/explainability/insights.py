"""Rule-based insight messages from history, forecast and anomalies."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np
from statsmodels.tsa.stattools import acf

from ..config.catalog import (
    GROWTH_THRESHOLD_PCT,
    INSIGHT_CONFIDENCE,
    PATTERN_ACF_THRESHOLD,
    PATTERN_MIN_POINTS,
    SEASON_LENGTH,
    WEEK,
)
from ..eda.anomalies import Anomaly
from ..models.base import SeriesLike, as_array
from ..models.seasonal import seasonal_decomposition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Insight:
    type: str
    message: str
    confidence: float
    action: str | None = None


def _week_over_week(history: np.ndarray) -> Insight | None:
    # Needs two full weeks and a non-zero earlier week to compare against
    if len(history) < 2 * WEEK:
        return None
    recent_avg = history[-WEEK:].mean()
    old_avg = history[-2 * WEEK:-WEEK].mean()
    if old_avg == 0:
        return None

    change = (recent_avg - old_avg) / old_avg * 100
    if change > GROWTH_THRESHOLD_PCT:
        return Insight(
            type="growth",
            message=f"Strong growth detected: {change:.1f}% increase over last week",
            confidence=INSIGHT_CONFIDENCE["growth"],
            action="Consider scaling infrastructure to handle increased load",
        )
    if change < -GROWTH_THRESHOLD_PCT:
        return Insight(
            type="decline",
            message=f"Activity decline: {abs(change):.1f}% decrease detected",
            confidence=INSIGHT_CONFIDENCE["decline"],
            action="Review user engagement strategies",
        )
    return None


def _anomaly_summary(anomalies: list[Anomaly]) -> Insight | None:
    if not anomalies:
        return None
    count = len(anomalies)
    noun = "anomaly" if count == 1 else "anomalies"
    return Insight(
        type="anomaly",
        message=f"{count} {noun} detected in recent activity",
        confidence=INSIGHT_CONFIDENCE["anomaly"],
        action="Investigate unusual patterns or data quality issues",
    )


def _forecast_outlook(history: np.ndarray, forecast: np.ndarray) -> Insight | None:
    if len(forecast) == 0:
        return None

    avg_prediction = float(forecast.mean())
    expected = math.floor(avg_prediction + 0.5)
    recent_avg = float(history[-WEEK:].mean()) if len(history) > 0 else 0.0

    if recent_avg != 0:
        change = (avg_prediction - recent_avg) / recent_avg * 100
        sign = "+" if change > 0 else ""
        message = f"{len(forecast)}-day forecast: {sign}{change:.1f}% change expected"
    else:
        message = f"{len(forecast)}-day forecast: no recent activity to compare against"

    return Insight(
        type="forecast",
        message=message,
        confidence=INSIGHT_CONFIDENCE["forecast"],
        action=f"Expected average: {expected} per day",
    )


def _weekly_pattern(history: np.ndarray) -> Insight | None:
    if len(history) < PATTERN_MIN_POINTS or history.std() == 0:
        return None

    lag_corr = float(acf(history, nlags=SEASON_LENGTH, fft=True)[SEASON_LENGTH])
    if lag_corr <= PATTERN_ACF_THRESHOLD:
        return None

    phase_means = seasonal_decomposition(history, SEASON_LENGTH)
    peak = int(np.argmax(phase_means))
    return Insight(
        type="pattern",
        message=(
            f"Weekly pattern identified: lag-{SEASON_LENGTH} autocorrelation {lag_corr:.2f}, "
            f"activity peaks on day {peak + 1} of the cycle"
        ),
        confidence=INSIGHT_CONFIDENCE["pattern"],
        action="Schedule maintenance and batch jobs away from the weekly peak",
    )


def generate_insights(
    history: SeriesLike,
    forecast: SeriesLike,
    anomalies: list[Anomaly],
    detect_patterns: bool = False,
) -> list[Insight]:
    """Build the insight list for one metric.

    Rules fire independently, in this order:
    growth/decline (week over week, needs 14+ points), anomaly count, forecast
    outlook (whenever a forecast exists) and, when `detect_patterns` is set,
    the weekly pattern rule.
    """
    h = as_array(history)
    f = as_array(forecast)

    candidates = [
        _week_over_week(h),
        _anomaly_summary(anomalies),
        _forecast_outlook(h, f),
    ]
    if detect_patterns:
        candidates.append(_weekly_pattern(h))

    insights = [c for c in candidates if c is not None]
    logger.debug("Generated %d insight(s) from %d points", len(insights), len(h))
    return insights
