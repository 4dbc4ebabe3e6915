"""Anomaly detection over a daily history."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

import numpy as np
import pandas as pd

from ..config.catalog import ANOMALY_RULES, CRITICAL_ZSCORE, MIN_ANOMALY_POINTS, ZSCORE_THRESHOLD
from ..models.base import SeriesLike, as_array

logger = logging.getLogger(__name__)

SPIKE = "spike"
DROP = "drop"
WARNING = "warning"
CRITICAL = "critical"


@dataclass(frozen=True)
class Anomaly:
    index: int
    value: float
    z_score: float
    severity: str  # "warning" or "critical"
    type: str  # "spike" or "drop"


def _population_stats(y: np.ndarray) -> tuple[float, float]:
    return float(y.mean()), float(y.std())


def _z(value: float, mean: float, std: float) -> float:
    return (value - mean) / std if std != 0 else 0.0


def detect_zscore(
    series: SeriesLike,
    threshold: float = ZSCORE_THRESHOLD,
    critical: float = CRITICAL_ZSCORE,
) -> list[Anomaly]:
    """Flag points whose population z-score exceeds the threshold in absolute value.

    Severity is critical only when |z| is strictly above `critical`.
    A constant series has no anomalies.
    """
    y = as_array(series)
    if len(y) < MIN_ANOMALY_POINTS:
        return []

    mean, std = _population_stats(y)
    if std == 0:
        logger.debug("Constant series of %d points, no z-score anomalies", len(y))
        return []

    z = (y - mean) / std
    anomalies = []
    for idx in np.flatnonzero(np.abs(z) > threshold):
        score = float(z[idx])
        anomalies.append(Anomaly(
            index=int(idx),
            value=float(y[idx]),
            z_score=score,
            severity=CRITICAL if abs(score) > critical else WARNING,
            type=SPIKE if score > 0 else DROP,
        ))
    return anomalies


def detect_threshold(
    series: SeriesLike,
    high: float = 1.5,
    low: float = 0.5,
    critical_high: float = 2.0,
    critical_low: float = 0.25,
) -> list[Anomaly]:
    """Flag points above `high` or below `low` times the series mean."""
    y = as_array(series)
    if len(y) < MIN_ANOMALY_POINTS:
        return []

    mean, std = _population_stats(y)
    if mean <= 0:
        return []

    anomalies = []
    for idx, value in enumerate(y):
        ratio = value / mean
        if low <= ratio <= high:
            continue
        is_spike = ratio > high
        is_critical = ratio > critical_high if is_spike else ratio < critical_low
        anomalies.append(Anomaly(
            index=idx,
            value=float(value),
            z_score=_z(float(value), mean, std),
            severity=CRITICAL if is_critical else WARNING,
            type=SPIKE if is_spike else DROP,
        ))
    return anomalies


def detect_rate_of_change(series: SeriesLike, threshold: float = 0.3) -> list[Anomaly]:
    """Flag day-over-day relative changes beyond `threshold`; critical beyond twice that."""
    y = as_array(series)
    if len(y) < MIN_ANOMALY_POINTS:
        return []

    mean, std = _population_stats(y)
    anomalies = []
    for idx in range(1, len(y)):
        previous = y[idx - 1]
        if previous == 0:
            continue
        change = (y[idx] - previous) / abs(previous)
        if abs(change) <= threshold:
            continue
        anomalies.append(Anomaly(
            index=idx,
            value=float(y[idx]),
            z_score=_z(float(y[idx]), mean, std),
            severity=CRITICAL if abs(change) > 2 * threshold else WARNING,
            type=SPIKE if change > 0 else DROP,
        ))
    return anomalies


def detect_anomalies(series: SeriesLike, method: str = "z_score") -> list[Anomaly]:
    """Detect anomalies with one of the catalog rules (z_score, absolute, derivative).

    Unknown methods use the z-score rule.
    """
    rule = ANOMALY_RULES.get(method)
    if rule is None:
        logger.debug("Unknown anomaly method %r, using z_score", method)
        rule = ANOMALY_RULES["z_score"]

    if rule.method == "absolute":
        return detect_threshold(series, high=rule.thresholds["high"], low=rule.thresholds["low"])
    if rule.method == "derivative":
        return detect_rate_of_change(series, threshold=rule.threshold)
    return detect_zscore(series, threshold=rule.threshold)


def anomalies_to_frame(
    anomalies: list[Anomaly],
    dates: pd.Series | None = None,
) -> pd.DataFrame:
    """Tabulate anomalies, optionally with the date of each flagged point."""
    columns = ["index", "value", "z_score", "severity", "type"]
    df = pd.DataFrame([asdict(a) for a in anomalies], columns=columns)
    if dates is not None and len(df) > 0:
        df.insert(0, "date", pd.Series(dates).iloc[df["index"]].to_numpy())
    return df
