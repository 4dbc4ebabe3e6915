"""History diagnostics: advisory checks on a metric's daily series.

The engine accepts any series as-is; these checks only explain why a metric
may show no forecast, no anomalies or no week-over-week insight.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from ..config.catalog import MIN_ANOMALY_POINTS, MIN_FORECAST_POINTS, SEASON_LENGTH, WEEK, get_metric
from ..models.base import SeriesLike, as_array


@dataclass
class ValidationIssue:
    severity: str  # "error", "warning", "info"
    category: str
    message: str
    details: str = ""


@dataclass
class ValidationReport:
    is_valid: bool = True
    issues: list[ValidationIssue] = field(default_factory=list)
    stats: dict = field(default_factory=dict)

    def add(self, severity: str, category: str, message: str, details: str = ""):
        issue = ValidationIssue(severity=severity, category=category, message=message, details=details)
        self.issues.append(issue)
        if severity == "error":
            self.is_valid = False

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "warning"]


def check_history(metric_id: str, series: SeriesLike) -> ValidationReport:
    report = ValidationReport()
    y = as_array(series)
    n = len(y)

    if n < MIN_FORECAST_POINTS:
        report.add(
            "error",
            "sparse_history",
            f"Only {n} data point(s). At least {MIN_FORECAST_POINTS} days are needed to forecast.",
        )
    elif n < 2 * WEEK:
        report.add(
            "warning",
            "sparse_history",
            f"{n} data points. Week-over-week growth insights need {2 * WEEK} days.",
        )

    metric = get_metric(metric_id)
    if metric is not None and metric.model == "seasonal" and n < 2 * SEASON_LENGTH:
        report.add(
            "info",
            "seasonality",
            f"Seasonal model needs {2 * SEASON_LENGTH} days of history; the plain trend will be used.",
        )

    if n > 0:
        if np.isnan(y).any():
            report.add("error", "missing_values", f"{int(np.isnan(y).sum())} missing value(s) in the series.")
        if (y < 0).any():
            report.add("warning", "negative_values", f"{int((y < 0).sum())} negative value(s) in the series.")
        if n >= MIN_ANOMALY_POINTS and np.nanstd(y) == 0:
            report.add("info", "constant", "Series is constant; no anomalies can be detected.")

    report.stats["n_points"] = n
    report.stats["mean"] = float(np.nanmean(y)) if n > 0 else 0.0
    report.stats["std"] = float(np.nanstd(y)) if n > 0 else 0.0
    report.stats["min"] = float(np.nanmin(y)) if n > 0 else 0.0
    report.stats["max"] = float(np.nanmax(y)) if n > 0 else 0.0
    return report
