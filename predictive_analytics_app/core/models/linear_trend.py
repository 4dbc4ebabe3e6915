"""Linear trend: ordinary least squares over day index vs value."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .base import BaseForecaster, SeriesLike, as_array


@dataclass(frozen=True)
class TrendFit:
    slope: float
    intercept: float

    def at(self, x: np.ndarray | float) -> np.ndarray | float:
        return self.slope * x + self.intercept


def linear_regression(series: SeriesLike) -> TrendFit | None:
    """Fit y = slope * x + intercept with x = 0..n-1. None for fewer than 2 points."""
    y = as_array(series)
    n = len(y)
    if n < 2:
        return None

    x = np.arange(n, dtype=float)
    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_xx = (x * x).sum()

    # n >= 2 over distinct indices keeps the denominator positive
    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n
    return TrendFit(slope=float(slope), intercept=float(intercept))


class LinearTrendForecaster(BaseForecaster):
    name = "Linear Trend"
    model_id = "linear_regression"

    def __init__(self):
        self._fit: TrendFit | None = None
        self._n_train: int = 0
        self._fitted = False

    def fit(self, y_train: SeriesLike) -> None:
        y = as_array(y_train)
        self._n_train = len(y)
        self._fit = linear_regression(y)
        self._fitted = True

    def predict(self, horizon: int) -> np.ndarray:
        if not self._fitted:
            raise RuntimeError("Model not fitted. Call fit() first.")
        if self._fit is None:
            return np.array([], dtype=float)

        steps = np.arange(1, horizon + 1)
        return self._fit.at(self._n_train + steps)

    def get_params(self) -> dict:
        if self._fit is None:
            return {}
        return {
            "slope": round(self._fit.slope, 4),
            "intercept": round(self._fit.intercept, 2),
        }

    def summary(self) -> str:
        if self._fit is None:
            return "Linear Trend: not enough history."
        return f"Linear Trend: slope={self._fit.slope:.4f}/day, intercept={self._fit.intercept:.2f}."
