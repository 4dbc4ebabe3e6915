"""Weekly seasonal averages combined multiplicatively with a linear trend."""

from __future__ import annotations

import numpy as np

from ..config.catalog import SEASON_LENGTH
from .base import BaseForecaster, SeriesLike, as_array
from .linear_trend import TrendFit, linear_regression


def seasonal_decomposition(series: SeriesLike, season_length: int = SEASON_LENGTH) -> list[float]:
    """Average every observation sharing a phase of the cycle.

    Returns one average per phase 0..season_length-1. Series shorter than two
    full cycles are returned unchanged.
    """
    y = as_array(series)
    if len(y) < 2 * season_length:
        return [float(v) for v in y]

    phases = np.arange(len(y)) % season_length
    return [float(y[phases == p].mean()) for p in range(season_length)]


class SeasonalForecaster(BaseForecaster):
    name = "Seasonal Patterns"
    model_id = "seasonal"

    def __init__(self, season_length: int = SEASON_LENGTH):
        self.season_length = season_length
        self._trend: TrendFit | None = None
        self._factors: np.ndarray = np.ones(season_length)
        self._n_train: int = 0
        self._fitted = False

    def fit(self, y_train: SeriesLike) -> None:
        y = as_array(y_train)
        self._n_train = len(y)
        self._trend = linear_regression(y)
        self._fitted = True

        self._factors = np.ones(self.season_length)
        if len(y) < 2 * self.season_length:
            # No full cycles to average: plain trend
            return
        overall_mean = y.mean()
        if overall_mean == 0:
            return
        self._factors = np.asarray(seasonal_decomposition(y, self.season_length)) / overall_mean

    def predict(self, horizon: int) -> np.ndarray:
        if not self._fitted:
            raise RuntimeError("Model not fitted.")
        if self._trend is None:
            return np.array([], dtype=float)

        x = self._n_train + np.arange(1, horizon + 1)
        phases = (x - 1) % self.season_length
        return self._trend.at(x) * self._factors[phases]

    def get_params(self) -> dict:
        return {
            "season_length": self.season_length,
            "seasonal_factors": [round(float(f), 3) for f in self._factors],
        }

    def summary(self) -> str:
        peak = int(np.argmax(self._factors))
        return (
            f"Seasonal Patterns (period={self.season_length}): "
            f"strongest phase={peak}, factor={self._factors[peak]:.2f}."
        )
