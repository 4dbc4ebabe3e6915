"""Trailing moving average and flat forecaster."""

from __future__ import annotations

import numpy as np
import pandas as pd

from ..config.catalog import DEFAULT_WINDOW
from .base import BaseForecaster, SeriesLike, as_array


def moving_average(series: SeriesLike, window: int = DEFAULT_WINDOW) -> list[float]:
    """Trailing mean over `window` points.

    The first window - 1 positions keep their raw value. Series shorter than
    the window are returned unchanged.
    """
    y = as_array(series)
    if len(y) < window:
        return [float(v) for v in y]

    rolled = pd.Series(y).rolling(window).mean().to_numpy()
    rolled[: window - 1] = y[: window - 1]
    return [float(v) for v in rolled]


class MovingAverageForecaster(BaseForecaster):
    name = "Moving Average"
    model_id = "moving_average"

    def __init__(self, window: int = DEFAULT_WINDOW):
        self.window = window
        self._ma_value: float = 0.0
        self._fitted = False
        self._usable = False

    def fit(self, y_train: SeriesLike) -> None:
        smoothed = moving_average(y_train, self.window)
        self._fitted = True
        self._usable = len(smoothed) > 0
        if self._usable:
            # Always divided by the full window, so short histories are damped
            self._ma_value = float(np.sum(smoothed[-self.window:])) / self.window

    def predict(self, horizon: int) -> np.ndarray:
        if not self._fitted:
            raise RuntimeError("Model not fitted.")
        if not self._usable:
            return np.array([], dtype=float)
        return np.full(horizon, self._ma_value)

    def get_params(self) -> dict:
        return {
            "window": self.window,
            "ma_value": round(self._ma_value, 2),
        }

    def summary(self) -> str:
        return f"Moving Average (window={self.window}): MA value={self._ma_value:.2f}."
