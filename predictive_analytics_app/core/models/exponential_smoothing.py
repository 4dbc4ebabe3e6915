"""Single exponential smoothing with a one-step trend extrapolation."""

from __future__ import annotations

import numpy as np
import pandas as pd

from ..config.catalog import DEFAULT_ALPHA
from .base import BaseForecaster, SeriesLike, as_array


def exponential_smoothing(series: SeriesLike, alpha: float = DEFAULT_ALPHA) -> list[float]:
    """Exponentially weighted smoothing: s[k] = alpha * y[k] + (1 - alpha) * s[k-1].

    Series with fewer than two points are returned unchanged.
    """
    y = as_array(series)
    if len(y) < 2:
        return [float(v) for v in y]

    return pd.Series(y).ewm(alpha=alpha, adjust=False).mean().tolist()


class ExponentialSmoothingForecaster(BaseForecaster):
    name = "Exponential Smoothing"
    model_id = "exponential_smoothing"

    def __init__(self, alpha: float = DEFAULT_ALPHA):
        self.alpha = alpha
        self._level: float = 0.0
        self._trend: float = 0.0
        self._fitted = False
        self._usable = False

    def fit(self, y_train: SeriesLike) -> None:
        smoothed = exponential_smoothing(y_train, self.alpha)
        self._fitted = True
        self._usable = len(smoothed) >= 2
        if self._usable:
            self._level = smoothed[-1]
            self._trend = smoothed[-1] - smoothed[-2]

    def predict(self, horizon: int) -> np.ndarray:
        if not self._fitted:
            raise RuntimeError("Model not fitted.")
        if not self._usable:
            return np.array([], dtype=float)

        steps = np.arange(1, horizon + 1)
        return self._level + self._trend * steps

    def get_params(self) -> dict:
        return {
            "alpha": self.alpha,
            "level": round(self._level, 2),
            "trend": round(self._trend, 4),
        }

    def summary(self) -> str:
        return (
            f"Exponential Smoothing (alpha={self.alpha}): "
            f"level={self._level:.2f}, trend={self._trend:.4f}/day."
        )
