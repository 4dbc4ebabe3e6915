"""Quadratic least-squares trend with a linear fallback."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .base import BaseForecaster, SeriesLike, as_array
from .linear_trend import TrendFit, linear_regression


@dataclass(frozen=True)
class QuadraticFit:
    a: float
    b: float
    c: float

    def at(self, x: np.ndarray | float) -> np.ndarray | float:
        return self.a * x * x + self.b * x + self.c


PolynomialFit = QuadraticFit | TrendFit


def polynomial_regression(series: SeriesLike) -> PolynomialFit | None:
    """Fit y = a*x^2 + b*x + c over x = 0..n-1 through the normal equations.

    Returns None for fewer than 3 points. A singular system falls back to the
    linear trend and returns its TrendFit instead.
    """
    y = as_array(series)
    n = len(y)
    if n < 3:
        return None

    x = np.arange(n, dtype=float)
    sx = float(x.sum())
    sx2 = float((x ** 2).sum())
    sx3 = float((x ** 3).sum())
    sx4 = float((x ** 4).sum())
    sy = float(y.sum())
    sxy = float((x * y).sum())
    sx2y = float((x ** 2 * y).sum())

    matrix = np.array([
        [sx4, sx3, sx2],
        [sx3, sx2, sx],
        [sx2, sx, float(n)],
    ])
    rhs = np.array([sx2y, sxy, sy])

    if np.linalg.det(matrix) == 0:
        return linear_regression(y)

    a, b, c = (float(v) for v in np.linalg.solve(matrix, rhs))
    return QuadraticFit(a=a, b=b, c=c)


class PolynomialForecaster(BaseForecaster):
    name = "Polynomial Trend"
    model_id = "polynomial"

    def __init__(self):
        self._fit: PolynomialFit | None = None
        self._n_train: int = 0
        self._fitted = False

    def fit(self, y_train: SeriesLike) -> None:
        y = as_array(y_train)
        self._n_train = len(y)
        self._fit = polynomial_regression(y)
        self._fitted = True

    def predict(self, horizon: int) -> np.ndarray:
        if not self._fitted:
            raise RuntimeError("Model not fitted.")
        if self._fit is None:
            return np.array([], dtype=float)

        # QuadraticFit and TrendFit both evaluate at the day index
        x = (self._n_train + np.arange(1, horizon + 1)).astype(float)
        return self._fit.at(x)

    def get_params(self) -> dict:
        if isinstance(self._fit, QuadraticFit):
            return {"a": round(self._fit.a, 6), "b": round(self._fit.b, 4), "c": round(self._fit.c, 2)}
        if isinstance(self._fit, TrendFit):
            return {"slope": round(self._fit.slope, 4), "intercept": round(self._fit.intercept, 2), "fallback": "linear"}
        return {}

    def summary(self) -> str:
        if isinstance(self._fit, QuadraticFit):
            return f"Polynomial Trend: y = {self._fit.a:.4f}x^2 + {self._fit.b:.4f}x + {self._fit.c:.2f}."
        if isinstance(self._fit, TrendFit):
            return "Polynomial Trend: degenerate quadratic, using linear trend."
        return "Polynomial Trend: not enough history."
