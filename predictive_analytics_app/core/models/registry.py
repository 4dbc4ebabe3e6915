"""Model registry: instantiate models by id and produce day-ahead forecasts."""

from __future__ import annotations

import logging

import numpy as np

from ..config.catalog import DEFAULT_MODEL_ID, MIN_FORECAST_POINTS
from .base import BaseForecaster, SeriesLike, as_array
from .exponential_smoothing import ExponentialSmoothingForecaster
from .linear_trend import LinearTrendForecaster
from .moving_average import MovingAverageForecaster
from .polynomial import PolynomialForecaster
from .seasonal import SeasonalForecaster

logger = logging.getLogger(__name__)


MODEL_REGISTRY: dict[str, type[BaseForecaster]] = {
    "linear_regression": LinearTrendForecaster,
    "exponential_smoothing": ExponentialSmoothingForecaster,
    "moving_average": MovingAverageForecaster,
    "seasonal": SeasonalForecaster,
    "polynomial": PolynomialForecaster,
}


def get_available_models() -> list[str]:
    return list(MODEL_REGISTRY.keys())


def resolve_model_id(model_id: str) -> str:
    """Map a requested model id onto a registered one; unknown ids use linear regression."""
    if model_id in MODEL_REGISTRY:
        return model_id
    logger.debug("Unknown model %r, falling back to %s", model_id, DEFAULT_MODEL_ID)
    return DEFAULT_MODEL_ID


def create_model(model_id: str, **kwargs) -> BaseForecaster:
    """Create a model instance by id, defaulting to the linear trend."""
    cls = MODEL_REGISTRY[resolve_model_id(model_id)]
    return cls(**kwargs)


def round_forecast(values: np.ndarray) -> list[float]:
    """Clamp at zero and round half up to 2 decimals."""
    clamped = np.maximum(np.asarray(values, dtype=float), 0.0)
    rounded = np.floor(clamped * 100 + 0.5) / 100
    return [float(v) for v in rounded]


def forecast_next_days(series: SeriesLike, model_id: str, days: int = 7) -> list[float]:
    """Forecast the next `days` values of a daily series with the given model.

    Returns an empty list when the history has fewer than 3 points or the
    horizon is not positive.
    """
    y = as_array(series)
    if len(y) < MIN_FORECAST_POINTS or days <= 0:
        logger.debug("Skipping forecast: %d points, horizon %d", len(y), days)
        return []

    model = create_model(model_id)
    model.fit(y)
    return round_forecast(model.predict(days))
