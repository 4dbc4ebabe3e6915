"""Abstract base class for all forecasting models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np
import pandas as pd

SeriesLike = Sequence[float] | np.ndarray | pd.Series


def as_array(series: SeriesLike) -> np.ndarray:
    """Return the series as a 1-D float array, positional order preserved."""
    if isinstance(series, pd.Series):
        return series.to_numpy(dtype=float)
    return np.asarray(series, dtype=float).reshape(-1)


class BaseForecaster(ABC):
    """Contract that every forecasting model must implement."""

    name: str = "BaseForecaster"
    model_id: str = ""

    @abstractmethod
    def fit(self, y_train: SeriesLike) -> None:
        """Fit the model on a daily history (oldest first, index = day offset)."""

    @abstractmethod
    def predict(self, horizon: int) -> np.ndarray:
        """Raw predictions for steps 1..horizon, before clamping and rounding.

        Returns an empty array when the fitted history was too short for the model.
        """

    @abstractmethod
    def get_params(self) -> dict:
        """Return model parameters as a dictionary."""

    def summary(self) -> str:
        """Return a human-readable summary of the fitted model."""
        return f"{self.name}: {self.get_params()}"
