"""Confidence bands around a forecast."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

from ..config.catalog import CONFIDENCE_Z
from .base import SeriesLike, as_array


@dataclass(frozen=True)
class ConfidenceBand:
    value: float
    lower: float
    upper: float


def z_for_level(confidence: float) -> float:
    # Only 95% is special-cased; every other level is treated as 99%
    if confidence == 0.95:
        return CONFIDENCE_Z[0.95]
    return CONFIDENCE_Z[0.99]


def calculate_confidence_interval(
    forecast: SeriesLike,
    confidence: float = 0.95,
) -> list[ConfidenceBand]:
    """Wrap each forecast point with a symmetric band, lower bound floored at 0.

    The margin is z * population std of the forecast values themselves.
    """
    values = as_array(forecast)
    if len(values) == 0:
        return []

    margin = z_for_level(confidence) * float(np.std(values))
    return [
        ConfidenceBand(
            value=float(v),
            lower=max(0.0, float(v) - margin),
            upper=float(v) + margin,
        )
        for v in values
    ]


def bands_to_frame(bands: list[ConfidenceBand], confidence: float = 0.95) -> pd.DataFrame:
    """DataFrame with forecast / lower_XX / upper_XX columns for charts and export."""
    pct = 95 if confidence == 0.95 else 99
    return pd.DataFrame({
        "forecast": [b.value for b in bands],
        f"lower_{pct}": [b.lower for b in bands],
        f"upper_{pct}": [b.upper for b in bands],
    })
