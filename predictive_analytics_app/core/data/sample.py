"""Synthetic daily activity histories for the catalog metrics."""

from __future__ import annotations

import numpy as np
import pandas as pd

# base level, daily trend, weekly amplitude, noise std
_PROFILES = {
    "document_uploads": (120.0, 0.8, 25.0, 10.0),
    "user_activity": (60.0, 0.3, 15.0, 5.0),
    "ai_analysis_usage": (35.0, 0.4, 6.0, 4.0),
    "project_completion": (4.0, 0.05, 1.0, 0.8),
    "system_load": (55.0, 0.1, 12.0, 3.0),
}


def generate_sample_history(
    end_date: str = "2026-01-24",
    n_days: int = 60,
    seed: int = 42,
    n_spikes: int = 2,
) -> pd.DataFrame:
    """Daily history with trend, a weekday/weekend cycle, noise and a few spikes.

    Returns a DataFrame with a `date` column and one column per metric id.
    """
    rng = np.random.default_rng(seed)
    dates = pd.date_range(end=end_date, periods=n_days, freq="D")
    t = np.arange(n_days)
    # Weekends run lower than weekdays
    weekday_effect = np.where(dates.dayofweek >= 5, -1.0, 0.4)

    data = {"date": dates}
    for metric_id, (base, slope, amplitude, noise_std) in _PROFILES.items():
        values = base + slope * t + amplitude * weekday_effect + rng.normal(0, noise_std, n_days)
        if n_spikes > 0:
            spike_idx = rng.choice(n_days, size=min(n_spikes, n_days), replace=False)
            values[spike_idx] *= rng.uniform(1.8, 2.5, size=len(spike_idx))
        values = np.maximum(values, 0)
        data[metric_id] = np.round(values, 0 if base >= 10 else 1)

    return pd.DataFrame(data)


def sample_payload(**kwargs) -> dict:
    """Sample history shaped like the predictions endpoint response."""
    df = generate_sample_history(**kwargs)
    return {
        "historical": {
            col: [float(v) for v in df[col]]
            for col in df.columns if col != "date"
        }
    }
