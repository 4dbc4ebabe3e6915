"""Data ingestion: backend payloads, JSON, Excel and CSV history files."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from io import BytesIO
from typing import Any

import pandas as pd

from ..config.catalog import get_prediction_metrics

logger = logging.getLogger(__name__)

_DATE_HINTS = ["date", "day", "ds", "timestamp", "time", "period"]


@dataclass
class HistoryBundle:
    series: dict[str, list[float]]
    dates: pd.Series | None = None
    source_name: str = ""
    metric_ids: list[str] = field(init=False)

    def __post_init__(self):
        self.metric_ids = list(self.series.keys())

    def get(self, metric_id: str) -> list[float]:
        return self.series.get(metric_id, [])


def _to_floats(metric_id: str, values: Any) -> list[float]:
    numeric = pd.to_numeric(pd.Series(list(values), dtype=object), errors="coerce")
    if numeric.isna().any():
        raise ValueError(
            f"Metric '{metric_id}' contains {int(numeric.isna().sum())} non-numeric or missing value(s)."
        )
    return [float(v) for v in numeric]


def load_payload(payload: Mapping | str | bytes, source_name: str = "payload") -> HistoryBundle:
    """Parse the predictions endpoint response: {"historical": {metric_id: [values]}}."""
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON payload: {e}") from e

    if not isinstance(payload, Mapping):
        raise ValueError("Payload must be a JSON object.")

    historical = payload.get("historical")
    if not isinstance(historical, Mapping):
        raise ValueError("Payload has no 'historical' mapping of metric series.")

    series = {}
    for metric_id, values in historical.items():
        if values is None:
            series[metric_id] = []
            continue
        series[metric_id] = _to_floats(metric_id, values)

    known = {m.id for m in get_prediction_metrics()}
    unknown = sorted(set(series) - known)
    if unknown:
        logger.warning("Payload contains metrics outside the catalog: %s", ", ".join(unknown))

    return HistoryBundle(series=series, source_name=source_name)


def detect_date_column(df: pd.DataFrame) -> str | None:
    for col in df.columns:
        if str(col).strip().lower() in _DATE_HINTS:
            return col
    return None


def load_frame(df: pd.DataFrame, source_name: str = "") -> HistoryBundle:
    """Read a wide table: an optional date column plus one numeric column per metric.

    Rows are sorted by date when a date column is present. Columns named
    after catalog metrics are preferred; otherwise every numeric column is used.
    """
    date_col = detect_date_column(df)
    dates = None
    if date_col is not None:
        df = df.assign(**{date_col: pd.to_datetime(df[date_col], errors="coerce")})
        if df[date_col].isna().any():
            raise ValueError(f"Column '{date_col}' contains values that cannot be parsed as dates.")
        df = df.sort_values(date_col).reset_index(drop=True)
        dates = df[date_col]

    known = [m.id for m in get_prediction_metrics() if m.id in df.columns]
    if known:
        value_cols = known
    else:
        value_cols = [c for c in df.columns if c != date_col and pd.api.types.is_numeric_dtype(df[c])]
    if not value_cols:
        raise ValueError("No numeric metric columns found.")

    series = {str(col): _to_floats(str(col), df[col]) for col in value_cols}
    return HistoryBundle(series=series, dates=dates, source_name=source_name)


def load_file(file_buffer: BytesIO | Any, filename: str, sheet_name: str | int = 0) -> HistoryBundle:
    ext = filename.rsplit(".", 1)[-1].lower()
    if ext == "xlsx":
        df = pd.read_excel(file_buffer, sheet_name=sheet_name, engine="openpyxl")
        return load_frame(df, source_name=filename)
    elif ext == "csv":
        return load_frame(pd.read_csv(file_buffer), source_name=filename)
    elif ext == "json":
        raw = file_buffer.read() if hasattr(file_buffer, "read") else file_buffer
        return load_payload(raw, source_name=filename)
    else:
        raise ValueError(f"Unsupported file type: .{ext}. Use .json, .xlsx, or .csv.")
