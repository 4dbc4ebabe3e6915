"""Multi-sheet Excel workbook export."""

from __future__ import annotations

from collections.abc import Mapping
from io import BytesIO

import pandas as pd

from ..pipeline import MetricPrediction
from .csv_export import anomalies_frame, insights_frame, predictions_to_frame


def _write_sheet(writer: pd.ExcelWriter, df: pd.DataFrame, sheet_name: str, header_fmt) -> None:
    df.to_excel(writer, sheet_name=sheet_name, index=False)
    ws = writer.sheets[sheet_name]
    for i, col in enumerate(df.columns):
        ws.write(0, i, col, header_fmt)
        ws.set_column(i, i, max(15, len(col) + 5))


def create_predictions_workbook(predictions: Mapping[str, MetricPrediction]) -> BytesIO:
    """Create a workbook with Forecasts, Anomalies and Insights sheets."""
    output = BytesIO()

    with pd.ExcelWriter(output, engine="xlsxwriter") as writer:
        workbook = writer.book

        header_fmt = workbook.add_format({
            "bold": True,
            "bg_color": "#1f77b4",
            "font_color": "#ffffff",
            "border": 1,
        })

        _write_sheet(writer, predictions_to_frame(predictions), "Forecasts", header_fmt)

        anomalies = anomalies_frame(predictions)
        if len(anomalies) > 0:
            _write_sheet(writer, anomalies, "Anomalies", header_fmt)

        insights = insights_frame(predictions)
        if len(insights) > 0:
            _write_sheet(writer, insights, "Insights", header_fmt)
            ws = writer.sheets["Insights"]
            ws.set_column(2, 2, 80, workbook.add_format({"text_wrap": True, "valign": "top"}))

    output.seek(0)
    return output
