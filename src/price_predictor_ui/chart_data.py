# This file builds chart-ready structures from a completed prediction series.
# It exists so the controller output can be handed to any charting widget as plain data.
# The reference curve keeps request order; the user's own prediction is a separate labeled point.
# Rendering code only consumes these structures and never reorders them.

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd

from src.price_predictor_ui.models import ChartSeries, PredictionResult

REFERENCE_LABEL = "Predicted Prices"
HIGHLIGHT_LABEL = "Your Prediction"

CHART_COLUMNS = ["square_footage", "price", "series"]


def build_chart_series(
    reference: Sequence[PredictionResult], highlighted: PredictionResult
) -> ChartSeries:
    return ChartSeries(reference=tuple(reference), highlighted=highlighted)


def _point(result: PredictionResult) -> dict[str, float]:
    return {"x": result.square_footage, "y": result.price}


def chart_payload(series: ChartSeries) -> dict[str, Any]:
    return {
        "labels": [result.square_footage for result in series.reference],
        "datasets": [
            {
                "label": REFERENCE_LABEL,
                "data": [_point(result) for result in series.reference],
            },
            {
                "label": HIGHLIGHT_LABEL,
                "data": [_point(series.highlighted)],
            },
        ],
    }


def chart_frame(series: ChartSeries) -> pd.DataFrame:
    rows = [
        {"square_footage": result.square_footage, "price": result.price, "series": REFERENCE_LABEL}
        for result in series.reference
    ]
    rows.append(
        {
            "square_footage": series.highlighted.square_footage,
            "price": series.highlighted.price,
            "series": HIGHLIGHT_LABEL,
        }
    )
    return pd.DataFrame(rows, columns=CHART_COLUMNS)
