# This test file checks the chart structures built from a completed prediction series.
# It exists so the reference curve order and the highlighted point labels stay stable for the renderer.

from __future__ import annotations

from src.price_predictor_ui.chart_data import (
    CHART_COLUMNS,
    HIGHLIGHT_LABEL,
    REFERENCE_LABEL,
    build_chart_series,
    chart_frame,
    chart_payload,
)
from src.price_predictor_ui.components.charts import build_price_curve_chart
from src.price_predictor_ui.models import ChartSeries, PredictionResult


def _series() -> ChartSeries:
    reference = [
        PredictionResult(square_footage=sf, price=200 * sf + 30000)
        for sf in (1000, 1500, 2000, 2500, 3000)
    ]
    return build_chart_series(reference, PredictionResult(square_footage=1200, price=270000))


def test_chart_payload_labels_reference_and_highlight() -> None:
    payload = chart_payload(_series())

    assert payload["labels"] == [1000, 1500, 2000, 2500, 3000]
    reference, highlight = payload["datasets"]
    assert reference["label"] == REFERENCE_LABEL
    assert [point["x"] for point in reference["data"]] == [1000, 1500, 2000, 2500, 3000]
    assert reference["data"][0] == {"x": 1000, "y": 230000}
    assert highlight == {"label": HIGHLIGHT_LABEL, "data": [{"x": 1200, "y": 270000}]}


def test_chart_frame_keeps_sweep_order_and_appends_highlight() -> None:
    frame = chart_frame(_series())

    assert list(frame.columns) == CHART_COLUMNS
    assert len(frame) == 6
    assert frame["series"].tolist() == [REFERENCE_LABEL] * 5 + [HIGHLIGHT_LABEL]
    assert frame.iloc[-1]["square_footage"] == 1200
    assert frame.iloc[-1]["price"] == 270000


def test_price_curve_chart_layers_line_and_point() -> None:
    spec = build_price_curve_chart(chart_frame(_series())).to_dict()

    marks = [layer["mark"]["type"] for layer in spec["layer"]]
    assert marks == ["line", "point"]
