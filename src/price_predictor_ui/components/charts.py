# This file renders the price-vs-size chart for a completed prediction.
# It draws the reference sweep as a line and the user's own prediction as one enlarged point.
# The charts use Altair because it integrates cleanly with Streamlit and supports layered visuals.

from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

from src.price_predictor_ui.chart_data import HIGHLIGHT_LABEL, REFERENCE_LABEL
from src.price_predictor_ui.ui_text import CHART_TITLE, CHART_X_TITLE, CHART_Y_TITLE

REFERENCE_COLOR = "rgb(75, 192, 192)"
HIGHLIGHT_COLOR = "rgb(255, 99, 132)"


def build_price_curve_chart(dataframe: pd.DataFrame) -> alt.LayerChart:
    color = alt.Color(
        "series:N",
        scale=alt.Scale(
            domain=[REFERENCE_LABEL, HIGHLIGHT_LABEL],
            range=[REFERENCE_COLOR, HIGHLIGHT_COLOR],
        ),
        legend=alt.Legend(title=None, orient="top"),
    )
    x = alt.X("square_footage:Q", title=CHART_X_TITLE, scale=alt.Scale(zero=False))
    y = alt.Y("price:Q", title=CHART_Y_TITLE)
    tooltip = [
        alt.Tooltip("series:N", title="Series"),
        alt.Tooltip("square_footage:Q", title=CHART_X_TITLE, format=",.0f"),
        alt.Tooltip("price:Q", title="Price", format="$,.0f"),
    ]

    base = alt.Chart(dataframe)
    curve = (
        base.transform_filter(alt.datum.series == REFERENCE_LABEL)
        .mark_line(point=True)
        .encode(x=x, y=y, color=color, tooltip=tooltip)
    )
    highlight = (
        base.transform_filter(alt.datum.series == HIGHLIGHT_LABEL)
        .mark_point(filled=True, size=220)
        .encode(x=x, y=y, color=color, tooltip=tooltip)
    )
    return (curve + highlight).properties(title=CHART_TITLE, height=320)


def render_price_curve(dataframe: pd.DataFrame, *, help_text: str) -> None:
    st.subheader(CHART_TITLE, help=help_text)
    if dataframe.empty:
        st.info("No reference predictions are available for this submission.")
        return
    st.altair_chart(build_price_curve_chart(dataframe), use_container_width=True)
