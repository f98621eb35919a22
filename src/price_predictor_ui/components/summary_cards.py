# This file renders the predicted price card shown after a successful submission.
# The function expects a finished price and does not perform any computation.

from __future__ import annotations

import streamlit as st

from src.price_predictor_ui.formatting import format_price, format_square_footage


def render_prediction_card(*, price: float, square_footage: float, tooltips: dict[str, str]) -> None:
    with st.container(border=True):
        st.metric(
            "Predicted Price",
            format_price(price),
            help=tooltips["predicted_price_card"],
        )
        st.caption(f"Estimate for {format_square_footage(square_footage)}")
