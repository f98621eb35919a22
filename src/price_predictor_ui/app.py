# This file is the Streamlit entrypoint for the house price predictor.
# It exists to combine the input form, the prediction controller, and the result views in one page.
# The controller lives in session state so every rerun reads the latest published state.
# Unexpected render errors are logged and replaced with a short message instead of a stack trace.

from __future__ import annotations

import asyncio
import logging

import streamlit as st

from src.common.logging import configure_logging
from src.price_predictor_ui.api_client import AsyncPredictionClient, PredictionApiClient
from src.price_predictor_ui.chart_data import chart_frame
from src.price_predictor_ui.components.charts import render_price_curve
from src.price_predictor_ui.components.prediction_form import (
    clear_pending_submission,
    render_prediction_form,
)
from src.price_predictor_ui.components.summary_cards import render_prediction_card
from src.price_predictor_ui.controller import PredictionController
from src.price_predictor_ui.models import Failure, Success
from src.price_predictor_ui.predictor_config import PredictorConfig, load_predictor_config
from src.price_predictor_ui.tooltips import TOOLTIPS
from src.price_predictor_ui.ui_text import APP_TITLE, LOADING_LABEL, RENDER_FAILURE

logger = logging.getLogger(__name__)

CONTROLLER_KEY = "predictor_controller"


@st.cache_resource
def get_api_client() -> AsyncPredictionClient:
    config = load_predictor_config()
    client = PredictionApiClient(
        base_url=config.api_base_url, timeout_seconds=config.request_timeout_seconds
    )
    return AsyncPredictionClient(client)


def build_controller(config: PredictorConfig, client: AsyncPredictionClient) -> PredictionController:
    return PredictionController(
        client.predict,
        reference_square_footages=config.reference_square_footages,
        allow_partial_sweep=config.allow_partial_sweep,
    )


def get_controller() -> PredictionController:
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = build_controller(
            load_predictor_config(), get_api_client()
        )
    return st.session_state[CONTROLLER_KEY]


def render_page() -> None:
    st.title(APP_TITLE)

    controller = get_controller()
    submission = render_prediction_form(tooltips=TOOLTIPS)
    if submission is not None:
        try:
            with st.spinner(LOADING_LABEL):
                asyncio.run(
                    controller.submit_and_wait(
                        submission.raw_square_footage, submission.raw_bedrooms
                    )
                )
        finally:
            clear_pending_submission()
        st.rerun()

    state = controller.state
    if isinstance(state, Failure):
        st.error(state.message)
    elif isinstance(state, Success):
        render_prediction_card(
            price=state.price,
            square_footage=state.series.highlighted.square_footage,
            tooltips=TOOLTIPS,
        )
        render_price_curve(chart_frame(state.series), help_text=TOOLTIPS["price_curve_chart"])


def main() -> None:
    configure_logging()
    st.set_page_config(page_title=APP_TITLE, layout="centered")
    try:
        render_page()
    except Exception:
        logger.exception("Unhandled error while rendering the predictor page")
        st.error(RENDER_FAILURE)


if __name__ == "__main__":
    main()
