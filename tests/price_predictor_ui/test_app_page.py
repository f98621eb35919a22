# This test file drives the Streamlit page end to end with a fake scoring function.
# It exists so the form, the controller, and the result views stay wired together.
# The controller is seeded into session state so no network calls are made.

from __future__ import annotations

from pathlib import Path

from streamlit.testing.v1 import AppTest

from src.price_predictor_ui.app import CONTROLLER_KEY
from src.price_predictor_ui.api_client import PredictionError
from src.price_predictor_ui.components.prediction_form import PENDING_KEY, FormSubmission
from src.price_predictor_ui.controller import PredictionController
from src.price_predictor_ui.models import PREDICTION_FAILED_MESSAGE

APP_PATH = str(Path(__file__).resolve().parents[2] / "src" / "price_predictor_ui" / "app.py")


async def _linear_predict(square_footage: float, bedrooms: float) -> float:
    return 200 * square_footage + 10000 * bedrooms


async def _failing_predict(square_footage: float, bedrooms: float) -> float:
    raise PredictionError("scoring service down", reason="network")


def _submit(controller: PredictionController, square_footage: str, bedrooms: str) -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.session_state[CONTROLLER_KEY] = controller
    at.run()
    at.text_input(key="predictor_square_footage").input(square_footage)
    at.text_input(key="predictor_bedrooms").input(bedrooms)
    at.button[0].click()
    at.run()
    return at


def test_page_shows_price_after_successful_submission() -> None:
    at = _submit(PredictionController(_linear_predict), "1200", "3")

    assert not at.exception
    assert at.metric[0].value == "$270,000"
    assert len(at.error) == 0
    assert at.caption[0].value == "Estimate for 1,200 sq ft"
    assert PENDING_KEY not in at.session_state
    assert not at.button[0].disabled


def test_page_shows_static_message_after_failure() -> None:
    at = _submit(PredictionController(_failing_predict), "1200", "3")

    assert not at.exception
    assert at.error[0].value == PREDICTION_FAILED_MESSAGE
    assert len(at.metric) == 0


def test_page_requires_both_fields() -> None:
    controller = PredictionController(_linear_predict)

    at = _submit(controller, "1200", "")

    assert at.warning[0].value == "Number of Bedrooms is required."
    assert len(at.metric) == 0


def _form_script() -> None:
    from src.price_predictor_ui.components.prediction_form import render_prediction_form
    from src.price_predictor_ui.tooltips import TOOLTIPS

    render_prediction_form(tooltips=TOOLTIPS)


def test_submit_button_is_disabled_while_a_submission_is_pending() -> None:
    at = AppTest.from_function(_form_script, default_timeout=30)
    at.session_state[PENDING_KEY] = FormSubmission(raw_square_footage="1200", raw_bedrooms="3")

    at.run()

    assert at.button[0].disabled


def test_submit_button_is_enabled_when_idle() -> None:
    at = AppTest.from_function(_form_script, default_timeout=30)

    at.run()

    assert not at.button[0].disabled


def test_submit_callback_queues_validated_submission() -> None:
    at = AppTest.from_function(_form_script, default_timeout=30)
    at.run()
    at.text_input(key="predictor_square_footage").input(" 1200 ")
    at.text_input(key="predictor_bedrooms").input("3")

    at.button[0].click()
    at.run()

    assert at.session_state[PENDING_KEY] == FormSubmission(
        raw_square_footage="1200", raw_bedrooms="3"
    )
    assert at.button[0].disabled
