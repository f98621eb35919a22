# This file renders the two-field prediction form and checks its inputs before submission.
# It exists so the controller only ever receives non-empty numeric text.
# Validation is a plain function so the rules can be tested without a Streamlit runtime.
# The submit callback queues the submission so the button renders disabled until it resolves.

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from src.price_predictor_ui.models import coerce_number
from src.price_predictor_ui.ui_text import (
    BEDROOMS_LABEL,
    NUMERIC_FIELD,
    REQUIRED_FIELD,
    SQUARE_FOOTAGE_LABEL,
    SUBMIT_LABEL,
)

SQUARE_FOOTAGE_KEY = "predictor_square_footage"
BEDROOMS_KEY = "predictor_bedrooms"
PENDING_KEY = "predictor_pending_submission"
ERRORS_KEY = "predictor_form_errors"


@dataclass(frozen=True)
class FormSubmission:
    raw_square_footage: str
    raw_bedrooms: str


def validate_form_inputs(raw_square_footage: str, raw_bedrooms: str) -> list[str]:
    errors: list[str] = []
    for label, raw_value in (
        (SQUARE_FOOTAGE_LABEL, raw_square_footage),
        (BEDROOMS_LABEL, raw_bedrooms),
    ):
        if not (raw_value or "").strip():
            errors.append(REQUIRED_FIELD.format(label=label))
            continue
        try:
            coerce_number(raw_value, field_name=label)
        except ValueError:
            errors.append(NUMERIC_FIELD.format(label=label))
    return errors


def queue_submission() -> None:
    raw_square_footage = str(st.session_state.get(SQUARE_FOOTAGE_KEY, ""))
    raw_bedrooms = str(st.session_state.get(BEDROOMS_KEY, ""))

    errors = validate_form_inputs(raw_square_footage, raw_bedrooms)
    st.session_state[ERRORS_KEY] = errors
    if errors:
        st.session_state.pop(PENDING_KEY, None)
        return
    st.session_state[PENDING_KEY] = FormSubmission(
        raw_square_footage=raw_square_footage.strip(), raw_bedrooms=raw_bedrooms.strip()
    )


def pending_submission() -> FormSubmission | None:
    return st.session_state.get(PENDING_KEY)


def clear_pending_submission() -> None:
    st.session_state.pop(PENDING_KEY, None)


def render_prediction_form(*, tooltips: dict[str, str]) -> FormSubmission | None:
    """Draw the form and return the queued submission, if one is waiting to run."""

    pending = pending_submission()
    with st.form("prediction_form"):
        col1, col2 = st.columns(2)
        col1.text_input(
            SQUARE_FOOTAGE_LABEL,
            key=SQUARE_FOOTAGE_KEY,
            help=tooltips["square_footage_input"],
        )
        col2.text_input(
            BEDROOMS_LABEL,
            key=BEDROOMS_KEY,
            help=tooltips["bedrooms_input"],
        )
        st.form_submit_button(
            SUBMIT_LABEL,
            type="primary",
            disabled=pending is not None,
            on_click=queue_submission,
            use_container_width=True,
        )

    for message in st.session_state.pop(ERRORS_KEY, []):
        st.warning(message)
    return pending
