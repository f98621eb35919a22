# This test file covers form input validation and display formatting.
# It exists so the controller keeps receiving only non-empty numeric text from the page.

from __future__ import annotations

from src.price_predictor_ui.components.prediction_form import validate_form_inputs
from src.price_predictor_ui.formatting import format_price, format_square_footage


def test_valid_inputs_have_no_errors() -> None:
    assert validate_form_inputs("1200", "3") == []
    assert validate_form_inputs(" 1250.5 ", "2") == []


def test_empty_inputs_are_required() -> None:
    errors = validate_form_inputs("", "   ")

    assert errors == ["Square Footage is required.", "Number of Bedrooms is required."]


def test_non_numeric_inputs_are_rejected() -> None:
    errors = validate_form_inputs("big", "3")

    assert errors == ["Square Footage must be a number."]


def test_range_is_left_to_the_scoring_service() -> None:
    assert validate_form_inputs("-100", "0") == []


def test_format_price_uses_thousands_separators() -> None:
    assert format_price(280000) == "$280,000"
    assert format_price(1234.5) == "$1,234.50"
    assert format_price(None) == "-"


def test_format_square_footage() -> None:
    assert format_square_footage(1200.0) == "1,200 sq ft"
    assert format_square_footage(None) == "-"
