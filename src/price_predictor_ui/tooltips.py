# This file defines tooltip text for the predictor form, result card, and chart.
# A single dictionary keeps explanations consistent between the page and tests.

from __future__ import annotations

TOOLTIPS: dict[str, str] = {
    "square_footage_input": "Total finished living area of the house in square feet.",
    "bedrooms_input": "Number of bedrooms used by the pricing model.",
    "predicted_price_card": "Model estimate for the exact size and bedroom count you entered.",
    "price_curve_chart": "Estimates for reference house sizes with your bedroom count; your own prediction is the large point.",
}
