# This file stores copy blocks for headings, labels, and status messages.
# It exists so wording stays consistent between the form, the result card, and the chart.

from __future__ import annotations

APP_TITLE = "House Price Predictor"

SQUARE_FOOTAGE_LABEL = "Square Footage"
BEDROOMS_LABEL = "Number of Bedrooms"
SUBMIT_LABEL = "Predict Price"
LOADING_LABEL = "Predicting..."

CHART_TITLE = "Price Predictions by Square Footage"
CHART_X_TITLE = "Square Footage"
CHART_Y_TITLE = "Predicted Price ($)"

RENDER_FAILURE = "Something went wrong."
REQUIRED_FIELD = "{label} is required."
NUMERIC_FIELD = "{label} must be a number."
