# This file collects small formatting helpers used by the predictor page.
# It exists so prices and sizes are shown consistently in cards and chart tooltips.
# The functions return plain strings that Streamlit can display directly.

from __future__ import annotations


def format_price(value: float | int | None) -> str:
    if value is None:
        return "-"
    amount = float(value)
    if amount.is_integer():
        return f"${int(amount):,}"
    return f"${amount:,.2f}"


def format_square_footage(value: float | int | None) -> str:
    if value is None:
        return "-"
    amount = float(value)
    if amount.is_integer():
        return f"{int(amount):,} sq ft"
    return f"{amount:,.1f} sq ft"
