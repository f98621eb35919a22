# This package groups reusable Streamlit components for the predictor page.
# It exists so form, result card, and chart rendering stay separate from orchestration code.

__all__ = ["charts", "prediction_form", "summary_cards"]
