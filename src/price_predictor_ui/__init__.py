# This package contains the Streamlit house price predictor page and its prediction controller.
# It exists so users can request a price estimate and compare it against a reference price curve.
# The modules separate HTTP access, request orchestration, chart data, and page rendering.

__all__ = ["app"]
