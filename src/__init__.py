"""
Package marker for source code under `src`.
It groups the predictor UI and its shared helpers under a stable import path.
"""
