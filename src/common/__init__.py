"""
Shared configuration and logging helpers for the predictor UI.
"""
