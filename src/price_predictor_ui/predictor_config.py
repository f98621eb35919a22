# This file defines runtime configuration for the house price predictor page.
# It exists so the endpoint location, request bound, and reference sweep can be tuned through environment variables.
# Keeping these values centralized avoids hard-coded URLs scattered across the controller and page.
# The frozen dataclass makes configuration explicit and easy to build in tests.

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_REFERENCE_SQUARE_FOOTAGES: tuple[float, ...] = (1000, 1500, 2000, 2500, 3000)

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class PredictorConfig:
    api_base_url: str
    request_timeout_seconds: float = 10.0
    reference_square_footages: tuple[float, ...] = DEFAULT_REFERENCE_SQUARE_FOOTAGES
    allow_partial_sweep: bool = False


def parse_reference_square_footages(raw_value: str | None) -> tuple[float, ...]:
    if raw_value is None or not raw_value.strip():
        return DEFAULT_REFERENCE_SQUARE_FOOTAGES

    values: list[float] = []
    for token in raw_value.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            values.append(float(token))
        except ValueError as exc:
            raise ValueError(f"Invalid reference square footage: {token!r}") from exc
    if not values:
        raise ValueError("Reference square footage list must not be empty.")
    return tuple(values)


def load_predictor_config(*, load_env: bool = True) -> PredictorConfig:
    if load_env:
        load_dotenv()

    api_base_url = os.getenv("PREDICTOR_API_BASE_URL")
    if not api_base_url:
        api_host = os.getenv("API_HOST", "localhost")
        api_port = os.getenv("API_PORT", "8000")
        api_base_url = f"http://{api_host}:{api_port}"

    return PredictorConfig(
        api_base_url=api_base_url.rstrip("/"),
        request_timeout_seconds=float(os.getenv("PREDICTOR_REQUEST_TIMEOUT_SECONDS", "10")),
        reference_square_footages=parse_reference_square_footages(
            os.getenv("PREDICTOR_REFERENCE_SQUARE_FOOTAGES")
        ),
        allow_partial_sweep=os.getenv("PREDICTOR_ALLOW_PARTIAL_SWEEP", "false").strip().lower()
        in _TRUTHY,
    )
