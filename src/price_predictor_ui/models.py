# This file defines the value types exchanged between the form, the controller, and the chart.
# It exists so every submission, prediction, and observable state is an immutable record.
# The controller swaps whole state objects on each transition instead of mutating fields.
# Keeping these types free of I/O makes them trivial to construct in tests.

from __future__ import annotations

import math
from dataclasses import dataclass

PREDICTION_FAILED_MESSAGE = "Error predicting price. Please try again."


def coerce_number(raw_value: str | float | int, *, field_name: str) -> float:
    """Coerce raw form text into a finite number, raising ValueError otherwise."""

    if isinstance(raw_value, bool):
        raise ValueError(f"{field_name} must be numeric, got {raw_value!r}")
    try:
        value = float(str(raw_value).strip())
    except ValueError as exc:
        raise ValueError(f"{field_name} must be numeric, got {raw_value!r}") from exc
    if not math.isfinite(value):
        raise ValueError(f"{field_name} must be finite, got {raw_value!r}")
    return value


@dataclass(frozen=True)
class PredictionRequest:
    square_footage: float
    bedrooms: float

    @classmethod
    def from_form(cls, raw_square_footage: str, raw_bedrooms: str) -> PredictionRequest:
        return cls(
            square_footage=coerce_number(raw_square_footage, field_name="square_footage"),
            bedrooms=coerce_number(raw_bedrooms, field_name="bedrooms"),
        )


@dataclass(frozen=True)
class PredictionResult:
    square_footage: float
    price: float


@dataclass(frozen=True)
class ChartSeries:
    """Reference sweep in request order plus the user's own highlighted point."""

    reference: tuple[PredictionResult, ...]
    highlighted: PredictionResult


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    token: int


@dataclass(frozen=True)
class Success:
    price: float
    series: ChartSeries


@dataclass(frozen=True)
class Failure:
    message: str = PREDICTION_FAILED_MESSAGE
    reason: str = "unknown"


ControllerState = Idle | Loading | Success | Failure
