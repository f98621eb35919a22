# This file implements the HTTP client for the remote price prediction endpoint.
# It exists so the controller can call one awaitable `predict` without embedding request details.
# The client validates the response payload and converts transport failures into one clear exception type.
# A failure reason travels with the exception for diagnostics without changing user-facing text.

from __future__ import annotations

import asyncio
import math
from typing import Any

import requests

NETWORK = "network"
TIMEOUT = "timeout"
SERVER = "server"
REJECTED = "rejected"
MALFORMED = "malformed"


class PredictionError(RuntimeError):
    """Raised when a prediction cannot be obtained from the remote service."""

    def __init__(self, message: str, *, reason: str) -> None:
        super().__init__(message)
        self.reason = reason


class PredictionTimeoutError(PredictionError):
    """Raised when a prediction does not complete within the configured bound."""

    def __init__(self, message: str) -> None:
        super().__init__(message, reason=TIMEOUT)


def format_path_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def coerce_price(value: Any, *, source: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PredictionError(f"{source} returned a non-numeric price: {value!r}", reason=MALFORMED)
    if not math.isfinite(value):
        raise PredictionError(f"{source} returned a non-finite price: {value!r}", reason=MALFORMED)
    return float(value)


def parse_predicted_price(payload: Any, *, url: str) -> float:
    if not isinstance(payload, dict):
        raise PredictionError(f"Unexpected payload shape from {url}", reason=MALFORMED)
    return coerce_price(payload.get("predicted_price"), source=url)


class PredictionApiClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def predict_url(self, square_footage: float, bedrooms: float) -> str:
        return (
            f"{self.base_url}/predict/"
            f"{format_path_number(square_footage)}/{format_path_number(bedrooms)}"
        )

    def predict(self, square_footage: float, bedrooms: float) -> float:
        url = self.predict_url(square_footage, bedrooms)
        try:
            response = self.session.get(url, timeout=self.timeout_seconds)
        except requests.Timeout as exc:
            raise PredictionTimeoutError(f"Prediction request timed out for {url}: {exc}") from exc
        except requests.RequestException as exc:
            raise PredictionError(f"Prediction request failed for {url}: {exc}", reason=NETWORK) from exc

        if response.status_code >= 500:
            raise PredictionError(
                f"Prediction request failed with status {response.status_code} for {url}",
                reason=SERVER,
            )
        if response.status_code >= 400:
            raise PredictionError(
                f"Prediction request was rejected with status {response.status_code} for {url}",
                reason=REJECTED,
            )
        if response.status_code < 200 or response.status_code >= 300:
            raise PredictionError(
                f"Unexpected status {response.status_code} for {url}", reason=MALFORMED
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise PredictionError(f"API did not return valid JSON for {url}", reason=MALFORMED) from exc

        return parse_predicted_price(payload, url=url)


class AsyncPredictionClient:
    """Awaitable facade over the blocking client, bounded per request."""

    def __init__(self, client: PredictionApiClient, *, timeout_seconds: float | None = None) -> None:
        self.client = client
        self.timeout_seconds = client.timeout_seconds if timeout_seconds is None else timeout_seconds

    async def predict(self, square_footage: float, bedrooms: float) -> float:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self.client.predict, square_footage, bedrooms),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise PredictionTimeoutError(
                f"Prediction for ({square_footage}, {bedrooms}) exceeded "
                f"{self.timeout_seconds}s"
            ) from exc
