# This file owns the prediction request lifecycle behind the house price form.
# It issues the primary prediction, fans out the reference sweep, and merges everything into one chart series.
# Observers react to whole-state transitions: idle, loading, success, or failure.
# Only the most recent submission may update visible state; older results are dropped on arrival.

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from src.price_predictor_ui.api_client import PredictionError, coerce_price
from src.price_predictor_ui.chart_data import build_chart_series
from src.price_predictor_ui.models import (
    ControllerState,
    Failure,
    Idle,
    Loading,
    PredictionRequest,
    PredictionResult,
    Success,
)
from src.price_predictor_ui.predictor_config import DEFAULT_REFERENCE_SQUARE_FOOTAGES

logger = logging.getLogger(__name__)

PredictFn = Callable[[float, float], Awaitable[float]]
StateListener = Callable[[ControllerState], None]

INVALID_INPUT = "invalid_input"
UNEXPECTED = "unexpected"


class _SubmissionFailed(Exception):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class PredictionController:
    """Runs one primary prediction plus a reference sweep per submission.

    The primary request always completes before the sweep starts; a failed
    primary short-circuits the sweep entirely. Sweep results are combined by
    request index, so the curve order never depends on which response lands
    first. By default any failed sweep point fails the whole submission;
    ``allow_partial_sweep`` keeps the successful points instead.
    """

    def __init__(
        self,
        predict: PredictFn,
        *,
        reference_square_footages: Sequence[float] = DEFAULT_REFERENCE_SQUARE_FOOTAGES,
        allow_partial_sweep: bool = False,
    ) -> None:
        self._predict = predict
        self.reference_square_footages = tuple(reference_square_footages)
        self.allow_partial_sweep = allow_partial_sweep
        self._state: ControllerState = Idle()
        self._generation = 0
        self._listeners: list[StateListener] = []
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def submit(self, raw_square_footage: str, raw_bedrooms: str) -> asyncio.Task[None]:
        """Enter Loading now and resolve the submission on the running loop."""

        loop = asyncio.get_running_loop()
        token = self._begin()
        task = loop.create_task(self._resolve(token, raw_square_footage, raw_bedrooms))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def submit_and_wait(self, raw_square_footage: str, raw_bedrooms: str) -> ControllerState:
        token = self._begin()
        await self._resolve(token, raw_square_footage, raw_bedrooms)
        return self._state

    def _begin(self) -> int:
        self._generation += 1
        token = self._generation
        self._set_state(Loading(token=token))
        return token

    async def _resolve(self, token: int, raw_square_footage: str, raw_bedrooms: str) -> None:
        try:
            outcome = await self._run(raw_square_footage, raw_bedrooms)
        except Exception:
            logger.exception("Submission %s failed unexpectedly", token)
            outcome = Failure(reason=UNEXPECTED)
        if token != self._generation:
            logger.debug(
                "Discarding stale submission %s; latest is %s", token, self._generation
            )
            return
        self._set_state(outcome)

    async def _run(self, raw_square_footage: str, raw_bedrooms: str) -> Success | Failure:
        try:
            request = PredictionRequest.from_form(raw_square_footage, raw_bedrooms)
        except ValueError:
            logger.warning("Rejected non-numeric prediction input", exc_info=True)
            return Failure(reason=INVALID_INPUT)

        try:
            primary_price = coerce_price(
                await self._predict(request.square_footage, request.bedrooms),
                source="primary prediction",
            )
        except PredictionError as exc:
            logger.warning("Primary prediction failed (%s): %s", exc.reason, exc)
            return Failure(reason=exc.reason)
        except Exception:
            logger.exception("Primary prediction failed unexpectedly")
            return Failure(reason=UNEXPECTED)

        try:
            reference = await self._sweep(request.bedrooms)
        except _SubmissionFailed as exc:
            return Failure(reason=exc.reason)

        highlighted = PredictionResult(square_footage=request.square_footage, price=primary_price)
        return Success(price=primary_price, series=build_chart_series(reference, highlighted))

    async def _sweep(self, bedrooms: float) -> list[PredictionResult]:
        outcomes = await asyncio.gather(
            *(self._predict(square_footage, bedrooms) for square_footage in self.reference_square_footages),
            return_exceptions=True,
        )

        results: list[PredictionResult] = []
        first_reason: str | None = None
        for square_footage, outcome in zip(self.reference_square_footages, outcomes, strict=True):
            try:
                if isinstance(outcome, BaseException):
                    raise outcome
                price = coerce_price(outcome, source=f"reference prediction at {square_footage}")
            except Exception as exc:
                reason = exc.reason if isinstance(exc, PredictionError) else UNEXPECTED
                first_reason = first_reason or reason
                logger.warning(
                    "Reference prediction failed at %s sq ft (%s): %s", square_footage, reason, exc
                )
                continue
            results.append(PredictionResult(square_footage=square_footage, price=price))

        if first_reason is None:
            return results
        if self.allow_partial_sweep and results:
            logger.info(
                "Rendering partial reference curve with %s of %s points",
                len(results),
                len(self.reference_square_footages),
            )
            return results
        raise _SubmissionFailed(first_reason)

    def _set_state(self, state: ControllerState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener raised during transition to %s", type(state).__name__)
