# This file runs one prediction submission against a live scoring endpoint.
# It exists so operators can confirm the endpoint and the reference sweep respond before opening the page.
# The script prints the final controller state and exits non-zero when the submission fails.
# ruff: noqa: E402

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.common.logging import configure_logging
from src.price_predictor_ui.api_client import AsyncPredictionClient, PredictionApiClient
from src.price_predictor_ui.chart_data import chart_payload
from src.price_predictor_ui.controller import PredictionController
from src.price_predictor_ui.models import Success
from src.price_predictor_ui.predictor_config import load_predictor_config


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Smoke-test the house price prediction endpoint.")
    parser.add_argument("square_footage", help="Square footage to submit, as typed in the form.")
    parser.add_argument("bedrooms", help="Bedroom count to submit, as typed in the form.")
    parser.add_argument("--base-url", default=None, help="Override PREDICTOR_API_BASE_URL.")
    parser.add_argument(
        "--partial",
        action="store_true",
        help="Keep successful reference points when some of the sweep fails.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging()
    config = load_predictor_config()

    client = PredictionApiClient(
        base_url=args.base_url or config.api_base_url,
        timeout_seconds=config.request_timeout_seconds,
    )
    controller = PredictionController(
        AsyncPredictionClient(client).predict,
        reference_square_footages=config.reference_square_footages,
        allow_partial_sweep=args.partial or config.allow_partial_sweep,
    )

    state = asyncio.run(controller.submit_and_wait(args.square_footage, args.bedrooms))
    if isinstance(state, Success):
        print(json.dumps({"predicted_price": state.price, "chart": chart_payload(state.series)}, indent=2))
        return 0

    print(f"Prediction failed: {state}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
