"""
Unit tests for logging configuration.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

import logging

import pytest

from src.common import logging as logging_module
from src.common import settings as settings_module


def test_configure_logging_runs_once(monkeypatch: pytest.MonkeyPatch) -> None:
    settings_module.get_settings.cache_clear()
    monkeypatch.setattr(logging_module, "_LOGGING_CONFIGURED", False)
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    logging_module.configure_logging()
    logging_module.configure_logging()

    assert calls == [{"level": logging.DEBUG, "format": logging_module.LOG_FORMAT}]
