"""Tests for secret redaction and the JSON console log handler."""

from __future__ import annotations

import io
import json
import logging

import pytest

from owm_forecast.log_setup import JsonConsoleFormatter, StderrHandler, setup_logger
from owm_forecast.redaction import REDACTED, sanitize_text


def test_appid_query_parameter_is_redacted() -> None:
    text = "GET https://api.openweathermap.org/data/3.0/onecall?lat=1&appid=abc123&lang=en"
    sanitized = sanitize_text(text)
    assert "abc123" not in sanitized
    assert f"appid={REDACTED}&lang=en" in sanitized


def test_bearer_and_api_key_values_are_redacted() -> None:
    sanitized = sanitize_text("Authorization: Bearer tok.en-123 api_key=zzz")
    assert "tok.en-123" not in sanitized
    assert "zzz" not in sanitized


def test_json_formatter_emits_redacted_json() -> None:
    record = logging.LogRecord(
        name="owm_forecast",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg="request failed for %s",
        args=("https://x.test/?appid=abc123",),
        exc_info=None,
    )
    event = json.loads(JsonConsoleFormatter().format(record))
    assert event["level"] == "ERROR"
    assert event["logger"] == "owm_forecast"
    assert "abc123" not in event["message"]
    assert "ts" in event


def test_setup_logger_is_idempotent() -> None:
    first = setup_logger("owm_forecast.test_setup")
    second = setup_logger("owm_forecast.test_setup", level=logging.DEBUG)
    assert first is second
    assert len(second.handlers) == 1
    assert isinstance(second.handlers[0], StderrHandler)
    assert second.level == logging.DEBUG
    assert second.propagate is False


def test_handler_follows_replaced_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    logger = setup_logger("owm_forecast.test_stderr")
    first, second = io.StringIO(), io.StringIO()

    monkeypatch.setattr("sys.stderr", first)
    logger.info("one")
    monkeypatch.setattr("sys.stderr", second)
    logger.info("two appid=secret")

    assert json.loads(first.getvalue())["message"] == "one"
    event = json.loads(second.getvalue())
    assert event["message"] == f"two appid={REDACTED}"
