"""Decoding of raw One Call bodies into ForecastSnapshot."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from ..exceptions import ForecastParseError, summarize_validation_error
from .models import ForecastSnapshot


def parse_forecast(body: str | bytes | None) -> ForecastSnapshot:
    """Decode a raw JSON body, raising ForecastParseError on empty or malformed input."""
    if body is None:
        raise ForecastParseError("Forecast body is missing.")
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ForecastParseError("Forecast body is not valid UTF-8.") from exc
    if not body.strip():
        raise ForecastParseError("Forecast body is empty.")

    try:
        payload: Any = json.loads(body)
    except ValueError as exc:
        raise ForecastParseError(f"Forecast body is not valid JSON: {exc}") from exc

    if payload is None:
        raise ForecastParseError("Forecast body decoded to null.")
    if not isinstance(payload, dict):
        raise ForecastParseError(
            f"Forecast body has unexpected root type {type(payload).__name__}."
        )
    if not payload:
        raise ForecastParseError("Forecast body decoded to an empty object.")

    try:
        return ForecastSnapshot.model_validate(payload)
    except ValidationError as exc:
        raise ForecastParseError(
            f"Forecast body does not match the expected schema "
            f"({exc.error_count()} error(s)): {summarize_validation_error(exc)}"
        ) from exc
