"""Offline provider that replays a saved One Call response from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from ..exceptions import NoDataError, TransportError
from .base import WeatherProvider


class FileForecastProvider(WeatherProvider):
    """Returns the contents of a saved forecast JSON file, ignoring location."""

    def __init__(self, path: Path, logger: logging.Logger) -> None:
        self.path = path
        self.logger = logger

    def close(self) -> None:
        return None

    def fetch_forecast_body(self, *, lat: float, lon: float, lang: str) -> str:
        try:
            body = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TransportError(f"Failed reading forecast file {self.path}: {exc}") from exc
        if not body.strip():
            raise NoDataError(f"Forecast file {self.path} is empty.")
        self.logger.info("Loaded forecast from %s", self.path)
        return body
