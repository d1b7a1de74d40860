"""Forecast source interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class WeatherProvider(ABC):
    """Base contract for sources of raw One Call forecast bodies."""

    def __enter__(self) -> WeatherProvider:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    @abstractmethod
    def fetch_forecast_body(self, *, lat: float, lon: float, lang: str) -> str:
        """Return the raw JSON forecast body for a location."""

    @abstractmethod
    def close(self) -> None:
        """Release provider resources."""
