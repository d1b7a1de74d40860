"""OpenWeatherMap One Call provider implementation."""

from __future__ import annotations

import logging

import httpx

from ..config import Settings
from ..exceptions import NoDataError, TransportError
from ..redaction import sanitize_text
from .base import WeatherProvider


class OpenWeatherMapProvider(WeatherProvider):
    """Fetches raw forecast bodies from the One Call endpoint.

    Issues exactly one GET per call. Failures are not retried.
    """

    def __init__(self, settings: Settings, logger: logging.Logger, api_key: str) -> None:
        self.settings = settings
        self.logger = logger
        self._api_key = api_key
        self._url = str(settings.owm_onecall_url)
        self._client = httpx.Client(
            timeout=settings.owm_timeout_seconds,
            headers={
                "Accept": "application/json",
                "User-Agent": settings.owm_user_agent,
            },
        )

    def close(self) -> None:
        self._client.close()

    def fetch_forecast_body(self, *, lat: float, lon: float, lang: str) -> str:
        params = {
            "lat": lat,
            "lon": lon,
            "units": self.settings.owm_units,
            "lang": lang,
            "appid": self._api_key,
        }
        self.logger.debug("Requesting forecast lat=%s lon=%s lang=%s", lat, lon, lang)
        try:
            response = self._client.get(self._url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise TransportError(
                f"Forecast request failed with status {status}: "
                f"{sanitize_text(exc.response.text[:300])}",
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Forecast request failed ({type(exc).__name__}): {sanitize_text(str(exc))}"
            ) from exc

        body = response.text
        if not body or not body.strip():
            raise NoDataError("No data was received. Aborting.")
        self.logger.info("Response received (%d bytes)", len(body))
        return body
