"""Application exception classes."""

from __future__ import annotations

from pydantic import ValidationError


class ForecastError(Exception):
    """Base class for errors that abort a forecast run."""


class ConfigError(ForecastError):
    """Raised when configuration is invalid or incomplete."""


class ApiKeyMissingError(ForecastError):
    """Raised when the OpenWeatherMap API key file is absent or empty."""


class InvalidArgumentError(ForecastError):
    """Raised when a command-line argument fails validation."""

    def __init__(self, message: str, *, field: str, value: object) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class TransportError(ForecastError):
    """Raised for network failures and non-success HTTP responses."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NoDataError(ForecastError):
    """Raised when the forecast source returned an empty body."""


class ForecastParseError(ForecastError):
    """Raised when a forecast body cannot be decoded into the forecast model."""


def summarize_validation_error(exc: ValidationError) -> str:
    """Collapse a pydantic ValidationError into one `loc: msg; ...` line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"])
        message = " ".join(str(error["msg"]).split())
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)
