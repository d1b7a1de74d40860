"""Typed settings loader for the forecast CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import AnyHttpUrl, Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ApiKeyMissingError, ConfigError, summarize_validation_error

DEFAULT_API_KEY_FILE = Path("openweathermap.apikey")


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    owm_onecall_url: AnyHttpUrl = Field(
        default="https://api.openweathermap.org/data/3.0/onecall",
        alias="OWM_ONECALL_URL",
        validate_default=True,
    )
    owm_api_key_file: Path = Field(default=DEFAULT_API_KEY_FILE, alias="OWM_API_KEY_FILE")
    owm_units: Literal["metric", "imperial", "standard"] = Field(
        default="metric",
        alias="OWM_UNITS",
    )
    owm_timeout_seconds: float = Field(default=15.0, alias="OWM_TIMEOUT_SECONDS")
    owm_user_agent: str = Field(default="owm-forecast-cli/0.1", alias="OWM_USER_AGENT")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
    )

    @model_validator(mode="after")
    def validate_limits(self) -> Settings:
        """Reject values the HTTP client cannot work with."""
        if self.owm_timeout_seconds <= 0:
            raise ValueError("OWM_TIMEOUT_SECONDS must be > 0.")
        if not self.owm_user_agent.strip():
            raise ValueError("OWM_USER_AGENT must not be empty.")
        return self

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging (no credentials)."""
        return {
            "onecall_url": str(self.owm_onecall_url),
            "api_key_file": str(self.owm_api_key_file),
            "units": self.owm_units,
            "timeout_seconds": self.owm_timeout_seconds,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {summarize_validation_error(exc)}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc


def load_api_key(path: Path) -> str:
    """Read the OpenWeatherMap API key, raising ApiKeyMissingError if unavailable."""
    if not path.is_file():
        raise ApiKeyMissingError(f'Cannot find "{path}", so aborting.')
    try:
        api_key = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ApiKeyMissingError(f'Failed reading "{path}": {exc}') from exc
    if not api_key:
        raise ApiKeyMissingError(f'"{path}" is empty, so aborting.')
    return api_key
