"""Typed models for the OpenWeatherMap One Call forecast payload.

Field names match the upstream JSON keys. All timestamps are Unix epoch
seconds (UTC) and are left untouched; conversion to local time happens only
when rendering.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _ForecastModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class WeatherCondition(_ForecastModel):
    """One weather condition entry (code, group, description, icon)."""

    id: int
    main: str
    description: str
    icon: str


class PrecipitationVolume(_ForecastModel):
    """Rain or snow volume for the last hour, in millimeters."""

    one_hour: float | None = Field(default=None, alias="1h")


class CurrentConditions(_ForecastModel):
    """Conditions at the time of the request."""

    dt: int
    sunrise: int | None = None
    sunset: int | None = None
    temp: float
    feels_like: float
    pressure: int
    humidity: int
    dew_point: float
    uvi: float
    clouds: int
    visibility: int | None = None
    wind_speed: float
    wind_deg: int
    wind_gust: float | None = None
    weather: tuple[WeatherCondition, ...] = ()
    rain: PrecipitationVolume | None = None
    snow: PrecipitationVolume | None = None


class MinutelyEntry(_ForecastModel):
    """Precipitation volume for one minute of the next hour."""

    dt: int
    precipitation: float


class HourlyEntry(_ForecastModel):
    """Forecast for one hour."""

    dt: int
    temp: float
    feels_like: float
    pressure: int
    humidity: int
    dew_point: float
    uvi: float
    clouds: int
    visibility: int | None = None
    wind_speed: float
    wind_deg: int
    wind_gust: float | None = None
    weather: tuple[WeatherCondition, ...] = ()
    pop: float = Field(ge=0.0, le=1.0)
    rain: PrecipitationVolume | None = None
    snow: PrecipitationVolume | None = None


class DailyTemperature(_ForecastModel):
    day: float
    min: float
    max: float
    night: float
    eve: float
    morn: float


class DailyFeelsLike(_ForecastModel):
    day: float
    night: float
    eve: float
    morn: float


class DailyEntry(_ForecastModel):
    """Forecast for one calendar day.

    `rain` and `snow` are volumes in millimeters and are absent when no
    precipitation is expected; `pop` is the separate probability.
    """

    dt: int
    sunrise: int
    sunset: int
    moonrise: int
    moonset: int
    moon_phase: float = Field(ge=0.0, le=1.0)
    summary: str | None = None
    temp: DailyTemperature
    feels_like: DailyFeelsLike
    pressure: int
    humidity: int
    dew_point: float
    wind_speed: float
    wind_deg: int
    wind_gust: float | None = None
    weather: tuple[WeatherCondition, ...] = ()
    clouds: int
    pop: float = Field(ge=0.0, le=1.0)
    uvi: float
    rain: float | None = None
    snow: float | None = None


class Alert(_ForecastModel):
    """Government weather alert covering the requested location."""

    sender_name: str
    event: str
    start: int
    end: int
    description: str
    tags: tuple[str, ...] = ()


class ForecastSnapshot(_ForecastModel):
    """Complete parsed response for one forecast query."""

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    timezone: str
    timezone_offset: int
    current: CurrentConditions
    minutely: tuple[MinutelyEntry, ...] = ()
    hourly: tuple[HourlyEntry, ...] = ()
    daily: tuple[DailyEntry, ...] = ()
    alerts: tuple[Alert, ...] = ()
