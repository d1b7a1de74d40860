"""Forecast sources, models and parsing."""

from .base import WeatherProvider
from .file_source import FileForecastProvider
from .models import (
    Alert,
    CurrentConditions,
    DailyEntry,
    ForecastSnapshot,
    HourlyEntry,
    MinutelyEntry,
    WeatherCondition,
)
from .openweathermap import OpenWeatherMapProvider
from .parser import parse_forecast

__all__ = [
    "Alert",
    "CurrentConditions",
    "DailyEntry",
    "FileForecastProvider",
    "ForecastSnapshot",
    "HourlyEntry",
    "MinutelyEntry",
    "OpenWeatherMapProvider",
    "WeatherCondition",
    "WeatherProvider",
    "parse_forecast",
]
