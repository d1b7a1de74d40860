"""CLI: fetch an OpenWeatherMap forecast and render it as terminal tables."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .config import Settings, load_api_key, load_settings
from .exceptions import (
    ApiKeyMissingError,
    ConfigError,
    ForecastParseError,
    InvalidArgumentError,
    NoDataError,
    TransportError,
)
from .log_setup import setup_logger
from .options import Options, parse_options
from .ui import build_current_panel, build_daily_table, build_hourly_table
from .weather.base import WeatherProvider
from .weather.file_source import FileForecastProvider
from .weather.models import ForecastSnapshot
from .weather.openweathermap import OpenWeatherMapProvider
from .weather.parser import parse_forecast


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse forecast CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Show current, hourly and daily weather from OpenWeatherMap."
    )
    parser.add_argument(
        "location",
        nargs="*",
        metavar="LAT LON [LANG]",
        help="Latitude, longitude and an optional language code (default: en).",
    )
    parser.add_argument(
        "--input-file",
        type=Path,
        default=None,
        help="Render a saved One Call JSON response instead of calling the API.",
    )
    return parser.parse_args(argv)


def _build_provider(
    args: argparse.Namespace, settings: Settings, logger: logging.Logger
) -> WeatherProvider:
    if args.input_file is not None:
        return FileForecastProvider(args.input_file, logger=logger)
    api_key = load_api_key(settings.owm_api_key_file)
    logger.info('API key retrieved from "%s"', settings.owm_api_key_file)
    return OpenWeatherMapProvider(settings=settings, logger=logger, api_key=api_key)


def _get_forecast(
    console: Console, provider: WeatherProvider, options: Options, logger: logging.Logger
) -> ForecastSnapshot:
    with console.status(
        "Getting weather data...", spinner="arc", spinner_style="green bold"
    ) as status:
        status.update("Contacting the weather service...")
        body = provider.fetch_forecast_body(
            lat=options.latitude,
            lon=options.longitude,
            lang=options.language,
        )
        status.update("Parsing the data...")
        snapshot = parse_forecast(body)
    logger.info(
        "Data parsed OK: hourly=%d daily=%d alerts=%d",
        len(snapshot.hourly),
        len(snapshot.daily),
        len(snapshot.alerts),
    )
    return snapshot


def main(argv: Sequence[str] | None = None) -> int:
    """Run the forecast flow and return a process exit code."""
    args = parse_args(argv)
    logger = setup_logger()
    console = Console()
    err_console = Console(stderr=True)

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        logger.debug("Configuration error detail: %s", exc.__cause__)
        err_console.print(f"[red]Configuration failure:[/] {escape(str(exc))}", soft_wrap=True)
        return 2
    logger.setLevel(settings.log_level)
    logger.debug("Settings loaded: %s", settings.safe_summary())

    try:
        options = parse_options(args.location)
    except InvalidArgumentError as exc:
        logger.error("Invalid %s: %s", exc.field, exc)
        err_console.print(f"[red]Invalid {exc.field}:[/] {escape(str(exc))}", soft_wrap=True)
        return 2

    try:
        provider = _build_provider(args, settings, logger)
    except ApiKeyMissingError as exc:
        logger.error("API key unavailable: %s", exc)
        err_console.print(f"[red]{escape(str(exc))}[/]", soft_wrap=True)
        return 3

    exit_code = 0
    try:
        with provider:
            snapshot = _get_forecast(console, provider, options, logger)
        sections = (
            build_current_panel(snapshot),
            build_hourly_table(snapshot),
            build_daily_table(snapshot),
        )
        for section in sections:
            console.print(section)
    except (TransportError, NoDataError, ForecastParseError) as exc:
        exit_code = 4
        logger.error("Forecast retrieval failure: %s", exc)
        logger.debug("Forecast error detail: %s", exc.__cause__)
        err_console.print(f"[red]{escape(str(exc))}[/]", soft_wrap=True)
    except Exception as exc:  # pragma: no cover - unexpected runtime failure
        exit_code = 99
        logger.exception("Unexpected forecast CLI failure: %s", exc)
        err_console.print(f"[red]Unexpected failure:[/] {type(exc).__name__}", soft_wrap=True)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
