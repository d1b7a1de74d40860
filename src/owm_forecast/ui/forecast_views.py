"""Rich renderables for the current, hourly and daily forecast sections."""

from __future__ import annotations

from datetime import datetime, tzinfo

from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..weather.models import Alert, ForecastSnapshot
from .formatting import (
    day_label,
    describe,
    filter_hourly,
    hour_label,
    percent,
    rain_summary,
    round0,
    sun_summary,
    to_local,
    visibility_km,
)


def alert_line(alert: Alert, tz: tzinfo | None = None) -> str:
    start = to_local(alert.start, tz)
    end = to_local(alert.end, tz)
    return (
        f"ALERT: {alert.event} from {alert.sender_name} "
        f"({start:%b} {start.day} {start:%H:%M} – {end:%b} {end.day} {end:%H:%M})"
    )


def build_current_panel(snapshot: ForecastSnapshot, tz: tzinfo | None = None) -> Panel:
    """Location, temperature, humidity and one line per active alert."""
    current = snapshot.current
    table = Table(box=None, show_header=False)
    table.add_column("Info", overflow="fold")
    table.add_row(f"Weather for {snapshot.lat} @ {snapshot.lon} ({snapshot.timezone})")
    table.add_row(
        f"Temperature is {round0(current.temp)} degrees, "
        f"feeling like {round0(current.feels_like)}"
    )
    table.add_row(f"Humidity is {current.humidity}%")
    for alert in snapshot.alerts:
        table.add_row(f"[bold red]{escape(alert_line(alert, tz))}[/]")

    return Panel(
        table,
        box=box.ROUNDED,
        title="Current conditions",
        title_align="left",
        expand=False,
    )


def build_hourly_table(
    snapshot: ForecastSnapshot,
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> Table:
    """Hourly rows from one hour ago through 23:00 tomorrow."""
    table = Table()
    table.add_column("Date", justify="right")
    table.add_column("Temp", justify="right")
    table.add_column("Humid", justify="right")
    table.add_column("Rain", justify="right")
    table.add_column("Wind")
    table.add_column("Summary")
    table.add_column("Cloud", justify="right")
    table.add_column("Vis.", justify="right")
    table.add_column("UV")

    for hour in filter_hourly(snapshot.hourly, now=now, tz=tz):
        table.add_row(
            hour_label(hour.dt, tz),
            round0(hour.temp),
            f"{hour.humidity}%",
            percent(hour.pop),
            f"{round0(hour.wind_speed)} [bright_black]/[/] {round0(hour.wind_gust)}",
            describe(hour.weather),
            f"{hour.clouds}%",
            visibility_km(hour.visibility),
            round0(hour.uvi),
        )
    return table


def build_daily_table(snapshot: ForecastSnapshot, tz: tzinfo | None = None) -> Table:
    """One row per forecast day."""
    table = Table()
    table.add_column("Date")
    table.add_column("Temp")
    table.add_column("Humid", justify="right")
    table.add_column("Rain", justify="right")
    table.add_column("Wind")
    table.add_column("Sun")

    for day in snapshot.daily:
        table.add_row(
            day_label(day, tz),
            f"{round0(day.temp.min)} [bright_black]/[/] {round0(day.temp.max)}",
            f"{day.humidity}%",
            rain_summary(day),
            f"{round0(day.wind_speed)} (up to {round0(day.wind_gust)})",
            sun_summary(day, tz),
        )
    return table
