"""Pure formatting helpers shared by the forecast views.

`tz=None` means the local timezone of the machine running the CLI.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import UTC, datetime, time, timedelta, tzinfo
from decimal import ROUND_HALF_UP, Decimal

from ..weather.models import DailyEntry, HourlyEntry, WeatherCondition

PLACEHOLDER = "--"
FULL_MOON_PHASE = 0.5
FULL_MOON_MARKER = " 🌕"
HOURLY_LOOKBACK = timedelta(hours=1)
HOURLY_LAST_HOUR = time(hour=23)


def to_local(epoch_seconds: int, tz: tzinfo | None = None) -> datetime:
    """Convert epoch seconds to an aware datetime in `tz` (local when None)."""
    return datetime.fromtimestamp(epoch_seconds, UTC).astimezone(tz)


def local_now(tz: tzinfo | None = None) -> datetime:
    return datetime.now(UTC).astimezone(tz)


def round_half_up(value: float) -> str:
    """Whole-number text with halves rounded away from zero (12.5 -> 13, -2.5 -> -3)."""
    rounded = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    # Drop the sign of negative zero.
    return str(rounded + 0)


def round0(value: float | None) -> str:
    """Format a number with zero decimal places, or the placeholder when absent."""
    if value is None:
        return PLACEHOLDER
    return round_half_up(value)


def percent(fraction: float) -> str:
    """Format a 0.0-1.0 probability as a whole percentage."""
    return f"{round_half_up(fraction * 100)}%"


def hourly_window(now: datetime) -> tuple[datetime, datetime]:
    """Return the inclusive local wall-clock window for the hourly view.

    Starts one hour before `now` and ends at 23:00 on the calendar day after
    the window start.
    """
    earliest = now.replace(tzinfo=None) - HOURLY_LOOKBACK
    last = datetime.combine(earliest.date() + timedelta(days=1), HOURLY_LAST_HOUR)
    return earliest, last


def filter_hourly(
    entries: Iterable[HourlyEntry],
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> Iterator[HourlyEntry]:
    """Yield entries inside the hourly display window, keeping their order."""
    if now is None:
        now = local_now(tz)
    earliest, last = hourly_window(now.astimezone(tz))
    for entry in entries:
        wall_clock = to_local(entry.dt, tz).replace(tzinfo=None)
        if earliest <= wall_clock <= last:
            yield entry


def hour_label(epoch_seconds: int, tz: tzinfo | None = None) -> str:
    """`HH`, or `Mon D @ HH` for the first hour of a local day."""
    moment = to_local(epoch_seconds, tz)
    if moment.hour == 0:
        return f"{moment:%b} {moment.day} @ {moment:%H}"
    return f"{moment:%H}"


def is_full_moon(entry: DailyEntry) -> bool:
    return entry.moon_phase == FULL_MOON_PHASE


def day_label(entry: DailyEntry, tz: tzinfo | None = None) -> str:
    moment = to_local(entry.dt, tz)
    label = f"{moment:%a %b} {moment.day}"
    if is_full_moon(entry):
        label += FULL_MOON_MARKER
    return label


def rain_summary(entry: DailyEntry) -> str:
    """`<volume>mm @ <pop>%`, with `--` in place of a missing volume."""
    volume = PLACEHOLDER if entry.rain is None else f"{round_half_up(entry.rain)}mm"
    return f"{volume} @ {percent(entry.pop)}"


def format_duration(delta: timedelta) -> str:
    """Format a non-negative duration as `H:MM`."""
    total_minutes = max(0, int(delta.total_seconds())) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}:{minutes:02d}"


def sun_summary(entry: DailyEntry, tz: tzinfo | None = None) -> str:
    sunrise = to_local(entry.sunrise, tz)
    sunset = to_local(entry.sunset, tz)
    return f"{sunrise:%H:%M} – {sunset:%H:%M} ({format_duration(sunset - sunrise)})"


def visibility_km(meters: int | None) -> str:
    if meters is None:
        return PLACEHOLDER
    return f"{round_half_up(meters / 1000)}km"


def describe(conditions: Iterable[WeatherCondition]) -> str:
    return "\n".join(condition.description for condition in conditions)
