"""Terminal presentation of parsed forecasts."""

from .forecast_views import build_current_panel, build_daily_table, build_hourly_table

__all__ = ["build_current_panel", "build_daily_table", "build_hourly_table"]
