"""Terminal weather forecast from the OpenWeatherMap One Call API."""
