"""WeatherDesk backend: weather lookups, forecast summaries and search history."""
