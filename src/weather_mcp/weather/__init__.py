"""Weather layer: upstream client, record model, and text formatter."""

from weather_mcp.weather.client import WeatherClient, mock_weather
from weather_mcp.weather.formatter import format_weather
from weather_mcp.weather.models import Units, WeatherRecord

__all__ = [
    "Units",
    "WeatherClient",
    "WeatherRecord",
    "format_weather",
    "mock_weather",
]
