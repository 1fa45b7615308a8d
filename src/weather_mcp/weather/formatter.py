"""Plain-text rendering of a :class:`WeatherRecord`."""

from __future__ import annotations

from datetime import timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weather_mcp.weather.models import WeatherRecord


def format_weather(record: WeatherRecord) -> str:
    """Render *record* as the multi-line block shown to clients.

    Deterministic for a given record: the timestamp comes from the record.
    """
    temp_unit = "°C" if record.units == "metric" else "°F"
    speed_unit = "m/s" if record.units == "metric" else "mph"

    return "\n".join([
        f"Weather in {record.city}, {record.country}:",
        f"Temperature: {record.temperature}{temp_unit} (feels like {record.feels_like}{temp_unit})",
        f"Condition: {record.description}",
        f"Humidity: {record.humidity}%",
        f"Pressure: {record.pressure} hPa",
        f"Wind: {_number(record.wind_speed)} {speed_unit} at {record.wind_direction}°",
        f"Visibility: {_number(record.visibility / 1000)} km",
        f"Last updated: {_iso_utc(record)}",
    ])


def _number(value: float) -> str:
    # 10.0 -> "10", 5.2 -> "5.2"
    return f"{value:g}"


def _iso_utc(record: WeatherRecord) -> str:
    ts = record.timestamp
    if ts.tzinfo is not None:
        ts = ts.astimezone(timezone.utc).replace(tzinfo=None)
    return ts.isoformat(timespec="milliseconds") + "Z"
