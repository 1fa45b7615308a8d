"""Shared fixtures: a recording weather source and routers built on it."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import pytest

from weather_mcp.errors import WeatherError
from weather_mcp.protocol.router import RequestRouter
from weather_mcp.weather.client import WeatherClient
from weather_mcp.weather.models import WeatherRecord

FIXED_TIME = datetime(2024, 5, 1, 12, 30, 0, 123000, tzinfo=timezone.utc)


def make_record(city: str = "London", units: str = "metric", **overrides: object) -> WeatherRecord:
    metric = units == "metric"
    data: dict[str, object] = {
        "city": city,
        "country": "GB",
        "temperature": 18 if metric else 64,
        "feels_like": 17 if metric else 63,
        "humidity": 70,
        "pressure": 1012,
        "description": "light rain",
        "wind_speed": 4.1 if metric else 9.2,
        "wind_direction": 250,
        "visibility": 9000,
        "units": units,
        "timestamp": FIXED_TIME,
    }
    data.update(overrides)
    return WeatherRecord.model_validate(data)


class RecordingSource:
    """Fake weather source that records calls and can fail per city.

    ``in_flight``/``max_in_flight`` track how many fetches overlap so tests
    can assert on concurrency.
    """

    def __init__(self, failures: dict[str, WeatherError] | None = None, delay: float = 0.0) -> None:
        self.calls: list[tuple[str, str]] = []
        self.failures = failures or {}
        self.delay = delay
        self.in_flight = 0
        self.max_in_flight = 0
        self.completed: list[str] = []

    async def fetch(self, city: str, units: str = "metric") -> WeatherRecord:
        self.calls.append((city, units))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if city in self.failures:
                raise self.failures[city]
            self.completed.append(city)
            return make_record(city, units)
        finally:
            self.in_flight -= 1


@pytest.fixture
def source() -> RecordingSource:
    return RecordingSource()


@pytest.fixture
def router(source: RecordingSource) -> RequestRouter:
    return RequestRouter(source)


@pytest.fixture
def mock_router() -> RequestRouter:
    """Router over a real client in mock-data mode (no API key)."""
    return RequestRouter(WeatherClient(api_key=None))


@pytest.fixture
def record_factory():  # noqa: ANN201
    return make_record


@pytest.fixture
def source_factory() -> type[RecordingSource]:
    return RecordingSource
