"""Tests for WeatherClient with mock data and a mocked httpx transport."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from weather_mcp.errors import (
    CityNotFoundError,
    InvalidApiKeyError,
    InvalidCityError,
    WeatherError,
    WeatherFetchError,
)
from weather_mcp.weather.client import OPENWEATHER_URL, WeatherClient, mock_weather


def _owm_json(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": "London",
        "sys": {"country": "GB"},
        "main": {"temp": 14.5, "feels_like": 13.49, "humidity": 81, "pressure": 1009},
        "weather": [{"description": "overcast clouds"}],
        "wind": {"speed": 3.6, "deg": 240},
        "visibility": 10000,
    }
    data.update(overrides)
    return data


def _transport(status: int = 200, payload: Any = None, seen: list[httpx.Request] | None = None):  # noqa: ANN202
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if isinstance(payload, (bytes, str)):
            return httpx.Response(status, content=payload)
        return httpx.Response(status, json=payload if payload is not None else _owm_json())

    return httpx.MockTransport(handler)


class TestMockMode:
    async def test_metric(self) -> None:
        client = WeatherClient(api_key=None)
        record = await client.fetch("london", "metric")
        assert client.is_mock
        assert record.city == "London"
        assert record.country == "XX"
        assert record.temperature == 22
        assert record.feels_like == 24
        assert record.wind_speed == 5.2
        assert record.units == "metric"

    async def test_imperial(self) -> None:
        record = await WeatherClient().fetch("PARIS", "imperial")
        assert record.city == "Paris"
        assert record.temperature == 72
        assert record.feels_like == 75
        assert record.wind_speed == 11.6

    async def test_blank_key_is_mock(self) -> None:
        assert WeatherClient(api_key="").is_mock

    @pytest.mark.parametrize("city", ["", "   "])
    async def test_empty_city_rejected(self, city: str) -> None:
        with pytest.raises(InvalidCityError, match="City name is required"):
            await WeatherClient().fetch(city, "imperial")

    def test_mock_weather_fixed_fields(self) -> None:
        record = mock_weather("oslo", "metric")
        assert (record.humidity, record.pressure, record.visibility) == (65, 1013, 10000)
        assert record.description == "partly cloudy"
        assert record.wind_direction == 180

    async def test_mock_mode_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="weather_mcp.weather.client"):
            WeatherClient(api_key=None)
        assert "mock weather data" in caplog.text


class TestLiveMode:
    async def test_success_transforms_payload(self) -> None:
        seen: list[httpx.Request] = []
        async with WeatherClient(api_key="k", transport=_transport(seen=seen)) as client:
            record = await client.fetch("London", "metric")

        assert record.city == "London"
        assert record.country == "GB"
        assert record.temperature == 15
        assert record.feels_like == 13
        assert record.humidity == 81
        assert record.pressure == 1009
        assert record.description == "overcast clouds"
        assert record.wind_speed == 3.6
        assert record.wind_direction == 240
        assert record.visibility == 10000
        assert record.units == "metric"

        [request] = seen
        assert str(request.url).startswith(OPENWEATHER_URL)
        assert request.url.params["q"] == "London"
        assert request.url.params["appid"] == "k"
        assert request.url.params["units"] == "metric"

    async def test_not_found(self) -> None:
        async with WeatherClient(api_key="k", transport=_transport(404, {"cod": "404"})) as client:
            with pytest.raises(CityNotFoundError, match='City "Nowhere" not found'):
                await client.fetch("Nowhere", "metric")

    async def test_bad_key(self) -> None:
        async with WeatherClient(api_key="bad", transport=_transport(401, {"cod": 401})) as client:
            with pytest.raises(InvalidApiKeyError, match="Invalid API key"):
                await client.fetch("London", "metric")

    async def test_server_error(self) -> None:
        async with WeatherClient(api_key="k", transport=_transport(500, {})) as client:
            with pytest.raises(WeatherFetchError, match="Failed to fetch weather data"):
                await client.fetch("London", "metric")

    async def test_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        transport = httpx.MockTransport(handler)
        async with WeatherClient(api_key="k", transport=transport) as client:
            with pytest.raises(WeatherFetchError) as exc_info:
                await client.fetch("London", "metric")
        assert "timed out" in exc_info.value.detail

    async def test_malformed_payload(self) -> None:
        async with WeatherClient(api_key="k", transport=_transport(200, b"not json")) as client:
            with pytest.raises(WeatherFetchError):
                await client.fetch("London", "metric")

    async def test_missing_fields(self) -> None:
        async with WeatherClient(api_key="k", transport=_transport(200, {"name": "X"})) as client:
            with pytest.raises(WeatherFetchError):
                await client.fetch("London", "metric")

    async def test_errors_share_base(self) -> None:
        async with WeatherClient(api_key="k", transport=_transport(404, {})) as client:
            with pytest.raises(WeatherError):
                await client.fetch("Nowhere", "metric")

    async def test_requires_context_manager(self) -> None:
        client = WeatherClient(api_key="k", transport=_transport())
        with pytest.raises(RuntimeError, match="async context manager"):
            await client.fetch("London", "metric")

    async def test_close_releases_session(self) -> None:
        client = WeatherClient(api_key="k", transport=_transport())
        async with client:
            assert client._client is not None
        assert client._client is None
