"""WeatherClient: current conditions from OpenWeatherMap, or mock data.

Without an API key the client never touches the network and returns a
deterministic mock record instead.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone

import httpx
from pydantic import ValidationError

from weather_mcp.errors import (
    CityNotFoundError,
    InvalidApiKeyError,
    InvalidCityError,
    WeatherFetchError,
)
from weather_mcp.utils.telemetry import ATTR_CITY, ATTR_MOCK, ATTR_UNITS, get_tracer
from weather_mcp.weather.models import OWMResponse, Units, WeatherRecord

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_TIMEOUT = 10.0


class WeatherClient:
    """Async weather lookups for a city + units pair.

    Usage::

        async with WeatherClient(api_key="...") as client:
            record = await client.fetch("London", "metric")

    In mock mode (``api_key=None``) the context manager is optional.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = OPENWEATHER_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key or None
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

        if self._api_key is None:
            logger.warning(
                "No OpenWeatherMap API key configured; serving mock weather data. "
                "Set OPENWEATHER_API_KEY for live data."
            )

    @property
    def is_mock(self) -> bool:
        return self._api_key is None

    async def __aenter__(self) -> WeatherClient:
        if not self.is_mock:
            self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "WeatherClient must be used as an async context manager"
            raise RuntimeError(msg)
        return self._client

    async def fetch(self, city: str, units: Units = "metric") -> WeatherRecord:
        """Return current conditions for *city*.

        Raises:
            InvalidCityError: *city* is empty or blank.
            CityNotFoundError: The provider answered 404.
            InvalidApiKeyError: The provider answered 401.
            WeatherFetchError: Any other transport or provider failure.
        """
        logger.info("Fetching weather for city: %s with units: %s", city, units)

        if not city or not city.strip():
            raise InvalidCityError()

        with _tracer.start_as_current_span("weather.fetch") as span:
            span.set_attribute(ATTR_CITY, city)
            span.set_attribute(ATTR_UNITS, units)
            span.set_attribute(ATTR_MOCK, self.is_mock)

            if self.is_mock:
                return mock_weather(city, units)
            return await self._fetch_live(city, units)

    async def _fetch_live(self, city: str, units: Units) -> WeatherRecord:
        params = {"q": city, "appid": self._api_key or "", "units": units}
        try:
            response = await self._http().get(self._base_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error("Error fetching weather data for %s: HTTP %s", city, status)
            if status == 404:
                raise CityNotFoundError(city) from exc
            if status == 401:
                raise InvalidApiKeyError() from exc
            raise WeatherFetchError(str(exc)) from exc
        except httpx.HTTPError as exc:
            logger.error("Error fetching weather data for %s: %s", city, exc)
            raise WeatherFetchError(str(exc)) from exc

        try:
            payload = OWMResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.error("Unexpected weather payload for %s: %s", city, exc)
            raise WeatherFetchError(str(exc)) from exc

        return _to_record(payload, units)


def _to_record(payload: OWMResponse, units: Units) -> WeatherRecord:
    return WeatherRecord(
        city=payload.name,
        country=payload.sys.country,
        temperature=_round_half_up(payload.main.temp),
        feels_like=_round_half_up(payload.main.feels_like),
        humidity=payload.main.humidity,
        pressure=payload.main.pressure,
        description=payload.weather[0].description if payload.weather else "",
        wind_speed=payload.wind.speed,
        wind_direction=payload.wind.deg,
        visibility=payload.visibility,
        units=units,
        timestamp=datetime.now(timezone.utc),
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def mock_weather(city: str, units: Units) -> WeatherRecord:
    """Deterministic stand-in record used when no API key is configured."""
    metric = units == "metric"
    return WeatherRecord(
        city=city.capitalize(),
        country="XX",
        temperature=22 if metric else 72,
        feels_like=24 if metric else 75,
        humidity=65,
        pressure=1013,
        description="partly cloudy",
        wind_speed=5.2 if metric else 11.6,
        wind_direction=180,
        visibility=10000,
        units=units,
        timestamp=datetime.now(timezone.utc),
    )
