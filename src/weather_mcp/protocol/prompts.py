"""Prompt generators for ``prompts/get``.

Each generator fetches live weather, formats it, and embeds it in an
instruction template.  Multi-city prompts fetch concurrently and fail as a
whole if any single fetch fails.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Protocol

from weather_mcp.protocol.catalog import TRAVEL_WEATHER_ADVICE, WEATHER_COMPARISON, WEATHER_REPORT
from weather_mcp.protocol.models import (
    PromptMessage,
    TravelAdviceArguments,
    WeatherComparisonArguments,
    WeatherReportArguments,
)
from weather_mcp.weather.formatter import format_weather

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from pydantic import BaseModel

    from weather_mcp.weather.models import Units, WeatherRecord


class WeatherSource(Protocol):
    """Anything that can fetch a :class:`WeatherRecord`."""

    async def fetch(self, city: str, units: Units = "metric") -> WeatherRecord: ...


WEATHER_REPORT_TEMPLATE = """\
Please analyze this weather data and provide a comprehensive weather report with insights and recommendations:

{weather}

Include:
- Current conditions summary
- Comfort level analysis
- Activity recommendations
- What to wear suggestions
- Any weather alerts or notable conditions"""

TRAVEL_ADVICE_TEMPLATE = """\
I'm planning to travel to these cities {travel_date}. Please analyze the weather conditions and provide travel advice:

{weather}

Please provide:
- Best city for outdoor activities
- Packing recommendations
- Transportation considerations
- Best times to visit each location
- Any weather-related travel warnings"""

WEATHER_COMPARISON_TEMPLATE = """\
Please compare the weather conditions between these two cities and help me decide which has better conditions:

**{city1}:**
{weather1}

**{city2}:**
{weather2}

Provide a detailed comparison including:
- Temperature and comfort differences
- Precipitation and visibility
- Wind conditions
- Overall weather quality
- Recommendations for activities in each city"""


def _result(description: str, text: str) -> dict[str, Any]:
    return {
        "description": description,
        "messages": [PromptMessage.user(text).model_dump()],
    }


async def _fetch_all(source: WeatherSource, cities: list[str]) -> list[WeatherRecord]:
    """Fetch every city concurrently in metric units; first failure propagates."""
    return list(await asyncio.gather(*[source.fetch(city, "metric") for city in cities]))


async def weather_report(source: WeatherSource, args: WeatherReportArguments) -> dict[str, Any]:
    record = await source.fetch(args.city, args.units)
    text = WEATHER_REPORT_TEMPLATE.format(weather=format_weather(record))
    return _result(f"Comprehensive weather report for {args.city}", text)


async def travel_weather_advice(
    source: WeatherSource, args: TravelAdviceArguments
) -> dict[str, Any]:
    # Units are always metric here, whatever the caller asked for.
    cities = args.city_list()
    records = await _fetch_all(source, cities)
    weather = "\n\n".join(format_weather(r) for r in records)
    text = TRAVEL_ADVICE_TEMPLATE.format(travel_date=args.travel_date, weather=weather)
    return _result(f"Travel weather advice for {', '.join(cities)}", text)


async def weather_comparison(
    source: WeatherSource, args: WeatherComparisonArguments
) -> dict[str, Any]:
    first, second = await _fetch_all(source, [args.city1, args.city2])
    text = WEATHER_COMPARISON_TEMPLATE.format(
        city1=args.city1,
        city2=args.city2,
        weather1=format_weather(first),
        weather2=format_weather(second),
    )
    return _result(f"Weather comparison between {args.city1} and {args.city2}", text)


GENERATORS: dict[
    str, tuple[type[BaseModel], Callable[[WeatherSource, Any], Awaitable[dict[str, Any]]]]
] = {
    WEATHER_REPORT: (WeatherReportArguments, weather_report),
    TRAVEL_WEATHER_ADVICE: (TravelAdviceArguments, travel_weather_advice),
    WEATHER_COMPARISON: (WeatherComparisonArguments, weather_comparison),
}
