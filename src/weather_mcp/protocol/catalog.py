"""Static server catalogs: identity, capabilities, tools, and prompts.

Built once at import time and never mutated.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from weather_mcp import __version__
from weather_mcp.protocol.models import PromptArgument, PromptDescriptor, ToolDescriptor

PROTOCOL_VERSION = "2024-11-05"

SERVER_NAME = "weather-mcp-server"

SERVER_INFO = MappingProxyType({"name": SERVER_NAME, "version": __version__})

CAPABILITIES = MappingProxyType(
    {
        "tools": MappingProxyType({"listChanged": True}),
        "prompts": MappingProxyType({"listChanged": True}),
    }
)

GET_WEATHER = "get-weather"

TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name=GET_WEATHER,
        description="Get current weather information for a city",
        input_schema={
            "type": "object",
            "properties": {
                "city": {
                    "type": "string",
                    "description": "The city name to get weather for",
                },
                "units": {
                    "type": "string",
                    "enum": ["metric", "imperial"],
                    "description": "Temperature units (metric for Celsius, imperial for Fahrenheit)",
                    "default": "metric",
                },
            },
            "required": ["city"],
        },
    ),
)

WEATHER_REPORT = "weather-report"
TRAVEL_WEATHER_ADVICE = "travel-weather-advice"
WEATHER_COMPARISON = "weather-comparison"

PROMPTS: tuple[PromptDescriptor, ...] = (
    PromptDescriptor(
        name=WEATHER_REPORT,
        description=(
            "Generate a comprehensive weather report for a city with analysis and recommendations"
        ),
        arguments=(
            PromptArgument(name="city", description="The city to get weather for", required=True),
            PromptArgument(
                name="units",
                description="Temperature units (metric or imperial)",
                required=False,
            ),
        ),
    ),
    PromptDescriptor(
        name=TRAVEL_WEATHER_ADVICE,
        description="Get weather-based travel advice for multiple cities",
        arguments=(
            PromptArgument(
                name="cities",
                description="Comma-separated list of cities to check",
                required=True,
            ),
            PromptArgument(
                name="travel_date",
                description="Intended travel date (for context)",
                required=False,
            ),
        ),
    ),
    PromptDescriptor(
        name=WEATHER_COMPARISON,
        description="Compare weather conditions between two cities",
        arguments=(
            PromptArgument(name="city1", description="First city to compare", required=True),
            PromptArgument(name="city2", description="Second city to compare", required=True),
        ),
    ),
)


def capabilities() -> dict[str, Any]:
    """Return a plain-dict copy of :data:`CAPABILITIES`."""
    return {key: dict(value) for key, value in CAPABILITIES.items()}


def tool_catalog() -> list[dict[str, Any]]:
    """Return the tool catalog in wire shape."""
    return [tool.model_dump(mode="json", by_alias=True) for tool in TOOLS]


def prompt_catalog() -> list[dict[str, Any]]:
    """Return the prompt catalog in wire shape."""
    return [prompt.model_dump(mode="json") for prompt in PROMPTS]
