"""Weather MCP server: weather lookups exposed as MCP tools and prompts."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "1.0.0"

if TYPE_CHECKING:
    from weather_mcp.protocol.router import RequestRouter as RequestRouter
    from weather_mcp.weather.client import WeatherClient as WeatherClient

_EXPORTS = {
    "RequestRouter": "weather_mcp.protocol.router",
    "WeatherClient": "weather_mcp.weather.client",
}


def __getattr__(name: str) -> object:
    module_path = _EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'weather_mcp' has no attribute {name!r}")
