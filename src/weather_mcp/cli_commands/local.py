"""In-process dispatch used by the inspection commands."""

from __future__ import annotations

from typing import Any

from weather_mcp.protocol.models import JsonRpcRequest
from weather_mcp.protocol.router import RequestRouter
from weather_mcp.weather.client import WeatherClient


async def dispatch(
    method: str, params: dict[str, Any], *, api_key: str | None = None
) -> dict[str, Any]:
    """Send one request through a fresh router and return the wire payload."""
    async with WeatherClient(api_key=api_key) as client:
        router = RequestRouter(client)
        response = await router.handle(JsonRpcRequest(id=1, method=method, params=params))
    return response.to_wire()
