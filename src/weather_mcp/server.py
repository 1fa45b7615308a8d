"""Server wiring: build the client/router pair and run a transport."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from weather_mcp.protocol.router import RequestRouter
from weather_mcp.weather.client import WeatherClient

if TYPE_CHECKING:
    from weather_mcp.config import ServerSettings

logger = logging.getLogger(__name__)


def build_router(settings: ServerSettings) -> tuple[RequestRouter, WeatherClient]:
    """Create the weather client and a router bound to it."""
    client = WeatherClient(api_key=settings.api_key, timeout=settings.timeout)
    return RequestRouter(client), client


def run_http(settings: ServerSettings) -> None:
    """Serve ``POST /mcp`` with uvicorn until interrupted."""
    import uvicorn

    from weather_mcp.transports.http import MCP_PATH, create_app

    router, client = build_router(settings)
    app = create_app(router, client)
    logger.info(
        "Weather MCP Server is running on: http://%s:%s (endpoint %s)",
        settings.host,
        settings.port,
        MCP_PATH,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


async def run_stdio(settings: ServerSettings) -> None:
    """Serve newline-delimited JSON-RPC on stdin/stdout until EOF."""
    from weather_mcp.transports.stdio import StdioServer, open_stdio_streams

    router, client = build_router(settings)
    async with client:
        reader, writer = await open_stdio_streams()
        await StdioServer(router, reader, writer).serve()
