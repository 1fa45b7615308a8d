"""HTTP transport: one JSON-RPC envelope per ``POST /mcp``."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weather_mcp import __version__
from weather_mcp.errors import ParseError
from weather_mcp.transports._codec import decode, error_payload

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from weather_mcp.protocol.router import RequestRouter
    from weather_mcp.weather.client import WeatherClient

logger = logging.getLogger(__name__)

MCP_PATH = "/mcp"


def create_app(router: RequestRouter, client: WeatherClient | None = None) -> FastAPI:
    """Build the FastAPI application serving *router*.

    When *client* is given its HTTP session is opened for the lifetime of the
    application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if client is None:
            yield
            return
        async with client:
            logger.info("Weather MCP HTTP server ready, endpoint %s", MCP_PATH)
            yield

    app = FastAPI(title="Weather MCP Server", version=__version__, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post(MCP_PATH)
    async def handle_mcp(request: Request) -> JSONResponse:
        body = await request.body()
        try:
            raw: Any = decode(body)
        except ParseError as exc:
            logger.warning("Rejecting undecodable body: %s", exc.data)
            return JSONResponse(error_payload(exc))

        logger.debug("Received MCP request: %s", raw)
        response = await router.handle_message(raw)
        payload = response.to_wire()
        logger.debug("Sending MCP response: %s", payload)
        return JSONResponse(payload)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
