"""``weather-mcp serve`` and ``weather-mcp stdio``: run a transport."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from weather_mcp.config import ServerSettings


def _settings(env_file: str | None, **overrides: object) -> ServerSettings:
    from weather_mcp.config import load_settings
    from weather_mcp.utils.log import configure_logging

    settings = load_settings(env_file=env_file, **overrides)
    configure_logging(settings.log_level)
    return settings


def _enable_tracing(otel_console: bool, otlp_endpoint: str | None) -> None:
    if not (otel_console or otlp_endpoint):
        return
    from weather_mcp.utils.telemetry import configure_telemetry

    configure_telemetry(export_to_console=otel_console, otlp_endpoint=otlp_endpoint)


env_file_option = click.option(
    "--env-file",
    default=".env",
    show_default=True,
    help="Dotenv file loaded before reading the environment.",
)
api_key_option = click.option(
    "--api-key",
    default=None,
    help="OpenWeatherMap API key (overrides OPENWEATHER_API_KEY). Omit for mock data.",
)
log_level_option = click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (overrides LOG_LEVEL).",
)
otlp_option = click.option("--otlp-endpoint", default=None, help="Export spans via OTLP/gRPC.")


@click.command()
@click.option("--host", default=None, help="Bind address (overrides HOST).")
@click.option("--port", type=int, default=None, help="Listen port (overrides PORT).")
@api_key_option
@log_level_option
@env_file_option
@click.option("--otel-console", is_flag=True, help="Print trace spans to stdout.")
@otlp_option
def serve(
    host: str | None,
    port: int | None,
    api_key: str | None,
    log_level: str | None,
    env_file: str,
    otel_console: bool,
    otlp_endpoint: str | None,
) -> None:
    """Serve MCP over HTTP (POST /mcp)."""
    from weather_mcp.server import run_http

    settings = _settings(env_file, host=host, port=port, api_key=api_key, log_level=log_level)
    _enable_tracing(otel_console, otlp_endpoint)
    run_http(settings)


@click.command()
@api_key_option
@log_level_option
@env_file_option
@otlp_option
def stdio(
    api_key: str | None,
    log_level: str | None,
    env_file: str,
    otlp_endpoint: str | None,
) -> None:
    """Serve MCP over stdin/stdout (one JSON message per line)."""
    from weather_mcp.server import run_stdio

    settings = _settings(env_file, api_key=api_key, log_level=log_level)
    # Console span export would corrupt the stdout protocol channel.
    _enable_tracing(False, otlp_endpoint)
    asyncio.run(run_stdio(settings))
