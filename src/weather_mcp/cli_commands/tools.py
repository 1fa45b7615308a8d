"""``weather-mcp tools``: inspect and invoke the tool catalog locally."""

from __future__ import annotations

import asyncio
from typing import Any

import click

from weather_mcp.cli_commands._output import console, print_response, print_tools_table


@click.group()
def tools() -> None:
    """List and call tools."""


@tools.command("list")
def list_tools() -> None:
    """Show the tools this server exposes."""
    from weather_mcp.protocol.catalog import tool_catalog

    print_tools_table(tool_catalog())


@tools.command("call")
@click.argument("city")
@click.option(
    "--units",
    type=click.Choice(["metric", "imperial"]),
    default="metric",
    show_default=True,
    help="Temperature units.",
)
@click.option(
    "--api-key",
    envvar="OPENWEATHER_API_KEY",
    default=None,
    help="OpenWeatherMap API key. Omit for mock data.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the raw response envelope.")
def call_tool(city: str, units: str, api_key: str | None, as_json: bool) -> None:
    """Run get-weather for CITY through the request router."""
    from weather_mcp.cli_commands.local import dispatch

    params: dict[str, Any] = {"name": "get-weather", "arguments": {"city": city, "units": units}}
    try:
        payload = asyncio.run(dispatch("tools/call", params, api_key=api_key))
    except Exception as exc:
        console.print(f"[red]Tool call error:[/red] {exc}")
        return

    print_response(payload, as_json=as_json)
