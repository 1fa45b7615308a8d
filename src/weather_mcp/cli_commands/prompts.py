"""``weather-mcp prompts``: inspect and render the prompt catalog locally."""

from __future__ import annotations

import asyncio

import click

from weather_mcp.cli_commands._output import console, print_prompts_table, print_response


@click.group()
def prompts() -> None:
    """List and render prompts."""


@prompts.command("list")
def list_prompts() -> None:
    """Show the prompts this server exposes."""
    from weather_mcp.protocol.catalog import prompt_catalog

    print_prompts_table(prompt_catalog())


def _parse_arguments(pairs: tuple[str, ...]) -> dict[str, str]:
    arguments: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="-a")
        arguments[key.strip()] = value.strip()
    return arguments


@prompts.command("get")
@click.argument("name")
@click.option("-a", "--arg", "args", multiple=True, help="Prompt argument as key=value.")
@click.option(
    "--api-key",
    envvar="OPENWEATHER_API_KEY",
    default=None,
    help="OpenWeatherMap API key. Omit for mock data.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the raw response envelope.")
def get_prompt(name: str, args: tuple[str, ...], api_key: str | None, as_json: bool) -> None:
    """Render prompt NAME through the request router.

    Example: weather-mcp prompts get weather-comparison -a city1=Paris -a city2=Tokyo
    """
    from weather_mcp.cli_commands.local import dispatch

    params = {"name": name, "arguments": _parse_arguments(args)}
    try:
        payload = asyncio.run(dispatch("prompts/get", params, api_key=api_key))
    except Exception as exc:
        console.print(f"[red]Prompt error:[/red] {exc}")
        return

    print_response(payload, as_json=as_json)
