"""weather-mcp CLI entrypoint."""

from __future__ import annotations

import click

from weather_mcp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="weather-mcp")
def main() -> None:
    """Weather MCP server: weather lookups as MCP tools and prompts."""


# Register subcommands
from weather_mcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
