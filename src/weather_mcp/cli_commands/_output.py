"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()


def print_tools_table(tools: list[dict[str, Any]]) -> None:
    """Pretty-print the tool catalog as a table."""
    table = Table(title="Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Required")

    for tool in tools:
        schema = tool.get("inputSchema", {})
        table.add_row(
            tool.get("name", "?"),
            _truncate(tool.get("description", "")),
            ", ".join(schema.get("required", [])) or "-",
        )

    console.print(table)


def print_prompts_table(prompts: list[dict[str, Any]]) -> None:
    """Pretty-print the prompt catalog as a table."""
    table = Table(title="Prompts")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Arguments")

    for prompt in prompts:
        args = [
            arg["name"] + ("" if arg.get("required") else "?")
            for arg in prompt.get("arguments", [])
        ]
        table.add_row(
            prompt.get("name", "?"),
            _truncate(prompt.get("description", "")),
            ", ".join(args) or "-",
        )

    console.print(table)


def print_response(payload: dict[str, Any], *, as_json: bool = False) -> None:
    """Print a response envelope: raw JSON, or the text it carries."""
    if as_json:
        console.print_json(json.dumps(payload, default=str))
        return

    if "error" in payload:
        error = payload["error"]
        console.print(f"[red]Error {error['code']}:[/red] {error['message']}")
        return

    result = payload.get("result", {})
    style = "red" if result.get("isError") else None
    for text in _texts(result):
        console.print(text, style=style, markup=False, highlight=False)


def _texts(result: dict[str, Any]) -> list[str]:
    if "content" in result:
        return [item["text"] for item in result["content"] if item.get("type") == "text"]
    if "messages" in result:
        return [msg["content"]["text"] for msg in result["messages"]]
    return [json.dumps(result, indent=2)]


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
