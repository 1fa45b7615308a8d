"""Shared JSON decoding for the transports."""

from __future__ import annotations

import json
from typing import Any

from weather_mcp.errors import ParseError
from weather_mcp.protocol.models import JsonRpcResponse


def decode(data: bytes | str) -> Any:
    """Decode one JSON message, raising :class:`ParseError` on any failure."""
    try:
        return json.loads(data)
    except (ValueError, RecursionError) as exc:
        # RecursionError comes from pathologically nested arrays/objects.
        raise ParseError(str(exc)) from exc


def error_payload(error: ParseError) -> dict[str, Any]:
    """Wire payload for a message that could not be read, so no id is known."""
    return JsonRpcResponse.failure(None, error.code, error.message, error.data).to_wire()
