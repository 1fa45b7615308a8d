"""Protocol layer: MCP JSON-RPC envelopes, catalogs, and request routing."""

from weather_mcp.protocol.models import (
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    PromptDescriptor,
    PromptMessage,
    ToolDescriptor,
)
from weather_mcp.protocol.router import RequestRouter

__all__ = [
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "PromptDescriptor",
    "PromptMessage",
    "RequestRouter",
    "ToolDescriptor",
]
