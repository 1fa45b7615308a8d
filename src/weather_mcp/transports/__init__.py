"""Transport adapters: HTTP and stdio front ends for the request router."""

from weather_mcp.transports.stdio import StdioServer

__all__ = ["StdioServer"]
