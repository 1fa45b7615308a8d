"""Stdio transport: newline-delimited JSON-RPC over stdin/stdout.

Reads one request per line and writes one response per line.  Requests are
handled in arrival order.  Notifications (``notifications/*`` without an
``id``) get no reply.  A line that cannot be read or decoded gets a parse
error reply and the loop carries on; only EOF on stdin ends it.

Pipes, sockets and terminals are served through asyncio pipe transports.
When stdin or stdout is redirected to a regular file (``weather-mcp stdio <
requests.jsonl``) the file is read up front and output is written directly.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import stat
import sys
from typing import IO, TYPE_CHECKING, Any, Protocol

from weather_mcp.errors import ParseError
from weather_mcp.transports._codec import decode, error_payload

if TYPE_CHECKING:
    from weather_mcp.protocol.router import RequestRouter

logger = logging.getLogger(__name__)

# Longest accepted request line; asyncio's default is 64 KiB.
STREAM_LIMIT = 1024 * 1024


class LineReader(Protocol):
    async def readline(self) -> bytes: ...


class LineWriter(Protocol):
    def write(self, data: bytes) -> None: ...
    async def drain(self) -> None: ...


def _is_notification(raw: Any) -> bool:
    return (
        isinstance(raw, dict)
        and "id" not in raw
        and isinstance(raw.get("method"), str)
        and raw["method"].startswith("notifications/")
    )


class StdioServer:
    """Serves a :class:`RequestRouter` over a pair of byte streams.

    Usage::

        reader, writer = await open_stdio_streams()
        await StdioServer(router, reader, writer).serve()
    """

    def __init__(self, router: RequestRouter, reader: LineReader, writer: LineWriter) -> None:
        self._router = router
        self._reader = reader
        self._writer = writer

    async def serve(self) -> None:
        """Process lines until the input channel closes."""
        logger.info("Weather MCP stdio server started")
        while True:
            try:
                line = await self._reader.readline()
            except ValueError as exc:
                # StreamReader drops the oversized line before raising.
                logger.warning("Discarding oversized line: %s", exc)
                await self.send(error_payload(ParseError(str(exc))))
                continue
            if not line:
                break
            if not line.strip():
                continue
            reply = await self.handle_line(line)
            if reply is not None:
                await self.send(reply)
        logger.info("Stdin closed, stopping stdio server")

    async def handle_line(self, line: bytes) -> dict[str, Any] | None:
        """Turn one input line into the reply payload, or ``None`` for notifications."""
        try:
            raw = decode(line)
        except ParseError as exc:
            logger.warning("Discarding undecodable line: %s", exc.data)
            return error_payload(exc)

        if _is_notification(raw):
            logger.debug("Notification received: %s", raw["method"])
            return None

        response = await self._router.handle_message(raw)
        return response.to_wire()

    async def send(self, payload: dict[str, Any]) -> None:
        """Write *payload* as a single JSON line."""
        line = json.dumps(payload, ensure_ascii=False) + "\n"
        self._writer.write(line.encode())
        await self._writer.drain()


class _FileWriter:
    """:class:`LineWriter` over a regular file, which asyncio cannot wrap in a pipe."""

    def __init__(self, stream: IO[bytes]) -> None:
        self._stream = stream

    def write(self, data: bytes) -> None:
        self._stream.write(data)

    async def drain(self) -> None:
        self._stream.flush()


def _is_regular_file(stream: IO[Any]) -> bool:
    try:
        return stat.S_ISREG(os.fstat(stream.fileno()).st_mode)
    except (OSError, ValueError):
        return False


async def open_stdio_streams() -> tuple[LineReader, LineWriter]:
    """Wrap the process's stdin/stdout in asyncio streams."""
    loop = asyncio.get_running_loop()

    reader = asyncio.StreamReader(limit=STREAM_LIMIT)
    if _is_regular_file(sys.stdin):
        reader.feed_data(await asyncio.to_thread(sys.stdin.buffer.read))
        reader.feed_eof()
    else:
        await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), sys.stdin)

    if _is_regular_file(sys.stdout):
        return reader, _FileWriter(sys.stdout.buffer)

    transport, protocol = await loop.connect_write_pipe(
        asyncio.streams.FlowControlMixin, sys.stdout
    )
    writer = asyncio.StreamWriter(transport, protocol, reader, loop)
    return reader, writer
