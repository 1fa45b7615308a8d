"""MCP models: JSON-RPC 2.0 envelopes, catalog entries, and per-method params.

Implements the message format used by the Model Context Protocol for
capability negotiation (``initialize``), tool discovery and execution
(``tools/list``, ``tools/call``), and prompt templating (``prompts/list``,
``prompts/get``).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

from weather_mcp.weather.models import Units

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message."""

    model_config = ConfigDict(frozen=True)

    jsonrpc: str = "2.0"
    method: str
    # Strict: a boolean id is rejected instead of being echoed back as 1.
    id: StrictInt | StrictStr | None = None
    params: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _null_params(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("params") is None:
            return {k: v for k, v in data.items() if k != "params"}
        return data


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Exactly one of ``result`` or ``error`` is set.
    """

    jsonrpc: str = "2.0"
    id: int | str | None = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _result_xor_error(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "exactly one of 'result' or 'error' must be set"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, request_id: int | str | None, result: dict[str, Any]) -> JsonRpcResponse:
        return cls(id=request_id, result=result)

    @classmethod
    def failure(
        cls,
        request_id: int | str | None,
        code: int,
        message: str,
        data: Any = None,
    ) -> JsonRpcResponse:
        return cls(id=request_id, error=JsonRpcError(code=code, message=message, data=data))

    def to_wire(self) -> dict[str, Any]:
        """Dump to the JSON shape sent to clients.

        ``id`` is omitted when the request carried none, as are the unused
        ``result``/``error`` slot and an empty ``error.data``.
        """
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if self.id is not None:
            data["id"] = self.id
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result
        return data


# ---------------------------------------------------------------------------
# Catalog entries
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")


class PromptArgument(BaseModel):
    """A named prompt argument."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    required: bool = False


class PromptDescriptor(BaseModel):
    """A prompt definition as returned by ``prompts/list``."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    arguments: tuple[PromptArgument, ...] = ()


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class PromptMessage(BaseModel):
    """A single message in a rendered prompt."""

    role: Literal["user", "assistant"]
    content: TextContent

    @classmethod
    def user(cls, text: str) -> PromptMessage:
        return cls(role="user", content=TextContent(text=text))


# ---------------------------------------------------------------------------
# Per-method parameters
# ---------------------------------------------------------------------------


class InitializeParams(BaseModel):
    """Client side of the ``initialize`` handshake. Accepted, not negotiated."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    protocol_version: str | None = Field(default=None, alias="protocolVersion")
    capabilities: dict[str, Any] = Field(default_factory=dict)
    client_info: dict[str, Any] | None = Field(default=None, alias="clientInfo")


class _NamedCallParams(BaseModel):
    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def _null_arguments(cls, value: Any) -> Any:
        return {} if value is None else value


class ToolCallParams(_NamedCallParams):
    """Parameters of ``tools/call``."""


class PromptGetParams(_NamedCallParams):
    """Parameters of ``prompts/get``."""


class WeatherToolArguments(BaseModel):
    """Arguments of the ``get-weather`` tool."""

    city: str
    units: Units = "metric"

    @field_validator("units", mode="before")
    @classmethod
    def _default_units(cls, value: Any) -> Any:
        return value or "metric"


class _PromptArguments(BaseModel):
    """Prompt arguments arrive as strings; empty ones fall back to defaults."""

    @model_validator(mode="before")
    @classmethod
    def _drop_empty(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v not in (None, "")}
        return data


class WeatherReportArguments(_PromptArguments):
    city: str = "London"
    units: Units = "metric"


class TravelAdviceArguments(_PromptArguments):
    cities: str = "London,Paris"
    travel_date: str = "today"

    def city_list(self) -> list[str]:
        return [city.strip() for city in self.cities.split(",")]


class WeatherComparisonArguments(_PromptArguments):
    city1: str = "London"
    city2: str = "Paris"
