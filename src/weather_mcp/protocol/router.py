"""RequestRouter: transport-agnostic dispatch of MCP JSON-RPC requests.

Maps each request to one of a fixed set of handlers and always returns a
well-formed :class:`JsonRpcResponse`; no exception escapes :meth:`handle`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from weather_mcp.errors import (
    INTERNAL_ERROR,
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    ProtocolError,
    UnknownPromptError,
    UnknownToolError,
    WeatherError,
    WeatherServiceError,
)
from weather_mcp.protocol import catalog
from weather_mcp.protocol.models import (
    InitializeParams,
    JsonRpcRequest,
    JsonRpcResponse,
    PromptGetParams,
    ToolCallParams,
    WeatherToolArguments,
)
from weather_mcp.protocol.prompts import GENERATORS
from weather_mcp.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_PROMPT_NAME,
    ATTR_REQUEST_ID,
    ATTR_TOOL_NAME,
    get_tracer,
    set_span_attribute,
)
from weather_mcp.weather.formatter import format_weather

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from weather_mcp.protocol.prompts import WeatherSource

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)


def _validate(model: type[BaseModel], params: dict[str, Any]) -> Any:
    """Validate *params* into *model*, raising :class:`InvalidParamsError`."""
    try:
        return model.model_validate(params)
    except ValidationError as exc:
        raise InvalidParamsError(
            data=exc.errors(include_url=False, include_context=False, include_input=False)
        ) from exc


class RequestRouter:
    """Dispatches requests for the fixed MCP method set.

    Holds no per-request state; one instance serves every transport.

    Usage::

        router = RequestRouter(WeatherClient())
        response = await router.handle(JsonRpcRequest(id=1, method="tools/list"))
        payload = response.to_wire()
    """

    def __init__(self, weather: WeatherSource) -> None:
        self._weather = weather
        self._methods: dict[str, Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]] = {
            "initialize": self._initialize,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
            "prompts/list": self._prompts_list,
            "prompts/get": self._prompts_get,
        }

    @property
    def methods(self) -> list[str]:
        return list(self._methods)

    async def handle_message(self, raw: Any) -> JsonRpcResponse:
        """Validate a decoded JSON value as a request, then :meth:`handle` it."""
        try:
            request = JsonRpcRequest.model_validate(raw)
        except ValidationError as exc:
            request_id = raw.get("id") if isinstance(raw, dict) else None
            if not isinstance(request_id, (int, str)) or isinstance(request_id, bool):
                request_id = None
            error = InvalidRequestError(
                data=exc.errors(include_url=False, include_context=False, include_input=False)
            )
            return JsonRpcResponse.failure(request_id, error.code, error.message, error.data)
        return await self.handle(request)

    async def handle(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Dispatch *request* and wrap the outcome in a response envelope."""
        logger.info("Handling MCP request: %s", request.method)

        with _tracer.start_as_current_span("mcp.handle") as span:
            span.set_attribute(ATTR_METHOD, request.method)
            if request.id is not None:
                span.set_attribute(ATTR_REQUEST_ID, str(request.id))

            try:
                handler = self._methods.get(request.method)
                if handler is None:
                    raise MethodNotFoundError(request.method)
                result = await handler(request.params)
            except ProtocolError as exc:
                logger.info("Request %s rejected: %s", request.method, exc.message)
                span.set_attribute(ATTR_ERROR_CODE, exc.code)
                return JsonRpcResponse.failure(request.id, exc.code, exc.message, exc.data)
            except Exception as exc:
                logger.exception("Error handling request %s", request.method)
                span.set_attribute(ATTR_ERROR_CODE, INTERNAL_ERROR)
                return JsonRpcResponse.failure(
                    request.id, INTERNAL_ERROR, "Internal error", data=str(exc) or None
                )

        return JsonRpcResponse.success(request.id, result)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    async def _initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        # The client's requested version is accepted but not negotiated.
        init = _validate(InitializeParams, params)
        if init.client_info:
            logger.info("Client connected: %s", init.client_info.get("name", "?"))
        return {
            "protocolVersion": catalog.PROTOCOL_VERSION,
            "capabilities": catalog.capabilities(),
            "serverInfo": dict(catalog.SERVER_INFO),
        }

    async def _tools_list(self, params: dict[str, Any]) -> dict[str, Any]:
        return {"tools": catalog.tool_catalog()}

    async def _prompts_list(self, params: dict[str, Any]) -> dict[str, Any]:
        return {"prompts": catalog.prompt_catalog()}

    async def _tools_call(self, params: dict[str, Any]) -> dict[str, Any]:
        call: ToolCallParams = _validate(ToolCallParams, params)
        set_span_attribute(ATTR_TOOL_NAME, call.name)
        if call.name != catalog.GET_WEATHER:
            raise UnknownToolError(call.name)

        args: WeatherToolArguments = _validate(WeatherToolArguments, call.arguments)
        try:
            record = await self._weather.fetch(args.city, args.units)
        except WeatherError as exc:
            logger.warning("Weather tool error: %s", exc)
            return {
                "content": [{"type": "text", "text": f"Error getting weather: {exc}"}],
                "isError": True,
            }
        return {"content": [{"type": "text", "text": format_weather(record)}]}

    async def _prompts_get(self, params: dict[str, Any]) -> dict[str, Any]:
        get: PromptGetParams = _validate(PromptGetParams, params)
        set_span_attribute(ATTR_PROMPT_NAME, get.name)
        entry = GENERATORS.get(get.name)
        if entry is None:
            raise UnknownPromptError(get.name)

        args_model, generate = entry
        args = _validate(args_model, get.arguments)
        try:
            return await generate(self._weather, args)
        except WeatherError as exc:
            logger.warning("Prompt %s failed: %s", get.name, exc)
            raise WeatherServiceError(exc) from exc

