"""Shared error types for the protocol layer and the weather client."""

from __future__ import annotations

from typing import Any

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """Base error for failures reported to the caller as a JSON-RPC error."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str, data: Any = None) -> None:
        self.message = message
        self.data = data
        super().__init__(message)


class ParseError(ProtocolError):
    """The incoming message is not valid JSON."""

    code = PARSE_ERROR

    def __init__(self, detail: str = "") -> None:
        super().__init__("Parse error", data=detail or None)


class InvalidRequestError(ProtocolError):
    """The incoming message is not a JSON-RPC request object."""

    code = INVALID_REQUEST

    def __init__(self, data: Any = None) -> None:
        super().__init__("Invalid Request", data=data)


class MethodNotFoundError(ProtocolError):
    """The requested method is not part of the server's method set."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__("Method not found", data={"method": method})


class InvalidParamsError(ProtocolError):
    """Request parameters do not match the shape the method expects."""

    code = INVALID_PARAMS

    def __init__(self, data: Any = None) -> None:
        super().__init__("Invalid params", data=data)


class UnknownToolError(ProtocolError):
    """``tools/call`` named a tool that is not in the catalog."""

    code = INVALID_PARAMS

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("Unknown tool", data={"name": name})


class UnknownPromptError(ProtocolError):
    """``prompts/get`` named a prompt that is not in the catalog."""

    code = INVALID_PARAMS

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("Unknown prompt", data={"name": name})


class WeatherError(Exception):
    """Base error for all upstream weather lookup failures."""


class InvalidCityError(WeatherError):
    """The city name was empty or blank."""

    def __init__(self) -> None:
        super().__init__("City name is required")


class CityNotFoundError(WeatherError):
    """The provider does not know the requested city."""

    def __init__(self, city: str) -> None:
        self.city = city
        super().__init__(f'City "{city}" not found')


class InvalidApiKeyError(WeatherError):
    """The provider rejected the configured API key."""

    def __init__(self) -> None:
        super().__init__("Invalid API key")


class WeatherFetchError(WeatherError):
    """Any other failure talking to the provider."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Failed to fetch weather data")


class WeatherServiceError(ProtocolError):
    """An upstream failure surfaced as a JSON-RPC internal error."""

    code = INTERNAL_ERROR

    def __init__(self, cause: WeatherError) -> None:
        self.cause = cause
        super().__init__(f"Weather service error: {cause}")
