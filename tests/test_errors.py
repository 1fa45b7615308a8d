"""Tests for the error hierarchy and JSON-RPC codes."""

from weather_mcp.errors import (
    CityNotFoundError,
    InvalidApiKeyError,
    InvalidCityError,
    InvalidParamsError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
    UnknownPromptError,
    UnknownToolError,
    WeatherError,
    WeatherFetchError,
    WeatherServiceError,
)


class TestProtocolErrors:
    def test_codes(self) -> None:
        assert MethodNotFoundError("x").code == -32601
        assert InvalidParamsError().code == -32602
        assert UnknownToolError("x").code == -32602
        assert UnknownPromptError("x").code == -32602
        assert ParseError().code == -32700

    def test_messages(self) -> None:
        assert UnknownToolError("x").message == "Unknown tool"
        assert UnknownPromptError("x").message == "Unknown prompt"
        assert MethodNotFoundError("x").message == "Method not found"

    def test_hierarchy(self) -> None:
        for error in (MethodNotFoundError("m"), UnknownToolError("t"), UnknownPromptError("p")):
            assert isinstance(error, ProtocolError)

    def test_service_error_wraps_cause(self) -> None:
        cause = CityNotFoundError("Oz")
        error = WeatherServiceError(cause)
        assert error.code == -32603
        assert error.message == 'Weather service error: City "Oz" not found'
        assert error.cause is cause


class TestWeatherErrors:
    def test_distinct_messages(self) -> None:
        assert str(InvalidCityError()) == "City name is required"
        assert str(CityNotFoundError("Oz")) == 'City "Oz" not found'
        assert str(InvalidApiKeyError()) == "Invalid API key"
        assert str(WeatherFetchError("boom")) == "Failed to fetch weather data"

    def test_hierarchy(self) -> None:
        for error in (InvalidCityError(), CityNotFoundError("x"), InvalidApiKeyError()):
            assert isinstance(error, WeatherError)
            assert not isinstance(error, ProtocolError)
