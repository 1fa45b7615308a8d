"""Tests for the static tool and prompt catalogs."""

from weather_mcp.protocol import catalog


class TestToolCatalog:
    def test_single_tool(self) -> None:
        tools = catalog.tool_catalog()
        assert len(tools) == 1
        tool = tools[0]
        assert tool["name"] == "get-weather"
        assert tool["description"] == "Get current weather information for a city"

    def test_input_schema(self) -> None:
        schema = catalog.tool_catalog()[0]["inputSchema"]
        assert schema["type"] == "object"
        assert schema["required"] == ["city"]
        assert schema["properties"]["city"]["type"] == "string"
        assert schema["properties"]["units"]["enum"] == ["metric", "imperial"]
        assert schema["properties"]["units"]["default"] == "metric"

    def test_fresh_copies(self) -> None:
        assert catalog.tool_catalog() == catalog.tool_catalog()
        assert catalog.tool_catalog() is not catalog.tool_catalog()


class TestPromptCatalog:
    def test_arguments(self) -> None:
        prompts = {p["name"]: p for p in catalog.prompt_catalog()}
        assert [(a["name"], a["required"]) for a in prompts["weather-report"]["arguments"]] == [
            ("city", True),
            ("units", False),
        ]
        assert [
            (a["name"], a["required"]) for a in prompts["travel-weather-advice"]["arguments"]
        ] == [("cities", True), ("travel_date", False)]
        assert [
            (a["name"], a["required"]) for a in prompts["weather-comparison"]["arguments"]
        ] == [("city1", True), ("city2", True)]

    def test_arguments_serialize_as_lists(self) -> None:
        for prompt in catalog.prompt_catalog():
            assert isinstance(prompt["arguments"], list)


class TestServerIdentity:
    def test_capabilities(self) -> None:
        assert catalog.capabilities() == {
            "tools": {"listChanged": True},
            "prompts": {"listChanged": True},
        }

    def test_no_resources_capability(self) -> None:
        assert "resources" not in catalog.capabilities()

    def test_server_info(self) -> None:
        assert dict(catalog.SERVER_INFO) == {"name": "weather-mcp-server", "version": "1.0.0"}
        assert catalog.PROTOCOL_VERSION == "2024-11-05"
