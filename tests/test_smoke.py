"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import weather_mcp

    assert weather_mcp.__version__ == "1.0.0"


def test_cli_entrypoint() -> None:
    from weather_mcp.cli import main

    assert callable(main)


def test_lazy_import_from_package() -> None:
    import weather_mcp

    assert weather_mcp.RequestRouter is not None
    assert weather_mcp.WeatherClient is not None
