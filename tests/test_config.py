"""Tests for settings loading from the environment and dotenv files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from pydantic import ValidationError

from weather_mcp.config import ServerSettings, load_settings

_VARS = ("OPENWEATHER_API_KEY", "HOST", "PORT", "WEATHER_TIMEOUT", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for var in _VARS:
        monkeypatch.delenv(var, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for var in _VARS:
        os.environ.pop(var, None)


class TestServerSettings:
    def test_defaults(self) -> None:
        settings = ServerSettings()
        assert settings.api_key is None
        assert settings.host == "0.0.0.0"
        assert settings.port == 3000
        assert settings.timeout == 10.0
        assert settings.log_level == "INFO"

    def test_blank_key_is_none(self) -> None:
        assert ServerSettings(api_key="  ").api_key is None

    def test_port_range(self) -> None:
        with pytest.raises(ValidationError):
            ServerSettings(port=70000)


class TestLoadSettings:
    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENWEATHER_API_KEY", "secret")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = load_settings(env_file=None)
        assert settings.api_key == "secret"
        assert settings.port == 8080
        assert settings.log_level == "DEBUG"

    def test_missing_key_selects_mock(self) -> None:
        assert load_settings(env_file=None).api_key is None

    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        settings = load_settings(env_file=None, port=9000, host=None)
        assert settings.port == 9000
        assert settings.host == "0.0.0.0"

    def test_dotenv_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("OPENWEATHER_API_KEY=from-file\nPORT=4000\n", encoding="utf-8")
        monkeypatch.setenv("PORT", "5000")
        settings = load_settings(env_file=env_file)
        assert settings.api_key == "from-file"
        assert settings.port == 5000

    def test_missing_dotenv_file_is_fine(self, tmp_path: Path) -> None:
        settings = load_settings(env_file=tmp_path / "absent.env")
        assert settings.port == 3000
