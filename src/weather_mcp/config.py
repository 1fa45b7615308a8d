"""Server configuration loaded from the environment and an optional .env file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_API_KEY = "OPENWEATHER_API_KEY"
ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_TIMEOUT = "WEATHER_TIMEOUT"
ENV_LOG_LEVEL = "LOG_LEVEL"


class ServerSettings(BaseModel):
    """Runtime settings for both transports.

    A missing ``api_key`` is not an error: the weather client falls back to
    deterministic mock data.
    """

    api_key: str | None = None
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    timeout: float = Field(default=10.0, gt=0)
    log_level: str = "INFO"

    @field_validator("api_key", mode="before")
    @classmethod
    def _blank_key(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def load_settings(env_file: str | Path | None = ".env", **overrides: Any) -> ServerSettings:
    """Build :class:`ServerSettings` from the environment.

    Variables from *env_file* are loaded first (without overriding variables
    already set in the process).  Keyword *overrides* that are not ``None``
    win over the environment.
    """
    if env_file is not None:
        load_dotenv(env_file, override=False)

    values: dict[str, Any] = {}
    env_map = {
        "api_key": ENV_API_KEY,
        "host": ENV_HOST,
        "port": ENV_PORT,
        "timeout": ENV_TIMEOUT,
        "log_level": ENV_LOG_LEVEL,
    }
    for field, var in env_map.items():
        raw = os.environ.get(var)
        if raw is not None:
            values[field] = raw

    values.update({k: v for k, v in overrides.items() if v is not None})
    return ServerSettings.model_validate(values)
