"""Weather models: the normalized record and the provider's response shape."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Units = Literal["metric", "imperial"]


class WeatherRecord(BaseModel):
    """Current conditions for one city, in the units it was requested in."""

    model_config = ConfigDict(frozen=True)

    city: str
    country: str
    temperature: int
    feels_like: int
    humidity: int
    pressure: int
    description: str
    wind_speed: float
    wind_direction: int
    visibility: int
    units: Units
    timestamp: datetime


# ---------------------------------------------------------------------------
# OpenWeatherMap ``/data/2.5/weather`` payload (only the fields we read)
# ---------------------------------------------------------------------------


class OWMMain(BaseModel):
    temp: float
    feels_like: float
    humidity: int
    pressure: int


class OWMSys(BaseModel):
    country: str = ""


class OWMCondition(BaseModel):
    description: str = ""


class OWMWind(BaseModel):
    speed: float = 0.0
    deg: int = 0


class OWMResponse(BaseModel):
    """Subset of the OpenWeatherMap current-weather response."""

    name: str
    main: OWMMain
    sys: OWMSys = Field(default_factory=OWMSys)
    weather: list[OWMCondition] = Field(default_factory=list)
    wind: OWMWind = Field(default_factory=OWMWind)
    visibility: int = 0
