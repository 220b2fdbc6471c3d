from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class Payload(BaseModel):
    # Provider bodies carry far more than we read; unknown keys are dropped.
    model_config = ConfigDict(extra="ignore", frozen=True)


# ── current.json ─────────────────────────────────────────────────────────────

class Condition(Payload):
    text: Optional[str] = None
    icon: Optional[str] = None


class CurrentConditions(Payload):
    temp_c: Optional[float] = None
    temp_f: Optional[float] = None
    condition: Optional[Condition] = None
    humidity: Optional[int] = None
    wind_kph: Optional[float] = None
    last_updated: Optional[str] = None


class PlaceInfo(Payload):
    name: Optional[str] = None


class CurrentPayload(Payload):
    location: Optional[PlaceInfo] = None
    current: Optional[CurrentConditions] = None


# ── astronomy.json ───────────────────────────────────────────────────────────

class Astro(Payload):
    sunrise: Optional[str] = None
    sunset: Optional[str] = None


class Astronomy(Payload):
    astro: Optional[Astro] = None


class AstronomyPayload(Payload):
    astronomy: Optional[Astronomy] = None


# ── Upstream results ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class UpstreamOk:
    payload: Union[CurrentPayload, AstronomyPayload]


@dataclass(frozen=True)
class UpstreamErr:
    message: str


UpstreamResult = Union[UpstreamOk, UpstreamErr]


# ── Unified report ───────────────────────────────────────────────────────────

class WeatherReport(BaseModel):
    location: str
    temp_c: Optional[float] = None
    temp_f: Optional[float] = None
    condition: Optional[str] = None
    icon: Optional[str] = None
    humidity: Optional[int] = None
    wind_kph: Optional[float] = None
    last_updated: Optional[str] = None
    sunrise: Optional[str] = None
    sunset: Optional[str] = None
    success: bool
    error: Optional[str] = None


class WeatherResponse(WeatherReport):
    manual_search: bool = False
    title: str = "Weather Info"


class RefreshResponse(BaseModel):
    notice: str
    cleared: int
