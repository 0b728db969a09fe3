# ABOUTME: Pydantic BaseModels for weatherstack queries, requests, and normalized results.
# ABOUTME: Defines the query modes, the tide variant, and the WeatherResult union consumed by renderers.

from enum import Enum
from typing import Annotated, Any, Literal

import httpx
from pydantic import BaseModel, Field


class QueryMode(str, Enum):
    """Which kind of weather the caller asked for."""

    CURRENT = "current"
    HISTORICAL = "historical"
    MARINE = "marine"


Units = Literal["m", "f", "s"]


class QueryInput(BaseModel):
    """Caller-supplied query fields, as collected by the UI."""

    location: str
    units: Units = "m"
    historical_date: str | None = None
    marine_date: str | None = None

    def date_for(self, mode: QueryMode) -> str | None:
        """Return the one date field relevant to the mode; the other one is ignored."""
        if mode is QueryMode.HISTORICAL:
            return self.historical_date
        if mode is QueryMode.MARINE:
            return self.marine_date
        return None


class ApiRequest(BaseModel):
    """Endpoint and query parameters for a single weatherstack GET."""

    endpoint: Literal["/current", "/historical"]
    parameters: dict[str, str]

    def url(self, base_url: str) -> str:
        return str(httpx.URL(f"{base_url}{self.endpoint}", params=self.parameters))


class LocationInfo(BaseModel):
    """Resolved location block returned with every successful response."""

    name: str | None = None
    country: str | None = None
    region: str | None = None
    timezone_id: str | None = None
    local_time: str | None = None


class CurrentConditions(BaseModel):
    """Observed conditions from the /current endpoint."""

    temperature: float | None = None
    feelslike_temperature: float | None = None
    description: str | None = None
    icon_url: str | None = None
    humidity_percent: float | None = None
    wind_speed: float | None = None
    wind_direction: str | None = None
    pressure_mb: float | None = None
    visibility: float | None = None
    uv_index: float | None = None
    cloud_cover_percent: float | None = None


class HourlyEntry(BaseModel):
    """One hourly slot of a historical day. time_code is HHMM without a separator."""

    time_code: int | None = None
    temperature: float | None = None
    description: str | None = None
    wind_speed: float | None = None
    wind_direction: str | None = None


class HistoricalDayEntry(BaseModel):
    """Summary of the requested day from the /historical endpoint."""

    date: str | None = None
    avg_temp: float | None = None
    min_temp: float | None = None
    max_temp: float | None = None
    sun_hours: float | None = None
    uv_index: float | None = None
    hourly: list[HourlyEntry] = []


class SingleTide(BaseModel):
    """Tide block returned as one record."""

    kind: Literal["single"] = "single"
    record: Any


class ManyTides(BaseModel):
    """Tide block returned as an ordered list of records."""

    kind: Literal["many"] = "many"
    records: list[Any]


TideData = SingleTide | ManyTides


class CurrentResult(BaseModel):
    mode: Literal["current"] = "current"
    location: LocationInfo
    current: CurrentConditions


class HistoricalResult(BaseModel):
    mode: Literal["historical"] = "historical"
    location: LocationInfo
    day: HistoricalDayEntry


class MarineResult(BaseModel):
    """Historical day plus tide data; tides is None when the plan does not include it."""

    mode: Literal["marine"] = "marine"
    location: LocationInfo
    day: HistoricalDayEntry
    tides: TideData | None = None

    @property
    def has_tides(self) -> bool:
        return self.tides is not None


WeatherResult = Annotated[CurrentResult | HistoricalResult | MarineResult, Field(discriminator="mode")]
