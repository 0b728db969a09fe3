# ABOUTME: Normalizes raw weatherstack JSON payloads into the WeatherResult union.
# ABOUTME: Classifies upstream error payloads and unusable shapes into typed errors.

import logging
from collections.abc import Mapping

import pydantic

from weather_glass.errors import ApiError, DataShapeError
from weather_glass.models import (
    CurrentConditions,
    CurrentResult,
    HistoricalDayEntry,
    HistoricalResult,
    HourlyEntry,
    LocationInfo,
    ManyTides,
    MarineResult,
    QueryMode,
    SingleTide,
    TideData,
    WeatherResult,
)

logger = logging.getLogger(__name__)


def normalize(mode: QueryMode, raw: object) -> WeatherResult:
    """Interpret a raw payload for the given mode.

    The error flag is checked before anything else, whatever the mode. Numeric
    fields pass through unchanged; unit conversion is the service's job.

    Raises:
        ApiError: the payload carries an ``error`` block.
        DataShapeError: a block required by the mode is missing.
    """
    mode = QueryMode(mode)
    if not isinstance(raw, Mapping):
        raise DataShapeError("unexpected-payload")

    error = raw.get("error")
    if _present(error):
        info = error.get("info") if isinstance(error, Mapping) else None
        logger.warning("weatherstack returned an error for %s query: %s", mode.value, info)
        raise ApiError(info or "unknown API error", info=info)

    try:
        location = parse_location(raw.get("location"))

        if mode is QueryMode.CURRENT:
            return CurrentResult(location=location, current=parse_current(raw.get("current")))

        date_key, entry = select_historical_entry(raw.get("historical"))
        day = parse_historical_day(date_key, entry)
        if mode is QueryMode.HISTORICAL:
            return HistoricalResult(location=location, day=day)
        return MarineResult(location=location, day=day, tides=parse_tides(entry))
    except pydantic.ValidationError as e:
        raise DataShapeError("invalid-field", str(e)) from e


def parse_location(raw: object) -> LocationInfo:
    """Extract the location block, which every successful response carries."""
    if not isinstance(raw, Mapping):
        raise DataShapeError("missing-location")
    return LocationInfo(
        name=raw.get("name"),
        country=raw.get("country"),
        region=raw.get("region"),
        timezone_id=raw.get("timezone_id"),
        local_time=raw.get("localtime"),
    )


def parse_current(raw: object) -> CurrentConditions:
    """Extract current conditions; description and icon come from the first list element if any."""
    if not isinstance(raw, Mapping):
        raise DataShapeError("missing-current")
    return CurrentConditions(
        temperature=raw.get("temperature"),
        feelslike_temperature=raw.get("feelslike"),
        description=_first(raw.get("weather_descriptions")),
        icon_url=_first(raw.get("weather_icons")),
        humidity_percent=raw.get("humidity"),
        wind_speed=raw.get("wind_speed"),
        wind_direction=raw.get("wind_dir"),
        pressure_mb=raw.get("pressure"),
        visibility=raw.get("visibility"),
        uv_index=raw.get("uv_index"),
        cloud_cover_percent=raw.get("cloudcover"),
    )


def select_historical_entry(raw: object) -> tuple[str, Mapping]:
    """Pick the entry of a date-keyed historical block.

    A single-date request is expected to yield a single date key, but the key
    name is not relied on. If several keys come back, the first one wins.
    """
    if not isinstance(raw, Mapping) or not raw:
        raise DataShapeError("missing-historical")

    entries = list(raw.items())
    if len(entries) > 1:
        logger.debug("Historical block has %d dates, using %s", len(entries), entries[0][0])

    date_key, entry = entries[0]
    if not isinstance(entry, Mapping):
        raise DataShapeError("missing-historical")
    return date_key, entry


def parse_historical_day(date_key: str, raw: Mapping) -> HistoricalDayEntry:
    """Build the day summary; missing hourly detail yields an empty list."""
    hourly = raw.get("hourly")
    if not isinstance(hourly, list):
        hourly = []

    return HistoricalDayEntry(
        date=raw.get("date") or date_key,
        avg_temp=raw.get("avgtemp"),
        min_temp=raw.get("mintemp"),
        max_temp=raw.get("maxtemp"),
        sun_hours=raw.get("sunhour"),
        uv_index=raw.get("uv_index"),
        hourly=[parse_hourly_entry(h) for h in hourly if isinstance(h, Mapping)],
    )


def parse_hourly_entry(raw: Mapping) -> HourlyEntry:
    return HourlyEntry(
        time_code=raw.get("time"),
        temperature=raw.get("temperature"),
        description=_first(raw.get("weather_descriptions")),
        wind_speed=raw.get("wind_speed"),
        wind_direction=raw.get("wind_dir"),
    )


def parse_tides(raw: Mapping) -> TideData | None:
    """Read ``tides``, falling back to ``tide``. None means the plan returned no tide data."""
    tides = raw.get("tides")
    if not _present(tides):
        tides = raw.get("tide")
    if not _present(tides):
        return None
    if isinstance(tides, list):
        return ManyTides(records=tides)
    return SingleTide(record=tides)


def _first(values: object):
    """Return the first element of a list, or None when absent or empty."""
    if isinstance(values, list) and values:
        return values[0]
    return None


def _present(value: object) -> bool:
    """Truthiness of a JSON value where objects and arrays count even when empty."""
    if isinstance(value, (Mapping, list)):
        return True
    return bool(value)
