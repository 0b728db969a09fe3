# ABOUTME: Rendering helpers shared by any consumer of a WeatherResult.
# ABOUTME: Time-code formatting, unit labels, preview slices, and location headings.

from weather_glass.models import HistoricalDayEntry, HourlyEntry, LocationInfo, ManyTides, SingleTide, TideData, Units

HOURLY_PREVIEW_LIMIT = 6
TIDE_PREVIEW_LIMIT = 4

NO_TIDES_MESSAGE = (
    "Marine-specific tide data was not returned for this location or plan. "
    "Showing general historical information instead."
)


def format_time_code(code: int | str | None) -> str:
    """Render an HHMM time code as HH:MM, e.g. 900 -> "09:00" and 0 -> "00:00"."""
    if code is None:
        return ""
    padded = str(code).rjust(4, "0")
    return f"{padded[:-2]}:{padded[-2:]}"


def speed_unit(units: Units) -> str:
    return "km/h" if units == "m" else "mph"


def distance_unit(units: Units) -> str:
    return "km" if units == "m" else "mi"


def hourly_preview(day: HistoricalDayEntry, limit: int = HOURLY_PREVIEW_LIMIT) -> list[HourlyEntry]:
    return day.hourly[:limit]


def tide_preview(tides: TideData | None, limit: int = TIDE_PREVIEW_LIMIT) -> list:
    """Tide records to show: the first few of a list, or the single record on its own."""
    if isinstance(tides, ManyTides):
        return tides.records[:limit]
    if isinstance(tides, SingleTide):
        return [tides.record]
    return []


def sample_wind(day: HistoricalDayEntry) -> tuple[float | None, str | None]:
    """Wind speed and direction of the first hourly slot, used as the marine sample."""
    if not day.hourly:
        return None, None
    first = day.hourly[0]
    return first.wind_speed, first.wind_direction


def location_heading(location: LocationInfo) -> str:
    return ", ".join(part for part in (location.name, location.country) if part)


def location_meta(location: LocationInfo) -> str:
    return f"{location.region or ''} · Timezone: {location.timezone_id or ''}".strip()
