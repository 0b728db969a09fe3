# ABOUTME: Client-side adapter for the weatherstack current, historical, and marine queries.
# ABOUTME: Re-exports the entry point, the request builder, the normalizer, and the error types.

from weather_glass.errors import (
    ApiError,
    ConfigurationError,
    DataShapeError,
    TransportError,
    ValidationError,
    WeatherGlassError,
)
from weather_glass.models import QueryInput, QueryMode, WeatherResult
from weather_glass.normalizer import normalize
from weather_glass.request_builder import RequestBuilder
from weather_glass.weather_service import fetch_weather

__all__ = [
    "ApiError",
    "ConfigurationError",
    "DataShapeError",
    "QueryInput",
    "QueryMode",
    "RequestBuilder",
    "TransportError",
    "ValidationError",
    "WeatherGlassError",
    "WeatherResult",
    "fetch_weather",
    "normalize",
]
