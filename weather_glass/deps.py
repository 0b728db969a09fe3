# ABOUTME: Dependency container for weather queries using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and the Settings every request is built from.

import httpx
from pydantic import BaseModel, ConfigDict

from weather_glass.config import Settings, load_settings


class WeatherDeps(BaseModel):
    """Dependencies injected into fetch_weather."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings


def create_http_client(timeout: float | None = None) -> httpx.AsyncClient:
    """Create an httpx client for weatherstack calls.

    No retries are configured and, unless the caller passes one, no timeout.
    """
    return httpx.AsyncClient(timeout=timeout)


def create_deps(timeout: float | None = None) -> WeatherDeps:
    """Load settings from the environment and pair them with a fresh client.

    Raises ConfigurationError before any client is created if the API key is missing.
    """
    settings = load_settings()
    return WeatherDeps(http_client=create_http_client(timeout), settings=settings)
