# ABOUTME: Service layer for weatherstack calls: build the request, GET it, normalize the body.
# ABOUTME: Handles the current, historical, and marine query modes behind one entry point.

import logging

import httpx

from weather_glass.deps import WeatherDeps
from weather_glass.errors import TransportError
from weather_glass.models import QueryInput, QueryMode, WeatherResult
from weather_glass.normalizer import normalize
from weather_glass.request_builder import RequestBuilder

logger = logging.getLogger(__name__)


async def fetch_weather(deps: WeatherDeps, mode: QueryMode, query: QueryInput) -> WeatherResult:
    """Run one weather query end to end.

    Validation and configuration errors are raised before the network is touched.
    Network failures and non-JSON bodies are raised as TransportError.
    """
    mode = QueryMode(mode)
    request = RequestBuilder(deps.settings.access_key).build(mode, query)

    logger.debug("Fetching %s weather from %s", mode.value, request.endpoint)
    try:
        resp = await deps.http_client.get(f"{deps.settings.base_url}{request.endpoint}", params=request.parameters)
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        raise TransportError(str(e)) from e

    return normalize(mode, data)
