# ABOUTME: Process-wide configuration for the weatherstack client, loaded from the environment.
# ABOUTME: Reads the API key (and an optional base URL) via python-dotenv and os.environ.

import os

from dotenv import load_dotenv
from pydantic import BaseModel

from weather_glass.errors import API_KEY_ENV, ConfigurationError

BASE_URL_ENV = "WEATHERSTACK_BASE_URL"
DEFAULT_BASE_URL = "https://api.weatherstack.com"


class Settings(BaseModel):
    """Credential and endpoint root used to build every request."""

    access_key: str
    base_url: str = DEFAULT_BASE_URL


def load_settings() -> Settings:
    """Load settings from .env and the process environment.

    Raises ConfigurationError when the API key is missing or blank.
    """
    load_dotenv()

    access_key = os.environ.get(API_KEY_ENV, "").strip()
    if not access_key:
        raise ConfigurationError()

    base_url = os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL
    return Settings(access_key=access_key, base_url=base_url.rstrip("/"))
