# ABOUTME: Shared test fixtures for the weather_glass test suite.
# ABOUTME: Provides sample weatherstack payloads for each query mode.

import pytest


@pytest.fixture
def location_block() -> dict:
    return {
        "name": "New York",
        "country": "United States of America",
        "region": "New York",
        "timezone_id": "America/New_York",
        "localtime": "2019-09-07 08:14",
    }


@pytest.fixture
def current_payload(location_block) -> dict:
    return {
        "request": {"type": "City", "query": "New York, United States of America", "unit": "m"},
        "location": location_block,
        "current": {
            "observation_time": "12:14 PM",
            "temperature": 13,
            "weather_code": 113,
            "weather_icons": ["https://assets.weatherstack.com/images/wsymbols01_png_64/wsymbol_0001_sunny.png"],
            "weather_descriptions": ["Sunny"],
            "wind_speed": 0,
            "wind_degree": 349,
            "wind_dir": "N",
            "pressure": 1010,
            "precip": 0,
            "humidity": 90,
            "cloudcover": 0,
            "feelslike": 13,
            "uv_index": 4,
            "visibility": 16,
        },
    }


@pytest.fixture
def historical_payload(location_block) -> dict:
    return {
        "location": location_block,
        "historical": {
            "2019-09-07": {
                "date": "2019-09-07",
                "date_epoch": 1567814400,
                "mintemp": 17,
                "maxtemp": 25,
                "avgtemp": 21,
                "totalsnow": 0,
                "sunhour": 7.7,
                "uv_index": 5,
                "hourly": [
                    {
                        "time": "0",
                        "temperature": 18,
                        "wind_speed": 28,
                        "wind_dir": "NW",
                        "weather_descriptions": ["Partly cloudy"],
                    },
                    {
                        "time": "300",
                        "temperature": 17,
                        "wind_speed": 26,
                        "wind_dir": "NW",
                        "weather_descriptions": ["Clear"],
                    },
                ],
            }
        },
    }
