from __future__ import annotations

from typing import Any

import pytest

from darksky.clients.darksky import DarkSkyClient
from darksky.core.config import Settings
from tests.fakes import API_KEY, BASE_URL, FakeTransport


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        api_key=API_KEY,
        base_url=BASE_URL,
        timeout_seconds=2.0,
        user_agent="darksky-tests",
        units="si",
    )


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def client(transport: FakeTransport) -> DarkSkyClient:
    with DarkSkyClient(API_KEY, transport=transport, base_url=BASE_URL) as client:
        yield client


@pytest.fixture()
def minimal_payload() -> dict[str, Any]:
    return {"latitude": 37.8, "longitude": -122.4, "timezone": "America/Los_Angeles"}


@pytest.fixture()
def full_payload() -> dict[str, Any]:
    return {
        "latitude": 37.8267,
        "longitude": -122.4233,
        "timezone": "America/Los_Angeles",
        "offset": -7,
        "currently": {
            "time": 1509993277,
            "summary": "Drizzle",
            "icon": "rain",
            "nearestStormDistance": 0,
            "precipIntensity": 0.0089,
            "precipIntensityError": 0.0046,
            "precipProbability": 0.9,
            "precipType": "rain",
            "temperature": 66.1,
            "apparentTemperature": 66.31,
            "dewPoint": 60.77,
            "humidity": 0.83,
            "pressure": 1010.34,
            "windSpeed": 5.59,
            "windGust": 12.03,
            "windBearing": 246,
            "cloudCover": 0.7,
            "uvIndex": 1,
            "visibility": 9.84,
            "ozone": 267.44,
        },
        "minutely": {
            "summary": "Light rain stopping in 13 min., starting again 30 min. later.",
            "icon": "rain",
            "data": [
                {
                    "time": 1509993240,
                    "precipIntensity": 0.007,
                    "precipIntensityError": 0.004,
                    "precipProbability": 0.84,
                    "precipType": "rain",
                },
                {"time": 1509993300, "precipIntensity": 0, "precipProbability": 0},
            ],
        },
        "hourly": {
            "summary": "Rain starting later this afternoon.",
            "icon": "rain",
            "data": [
                {
                    "time": 1509991200,
                    "summary": "Mostly Cloudy",
                    "icon": "partly-cloudy-day",
                    "precipIntensity": 0.0007,
                    "precipProbability": 0.1,
                    "precipType": "rain",
                    "temperature": 65.76,
                    "apparentTemperature": 66.01,
                    "windSpeed": 4.41,
                    "uvIndex": 1,
                }
            ],
        },
        "daily": {
            "summary": "Mixed precipitation throughout the week.",
            "icon": "rain",
            "data": [
                {
                    "time": 1509944400,
                    "summary": "Rain starting in the afternoon.",
                    "icon": "rain",
                    "sunriseTime": 1509978491,
                    "sunsetTime": 1510015388,
                    "moonPhase": 0.59,
                    "precipIntensity": 0.0088,
                    "precipIntensityMax": 0.0725,
                    "precipIntensityMaxTime": 1510002000,
                    "precipProbability": 0.73,
                    "precipType": "rain",
                    "temperatureHigh": 66.35,
                    "temperatureHighTime": 1509994800,
                    "temperatureLow": 41.28,
                    "temperatureLowTime": 1510056000,
                    "temperatureMin": 52.08,
                    "temperatureMinTime": 1510027200,
                    "temperatureMax": 66.35,
                    "temperatureMaxTime": 1509994800,
                    "windGustTime": 1510023600,
                    "uvIndexTime": 1509994800,
                }
            ],
        },
        "alerts": [
            {
                "title": "Flood Watch for Mason, WA",
                "time": 1509993360,
                "expires": 1510036680,
                "description": "...FLOOD WATCH REMAINS IN EFFECT THROUGH LATE TUESDAY NIGHT...",
                "uri": "https://alerts.weather.gov/cap/wwacapget.php?x=WA1255E4DB8494.FloodWatch",
                "severity": "watch",
                "regions": ["Mason"],
            }
        ],
        "flags": {
            "sources": ["meteoalarm", "cmc", "gfs", "hrrr", "isd", "nam", "nwspa", "sref"],
            "isd-stations": ["724943-99999", "745039-99999"],
            "nearest-station": 1.835,
            "units": "us",
        },
    }
