import io
import json
from unittest.mock import MagicMock, patch

import pytest

from weather_app.utils.logging_config import configure_structlog


def _body(payload) -> bytes:
    return json.dumps(payload).encode("utf-8")


@pytest.fixture(scope="session", autouse=True)
def structlog_through_stdlib():
    """Keep structlog output off stdout so report assertions stay exact."""
    configure_structlog("text")


@pytest.fixture
def output():
    """In-memory stdout replacement for prompts and reports."""
    return io.StringIO()


@pytest.fixture
def paris_geocode_body():
    """Geoapify response with a single match using the flat properties shape."""
    return _body(
        {
            "type": "FeatureCollection",
            "features": [
                {
                    "type": "Feature",
                    "properties": {
                        "formatted": "Paris, France",
                        "name": "Paris",
                        "lat": 48.8566,
                        "lon": 2.3522,
                    },
                    "geometry": {"type": "Point", "coordinates": [2.3522, 48.8566]},
                }
            ],
        }
    )


@pytest.fixture
def geometry_only_geocode_body():
    """Geoapify response with a single match that only carries geometry coordinates."""
    return _body(
        {
            "features": [
                {
                    "properties": {"formatted": "Stockholm, Sweden"},
                    "geometry": {"type": "Point", "coordinates": [18.0686, 59.3293]},
                }
            ]
        }
    )


@pytest.fixture
def springfield_geocode_body():
    """Geoapify response with three ambiguous matches."""
    return _body(
        {
            "features": [
                {
                    "properties": {
                        "formatted": "Springfield, IL, United States of America",
                        "lat": 39.7817,
                        "lon": -89.6501,
                    }
                },
                {
                    "properties": {
                        "formatted": "Springfield, MA, United States of America",
                        "lat": 42.1015,
                        "lon": -72.5898,
                    }
                },
                {
                    "properties": {"formatted": "Springfield, MO, United States of America"},
                    "geometry": {"type": "Point", "coordinates": [-93.2923, 37.2090]},
                },
            ]
        }
    )


@pytest.fixture
def empty_geocode_body():
    """Geoapify response without any match."""
    return _body({"type": "FeatureCollection", "features": []})


@pytest.fixture
def paris_weather_body():
    """Open-Meteo current weather response."""
    return _body(
        {
            "latitude": 48.86,
            "longitude": 2.3399997,
            "current_units": {"temperature_2m": "°C", "relative_humidity_2m": "%"},
            "current": {
                "time": "2026-10-19T12:00",
                "interval": 900,
                "temperature_2m": 15.2,
                "relative_humidity_2m": 70,
            },
        }
    )


@pytest.fixture
def mock_fetcher():
    """Fetcher stand-in; set get.side_effect to the bodies to return."""
    return MagicMock()


@pytest.fixture
def mock_config():
    """Mock the config object used by the command line interface."""
    with patch("weather_app.cli.get_config") as mock_get_config:
        mock_config = mock_get_config.return_value
        mock_config.geoapify_api_key = "test-geoapify-key"
        mock_config.log_level = "CRITICAL"
        yield mock_config
