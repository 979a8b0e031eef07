"""
Pytest configuration and fixtures for ocgeo tests.
"""

import copy
import json
from unittest.mock import MagicMock

import pytest
import requests

from ocgeo import OpenCageGeocoder

API_KEY = "test-key-0123456789"
SERVER = "https://api.example.com/geocode/v1/json"

_BIG_BEN_DOCUMENT = {
    "documentation": "https://opencagedata.com/api",
    "licenses": [{"name": "see attribution guide", "url": "https://opencagedata.com/credits"}],
    "rate": {"limit": 2500, "remaining": 2497, "reset": 1700006400},
    "results": [
        {
            "annotations": {
                "callingcode": 44,
                "Mercator": {"x": -13873.47, "y": 6679858.16},
                "timezone": {"name": "Europe/London", "offset_sec": 0},
            },
            "bounds": {
                "northeast": {"lat": 51.5008, "lng": -0.1243},
                "southwest": {"lat": 51.5006, "lng": -0.1248},
            },
            "components": {
                "ISO_3166-1_alpha-2": "GB",
                "_type": "attraction",
                "city": "London",
                "country": "United Kingdom",
                "country_code": "gb",
                "road": "Bridge Street",
            },
            "confidence": 9,
            "formatted": "Big Ben, Bridge Street, London SW1A 0AA, United Kingdom",
            "geometry": {"lat": 51.5007292, "lng": -0.1246254},
        },
        {
            "components": {
                "_type": "village",
                "country": "Germany",
                "country_code": "de",
                "village": "Bigben",
            },
            "confidence": None,
            "formatted": "Bigben, Germany",
        },
    ],
    "status": {"code": 200, "message": "OK"},
    "stay_informed": {"blog": "https://blog.opencagedata.com"},
    "thanks": "For using an OpenCage API",
    "total_results": 2,
}


@pytest.fixture
def big_ben_document():
    """Respuesta típica con dos resultados; el segundo sin bounds ni geometry."""
    return copy.deepcopy(_BIG_BEN_DOCUMENT)


@pytest.fixture
def empty_document():
    return {"status": {"code": 200, "message": "OK"}, "total_results": 0, "results": []}


def make_http_response(document=None, status_code=200, text=None):
    """Crea un objeto similar a requests.Response con el cuerpo indicado."""
    http_response = MagicMock()
    http_response.status_code = status_code
    if document is not None:
        http_response.json.return_value = document
        http_response.text = json.dumps(document)
    else:
        http_response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        http_response.text = text or ""
    return http_response


@pytest.fixture
def make_response():
    return make_http_response


@pytest.fixture
def api_key():
    return API_KEY


@pytest.fixture
def server():
    return SERVER


@pytest.fixture
def session():
    """Sesión de requests simulada (no hace peticiones reales)."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def geocoder(session):
    """Geocodificador con la sesión simulada inyectada."""
    with OpenCageGeocoder(API_KEY, server=SERVER, session=session) as gc:
        yield gc


def pytest_addoption(parser):
    """Add --integration command line option."""
    parser.addoption(
        "--integration", action="store_true", default=False, help="run integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests marked with 'integration' unless --integration is provided."""
    if config.getoption("--integration"):
        return
    skip_integration = pytest.mark.skip(reason="need --integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
