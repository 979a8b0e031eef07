"""
ocgeo - Cliente de geocodificación OpenCage
===========================================

Copyright (c) 2019 Stelios Sfakianakis

Distribuido bajo la licencia MIT; ver el fichero LICENSE.

Geocodificación directa (texto → coordenadas) e inversa (coordenadas → texto)
sobre la API REST de OpenCage. Cada llamada hace una única petición GET
síncrona; no hay caché, lotes ni reintentos.

Uso:
    from ocgeo import OpenCageGeocoder, QueryParams, LatLng

    with OpenCageGeocoder("MI-API-KEY") as geocoder:
        params = QueryParams(countrycode="gb", proximity=LatLng(lat=51.5, lng=-0.1))
        response = geocoder.forward("Big Ben", params)
        for result in response:
            print(result.confidence, result.geometry, result.get_str("components.city"))

        response = geocoder.reverse(51.5007, -0.1246)

Modelos de Datos (Pydantic):
    GeoResponse contiene status, rate (opcional), total_results y la lista de
    GeoResult. Cada GeoResult mantiene su nodo JSON original, accesible por ruta:
    result.get_str("components.country_code"), result["annotations.timezone.name"].
"""

import logging

from ._version import __version__
from .client import OpenCageGeocoder
from .config import DEFAULT_SERVER, ClientConfig
from .models import (
    INVALID_POINT,
    Bounds,
    GeoResponse,
    GeoResult,
    LatLng,
    QueryParams,
    RateInfo,
    Status,
    is_valid_latlng,
)
from .query import build_request_url, format_latlng
from .utils.json_path import get_json_field
from .exceptions import (
    OCGeoError,
    ConfigurationError,
    ParsingError,
    CoordinateError,
    ServiceError,
    ServiceConnectionError,
    ServiceTimeoutError,
    ResponseDecodeError,
    MalformedResponseError,
)

__all__ = [
    "__version__",
    "OpenCageGeocoder",
    "ClientConfig",
    "DEFAULT_SERVER",
    "INVALID_POINT",
    "Bounds",
    "GeoResponse",
    "GeoResult",
    "LatLng",
    "QueryParams",
    "RateInfo",
    "Status",
    "is_valid_latlng",
    "build_request_url",
    "format_latlng",
    "get_json_field",
    "OCGeoError",
    "ConfigurationError",
    "ParsingError",
    "CoordinateError",
    "ServiceError",
    "ServiceConnectionError",
    "ServiceTimeoutError",
    "ResponseDecodeError",
    "MalformedResponseError",
]

# Sin salida por defecto; la aplicación configura los handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())
