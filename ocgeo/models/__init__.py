"""
Modelos de datos para ocgeo.
"""

from .coordinate import INVALID_POINT, Bounds, LatLng, is_valid_latlng
from .params import QueryParams
from .result import GeoResult
from .response import GeoResponse, RateInfo, Status

__all__ = [
    "INVALID_POINT",
    "Bounds",
    "LatLng",
    "is_valid_latlng",
    "QueryParams",
    "GeoResult",
    "GeoResponse",
    "RateInfo",
    "Status",
]
