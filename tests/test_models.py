import pytest
import sys
from pathlib import Path

from pydantic import ValidationError

# Añadir el directorio raíz al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ocgeo.models import INVALID_POINT, Bounds, GeoResult, LatLng, QueryParams, is_valid_latlng
from ocgeo.exceptions import MalformedResponseError


@pytest.mark.parametrize("lat,lng", [
    (0, 0), (90, 180), (-90, -180), (41.38879, 2.15899), (-33.8688, 151.2093), (90.0, -180.0),
])
def test_valid_coordinates(lat, lng):
    assert is_valid_latlng(lat, lng)
    assert LatLng(lat=lat, lng=lng).is_valid()


@pytest.mark.parametrize("lat,lng", [
    (90.0001, 0), (-90.0001, 0), (0, 180.0001), (0, -180.0001), (-91, -181), (float("nan"), 0),
])
def test_invalid_coordinates(lat, lng):
    assert not is_valid_latlng(lat, lng)


def test_sentinel_is_invalid():
    assert INVALID_POINT.lat == -91.0
    assert INVALID_POINT.lng == -181.0
    assert not INVALID_POINT.is_valid()
    assert LatLng(lat=-91.0, lng=-181.0) == INVALID_POINT


def test_latlng_is_frozen():
    with pytest.raises(ValidationError):
        INVALID_POINT.lat = 0.0


def test_bounds_contains():
    bounds = Bounds(
        northeast=LatLng(lat=51.5008, lng=-0.1243),
        southwest=LatLng(lat=51.5006, lng=-0.1248),
    )
    assert bounds.contains(LatLng(lat=51.5007, lng=-0.1246))
    assert not bounds.contains(LatLng(lat=51.6, lng=-0.1246))


def test_default_query_params():
    """Por defecto proximity es el centinela y el resto está vacío."""
    params = QueryParams()
    assert params.proximity == INVALID_POINT
    assert params.countrycode is None
    assert params.language is None
    assert params.limit == 0
    assert params.min_confidence == 0
    assert not (params.no_annotations or params.no_dedupe or params.no_record or params.roadinfo)


def test_query_params_rejects_negative_limit():
    with pytest.raises(ValidationError):
        QueryParams(limit=-1)


class TestGeoResult:
    """Tests de GeoResult.from_json y de sus accesores."""

    def test_from_json_full(self, big_ben_document):
        node = big_ben_document["results"][0]
        r = GeoResult.from_json(node)
        assert r.confidence == 9
        assert r.geometry == LatLng(lat=51.5007292, lng=-0.1246254)
        assert r.has_geometry()
        assert r.bounds.northeast == LatLng(lat=51.5008, lng=-0.1243)
        assert r.bounds.southwest == LatLng(lat=51.5006, lng=-0.1248)
        assert r.raw is node
        assert r.formatted == "Big Ben, Bridge Street, London SW1A 0AA, United Kingdom"

    def test_from_json_without_geometry_bounds_or_confidence(self, big_ben_document):
        r = GeoResult.from_json(big_ben_document["results"][1])
        assert r.confidence == 0
        assert r.geometry == INVALID_POINT
        assert not r.has_geometry()
        assert r.bounds is None

    def test_from_json_null_geometry(self):
        r = GeoResult.from_json({"geometry": None, "confidence": 3})
        assert r.geometry == INVALID_POINT
        assert r.confidence == 3

    def test_partial_geometry_is_rejected(self):
        """Nunca una geometría a medias: lat sin lng es un error de formato."""
        with pytest.raises(MalformedResponseError, match="formato inválido"):
            GeoResult.from_json({"geometry": {"lat": 10.0}})

    def test_partial_bounds_is_rejected(self):
        with pytest.raises(MalformedResponseError):
            GeoResult.from_json({"bounds": {"northeast": {"lat": 1.0, "lng": 2.0}}})

    def test_non_object_result(self):
        with pytest.raises(MalformedResponseError, match="objeto JSON"):
            GeoResult.from_json(["not", "an", "object"])

    def test_typed_accessors(self, big_ben_document):
        r = GeoResult.from_json(big_ben_document["results"][0])
        assert r.get_str("components.city") == "London"
        assert r.get_str("components.town") is None
        assert r.get_str("components.town", "n/a") == "n/a"
        assert r.get_int("annotations.callingcode") == 44
        assert r.get_int("components.city") is None
        assert r.get_int("components.city", -1) == -1
        assert r.get_double("annotations.Mercator.y") == pytest.approx(6679858.16)
        assert r.get_double("annotations.timezone.name", 0.0) == 0.0

    def test_dict_like_access(self, big_ben_document):
        r = GeoResult.from_json(big_ben_document["results"][0])
        assert r["components.country_code"] == "gb"
        assert r["annotations.timezone"] == {"name": "Europe/London", "offset_sec": 0}
        with pytest.raises(KeyError, match="components.state"):
            _ = r["components.state"]
        assert r.get("components.state") is None
        assert r.get("components.state", "unknown") == "unknown"

    def test_result_without_node(self):
        """Un GeoResult construido a mano no tiene campos extra."""
        r = GeoResult(confidence=5)
        assert r.raw == {}
        assert r.get_str("formatted") is None
        assert r.formatted is None
