"""
Construcción de la URL de petición.

Copyright (c) 2019 Stelios Sfakianakis

Distribuido bajo la licencia MIT; ver el fichero LICENSE.

El orden de los parámetros es fijo para que la URL sea determinista y fácil de
leer en los logs::

    <server>?q=...&key=...[&countrycode=..][&language=..][&limit=N]
        [&min_confidence=N]&no_annotations={0,1}[&no_dedupe=1][&no_record=1]
        [&roadinfo=1][&proximity=LAT,LNG]
"""

from urllib.parse import quote

from .models import QueryParams


def format_latlng(lat: float, lng: float) -> str:
    """Formatea un par de coordenadas como ``"lat,lng"`` con 8 decimales."""
    return f"{lat:.8f},{lng:.8f}"


def _escape(text: str, safe: str = "") -> str:
    # Igual que curl: solo A-Za-z0-9 y "-._~" quedan sin escapar
    return quote(text, safe=safe)


def build_request_url(
    api_key: str,
    server: str,
    query: str,
    is_forward: bool,
    params: QueryParams | None = None,
) -> str:
    """Construye la URL completa de una petición.

    Args:
        api_key: Clave de la API
        server: URL base del servicio
        query: Texto libre (directa) o ``"lat,lng"`` (inversa)
        is_forward: True para búsqueda directa, False para inversa
        params: Parámetros opcionales (default: QueryParams())

    Returns:
        str: URL de la petición
    """
    if params is None:
        params = QueryParams()

    parts = [f"{server}?q={_escape(query)}&key={api_key}"]

    if is_forward and params.countrycode:
        parts.append(f"&countrycode={_escape(params.countrycode, safe=',')}")
    if params.language:
        parts.append(f"&language={_escape(params.language)}")
    if params.limit:
        parts.append(f"&limit={params.limit}")
    if params.min_confidence:
        parts.append(f"&min_confidence={params.min_confidence}")
    parts.append(f"&no_annotations={1 if params.no_annotations else 0}")
    if params.no_dedupe:
        parts.append("&no_dedupe=1")
    if params.no_record:
        parts.append("&no_record=1")
    if is_forward and params.roadinfo:
        parts.append("&roadinfo=1")
    if is_forward and params.proximity.is_valid():
        parts.append(f"&proximity={format_latlng(params.proximity.lat, params.proximity.lng)}")

    return "".join(parts)
