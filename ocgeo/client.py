"""
Cliente de geocodificación directa e inversa para la API de OpenCage.

Copyright (c) 2019 Stelios Sfakianakis

Distribuido bajo la licencia MIT; ver el fichero LICENSE.
"""

import logging
import time

import requests

from .config import DEFAULT_SERVER, DEFAULT_TIMEOUT, ClientConfig
from .exceptions import CoordinateError, OCGeoError, ParsingError, ServiceError
from .http import HTTPTransport
from .models import GeoResponse, QueryParams, is_valid_latlng
from .query import build_request_url, format_latlng
from .utils.logging import mask_api_keys


class OpenCageGeocoder:
    """Geocodificador directo (texto → coordenadas) e inverso (coordenadas → texto).

    Cada llamada hace una única petición GET síncrona, sin caché ni reintentos.

    Example:
        with OpenCageGeocoder("MI-API-KEY") as geocoder:
            response = geocoder.forward("Big Ben, London", QueryParams(limit=1))
            for result in response:
                print(result.geometry, result.get_str("components.city"))

            response = geocoder.reverse(51.5007, -0.1246)
            print(response.results[0].formatted)

    Attributes:
        config: Configuración inmutable (API key, servidor, opciones de transporte)
        log: Logger usado por el cliente
    """

    def __init__(
        self,
        api_key: str,
        server: str = DEFAULT_SERVER,
        logger=None,
        timeout: float = DEFAULT_TIMEOUT,
        allow_redirects: bool = True,
        verify_ssl: bool = True,
        user_agent: str | None = None,
        session: requests.Session | None = None,
    ):
        """Inicializa el geocodificador.

        Args:
            api_key: Clave de la API
            server: URL base del servicio
            logger: Logger opcional para debug
            timeout: Timeout en segundos de cada petición
            allow_redirects: Seguir redirecciones HTTP (default: True)
            verify_ssl: Verificar certificados SSL (default: True)
            user_agent: User-Agent alternativo
            session: Sesión de requests externa opcional. OpenCageGeocoder NO
                la cerrará; el usuario es responsable.

        Raises:
            ConfigurationError: Si la API key, el servidor o el timeout no son válidos
        """
        config = ClientConfig(
            api_key=api_key,
            server=server,
            timeout=timeout,
            allow_redirects=allow_redirects,
            verify_ssl=verify_ssl,
            user_agent=user_agent,
        )
        self._setup(config, logger, session)

    @classmethod
    def from_config(cls, config: ClientConfig, logger=None, session: requests.Session | None = None) -> "OpenCageGeocoder":
        """Crea un cliente a partir de una configuración ya construida."""
        geocoder = cls.__new__(cls)
        geocoder._setup(config, logger, session)
        return geocoder

    def _setup(self, config: ClientConfig, logger, session):
        self.config = config
        self._transport = HTTPTransport(config, session=session)

        self.log = logger if logger else logging.getLogger("ocgeo")

    def close(self):
        """Cierra el cliente http subyacente."""
        self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # =========================================================================
    # API Principal
    # =========================================================================

    def forward(
        self, query: str, params: QueryParams | None = None, response: GeoResponse | None = None
    ) -> GeoResponse:
        """Geocodificación directa: busca un texto libre.

        Args:
            query: Texto de búsqueda (dirección, topónimo...)
            params: Parámetros opcionales (default: QueryParams())
            response: GeoResponse a reutilizar; si es None se crea uno nuevo

        Returns:
            GeoResponse: La respuesta rellenada

        Raises:
            ParsingError: Si query no es string o response no es un GeoResponse
            ServiceError: Si falla el transporte o la respuesta no es válida
        """
        if not isinstance(query, str):
            raise ParsingError(
                "El texto de búsqueda debe ser string",
                details={"received_type": type(query).__name__, "value": str(query)[:100]}
            )
        return self._request("forward", query, True, params, response)

    def reverse(
        self, lat: float, lng: float, params: QueryParams | None = None, response: GeoResponse | None = None
    ) -> GeoResponse:
        """Geocodificación inversa: busca lugares en unas coordenadas.

        ``countrycode``, ``roadinfo`` y ``proximity`` de params se ignoran.

        Args:
            lat: Latitud (WGS84)
            lng: Longitud (WGS84)
            params: Parámetros opcionales (default: QueryParams())
            response: GeoResponse a reutilizar; si es None se crea uno nuevo

        Returns:
            GeoResponse: La respuesta rellenada

        Raises:
            ParsingError: Si las coordenadas no son numéricas
            CoordinateError: Si las coordenadas están fuera de rango
            ServiceError: Si falla el transporte o la respuesta no es válida
        """
        if (
            isinstance(lat, bool) or isinstance(lng, bool)
            or not isinstance(lat, (int, float)) or not isinstance(lng, (int, float))
        ):
            raise ParsingError(
                "Las coordenadas lat, lng deben ser numéricas",
                details={"lat_type": type(lat).__name__, "lng_type": type(lng).__name__}
            )
        if not is_valid_latlng(lat, lng):
            raise CoordinateError(
                "Coordenadas fuera de rango (lat [-90, 90], lng [-180, 180])",
                details={"lat": lat, "lng": lng}
            )
        return self._request("reverse", format_latlng(lat, lng), False, params, response)

    def request_url(self, query: str, is_forward: bool = True, params: QueryParams | None = None) -> str:
        """Retorna la URL que se pediría para una consulta (incluye la API key)."""
        return build_request_url(self.config.api_key, self.config.server, query, is_forward, params)

    def last_sent(self):
        """Retorna la última URL pedida (útil para debug)."""
        return self._transport.last_sent()

    # =========================================================================
    # Petición
    # =========================================================================

    def _request(self, call_name, query, is_forward, params, response):
        """Construye la URL, hace el GET y parsea la respuesta."""
        if params is None:
            params = QueryParams()
        if response is None:
            response = GeoResponse()
        elif not isinstance(response, GeoResponse):
            raise ParsingError(
                "El argumento response debe ser un GeoResponse",
                details={"received_type": type(response).__name__}
            )

        url = self.request_url(query, is_forward, params)
        response.url = url
        safe_url = mask_api_keys(url)
        self.log.debug("Request %s: %s", call_name, safe_url)

        start_time = time.time()
        try:
            document = self._transport.get_json(url, display_url=safe_url)
            response.load_json(document)
        except Exception as e:
            self.log.exception("%s error for %s: %s", call_name, query, e)
            # Envolver excepciones genéricas en ServiceError
            if not isinstance(e, OCGeoError):
                raise ServiceError(
                    f"Error en geocodificación ({call_name}): {e}",
                    details={"query": query, "error_type": type(e).__name__},
                    url=safe_url,
                ) from e
            raise
        elapsed = (time.time() - start_time) * 1000

        self.log.info(
            "[NETWORK_REQ] %s: %s | Status: %d | Results: %d | Time: %.2fms",
            call_name, query, response.status.code, response.total_results, elapsed
        )
        if response.rate is not None and response.rate.remaining <= 0:
            self.log.warning("Rate limit exhausted, resets at %s", response.rate.reset_at.isoformat())

        return response
