"""
Transporte HTTP sobre requests.

Copyright (c) 2019 Stelios Sfakianakis

Distribuido bajo la licencia MIT; ver el fichero LICENSE.

Una única petición GET síncrona por llamada, sin reintentos: la política de
reintentos es responsabilidad del llamante. El código de estado HTTP no se
comprueba aquí; el servicio devuelve un cuerpo JSON con ``status`` también en
los errores (401, 402, 403, 429...).
"""

import requests
from requests.exceptions import ConnectionError, RequestException, Timeout

from ._version import __version__
from .config import ClientConfig
from .exceptions import ResponseDecodeError, ServiceConnectionError, ServiceError, ServiceTimeoutError


def default_user_agent() -> str:
    """User-Agent descriptivo: ``ocgeo/<versión> (python-requests/<versión>)``."""
    return f"ocgeo/{__version__} (python-requests/{requests.__version__})"


class HTTPTransport:
    """Cliente HTTP mínimo para el servicio de geocodificación.

    Attributes:
        config: Configuración (timeout, redirecciones, SSL, User-Agent)
        session: Sesión de requests
        last_request: Última URL pedida (útil para debug)

    Example:
        with HTTPTransport(config) as transport:
            document = transport.get_json(url)
    """

    def __init__(self, config: ClientConfig, session: requests.Session | None = None):
        """Configura la sesión.

        Args:
            config: Configuración del cliente
            session: Sesión externa opcional. Si se proporciona, HTTPTransport
                NO la cerrará; el usuario es responsable.
        """
        self.config = config
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.user_agent = config.user_agent or default_user_agent()
        self.last_request = None

    def get_json(self, url: str, display_url: str | None = None):
        """Ejecuta un GET y decodifica el cuerpo como JSON.

        Args:
            url: URL completa de la petición
            display_url: URL a usar en los mensajes de error (ej: con la API key oculta)

        Returns:
            Cuerpo decodificado (dict, list o escalar)

        Raises:
            ServiceTimeoutError: Si la petición excede el timeout
            ServiceConnectionError: Si hay error de conexión (red, DNS, TLS)
            ServiceError: Si hay otro error en la petición
            ResponseDecodeError: Si el cuerpo no es JSON
        """
        shown_url = display_url or url
        self.last_request = url

        try:
            response = self.session.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.config.timeout,
                allow_redirects=self.config.allow_redirects,
                verify=self.config.verify_ssl,
            )
        except Timeout as e:
            raise ServiceTimeoutError(
                f"Timeout después de {self.config.timeout}s",
                url=shown_url,
                details={"timeout": self.config.timeout},
            ) from e
        except ConnectionError as e:
            raise ServiceConnectionError("Error de conexión con el servidor", url=shown_url) from e
        except RequestException as e:
            raise ServiceError(f"Error en la petición: {e}", url=shown_url) from e

        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                f"Error parseando respuesta JSON: {e}",
                url=shown_url,
                status_code=response.status_code,
                response_text=response.text,
            ) from e

    def last_sent(self):
        """Retorna la última URL pedida."""
        return self.last_request

    def close(self):
        """Cierra la sesión de requests si es propia."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
