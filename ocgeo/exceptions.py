"""
Jerarquía de excepciones de ocgeo.

Copyright (c) 2019 Stelios Sfakianakis

Distribuido bajo la licencia MIT; ver el fichero LICENSE.

Todas las excepciones heredan de OCGeoError, de modo que un único
``except OCGeoError`` captura cualquier fallo de la librería. Los accesores
tipados de los resultados (get_str, get_int, get_double) nunca lanzan: indican
"no encontrado" devolviendo None.
"""

from typing import Optional, Dict, Any

__all__ = [
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


class OCGeoError(Exception):
    """Clase base para todas las excepciones de ocgeo.

    Attributes:
        message: Mensaje de error principal
        details: Diccionario opcional con contexto adicional del error
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        if self.details:
            return f"{class_name}(message={self.message!r}, details={self.details!r})"
        return f"{class_name}(message={self.message!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Convierte la excepción a diccionario para serialización JSON.

        Returns:
            dict: Diccionario con type, message y details de la excepción
        """
        result = {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details.copy(),
        }

        if getattr(self, "url", None):
            result["url"] = self.url
        if getattr(self, "status_code", None) is not None:
            result["status_code"] = self.status_code
        if getattr(self, "response_text", None):
            result["response_text"] = self.response_text[:200]

        return result


class ConfigurationError(OCGeoError):
    """Error de configuración del cliente.

    Se lanza al construir un ClientConfig con:
    - API key vacía
    - URL del servidor vacía o sin esquema http/https
    - Timeout no positivo

    Example:
        raise ConfigurationError(
            "La URL del servidor no puede estar vacía",
            details={"server": server}
        )
    """
    pass


class ParsingError(OCGeoError):
    """Error en los argumentos recibidos del llamante.

    Se lanza antes de cualquier petición de red cuando:
    - El texto de búsqueda no es un string
    - Las coordenadas no son numéricas
    - El argumento ``response`` no es un GeoResponse
    """
    pass


class CoordinateError(OCGeoError):
    """Coordenadas fuera del rango válido (lat [-90, 90], lng [-180, 180])."""
    pass


class ServiceError(OCGeoError):
    """Clase base para errores al comunicarse con el servicio de geocodificación.

    Attributes:
        message: Mensaje de error
        details: Contexto adicional
        url: URL que causó el error (si está disponible)
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, url: Optional[str] = None):
        super().__init__(message, details)
        self.url = url
        if url:
            self.details["url"] = url


class ServiceConnectionError(ServiceError):
    """Error de conexión con el servicio (red, DNS, TLS)."""
    pass


class ServiceTimeoutError(ServiceError):
    """La petición ha superado el timeout configurado.

    Example:
        raise ServiceTimeoutError(
            "Timeout después de 10s",
            url="https://api.opencagedata.com/geocode/v1/json?q=...",
            details={"timeout": 10}
        )
    """
    pass


class ResponseDecodeError(ServiceError):
    """El cuerpo de la respuesta no es JSON válido.

    Attributes:
        status_code: Código de estado HTTP recibido
        response_text: Inicio del cuerpo recibido (máximo 200 caracteres)
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(message, details, url)
        self.status_code = status_code
        self.response_text = response_text

        if status_code is not None:
            self.details["status_code"] = status_code
        if response_text:
            self.details["response_text"] = response_text[:200]


class MalformedResponseError(ServiceError):
    """JSON válido al que le faltan campos obligatorios.

    Cubre la ausencia de ``status`` o ``total_results``, un array ``results``
    ausente o de longitud distinta a ``total_results``, y valores con tipo
    incorrecto (por ejemplo una geometría sin ``lng``).

    Example:
        raise MalformedResponseError(
            "Falta el campo obligatorio 'status'",
            details={"field": "status"}
        )
    """
    pass
