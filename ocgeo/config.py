"""
Configuración inmutable del cliente.

Copyright (c) 2019 Stelios Sfakianakis

Distribuido bajo la licencia MIT; ver el fichero LICENSE.

La API key y la URL del servidor las proporciona siempre la aplicación; esta
librería no lee variables de entorno ni ficheros.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import ConfigurationError

DEFAULT_SERVER = "https://api.opencagedata.com/geocode/v1/json"
DEFAULT_TIMEOUT = 10.0


class ClientConfig(BaseModel):
    """Credencial, servidor y opciones de transporte.

    Es inmutable y puede compartirse entre hilos.

    Attributes:
        api_key: Clave de la API (opaca)
        server: URL base del servicio de geocodificación
        timeout: Timeout en segundos para cada petición
        allow_redirects: Seguir redirecciones HTTP
        verify_ssl: Verificar certificados SSL
        user_agent: User-Agent alternativo (None = ``ocgeo/<versión> (...)``)
    """
    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., repr=False)
    server: str = DEFAULT_SERVER
    timeout: float = DEFAULT_TIMEOUT
    allow_redirects: bool = True
    verify_ssl: bool = True
    user_agent: str | None = None

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        if not v or not v.strip():
            raise ConfigurationError("La API key no puede estar vacía")
        return v

    @field_validator("server")
    @classmethod
    def validate_server(cls, v: str) -> str:
        if not v or not v.strip():
            raise ConfigurationError(
                "La URL del servidor no puede estar vacía",
                details={"server": v}
            )
        if not v.startswith(("http://", "https://")):
            raise ConfigurationError(
                "La URL del servidor debe empezar por http:// o https://",
                details={"server": v}
            )
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ConfigurationError(
                "El timeout debe ser un número positivo",
                details={"timeout": v}
            )
        return v
