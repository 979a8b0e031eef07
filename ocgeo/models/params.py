from pydantic import BaseModel, Field

from .coordinate import INVALID_POINT, LatLng


class QueryParams(BaseModel):
    """Parámetros opcionales de una petición de geocodificación.

    Los valores por defecto no añaden nada a la URL salvo ``no_annotations=0``.
    ``countrycode``, ``roadinfo`` y ``proximity`` solo se envían en búsquedas
    directas; en geocodificación inversa se ignoran.
    """

    countrycode: str | None = Field(None, description="Código(s) ISO 3166-1 alpha-2, separados por comas")
    language: str | None = Field(None, description="Código IETF de idioma (ej: 'es', 'pt-BR')")
    limit: int = Field(0, ge=0, description="Número máximo de resultados (0 = valor del servidor)")
    min_confidence: int = Field(0, ge=0, description="Confianza mínima (0 = sin filtro)")
    no_annotations: bool = False
    no_dedupe: bool = False
    no_record: bool = False
    roadinfo: bool = False
    proximity: LatLng = Field(INVALID_POINT, description="Sesgo de proximidad (solo búsqueda directa)")
