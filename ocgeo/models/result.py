from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, ValidationError, field_validator

from ..exceptions import MalformedResponseError
from ..utils import json_path
from .coordinate import INVALID_POINT, Bounds, LatLng


class GeoResult(BaseModel):
    """Modelo para un resultado de geocodificación individual.

    Además de los campos tipados, conserva una referencia al nodo JSON original
    del resultado para acceder a cualquier otro campo por ruta::

        result.get_str("components.city")
        result.get_int("annotations.callingcode")
        result.get_double("annotations.sun.rise.apparent")
    """

    confidence: int = Field(0, description="Confianza asignada por el servidor")
    geometry: LatLng = Field(INVALID_POINT, description="Punto del resultado o INVALID_POINT")
    bounds: Bounds | None = Field(None, description="Rectángulo envolvente (opcional)")

    _node: dict[str, Any] = PrivateAttr(default_factory=dict)

    @field_validator("confidence", mode="before")
    @classmethod
    def validate_confidence(cls, v: Any) -> Any:
        if v is None:
            return 0
        return v

    @classmethod
    def from_json(cls, node: dict[str, Any]) -> "GeoResult":
        """Crea una instancia a partir de un elemento del array ``results``.

        Raises:
            MalformedResponseError: Si el nodo no es un objeto o ``bounds`` /
                ``geometry`` no contienen ``lat`` y ``lng`` numéricos.
        """
        if not isinstance(node, dict):
            raise MalformedResponseError(
                "Cada resultado debe ser un objeto JSON",
                details={"received_type": type(node).__name__}
            )

        geometry = node.get("geometry")
        try:
            result = cls(
                confidence=node.get("confidence"),
                bounds=node.get("bounds"),
                geometry=geometry if geometry is not None else INVALID_POINT,
            )
        except ValidationError as e:
            raise MalformedResponseError(
                "Resultado con formato inválido",
                details={"errors": e.error_count(), "first_error": e.errors()[0]["loc"]}
            ) from e

        result._node = node
        return result

    @property
    def raw(self) -> dict[str, Any]:
        """Nodo JSON original del resultado (compartido, no es una copia)."""
        return self._node

    @property
    def formatted(self) -> str | None:
        """Dirección formateada devuelta por el servidor, si existe."""
        return self.get_str("formatted")

    def has_geometry(self) -> bool:
        return self.geometry != INVALID_POINT

    # Accesores tipados: nunca lanzan, None significa "no encontrado"

    def get_str(self, path: str, default: str | None = None) -> str | None:
        value = json_path.get_str(self._node, path)
        return default if value is None else value

    def get_int(self, path: str, default: int | None = None) -> int | None:
        value = json_path.get_int(self._node, path)
        return default if value is None else value

    def get_double(self, path: str, default: float | None = None) -> float | None:
        value = json_path.get_double(self._node, path)
        return default if value is None else value

    def __getitem__(self, path: str) -> Any:
        """Acceso tipo diccionario por ruta: ``result["components.city"]``."""
        value = json_path.get_json_field(self._node, path)
        if value is None:
            raise KeyError(path)
        return value

    def get(self, path: str, default: Any = None) -> Any:
        """Como ``__getitem__`` pero devolviendo ``default`` si no existe."""
        value = json_path.get_json_field(self._node, path)
        return default if value is None else value
