from pydantic import BaseModel, ConfigDict, Field


class LatLng(BaseModel):
    """Par latitud/longitud en grados decimales (WGS84)."""
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., description="Latitud")
    lng: float = Field(..., description="Longitud")

    def is_valid(self) -> bool:
        """Comprueba que lat esté en [-90, 90] y lng en [-180, 180]."""
        return is_valid_latlng(self.lat, self.lng)

    def __str__(self) -> str:
        return f"{self.lat:.8f},{self.lng:.8f}"


def is_valid_latlng(lat: float, lng: float) -> bool:
    """Comprueba si unas coordenadas son "válidas".

    - La latitud debe estar entre -90.0 y 90.0.
    - La longitud debe estar entre -180.0 y 180.0.

    NaN nunca es válido (todas las comparaciones fallan).
    """
    return -90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0


# Coordenada centinela: "ausente/inválida", fuera de cualquier rango real
INVALID_POINT = LatLng(lat=-91.0, lng=-181.0)


class Bounds(BaseModel):
    """Rectángulo envolvente de un resultado."""
    model_config = ConfigDict(frozen=True)

    northeast: LatLng
    southwest: LatLng

    def contains(self, point: LatLng) -> bool:
        """Comprueba si un punto cae dentro del rectángulo (bordes incluidos)."""
        return (
            self.southwest.lat <= point.lat <= self.northeast.lat
            and self.southwest.lng <= point.lng <= self.northeast.lng
        )
