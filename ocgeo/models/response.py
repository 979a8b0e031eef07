from datetime import datetime, timezone
from typing import Any, Iterator, Optional

from pydantic import BaseModel, Field, ValidationError

from ..exceptions import MalformedResponseError
from .result import GeoResult


class Status(BaseModel):
    """Estado devuelto por el servidor (``status.code`` / ``status.message``)."""
    code: int
    message: str

    @property
    def ok(self) -> bool:
        return self.code == 200


class RateInfo(BaseModel):
    """Cuota de peticiones. Ausente para clientes sin límite de uso."""
    limit: int
    remaining: int
    reset: int = Field(..., description="Instante de reinicio (segundos epoch UTC)")

    @property
    def reset_at(self) -> datetime:
        return datetime.fromtimestamp(self.reset, tz=timezone.utc)


def _validate(model: type[BaseModel], value: Any, field: str) -> BaseModel:
    """Valida un sub-objeto obligatorio y traduce errores a MalformedResponseError."""
    if value is None:
        raise MalformedResponseError(
            f"Falta el campo obligatorio '{field}'",
            details={"field": field}
        )
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Campo '{field}' con formato inválido",
            details={"field": field, "errors": e.error_count()}
        ) from e


class GeoResponse(BaseModel):
    """Respuesta completa de una petición de geocodificación.

    Una misma instancia puede reutilizarse en varias llamadas: cada petición
    sustituye la URL y cada parseo reinicia el resto de campos. ``release()``
    suelta la URL y todos los resultados, y con ellos las referencias al
    documento JSON decodificado.
    """

    url: Optional[str] = None
    status: Optional[Status] = None
    rate: Optional[RateInfo] = None
    total_results: int = 0
    results: list[GeoResult] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is not None and self.status.ok

    def load_json(self, document: Any) -> "GeoResponse":
        """Rellena la respuesta a partir del cuerpo JSON decodificado.

        Todo se reinicia excepto ``url``. Si el documento no trae los campos
        obligatorios se lanza MalformedResponseError y la respuesta queda
        reiniciada (solo con la URL).

        Args:
            document: Cuerpo de la respuesta ya decodificado

        Returns:
            GeoResponse: La propia instancia, para encadenar

        Raises:
            MalformedResponseError: Si faltan ``status``, ``total_results`` o
                ``results``, o alguno tiene un formato inesperado
        """
        self._reset(keep_url=True)

        if not isinstance(document, dict):
            raise MalformedResponseError(
                "La respuesta debe ser un objeto JSON",
                details={"received_type": type(document).__name__}
            )

        status = _validate(Status, document.get("status"), "status")

        # Los clientes de pago no reciben información de cuota
        rate = None
        if "rate" in document and document["rate"] is not None:
            rate = _validate(RateInfo, document["rate"], "rate")

        if "total_results" not in document:
            raise MalformedResponseError(
                "Falta el campo obligatorio 'total_results'",
                details={"field": "total_results"}
            )
        total = document["total_results"]
        if total is None:
            total = 0
        if isinstance(total, bool) or not isinstance(total, int):
            raise MalformedResponseError(
                "'total_results' debe ser un entero",
                details={"field": "total_results", "value": str(total)[:50]}
            )

        results = []
        if total > 0:
            results_js = document.get("results")
            if not isinstance(results_js, list):
                raise MalformedResponseError(
                    "Falta el array obligatorio 'results'",
                    details={"field": "results", "total_results": total}
                )
            if len(results_js) != total:
                raise MalformedResponseError(
                    "'total_results' no coincide con el número de resultados",
                    details={"total_results": total, "results": len(results_js)}
                )
            results = [GeoResult.from_json(node) for node in results_js]
        else:
            total = 0

        # Nada se publica hasta que todo el documento es válido
        self.status = status
        self.rate = rate
        self.total_results = total
        self.results = results
        return self

    @classmethod
    def from_json(cls, document: Any, url: str | None = None) -> "GeoResponse":
        return cls(url=url).load_json(document)

    def release(self) -> None:
        """Suelta URL, estado, cuota y resultados."""
        self._reset(keep_url=False)

    def _reset(self, keep_url: bool) -> None:
        if not keep_url:
            self.url = None
        self.status = None
        self.rate = None
        self.total_results = 0
        self.results = []

    def __iter__(self) -> Iterator[GeoResult]:
        """Permite iterar sobre los resultados directamente: for r in response: ..."""
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __bool__(self) -> bool:
        # Siempre verdadera, aunque no tenga resultados
        return True
