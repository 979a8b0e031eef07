import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict

# Parámetro key=... de las URLs de petición
_API_KEY_RE = re.compile(r"([?&]key=)[^&\s]+")

_RESERVED_FIELDS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


def mask_api_keys(text: str) -> str:
    """Sustituye el valor de cualquier parámetro ``key=`` de una URL por ``***``."""
    return _API_KEY_RE.sub(r"\1***", text)


class StructuredJSONFormatter(logging.Formatter):
    """
    Formateador de logs en JSON, un objeto por línea.

    - Los campos ``extra`` se serializan de forma segura (fallback a string)
    - Las API keys que aparezcan en URLs se ocultan
    - Las excepciones se incluyen con su traza
    """

    def _serialize_value(self, value: Any) -> Any:
        if isinstance(value, str):
            return mask_api_keys(value)
        if value is None or isinstance(value, (bool, int, float)):
            return value
        if isinstance(value, dict):
            return {str(k): self._serialize_value(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize_value(v) for v in value]
        if isinstance(value, datetime):
            return value.isoformat()
        # Modelos Pydantic
        if hasattr(value, "model_dump"):
            return self._serialize_value(value.model_dump())
        return mask_api_keys(str(value))

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": mask_api_keys(record.getMessage()),
            "module": record.module,
            "funcName": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = mask_api_keys(self.formatException(record.exc_info))

        for key, value in record.__dict__.items():
            if key not in _RESERVED_FIELDS and not key.startswith("_"):
                log_data[key] = self._serialize_value(value)

        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    logger_name: str = "ocgeo"
) -> logging.Logger:
    """
    Configura el logging de la librería.

    Args:
        level: Nivel de logging (default: logging.INFO)
        json_format: Si es True, usa StructuredJSONFormatter
        logger_name: Nombre del logger (default: "ocgeo")

    Returns:
        logging.Logger: Logger configurado
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Evitar duplicar manejadores si ya están configurados
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()

        if json_format:
            formatter = StructuredJSONFormatter()
        else:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )

        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
