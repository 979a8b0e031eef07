"""
Acceso por ruta a documentos JSON ya decodificados.

Una ruta es una secuencia de segmentos separados por ``.``. Un segmento formado
únicamente por dígitos decimales es un índice; cualquier otro segmento es una
clave de objeto. Ejemplo::

    get_json_field(doc, "results.0.components.city")

Un índice aplicado a un objeto selecciona su n-ésimo miembro en el orden del
documento, de modo que ``"2"`` nunca se busca como clave literal.
"""

import math
from typing import Any

SEPARATOR = "."


def _as_index(segment: str) -> int | None:
    """Retorna el índice si el segmento son solo dígitos ASCII, si no None."""
    if segment and segment.isascii() and segment.isdigit():
        return int(segment)
    return None


def get_json_field(node: Any, path: str) -> Any:
    """Resuelve una ruta sobre un nodo JSON.

    Args:
        node: Nodo de partida (dict, list o escalar)
        path: Ruta con segmentos separados por puntos

    Returns:
        El nodo encontrado, o None si la ruta no existe. Nunca lanza excepción.
    """
    if node is None or not path:
        return None

    current = node
    for segment in path.split(SEPARATOR):
        index = _as_index(segment)
        if index is not None:
            # Enteros de Python sin desbordamiento: un índice enorme queda fuera de rango
            if isinstance(current, dict):
                members = list(current.values())
            elif isinstance(current, list):
                members = current
            else:
                return None
            if index >= len(members):
                return None
            current = members[index]
        elif isinstance(current, dict):
            if segment not in current:
                return None
            current = current[segment]
        else:
            return None
    return current


def get_str(node: Any, path: str) -> str | None:
    """Retorna el string en ``path`` o None si no existe o no es string."""
    value = get_json_field(node, path)
    return value if isinstance(value, str) else None


def _as_number(value: Any) -> float | int | None:
    # bool es subclase de int pero en JSON no es un número
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def get_int(node: Any, path: str) -> int | None:
    """Retorna el número en ``path`` como entero (truncado) o None."""
    value = _as_number(get_json_field(node, path))
    return None if value is None else int(value)


def get_double(node: Any, path: str) -> float | None:
    """Retorna el número en ``path`` como float o None."""
    value = _as_number(get_json_field(node, path))
    return None if value is None else float(value)
