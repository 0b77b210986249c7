"""
Extraccion de la clave de orden desde el payload del webhook.

El emisor puede mandar la clave con distintos nombres. Las estrategias se
prueban en orden y gana el primer valor no vacio (0 y "" cuentan como vacios); la lista es explicita para
poder testearla sin levantar el transporte HTTP.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from order_sheets.shared.exceptions.domain import InvalidRequestException


@dataclass(frozen=True)
class FieldPathStrategy:
    """Busca un valor siguiendo una ruta de claves anidadas."""

    path: Tuple[str, ...]

    @property
    def name(self) -> str:
        return ".".join(self.path)

    def extract(self, payload: Any) -> Optional[str]:
        current = payload
        for key in self.path:
            if not isinstance(current, dict):
                return None
            current = current.get(key)
        if not current or isinstance(current, (dict, list, bool)):
            return None
        return str(current)


ORDER_ID_STRATEGIES: Tuple[FieldPathStrategy, ...] = (
    FieldPathStrategy(("order_id",)),
    FieldPathStrategy(("orderId",)),
    FieldPathStrategy(("record", "order_id")),
)


def extract_order_id(payload: Any, strategies=ORDER_ID_STRATEGIES) -> str:
    """
    Retorna la clave de orden del payload.

    Raises:
        InvalidRequestException: Si el payload no es un objeto o ninguna
            estrategia encuentra un valor no vacio.
    """
    accepted = [s.name for s in strategies]
    if not isinstance(payload, dict):
        raise InvalidRequestException("Payload must be a JSON object", accepted_fields=accepted)

    for strategy in strategies:
        value = strategy.extract(payload)
        if value:
            return value

    raise InvalidRequestException("Missing order_id", accepted_fields=accepted)
