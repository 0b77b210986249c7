"""
Entidades de dominio: Order (orden) y Purchase (compra).

Son entradas de solo lectura para una pasada de sincronizacion; se construyen
desde el origen de datos y no se modifican despues.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Purchase:
    """Una compra dentro de una orden, con sus links e imagenes."""

    id: str
    customer_name: Optional[str] = None
    qty: Optional[Number] = None
    price: Optional[Number] = None
    pickup_point: Optional[str] = None
    note: Optional[str] = None
    picked_up: Optional[bool] = None
    picked_up_at: Optional[str] = None
    collected: Optional[bool] = None
    collected_at: Optional[str] = None
    links: List[str] = field(default_factory=list)
    images: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Order:
    """Orden sincronizada a una pestana de la hoja."""

    id: str
    order_name: Optional[str] = None
    purchases: List[Purchase] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        """Nombre visible de la orden; cae al ID si no tiene nombre."""
        return self.order_name or self.id

    @property
    def max_images(self) -> int:
        """Maximo de imagenes entre las compras (minimo 1)."""
        return max([1] + [len(p.images) for p in self.purchases])
