"""
Interfaz del repositorio de ordenes.
Define el contrato que debe cumplir cualquier origen de datos.
"""
from abc import ABC, abstractmethod
from typing import Optional

from order_sheets.domain.entities.order import Order


class IOrderRepository(ABC):
    """
    Interfaz del repositorio de ordenes.
    Solo lectura: este servicio nunca escribe en el origen.
    """

    @abstractmethod
    async def get_with_purchases(self, order_id: str) -> Optional[Order]:
        """
        Obtiene una orden con sus compras, links e imagenes.

        Args:
            order_id: ID de la orden

        Returns:
            Optional[Order]: Orden encontrada o None si no existe

        Raises:
            RecordSourceException: Si la consulta falla
        """
        pass
