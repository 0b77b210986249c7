"""
Repositorio de ordenes sobre SQLAlchemy.
Carga una orden con sus compras, links e imagenes en una sola pasada.
"""
from datetime import datetime
from typing import Optional

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from order_sheets.domain.entities.order import Order, Purchase
from order_sheets.domain.repositories.order_repository import IOrderRepository
from order_sheets.infrastructure.database.models import OrderModel, PurchaseModel
from order_sheets.shared.exceptions.upstream import RecordSourceException


def _timestamp_to_str(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


class OrderRepository(IOrderRepository):
    """
    Implementacion del repositorio de ordenes.

    Las relaciones se cargan con selectinload (sin lazy loading, que no esta
    permitido con AsyncSession).
    """

    def __init__(self, db: AsyncSession):
        """
        Args:
            db: Sesion asincrona de SQLAlchemy
        """
        self.db = db

    async def get_with_purchases(self, order_id: str) -> Optional[Order]:
        query = (
            select(OrderModel)
            .where(OrderModel.id == order_id)
            .options(
                selectinload(OrderModel.purchases).selectinload(PurchaseModel.links),
                selectinload(OrderModel.purchases).selectinload(PurchaseModel.images),
            )
        )
        try:
            result = await self.db.execute(query)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error consultando orden {order_id}: {e}")
            raise RecordSourceException(f"Database error: {e}") from e

        if model is None:
            return None
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: OrderModel) -> Order:
        """Convierte el modelo ORM en la entidad de dominio."""
        purchases = [
            Purchase(
                id=p.id,
                customer_name=p.customer_name,
                qty=p.qty,
                price=p.price,
                pickup_point=p.pickup_point,
                note=p.note,
                picked_up=p.picked_up,
                picked_up_at=_timestamp_to_str(p.picked_up_at),
                collected=p.collected,
                collected_at=_timestamp_to_str(p.collected_at),
                links=[link.url for link in p.links],
                images=[image.storage_path for image in p.images],
            )
            for p in model.purchases
        ]
        return Order(id=model.id, order_name=model.order_name, purchases=purchases)
