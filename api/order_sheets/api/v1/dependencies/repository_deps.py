"""
Dependencias para inyeccion de repositorios.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from order_sheets.domain.repositories.order_repository import IOrderRepository
from order_sheets.infrastructure.database.session import get_db
from order_sheets.infrastructure.repositories.order_repository import OrderRepository


async def get_order_repository(
    session: AsyncSession = Depends(get_db)
) -> IOrderRepository:
    """
    Dependencia para obtener el repositorio de ordenes.

    Args:
        session: Sesion de base de datos

    Returns:
        IOrderRepository: Repositorio de ordenes sobre SQLAlchemy
    """
    return OrderRepository(session)
