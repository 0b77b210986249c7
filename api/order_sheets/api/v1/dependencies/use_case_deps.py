"""
Dependencias para inyeccion de casos de uso.
"""
from fastapi import Depends

from order_sheets.api.v1.dependencies.gateway_deps import get_sheet_title_locks, get_spreadsheet_gateway
from order_sheets.api.v1.dependencies.repository_deps import get_order_repository
from order_sheets.application.interfaces.spreadsheet_gateway import SpreadsheetGateway
from order_sheets.application.use_cases.sheet_sync_use_cases import SheetSyncUseCases
from order_sheets.core.config import settings
from order_sheets.domain.repositories.order_repository import IOrderRepository
from order_sheets.shared.utils.sheet_title_lock import SheetTitleLockManager


async def get_sheet_sync_use_cases(
    order_repository: IOrderRepository = Depends(get_order_repository),
    gateway: SpreadsheetGateway = Depends(get_spreadsheet_gateway),
    title_locks: SheetTitleLockManager = Depends(get_sheet_title_locks),
) -> SheetSyncUseCases:
    """
    Dependencia para obtener el caso de uso de sincronizacion.

    Returns:
        SheetSyncUseCases: Orquestador de una pasada
    """
    return SheetSyncUseCases(order_repository, gateway, settings, title_locks=title_locks)
