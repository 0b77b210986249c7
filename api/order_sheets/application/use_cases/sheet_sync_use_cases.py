"""
Caso de uso: sincronizar una orden a su pestana de Google Sheets.

Pasos (cada uno espera su round-trip antes del siguiente):
1. Cargar la orden con sus compras
2. Resolver el titulo de la pestana
3. Buscar o crear la pestana
4. Construir la grilla
5. Escribir la grilla (limpiando antes si esta configurado)
6. Aplicar el formato estructural (si esta habilitado)

Cualquier fallo aborta los pasos restantes y se propaga; no hay rollback de lo
ya escrito ni resultado parcial.
"""
from typing import Optional

from loguru import logger

from order_sheets.application.dto.sheet_sync_dto import SheetSyncResultDTO
from order_sheets.application.interfaces.spreadsheet_gateway import SpreadsheetGateway
from order_sheets.application.services.grid_writer import GridWriter
from order_sheets.application.services.row_builder import RowBuilder
from order_sheets.application.services.sheet_formatter import SheetFormatter
from order_sheets.application.services.sheet_locator import SheetLocator
from order_sheets.application.services.sheet_title import resolve_sheet_title
from order_sheets.core.config import Settings
from order_sheets.domain.repositories.order_repository import IOrderRepository
from order_sheets.shared.exceptions.domain import RecordNotFoundException
from order_sheets.shared.utils.sheet_title_lock import SheetTitleLockManager


class SheetSyncUseCases:
    """
    Orquestador de una pasada de sincronizacion.

    Se construye por request; no guarda estado entre pasadas.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        gateway: SpreadsheetGateway,
        config: Settings,
        title_locks: Optional[SheetTitleLockManager] = None,
    ):
        self.order_repository = order_repository
        self.config = config
        self.row_builder = RowBuilder(
            storage_base_url=config.storage_base_url,
            bucket=config.IMAGE_BUCKET,
            image_mode=config.IMAGE_CELL_MODE,
        )
        self.locator = SheetLocator(
            gateway,
            title_locks=title_locks if config.SERIALIZE_SHEET_CREATION else None,
        )
        self.writer = GridWriter(
            gateway,
            image_mode=config.IMAGE_CELL_MODE,
            clear_first=config.CLEAR_STALE_ROWS,
        )
        self.formatter = SheetFormatter(gateway) if config.FORMAT_SHEETS else None

    async def sync(self, order_id: str) -> SheetSyncResultDTO:
        """
        Ejecuta una pasada completa para la orden.

        Raises:
            RecordNotFoundException: Si la orden no existe
            RecordSourceException: Si falla la consulta de la orden
            UpstreamAuthException: Si falla la obtencion del token
            SpreadsheetServiceException: Si falla cualquier llamada a Sheets
        """
        logger.info(f"Sincronizando orden {order_id} a Google Sheets")

        order = await self.order_repository.get_with_purchases(order_id)
        if order is None:
            logger.warning(f"Orden {order_id} no encontrada")
            raise RecordNotFoundException("Order", order_id)

        title = resolve_sheet_title(order.display_name)
        sheet_id = await self.locator.ensure(title)

        grid = self.row_builder.build(order)
        await self.writer.write(title, grid.rows)
        logger.info(
            f"Orden {order_id} escrita en '{title}' "
            f"({grid.row_count} filas x {grid.column_count} columnas)"
        )

        formatted = False
        if self.formatter is not None:
            await self.formatter.format(sheet_id, grid.row_count, grid.column_count)
            formatted = True

        logger.success(f"Orden {order_id} sincronizada (sheetId={sheet_id})")
        return SheetSyncResultDTO(
            ok=True,
            order_id=order_id,
            sheet_title=title,
            sheet_id=sheet_id,
            row_count=grid.row_count,
            column_count=grid.column_count,
            formatted=formatted,
        )
