"""
Localizacion / creacion de la pestana de una orden.

Siempre se busca por titulo antes de crear. Dos pasadas concurrentes para un
titulo nuevo pueden ver "no existe" y crear ambas; el servicio remoto rechaza
la segunda o la duplica con otro nombre. Con `title_locks` se serializan las
pasadas de este mismo proceso, no las de otras instancias.
"""
from __future__ import annotations

from contextlib import nullcontext
from typing import Optional

from loguru import logger

from order_sheets.application.interfaces.spreadsheet_gateway import SpreadsheetGateway
from order_sheets.shared.utils.sheet_title_lock import SheetTitleLockManager


class SheetLocator:
    """Mapea un titulo a su sheetId, creando la pestana si no existe."""

    def __init__(
        self,
        gateway: SpreadsheetGateway,
        *,
        title_locks: Optional[SheetTitleLockManager] = None,
    ) -> None:
        self._gateway = gateway
        self._title_locks = title_locks

    async def ensure(self, title: str) -> int:
        """
        Retorna el sheetId de la pestana `title`.

        - Coincidencia exacta y sensible a mayusculas.
        - Si existe, no modifica nada.
        - Si no existe, envia un unico addSheet.
        """
        lock = self._title_locks.lock(title) if self._title_locks else nullcontext()
        async with lock:
            existing = await self.find(title)
            if existing is not None:
                logger.debug(f"Pestana existente '{title}' (sheetId={existing})")
                return existing

            sheet_id = await self._gateway.add_sheet(title)
            logger.info(f"Pestana creada '{title}' (sheetId={sheet_id})")
            return sheet_id

    async def find(self, title: str) -> Optional[int]:
        for tab in await self._gateway.list_sheets():
            if tab.title == title:
                return tab.sheet_id
        return None
