"""
Interfaz hacia el servicio de hojas de calculo.

Este contrato existe para:
- Mantener Clean Architecture: los casos de uso no dependen de httpx ni de
  la forma exacta de las respuestas de Google.
- Facilitar tests unitarios con un fake en memoria.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Sequence


@dataclass(frozen=True)
class SheetTab:
    """Pestana existente: titulo visible + identificador estable."""

    sheet_id: int
    title: str


class SpreadsheetGateway(Protocol):
    """
    Operaciones sobre una hoja de calculo concreta.

    Implementaciones:
    - GoogleSheetsClient (REST v4).
    - Fakes para tests.

    Cualquier respuesta no exitosa debe lanzar SpreadsheetServiceException.
    """

    async def list_sheets(self) -> List[SheetTab]:
        """Lista las pestanas de la hoja."""

    async def add_sheet(self, title: str) -> int:
        """Crea una pestana y retorna su sheetId."""

    async def update_values(
        self,
        title: str,
        rows: Sequence[Sequence[Any]],
        *,
        value_input_option: str,
    ) -> None:
        """Reemplaza los valores desde A1 de la pestana."""

    async def clear_values(self, title: str) -> None:
        """Borra todos los valores de la pestana (conserva formato)."""

    async def batch_update(
        self,
        requests: List[Dict[str, Any]],
        *,
        operation: str = "batchUpdate",
    ) -> Dict[str, Any]:
        """Envia requests estructurales en un solo batch atomico."""
