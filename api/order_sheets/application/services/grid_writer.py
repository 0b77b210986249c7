"""
Escritura de la grilla en una pestana.

Sobrescribe desde A1; no es append ni merge. Las filas sobrantes de una
pasada anterior mas grande quedan en la hoja salvo que se limpie antes
(`clear_first`).
"""
from __future__ import annotations

from typing import Any, Sequence

from loguru import logger

from order_sheets.application.interfaces.spreadsheet_gateway import SpreadsheetGateway
from order_sheets.shared.constants.sheet_constants import ImageCellMode

USER_ENTERED = "USER_ENTERED"
RAW = "RAW"


def value_input_option_for(image_mode: ImageCellMode) -> str:
    """
    Modo de escritura acorde a la variante de imagen.

    Las formulas =IMAGE(...) solo se evaluan con USER_ENTERED; con RAW
    quedarian como texto literal.
    """
    return USER_ENTERED if ImageCellMode(image_mode) == ImageCellMode.FORMULA else RAW


class GridWriter:
    """Reemplaza los valores de una pestana por una grilla nueva."""

    def __init__(
        self,
        gateway: SpreadsheetGateway,
        *,
        image_mode: ImageCellMode = ImageCellMode.FORMULA,
        clear_first: bool = False,
    ) -> None:
        self._gateway = gateway
        self._value_input_option = value_input_option_for(image_mode)
        self._clear_first = clear_first

    @property
    def value_input_option(self) -> str:
        return self._value_input_option

    async def write(self, title: str, rows: Sequence[Sequence[Any]]) -> None:
        if self._clear_first:
            logger.debug(f"Limpiando valores previos de '{title}'")
            await self._gateway.clear_values(title)

        await self._gateway.update_values(
            title,
            rows,
            value_input_option=self._value_input_option,
        )
        logger.debug(f"Grilla escrita en '{title}' ({len(rows)} filas, {self._value_input_option})")
