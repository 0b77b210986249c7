"""
Formato estructural de la pestana de una orden.

Todas las reglas se envian en un solo batchUpdate, con rangos por indice
(base 0, fin exclusivo) derivados de row_count y column_count. Aplicar el
mismo formato dos veces con las mismas dimensiones deja la hoja igual.
"""
from __future__ import annotations

from typing import Any, Dict, List

from loguru import logger

from order_sheets.application.interfaces.spreadsheet_gateway import SpreadsheetGateway
from order_sheets.shared.constants.sheet_constants import (
    COLLECTED_AT_COLUMN_INDEX,
    DATE_TIME_PATTERN,
    PICKED_UP_AT_COLUMN_INDEX,
    PICKUP_COLUMN_INDEX,
    PICKUP_POINT_OPTIONS,
)

Request = Dict[str, Any]

_BLACK = {"red": 0, "green": 0, "blue": 0}
_SOLID_BORDER = {"style": "SOLID", "width": 1, "color": _BLACK}


def _grid_range(
    sheet_id: int,
    start_row: int,
    end_row: int,
    start_column: int,
    end_column: int,
) -> Dict[str, int]:
    return {
        "sheetId": sheet_id,
        "startRowIndex": start_row,
        "endRowIndex": end_row,
        "startColumnIndex": start_column,
        "endColumnIndex": end_column,
    }


def _column_range(sheet_id: int, row_count: int, column_index: int) -> Dict[str, int]:
    """Filas de datos (1..row_count-1) de una sola columna."""
    return _grid_range(sheet_id, 1, row_count, column_index, column_index + 1)


def _bold_header(sheet_id: int, column_count: int) -> Request:
    return {
        "repeatCell": {
            "range": _grid_range(sheet_id, 0, 1, 0, column_count),
            "cell": {"userEnteredFormat": {"textFormat": {"bold": True}}},
            "fields": "userEnteredFormat.textFormat.bold",
        }
    }


def _borders(sheet_id: int, row_count: int, column_count: int) -> Request:
    return {
        "updateBorders": {
            "range": _grid_range(sheet_id, 0, row_count, 0, column_count),
            "top": dict(_SOLID_BORDER),
            "bottom": dict(_SOLID_BORDER),
            "left": dict(_SOLID_BORDER),
            "right": dict(_SOLID_BORDER),
            "innerHorizontal": dict(_SOLID_BORDER),
            "innerVertical": dict(_SOLID_BORDER),
        }
    }


def _pickup_dropdown(sheet_id: int, row_count: int) -> Request:
    return {
        "setDataValidation": {
            "range": _column_range(sheet_id, row_count, PICKUP_COLUMN_INDEX),
            "rule": {
                "condition": {
                    "type": "ONE_OF_LIST",
                    "values": [{"userEnteredValue": option} for option in PICKUP_POINT_OPTIONS],
                },
                "showCustomUi": True,
                "strict": True,
            },
        }
    }


def _date_validation(sheet_id: int, row_count: int, column_index: int) -> Request:
    return {
        "setDataValidation": {
            "range": _column_range(sheet_id, row_count, column_index),
            "rule": {
                "condition": {"type": "DATE_IS_VALID"},
                "showCustomUi": True,
                "strict": False,
            },
        }
    }


def _date_time_format(sheet_id: int, row_count: int, column_index: int) -> Request:
    return {
        "repeatCell": {
            "range": _column_range(sheet_id, row_count, column_index),
            "cell": {
                "userEnteredFormat": {
                    "numberFormat": {"type": "DATE_TIME", "pattern": DATE_TIME_PATTERN},
                }
            },
            "fields": "userEnteredFormat.numberFormat",
        }
    }


def build_format_requests(sheet_id: int, row_count: int, column_count: int) -> List[Request]:
    """
    Construye la lista de requests de formato.

    - Encabezado en negrita en todas las columnas
    - Bordes solidos de 1pt (exteriores e interiores) en todo el rectangulo
    - Dropdown estricto en la columna de punto de retiro
    - Validacion de fecha no estricta + formato fecha-hora en las dos columnas
      de timestamp

    Sin filas de datos (row_count == 1) solo se formatea el encabezado.
    """
    requests = [
        _bold_header(sheet_id, column_count),
        _borders(sheet_id, row_count, column_count),
    ]
    if row_count <= 1:
        return requests

    requests.append(_pickup_dropdown(sheet_id, row_count))
    for column_index in (PICKED_UP_AT_COLUMN_INDEX, COLLECTED_AT_COLUMN_INDEX):
        requests.append(_date_validation(sheet_id, row_count, column_index))
    for column_index in (PICKED_UP_AT_COLUMN_INDEX, COLLECTED_AT_COLUMN_INDEX):
        requests.append(_date_time_format(sheet_id, row_count, column_index))
    return requests


class SheetFormatter:
    """Aplica el formato estructural a una pestana por su sheetId."""

    def __init__(self, gateway: SpreadsheetGateway) -> None:
        self._gateway = gateway

    async def format(self, sheet_id: int, row_count: int, column_count: int) -> None:
        requests = build_format_requests(sheet_id, row_count, column_count)
        logger.debug(f"Formateando sheetId={sheet_id} ({row_count}x{column_count}, {len(requests)} requests)")
        await self._gateway.batch_update(requests, operation="format")
