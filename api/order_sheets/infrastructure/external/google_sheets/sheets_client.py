"""
Cliente minimo de Google Sheets REST API v4 (sin SDKs de Google).

Cubre lo que necesita el sync de ordenes:
- metadata de la hoja (pestanas con titulo y sheetId)
- addSheet y batchUpdate de formato
- escritura y limpieza de rangos de valores

No reintenta: cualquier respuesta no 2xx se convierte en
SpreadsheetServiceException y aborta la pasada.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar
from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from order_sheets.application.interfaces.spreadsheet_gateway import SheetTab
from order_sheets.infrastructure.external.google_sheets.auth import GoogleServiceAccountAuth
from order_sheets.infrastructure.external.google_sheets.schemas import (
    BatchUpdateResponseSchema,
    SpreadsheetSchema,
    UpdateValuesResponseSchema,
)
from order_sheets.shared.exceptions.upstream import SpreadsheetServiceException

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def a1_range(title: str, cell: Optional[str] = None) -> str:
    """
    Rango A1 de una pestana, con el titulo entre comillas simples.

    Las comillas simples dentro del titulo se duplican.
    """
    quoted = "'" + title.replace("'", "''") + "'"
    return f"{quoted}!{cell}" if cell else quoted


class GoogleSheetsClient:
    """
    Cliente HTTP de una hoja de calculo concreta.

    Implementa SpreadsheetGateway.
    """

    def __init__(
        self,
        *,
        spreadsheet_id: str,
        auth: GoogleServiceAccountAuth,
        base_url: str = "https://sheets.googleapis.com/v4",
        timeout_s: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._spreadsheet_id = spreadsheet_id
        self._auth = auth
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._transport = transport

    @property
    def spreadsheet_url(self) -> str:
        return f"{self._base_url}/spreadsheets/{self._spreadsheet_id}"

    async def list_sheets(self) -> List[SheetTab]:
        payload = await self._request_json(
            "GET",
            self.spreadsheet_url,
            operation="read spreadsheet",
            params={"fields": "sheets.properties(sheetId,title)"},
        )
        spreadsheet = self._parse(SpreadsheetSchema, payload, operation="read spreadsheet")
        return [
            SheetTab(sheet_id=sheet.properties.sheet_id, title=sheet.properties.title)
            for sheet in spreadsheet.sheets
        ]

    async def add_sheet(self, title: str) -> int:
        payload = await self.batch_update(
            [{"addSheet": {"properties": {"title": title}}}],
            operation="create sheet",
        )
        response = self._parse(BatchUpdateResponseSchema, payload, operation="create sheet")
        reply = response.replies[0] if response.replies else None
        if reply is None or reply.add_sheet is None:
            raise SpreadsheetServiceException(
                "Failed to read created sheet ID.",
                operation="create sheet",
            )
        return reply.add_sheet.properties.sheet_id

    async def update_values(
        self,
        title: str,
        rows: Sequence[Sequence[Any]],
        *,
        value_input_option: str,
    ) -> None:
        range_name = a1_range(title, "A1")
        payload = await self._request_json(
            "PUT",
            f"{self.spreadsheet_url}/values/{quote(range_name, safe='')}",
            operation="update sheet",
            params={"valueInputOption": value_input_option},
            json={"range": range_name, "majorDimension": "ROWS", "values": [list(row) for row in rows]},
        )
        result = self._parse(UpdateValuesResponseSchema, payload, operation="update sheet")
        logger.debug(f"Rango actualizado: {result.updated_range} ({result.updated_rows} filas)")

    async def clear_values(self, title: str) -> None:
        range_name = a1_range(title)
        await self._request_json(
            "POST",
            f"{self.spreadsheet_url}/values/{quote(range_name, safe='')}:clear",
            operation="clear sheet",
            json={},
        )

    async def batch_update(
        self,
        requests: List[Dict[str, Any]],
        *,
        operation: str = "batchUpdate",
    ) -> Dict[str, Any]:
        return await self._request_json(
            "POST",
            f"{self.spreadsheet_url}:batchUpdate",
            operation=operation,
            json={"requests": requests},
        )

    def _parse(self, schema: Type[SchemaT], payload: Dict[str, Any], *, operation: str) -> SchemaT:
        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            raise SpreadsheetServiceException(
                f"Unexpected response shape from Sheets API: {e}",
                operation=operation,
            ) from e

    async def _request_json(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Dict[str, Any]:
        """
        Request autenticado contra la API de Sheets.

        - 2xx: retorna el JSON (dict vacio si no hay cuerpo)
        - 401: descarta el token cacheado para la proxima pasada
        - cualquier otro no 2xx o error de transporte: SpreadsheetServiceException
        """
        token = await self._auth.get_access_token()
        headers = {"Authorization": f"Bearer {token}"}

        try:
            async with httpx.AsyncClient(timeout=self._timeout_s, transport=self._transport) as client:
                resp = await client.request(method, url, params=params, json=json, headers=headers)
        except httpx.HTTPError as e:
            raise SpreadsheetServiceException(
                f"Failed to {operation}: {e}",
                operation=operation,
            ) from e

        if not resp.is_success:
            if resp.status_code == 401:
                self._auth.invalidate()
            raise SpreadsheetServiceException(
                f"Failed to {operation}: {resp.text}",
                status_code=resp.status_code,
                operation=operation,
            )

        if not resp.content:
            return {}
        try:
            payload = resp.json()
        except ValueError as e:
            raise SpreadsheetServiceException(
                f"Invalid JSON from Sheets API: {e}",
                operation=operation,
            ) from e
        if not isinstance(payload, dict):
            raise SpreadsheetServiceException(
                "Unexpected response shape from Sheets API",
                operation=operation,
            )
        return payload
