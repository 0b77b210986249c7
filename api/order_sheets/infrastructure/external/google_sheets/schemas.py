"""
Esquemas de las respuestas de Google que este servicio consume.

Solo se modelan los campos usados; el resto se ignora. Una respuesta que no
valida se trata como fallo del servicio, no como crash.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _GoogleModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SheetPropertiesSchema(_GoogleModel):
    sheet_id: int = Field(..., alias="sheetId")
    title: str


class SheetSchema(_GoogleModel):
    properties: SheetPropertiesSchema


class SpreadsheetSchema(_GoogleModel):
    """GET spreadsheets/{id} (fields=sheets.properties)."""

    sheets: List[SheetSchema] = Field(default_factory=list)


class AddSheetReplySchema(_GoogleModel):
    properties: SheetPropertiesSchema


class BatchUpdateReplySchema(_GoogleModel):
    add_sheet: Optional[AddSheetReplySchema] = Field(None, alias="addSheet")


class BatchUpdateResponseSchema(_GoogleModel):
    """POST spreadsheets/{id}:batchUpdate."""

    spreadsheet_id: Optional[str] = Field(None, alias="spreadsheetId")
    replies: List[BatchUpdateReplySchema] = Field(default_factory=list)


class UpdateValuesResponseSchema(_GoogleModel):
    """PUT spreadsheets/{id}/values/{range}."""

    updated_range: Optional[str] = Field(None, alias="updatedRange")
    updated_rows: Optional[int] = Field(None, alias="updatedRows")
    updated_columns: Optional[int] = Field(None, alias="updatedColumns")


class TokenResponseSchema(_GoogleModel):
    """Respuesta del endpoint OAuth2 de Google."""

    access_token: str = Field(..., min_length=1)
    expires_in: Optional[int] = None
    token_type: Optional[str] = None
