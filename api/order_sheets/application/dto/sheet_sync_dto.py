"""
DTOs del sync de ordenes a Google Sheets.
"""
from pydantic import BaseModel, Field


class SheetSyncResultDTO(BaseModel):
    """Resultado de una pasada de sincronizacion exitosa."""

    ok: bool = Field(True, description="Indicador de exito")
    order_id: str = Field(..., description="Clave de la orden sincronizada")
    sheet_title: str = Field(..., description="Titulo de la pestana destino")
    sheet_id: int = Field(..., description="Identificador estable de la pestana")
    row_count: int = Field(..., description="Filas escritas (incluye encabezado)")
    column_count: int = Field(..., description="Columnas escritas")
    formatted: bool = Field(False, description="Si se aplico el formato estructural")


class SheetSyncErrorDTO(BaseModel):
    """Cuerpo de respuesta de una pasada fallida."""

    ok: bool = False
    error: str
    message: str
    details: dict = Field(default_factory=dict)
