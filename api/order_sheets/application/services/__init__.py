"""
Servicios de aplicacion.

Piezas del sync que no dependen de HTTP ni de la base de datos:
titulo de la pestana, grilla, formato, escritura y ubicacion de la pestana.
"""
from order_sheets.application.services.sheet_title import resolve_sheet_title
from order_sheets.application.services.row_builder import (
    RowBuilder,
    SheetGrid,
    build_header,
    build_rows,
)
from order_sheets.application.services.sheet_formatter import SheetFormatter, build_format_requests
from order_sheets.application.services.payload_extractor import extract_order_id
from order_sheets.application.services.sheet_locator import SheetLocator
from order_sheets.application.services.grid_writer import GridWriter

__all__ = [
    # Titulo y grilla
    "resolve_sheet_title",
    "RowBuilder",
    "SheetGrid",
    "build_header",
    "build_rows",
    # Formato
    "SheetFormatter",
    "build_format_requests",
    # Webhook
    "extract_order_id",
    # Escritura
    "SheetLocator",
    "GridWriter",
]
