"""
DTOs (Data Transfer Objects) de la aplicacion.
"""
from order_sheets.application.dto.sheet_sync_dto import SheetSyncResultDTO, SheetSyncErrorDTO

__all__ = ["SheetSyncResultDTO", "SheetSyncErrorDTO"]
