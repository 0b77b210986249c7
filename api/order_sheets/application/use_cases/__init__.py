"""
Casos de uso de la aplicacion.
"""
from order_sheets.application.use_cases.sheet_sync_use_cases import SheetSyncUseCases

__all__ = ["SheetSyncUseCases"]
