"""
Contratos que la capa de aplicacion espera de la infraestructura.
"""
from order_sheets.application.interfaces.spreadsheet_gateway import SheetTab, SpreadsheetGateway

__all__ = ["SheetTab", "SpreadsheetGateway"]
