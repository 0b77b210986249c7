"""
Integracion con Google Sheets (REST v4) para el sync de ordenes.

- auth: access token de la cuenta de servicio (JWT bearer)
- sheets_client: operaciones sobre una hoja concreta
- schemas: validacion de las respuestas consumidas
"""
from order_sheets.infrastructure.external.google_sheets.auth import GoogleServiceAccountAuth
from order_sheets.infrastructure.external.google_sheets.sheets_client import GoogleSheetsClient, a1_range

__all__ = ["GoogleServiceAccountAuth", "GoogleSheetsClient", "a1_range"]
