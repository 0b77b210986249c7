"""
Dependencias para inyeccion del cliente de Google Sheets.

El proveedor de tokens y el gestor de locks se crean una sola vez por proceso
(cache del token, locks compartidos entre requests); el cliente es liviano y
se construye por request.
"""
from functools import lru_cache

from fastapi import Depends

from order_sheets.application.interfaces.spreadsheet_gateway import SpreadsheetGateway
from order_sheets.core.config import settings
from order_sheets.infrastructure.external.google_sheets import GoogleServiceAccountAuth, GoogleSheetsClient
from order_sheets.shared.utils.sheet_title_lock import SheetTitleLockManager


@lru_cache(maxsize=1)
def get_google_auth() -> GoogleServiceAccountAuth:
    """Proveedor de access tokens de la cuenta de servicio."""
    return GoogleServiceAccountAuth(
        client_email=settings.GOOGLE_SERVICE_ACCOUNT_EMAIL,
        private_key=settings.google_private_key_pem,
        token_url=settings.GOOGLE_TOKEN_URL,
        scope=settings.GOOGLE_SHEETS_SCOPE,
        lifetime_s=settings.GOOGLE_TOKEN_LIFETIME_SECONDS,
        timeout_s=settings.HTTP_TIMEOUT_SECONDS,
    )


@lru_cache(maxsize=1)
def get_sheet_title_locks() -> SheetTitleLockManager:
    """Gestor de locks por titulo de pestana."""
    return SheetTitleLockManager()


def get_spreadsheet_gateway(
    auth: GoogleServiceAccountAuth = Depends(get_google_auth)
) -> SpreadsheetGateway:
    """
    Dependencia para obtener el cliente de la hoja configurada.

    Returns:
        SpreadsheetGateway: Cliente REST de Google Sheets
    """
    return GoogleSheetsClient(
        spreadsheet_id=settings.GOOGLE_SHEET_ID,
        auth=auth,
        base_url=settings.GOOGLE_SHEETS_API_URL,
        timeout_s=settings.HTTP_TIMEOUT_SECONDS,
    )
