"""
Excepciones de los colaboradores externos: token de Google, API de Sheets y
origen de datos de las ordenes.

Todas responden 502: el fallo no es del emisor del webhook sino de un servicio
aguas arriba, y el emisor decide si reintenta la entrega.
"""
from order_sheets.shared.exceptions.base import AppException


class UpstreamException(AppException):
    """Excepcion base para fallos de servicios externos."""

    def __init__(self, message: str, error_code: str = "UPSTREAM_ERROR", details=None):
        super().__init__(
            message=message,
            status_code=502,
            error_code=error_code,
            details=details
        )


class UpstreamAuthException(UpstreamException):
    """Fallo al obtener el access token de la cuenta de servicio."""

    def __init__(self, message: str, details=None):
        super().__init__(
            message=message,
            error_code="UPSTREAM_AUTH_FAILURE",
            details=details
        )


class SpreadsheetServiceException(UpstreamException):
    """Respuesta no exitosa (o con forma inesperada) de la API de Sheets."""

    def __init__(self, message: str, status_code: int = None, operation: str = None):
        details = {}
        if operation:
            details["operation"] = operation
        if status_code is not None:
            details["upstream_status"] = status_code
        super().__init__(
            message=message,
            error_code="SPREADSHEET_SERVICE_FAILURE",
            details=details
        )


class RecordSourceException(UpstreamException):
    """Fallo consultando la base de datos de ordenes."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="RECORD_SOURCE_FAILURE"
        )
