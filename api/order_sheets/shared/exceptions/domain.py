"""
Excepciones relacionadas con la logica de dominio.
"""
from typing import Any

from order_sheets.shared.exceptions.base import AppException


class DomainException(AppException):
    """Excepcion base para errores de dominio."""

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR", details=None):
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details
        )


class InvalidRequestException(DomainException):
    """Excepcion cuando el payload del webhook no trae una clave de orden usable."""

    def __init__(self, message: str = "Missing order_id", accepted_fields: list[str] = None):
        details = {"accepted_fields": accepted_fields} if accepted_fields else None
        super().__init__(
            message=message,
            error_code="INVALID_REQUEST",
            details=details
        )


class RecordNotFoundException(DomainException):
    """Excepcion cuando la orden no existe en el origen de datos."""

    def __init__(self, entity_name: str, entity_id: Any):
        super().__init__(
            message=f"{entity_name} not found",
            error_code="RECORD_NOT_FOUND",
            details={"entity": entity_name, "id": str(entity_id)}
        )
        self.status_code = 404
