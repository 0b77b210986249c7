"""
Excepciones de la aplicacion.
"""
from order_sheets.shared.exceptions.base import AppException
from order_sheets.shared.exceptions.domain import (
    DomainException,
    InvalidRequestException,
    RecordNotFoundException,
)
from order_sheets.shared.exceptions.upstream import (
    UpstreamException,
    UpstreamAuthException,
    SpreadsheetServiceException,
    RecordSourceException,
)

__all__ = [
    "AppException",
    "DomainException",
    "InvalidRequestException",
    "RecordNotFoundException",
    "UpstreamException",
    "UpstreamAuthException",
    "SpreadsheetServiceException",
    "RecordSourceException",
]
