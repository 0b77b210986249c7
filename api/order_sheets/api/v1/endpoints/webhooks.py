"""
Endpoints de webhooks.

Recibe el evento de cambio de una orden (o de una de sus compras) y
sincroniza la orden completa a su pestana de Google Sheets.
"""
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from loguru import logger

from order_sheets.application.dto.sheet_sync_dto import SheetSyncErrorDTO, SheetSyncResultDTO
from order_sheets.application.services.payload_extractor import extract_order_id
from order_sheets.application.use_cases.sheet_sync_use_cases import SheetSyncUseCases
from order_sheets.api.v1.dependencies.use_case_deps import get_sheet_sync_use_cases
from order_sheets.shared.exceptions.domain import InvalidRequestException


router = APIRouter(prefix="/webhooks", tags=["Webhooks"])


async def _read_payload(request: Request) -> Any:
    """Lee el cuerpo JSON; un cuerpo vacio o invalido es un request invalido."""
    try:
        return await request.json()
    except ValueError:
        raise InvalidRequestException("Request body must be valid JSON")


@router.post(
    "/sync-sheet",
    response_model=SheetSyncResultDTO,
    status_code=status.HTTP_200_OK,
    summary="Sincronizar una orden a Google Sheets",
    responses={
        400: {"model": SheetSyncErrorDTO},
        404: {"model": SheetSyncErrorDTO},
        502: {"model": SheetSyncErrorDTO},
        503: {"model": SheetSyncErrorDTO},
    },
)
async def sync_sheet(
    request: Request,
    use_cases: SheetSyncUseCases = Depends(get_sheet_sync_use_cases),
) -> SheetSyncResultDTO:
    """
    Sincroniza la orden indicada en el payload.

    La clave se busca en `order_id`, `orderId` o `record.order_id` (gana la
    primera no vacia). La pasada es sincronica: la respuesta llega cuando la
    hoja ya fue escrita y formateada.
    """
    payload = await _read_payload(request)
    order_id = extract_order_id(payload)
    logger.info(f"Webhook sync-sheet recibido para orden {order_id}")
    return await use_cases.sync(order_id)
