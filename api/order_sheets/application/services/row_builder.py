"""
Construccion de la grilla (filas x columnas) de una orden.

La grilla es rectangular: fila 0 es el encabezado y cada compra ocupa una
fila. El numero de columnas de imagen depende de la compra con mas imagenes
(minimo 1), y las compras con menos imagenes se rellenan con celdas vacias.

Este modulo es puro: no hace I/O.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from order_sheets.domain.entities.order import Order, Purchase
from order_sheets.shared.constants.sheet_constants import (
    BASE_HEADERS,
    FALSE_TOKEN,
    IMAGE_HEADER,
    LINKS_SEPARATOR,
    STORAGE_PUBLIC_PATH,
    TRUE_TOKEN,
    ImageCellMode,
)

CellValue = Any
Row = List[CellValue]


@dataclass(frozen=True)
class SheetGrid:
    """Resultado de construir la grilla de una orden."""

    rows: List[Row]
    column_count: int

    @property
    def row_count(self) -> int:
        return len(self.rows)


def public_image_url(storage_base_url: str, bucket: str, storage_path: str) -> str:
    """URL publica de una imagen guardada en el storage."""
    return f"{storage_base_url.rstrip('/')}/{STORAGE_PUBLIC_PATH}/{bucket}/{storage_path}"


def image_formula(url: str) -> str:
    """Formula de Sheets que incrusta la imagen en la celda."""
    escaped = url.replace('"', '""')
    return f'=IMAGE("{escaped}")'


def build_header(max_images: int) -> Row:
    """
    Encabezado: columnas base + columnas de imagen.

    Con una sola columna de imagen se usa la etiqueta generica; con varias,
    una etiqueta numerada por posicion (1..max_images).
    """
    if max_images == 1:
        image_headers = [IMAGE_HEADER]
    else:
        image_headers = [f"{IMAGE_HEADER} {idx + 1}" for idx in range(max_images)]
    return list(BASE_HEADERS) + image_headers


def _bool_token(value: Optional[bool]) -> str:
    return TRUE_TOKEN if value else FALSE_TOKEN


def _or_empty(value: Optional[CellValue]) -> CellValue:
    return "" if value is None else value


class RowBuilder:
    """
    Transforma una Order en una SheetGrid.

    La variante de imagen (formula o URL plana) se fija por despliegue y debe
    coincidir con el modo de escritura de la grilla.
    """

    def __init__(
        self,
        *,
        storage_base_url: str,
        bucket: str,
        image_mode: ImageCellMode = ImageCellMode.FORMULA,
    ) -> None:
        self._storage_base_url = storage_base_url
        self._bucket = bucket
        self._image_mode = ImageCellMode(image_mode)

    def build(self, order: Order) -> SheetGrid:
        max_images = order.max_images
        header = build_header(max_images)
        rows = [header]
        for purchase in order.purchases:
            rows.append(self._build_purchase_row(order, purchase, max_images))
        return SheetGrid(rows=rows, column_count=len(header))

    def image_cell(self, storage_path: str) -> str:
        url = public_image_url(self._storage_base_url, self._bucket, storage_path)
        if self._image_mode == ImageCellMode.FORMULA:
            return image_formula(url)
        return url

    def _build_purchase_row(self, order: Order, purchase: Purchase, max_images: int) -> Row:
        image_cells = [
            self.image_cell(purchase.images[idx]) if idx < len(purchase.images) else ""
            for idx in range(max_images)
        ]
        return [
            order.order_name or "",
            purchase.id,
            purchase.customer_name or "",
            _or_empty(purchase.qty),
            _or_empty(purchase.price),
            purchase.pickup_point or "",
            purchase.note or "",
            _bool_token(purchase.picked_up),
            purchase.picked_up_at or "",
            _bool_token(purchase.collected),
            purchase.collected_at or "",
            LINKS_SEPARATOR.join(purchase.links),
            *image_cells,
        ]


def build_rows(
    order: Order,
    *,
    storage_base_url: str,
    bucket: str,
    image_mode: ImageCellMode = ImageCellMode.FORMULA,
) -> SheetGrid:
    """Atajo funcional sobre RowBuilder."""
    builder = RowBuilder(storage_base_url=storage_base_url, bucket=bucket, image_mode=image_mode)
    return builder.build(order)
